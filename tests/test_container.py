"""Tests for container wiring."""

from macro_tracker.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)
    assert container.account_service is not None
    assert container.profile_service.weight_log_service is container.weight_log_service
    assert container.stats_service.repository is container.food_log_service.repository
