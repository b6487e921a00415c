"""Body weight history service."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.logs import WeightLog, WeightTrend
from macro_tracker.domain.profiles import UserProfile
from macro_tracker.services.calculations import calculate_projected_weight

TREND_WINDOW = 7
MIN_TREND_ENTRIES = 2


class WeightLogRepository(Protocol):
    """Persistence interface for weight logs."""

    def upsert_weight(self, user_id: UUID, day: date, weight_kg: float) -> None:
        """Store the weight for a day, replacing any existing value."""

    def list_weights(self, user_id: UUID) -> list[WeightLog]:
        """Return all weight logs ordered by day ascending."""

    def delete_weights(self, user_id: UUID) -> None:
        """Remove every weight log for the user."""


@dataclass
class WeightLogService:
    """Service for logging and summarizing body weight."""

    repository: WeightLogRepository

    def log_weight(
        self, user_id: UUID, weight_kg: float, day: date | None = None
    ) -> list[WeightLog]:
        """Record one weight per day and return the updated history."""
        self.repository.upsert_weight(user_id, day or _today(), weight_kg)
        return self.list_weights(user_id)

    def list_weights(self, user_id: UUID) -> list[WeightLog]:
        """Return weight history sorted by day."""
        return sorted(self.repository.list_weights(user_id), key=lambda log: log.day)

    def latest_weight(self, user_id: UUID) -> float | None:
        """Return the most recent logged weight, if any."""
        history = self.list_weights(user_id)
        return history[-1].weight_kg if history else None

    def get_trend(self, user_id: UUID, profile: UserProfile | None) -> WeightTrend:
        """Summarize the last few entries, falling back to the profile weight."""
        recent = self.list_weights(user_id)[-TREND_WINDOW:]
        if recent:
            current = recent[-1].weight_kg
        elif profile is not None:
            current = profile.weight_kg
        else:
            current = None
        if len(recent) >= MIN_TREND_ENTRIES:
            change = recent[-1].weight_kg - recent[0].weight_kg
        else:
            change = 0.0
        return WeightTrend(current_kg=current, change_kg=change, entries=recent)

    def project(self, user_id: UUID, profile: UserProfile, weeks: float) -> float:
        """Project the current weight forward at the profile goal's rate."""
        current = self.latest_weight(user_id)
        if current is None:
            current = profile.weight_kg
        return calculate_projected_weight(current, profile.goal, weeks)

    def clear(self, user_id: UUID) -> None:
        """Delete the user's weight history."""
        self.repository.delete_weights(user_id)


def _today() -> date:
    return datetime.now(tz=UTC).date()
