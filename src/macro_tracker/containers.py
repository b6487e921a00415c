"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from macro_tracker.adapters.supabase_account_repository import (
    SupabaseAccountRepository,
)
from macro_tracker.adapters.supabase_food_log_repository import (
    SupabaseFoodLogRepository,
)
from macro_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from macro_tracker.adapters.supabase_weight_log_repository import (
    SupabaseWeightLogRepository,
)
from macro_tracker.config import Settings
from macro_tracker.services.accounts import AccountService
from macro_tracker.services.food_logs import FoodLogService
from macro_tracker.services.profiles import ProfileService
from macro_tracker.services.stats import StatsService
from macro_tracker.services.weights import WeightLogService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    account_service: AccountService
    profile_service: ProfileService
    food_log_service: FoodLogService
    weight_log_service: WeightLogService
    stats_service: StatsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    food_log_repository = SupabaseFoodLogRepository(supabase_client)
    food_log_service = FoodLogService(food_log_repository)
    weight_log_service = WeightLogService(SupabaseWeightLogRepository(supabase_client))
    profile_service = ProfileService(
        repository=SupabaseProfileRepository(supabase_client),
        weight_log_service=weight_log_service,
        food_log_service=food_log_service,
    )

    return AppContainer(
        settings=resolved_settings,
        account_service=AccountService(SupabaseAccountRepository(supabase_client)),
        profile_service=profile_service,
        food_log_service=food_log_service,
        weight_log_service=weight_log_service,
        stats_service=StatsService(food_log_repository),
    )
