"""Profile creation and lookup."""

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.nutrition import ActivityLevel, Goal, Sex
from macro_tracker.domain.profiles import (
    BodyMetrics,
    ProfileInput,
    TrackedMacro,
    Units,
    UserProfile,
    to_centimeters,
    to_kilograms,
)
from macro_tracker.errors import InvalidProfileError, ProfileNotFoundError
from macro_tracker.services.calculations import (
    calculate_bmi,
    compute_targets,
    get_bmi_category,
)
from macro_tracker.services.food_logs import FoodLogService
from macro_tracker.services.weights import WeightLogService

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the user's profile, if one exists."""

    def save_profile(self, profile: UserProfile) -> None:
        """Insert or replace the user's profile."""

    def delete_profile(self, user_id: UUID) -> None:
        """Remove the user's profile."""


@dataclass
class ProfileService:
    """Turns onboarding answers into a stored profile with targets."""

    repository: ProfileRepository
    weight_log_service: WeightLogService
    food_log_service: FoodLogService

    def create_profile(
        self, user_id: UUID, data: ProfileInput, today: date | None = None
    ) -> UserProfile:
        """Derive targets from the answers, store them and seed weight history."""
        _validate(data)
        weight_kg = to_kilograms(data.weight, data.units)
        height_cm = to_centimeters(data.height, data.units)
        targets = compute_targets(
            weight=weight_kg,
            height=height_cm,
            age=data.age,
            sex=data.sex,
            activity_level=data.activity_level,
            goal=data.goal,
        )
        profile = UserProfile(
            user_id=user_id,
            age=data.age,
            height=data.height,
            weight=data.weight,
            sex=Sex(data.sex),
            activity_level=ActivityLevel(data.activity_level),
            goal=Goal(data.goal),
            units=Units(data.units),
            region=data.region,
            tracked_macros=tuple(TrackedMacro(value) for value in data.tracked_macros),
            tdee=targets.tdee,
            target_calories=targets.target_calories,
            target_protein=targets.macros.protein,
            target_carbs=targets.macros.carbs,
            target_fats=targets.macros.fats,
            target_sugars=targets.macros.sugars,
            created_at=datetime.now(tz=UTC),
        )
        self.repository.save_profile(profile)
        self.weight_log_service.clear(user_id)
        self.weight_log_service.log_weight(user_id, weight_kg, day=today)
        _logger.info(
            "Profile created: user_id=%s goal=%s target_calories=%s",
            user_id,
            profile.goal,
            profile.target_calories,
        )
        return profile

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the stored profile."""
        return self.repository.get_profile(user_id)

    def require_profile(self, user_id: UUID) -> UserProfile:
        """Return the stored profile or raise if onboarding is unfinished."""
        profile = self.repository.get_profile(user_id)
        if profile is None:
            raise ProfileNotFoundError(f"No profile for user {user_id}")
        return profile

    def get_body_metrics(self, user_id: UUID) -> BodyMetrics | None:
        """Return BMI for the latest known weight."""
        profile = self.repository.get_profile(user_id)
        if profile is None:
            return None
        weight_kg = self.weight_log_service.latest_weight(user_id)
        if weight_kg is None:
            weight_kg = profile.weight_kg
        bmi = calculate_bmi(weight_kg, profile.height_cm)
        return BodyMetrics(
            weight_kg=weight_kg,
            height_cm=profile.height_cm,
            bmi=bmi,
            category=get_bmi_category(bmi),
        )

    def reset(self, user_id: UUID) -> None:
        """Drop the profile together with all food and weight history."""
        self.repository.delete_profile(user_id)
        self.food_log_service.clear(user_id)
        self.weight_log_service.clear(user_id)
        _logger.info("Profile reset: user_id=%s", user_id)


def _validate(data: ProfileInput) -> None:
    if data.age <= 0:
        raise InvalidProfileError("Age must be positive")
    if data.height <= 0:
        raise InvalidProfileError("Height must be positive")
    if data.weight <= 0:
        raise InvalidProfileError("Weight must be positive")
