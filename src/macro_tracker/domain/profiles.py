"""Domain models for user profiles."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID

from macro_tracker.domain.nutrition import ActivityLevel, BMICategory, Goal, Sex


class Units(StrEnum):
    """Measurement system the user entered their body metrics in."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class TrackedMacro(StrEnum):
    """Nutrients a user chose to follow on the dashboard."""

    PROTEIN = "protein"
    CARBS = "carbs"
    FATS = "fats"
    SUGARS = "sugars"
    FIBER = "fiber"
    SODIUM = "sodium"


DEFAULT_TRACKED_MACROS = (TrackedMacro.PROTEIN, TrackedMacro.CARBS, TrackedMacro.FATS)


@dataclass(frozen=True)
class ProfileInput:
    """Onboarding answers before any targets are derived.

    ``weight`` and ``height`` are in the units named by ``units``: kilograms
    and centimeters for metric, pounds and inches for imperial.
    """

    age: int
    height: float
    weight: float
    sex: Sex
    activity_level: ActivityLevel
    goal: Goal
    units: Units = Units.METRIC
    region: str = ""
    tracked_macros: tuple[TrackedMacro, ...] = DEFAULT_TRACKED_MACROS


@dataclass(frozen=True)
class UserProfile:
    """Stored profile with derived daily targets."""

    user_id: UUID
    age: int
    height: float
    weight: float
    sex: Sex
    activity_level: ActivityLevel
    goal: Goal
    units: Units
    region: str
    tracked_macros: tuple[TrackedMacro, ...]
    tdee: int
    target_calories: int
    target_protein: int
    target_carbs: int
    target_fats: int
    target_sugars: int
    created_at: datetime | None = field(default=None, compare=False)

    @property
    def weight_kg(self) -> float:
        """Profile weight converted to kilograms."""
        return to_kilograms(self.weight, self.units)

    @property
    def height_cm(self) -> float:
        """Profile height converted to centimeters."""
        return to_centimeters(self.height, self.units)


@dataclass(frozen=True)
class BodyMetrics:
    """BMI snapshot for a profile."""

    weight_kg: float
    height_cm: float
    bmi: float
    category: BMICategory


KG_PER_LB = 0.453592
CM_PER_INCH = 2.54


def to_kilograms(weight: float, units: Units | str) -> float:
    """Convert a weight in the given units to kilograms."""
    if Units(units) is Units.IMPERIAL:
        return weight * KG_PER_LB
    return weight


def to_centimeters(height: float, units: Units | str) -> float:
    """Convert a height in the given units to centimeters."""
    if Units(units) is Units.IMPERIAL:
        return height * CM_PER_INCH
    return height
