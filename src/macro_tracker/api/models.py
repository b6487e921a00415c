"""Pydantic models for API request payloads."""

from datetime import date

from pydantic import BaseModel, Field

from macro_tracker.domain.logs import FoodLogInput, FoodLogSource
from macro_tracker.domain.nutrition import ActivityLevel, Goal, Sex
from macro_tracker.domain.profiles import (
    DEFAULT_TRACKED_MACROS,
    ProfileInput,
    TrackedMacro,
    Units,
)

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class TargetsRequest(BaseModel):
    """Metric biometrics for a one-off target calculation."""

    weight: float = Field(gt=0)
    height: float = Field(gt=0)
    age: int = Field(gt=0)
    sex: Sex
    activity_level: ActivityLevel
    goal: Goal


class BMIRequest(BaseModel):
    """Weight in kilograms and height in centimeters."""

    weight: float = Field(gt=0)
    height: float = Field(gt=0)


class ProjectionRequest(BaseModel):
    """Starting weight and horizon for a projection."""

    current_weight: float = Field(gt=0)
    goal: Goal
    weeks: float = Field(ge=0)


class SignupRequest(BaseModel):
    """Signup payload."""

    email: str = Field(pattern=EMAIL_PATTERN)
    password: str = Field(min_length=6)
    date_of_birth: str


class LoginRequest(BaseModel):
    """Login payload."""

    email: str = Field(pattern=EMAIL_PATTERN)
    password: str


class ProfileRequest(BaseModel):
    """Onboarding answers."""

    age: int = Field(gt=0)
    height: float = Field(gt=0)
    weight: float = Field(gt=0)
    sex: Sex
    activity_level: ActivityLevel
    goal: Goal
    units: Units = Units.METRIC
    region: str = ""
    tracked_macros: list[TrackedMacro] = Field(
        default_factory=lambda: list(DEFAULT_TRACKED_MACROS)
    )

    def to_input(self) -> ProfileInput:
        """Convert to the domain input."""
        return ProfileInput(
            age=self.age,
            height=self.height,
            weight=self.weight,
            sex=self.sex,
            activity_level=self.activity_level,
            goal=self.goal,
            units=self.units,
            region=self.region,
            tracked_macros=tuple(self.tracked_macros),
        )


class FoodLogRequest(BaseModel):
    """A meal to log."""

    description: str
    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fats: float = Field(ge=0)
    sugars: float = Field(default=0, ge=0)
    fiber: float | None = Field(default=None, ge=0)
    source: FoodLogSource = FoodLogSource.MANUAL

    def to_input(self) -> FoodLogInput:
        """Convert to the domain input."""
        return FoodLogInput(
            description=self.description,
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fats=self.fats,
            sugars=self.sugars,
            fiber=self.fiber,
            source=self.source,
        )


class WeightRequest(BaseModel):
    """Body weight in kilograms, optionally for a specific day."""

    weight_kg: float = Field(gt=0)
    day: date | None = None
