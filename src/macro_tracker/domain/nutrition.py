"""Nutrition domain models."""

from dataclasses import dataclass
from enum import StrEnum


class Sex(StrEnum):
    """Biological sex used by the BMR equation."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(StrEnum):
    """Self-reported daily activity."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class Goal(StrEnum):
    """Body-weight goal."""

    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


class BMICategory(StrEnum):
    """Coarse BMI bands."""

    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"


@dataclass(frozen=True)
class MacroTargets:
    """Daily macronutrient targets in grams."""

    protein: int
    carbs: int
    fats: int
    sugars: int


@dataclass(frozen=True)
class NutritionTargets:
    """Energy and macro targets derived from biometric inputs."""

    bmr: float
    tdee: int
    target_calories: int
    macros: MacroTargets
