"""Domain models for statistics."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DailyTotals:
    """Nutrient totals for one day."""

    day: date
    calories: float
    protein: float
    carbs: float
    fats: float
    sugars: float
    fiber: float


@dataclass(frozen=True)
class WeekSummary:
    """Rolling seven-day totals and averages."""

    daily: list[DailyTotals]
    avg_calories: int
    avg_protein: int
    avg_carbs: int
    avg_fats: int
    days_logged: int


@dataclass(frozen=True)
class NutrientProgress:
    """Consumed amount against a daily target."""

    consumed: float
    target: float
    percent: float


@dataclass(frozen=True)
class DailyProgress:
    """Dashboard view of today's intake against the profile targets."""

    remaining_calories: float
    calories: NutrientProgress
    protein: NutrientProgress
    carbs: NutrientProgress
    fats: NutrientProgress
    sugars: NutrientProgress
