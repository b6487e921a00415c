"""Domain models for food and weight logs."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID


class FoodLogSource(StrEnum):
    """How a food entry was captured."""

    MANUAL = "manual"
    AI_TEXT = "ai_text"
    AI_IMAGE = "ai_image"


@dataclass(frozen=True)
class FoodLogInput:
    """Nutrition values for a meal before it is stored."""

    description: str
    calories: float
    protein: float
    carbs: float
    fats: float
    sugars: float
    fiber: float | None = None
    source: FoodLogSource = FoodLogSource.MANUAL


@dataclass(frozen=True)
class FoodLog:
    """A logged meal."""

    id: UUID
    user_id: UUID
    logged_at: datetime
    description: str
    calories: float
    protein: float
    carbs: float
    fats: float
    sugars: float
    fiber: float | None
    source: FoodLogSource


@dataclass(frozen=True)
class WeightLog:
    """Body weight for a calendar day, in kilograms."""

    day: date
    weight_kg: float


@dataclass(frozen=True)
class WeightTrend:
    """Recent weight history summary."""

    current_kg: float | None
    change_kg: float
    entries: list[WeightLog]
