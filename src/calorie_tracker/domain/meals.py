"""Domain models for meal logging."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID

from calorie_tracker.domain.nutrition import NutrientTotal


class MealType(StrEnum):
    """Kind of meal a log entry represents."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"
    OTHER = "other"


@dataclass(frozen=True)
class MealItem:
    """A logged quantity of a catalog food."""

    food_id: UUID
    quantity: float
    unit: str


@dataclass(frozen=True)
class Meal:
    """A meal with its items and cached nutrient totals.

    ``totals`` is a projection of ``items`` and is only produced by
    ``NutrientAggregator.refresh_meal``.
    """

    id: UUID
    user_id: UUID
    name: str
    consumed_at: datetime
    meal_type: MealType = MealType.OTHER
    items: tuple[MealItem, ...] = ()
    totals: NutrientTotal = field(default_factory=NutrientTotal.zero)
    is_favorite: bool = False
    notes: str | None = None
