"""Meal logging service."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.meals import Meal, MealItem
from calorie_tracker.domain.nutrition import FoodCatalogEntry
from calorie_tracker.services.aggregation import NutrientAggregator

_logger = logging.getLogger(__name__)


class MealNotFoundError(LookupError):
    """No meal is stored under the id."""

    def __init__(self, meal_id: UUID) -> None:
        super().__init__(f"Meal not found: {meal_id}")
        self.meal_id = meal_id


class FoodCatalog(Protocol):
    """Read interface for catalog foods."""

    def get_food(self, food_id: UUID) -> FoodCatalogEntry | None:
        """Return a catalog entry by id, if present."""


class MealRepository(Protocol):
    """Persistence interface for meals and their items."""

    def save_meal(self, meal: Meal) -> None:
        """Insert or replace a meal together with its items and totals."""

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a meal by id."""

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal and the items it owns."""


@dataclass
class MealService:
    """Service that recomputes meal totals right before persisting."""

    catalog: FoodCatalog
    repository: MealRepository
    aggregator: NutrientAggregator = field(default_factory=NutrientAggregator)

    def save_meal(self, meal: Meal) -> Meal:
        """Recompute the meal's totals from its items and persist it."""
        refreshed = self.aggregator.refresh_meal(meal, self.catalog.get_food)
        self.repository.save_meal(refreshed)
        _logger.debug(
            "Saved meal: meal_id=%s items=%s calories=%.1f",
            refreshed.id,
            len(refreshed.items),
            refreshed.totals.calories,
        )
        return refreshed

    def update_items(self, meal_id: UUID, items: Iterable[MealItem]) -> Meal:
        """Replace a meal's items and store the refreshed totals."""
        current = self.get_meal(meal_id)
        return self.save_meal(replace(current, items=tuple(items)))

    def get_meal(self, meal_id: UUID) -> Meal:
        """Return a stored meal."""
        meal = self.repository.get_meal(meal_id)
        if meal is None:
            raise MealNotFoundError(meal_id)
        return meal

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal and its items."""
        self.get_meal(meal_id)
        self.repository.delete_meal(meal_id)
