"""Nutrient aggregation for meals and days."""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace
from uuid import UUID

from calorie_tracker.domain.meals import Meal, MealItem
from calorie_tracker.domain.nutrition import FoodCatalogEntry, NutrientTotal
from calorie_tracker.errors import UnknownFoodError
from calorie_tracker.services.units import UnitConverter

FoodLookup = Callable[[UUID], FoodCatalogEntry | None]

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NutrientAggregator:
    """Sums per-item contributions into meal totals and meals into days."""

    converter: UnitConverter = field(default_factory=UnitConverter)

    def item_contribution(self, item: MealItem, catalog: FoodLookup) -> NutrientTotal:
        """Return the nutrients a single item contributes to its meal."""
        entry = catalog(item.food_id)
        if entry is None:
            raise UnknownFoodError(item.food_id)
        multiplier = self.converter.convert_item(item, entry)
        return entry.nutrients.scaled(multiplier)

    def aggregate_meal(
        self, items: Iterable[MealItem], catalog: FoodLookup
    ) -> NutrientTotal:
        """Return the meal total; any invalid item aborts the whole sum."""
        total = NutrientTotal.zero()
        count = 0
        for item in items:
            total = total + self.item_contribution(item, catalog)
            count += 1
        _logger.debug("Aggregated meal: items=%s calories=%.1f", count, total.calories)
        return total

    def aggregate_day(self, meals: Iterable[Meal]) -> NutrientTotal:
        """Sum the cached totals of meals without re-expanding their items."""
        total = NutrientTotal.zero()
        for meal in meals:
            total = total + meal.totals
        return total

    def refresh_meal(self, meal: Meal, catalog: FoodLookup) -> Meal:
        """Return a copy of the meal with totals recomputed from its items."""
        return replace(meal, totals=self.aggregate_meal(meal.items, catalog))
