"""Conversion of logged quantities into serving multipliers."""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from numbers import Real
from typing import assert_never

from calorie_tracker.domain.meals import MealItem
from calorie_tracker.domain.nutrition import FoodCatalogEntry, ServingSize
from calorie_tracker.errors import InvalidQuantityError, UnsupportedUnitError


class UnitFamily(StrEnum):
    MASS = "mass"
    VOLUME = "volume"


@dataclass(frozen=True)
class UnitDefinition:
    """A measurable unit and its factor to the family base (g or ml)."""

    symbol: str
    family: UnitFamily
    to_base: float


_DEFINITIONS = (
    UnitDefinition("mg", UnitFamily.MASS, 0.001),
    UnitDefinition("g", UnitFamily.MASS, 1.0),
    UnitDefinition("kg", UnitFamily.MASS, 1000.0),
    UnitDefinition("oz", UnitFamily.MASS, 28.349523125),
    UnitDefinition("lb", UnitFamily.MASS, 453.59237),
    UnitDefinition("ml", UnitFamily.VOLUME, 1.0),
    UnitDefinition("cl", UnitFamily.VOLUME, 10.0),
    UnitDefinition("dl", UnitFamily.VOLUME, 100.0),
    UnitDefinition("l", UnitFamily.VOLUME, 1000.0),
    UnitDefinition("tsp", UnitFamily.VOLUME, 4.92892159375),
    UnitDefinition("tbsp", UnitFamily.VOLUME, 14.78676478125),
    UnitDefinition("cup", UnitFamily.VOLUME, 236.5882365),
    UnitDefinition("fl_oz", UnitFamily.VOLUME, 29.5735295625),
)

UNITS = {definition.symbol: definition for definition in _DEFINITIONS}

_ALIASES = {
    "milligram": "mg",
    "milligrams": "mg",
    "gram": "g",
    "grams": "g",
    "gr": "g",
    "kilogram": "kg",
    "kilograms": "kg",
    "kgs": "kg",
    "ounce": "oz",
    "ounces": "oz",
    "pound": "lb",
    "pounds": "lb",
    "lbs": "lb",
    "milliliter": "ml",
    "milliliters": "ml",
    "millilitre": "ml",
    "millilitres": "ml",
    "centiliter": "cl",
    "centilitre": "cl",
    "deciliter": "dl",
    "decilitre": "dl",
    "liter": "l",
    "liters": "l",
    "litre": "l",
    "litres": "l",
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    "tablespoon": "tbsp",
    "tablespoons": "tbsp",
    "cups": "cup",
    "fl oz": "fl_oz",
    "fluid ounce": "fl_oz",
    "fluid ounces": "fl_oz",
    "portion": "serving",
    "portions": "serving",
    "servings": "serving",
}

SERVING_UNIT = "serving"


def normalize_unit(unit: str) -> str:
    """Return the canonical spelling of a unit string."""
    cleaned = " ".join(unit.strip().lower().split())
    return _ALIASES.get(cleaned, cleaned)


def validate_quantity(quantity: object, *, label: str = "quantity") -> float:
    """Return quantity as a float, rejecting negative or non-finite input."""
    if isinstance(quantity, bool) or not isinstance(quantity, Real):
        raise InvalidQuantityError(f"{label} must be a number, got {quantity!r}")
    value = float(quantity)
    if not math.isfinite(value) or value < 0:
        raise InvalidQuantityError(f"{label} must be finite and >= 0, got {value}")
    return value


@dataclass(frozen=True)
class UnitConverter:
    """Turns a logged quantity and unit into a multiple of a food's serving."""

    def convert(
        self,
        quantity: float,
        unit: str,
        serving: ServingSize,
        *,
        portion_weights: Mapping[str, float] | None = None,
        density_g_per_ml: float | None = None,
    ) -> float:
        """Return how many servings ``quantity`` ``unit`` represents.

        Raises InvalidQuantityError for bad quantities or serving amounts and
        UnsupportedUnitError when no conversion path exists.
        """
        value = validate_quantity(quantity)
        serving_amount = validate_quantity(serving.amount, label="serving amount")
        if serving_amount == 0:
            raise InvalidQuantityError("serving amount must be greater than zero")

        item_unit = normalize_unit(unit)
        serving_unit = normalize_unit(serving.unit)
        if item_unit == serving_unit:
            multiplier = value / serving_amount
        elif item_unit == SERVING_UNIT:
            multiplier = value
        else:
            weights = {
                normalize_unit(name): grams
                for name, grams in (portion_weights or {}).items()
            }
            item_base = _to_base(value, item_unit, weights)
            serving_base = _to_base(serving_amount, serving_unit, weights)
            if item_base is None or serving_base is None:
                raise UnsupportedUnitError(unit, serving.unit)
            item_amount = _in_family(
                item_base, serving_base[0], density_g_per_ml, unit, serving.unit
            )
            multiplier = item_amount / serving_base[1]

        if not math.isfinite(multiplier):
            raise InvalidQuantityError(f"multiplier is not finite for {quantity!r}")
        return multiplier

    def convert_item(self, item: MealItem, entry: FoodCatalogEntry) -> float:
        """Return the serving multiplier of a meal item against its food."""
        return self.convert(
            item.quantity,
            item.unit,
            entry.serving,
            portion_weights=entry.portion_weights,
            density_g_per_ml=entry.density_g_per_ml,
        )


def _to_base(
    amount: float, unit: str, portion_weights: Mapping[str, float]
) -> tuple[UnitFamily, float] | None:
    definition = UNITS.get(unit)
    if definition is not None:
        return definition.family, amount * definition.to_base
    grams = portion_weights.get(unit)
    if grams is not None and math.isfinite(grams) and grams > 0:
        return UnitFamily.MASS, amount * grams
    return None


def _in_family(
    base: tuple[UnitFamily, float],
    target: UnitFamily,
    density_g_per_ml: float | None,
    unit: str,
    serving_unit: str,
) -> float:
    family, amount = base
    if family == target:
        return amount
    if (
        density_g_per_ml is None
        or not math.isfinite(density_g_per_ml)
        or density_g_per_ml <= 0
    ):
        raise UnsupportedUnitError(unit, serving_unit)
    match target:
        case UnitFamily.MASS:
            return amount * density_g_per_ml
        case UnitFamily.VOLUME:
            return amount / density_g_per_ml
        case _:
            assert_never(target)
