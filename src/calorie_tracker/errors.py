"""Errors raised by the nutrition engine."""


class NutritionError(ValueError):
    """Base class for input errors that abort a computation."""


class InvalidQuantityError(NutritionError):
    """A quantity is negative, non-finite, or not a number."""


class UnsupportedUnitError(NutritionError):
    """A unit has no conversion path to a food's serving unit."""

    def __init__(self, unit: str, serving_unit: str) -> None:
        super().__init__(f"Cannot convert {unit!r} to serving unit {serving_unit!r}")
        self.unit = unit
        self.serving_unit = serving_unit


class UnknownFoodError(NutritionError, LookupError):
    """A meal item references a food missing from the catalog."""

    def __init__(self, food_id: object) -> None:
        super().__init__(f"Unknown food: {food_id}")
        self.food_id = food_id


class GoalUnderflowWarning(UserWarning):
    """Carbohydrate target was clamped to zero by inconsistent inputs."""
