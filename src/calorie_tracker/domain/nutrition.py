"""Nutrition domain models."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from uuid import UUID


@dataclass(frozen=True)
class NutrientTotal:
    """Energy and macronutrient vector, optionally with secondary nutrients."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    secondary: Mapping[str, float] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "secondary", MappingProxyType(dict(self.secondary)))

    @classmethod
    def zero(cls) -> "NutrientTotal":
        """Return an all-zero nutrient vector."""
        return cls(calories=0.0, protein_g=0.0, carbs_g=0.0, fat_g=0.0)

    def scaled(self, factor: float) -> "NutrientTotal":
        """Return the vector multiplied component-wise by factor."""
        return NutrientTotal(
            calories=self.calories * factor,
            protein_g=self.protein_g * factor,
            carbs_g=self.carbs_g * factor,
            fat_g=self.fat_g * factor,
            secondary={key: value * factor for key, value in self.secondary.items()},
        )

    def __add__(self, other: "NutrientTotal") -> "NutrientTotal":
        if not isinstance(other, NutrientTotal):
            return NotImplemented
        secondary = dict(self.secondary)
        for key, value in other.secondary.items():
            secondary[key] = secondary.get(key, 0.0) + value
        return NutrientTotal(
            calories=self.calories + other.calories,
            protein_g=self.protein_g + other.protein_g,
            carbs_g=self.carbs_g + other.carbs_g,
            fat_g=self.fat_g + other.fat_g,
            secondary=secondary,
        )


@dataclass(frozen=True)
class ServingSize:
    """Canonical quantity a food's nutrient vector refers to."""

    amount: float
    unit: str


@dataclass(frozen=True)
class FoodCatalogEntry:
    """Catalog food with per-serving nutrients.

    Entries referenced by a logged meal item are never edited in place; an edit
    produces a new entry with a bumped ``version``.
    """

    id: UUID
    name: str
    serving: ServingSize
    nutrients: NutrientTotal
    brand: str | None = None
    barcode: str | None = None
    portion_weights: Mapping[str, float] = field(default_factory=dict, hash=False)
    density_g_per_ml: float | None = None
    version: int = 1

    def __post_init__(self) -> None:
        weights = MappingProxyType(dict(self.portion_weights))
        object.__setattr__(self, "portion_weights", weights)
