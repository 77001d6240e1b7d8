"""Domain models for statistics."""

from dataclasses import dataclass
from datetime import date

from calorie_tracker.domain.nutrition import NutrientTotal
from calorie_tracker.domain.profiles import NutritionGoals


@dataclass(frozen=True)
class DailyStat:
    """Totals for one calendar day and what is left against the goals."""

    day: date
    totals: NutrientTotal
    goals: NutritionGoals
    remaining: NutrientTotal
    meal_count: int = 0

    def progress(self) -> dict[str, float]:
        """Return consumed/goal ratios per nutrient; zero goals report 0.0."""
        pairs = {
            "calories": (self.totals.calories, self.goals.calories),
            "protein_g": (self.totals.protein_g, self.goals.protein_g),
            "carbs_g": (self.totals.carbs_g, self.goals.carbs_g),
            "fat_g": (self.totals.fat_g, self.goals.fat_g),
        }
        return {
            name: consumed / goal if goal > 0 else 0.0
            for name, (consumed, goal) in pairs.items()
        }


@dataclass(frozen=True)
class PeriodSummary:
    """Aggregated totals for a period."""

    daily: list[DailyStat]
    avg_calories: float
    avg_protein_g: float
    avg_carbs_g: float
    avg_fat_g: float
