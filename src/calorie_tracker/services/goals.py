"""Daily energy and macro goal calculation."""

import logging
import math
import warnings
from dataclasses import dataclass, field
from datetime import date
from typing import assert_never

from calorie_tracker.config import NutritionPolicy
from calorie_tracker.domain.profiles import (
    Biometrics,
    GoalDirection,
    NutritionGoals,
    Sex,
)
from calorie_tracker.errors import GoalUnderflowWarning, InvalidQuantityError
from calorie_tracker.services.units import validate_quantity

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GoalCalculator:
    """Derives energy and macro targets from a biometric profile."""

    policy: NutritionPolicy = field(default_factory=NutritionPolicy)

    def basal_metabolic_rate(
        self, biometrics: Biometrics, *, on: date | None = None
    ) -> float:
        """Return the Mifflin-St Jeor basal estimate in kcal/day."""
        weight = validate_quantity(biometrics.weight_kg, label="weight_kg")
        height = validate_quantity(biometrics.height_cm, label="height_cm")
        age = age_on(biometrics.date_of_birth, on or date.today())
        if age < 0:
            raise InvalidQuantityError("date_of_birth is in the future")
        return 10 * weight + 6.25 * height - 5 * age + _sex_constant(biometrics.sex)

    def baseline_expenditure(
        self, biometrics: Biometrics, *, on: date | None = None
    ) -> float:
        """Return the unrounded daily expenditure before the goal offset."""
        multiplier = self.policy.activity_multipliers[biometrics.activity_level]
        return self.basal_metabolic_rate(biometrics, on=on) * multiplier

    def compute_goals(
        self, biometrics: Biometrics, *, on: date | None = None
    ) -> NutritionGoals:
        """Return energy, protein, carbohydrate and fat targets.

        Carbohydrates take whatever energy protein and fat leave over, computed
        from unrounded values. Negative energy or carbohydrate targets are
        clamped to zero and reported with GoalUnderflowWarning. Outputs are
        rounded half up to whole kcal and grams.
        """
        policy = self.policy
        baseline = self.baseline_expenditure(biometrics, on=on)
        energy = baseline + self._goal_offset(biometrics.goal)
        if energy < 0:
            _warn_underflow(
                f"Energy goal {energy:.0f} kcal is negative; clamped to 0 kcal"
            )
            energy = 0.0

        protein_g = biometrics.weight_kg * policy.protein_g_per_kg
        fat_g = energy * policy.fat_energy_fraction / policy.fat_kcal_per_g
        remaining_kcal = (
            energy
            - protein_g * policy.protein_kcal_per_g
            - fat_g * policy.fat_kcal_per_g
        )
        carbs_g = remaining_kcal / policy.carbs_kcal_per_g
        clamped = carbs_g < 0
        if clamped:
            _warn_underflow(
                f"Energy goal {energy:.0f} kcal is too low for the protein and "
                "fat allocation; carbohydrate goal clamped to 0 g"
            )
            carbs_g = 0.0

        return NutritionGoals(
            calories=round_half_up(energy),
            protein_g=round_half_up(protein_g),
            carbs_g=round_half_up(carbs_g),
            fat_g=round_half_up(fat_g),
            baseline_calories=baseline,
            carbs_clamped=clamped,
        )

    def _goal_offset(self, goal: GoalDirection) -> float:
        match goal:
            case GoalDirection.LOSE:
                return -self.policy.energy_deficit_kcal
            case GoalDirection.GAIN:
                return self.policy.energy_surplus_kcal
            case GoalDirection.MAINTAIN:
                return 0.0
            case _:
                assert_never(goal)


def age_on(date_of_birth: date, on: date) -> int:
    """Return age in whole years at the given date."""
    had_birthday = (on.month, on.day) >= (date_of_birth.month, date_of_birth.day)
    return on.year - date_of_birth.year - (0 if had_birthday else 1)


def _sex_constant(sex: Sex) -> float:
    match sex:
        case Sex.MALE:
            return 5.0
        case Sex.FEMALE:
            return -161.0
        case Sex.OTHER:
            return -78.0
        case _:
            assert_never(sex)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with ties going up."""
    return math.floor(value + 0.5)


def _warn_underflow(message: str) -> None:
    _logger.warning("Goal underflow: %s", message)
    warnings.warn(GoalUnderflowWarning(message), stacklevel=3)
