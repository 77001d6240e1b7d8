"""Domain models for user profiles and nutrition goals."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from uuid import UUID


class Sex(StrEnum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ActivityLevel(StrEnum):
    """Activity levels, ordered from least to most active."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class GoalDirection(StrEnum):
    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


@dataclass(frozen=True)
class Biometrics:
    """Inputs the goal calculation depends on."""

    sex: Sex
    date_of_birth: date
    height_cm: float
    weight_kg: float
    activity_level: ActivityLevel = ActivityLevel.MODERATE
    goal: GoalDirection = GoalDirection.MAINTAIN


@dataclass(frozen=True)
class NutritionGoals:
    """Daily energy and macro targets, rounded to whole kcal and grams."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    baseline_calories: float
    carbs_clamped: bool = False


@dataclass(frozen=True)
class UserProfile:
    """Biometric profile with its derived goal snapshot."""

    id: UUID
    biometrics: Biometrics
    goals: NutritionGoals
