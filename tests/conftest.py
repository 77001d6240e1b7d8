"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID, uuid4

import pytest

from calorie_tracker.config import Settings
from calorie_tracker.domain.meals import Meal
from calorie_tracker.domain.nutrition import (
    FoodCatalogEntry,
    NutrientTotal,
    ServingSize,
)
from calorie_tracker.domain.profiles import (
    ActivityLevel,
    Biometrics,
    GoalDirection,
    NutritionGoals,
    Sex,
    UserProfile,
)
from calorie_tracker.services.meals import FoodCatalog, MealRepository
from calorie_tracker.services.profiles import ProfileRepository
from calorie_tracker.services.stats import StatsRepository


@dataclass
class InMemoryFoodCatalog(FoodCatalog):
    """In-memory food catalog for tests."""

    foods: dict[UUID, FoodCatalogEntry] = field(default_factory=dict)

    def add(self, entry: FoodCatalogEntry) -> FoodCatalogEntry:
        self.foods[entry.id] = entry
        return entry

    def get_food(self, food_id: UUID) -> FoodCatalogEntry | None:
        return self.foods.get(food_id)


@dataclass
class InMemoryMealRepository(MealRepository, StatsRepository):
    """In-memory meal repository for tests."""

    meals: dict[UUID, Meal] = field(default_factory=dict)

    def save_meal(self, meal: Meal) -> None:
        self.meals[meal.id] = meal

    def get_meal(self, meal_id: UUID) -> Meal | None:
        return self.meals.get(meal_id)

    def delete_meal(self, meal_id: UUID) -> None:
        self.meals.pop(meal_id, None)

    def list_meals(self, user_id: UUID, start: datetime, end: datetime) -> list[Meal]:
        return [
            meal
            for meal in self.meals.values()
            if meal.user_id == user_id and start <= meal.consumed_at < end
        ]


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[UUID, UserProfile] = field(default_factory=dict)
    saves: int = 0

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        return self.profiles.get(user_id)

    def save_profile(self, profile: UserProfile) -> None:
        self.profiles[profile.id] = profile
        self.saves += 1


def make_food(  # noqa: PLR0913
    name: str = "Yogurt",
    *,
    amount: float = 100,
    unit: str = "g",
    calories: float = 50,
    protein_g: float = 4,
    carbs_g: float = 6,
    fat_g: float = 1,
    **extra: object,
) -> FoodCatalogEntry:
    return FoodCatalogEntry(
        id=uuid4(),
        name=name,
        serving=ServingSize(amount=amount, unit=unit),
        nutrients=NutrientTotal(
            calories=calories, protein_g=protein_g, carbs_g=carbs_g, fat_g=fat_g
        ),
        **extra,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(log_level="DEBUG", default_timezone="UTC")


@pytest.fixture
def catalog() -> InMemoryFoodCatalog:
    return InMemoryFoodCatalog()


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def biometrics() -> Biometrics:
    return Biometrics(
        sex=Sex.MALE,
        date_of_birth=date(1990, 6, 15),
        height_cm=180,
        weight_kg=70,
        activity_level=ActivityLevel.MODERATE,
        goal=GoalDirection.LOSE,
    )


@pytest.fixture
def goals() -> NutritionGoals:
    return NutritionGoals(
        calories=2000,
        protein_g=140,
        carbs_g=200,
        fat_g=56,
        baseline_calories=2500.0,
    )
