"""Dependency container wiring for the application."""

from dataclasses import dataclass

from calorie_tracker.app_logging import configure_logging
from calorie_tracker.config import Settings
from calorie_tracker.services.aggregation import NutrientAggregator
from calorie_tracker.services.goals import GoalCalculator
from calorie_tracker.services.meals import FoodCatalog, MealRepository, MealService
from calorie_tracker.services.profiles import ProfileRepository, ProfileService
from calorie_tracker.services.stats import (
    StatsAggregator,
    StatsRepository,
    StatsService,
)
from calorie_tracker.services.units import UnitConverter


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    unit_converter: UnitConverter
    nutrient_aggregator: NutrientAggregator
    goal_calculator: GoalCalculator
    stats_aggregator: StatsAggregator
    meal_service: MealService
    profile_service: ProfileService
    stats_service: StatsService


def build_container(
    *,
    food_catalog: FoodCatalog,
    meal_repository: MealRepository,
    profile_repository: ProfileRepository,
    stats_repository: StatsRepository,
    settings: Settings | None = None,
) -> AppContainer:
    """Create the container around repositories supplied by the host backend."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    unit_converter = UnitConverter()
    nutrient_aggregator = NutrientAggregator(converter=unit_converter)
    goal_calculator = GoalCalculator(policy=resolved_settings.nutrition_policy())
    stats_aggregator = StatsAggregator(aggregator=nutrient_aggregator)
    meal_service = MealService(
        catalog=food_catalog,
        repository=meal_repository,
        aggregator=nutrient_aggregator,
    )
    profile_service = ProfileService(
        repository=profile_repository,
        calculator=goal_calculator,
    )
    stats_service = StatsService(
        repository=stats_repository,
        profile_repository=profile_repository,
        stats=stats_aggregator,
        default_timezone=resolved_settings.default_timezone,
    )
    return AppContainer(
        settings=resolved_settings,
        unit_converter=unit_converter,
        nutrient_aggregator=nutrient_aggregator,
        goal_calculator=goal_calculator,
        stats_aggregator=stats_aggregator,
        meal_service=meal_service,
        profile_service=profile_service,
        stats_service=stats_service,
    )
