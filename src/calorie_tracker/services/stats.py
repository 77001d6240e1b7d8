"""Statistics over logged meals."""

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, time, timedelta, tzinfo
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from calorie_tracker.domain.meals import Meal
from calorie_tracker.domain.nutrition import NutrientTotal
from calorie_tracker.domain.profiles import NutritionGoals
from calorie_tracker.domain.stats import DailyStat, PeriodSummary
from calorie_tracker.services.aggregation import NutrientAggregator
from calorie_tracker.services.profiles import ProfileNotFoundError, ProfileRepository


class StatsRepository(Protocol):
    """Read interface for meals used by statistics."""

    def list_meals(self, user_id: UUID, start: datetime, end: datetime) -> list[Meal]:
        """Return meals consumed within [start, end)."""


@dataclass(frozen=True)
class StatsAggregator:
    """Builds daily and multi-day summaries from meals and a goal snapshot."""

    aggregator: NutrientAggregator = field(default_factory=NutrientAggregator)

    def daily_stat(
        self,
        meals: Iterable[Meal],
        target_date: date,
        goals: NutritionGoals,
        tz: tzinfo,
    ) -> DailyStat:
        """Return totals for the calendar day of target_date in tz."""
        day_meals = [meal for meal in meals if local_day(meal, tz) == target_date]
        return self._build(target_date, day_meals, goals)

    def weekly_stat(
        self,
        meals: Iterable[Meal],
        start_date: date,
        day_count: int,
        goals: NutritionGoals,
        tz: tzinfo,
    ) -> list[DailyStat]:
        """Return one entry per day from start_date, empty days zero-filled."""
        if day_count < 0:
            raise ValueError(f"day_count must be >= 0, got {day_count}")
        by_day: dict[date, list[Meal]] = defaultdict(list)
        for meal in meals:
            by_day[local_day(meal, tz)].append(meal)
        days = [start_date + timedelta(days=offset) for offset in range(day_count)]
        return [self._build(day, by_day.get(day, []), goals) for day in days]

    def summarize_period(
        self,
        meals: Iterable[Meal],
        start_date: date,
        day_count: int,
        goals: NutritionGoals,
        tz: tzinfo,
    ) -> PeriodSummary:
        """Return the per-day stats of a period with daily averages."""
        daily = self.weekly_stat(meals, start_date, day_count, goals, tz)
        total_days = max(len(daily), 1)
        totals = NutrientTotal.zero()
        for entry in daily:
            totals = totals + entry.totals
        return PeriodSummary(
            daily=daily,
            avg_calories=totals.calories / total_days,
            avg_protein_g=totals.protein_g / total_days,
            avg_carbs_g=totals.carbs_g / total_days,
            avg_fat_g=totals.fat_g / total_days,
        )

    def _build(self, day: date, meals: list[Meal], goals: NutritionGoals) -> DailyStat:
        totals = self.aggregator.aggregate_day(meals)
        remaining = NutrientTotal(
            calories=goals.calories - totals.calories,
            protein_g=goals.protein_g - totals.protein_g,
            carbs_g=goals.carbs_g - totals.carbs_g,
            fat_g=goals.fat_g - totals.fat_g,
        )
        return DailyStat(
            day=day,
            totals=totals,
            goals=goals,
            remaining=remaining,
            meal_count=len(meals),
        )


@dataclass
class StatsService:
    """Service for computing user stats by timezone."""

    repository: StatsRepository
    profile_repository: ProfileRepository
    stats: StatsAggregator = field(default_factory=StatsAggregator)
    default_timezone: str = "UTC"

    def get_day(
        self, user_id: UUID, day: date, timezone_name: str | None = None
    ) -> DailyStat:
        """Return a day's totals in the user's timezone."""
        tz = self._zone(timezone_name)
        meals = self._meals_between(user_id, day, 1, tz)
        return self.stats.daily_stat(meals, day, self._goals(user_id), tz)

    def get_today(self, user_id: UUID, timezone_name: str | None = None) -> DailyStat:
        """Return today's totals in the user's timezone."""
        today = datetime.now(tz=self._zone(timezone_name)).date()
        return self.get_day(user_id, today, timezone_name)

    def get_week(
        self,
        user_id: UUID,
        start: date,
        timezone_name: str | None = None,
        days: int = 7,
    ) -> PeriodSummary:
        """Return per-day totals and averages for days starting at start."""
        tz = self._zone(timezone_name)
        meals = self._meals_between(user_id, start, days, tz)
        return self.stats.summarize_period(
            meals, start, days, self._goals(user_id), tz
        )

    def _zone(self, timezone_name: str | None) -> ZoneInfo:
        return ZoneInfo(timezone_name or self.default_timezone)

    def _meals_between(
        self, user_id: UUID, start: date, days: int, tz: ZoneInfo
    ) -> list[Meal]:
        window_start = datetime.combine(start, time.min, tzinfo=tz)
        window_end = datetime.combine(
            start + timedelta(days=days), time.min, tzinfo=tz
        )
        return self.repository.list_meals(
            user_id, window_start.astimezone(UTC), window_end.astimezone(UTC)
        )

    def _goals(self, user_id: UUID) -> NutritionGoals:
        profile = self.profile_repository.get_profile(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)
        return profile.goals


def local_day(meal: Meal, tz: tzinfo) -> date:
    """Return the calendar day a meal was consumed on in tz.

    Naive timestamps are taken to be UTC.
    """
    consumed_at = meal.consumed_at
    if consumed_at.tzinfo is None:
        consumed_at = consumed_at.replace(tzinfo=UTC)
    return consumed_at.astimezone(tz).date()
