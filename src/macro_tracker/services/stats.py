"""Statistics service for food logs."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from uuid import UUID
from zoneinfo import ZoneInfo

from macro_tracker.domain.logs import FoodLog
from macro_tracker.domain.profiles import UserProfile
from macro_tracker.domain.stats import (
    DailyProgress,
    DailyTotals,
    NutrientProgress,
    WeekSummary,
)
from macro_tracker.services.calculations import round_half_up
from macro_tracker.services.food_logs import FoodLogRepository

WEEK_DAYS = 7
STREAK_MAX_DAYS = 365
MAX_PERCENT = 100.0


@dataclass
class StatsService:
    """Service for computing user stats by timezone."""

    repository: FoodLogRepository

    def get_today(self, user_id: UUID, timezone_name: str) -> DailyTotals:
        """Return today's totals in the user's timezone."""
        totals, _ = self.get_today_with_logs(user_id, timezone_name)
        return totals

    def get_today_with_logs(
        self, user_id: UUID, timezone_name: str
    ) -> tuple[DailyTotals, list[FoodLog]]:
        """Return today's totals and food logs."""
        tz = ZoneInfo(timezone_name)
        start = _start_of_day(datetime.now(tz=tz))
        end = start + timedelta(days=1)
        logs = self.repository.list_logs(
            user_id, start.astimezone(UTC), end.astimezone(UTC)
        )
        return _aggregate_day(start.date(), logs, tz), logs

    def get_week(self, user_id: UUID, timezone_name: str) -> WeekSummary:
        """Return totals for today and the six days before it."""
        tz = ZoneInfo(timezone_name)
        today_start = _start_of_day(datetime.now(tz=tz))
        start = today_start - timedelta(days=WEEK_DAYS - 1)
        end = today_start + timedelta(days=1)
        logs = self.repository.list_logs(
            user_id, start.astimezone(UTC), end.astimezone(UTC)
        )
        return _summarize_week(start, logs, tz)

    def get_streak(self, user_id: UUID, timezone_name: str) -> int:
        """Count consecutive logged days ending today.

        An empty today does not break the streak; counting then starts at
        yesterday. Looks back at most a year.
        """
        tz = ZoneInfo(timezone_name)
        today_start = _start_of_day(datetime.now(tz=tz))
        start = today_start - timedelta(days=STREAK_MAX_DAYS - 1)
        end = today_start + timedelta(days=1)
        logs = self.repository.list_logs(
            user_id, start.astimezone(UTC), end.astimezone(UTC)
        )
        logged_days = {log.logged_at.astimezone(tz).date() for log in logs}

        streak = 0
        for offset in range(STREAK_MAX_DAYS):
            if today_start.date() - timedelta(days=offset) in logged_days:
                streak += 1
            elif offset > 0:
                break
        return streak


def get_progress(totals: DailyTotals, profile: UserProfile) -> DailyProgress:
    """Compare a day's intake against the profile targets."""
    return DailyProgress(
        remaining_calories=max(profile.target_calories - totals.calories, 0),
        calories=_progress(totals.calories, profile.target_calories),
        protein=_progress(totals.protein, profile.target_protein),
        carbs=_progress(totals.carbs, profile.target_carbs),
        fats=_progress(totals.fats, profile.target_fats),
        sugars=_progress(totals.sugars, profile.target_sugars),
    )


def _progress(consumed: float, target: float) -> NutrientProgress:
    percent = min(consumed / target * 100, MAX_PERCENT) if target > 0 else 0.0
    return NutrientProgress(consumed=consumed, target=target, percent=percent)


def _start_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def _aggregate_day(day: date, logs: list[FoodLog], tz: ZoneInfo) -> DailyTotals:
    total = DailyTotals(
        day=day, calories=0, protein=0, carbs=0, fats=0, sugars=0, fiber=0
    )
    for log in logs:
        if log.logged_at.astimezone(tz).date() != day:
            continue
        total = DailyTotals(
            day=day,
            calories=total.calories + log.calories,
            protein=total.protein + log.protein,
            carbs=total.carbs + log.carbs,
            fats=total.fats + log.fats,
            sugars=total.sugars + log.sugars,
            fiber=total.fiber + (log.fiber or 0),
        )
    return total


def _summarize_week(start: datetime, logs: list[FoodLog], tz: ZoneInfo) -> WeekSummary:
    daily = [
        _aggregate_day((start + timedelta(days=offset)).date(), logs, tz)
        for offset in range(WEEK_DAYS)
    ]
    days_logged = len({log.logged_at.astimezone(tz).date() for log in logs})
    return WeekSummary(
        daily=daily,
        avg_calories=round_half_up(sum(day.calories for day in daily) / WEEK_DAYS),
        avg_protein=round_half_up(sum(day.protein for day in daily) / WEEK_DAYS),
        avg_carbs=round_half_up(sum(day.carbs for day in daily) / WEEK_DAYS),
        avg_fats=round_half_up(sum(day.fats for day in daily) / WEEK_DAYS),
        days_logged=min(days_logged, WEEK_DAYS),
    )
