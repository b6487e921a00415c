"""FastAPI application factory."""

import logging
from dataclasses import asdict
from http import HTTPStatus
from uuid import UUID
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import Depends, FastAPI, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse

from macro_tracker.api.auth import require_account
from macro_tracker.api.auth import router as auth_router
from macro_tracker.api.calculator import router as calculator_router
from macro_tracker.api.models import FoodLogRequest, ProfileRequest, WeightRequest
from macro_tracker.app_logging import configure_logging
from macro_tracker.containers import AppContainer
from macro_tracker.domain.logs import FoodLog, WeightLog, WeightTrend
from macro_tracker.domain.models import AccountRecord
from macro_tracker.domain.profiles import BodyMetrics, UserProfile
from macro_tracker.domain.stats import DailyProgress, DailyTotals, WeekSummary
from macro_tracker.errors import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    InvalidPasswordError,
    InvalidProfileError,
    MacroTrackerError,
    ProfileNotFoundError,
)
from macro_tracker.services.stats import get_progress

_ERROR_STATUS: dict[type[MacroTrackerError], HTTPStatus] = {
    EmailAlreadyRegisteredError: HTTPStatus.CONFLICT,
    InvalidCredentialsError: HTTPStatus.UNAUTHORIZED,
    InvalidPasswordError: HTTPStatus.UNPROCESSABLE_ENTITY,
    InvalidProfileError: HTTPStatus.UNPROCESSABLE_ENTITY,
    ProfileNotFoundError: HTTPStatus.NOT_FOUND,
}


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(auth_router)
    app.include_router(calculator_router)

    @app.exception_handler(MacroTrackerError)
    async def handle_domain_error(
        request: Request, exc: MacroTrackerError
    ) -> JSONResponse:
        status_code = _ERROR_STATUS.get(type(exc), HTTPStatus.BAD_REQUEST)
        logger.info(
            "Request rejected: %s %s (%s)", request.url.path, int(status_code), exc
        )
        return JSONResponse(status_code=int(status_code), content={"detail": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/profile", status_code=status.HTTP_201_CREATED)
    async def create_profile(
        payload: ProfileRequest,
        request: Request,
        account: AccountRecord = Depends(require_account),
    ) -> dict[str, object]:
        """Create or replace the caller's profile."""
        state_container: AppContainer = request.app.state.container
        profile = state_container.profile_service.create_profile(
            account.id, payload.to_input()
        )
        return _serialize_profile(profile)

    @app.get("/profile")
    async def get_profile(
        request: Request, account: AccountRecord = Depends(require_account)
    ) -> dict[str, object]:
        """Return the caller's profile."""
        state_container: AppContainer = request.app.state.container
        profile = state_container.profile_service.require_profile(account.id)
        return _serialize_profile(profile)

    @app.delete("/profile")
    async def reset_profile(
        request: Request, account: AccountRecord = Depends(require_account)
    ) -> dict[str, str]:
        """Remove the profile and all logged history."""
        state_container: AppContainer = request.app.state.container
        state_container.profile_service.reset(account.id)
        return {"status": "ok"}

    @app.get("/profile/metrics")
    async def profile_metrics(
        request: Request, account: AccountRecord = Depends(require_account)
    ) -> dict[str, object]:
        """Return BMI for the caller's latest weight."""
        state_container: AppContainer = request.app.state.container
        metrics = state_container.profile_service.get_body_metrics(account.id)
        if metrics is None:
            raise ProfileNotFoundError(f"No profile for user {account.id}")
        return _serialize_metrics(metrics)

    @app.post("/food-logs", status_code=status.HTTP_201_CREATED)
    async def add_food_log(
        payload: FoodLogRequest,
        request: Request,
        account: AccountRecord = Depends(require_account),
    ) -> dict[str, object]:
        """Log a meal."""
        state_container: AppContainer = request.app.state.container
        log = state_container.food_log_service.add_log(account.id, payload.to_input())
        return _serialize_food_log(log)

    @app.get("/food-logs")
    async def list_food_logs(
        request: Request,
        limit: int | None = Query(default=None, ge=1),
        account: AccountRecord = Depends(require_account),
    ) -> dict[str, object]:
        """Return recent meals, newest first."""
        state_container: AppContainer = request.app.state.container
        logs = state_container.food_log_service.list_recent(
            account.id, limit or state_container.settings.recent_logs_limit
        )
        return {"logs": [_serialize_food_log(log) for log in logs]}

    @app.delete("/food-logs/{log_id}")
    async def delete_food_log(
        log_id: UUID,
        request: Request,
        account: AccountRecord = Depends(require_account),
    ) -> dict[str, str]:
        """Delete one of the caller's meals."""
        state_container: AppContainer = request.app.state.container
        if not state_container.food_log_service.delete_log(account.id, log_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return {"status": "ok"}

    @app.get("/stats/today")
    async def stats_today(
        request: Request,
        tz: str | None = None,
        account: AccountRecord = Depends(require_account),
    ) -> dict[str, object]:
        """Return today's totals, logs and progress against targets."""
        state_container: AppContainer = request.app.state.container
        timezone = _resolve_timezone(tz, state_container.settings.default_timezone)
        totals, logs = state_container.stats_service.get_today_with_logs(
            account.id, timezone
        )
        profile = state_container.profile_service.get_profile(account.id)
        return {
            "totals": _serialize_totals(totals),
            "logs": [_serialize_food_log(log) for log in logs],
            "progress": _serialize_progress(get_progress(totals, profile))
            if profile
            else None,
        }

    @app.get("/stats/week")
    async def stats_week(
        request: Request,
        tz: str | None = None,
        account: AccountRecord = Depends(require_account),
    ) -> dict[str, object]:
        """Return the rolling seven-day summary."""
        state_container: AppContainer = request.app.state.container
        timezone = _resolve_timezone(tz, state_container.settings.default_timezone)
        summary = state_container.stats_service.get_week(account.id, timezone)
        return _serialize_week(summary)

    @app.get("/stats/streak")
    async def stats_streak(
        request: Request,
        tz: str | None = None,
        account: AccountRecord = Depends(require_account),
    ) -> dict[str, int]:
        """Return the number of consecutive days with logged meals."""
        state_container: AppContainer = request.app.state.container
        timezone = _resolve_timezone(tz, state_container.settings.default_timezone)
        streak = state_container.stats_service.get_streak(account.id, timezone)
        return {"streak": streak}

    @app.post("/weights", status_code=status.HTTP_201_CREATED)
    async def log_weight(
        payload: WeightRequest,
        request: Request,
        account: AccountRecord = Depends(require_account),
    ) -> dict[str, object]:
        """Record today's (or the given day's) weight."""
        state_container: AppContainer = request.app.state.container
        history = state_container.weight_log_service.log_weight(
            account.id, payload.weight_kg, day=payload.day
        )
        return {"weights": [_serialize_weight(entry) for entry in history]}

    @app.get("/weights")
    async def weight_trend(
        request: Request, account: AccountRecord = Depends(require_account)
    ) -> dict[str, object]:
        """Return recent weights and the change across them."""
        state_container: AppContainer = request.app.state.container
        profile = state_container.profile_service.get_profile(account.id)
        trend = state_container.weight_log_service.get_trend(account.id, profile)
        return _serialize_trend(trend)

    @app.get("/weights/projection")
    async def weight_projection(
        request: Request,
        weeks: float = 12,
        account: AccountRecord = Depends(require_account),
    ) -> dict[str, object]:
        """Project the caller's weight forward at their goal's rate."""
        state_container: AppContainer = request.app.state.container
        profile = state_container.profile_service.require_profile(account.id)
        projected = state_container.weight_log_service.project(
            account.id, profile, weeks
        )
        return {
            "goal": profile.goal.value,
            "weeks": weeks,
            "projected_weight": projected,
        }

    return app


def _resolve_timezone(requested: str | None, default: str) -> str:
    """Return a valid IANA timezone name, rejecting unknown ones."""
    name = requested or default
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown timezone: {name}",
        ) from exc
    return name


def _serialize_profile(profile: UserProfile) -> dict[str, object]:
    return {
        "age": profile.age,
        "height": profile.height,
        "weight": profile.weight,
        "sex": profile.sex.value,
        "activity_level": profile.activity_level.value,
        "goal": profile.goal.value,
        "units": profile.units.value,
        "region": profile.region,
        "tracked_macros": [macro.value for macro in profile.tracked_macros],
        "tdee": profile.tdee,
        "target_calories": profile.target_calories,
        "target_protein": profile.target_protein,
        "target_carbs": profile.target_carbs,
        "target_fats": profile.target_fats,
        "target_sugars": profile.target_sugars,
    }


def _serialize_metrics(metrics: BodyMetrics) -> dict[str, object]:
    return {
        "weight_kg": metrics.weight_kg,
        "height_cm": metrics.height_cm,
        "bmi": metrics.bmi,
        "category": metrics.category.value,
    }


def _serialize_food_log(log: FoodLog) -> dict[str, object]:
    return {
        "id": str(log.id),
        "logged_at": log.logged_at.isoformat(),
        "description": log.description,
        "calories": log.calories,
        "protein": log.protein,
        "carbs": log.carbs,
        "fats": log.fats,
        "sugars": log.sugars,
        "fiber": log.fiber,
        "source": log.source.value,
    }


def _serialize_totals(totals: DailyTotals) -> dict[str, object]:
    data = asdict(totals)
    data["day"] = totals.day.isoformat()
    return data


def _serialize_progress(progress: DailyProgress) -> dict[str, object]:
    return asdict(progress)


def _serialize_week(summary: WeekSummary) -> dict[str, object]:
    return {
        "daily": [_serialize_totals(day) for day in summary.daily],
        "avg_calories": summary.avg_calories,
        "avg_protein": summary.avg_protein,
        "avg_carbs": summary.avg_carbs,
        "avg_fats": summary.avg_fats,
        "days_logged": summary.days_logged,
    }


def _serialize_weight(entry: WeightLog) -> dict[str, object]:
    return {"day": entry.day.isoformat(), "weight_kg": entry.weight_kg}


def _serialize_trend(trend: WeightTrend) -> dict[str, object]:
    return {
        "current_kg": trend.current_kg,
        "change_kg": trend.change_kg,
        "entries": [_serialize_weight(entry) for entry in trend.entries],
    }
