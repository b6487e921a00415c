"""Stateless calculator endpoints."""

from dataclasses import asdict

from fastapi import APIRouter

from macro_tracker.api.models import BMIRequest, ProjectionRequest, TargetsRequest
from macro_tracker.services.calculations import (
    calculate_bmi,
    calculate_projected_weight,
    compute_targets,
    get_bmi_category,
)

router = APIRouter(prefix="/calculator", tags=["calculator"])


@router.post("/targets")
async def targets(payload: TargetsRequest) -> dict[str, object]:
    """Return BMR, TDEE, target calories and macro grams."""
    result = compute_targets(
        weight=payload.weight,
        height=payload.height,
        age=payload.age,
        sex=payload.sex,
        activity_level=payload.activity_level,
        goal=payload.goal,
    )
    return {
        "bmr": result.bmr,
        "tdee": result.tdee,
        "target_calories": result.target_calories,
        "macros": asdict(result.macros),
    }


@router.post("/bmi")
async def bmi(payload: BMIRequest) -> dict[str, object]:
    """Return BMI and its category."""
    value = calculate_bmi(payload.weight, payload.height)
    return {"bmi": value, "category": get_bmi_category(value).value}


@router.post("/projection")
async def projection(payload: ProjectionRequest) -> dict[str, object]:
    """Return the projected weight after the given number of weeks."""
    return {
        "weeks": payload.weeks,
        "projected_weight": calculate_projected_weight(
            payload.current_weight, payload.goal, payload.weeks
        ),
    }
