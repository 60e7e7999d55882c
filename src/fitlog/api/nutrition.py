"""Nutrition endpoints: swap catalog, swap calculator and daily logs."""

from __future__ import annotations

import math
from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from fitlog.api.auth import require_token
from fitlog.api.models import MacrosPayload, SwapRequest
from fitlog.domain.errors import FoodNotFoundError, NutritionLogUnavailableError
from fitlog.domain.nutrition import Macros

if TYPE_CHECKING:
    from fitlog.containers import AppContainer
    from fitlog.domain.nutrition import (
        DailyNutritionLog,
        FoodItem,
        MatchQuality,
        SwapResult,
    )

router = APIRouter(
    prefix="/nutrition", tags=["nutrition"], dependencies=[Depends(require_token)]
)


@router.get("/foods")
async def list_foods(
    request: Request, category: str | None = None
) -> dict[str, object]:
    """Return the swap catalog."""
    container: AppContainer = request.app.state.container
    foods = container.swap_service.list_foods(category)
    return {"foods": [serialize_food(food) for food in foods]}


@router.post("/swap")
async def calculate_swap(payload: SwapRequest, request: Request) -> dict[str, object]:
    """Calculate a food swap and its match quality."""
    container: AppContainer = request.app.state.container
    try:
        result = container.swap_service.calculate_swap(
            payload.source_food_id, payload.source_amount_g, payload.target_food_id
        )
    except FoodNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    return serialize_swap(result)


@router.get("/swap/suggestions")
async def suggest_swaps(
    request: Request,
    source_food_id: str,
    source_amount_g: float,
    limit: int = Query(default=5, ge=1),
) -> dict[str, object]:
    """Return the best same-category swaps for a food."""
    container: AppContainer = request.app.state.container
    try:
        results = container.swap_service.suggest_swaps(
            source_food_id, source_amount_g, limit
        )
    except FoodNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    return {"suggestions": [serialize_swap(result) for result in results]}


@router.get("/daily/{user_id}")
async def get_daily_log(
    user_id: UUID, request: Request, day: date | None = None
) -> dict[str, object]:
    """Return the daily nutrition log, if any."""
    container: AppContainer = request.app.state.container
    log = container.daily_nutrition_service.get_log(user_id, day)
    return {"log": serialize_daily_log(log) if log else None}


@router.post("/daily/{user_id}/add")
async def add_to_daily_log(
    user_id: UUID, payload: MacrosPayload, request: Request, day: date | None = None
) -> dict[str, object]:
    """Add macros to the day's totals."""
    container: AppContainer = request.app.state.container
    macros = Macros(
        protein=payload.protein,
        carbs=payload.carbs,
        fat=payload.fat,
        calories=payload.calories,
    )
    try:
        log = container.daily_nutrition_service.add_macros(user_id, day, macros)
    except NutritionLogUnavailableError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)
        ) from exc
    return {"log": serialize_daily_log(log)}


def serialize_food(food: FoodItem) -> dict[str, object]:
    return {
        "id": food.id,
        "name": food.name,
        "category": food.category,
        "conversion_factor": food.conversion_factor,
        "protein_per_100g": food.protein_per_100g,
        "carbs_per_100g": food.carbs_per_100g,
        "fat_per_100g": food.fat_per_100g,
        "calories_per_100g": food.calories_per_100g,
    }


def serialize_macros(macros: Macros) -> dict[str, float | None]:
    return {
        "protein": _finite(macros.protein),
        "carbs": _finite(macros.carbs),
        "fat": _finite(macros.fat),
        "calories": _finite(macros.calories),
    }


def serialize_quality(quality: MatchQuality) -> dict[str, object]:
    return {
        "label": quality.label,
        "tier": quality.tier,
        "color": quality.color,
        "score": _finite(quality.score),
    }


def serialize_swap(result: SwapResult) -> dict[str, object]:
    return {
        "source_food": serialize_food(result.source_food),
        "source_amount_g": _finite(result.source_amount_g),
        "target_food": serialize_food(result.target_food),
        "target_amount_g": _finite(result.target_amount_g),
        "source_macros": serialize_macros(result.source_macros),
        "target_macros": serialize_macros(result.target_macros),
        "differences": serialize_macros(result.differences),
        "quality": serialize_quality(result.quality),
    }


def serialize_daily_log(log: DailyNutritionLog) -> dict[str, object]:
    return {
        "id": str(log.id),
        "user_id": str(log.user_id),
        "date": log.day.isoformat(),
        "total_protein": log.total_protein,
        "total_carbs": log.total_carbs,
        "total_fat": log.total_fat,
        "total_calories": log.total_calories,
        "notes": log.notes,
    }


def _finite(value: float) -> float | None:
    """JSON has no inf/nan; report them as null."""
    return value if math.isfinite(value) else None
