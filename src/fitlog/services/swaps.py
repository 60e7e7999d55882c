"""Food swap service backed by the nutrition swap catalog."""

import logging
import math
from dataclasses import dataclass
from typing import Protocol

from fitlog.domain.errors import FoodNotFoundError
from fitlog.domain.nutrition import FoodItem, SwapResult
from fitlog.services.macros import (
    compute_macro_differences,
    compute_macros,
    compute_swap_amount,
    score_match_quality,
)

_logger = logging.getLogger(__name__)


class SwapCatalogRepository(Protocol):
    """Read interface for the nutrition swap catalog."""

    def list_swaps(self) -> list[FoodItem]:
        """Return all catalog foods ordered by name."""

    def get_swap(self, food_id: str) -> FoodItem | None:
        """Return a catalog food by id, if present."""


def food_item_from_swap_row(row: dict[str, object]) -> FoodItem:
    """Convert a ``nutrition_swaps`` row into a food item."""
    return FoodItem(
        id=str(row["id"]),
        name=str(row.get("food_name", "")),
        category=str(row.get("category", "")),
        conversion_factor=float(row.get("conversion_factor") or 0.0),
        protein_per_100g=float(row.get("protein_per_100g") or 0.0),
        carbs_per_100g=float(row.get("carbs_per_100g") or 0.0),
        fat_per_100g=float(row.get("fat_per_100g") or 0.0),
        calories_per_100g=float(row.get("calories_per_100g") or 0.0),
    )


@dataclass
class SwapService:
    """Application service for food swap calculations."""

    repository: SwapCatalogRepository

    def list_foods(self, category: str | None = None) -> list[FoodItem]:
        """Return catalog foods, optionally limited to one category."""
        foods = self.repository.list_swaps()
        if category is None:
            return foods
        return [food for food in foods if food.category == category]

    def calculate_swap(
        self, source_id: str, source_amount_g: float, target_id: str
    ) -> SwapResult:
        """Calculate the equivalent target amount and compare macros."""
        source = self._require(source_id)
        target = self._require(target_id)
        return build_swap_result(source, source_amount_g, target)

    def suggest_swaps(
        self, source_id: str, source_amount_g: float, limit: int = 5
    ) -> list[SwapResult]:
        """Return same-category swaps ranked by match score."""
        source = self._require(source_id)
        candidates = [
            food
            for food in self.repository.list_swaps()
            if food.category == source.category and food.id != source.id
        ]
        results = [
            build_swap_result(source, source_amount_g, food) for food in candidates
        ]
        results.sort(key=lambda result: _sort_score(result.quality.score))
        return results[:limit]

    def _require(self, food_id: str) -> FoodItem:
        food = self.repository.get_swap(food_id)
        if food is None:
            _logger.info("Swap catalog miss: food_id=%s", food_id)
            raise FoodNotFoundError(food_id)
        return food


def build_swap_result(
    source: FoodItem, source_amount_g: float, target: FoodItem
) -> SwapResult:
    """Compose the macro calculator into a full swap comparison."""
    target_amount_g = compute_swap_amount(source, source_amount_g, target)
    source_macros = compute_macros(source, source_amount_g)
    target_macros = compute_macros(target, target_amount_g)
    return SwapResult(
        source_food=source,
        source_amount_g=source_amount_g,
        target_food=target,
        target_amount_g=target_amount_g,
        source_macros=source_macros,
        target_macros=target_macros,
        differences=compute_macro_differences(source_macros, target_macros),
        quality=score_match_quality(source_macros, target_macros),
    )


def _sort_score(score: float) -> float:
    # NaN scores sort last.
    return math.inf if math.isnan(score) else score
