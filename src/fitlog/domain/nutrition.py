"""Nutrition domain models."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class FoodItem:
    """Nutritional reference record with densities per 100 grams."""

    id: str
    name: str
    category: str
    conversion_factor: float
    protein_per_100g: float
    carbs_per_100g: float
    fat_per_100g: float
    calories_per_100g: float


@dataclass(frozen=True)
class Macros:
    """Absolute macros for a food at a specific amount."""

    protein: float
    carbs: float
    fat: float
    calories: float


@dataclass(frozen=True)
class MatchQuality:
    """How closely a substitution preserves the source macro profile."""

    label: str
    tier: str
    color: str
    score: float


@dataclass(frozen=True)
class SwapResult:
    """Outcome of swapping an amount of one food for another."""

    source_food: FoodItem
    source_amount_g: float
    target_food: FoodItem
    target_amount_g: float
    source_macros: Macros
    target_macros: Macros
    differences: Macros
    quality: MatchQuality


@dataclass(frozen=True)
class DailyNutritionLog:
    """Daily macro totals for a trainee."""

    id: UUID
    user_id: UUID
    day: date
    total_protein: float | None
    total_carbs: float | None
    total_fat: float | None
    total_calories: float | None
    notes: str | None
