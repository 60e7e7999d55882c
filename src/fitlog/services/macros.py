"""Macro calculations for food swaps.

All functions are pure and permissive: inputs are expected to be validated
by the caller, and invalid numbers (negative, NaN, zero conversion factors)
propagate into the results instead of raising.
"""

import math

from fitlog.domain.nutrition import FoodItem, Macros, MatchQuality

# (upper bound, tier, label, color), evaluated in order.
_QUALITY_THRESHOLDS = (
    (0.1, "excellent", "מצוינת", "green"),
    (0.2, "good", "טובה", "green"),
    (0.3, "fair", "בינונית", "yellow"),
)
_POOR_QUALITY = ("poor", "נמוכה", "red")


def compute_macros(food: FoodItem, amount_grams: float) -> Macros:
    """Return absolute macros for ``amount_grams`` of ``food``."""
    return Macros(
        protein=food.protein_per_100g * amount_grams / 100,
        carbs=food.carbs_per_100g * amount_grams / 100,
        fat=food.fat_per_100g * amount_grams / 100,
        calories=food.calories_per_100g * amount_grams / 100,
    )


def compute_swap_amount(
    source_food: FoodItem, source_amount_grams: float, target_food: FoodItem
) -> float:
    """Return the amount of ``target_food`` equivalent to the source amount.

    Non-positive source amounts short-circuit to ``0``. A zero source
    conversion factor yields ``inf`` or ``nan``.
    """
    if source_amount_grams <= 0:
        return 0
    return _divide(
        source_amount_grams * target_food.conversion_factor,
        source_food.conversion_factor,
    )


def compute_macro_differences(source: Macros, target: Macros) -> Macros:
    """Return ``target - source`` per field; positive means target has more."""
    return Macros(
        protein=target.protein - source.protein,
        carbs=target.carbs - source.carbs,
        fat=target.fat - source.fat,
        calories=target.calories - source.calories,
    )


def score_match_quality(source: Macros, target: Macros) -> MatchQuality:
    """Score how well ``target`` preserves ``source`` (lower score is better).

    A zero source value falls back to a denominator of ``1``, so the
    deviation becomes absolute grams/kcal for that field.
    """
    diffs = compute_macro_differences(source, target)
    deviations = (
        abs(diffs.protein) / (source.protein or 1),
        abs(diffs.carbs) / (source.carbs or 1),
        abs(diffs.fat) / (source.fat or 1),
        abs(diffs.calories) / (source.calories or 1),
    )
    score = sum(deviations) / len(deviations)
    for upper, tier, label, color in _QUALITY_THRESHOLDS:
        if score < upper:
            return MatchQuality(label=label, tier=tier, color=color, score=score)
    tier, label, color = _POOR_QUALITY
    return MatchQuality(label=label, tier=tier, color=color, score=score)


def _divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics instead of raising on zero."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator
