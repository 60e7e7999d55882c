"""Tests for the macro calculator."""

import math

import pytest

from fitlog.domain.nutrition import Macros
from fitlog.services.macros import (
    compute_macro_differences,
    compute_macros,
    compute_swap_amount,
    score_match_quality,
)
from tests.conftest import make_food

ZERO = Macros(protein=0, carbs=0, fat=0, calories=0)


def test_compute_macros_scales_per_100g() -> None:
    food = make_food("chicken", protein=31, carbs=0, fat=3.6, calories=165)

    macros = compute_macros(food, 200)

    assert macros.protein == pytest.approx(62)
    assert macros.carbs == 0
    assert macros.fat == pytest.approx(7.2)
    assert macros.calories == 165 * 200 / 100


@pytest.mark.parametrize("amount", [1, 37.5, 150, 1000])
def test_compute_macros_calories_are_proportional(amount: float) -> None:
    food = make_food("oats", protein=13, carbs=68, fat=7, calories=389)

    expected = food.calories_per_100g * amount / 100
    assert compute_macros(food, amount).calories == expected


def test_compute_macros_zero_amount_is_zero() -> None:
    food = make_food("oats", protein=13, carbs=68, fat=7, calories=389)

    assert compute_macros(food, 0) == ZERO


def test_compute_macros_does_not_validate_amount() -> None:
    food = make_food("oats", protein=13, carbs=68, fat=7, calories=389)

    negative = compute_macros(food, -100)
    missing = compute_macros(food, math.nan)

    assert negative.calories == -389
    assert negative.protein == -13
    assert math.isnan(missing.calories)


def test_compute_swap_amount_uses_conversion_factors() -> None:
    source = make_food("a", conversion_factor=1.0)
    target = make_food("b", conversion_factor=2.0)

    assert compute_swap_amount(source, 100, target) == 200


def test_compute_swap_amount_round_trip() -> None:
    source = make_food("a", conversion_factor=0.7)
    target = make_food("b", conversion_factor=1.3)

    swapped = compute_swap_amount(source, 85, target)

    assert compute_swap_amount(target, swapped, source) == pytest.approx(85)


@pytest.mark.parametrize("amount", [0, -5])
def test_compute_swap_amount_non_positive_amount_returns_zero(amount: float) -> None:
    source = make_food("a", conversion_factor=1.0)
    target = make_food("b", conversion_factor=2.0)

    assert compute_swap_amount(source, amount, target) == 0


def test_compute_swap_amount_zero_source_factor_is_infinite() -> None:
    source = make_food("a", conversion_factor=0.0)
    target = make_food("b", conversion_factor=2.0)

    result = compute_swap_amount(source, 100, target)

    assert math.isinf(result)
    assert result > 0


def test_compute_swap_amount_zero_factors_is_nan() -> None:
    source = make_food("a", conversion_factor=0.0)
    target = make_food("b", conversion_factor=0.0)

    assert math.isnan(compute_swap_amount(source, 100, target))


def test_macro_differences_are_target_minus_source() -> None:
    source = Macros(protein=20, carbs=10, fat=5, calories=200)
    target = Macros(protein=25, carbs=4, fat=5, calories=180)

    diffs = compute_macro_differences(source, target)

    assert diffs == Macros(protein=5, carbs=-6, fat=0, calories=-20)


def test_macro_self_difference_is_zero() -> None:
    macros = Macros(protein=12.5, carbs=40, fat=3, calories=250)

    assert compute_macro_differences(macros, macros) == ZERO


def test_match_quality_identical_macros_is_excellent() -> None:
    macros = Macros(protein=12.5, carbs=40, fat=3, calories=250)

    quality = score_match_quality(macros, macros)

    assert quality.tier == "excellent"
    assert quality.label == "מצוינת"
    assert quality.score == 0


def test_match_quality_zero_source_uses_fallback_denominator() -> None:
    source = Macros(protein=20, carbs=0, fat=5, calories=120)
    target = Macros(protein=22, carbs=0, fat=5, calories=126)

    quality = score_match_quality(source, target)

    assert quality.score == pytest.approx(0.0375)
    assert quality.tier == "excellent"
    assert quality.color == "green"


def test_match_quality_fallback_counts_absolute_grams() -> None:
    source = Macros(protein=10, carbs=0, fat=10, calories=100)
    target = Macros(protein=10, carbs=2, fat=10, calories=100)

    # carbs deviation is |2 - 0| / 1 = 2
    assert score_match_quality(source, target).score == pytest.approx(0.5)


@pytest.mark.parametrize(
    ("protein", "tier", "label", "color"),
    [
        (12, "excellent", "מצוינת", "green"),
        (16, "good", "טובה", "green"),
        (20, "fair", "בינונית", "yellow"),
        (24, "poor", "נמוכה", "red"),
    ],
)
def test_match_quality_thresholds(
    protein: float, tier: str, label: str, color: str
) -> None:
    source = Macros(protein=10, carbs=10, fat=10, calories=100)
    # Only protein deviates, so score = protein deviation / 4.
    target = Macros(protein=protein, carbs=10, fat=10, calories=100)

    quality = score_match_quality(source, target)

    assert (quality.tier, quality.label, quality.color) == (tier, label, color)


@pytest.mark.parametrize(
    ("protein", "score", "tier"),
    [
        (14, 0.1, "good"),
        (18, 0.2, "fair"),
        (22, 0.3, "poor"),
    ],
)
def test_match_quality_boundary_score_falls_to_next_tier(
    protein: float, score: float, tier: str
) -> None:
    source = Macros(protein=10, carbs=10, fat=10, calories=100)
    target = Macros(protein=protein, carbs=10, fat=10, calories=100)

    quality = score_match_quality(source, target)

    assert quality.score == score
    assert quality.tier == tier


def test_match_quality_nan_is_poor() -> None:
    source = Macros(protein=10, carbs=10, fat=10, calories=100)
    target = Macros(protein=math.nan, carbs=10, fat=10, calories=100)

    quality = score_match_quality(source, target)

    assert math.isnan(quality.score)
    assert quality.tier == "poor"
