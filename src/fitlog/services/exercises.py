"""Exercise identification used for 1RM and progress tracking."""

BENCH_PRESS_EXERCISE_NAMES = (
    "לחיצת חזה",
    "bench press",
    "לחיצה בחזה",
    "חזה",
    "chest press",
    "לחיצת חזה כנגד מוט",
    "לחיצת חזה עם משקולות",
)

CHEST_MUSCLE_GROUP_NAMES = (
    "חזה",
    "chest",
    "pectorals",
)


def is_bench_press_exercise(
    exercise_name: str | None, muscle_group: str | None
) -> bool:
    """Return True when the name or muscle group matches a bench press variant."""
    name = (exercise_name or "").lower()
    group = (muscle_group or "").lower()
    if any(variant.lower() in name for variant in BENCH_PRESS_EXERCISE_NAMES):
        return True
    return any(chest.lower() in group for chest in CHEST_MUSCLE_GROUP_NAMES)
