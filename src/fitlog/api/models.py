"""Pydantic models for API request payloads."""

from pydantic import BaseModel, Field

from fitlog.domain.workouts import BackupSet


class SwapRequest(BaseModel):
    """Swap calculation request."""

    source_food_id: str
    source_amount_g: float
    target_food_id: str


class MacrosPayload(BaseModel):
    """Absolute macros to add to a daily log."""

    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    calories: float = 0.0


class WorkoutBackupPayload(BaseModel):
    """In-progress workout sent by the client."""

    sets: dict[str, list[BackupSet]]
    routine_id: str | None = Field(default=None, alias="routineId")
    exercise_ids: list[str] = Field(default_factory=list, alias="exerciseIds")

    model_config = {"populate_by_name": True}
