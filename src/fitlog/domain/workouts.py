"""Domain models for workout logs and progress."""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class SetLog:
    """A single performed set."""

    exercise_id: UUID
    set_number: int
    weight_kg: float
    reps: int
    rir_actual: int | None = None
    exercise_name: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class WorkoutLog:
    """A workout session with its performed sets."""

    id: UUID
    user_id: UUID
    routine_id: UUID | None
    day: date
    body_weight: float | None
    completed: bool
    set_logs: list[SetLog] = field(default_factory=list)
    routine_name: str | None = None


@dataclass(frozen=True)
class WeightDataPoint:
    """Body weight measured on a given day."""

    day: date
    weight: float


@dataclass(frozen=True)
class TraineeStatistics:
    """Aggregated progress numbers for a trainee."""

    total_workouts: int
    workouts_this_week: int
    workouts_this_month: int
    total_volume: float
    average_weight: float | None
    weight_change: float | None


class BackupSet(BaseModel):
    """Raw form values of an in-progress set."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    set_number: int = Field(alias="setNumber")
    weight: str = ""
    reps: str = ""
    rir: str = ""


class WorkoutBackup(BaseModel):
    """Snapshot of an in-progress workout."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sets: dict[str, list[BackupSet]]
    routine_id: str | None = Field(default=None, alias="routineId")
    saved_at: AwareDatetime = Field(alias="timestamp")
    exercise_ids: list[str] = Field(default_factory=list, alias="exerciseIds")
