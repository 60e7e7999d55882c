"""Supabase repository for workout history."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from fitlog.domain.workouts import SetLog, WorkoutLog
from fitlog.services.trainee_stats import WorkoutLogRepository


@dataclass
class SupabaseWorkoutRepository(WorkoutLogRepository):
    """Supabase implementation for workout log queries."""

    client: Client

    def list_workout_logs(
        self, user_id: UUID, start_date: date | None = None
    ) -> list[WorkoutLog]:
        """Return workout logs with their set logs, newest first."""
        query = (
            self.client.table("workout_logs")
            .select(
                "*, routine:routines (letter, name), "
                "set_logs (*, exercise:exercise_library (name))"
            )
            .eq("user_id", str(user_id))
            .order("date", desc=True)
        )
        if start_date is not None:
            query = query.gte("date", start_date.isoformat())
        response = query.execute()
        return [_parse_log(row) for row in response.data or []]

    def list_body_weights(self, user_id: UUID) -> list[tuple[date, float]]:
        """Return recorded body weights, newest first."""
        response = (
            self.client.table("workout_logs")
            .select("date, body_weight")
            .eq("user_id", str(user_id))
            .not_.is_("body_weight", "null")
            .order("date", desc=True)
            .execute()
        )
        return [
            (date.fromisoformat(str(row["date"])), float(row["body_weight"]))
            for row in response.data or []
            if row.get("body_weight") is not None
        ]

    def get_active_plan_name(self, user_id: UUID) -> str | None:
        """Return the name of the active workout plan, if any."""
        response = (
            self.client.table("workout_plans")
            .select("name")
            .eq("trainee_id", str(user_id))
            .eq("is_active", True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get("name")


def _parse_log(row: dict[str, object]) -> WorkoutLog:
    routine_id = row.get("routine_id")
    body_weight = row.get("body_weight")
    routine = row.get("routine") or {}
    return WorkoutLog(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        routine_id=UUID(str(routine_id)) if routine_id else None,
        day=date.fromisoformat(str(row["date"])),
        body_weight=float(body_weight) if body_weight is not None else None,
        completed=bool(row.get("completed", False)),
        set_logs=[_parse_set(item) for item in row.get("set_logs") or []],
        routine_name=(
            f"{routine.get('letter')} - {routine.get('name')}" if routine else None
        ),
    )


def _parse_set(row: dict[str, object]) -> SetLog:
    rir = row.get("rir_actual")
    exercise = row.get("exercise") or {}
    return SetLog(
        exercise_id=UUID(str(row["exercise_id"])),
        set_number=int(row.get("set_number", 0)),
        weight_kg=float(row.get("weight_kg") or 0.0),
        reps=int(row.get("reps") or 0),
        rir_actual=int(rir) if rir is not None else None,
        exercise_name=exercise.get("name"),
        notes=row.get("notes"),
    )
