"""Supabase repository for daily nutrition logs."""

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import NoReturn
from uuid import UUID

from supabase import Client, PostgrestAPIError

from fitlog.domain.errors import NutritionLogUnavailableError
from fitlog.domain.nutrition import DailyNutritionLog
from fitlog.services.daily_nutrition import DailyNutritionRepository

_logger = logging.getLogger(__name__)

_MISSING_TABLE_CODES = {"42703", "42P01", "PGRST204", "PGRST205"}


@dataclass
class SupabaseDailyNutritionRepository(DailyNutritionRepository):
    """Supabase implementation for daily nutrition logs."""

    client: Client

    def get_log(self, user_id: UUID, day: date) -> DailyNutritionLog | None:
        """Return the log for a user and day, if present."""
        try:
            response = (
                self.client.table("daily_nutrition_logs")
                .select("*")
                .eq("user_id", str(user_id))
                .eq("date", day.isoformat())
                .limit(1)
                .execute()
            )
        except PostgrestAPIError as exc:
            if _is_missing_table(exc):
                _logger.warning("daily_nutrition_logs table does not exist yet")
                return None
            raise
        if not response.data:
            return None
        return _parse_log(response.data[0])

    def create_log(
        self,
        user_id: UUID,
        day: date,
        totals: dict[str, float | None],
        notes: str | None,
    ) -> DailyNutritionLog:
        """Create a log row and return it."""
        try:
            response = (
                self.client.table("daily_nutrition_logs")
                .insert(
                    {
                        "user_id": str(user_id),
                        "date": day.isoformat(),
                        **totals,
                        "notes": notes,
                    }
                )
                .execute()
            )
        except PostgrestAPIError as exc:
            _raise_unavailable(exc)
        if not response.data:
            raise RuntimeError("Failed to create daily nutrition log")
        return _parse_log(response.data[0])

    def update_log(
        self,
        log_id: UUID,
        totals: dict[str, float | None],
        notes: str | None,
    ) -> DailyNutritionLog:
        """Update a log row and return it."""
        try:
            response = (
                self.client.table("daily_nutrition_logs")
                .update(
                    {
                        **totals,
                        "notes": notes,
                        "updated_at": datetime.now(tz=UTC).isoformat(),
                    }
                )
                .eq("id", str(log_id))
                .execute()
            )
        except PostgrestAPIError as exc:
            _raise_unavailable(exc)
        if not response.data:
            raise RuntimeError("Failed to update daily nutrition log")
        return _parse_log(response.data[0])


def _is_missing_table(exc: PostgrestAPIError) -> bool:
    message = exc.message or ""
    if exc.code in _MISSING_TABLE_CODES:
        return True
    return "relation" in message or "column" in message


def _raise_unavailable(exc: PostgrestAPIError) -> NoReturn:
    if _is_missing_table(exc):
        raise NutritionLogUnavailableError(
            "daily_nutrition_logs table does not exist. Please run the migration."
        ) from exc
    raise exc


def _parse_log(row: dict[str, object]) -> DailyNutritionLog:
    return DailyNutritionLog(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        day=date.fromisoformat(str(row["date"])),
        total_protein=_optional_float(row.get("total_protein")),
        total_carbs=_optional_float(row.get("total_carbs")),
        total_fat=_optional_float(row.get("total_fat")),
        total_calories=_optional_float(row.get("total_calories")),
        notes=row.get("notes"),
    )


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)  # type: ignore[arg-type]
