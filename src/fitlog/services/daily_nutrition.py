"""Daily nutrition log service."""

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID

from fitlog.domain.nutrition import DailyNutritionLog, Macros

_logger = logging.getLogger(__name__)

_TOTAL_FIELDS = ("total_protein", "total_carbs", "total_fat", "total_calories")


class DailyNutritionRepository(Protocol):
    """Persistence interface for daily nutrition logs."""

    def get_log(self, user_id: UUID, day: date) -> DailyNutritionLog | None:
        """Return the log for a user and day, if present."""

    def create_log(
        self,
        user_id: UUID,
        day: date,
        totals: dict[str, float | None],
        notes: str | None,
    ) -> DailyNutritionLog:
        """Create a log row and return it."""

    def update_log(
        self,
        log_id: UUID,
        totals: dict[str, float | None],
        notes: str | None,
    ) -> DailyNutritionLog:
        """Update a log row and return it."""


@dataclass
class DailyNutritionService:
    """Service for reading and accumulating daily macro totals."""

    repository: DailyNutritionRepository

    def get_log(
        self, user_id: UUID, day: date | None = None
    ) -> DailyNutritionLog | None:
        """Return the log for ``day`` (today in UTC when omitted)."""
        return self.repository.get_log(user_id, day or _today())

    def upsert_log(
        self, user_id: UUID, day: date | None, updates: dict[str, object]
    ) -> DailyNutritionLog:
        """Create or update a day's log; ``None`` values keep existing data."""
        target_day = day or _today()
        existing = self.repository.get_log(user_id, target_day)
        if existing is None:
            totals = {name: _as_float(updates.get(name)) for name in _TOTAL_FIELDS}
            notes = updates.get("notes")
            return self.repository.create_log(
                user_id, target_day, totals, str(notes) if notes is not None else None
            )

        totals = {}
        for name in _TOTAL_FIELDS:
            value = _as_float(updates.get(name))
            totals[name] = value if value is not None else getattr(existing, name)
        notes = updates.get("notes")
        return self.repository.update_log(
            existing.id, totals, str(notes) if notes is not None else existing.notes
        )

    def add_macros(
        self, user_id: UUID, day: date | None, macros: Macros
    ) -> DailyNutritionLog:
        """Add macros to the day's running totals."""
        target_day = day or _today()
        existing = self.repository.get_log(user_id, target_day)
        updates = {
            "total_protein": _current(existing, "total_protein") + macros.protein,
            "total_carbs": _current(existing, "total_carbs") + macros.carbs,
            "total_fat": _current(existing, "total_fat") + macros.fat,
            "total_calories": _current(existing, "total_calories") + macros.calories,
        }
        _logger.info(
            "Adding macros to daily log: user_id=%s day=%s calories=%s",
            user_id,
            target_day,
            macros.calories,
        )
        return self.upsert_log(user_id, target_day, updates)


def _today() -> date:
    return datetime.now(tz=UTC).date()


def _current(log: DailyNutritionLog | None, name: str) -> float:
    if log is None:
        return 0.0
    return getattr(log, name) or 0.0


def _as_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)  # type: ignore[arg-type]
