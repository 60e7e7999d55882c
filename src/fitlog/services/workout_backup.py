"""Backup of in-progress workout data with expiry."""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol
from uuid import UUID

from pydantic import ValidationError

from fitlog.domain.workouts import BackupSet, WorkoutBackup

_logger = logging.getLogger(__name__)

DEFAULT_MAX_AGE = timedelta(hours=24)


class BackupStore(Protocol):
    """Key-value storage for serialized workout backups."""

    def get(self, key: str) -> str | None:
        """Return the stored payload, if present."""

    def set(self, key: str, value: str) -> None:
        """Store a payload."""

    def delete(self, key: str) -> None:
        """Remove a payload if present."""


@dataclass
class InMemoryBackupStore(BackupStore):
    """Process-local backup store."""

    _entries: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        """Return the stored payload, if present."""
        return self._entries.get(key)

    def set(self, key: str, value: str) -> None:
        """Store a payload."""
        self._entries[key] = value

    def delete(self, key: str) -> None:
        """Remove a payload if present."""
        self._entries.pop(key, None)


@dataclass
class WorkoutBackupService:
    """Saves and restores a trainee's in-progress workout."""

    store: BackupStore
    max_age: timedelta = DEFAULT_MAX_AGE

    def save(
        self,
        user_id: UUID,
        sets: dict[str, list[BackupSet]],
        routine_id: str | None,
        exercise_ids: list[str] | None = None,
    ) -> bool:
        """Store a backup when there are sets and a routine is selected."""
        if not sets or not routine_id:
            return False
        backup = WorkoutBackup(
            sets=sets,
            routine_id=routine_id,
            saved_at=datetime.now(tz=UTC),
            exercise_ids=list(exercise_ids or []),
        )
        self.store.set(_key(user_id), backup.model_dump_json(by_alias=True))
        return True

    def load(self, user_id: UUID) -> WorkoutBackup | None:
        """Return the backup unless it is missing, unreadable or expired."""
        raw = self.store.get(_key(user_id))
        if raw is None:
            return None
        try:
            backup = WorkoutBackup.model_validate_json(raw)
        except ValidationError as exc:
            _logger.warning(
                "Failed to load workout backup for user_id=%s (%d errors)",
                user_id,
                exc.error_count(),
            )
            return None
        if datetime.now(tz=UTC) - backup.saved_at > self.max_age:
            self.store.delete(_key(user_id))
            return None
        return backup

    def clear(self, user_id: UUID) -> None:
        """Remove the user's backup."""
        self.store.delete(_key(user_id))


def _key(user_id: UUID) -> str:
    return f"workout_backup:{user_id}"
