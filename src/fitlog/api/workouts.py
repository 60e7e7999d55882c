"""Workout endpoints: in-progress backup and trainee progress."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from fitlog.api.auth import require_token
from fitlog.api.models import WorkoutBackupPayload
from fitlog.services.csv_export import encode_csv

if TYPE_CHECKING:
    from fitlog.containers import AppContainer
    from fitlog.domain.workouts import TraineeStatistics

router = APIRouter(tags=["workouts"], dependencies=[Depends(require_token)])


@router.put("/workouts/backup/{user_id}")
async def save_backup(
    user_id: UUID, payload: WorkoutBackupPayload, request: Request
) -> dict[str, object]:
    """Store the in-progress workout."""
    container: AppContainer = request.app.state.container
    saved = container.workout_backup_service.save(
        user_id, payload.sets, payload.routine_id, payload.exercise_ids
    )
    return {"saved": saved}


@router.get("/workouts/backup/{user_id}")
async def load_backup(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the in-progress workout, if still fresh."""
    container: AppContainer = request.app.state.container
    backup = container.workout_backup_service.load(user_id)
    if backup is None:
        return {"backup": None}
    return {"backup": backup.model_dump(mode="json", by_alias=True)}


@router.delete("/workouts/backup/{user_id}")
async def clear_backup(user_id: UUID, request: Request) -> dict[str, str]:
    """Discard the in-progress workout."""
    container: AppContainer = request.app.state.container
    container.workout_backup_service.clear(user_id)
    return {"status": "ok"}


@router.get("/trainees/{user_id}/stats")
async def trainee_stats(
    user_id: UUID, request: Request, time_filter: str = "all"
) -> dict[str, object]:
    """Return progress statistics for a trainee."""
    container: AppContainer = request.app.state.container
    service = container.trainee_stats_service
    try:
        history = service.get_weight_history(user_id)
        stats = service.get_statistics(user_id, time_filter, history=history)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return {
        "stats": _serialize_stats(stats),
        "weight_history": [
            {"date": point.day.isoformat(), "weight": point.weight} for point in history
        ],
    }


@router.get("/trainees/{user_id}/report.csv")
async def trainee_report(
    user_id: UUID, request: Request, time_filter: str = "all"
) -> Response:
    """Download the detailed workout report as CSV."""
    container: AppContainer = request.app.state.container
    try:
        content = container.trainee_stats_service.export_report(user_id, time_filter)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return Response(
        content=encode_csv(content),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="report-{user_id}.csv"'},
    )


def _serialize_stats(stats: TraineeStatistics) -> dict[str, object]:
    return {
        "total_workouts": stats.total_workouts,
        "workouts_this_week": stats.workouts_this_week,
        "workouts_this_month": stats.workouts_this_month,
        "total_volume": stats.total_volume,
        "average_weight": stats.average_weight,
        "weight_change": stats.weight_change,
    }
