"""Trainee progress statistics."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from typing import Protocol
from uuid import UUID

from fitlog.domain.workouts import TraineeStatistics, WeightDataPoint, WorkoutLog
from fitlog.services.csv_export import CsvValue, create_csv_row

TIME_FILTERS = ("week", "month", "all")
RECENT_WEIGHT_COUNT = 7

_DETAIL_HEADERS = (
    "תאריך",
    "רוטינה",
    "תרגיל",
    "סט",
    'משקל (ק"ג)',
    "חזרות",
    "RIR",
    'נפח (ק"ג)',
    "הערות",
)


class WorkoutLogRepository(Protocol):
    """Persistence interface for workout history."""

    def list_workout_logs(
        self, user_id: UUID, start_date: date | None = None
    ) -> list[WorkoutLog]:
        """Return workout logs with set logs from start_date on, newest first."""

    def list_body_weights(self, user_id: UUID) -> list[tuple[date, float]]:
        """Return (date, weight) rows with a recorded weight, newest first."""

    def get_active_plan_name(self, user_id: UUID) -> str | None:
        """Return the name of the trainee's active workout plan, if any."""

@dataclass(frozen=True)
class WorkoutStats:
    """Workout counts and volume for a period."""

    total_workouts: int
    workouts_this_week: int
    workouts_this_month: int
    total_volume: float


def calculate_workout_stats(
    logs: list[WorkoutLog], time_filter: str = "all", now: datetime | None = None
) -> WorkoutStats:
    """Count completed workouts and total volume (weight x reps)."""
    current = now or datetime.now(tz=UTC)
    week_ago = current - timedelta(days=7)
    month_ago = current - timedelta(days=30)

    filtered = logs
    if time_filter == "week":
        filtered = [log for log in logs if _start_of(log.day) >= week_ago]
    elif time_filter == "month":
        filtered = [log for log in logs if _start_of(log.day) >= month_ago]

    completed = [log for log in filtered if log.completed]
    total_volume = 0.0
    for log in completed:
        total_volume += _volume(log)

    return WorkoutStats(
        total_workouts=len(completed),
        workouts_this_week=sum(
            1 for log in completed if _start_of(log.day) >= week_ago
        ),
        workouts_this_month=sum(
            1 for log in completed if _start_of(log.day) >= month_ago
        ),
        total_volume=total_volume,
    )


def calculate_weight_stats(
    history: list[WeightDataPoint],
) -> tuple[float | None, float | None]:
    """Return (average of the latest measurements, newest minus oldest)."""
    if not history:
        return None, None
    recent = history[:RECENT_WEIGHT_COUNT]
    average = sum(point.weight for point in recent) / len(recent)
    change = None
    if len(history) >= 2:  # noqa: PLR2004
        change = history[0].weight - history[-1].weight
    return average, change


def calculate_trainee_stats(
    logs: list[WorkoutLog],
    history: list[WeightDataPoint],
    time_filter: str = "all",
    now: datetime | None = None,
) -> TraineeStatistics:
    """Combine workout and weight statistics."""
    workout = calculate_workout_stats(logs, time_filter, now=now)
    average_weight, weight_change = calculate_weight_stats(history)
    return TraineeStatistics(
        total_workouts=workout.total_workouts,
        workouts_this_week=workout.workouts_this_week,
        workouts_this_month=workout.workouts_this_month,
        total_volume=workout.total_volume,
        average_weight=average_weight,
        weight_change=weight_change,
    )


@dataclass
class TraineeStatsService:
    """Service that loads workout history and computes progress."""

    repository: WorkoutLogRepository

    def get_weight_history(self, user_id: UUID) -> list[WeightDataPoint]:
        """Return the latest weight per day, newest first."""
        latest: dict[date, float] = {}
        for day, weight in self.repository.list_body_weights(user_id):
            if weight and day not in latest:
                latest[day] = weight
        points = [
            WeightDataPoint(day=day, weight=weight) for day, weight in latest.items()
        ]
        return sorted(points, key=lambda point: point.day, reverse=True)

    def get_statistics(
        self,
        user_id: UUID,
        time_filter: str = "all",
        history: list[WeightDataPoint] | None = None,
        now: datetime | None = None,
    ) -> TraineeStatistics:
        """Return progress statistics, reusing an already loaded weight history."""
        current = now or datetime.now(tz=UTC)
        logs = self.repository.list_workout_logs(
            user_id, start_date=filter_start_date(time_filter, current)
        )
        if history is None:
            history = self.get_weight_history(user_id)
        return calculate_trainee_stats(logs, history, time_filter, now=current)

    def export_report(
        self, user_id: UUID, time_filter: str = "all", now: datetime | None = None
    ) -> str:
        """Return the detailed workout report as CSV content.

        The report opens with a summary block, then lists every set of the
        completed workouts and finally the body weight history.
        """
        current = now or datetime.now(tz=UTC)
        logs = self.repository.list_workout_logs(
            user_id, start_date=filter_start_date(time_filter, current)
        )
        history = self.get_weight_history(user_id)
        stats = calculate_trainee_stats(logs, history, time_filter, now=current)
        plan_name = self.repository.get_active_plan_name(user_id)
        completed = [log for log in logs if log.completed]

        rows: list[list[CsvValue]] = _summary_rows(stats, plan_name, completed)
        rows.append([])
        rows.append(["פירוט אימונים:"])
        rows.append(list(_DETAIL_HEADERS))
        for log in completed:
            rows.extend(_detail_rows(log))
        if history:
            rows.append([])
            rows.append(["היסטוריית משקל:"])
            rows.append(["תאריך", 'משקל (ק"ג)'])
            rows.extend(
                [point.day.isoformat(), f"{point.weight:.1f}"] for point in history
            )
        return "\n".join(create_csv_row(row) for row in rows)


def filter_start_date(time_filter: str, now: datetime) -> date | None:
    """Return the first date a time filter includes, or None for all history."""
    if time_filter not in TIME_FILTERS:
        raise ValueError(f"Unknown time filter: {time_filter}")
    if time_filter == "week":
        return (now - timedelta(days=7)).date()
    if time_filter == "month":
        return (now - timedelta(days=30)).date()
    return None


def _summary_rows(
    stats: TraineeStatistics, plan_name: str | None, completed: list[WorkoutLog]
) -> list[list[CsvValue]]:
    last_workout = max((log.day for log in completed), default=None)
    return [
        ["דוח מפורט"],
        ["תוכנית: " + (plan_name or "אין תוכנית")],
        ["סטטוס: " + ("פעיל" if plan_name else "לא פעיל")],
        [f'אימונים (סה"כ): {stats.total_workouts}'],
        [f"אימונים (שבוע): {stats.workouts_this_week}"],
        [f"אימונים (חודש): {stats.workouts_this_month}"],
        ["משקל ממוצע: " + _kg(stats.average_weight)],
        ["שינוי משקל: " + _kg(stats.weight_change, signed=True)],
        [f'נפח כולל: {stats.total_volume:.0f} ק"ג'],
        [
            "אימון אחרון: "
            + (last_workout.strftime("%d.%m.%Y") if last_workout else "אין")
        ],
    ]


def _detail_rows(log: WorkoutLog) -> list[list[CsvValue]]:
    routine = log.routine_name or "ללא רוטינה"
    if not log.set_logs:
        return [[log.day.isoformat(), routine, "", "", "", "", "", "", ""]]
    rows: list[list[CsvValue]] = []
    for index, set_log in enumerate(log.set_logs, start=1):
        weight = set_log.weight_kg or 0
        reps = set_log.reps or 0
        rows.append(
            [
                log.day.isoformat(),
                routine,
                set_log.exercise_name or "תרגיל לא ידוע",
                set_log.set_number or index,
                weight,
                reps,
                set_log.rir_actual if set_log.rir_actual is not None else "",
                f"{weight * reps:.1f}",
                set_log.notes or "",
            ]
        )
    return rows


def _kg(value: float | None, signed: bool = False) -> str:
    if not value:
        return "אין"
    sign = "+" if signed and value > 0 else ""
    return f'{sign}{value:.1f} ק"ג'


def _start_of(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=UTC)


def _volume(log: WorkoutLog) -> float:
    return sum(
        (
            set_log.weight_kg * set_log.reps
            for set_log in log.set_logs
            if set_log.weight_kg and set_log.reps
        ),
        0.0,
    )
