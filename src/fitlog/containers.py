"""Dependency container wiring for the application."""

from dataclasses import dataclass
from datetime import timedelta

from supabase import create_client

from fitlog.adapters.supabase_daily_nutrition_repository import (
    SupabaseDailyNutritionRepository,
)
from fitlog.adapters.supabase_swap_repository import SupabaseSwapRepository
from fitlog.adapters.supabase_workout_repository import SupabaseWorkoutRepository
from fitlog.config import Settings
from fitlog.services.daily_nutrition import DailyNutritionService
from fitlog.services.swaps import SwapService
from fitlog.services.trainee_stats import TraineeStatsService
from fitlog.services.workout_backup import InMemoryBackupStore, WorkoutBackupService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    swap_service: SwapService
    daily_nutrition_service: DailyNutritionService
    workout_backup_service: WorkoutBackupService
    trainee_stats_service: TraineeStatsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    return AppContainer(
        settings=resolved_settings,
        swap_service=SwapService(SupabaseSwapRepository(supabase_client)),
        daily_nutrition_service=DailyNutritionService(
            SupabaseDailyNutritionRepository(supabase_client)
        ),
        workout_backup_service=WorkoutBackupService(
            store=InMemoryBackupStore(),
            max_age=timedelta(hours=resolved_settings.workout_backup_max_age_hours),
        ),
        trainee_stats_service=TraineeStatsService(
            SupabaseWorkoutRepository(supabase_client)
        ),
    )
