"""Dependency container wiring for the application."""

from dataclasses import dataclass
from functools import partial

from supabase import create_client

from weaning_tracker.adapters.supabase_meal_record_repository import (
    SupabaseMealRecordRepository,
)
from weaning_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from weaning_tracker.config import Settings, analysis_policy, local_today
from weaning_tracker.services.analysis import NutritionAnalysisService
from weaning_tracker.services.meals import MealRecordRepository
from weaning_tracker.services.profiles import ProfileRepository
from weaning_tracker.services.reports import GrowthReportService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    meal_record_repository: MealRecordRepository
    profile_repository: ProfileRepository
    analysis_service: NutritionAnalysisService
    report_service: GrowthReportService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    meal_record_repository = SupabaseMealRecordRepository(supabase_client)
    profile_repository = SupabaseProfileRepository(supabase_client)
    policy = analysis_policy(resolved_settings)
    analysis_service = NutritionAnalysisService(
        repository=meal_record_repository,
        policy=policy,
    )
    report_service = GrowthReportService(
        meal_repository=meal_record_repository,
        profile_repository=profile_repository,
        clock=partial(local_today, resolved_settings.timezone),
        policy=policy,
    )
    return AppContainer(
        settings=resolved_settings,
        meal_record_repository=meal_record_repository,
        profile_repository=profile_repository,
        analysis_service=analysis_service,
        report_service=report_service,
    )
