"""Shared test fixtures."""

from datetime import date

import pytest

from tests.fakes import (
    InMemoryMealRecordRepository,
    InMemoryProfileRepository,
    sample_meals,
    sample_profile,
)
from weaning_tracker.config import Settings
from weaning_tracker.containers import AppContainer
from weaning_tracker.services.analysis import NutritionAnalysisService
from weaning_tracker.services.reports import GrowthReportService

TODAY = date(2024, 8, 17)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def meal_repository() -> InMemoryMealRecordRepository:
    return InMemoryMealRecordRepository(records=sample_meals())


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository(profile=sample_profile())


@pytest.fixture
def analysis_service(
    meal_repository: InMemoryMealRecordRepository,
) -> NutritionAnalysisService:
    return NutritionAnalysisService(meal_repository)


@pytest.fixture
def report_service(
    meal_repository: InMemoryMealRecordRepository,
    profile_repository: InMemoryProfileRepository,
) -> GrowthReportService:
    return GrowthReportService(
        meal_repository=meal_repository,
        profile_repository=profile_repository,
        clock=lambda: TODAY,
    )


@pytest.fixture
def container(
    settings: Settings,
    meal_repository: InMemoryMealRecordRepository,
    profile_repository: InMemoryProfileRepository,
    analysis_service: NutritionAnalysisService,
    report_service: GrowthReportService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        meal_record_repository=meal_repository,
        profile_repository=profile_repository,
        analysis_service=analysis_service,
        report_service=report_service,
    )
