"""Application configuration."""

import os
from datetime import date, datetime
from zoneinfo import ZoneInfo

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from weaning_tracker.domain.analysis import AnalysisPolicy

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    timezone: str = "Asia/Tokyo"
    deficiency_threshold_percent: int = Field(default=80, ge=0)
    recording_rate_threshold_percent: int = Field(default=70, ge=0)
    min_unique_foods: int = Field(default=5, ge=0)
    top_foods_limit: int = Field(default=10, ge=0)
    window_days: int = Field(default=7, gt=0)
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def analysis_policy(settings: Settings) -> AnalysisPolicy:
    """Build the analysis thresholds from settings."""
    return AnalysisPolicy(
        deficiency_threshold_percent=settings.deficiency_threshold_percent,
        recording_rate_threshold_percent=settings.recording_rate_threshold_percent,
        min_unique_foods=settings.min_unique_foods,
        top_foods_limit=settings.top_foods_limit,
        window_days=settings.window_days,
    )


def local_today(timezone_name: str) -> date:
    """Return today's date in the given timezone."""
    return datetime.now(tz=ZoneInfo(timezone_name)).date()
