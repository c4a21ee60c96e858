"""FastAPI application factory."""

import logging
from datetime import date

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from weaning_tracker.api.models import GrowthReportRequest
from weaning_tracker.app_logging import configure_logging
from weaning_tracker.containers import AppContainer
from weaning_tracker.domain.errors import InvalidInputError
from weaning_tracker.services.nutrition import (
    compare_with_recommendation,
    daily_total,
)
from weaning_tracker.services.recommendations import (
    lookup_recommendation,
    weaning_stage,
)
from weaning_tracker.services.reports import (
    overall_achievement_rate,
    recording_rate,
    summarize_weekly_progress,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(InvalidInputError)
    async def invalid_input(_request: Request, exc: InvalidInputError) -> JSONResponse:
        logger.warning("Rejected invalid input: %s", exc)
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/analysis/period")
    async def analyze_period(
        start_date: date, end_date: date, request: Request
    ) -> dict[str, object]:
        """Nutrition over a range against the active profile's target."""
        state_container: AppContainer = request.app.state.container
        recommendation = state_container.report_service.active_recommendation()
        analysis = state_container.analysis_service.analyze_period(
            start_date, end_date, recommendation
        )
        return {
            "analysis": analysis,
            "overall_achievement_rate": overall_achievement_rate(
                analysis.achievement_rates
            ),
            "recording_rate": recording_rate(analysis),
        }

    @app.get("/analysis/diversity")
    async def analyze_diversity(
        start_date: date, end_date: date, request: Request
    ) -> dict[str, object]:
        """Food variety over a range."""
        state_container: AppContainer = request.app.state.container
        return {
            "diversity": state_container.analysis_service.analyze_diversity(
                start_date, end_date
            )
        }

    @app.get("/meals/{day}/nutrition")
    async def day_nutrition(day: date, request: Request) -> dict[str, object]:
        """One day's meals totalled and compared with the target."""
        state_container: AppContainer = request.app.state.container
        meals = state_container.meal_record_repository.list_meal_records_for_date(day)
        total = daily_total(meals)
        recommendation = state_container.report_service.active_recommendation(as_of=day)
        comparison = (
            compare_with_recommendation(total, recommendation.nutrition)
            if recommendation
            else None
        )
        return {
            "date": day,
            "meal_count": len(meals),
            "meal_types": [meal.meal_type.value for meal in meals],
            "total_nutrition": total,
            "comparison": comparison,
        }

    @app.get("/recommendations/{age_months}")
    async def recommendation_for_age(age_months: int) -> dict[str, object]:
        """Targets and weaning stage for an age in months."""
        return {
            "recommendation": lookup_recommendation(age_months),
            "stage": weaning_stage(age_months),
        }

    @app.post("/reports/growth")
    async def growth_report(
        body: GrowthReportRequest, request: Request
    ) -> dict[str, object]:
        """Growth report for the active profile."""
        state_container: AppContainer = request.app.state.container
        report = state_container.report_service.generate_report(
            body.period, custom_range=body.custom_range(), as_of=body.as_of
        )
        if report is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="No active profile"
            )
        return {
            "report": report,
            "overall_achievement_rate": overall_achievement_rate(
                report.period_analysis.achievement_rates
            ),
            "recording_rate": recording_rate(report.period_analysis),
            "weekly_summary": summarize_weekly_progress(
                report.trends.weekly_progress
            ),
        }

    return app
