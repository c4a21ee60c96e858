"""Growth report synthesis: weekly trends, consistency and advice."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date, timedelta

from weaning_tracker.domain.analysis import (
    AnalysisPolicy,
    FoodDiversityAnalysis,
    GrowthReport,
    NutritionTrends,
    PeriodAnalysis,
    WeeklyProgress,
    WeeklyProgressSummary,
)
from weaning_tracker.domain.meals import MealRecord
from weaning_tracker.domain.nutrition import NUTRIENT_LABELS, NUTRIENT_NAMES
from weaning_tracker.domain.reference import AgeRecommendation
from weaning_tracker.services.analysis import (
    analyze_diversity_records,
    analyze_period_records,
)
from weaning_tracker.services.meals import MealRecordRepository, meals_between
from weaning_tracker.services.nutrition import round_half_up
from weaning_tracker.services.periods import ReportPeriod, resolve_period
from weaning_tracker.services.profiles import ProfileRepository
from weaning_tracker.services.recommendations import (
    age_in_months,
    lookup_recommendation,
)

_logger = logging.getLogger(__name__)

RECORDING_REMINDER = (
    "食事記録をより継続的に行いましょう。毎日の記録が栄養管理に重要です。"
)
DEFICIENCY_ADVICE = "{nutrients}が不足気味です。これらを多く含む食材を増やしてみましょう。"
DIVERSITY_ADVICE = "食材の種類を増やして、栄養バランスを向上させましょう。"
NEW_FOOD_ADVICE = "新しい食材を少しずつ導入して、食の幅を広げてみましょう。"


@dataclass
class GrowthReportService:
    """Builds growth reports for the active profile."""

    meal_repository: MealRecordRepository
    profile_repository: ProfileRepository
    clock: Callable[[], date] = date.today
    policy: AnalysisPolicy = field(default_factory=AnalysisPolicy)

    def generate_report(
        self,
        period: ReportPeriod | str,
        custom_range: tuple[date | str, date | str] | None = None,
        as_of: date | None = None,
    ) -> GrowthReport | None:
        """Return a report for the period, or None when no profile exists."""
        profile = self.profile_repository.get_active_profile()
        if profile is None:
            _logger.info("Growth report skipped: no active profile")
            return None

        today = as_of or self.clock()
        start, end = resolve_period(period, today, custom_range)
        age_months = age_in_months(profile.birth_date, today)
        recommendation = lookup_recommendation(age_months)
        meals = self.meal_repository.list_all_meal_records()

        period_analysis = analyze_period_records(
            meals, start, end, recommendation, self.policy
        )
        diversity_analysis = analyze_diversity_records(meals, start, end, self.policy)
        trends = analyze_trends(meals, start, end, recommendation, self.policy)
        recommendations = build_recommendations(
            period_analysis, diversity_analysis, self.policy
        )
        _logger.info(
            "Generated %s report %s..%s: recorded=%s/%s consistency=%s%%",
            ReportPeriod(period).value,
            start,
            end,
            period_analysis.recorded_days,
            period_analysis.total_days,
            trends.consistency_score,
        )
        return GrowthReport(
            profile=profile,
            current_age_months=age_months,
            period_analysis=period_analysis,
            diversity_analysis=diversity_analysis,
            trends=trends,
            recommendations=recommendations,
        )

    def active_recommendation(
        self, as_of: date | None = None
    ) -> AgeRecommendation | None:
        """Return the recommendation for the active profile's current age."""
        profile = self.profile_repository.get_active_profile()
        if profile is None:
            return None
        return lookup_recommendation(
            age_in_months(profile.birth_date, as_of or self.clock())
        )


def weekly_progress(
    meals: list[MealRecord],
    start: date,
    end: date,
    recommendation: AgeRecommendation | None,
    policy: AnalysisPolicy,
) -> list[WeeklyProgress]:
    """Split a period into fixed-length windows and analyse each one."""
    weeks: list[WeeklyProgress] = []
    window_start = start
    while window_start <= end:
        window_end = min(window_start + timedelta(days=policy.window_days - 1), end)
        analysis = analyze_period_records(
            meals, window_start, window_end, recommendation, policy
        )
        weeks.append(
            WeeklyProgress(
                label=f"週{len(weeks) + 1}",
                start_date=window_start,
                end_date=window_end,
                average_nutrition=analysis.average_nutrition,
                achievement_rate=overall_achievement_rate(analysis.achievement_rates),
            )
        )
        window_start += timedelta(days=policy.window_days)
    return weeks


def analyze_trends(
    meals: list[MealRecord],
    start: date,
    end: date,
    recommendation: AgeRecommendation | None,
    policy: AnalysisPolicy,
) -> NutritionTrends:
    """Compare the first and last windows and score recording consistency."""
    weeks = weekly_progress(meals, start, end, recommendation, policy)
    improving: list[str] = []
    declining: list[str] = []
    if len(weeks) >= 2:  # noqa: PLR2004
        first = weeks[0].average_nutrition
        last = weeks[-1].average_nutrition
        for nutrient in NUTRIENT_NAMES:
            change = last.value(nutrient) - first.value(nutrient)
            if change > 0:
                improving.append(nutrient)
            elif change < 0:
                declining.append(nutrient)

    total_days = (end - start).days + 1
    recorded_dates = {meal.date for meal in meals_between(meals, start, end)}
    consistency = (
        round_half_up(len(recorded_dates) / total_days * 100) if total_days > 0 else 0
    )
    return NutritionTrends(
        weekly_progress=weeks,
        improving_nutrients=improving,
        declining_nutrients=declining,
        consistency_score=consistency,
    )


def build_recommendations(
    period_analysis: PeriodAnalysis,
    diversity_analysis: FoodDiversityAnalysis,
    policy: AnalysisPolicy,
) -> list[str]:
    """Coaching messages for every condition that applies, in a fixed order."""
    recommendations: list[str] = []
    if _recorded_ratio(period_analysis) < policy.recording_rate_threshold_percent:
        recommendations.append(RECORDING_REMINDER)
    if period_analysis.deficient_nutrients:
        names = "、".join(
            NUTRIENT_LABELS[nutrient]
            for nutrient in period_analysis.deficient_nutrients
        )
        recommendations.append(DEFICIENCY_ADVICE.format(nutrients=names))
    if len(diversity_analysis.unique_food_names) < policy.min_unique_foods:
        recommendations.append(DIVERSITY_ADVICE)
    if not diversity_analysis.new_foods_introduced:
        recommendations.append(NEW_FOOD_ADVICE)
    return recommendations


def overall_achievement_rate(rates: dict[str, int]) -> int:
    """Mean of the per-nutrient rates, rounded half up."""
    if not rates:
        return 0
    return round_half_up(sum(rates.values()) / len(rates))


def recording_rate(period_analysis: PeriodAnalysis) -> int:
    """Percentage of days in the period that have a meal, rounded half up."""
    return round_half_up(_recorded_ratio(period_analysis))


def summarize_weekly_progress(weeks: list[WeeklyProgress]) -> WeeklyProgressSummary:
    """Average and highest weekly achievement rate."""
    if not weeks:
        return WeeklyProgressSummary(average_rate=0, max_rate=0)
    rates = [week.achievement_rate for week in weeks]
    return WeeklyProgressSummary(
        average_rate=round_half_up(sum(rates) / len(rates)),
        max_rate=max(rates),
    )


def _recorded_ratio(period_analysis: PeriodAnalysis) -> float:
    if period_analysis.total_days <= 0:
        return 0.0
    return period_analysis.recorded_days / period_analysis.total_days * 100
