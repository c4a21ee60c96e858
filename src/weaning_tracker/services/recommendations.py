"""Age-based recommendation lookup."""

from dataclasses import replace
from datetime import date

from weaning_tracker.domain.profiles import WeaningStage
from weaning_tracker.domain.reference import AGE_RECOMMENDATIONS, AgeRecommendation

WEANING_START_MONTHS = 5


def lookup_recommendation(age_months: int) -> AgeRecommendation | None:
    """Return the targets for an age, or None before weaning starts."""
    if age_months < WEANING_START_MONTHS:
        return None
    for recommendation in reversed(AGE_RECOMMENDATIONS):
        if age_months >= recommendation.age_months:
            return replace(recommendation, age_months=age_months)
    return None


def age_in_months(birth_date: date, as_of: date) -> int:
    """Whole calendar months elapsed since birth; 0 for future birth dates."""
    if birth_date > as_of:
        return 0
    months = (as_of.year - birth_date.year) * 12 + (as_of.month - birth_date.month)
    if as_of.day < birth_date.day:
        months -= 1
    return max(0, months)


def weaning_stage(age_months: int) -> WeaningStage:
    """Describe the weaning stage for an age in months."""
    if age_months < WEANING_START_MONTHS:
        return WeaningStage(
            age_months=age_months,
            stage="離乳食前",
            description="離乳食開始前（5ヶ月未満）",
            meals_per_day=0,
        )
    recommendation = lookup_recommendation(age_months)
    meals_per_day = recommendation.meals_per_day if recommendation else 0
    if age_months <= 6:  # noqa: PLR2004
        stage, description = "初期", "離乳食初期（5-6ヶ月）"
    elif age_months <= 8:  # noqa: PLR2004
        stage, description = "中期", "離乳食中期（7-8ヶ月）"
    elif age_months <= 11:  # noqa: PLR2004
        stage, description = "後期", "離乳食後期（9-11ヶ月）"
    else:
        stage, description = "完了期", "離乳食完了期（12ヶ月以降）"
    return WeaningStage(
        age_months=age_months,
        stage=stage,
        description=description,
        meals_per_day=meals_per_day,
    )
