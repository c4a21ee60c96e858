"""Period nutrition and food diversity analysis."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import date, timedelta

from weaning_tracker.domain.analysis import (
    AnalysisPolicy,
    DailyNutritionRecord,
    FoodCount,
    FoodDiversityAnalysis,
    PeriodAnalysis,
)
from weaning_tracker.domain.meals import MealRecord
from weaning_tracker.domain.nutrition import (
    NUTRIENT_NAMES,
    NutrientVector,
    average_nutrients,
)
from weaning_tracker.domain.reference import (
    AgeRecommendation,
    FoodCategory,
    get_foods_by_category,
)
from weaning_tracker.services.meals import (
    MealRecordRepository,
    group_by_date,
    meals_between,
)
from weaning_tracker.services.nutrition import (
    MAX_RATE,
    achievement_ratio,
    daily_total,
    round_half_up,
)
from weaning_tracker.services.periods import date_range, parse_iso_date, period_label

_logger = logging.getLogger(__name__)


@dataclass
class NutritionAnalysisService:
    """Analyses stored meals over date ranges."""

    repository: MealRecordRepository
    policy: AnalysisPolicy = field(default_factory=AnalysisPolicy)

    def analyze_period(
        self,
        start_date: date | str,
        end_date: date | str,
        recommendation: AgeRecommendation | None = None,
    ) -> PeriodAnalysis:
        """Average daily nutrition over a range and compare it with a target."""
        start = parse_iso_date(start_date)
        end = parse_iso_date(end_date)
        meals = self.repository.list_all_meal_records()
        return analyze_period_records(meals, start, end, recommendation, self.policy)

    def analyze_diversity(
        self, start_date: date | str, end_date: date | str
    ) -> FoodDiversityAnalysis:
        """Summarise which foods were eaten over a range."""
        start = parse_iso_date(start_date)
        end = parse_iso_date(end_date)
        meals = self.repository.list_all_meal_records()
        return analyze_diversity_records(meals, start, end, self.policy)


def analyze_period_records(
    meals: list[MealRecord],
    start: date,
    end: date,
    recommendation: AgeRecommendation | None,
    policy: AnalysisPolicy,
) -> PeriodAnalysis:
    """Build a period analysis from a snapshot of meal records."""
    meals_by_date = group_by_date(meals_between(meals, start, end))
    daily_analysis = []
    for day in date_range(start, end):
        day_meals = meals_by_date.get(day, [])
        daily_analysis.append(
            DailyNutritionRecord(
                date=day,
                nutrition=daily_total(day_meals),
                meal_count=len(day_meals),
                has_record=bool(day_meals),
            )
        )

    recorded = [day.nutrition for day in daily_analysis if day.has_record]
    average = average_nutrients(recorded)
    recommended = recommendation.nutrition if recommendation else None
    rates = achievement_rates(average, recommended)
    deficient = (
        [
            nutrient
            for nutrient in NUTRIENT_NAMES
            if rates[nutrient] < policy.deficiency_threshold_percent
        ]
        if recommended is not None
        else []
    )
    _logger.debug(
        "Analyzed period %s..%s: days=%s recorded=%s deficient=%s",
        start,
        end,
        len(daily_analysis),
        len(recorded),
        deficient,
    )
    return PeriodAnalysis(
        period=period_label(start, end),
        start_date=start,
        end_date=end,
        total_days=len(daily_analysis),
        recorded_days=len(recorded),
        average_nutrition=average,
        recommended_nutrition=recommended,
        achievement_rates=rates,
        deficient_nutrients=deficient,
        daily_analysis=daily_analysis,
    )


def achievement_rates(
    actual: NutrientVector, recommended: NutrientVector | None
) -> dict[str, int]:
    """Per-nutrient percentages of the target, rounded half up and capped."""
    if recommended is None:
        return dict.fromkeys(NUTRIENT_NAMES, 0)
    return {
        nutrient: _rounded_rate(actual.value(nutrient), recommended.value(nutrient))
        for nutrient in NUTRIENT_NAMES
    }


def _rounded_rate(actual: float, recommended: float) -> int:
    return max(0, min(MAX_RATE, round_half_up(achievement_ratio(actual, recommended))))


def analyze_diversity_records(
    meals: list[MealRecord],
    start: date,
    end: date,
    policy: AnalysisPolicy,
) -> FoodDiversityAnalysis:
    """Build a food diversity analysis from a snapshot of meal records."""
    period_meals = sorted(meals_between(meals, start, end), key=lambda m: m.date)
    eaten = [food.name for meal in period_meals for food in meal.foods]
    unique_names = list(dict.fromkeys(eaten))

    counts = Counter(eaten)
    ranked = sorted(unique_names, key=lambda name: counts[name], reverse=True)
    top_foods = [
        FoodCount(name=name, count=counts[name])
        for name in ranked[: policy.top_foods_limit]
    ]

    previous_end = start - timedelta(days=1)
    previous_start = previous_end - (end - start)
    previous_names = {
        food.name
        for meal in meals_between(meals, previous_start, previous_end)
        for food in meal.foods
    }
    new_foods = [name for name in unique_names if name not in previous_names]

    return FoodDiversityAnalysis(
        period=period_label(start, end),
        total_food_instances=len(eaten),
        unique_food_names=unique_names,
        category_distribution=category_distribution(counts),
        top_foods=top_foods,
        new_foods_introduced=new_foods,
    )


def category_distribution(counts: Counter[str]) -> dict[str, int]:
    """Food instances per reference category; foods outside the table are skipped."""
    return {
        category.value: sum(
            counts[food.name] for food in get_foods_by_category(category)
        )
        for category in FoodCategory
    }
