"""Derived analysis and report models."""

from dataclasses import dataclass
from datetime import date

from weaning_tracker.domain.errors import InvalidInputError
from weaning_tracker.domain.nutrition import NutrientVector
from weaning_tracker.domain.profiles import BabyProfile


@dataclass(frozen=True)
class AnalysisPolicy:
    """Thresholds used when judging intake and building reports."""

    deficiency_threshold_percent: int = 80
    recording_rate_threshold_percent: int = 70
    min_unique_foods: int = 5
    top_foods_limit: int = 10
    window_days: int = 7

    def __post_init__(self) -> None:
        if self.window_days <= 0:
            raise InvalidInputError("window_days must be positive")


@dataclass(frozen=True)
class DailyNutritionRecord:
    """Nutrition totals for one calendar day."""

    date: date
    nutrition: NutrientVector
    meal_count: int
    has_record: bool


@dataclass(frozen=True)
class PeriodAnalysis:
    """Averaged nutrition over a date range compared with a target."""

    period: str
    start_date: date
    end_date: date
    total_days: int
    recorded_days: int
    average_nutrition: NutrientVector
    recommended_nutrition: NutrientVector | None
    achievement_rates: dict[str, int]
    deficient_nutrients: list[str]
    daily_analysis: list[DailyNutritionRecord]


@dataclass(frozen=True)
class NutritionComparison:
    """Actual intake compared against a recommendation."""

    total_nutrition: NutrientVector
    recommended_nutrition: NutrientVector
    achievement_rates: dict[str, int]
    deficient_nutrients: list[str]


@dataclass(frozen=True)
class FoodCount:
    """How often a food was eaten."""

    name: str
    count: int


@dataclass(frozen=True)
class FoodDiversityAnalysis:
    """Variety of foods eaten over a date range."""

    period: str
    total_food_instances: int
    unique_food_names: list[str]
    category_distribution: dict[str, int]
    top_foods: list[FoodCount]
    new_foods_introduced: list[str]


@dataclass(frozen=True)
class WeeklyProgress:
    """Summary for one window of a report period."""

    label: str
    start_date: date
    end_date: date
    average_nutrition: NutrientVector
    achievement_rate: int


@dataclass(frozen=True)
class WeeklyProgressSummary:
    """Average and best weekly achievement rate."""

    average_rate: int
    max_rate: int


@dataclass(frozen=True)
class NutritionTrends:
    """Direction of intake across the weeks of a period."""

    weekly_progress: list[WeeklyProgress]
    improving_nutrients: list[str]
    declining_nutrients: list[str]
    consistency_score: int


@dataclass(frozen=True)
class GrowthReport:
    """Full report for the active profile."""

    profile: BabyProfile
    current_age_months: int
    period_analysis: PeriodAnalysis
    diversity_analysis: FoodDiversityAnalysis
    trends: NutritionTrends
    recommendations: list[str]
