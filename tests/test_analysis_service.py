"""Tests for period nutrition analysis."""

from datetime import date

import pytest

from tests.fakes import InMemoryMealRecordRepository
from weaning_tracker.domain.errors import InvalidInputError
from weaning_tracker.domain.nutrition import NUTRIENT_NAMES, NutrientVector
from weaning_tracker.services.analysis import (
    NutritionAnalysisService,
    achievement_rates,
)
from weaning_tracker.services.recommendations import lookup_recommendation

SIX_MONTHS = lookup_recommendation(6)


def test_analyze_period_counts_days(analysis_service) -> None:
    result = analysis_service.analyze_period("2024-08-15", "2024-08-17", SIX_MONTHS)

    assert result.start_date == date(2024, 8, 15)
    assert result.end_date == date(2024, 8, 17)
    assert result.period == "2024-08-15 - 2024-08-17"
    assert result.total_days == 3
    assert result.recorded_days == 3


def test_analyze_period_averages_recorded_days(analysis_service) -> None:
    result = analysis_service.analyze_period("2024-08-15", "2024-08-17", SIX_MONTHS)

    average = result.average_nutrition
    assert average.protein == pytest.approx(1.562, abs=1e-2)
    assert average.carbs == pytest.approx(11.058, abs=1e-2)
    assert average.fat == pytest.approx(0.522, abs=1e-2)
    assert average.fiber == pytest.approx(0.825, abs=1e-2)
    assert average.iron == pytest.approx(0.222, abs=1e-2)
    assert average.calcium == pytest.approx(14.033, abs=1e-2)


def test_analyze_period_rates_and_deficiencies(analysis_service) -> None:
    result = analysis_service.analyze_period("2024-08-15", "2024-08-17", SIX_MONTHS)

    assert result.recommended_nutrition == NutrientVector(10, 50, 5, 3, 3, 200)
    assert result.achievement_rates == {
        "protein": 16,
        "carbs": 22,
        "fat": 10,
        "fiber": 27,
        "iron": 7,
        "calcium": 7,
    }
    assert result.deficient_nutrients == list(NUTRIENT_NAMES)


def test_analyze_period_includes_unrecorded_days(analysis_service) -> None:
    result = analysis_service.analyze_period("2024-08-15", "2024-08-20", SIX_MONTHS)

    assert result.total_days == 6
    assert result.recorded_days == 3
    assert len(result.daily_analysis) == 6
    for day in result.daily_analysis[3:]:
        assert day.has_record is False
        assert day.meal_count == 0
        assert day.nutrition == NutrientVector()
    assert result.daily_analysis[0].meal_count == 2


def test_analyze_period_without_recommendation(analysis_service) -> None:
    result = analysis_service.analyze_period("2024-08-15", "2024-08-17")

    assert result.recommended_nutrition is None
    assert result.achievement_rates == dict.fromkeys(NUTRIENT_NAMES, 0)
    assert result.deficient_nutrients == []


def test_analyze_period_without_records_flags_everything(analysis_service) -> None:
    result = analysis_service.analyze_period("2024-09-01", "2024-09-03", SIX_MONTHS)

    assert result.recorded_days == 0
    assert result.average_nutrition == NutrientVector()
    assert result.achievement_rates == dict.fromkeys(NUTRIENT_NAMES, 0)
    assert result.deficient_nutrients == list(NUTRIENT_NAMES)


def test_analyze_period_single_day(analysis_service) -> None:
    result = analysis_service.analyze_period("2024-08-16", "2024-08-16", SIX_MONTHS)

    assert result.total_days == 1
    assert result.recorded_days == 1
    assert result.average_nutrition.carbs == pytest.approx(9.0)


def test_analyze_period_inverted_range_is_empty(analysis_service) -> None:
    result = analysis_service.analyze_period("2024-08-17", "2024-08-15", SIX_MONTHS)

    assert result.total_days == 0
    assert result.daily_analysis == []
    assert result.recorded_days == 0


def test_day_count_matches_range_length(analysis_service) -> None:
    start = date(2024, 7, 30)
    for end in (date(2024, 7, 30), date(2024, 8, 2), date(2024, 8, 31)):
        result = analysis_service.analyze_period(start, end)
        expected = (end - start).days + 1
        assert result.total_days == expected
        assert len(result.daily_analysis) == expected


def test_analyze_period_rejects_malformed_dates(analysis_service) -> None:
    with pytest.raises(InvalidInputError):
        analysis_service.analyze_period("2024-13-01", "2024-08-17")
    with pytest.raises(InvalidInputError):
        analysis_service.analyze_period("2024-08-15", "yesterday")


def test_analyze_period_reads_store_each_call() -> None:
    repository = InMemoryMealRecordRepository()
    service = NutritionAnalysisService(repository)

    service.analyze_period("2024-08-15", "2024-08-17")
    service.analyze_period("2024-08-15", "2024-08-17")

    assert repository.reads == 2


def test_achievement_rates_are_capped_and_rounded_half_up() -> None:
    target = NutrientVector(10, 50, 5, 3, 3, 200)
    rates = achievement_rates(NutrientVector(50, 500, 0.035, 3, 0, 201), target)

    assert rates["protein"] == 100
    assert rates["carbs"] == 100
    assert rates["fat"] == 1
    assert rates["fiber"] == 100
    assert rates["iron"] == 0
    assert rates["calcium"] == 100
    assert all(0 <= rate <= 100 for rate in rates.values())


def test_achievement_rates_round_halves_up() -> None:
    target = NutrientVector(10, 50, 5, 3, 3, 200)

    rates = achievement_rates(NutrientVector(calcium=1, protein=0.25), target)

    assert rates["calcium"] == 1
    assert rates["protein"] == 3
