"""Tests for reference foods and age recommendations."""

from datetime import date

from weaning_tracker.domain.nutrition import NUTRIENT_NAMES
from weaning_tracker.domain.reference import (
    AGE_RECOMMENDATIONS,
    BASIC_FOODS,
    FoodCategory,
    get_food_by_name,
    get_foods_by_category,
)
from weaning_tracker.services.recommendations import (
    age_in_months,
    lookup_recommendation,
    weaning_stage,
)


def test_basic_food_table_has_ten_entries() -> None:
    assert len(BASIC_FOODS) == 10
    names = [food.name for food in BASIC_FOODS]
    assert names[:3] == ["お粥", "にんじん", "かぼちゃ"]
    assert len(set(names)) == 10


def test_food_lookup_by_name_and_category() -> None:
    tofu = get_food_by_name("豆腐")

    assert tofu is not None
    assert tofu.category is FoodCategory.PROTEIN
    assert tofu.nutrition_per_100g.calcium == 86.0
    assert get_food_by_name("チーズ") is None
    assert [food.name for food in get_foods_by_category("vegetable")] == [
        "にんじん",
        "かぼちゃ",
        "ほうれん草",
    ]


def test_lookup_before_weaning_returns_none() -> None:
    assert lookup_recommendation(0) is None
    assert lookup_recommendation(4) is None


def test_lookup_picks_highest_threshold_and_keeps_queried_age() -> None:
    expectations = {5: 1, 6: 1, 7: 2, 8: 2, 9: 3, 11: 3, 12: 4, 30: 4}

    for age, meals_per_day in expectations.items():
        recommendation = lookup_recommendation(age)
        assert recommendation is not None
        assert recommendation.meals_per_day == meals_per_day
        assert recommendation.age_months == age


def test_lookup_does_not_modify_table() -> None:
    lookup_recommendation(8)

    assert [tier.age_months for tier in AGE_RECOMMENDATIONS] == [5, 7, 9, 12]


def test_targets_increase_with_tier() -> None:
    for lower, higher in zip(AGE_RECOMMENDATIONS, AGE_RECOMMENDATIONS[1:]):
        for nutrient in NUTRIENT_NAMES:
            assert higher.nutrition.value(nutrient) > lower.nutrition.value(nutrient)


def test_age_in_months_counts_whole_months() -> None:
    birth = date(2024, 2, 16)

    assert age_in_months(birth, date(2024, 8, 16)) == 6
    assert age_in_months(birth, date(2024, 8, 15)) == 5
    assert age_in_months(birth, date(2025, 2, 16)) == 12
    assert age_in_months(birth, birth) == 0


def test_age_in_months_future_birth_is_zero() -> None:
    assert age_in_months(date(2025, 12, 31), date(2024, 8, 17)) == 0


def test_weaning_stage_by_age() -> None:
    assert weaning_stage(3).stage == "離乳食前"
    assert weaning_stage(3).meals_per_day == 0
    assert weaning_stage(6).stage == "初期"
    assert weaning_stage(8).meals_per_day == 2
    assert weaning_stage(10).stage == "後期"
    assert weaning_stage(14).stage == "完了期"
    assert weaning_stage(14).meals_per_day == 4
