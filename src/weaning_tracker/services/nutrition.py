"""Food, meal and day nutrition calculations."""

import math

from weaning_tracker.domain.analysis import NutritionComparison
from weaning_tracker.domain.meals import FoodConsumption, MealRecord
from weaning_tracker.domain.nutrition import (
    NUTRIENT_NAMES,
    NutrientVector,
    scale_nutrients,
    sum_nutrients,
    zero_nutrients,
)
from weaning_tracker.domain.reference import get_food_by_name

MAX_RATE = 100


def food_nutrition(name: str, grams: float) -> NutrientVector:
    """Nutrition for an amount of a reference food; zero for unknown foods."""
    food = get_food_by_name(name)
    if food is None:
        return zero_nutrients()
    return scale_nutrients(food.nutrition_per_100g, grams)


def build_food_consumption(name: str, grams: float) -> FoodConsumption:
    """Create a food entry with nutrition scaled from the reference table."""
    return FoodConsumption(
        name=name, amount_grams=grams, nutrition=food_nutrition(name, grams)
    )


def meal_total(meal: MealRecord) -> NutrientVector:
    """Sum the nutrition of every food in a meal."""
    return sum_nutrients(food.nutrition for food in meal.foods)


def daily_total(meals: list[MealRecord]) -> NutrientVector:
    """Sum meal totals; callers pass meals from a single day."""
    return sum_nutrients(meal_total(meal) for meal in meals)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)


def achievement_ratio(actual: float, recommended: float) -> float:
    """Intake as a percentage of the target, before rounding."""
    if recommended <= 0:
        return 0.0
    return actual / recommended * 100


def compare_with_recommendation(
    actual: NutrientVector, recommended: NutrientVector
) -> NutritionComparison:
    """Compare a day's intake with its target using floor-rounded rates."""
    rates = {
        nutrient: _floor_rate(actual.value(nutrient), recommended.value(nutrient))
        for nutrient in NUTRIENT_NAMES
    }
    deficient = [
        nutrient
        for nutrient in NUTRIENT_NAMES
        if actual.value(nutrient) < recommended.value(nutrient)
    ]
    return NutritionComparison(
        total_nutrition=actual,
        recommended_nutrition=recommended,
        achievement_rates=rates,
        deficient_nutrients=deficient,
    )


def _floor_rate(actual: float, recommended: float) -> int:
    return max(0, min(MAX_RATE, math.floor(achievement_ratio(actual, recommended))))
