"""Static reference data: basic weaning foods and age recommendations."""

from dataclasses import dataclass
from enum import Enum

from weaning_tracker.domain.nutrition import NutrientVector


class FoodCategory(str, Enum):
    """Food group of a basic food."""

    GRAIN = "grain"
    VEGETABLE = "vegetable"
    PROTEIN = "protein"
    FRUIT = "fruit"
    OTHER = "other"


@dataclass(frozen=True)
class BasicFood:
    """A reference food with its nutrient profile per 100g."""

    name: str
    category: FoodCategory
    nutrition_per_100g: NutrientVector


@dataclass(frozen=True)
class AgeRecommendation:
    """Daily targets for a child of a given age."""

    age_months: int
    meals_per_day: int
    nutrition: NutrientVector


BASIC_FOODS: tuple[BasicFood, ...] = (
    BasicFood(
        name="お粥",
        category=FoodCategory.GRAIN,
        nutrition_per_100g=NutrientVector(
            protein=1.5, carbs=16.0, fat=0.1, fiber=0.3, iron=0.1, calcium=3.0
        ),
    ),
    BasicFood(
        name="にんじん",
        category=FoodCategory.VEGETABLE,
        nutrition_per_100g=NutrientVector(
            protein=0.7, carbs=9.1, fat=0.2, fiber=2.8, iron=0.2, calcium=28.0
        ),
    ),
    BasicFood(
        name="かぼちゃ",
        category=FoodCategory.VEGETABLE,
        nutrition_per_100g=NutrientVector(
            protein=1.9, carbs=17.1, fat=0.3, fiber=4.1, iron=0.5, calcium=20.0
        ),
    ),
    BasicFood(
        name="ほうれん草",
        category=FoodCategory.VEGETABLE,
        nutrition_per_100g=NutrientVector(
            protein=2.2, carbs=3.1, fat=0.4, fiber=2.8, iron=2.0, calcium=49.0
        ),
    ),
    BasicFood(
        name="豆腐",
        category=FoodCategory.PROTEIN,
        nutrition_per_100g=NutrientVector(
            protein=6.6, carbs=1.6, fat=4.2, fiber=0.4, iron=0.9, calcium=86.0
        ),
    ),
    BasicFood(
        name="鶏ささみ",
        category=FoodCategory.PROTEIN,
        nutrition_per_100g=NutrientVector(
            protein=23.0, carbs=0.0, fat=0.8, fiber=0.0, iron=0.2, calcium=3.0
        ),
    ),
    BasicFood(
        name="白身魚",
        category=FoodCategory.PROTEIN,
        nutrition_per_100g=NutrientVector(
            protein=20.6, carbs=0.1, fat=0.3, fiber=0.0, iron=0.2, calcium=11.0
        ),
    ),
    BasicFood(
        name="バナナ",
        category=FoodCategory.FRUIT,
        nutrition_per_100g=NutrientVector(
            protein=1.1, carbs=22.5, fat=0.2, fiber=1.1, iron=0.3, calcium=6.0
        ),
    ),
    BasicFood(
        name="りんご",
        category=FoodCategory.FRUIT,
        nutrition_per_100g=NutrientVector(
            protein=0.2, carbs=14.6, fat=0.1, fiber=1.5, iron=0.1, calcium=3.0
        ),
    ),
    BasicFood(
        name="さつまいも",
        category=FoodCategory.OTHER,
        nutrition_per_100g=NutrientVector(
            protein=1.2, carbs=29.7, fat=0.2, fiber=3.5, iron=0.7, calcium=40.0
        ),
    ),
)

# Ordered by threshold; each entry applies from its age until the next one.
AGE_RECOMMENDATIONS: tuple[AgeRecommendation, ...] = (
    AgeRecommendation(
        age_months=5,
        meals_per_day=1,
        nutrition=NutrientVector(
            protein=10, carbs=50, fat=5, fiber=3, iron=3, calcium=200
        ),
    ),
    AgeRecommendation(
        age_months=7,
        meals_per_day=2,
        nutrition=NutrientVector(
            protein=15, carbs=80, fat=8, fiber=5, iron=4, calcium=300
        ),
    ),
    AgeRecommendation(
        age_months=9,
        meals_per_day=3,
        nutrition=NutrientVector(
            protein=20, carbs=100, fat=12, fiber=7, iron=5, calcium=400
        ),
    ),
    AgeRecommendation(
        age_months=12,
        meals_per_day=4,
        nutrition=NutrientVector(
            protein=25, carbs=120, fat=15, fiber=8, iron=6, calcium=450
        ),
    ),
)

_FOODS_BY_NAME = {food.name: food for food in BASIC_FOODS}


def get_food_by_name(name: str) -> BasicFood | None:
    """Return the reference food with this exact name."""
    return _FOODS_BY_NAME.get(name)


def get_foods_by_category(category: FoodCategory | str) -> list[BasicFood]:
    """Return reference foods in a category."""
    return [food for food in BASIC_FOODS if food.category == category]
