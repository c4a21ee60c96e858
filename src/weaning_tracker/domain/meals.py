"""Domain models for recorded meals."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from weaning_tracker.domain.nutrition import NutrientVector


class MealType(str, Enum):
    """Meal slot within a day, declared in display order."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


MEAL_TYPE_ORDER = tuple(MealType)


@dataclass(frozen=True)
class FoodConsumption:
    """A food eaten in a meal, with nutrition already scaled to the amount."""

    name: str
    amount_grams: float
    nutrition: NutrientVector


@dataclass(frozen=True)
class MealRecord:
    """A single recorded meal."""

    id: str
    date: date
    meal_type: MealType
    foods: tuple[FoodConsumption, ...] = ()
    notes: str = ""
