"""Read access to recorded meals."""

from collections import defaultdict
from collections.abc import Iterable
from datetime import date
from typing import Protocol

from weaning_tracker.domain.meals import MEAL_TYPE_ORDER, MealRecord


class MealRecordRepository(Protocol):
    """Persistence interface for meal records."""

    def list_all_meal_records(self) -> list[MealRecord]:
        """Return every stored meal record."""

    def list_meal_records_for_date(self, day: date) -> list[MealRecord]:
        """Return the meals of one day ordered by meal type."""


def sort_by_meal_type(meals: Iterable[MealRecord]) -> list[MealRecord]:
    """Order meals breakfast, lunch, dinner, snack; stable within a type."""
    return sorted(meals, key=lambda meal: MEAL_TYPE_ORDER.index(meal.meal_type))


def group_by_date(meals: Iterable[MealRecord]) -> dict[date, list[MealRecord]]:
    """Group meals by their date, keeping input order within a day."""
    grouped: dict[date, list[MealRecord]] = defaultdict(list)
    for meal in meals:
        grouped[meal.date].append(meal)
    return grouped


def meals_between(
    meals: Iterable[MealRecord], start: date, end: date
) -> list[MealRecord]:
    """Return meals dated within [start, end]."""
    return [meal for meal in meals if start <= meal.date <= end]
