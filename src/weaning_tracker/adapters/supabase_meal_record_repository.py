"""Supabase repository for meal records."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from weaning_tracker.domain.errors import InvalidInputError
from weaning_tracker.domain.meals import FoodConsumption, MealRecord, MealType
from weaning_tracker.domain.nutrition import NUTRIENT_NAMES, NutrientVector
from weaning_tracker.services.meals import MealRecordRepository, sort_by_meal_type
from weaning_tracker.services.periods import parse_iso_date

_COLUMNS = "id, date, meal_type, foods, notes"


@dataclass
class SupabaseMealRecordRepository(MealRecordRepository):
    """Supabase implementation for meal record reads."""

    client: Client

    def list_all_meal_records(self) -> list[MealRecord]:
        """Return every meal record ordered by date."""
        response = (
            self.client.table("meal_records")
            .select(_COLUMNS)
            .order("date", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def list_meal_records_for_date(self, day: date) -> list[MealRecord]:
        """Return one day's meals ordered by meal type."""
        response = (
            self.client.table("meal_records")
            .select(_COLUMNS)
            .eq("date", day.isoformat())
            .execute()
        )
        return sort_by_meal_type(_parse_row(row) for row in response.data or [])


def _parse_row(row: dict[str, object]) -> MealRecord:
    raw_meal_type = row.get("meal_type")
    try:
        meal_type = MealType(raw_meal_type)
    except ValueError as exc:
        raise InvalidInputError(f"Unknown meal type: {raw_meal_type!r}") from exc
    foods = row.get("foods") or []
    if not isinstance(foods, list):
        raise InvalidInputError(f"Malformed foods column: {foods!r}")
    return MealRecord(
        id=str(row.get("id", "")),
        date=parse_iso_date(row.get("date")),  # type: ignore[arg-type]
        meal_type=meal_type,
        foods=tuple(_parse_food(food) for food in foods if isinstance(food, dict)),
        notes=str(row.get("notes") or ""),
    )


def _parse_food(payload: dict[str, object]) -> FoodConsumption:
    try:
        nutrition = payload.get("nutrition") or {}
        amount_grams = float(payload.get("amount_grams", 0.0))  # type: ignore[arg-type]
        values = {
            nutrient: float(nutrition.get(nutrient, 0.0))  # type: ignore[union-attr]
            for nutrient in NUTRIENT_NAMES
        }
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidInputError(f"Malformed food entry: {payload!r}") from exc
    if amount_grams < 0 or any(value < 0 for value in values.values()):
        raise InvalidInputError(f"Negative amount in food entry: {payload!r}")
    return FoodConsumption(
        name=str(payload.get("name", "")),
        amount_grams=amount_grams,
        nutrition=NutrientVector(**values),
    )
