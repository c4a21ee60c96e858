"""Nutrient vectors and the arithmetic shared by every aggregate."""

from collections.abc import Iterable
from dataclasses import dataclass, fields

NUTRIENT_NAMES = ("protein", "carbs", "fat", "fiber", "iron", "calcium")

NUTRIENT_LABELS = {
    "protein": "タンパク質",
    "carbs": "炭水化物",
    "fat": "脂質",
    "fiber": "食物繊維",
    "iron": "鉄分",
    "calcium": "カルシウム",
}


@dataclass(frozen=True)
class NutrientVector:
    """Nutrients in grams (protein, carbs, fat, fiber) and mg (iron, calcium)."""

    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    iron: float = 0.0
    calcium: float = 0.0

    def value(self, nutrient: str) -> float:
        """Return the amount for a nutrient name."""
        return float(getattr(self, nutrient))


def zero_nutrients() -> NutrientVector:
    """Return the zero vector."""
    return NutrientVector()


def scale_nutrients(per_100g: NutrientVector, grams: float) -> NutrientVector:
    """Scale a per-100g profile to a consumed amount."""
    if grams <= 0:
        return zero_nutrients()
    ratio = grams / 100
    return NutrientVector(
        **{
            field.name: getattr(per_100g, field.name) * ratio
            for field in fields(per_100g)
        }
    )


def add_nutrients(left: NutrientVector, right: NutrientVector) -> NutrientVector:
    """Return the field-wise sum of two vectors."""
    return NutrientVector(
        **{
            field.name: getattr(left, field.name) + getattr(right, field.name)
            for field in fields(left)
        }
    )


def sum_nutrients(vectors: Iterable[NutrientVector]) -> NutrientVector:
    """Sum vectors left to right starting from zero."""
    total = zero_nutrients()
    for vector in vectors:
        total = add_nutrients(total, vector)
    return total


def average_nutrients(vectors: list[NutrientVector]) -> NutrientVector:
    """Return the field-wise mean, or the zero vector for no input."""
    if not vectors:
        return zero_nutrients()
    total = sum_nutrients(vectors)
    count = len(vectors)
    return NutrientVector(
        **{field.name: getattr(total, field.name) / count for field in fields(total)}
    )
