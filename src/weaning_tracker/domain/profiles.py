"""Domain models for the baby profile."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class BabyProfile:
    """The child whose meals are being tracked."""

    id: str
    name: str
    birth_date: date


@dataclass(frozen=True)
class WeaningStage:
    """Weaning stage derived from age in months."""

    age_months: int
    stage: str
    description: str
    meals_per_day: int
