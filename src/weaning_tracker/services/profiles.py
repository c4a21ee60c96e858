"""Read access to the active baby profile."""

from typing import Protocol

from weaning_tracker.domain.profiles import BabyProfile


class ProfileRepository(Protocol):
    """Persistence interface for baby profiles."""

    def get_active_profile(self) -> BabyProfile | None:
        """Return the profile being tracked, if one exists."""
