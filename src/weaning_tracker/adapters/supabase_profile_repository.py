"""Supabase repository for baby profiles."""

from dataclasses import dataclass

from supabase import Client

from weaning_tracker.domain.profiles import BabyProfile
from weaning_tracker.services.periods import parse_iso_date
from weaning_tracker.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile reads."""

    client: Client

    def get_active_profile(self) -> BabyProfile | None:
        """Return the most recently updated profile, if any."""
        response = (
            self.client.table("baby_profiles")
            .select("id, name, birth_date")
            .order("updated_at", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return BabyProfile(
            id=str(row["id"]),
            name=str(row.get("name") or ""),
            birth_date=parse_iso_date(row.get("birth_date")),  # type: ignore[arg-type]
        )
