"""Supabase repository for user profiles."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from macro_tracker.domain.nutrition import ActivityLevel, Goal, Sex
from macro_tracker.domain.profiles import TrackedMacro, Units, UserProfile
from macro_tracker.services.profiles import ProfileRepository

_COLUMNS = (
    "user_id, age, height, weight, sex, activity_level, goal, units, region, "
    "tracked_macros, tdee, target_calories, target_protein, target_carbs, "
    "target_fats, target_sugars, created_at"
)


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile persistence."""

    client: Client

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the profile row for a user, if present."""
        response = (
            self.client.table("profiles")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def save_profile(self, profile: UserProfile) -> None:
        """Upsert the profile keyed by user id."""
        self.client.table("profiles").upsert(
            {
                "user_id": str(profile.user_id),
                "age": profile.age,
                "height": profile.height,
                "weight": profile.weight,
                "sex": profile.sex.value,
                "activity_level": profile.activity_level.value,
                "goal": profile.goal.value,
                "units": profile.units.value,
                "region": profile.region,
                "tracked_macros": [macro.value for macro in profile.tracked_macros],
                "tdee": profile.tdee,
                "target_calories": profile.target_calories,
                "target_protein": profile.target_protein,
                "target_carbs": profile.target_carbs,
                "target_fats": profile.target_fats,
                "target_sugars": profile.target_sugars,
                "created_at": profile.created_at.isoformat()
                if profile.created_at
                else None,
            },
            on_conflict="user_id",
        ).execute()

    def delete_profile(self, user_id: UUID) -> None:
        """Delete the profile row for a user."""
        self.client.table("profiles").delete().eq("user_id", str(user_id)).execute()


def _parse_profile(row: dict[str, object]) -> UserProfile:
    created_at_raw = row.get("created_at")
    return UserProfile(
        user_id=UUID(str(row["user_id"])),
        age=int(row["age"]),
        height=float(row["height"]),
        weight=float(row["weight"]),
        sex=Sex(row["sex"]),
        activity_level=ActivityLevel(row["activity_level"]),
        goal=Goal(row["goal"]),
        units=Units(row.get("units") or Units.METRIC),
        region=str(row.get("region") or ""),
        tracked_macros=tuple(
            TrackedMacro(value) for value in row.get("tracked_macros") or []
        ),
        tdee=int(row["tdee"]),
        target_calories=int(row["target_calories"]),
        target_protein=int(row["target_protein"]),
        target_carbs=int(row["target_carbs"]),
        target_fats=int(row["target_fats"]),
        target_sugars=int(row["target_sugars"]),
        created_at=datetime.fromisoformat(created_at_raw)
        if isinstance(created_at_raw, str) and created_at_raw
        else None,
    )
