"""Supabase repository for food logs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from macro_tracker.domain.logs import FoodLog, FoodLogInput, FoodLogSource
from macro_tracker.services.food_logs import FoodLogRepository

_COLUMNS = (
    "id, user_id, logged_at, description, calories, protein, carbs, fats, "
    "sugars, fiber, source"
)


@dataclass
class SupabaseFoodLogRepository(FoodLogRepository):
    """Supabase implementation for food logs."""

    client: Client

    def create_log(
        self, user_id: UUID, logged_at: datetime, data: FoodLogInput
    ) -> FoodLog:
        """Create a food log row and return it."""
        response = (
            self.client.table("food_logs")
            .insert(
                {
                    "user_id": str(user_id),
                    "logged_at": logged_at.isoformat(),
                    "description": data.description,
                    "calories": data.calories,
                    "protein": data.protein,
                    "carbs": data.carbs,
                    "fats": data.fats,
                    "sugars": data.sugars,
                    "fiber": data.fiber,
                    "source": data.source.value,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food log")
        return _parse_row(response.data[0])

    def delete_log(self, user_id: UUID, log_id: UUID) -> bool:
        """Delete a food log owned by the user."""
        response = (
            self.client.table("food_logs")
            .delete()
            .eq("id", str(log_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)

    def list_logs(self, user_id: UUID, start: datetime, end: datetime) -> list[FoodLog]:
        """Return food logs in the time range."""
        response = (
            self.client.table("food_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("logged_at", start.isoformat())
            .lt("logged_at", end.isoformat())
            .order("logged_at", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def list_recent_logs(self, user_id: UUID, limit: int) -> list[FoodLog]:
        """Return recent food logs for a user."""
        response = (
            self.client.table("food_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("logged_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def delete_logs(self, user_id: UUID) -> None:
        """Delete all food logs for a user."""
        self.client.table("food_logs").delete().eq("user_id", str(user_id)).execute()


def _parse_row(row: dict[str, object]) -> FoodLog:
    fiber = row.get("fiber")
    return FoodLog(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        logged_at=datetime.fromisoformat(str(row["logged_at"])),
        description=str(row.get("description") or ""),
        calories=float(row.get("calories") or 0.0),
        protein=float(row.get("protein") or 0.0),
        carbs=float(row.get("carbs") or 0.0),
        fats=float(row.get("fats") or 0.0),
        sugars=float(row.get("sugars") or 0.0),
        fiber=float(fiber) if fiber is not None else None,
        source=FoodLogSource(row.get("source") or FoodLogSource.MANUAL),
    )
