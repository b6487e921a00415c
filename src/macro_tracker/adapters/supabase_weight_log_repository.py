"""Supabase repository for weight logs."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from macro_tracker.domain.logs import WeightLog
from macro_tracker.services.weights import WeightLogRepository


@dataclass
class SupabaseWeightLogRepository(WeightLogRepository):
    """Supabase implementation for weight logs."""

    client: Client

    def upsert_weight(self, user_id: UUID, day: date, weight_kg: float) -> None:
        """Insert or replace the weight for a user and day."""
        self.client.table("weight_logs").upsert(
            {"user_id": str(user_id), "day": day.isoformat(), "weight_kg": weight_kg},
            on_conflict="user_id,day",
        ).execute()

    def list_weights(self, user_id: UUID) -> list[WeightLog]:
        """Return weight logs ordered by day."""
        response = (
            self.client.table("weight_logs")
            .select("day, weight_kg")
            .eq("user_id", str(user_id))
            .order("day", desc=False)
            .execute()
        )
        return [
            WeightLog(
                day=date.fromisoformat(str(row["day"])),
                weight_kg=float(row["weight_kg"]),
            )
            for row in response.data or []
        ]

    def delete_weights(self, user_id: UUID) -> None:
        """Delete all weight logs for a user."""
        self.client.table("weight_logs").delete().eq("user_id", str(user_id)).execute()
