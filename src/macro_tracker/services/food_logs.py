"""Food logging service."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.logs import FoodLog, FoodLogInput

_logger = logging.getLogger(__name__)


class FoodLogRepository(Protocol):
    """Persistence interface for food logs."""

    def create_log(
        self, user_id: UUID, logged_at: datetime, data: FoodLogInput
    ) -> FoodLog:
        """Create a food log and return it."""

    def delete_log(self, user_id: UUID, log_id: UUID) -> bool:
        """Delete a food log owned by the user; return True if one was removed."""

    def list_logs(self, user_id: UUID, start: datetime, end: datetime) -> list[FoodLog]:
        """Return logs with ``start <= logged_at < end``."""

    def list_recent_logs(self, user_id: UUID, limit: int) -> list[FoodLog]:
        """Return the newest logs first."""

    def delete_logs(self, user_id: UUID) -> None:
        """Remove every food log for the user."""


@dataclass
class FoodLogService:
    """Service for adding and removing logged meals."""

    repository: FoodLogRepository

    def add_log(self, user_id: UUID, data: FoodLogInput) -> FoodLog:
        """Persist a meal stamped with the current time."""
        log = self.repository.create_log(
            user_id=user_id,
            logged_at=datetime.now(tz=UTC),
            data=data,
        )
        _logger.info(
            "Food log added: user_id=%s calories=%s source=%s",
            user_id,
            data.calories,
            data.source,
        )
        return log

    def delete_log(self, user_id: UUID, log_id: UUID) -> bool:
        """Delete one of the user's meals."""
        return self.repository.delete_log(user_id, log_id)

    def list_recent(self, user_id: UUID, limit: int = 20) -> list[FoodLog]:
        """Return recent meals, newest first."""
        return self.repository.list_recent_logs(user_id, limit)

    def clear(self, user_id: UUID) -> None:
        """Delete the user's food history."""
        self.repository.delete_logs(user_id)
