"""Supabase-backed account repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from macro_tracker.domain.models import AccountRecord
from macro_tracker.services.accounts import AccountRepository

_COLUMNS = "id, email, password_hash, date_of_birth, created_at"


@dataclass
class SupabaseAccountRepository(AccountRepository):
    """Supabase implementation for account persistence."""

    client: Client

    def get_by_email(self, email: str) -> AccountRecord | None:
        """Return the account for an email, if present."""
        response = (
            self.client.table("accounts")
            .select(_COLUMNS)
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_account(response.data[0])
        return None

    def create_account(
        self, email: str, password_hash: str, date_of_birth: str
    ) -> AccountRecord:
        """Create a new account row and return it."""
        response = (
            self.client.table("accounts")
            .insert(
                {
                    "email": email,
                    "password_hash": password_hash,
                    "date_of_birth": date_of_birth,
                    "created_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create account in Supabase")
        return _parse_account(response.data[0])

    def create_token(self, account_id: UUID, token: str) -> None:
        """Store an issued token."""
        self.client.table("account_tokens").insert(
            {
                "account_id": str(account_id),
                "token": token,
                "created_at": datetime.now(tz=UTC).isoformat(),
            }
        ).execute()

    def get_by_token(self, token: str) -> AccountRecord | None:
        """Return the account that owns a token."""
        response = (
            self.client.table("account_tokens")
            .select("account_id")
            .eq("token", token)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        account_id = response.data[0]["account_id"]
        account = (
            self.client.table("accounts")
            .select(_COLUMNS)
            .eq("id", str(account_id))
            .limit(1)
            .execute()
        )
        if not account.data:
            return None
        return _parse_account(account.data[0])


def _parse_account(row: dict[str, object]) -> AccountRecord:
    created_at_raw = row.get("created_at")
    return AccountRecord(
        id=UUID(str(row["id"])),
        email=str(row["email"]),
        password_hash=str(row.get("password_hash") or ""),
        date_of_birth=str(row.get("date_of_birth") or ""),
        created_at=datetime.fromisoformat(created_at_raw)
        if isinstance(created_at_raw, str) and created_at_raw
        else datetime.now(tz=UTC),
    )
