"""Domain models for accounts."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class AccountRecord:
    """Represents an account stored in the database."""

    id: UUID
    email: str
    password_hash: str
    date_of_birth: str
    created_at: datetime


@dataclass(frozen=True)
class AuthResult:
    """Public account data returned after signup or login."""

    id: UUID
    email: str
    date_of_birth: str
    token: str
