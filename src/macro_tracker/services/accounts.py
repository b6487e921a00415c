"""Account signup and login."""

import base64
import hashlib
import hmac
import logging
import os
import secrets
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.models import AccountRecord, AuthResult
from macro_tracker.errors import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    InvalidPasswordError,
)

MIN_PASSWORD_LENGTH = 6

_PBKDF2_ALG = "sha256"
_PBKDF2_ITERATIONS = 200_000

_logger = logging.getLogger(__name__)


class AccountRepository(Protocol):
    """Persistence interface for accounts and their tokens."""

    def get_by_email(self, email: str) -> AccountRecord | None:
        """Return the account registered under an email, if present."""

    def create_account(
        self, email: str, password_hash: str, date_of_birth: str
    ) -> AccountRecord:
        """Create and return a new account."""

    def create_token(self, account_id: UUID, token: str) -> None:
        """Store an issued token for the account."""

    def get_by_token(self, token: str) -> AccountRecord | None:
        """Return the account a token was issued to."""


@dataclass
class AccountService:
    """Application service for account lifecycle actions."""

    repository: AccountRepository

    def signup(self, email: str, password: str, date_of_birth: str) -> AuthResult:
        """Register a new account and issue a token."""
        if len(password) < MIN_PASSWORD_LENGTH:
            raise InvalidPasswordError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        normalized = _normalize_email(email)
        if self.repository.get_by_email(normalized) is not None:
            raise EmailAlreadyRegisteredError("Email already registered")

        account = self.repository.create_account(
            normalized, hash_password(password), date_of_birth
        )
        _logger.info("Account created: account_id=%s", account.id)
        return self._issue(account)

    def login(self, email: str, password: str) -> AuthResult:
        """Check credentials and issue a fresh token."""
        account = self.repository.get_by_email(_normalize_email(email))
        if account is None or not verify_password(password, account.password_hash):
            _logger.warning("Failed login attempt")
            raise InvalidCredentialsError("Invalid email or password")
        return self._issue(account)

    def authenticate(self, token: str) -> AccountRecord | None:
        """Resolve a bearer token to its account."""
        if not token:
            return None
        return self.repository.get_by_token(token)

    def _issue(self, account: AccountRecord) -> AuthResult:
        token = secrets.token_urlsafe(32)
        self.repository.create_token(account.id, token)
        return AuthResult(
            id=account.id,
            email=account.email,
            date_of_birth=account.date_of_birth,
            token=token,
        )


def hash_password(password: str) -> str:
    """Return a salted PBKDF2 hash in ``scheme$iterations$salt$digest`` form."""
    salt = os.urandom(16)
    digest = hashlib.pbkdf2_hmac(
        _PBKDF2_ALG, password.encode("utf-8"), salt, _PBKDF2_ITERATIONS
    )
    return "$".join(
        [
            f"pbkdf2_{_PBKDF2_ALG}",
            str(_PBKDF2_ITERATIONS),
            _b64encode(salt),
            _b64encode(digest),
        ]
    )


def verify_password(password: str, password_hash: str) -> bool:
    """Return True when the password matches the stored hash."""
    try:
        scheme, iterations, salt, expected = password_hash.split("$", 3)
    except ValueError:
        return False
    if not scheme.startswith("pbkdf2_"):
        return False
    actual = hashlib.pbkdf2_hmac(
        scheme.split("_", 1)[1],
        password.encode("utf-8"),
        _b64decode(salt),
        int(iterations),
    )
    return hmac.compare_digest(actual, _b64decode(expected))


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def _b64encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def _b64decode(value: str) -> bytes:
    return base64.urlsafe_b64decode(value + "=" * (-len(value) % 4))
