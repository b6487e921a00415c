"""Account endpoints and bearer token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Header, HTTPException, Request, status

from macro_tracker.api.models import LoginRequest, SignupRequest
from macro_tracker.domain.models import AccountRecord, AuthResult

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer

router = APIRouter(prefix="/auth", tags=["auth"])

_BEARER_PREFIX = "bearer "


async def require_account(
    request: Request, authorization: str | None = Header(default=None)
) -> AccountRecord:
    """Resolve the bearer token to an account or reject the request."""
    container: AppContainer = request.app.state.container
    if not authorization or not authorization.lower().startswith(_BEARER_PREFIX):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    token = authorization[len(_BEARER_PREFIX) :].strip()
    account = container.account_service.authenticate(token)
    if account is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return account


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(payload: SignupRequest, request: Request) -> dict[str, object]:
    """Register an account."""
    container: AppContainer = request.app.state.container
    result = container.account_service.signup(
        payload.email, payload.password, payload.date_of_birth
    )
    return _serialize_auth(result)


@router.post("/login")
async def login(payload: LoginRequest, request: Request) -> dict[str, object]:
    """Exchange credentials for a token."""
    container: AppContainer = request.app.state.container
    result = container.account_service.login(payload.email, payload.password)
    return _serialize_auth(result)


def _serialize_auth(result: AuthResult) -> dict[str, object]:
    return {
        "id": str(result.id),
        "email": result.email,
        "date_of_birth": result.date_of_birth,
        "token": result.token,
    }
