"""Auth use cases bridging HTTP payloads and the credential store."""

from __future__ import annotations

from app.api.errors import raise_auth_error
from app.auth.errors import AuthError
from app.auth.models import LoginRequest
from app.auth.models import LoginResponse
from app.auth.models import RegisterRequest
from app.auth.store import CredentialStore
from app.core.config import Settings


def build_credential_store(settings: Settings) -> CredentialStore:
    """Create an empty store configured from settings."""
    return CredentialStore(
        bcrypt_rounds=settings.credsvc_bcrypt_rounds,
        token_prefix=settings.credsvc_token_prefix,
    )


def register_user(*, store: CredentialStore, payload: RegisterRequest) -> dict[str, bool]:
    """Register a new username/password pair."""
    try:
        store.register(payload.username, payload.password)
    except AuthError as exc:
        raise_auth_error(exc)
    return {"ok": True}


def login_user(*, store: CredentialStore, payload: LoginRequest) -> LoginResponse:
    """Authenticate and return the session token."""
    try:
        token = store.login(payload.username, payload.password)
    except AuthError as exc:
        raise_auth_error(exc)
    return LoginResponse(token=token)
