"""Password hashing helpers for the credential store."""

from __future__ import annotations

from passlib.context import CryptContext
from passlib.exc import UnknownHashError

from app.core.config import DEFAULT_BCRYPT_ROUNDS

BCRYPT_MAX_PASSWORD_BYTES = 72


def make_password_context(rounds: int = DEFAULT_BCRYPT_ROUNDS) -> CryptContext:
    """Build a bcrypt context that refuses to silently truncate long secrets."""
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=rounds,
        bcrypt__truncate_error=True,
    )


# Keep algorithms centralized so auth code only depends on these helpers.
_PASSWORD_CONTEXT = make_password_context()


def hash_password(plain_password: str, *, context: CryptContext | None = None) -> str:
    """Hash plaintext password using bcrypt.

    Raises ``ValueError`` (passlib's ``PasswordSizeError``) when the secret
    exceeds bcrypt's input limit.
    """
    return (context or _PASSWORD_CONTEXT).hash(plain_password)


def verify_password(
    plain_password: str,
    password_hash: str,
    *,
    context: CryptContext | None = None,
) -> bool:
    """Verify plaintext password against bcrypt hash."""
    if len(plain_password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        return False
    try:
        return (context or _PASSWORD_CONTEXT).verify(plain_password, password_hash)
    except (UnknownHashError, ValueError):
        return False
