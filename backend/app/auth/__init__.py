"""Credential registration and login."""

from app.auth.errors import AuthError
from app.auth.errors import DuplicateUserError
from app.auth.errors import HashingFailureError
from app.auth.errors import InvalidCredentialError
from app.auth.errors import InvalidInputError
from app.auth.errors import UnknownUserError
from app.auth.store import CredentialStore

__all__ = [
    "AuthError",
    "CredentialStore",
    "DuplicateUserError",
    "HashingFailureError",
    "InvalidCredentialError",
    "InvalidInputError",
    "UnknownUserError",
]
