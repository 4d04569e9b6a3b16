"""Credential-store error taxonomy."""

from __future__ import annotations

EMPTY_CREDENTIALS_MESSAGE = "username and password cannot be empty"
DUPLICATE_USER_MESSAGE = "username already exists"
UNKNOWN_USER_MESSAGE = "this user does not exist"
INVALID_CREDENTIAL_MESSAGE = "invalid password"


class AuthError(Exception):
    """Base class for credential-store errors."""


class InvalidInputError(AuthError):
    """Raised when username or password is empty."""


class DuplicateUserError(AuthError):
    """Raised when registering a username that already exists."""


class HashingFailureError(AuthError):
    """Raised when the hash primitive rejects a password; chains the cause."""


class UnknownUserError(AuthError):
    """Raised when logging in with a username that was never registered."""


class InvalidCredentialError(AuthError):
    """Raised when the password does not match the stored hash."""
