"""In-memory credential store guarded by a reader/writer lock."""

from __future__ import annotations

import logging

from passlib.context import CryptContext

from app.auth.errors import DUPLICATE_USER_MESSAGE
from app.auth.errors import EMPTY_CREDENTIALS_MESSAGE
from app.auth.errors import INVALID_CREDENTIAL_MESSAGE
from app.auth.errors import UNKNOWN_USER_MESSAGE
from app.auth.errors import DuplicateUserError
from app.auth.errors import HashingFailureError
from app.auth.errors import InvalidCredentialError
from app.auth.errors import InvalidInputError
from app.auth.errors import UnknownUserError
from app.auth.tokens import issue_session_token
from app.core.config import DEFAULT_BCRYPT_ROUNDS
from app.core.config import DEFAULT_TOKEN_PREFIX
from app.core.password import hash_password
from app.core.password import make_password_context
from app.core.password import verify_password
from app.core.rwlock import ReadWriteLock

logger = logging.getLogger(__name__)


def _require_credentials(username: str, password: str) -> None:
    if not username or not password:
        raise InvalidInputError(EMPTY_CREDENTIALS_MESSAGE)


class CredentialStore:
    """Username -> bcrypt hash mapping with register/login operations.

    Registration holds the write lock across the existence check, hashing and
    insert, so concurrent registrations of one username cannot both commit.
    Logins share the read lock and never mutate the mapping.
    """

    def __init__(
        self,
        *,
        bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS,
        token_prefix: str = DEFAULT_TOKEN_PREFIX,
        password_context: CryptContext | None = None,
    ) -> None:
        self._users: dict[str, str] = {}
        self._lock = ReadWriteLock()
        self._password_context = password_context or make_password_context(bcrypt_rounds)
        self._token_prefix = token_prefix

    def register(self, username: str, password: str) -> None:
        """Add a new user; raises if the name is taken or the password is unusable."""
        _require_credentials(username, password)

        with self._lock.write_locked():
            if username in self._users:
                logger.info("registration rejected: username %r already exists", username)
                raise DuplicateUserError(DUPLICATE_USER_MESSAGE)

            try:
                password_hash = hash_password(password, context=self._password_context)
            except ValueError as exc:
                logger.warning("password hashing failed for %r: %s", username, exc)
                raise HashingFailureError(f"failed to hash password: {exc}") from exc

            self._users[username] = password_hash

        logger.info("registered user %r", username)

    def login(self, username: str, password: str) -> str:
        """Return a session token when the password matches the stored hash."""
        _require_credentials(username, password)

        with self._lock.read_locked():
            password_hash = self._users.get(username)
            if password_hash is None:
                logger.info("login rejected: unknown user %r", username)
                raise UnknownUserError(UNKNOWN_USER_MESSAGE)

            if not verify_password(password, password_hash, context=self._password_context):
                logger.info("login rejected: invalid password for %r", username)
                raise InvalidCredentialError(INVALID_CREDENTIAL_MESSAGE)

        logger.debug("login succeeded for %r", username)
        return issue_session_token(username, prefix=self._token_prefix)

    def is_registered(self, username: str) -> bool:
        with self._lock.read_locked():
            return username in self._users

    def stored_hash(self, username: str) -> str | None:
        """Return the stored bcrypt hash for username, if any."""
        with self._lock.read_locked():
            return self._users.get(username)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._users)
