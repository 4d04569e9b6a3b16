"""Session token issuance.

Tokens are placeholder identity markers (prefix + username). They carry no
signature or expiry and must not be trusted as proof of identity.
"""

from __future__ import annotations

from app.core.config import DEFAULT_TOKEN_PREFIX


def issue_session_token(username: str, *, prefix: str = DEFAULT_TOKEN_PREFIX) -> str:
    """Derive the session token for an authenticated username."""
    return prefix + username
