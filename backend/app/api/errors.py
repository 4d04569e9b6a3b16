"""HTTP error mapping for the credential API.

Every error response body has the shape ``{"code", "message", "detail"}``.
"""

from __future__ import annotations

from typing import Any
from typing import NoReturn

from fastapi import HTTPException
from fastapi import Request
from fastapi.responses import JSONResponse

from app.auth.errors import AuthError
from app.auth.errors import DuplicateUserError
from app.auth.errors import HashingFailureError
from app.auth.errors import InvalidCredentialError
from app.auth.errors import InvalidInputError
from app.auth.errors import UnknownUserError

INVALID_LOGIN_MESSAGE = "invalid username or password"
PASSWORD_REJECTED_MESSAGE = "password cannot be hashed"

# error type -> (status, code, fixed message or None to use str(exc))
AUTH_ERROR_RESPONSES: dict[type[AuthError], tuple[int, str, str | None]] = {
    InvalidInputError: (400, "VALIDATION_ERROR", None),
    HashingFailureError: (400, "AUTH_PASSWORD_REJECTED", PASSWORD_REJECTED_MESSAGE),
    DuplicateUserError: (409, "AUTH_USERNAME_CONFLICT", None),
    # Both login failures look the same over HTTP.
    UnknownUserError: (401, "AUTH_INVALID_CREDENTIALS", INVALID_LOGIN_MESSAGE),
    InvalidCredentialError: (401, "AUTH_INVALID_CREDENTIALS", INVALID_LOGIN_MESSAGE),
}


def api_error(*, code: str, message: str, detail: dict[str, Any] | None = None) -> dict[str, Any]:
    """Build a unified API error payload."""
    return {"code": code, "message": message, "detail": detail or {}}


def raise_auth_error(exc: AuthError) -> NoReturn:
    """Translate a credential-store error into a unified HTTP error."""
    for error_type, (status_code, code, message) in AUTH_ERROR_RESPONSES.items():
        if isinstance(exc, error_type):
            raise HTTPException(
                status_code=status_code,
                detail=api_error(code=code, message=message or str(exc)),
            ) from exc
    raise exc


async def handle_http_exception(_: Request, exc: HTTPException) -> JSONResponse:
    """Render HTTPException as a unified payload, passing through prebuilt ones."""
    if isinstance(exc.detail, dict) and {"code", "message", "detail"} <= set(exc.detail):
        content = exc.detail
    else:
        content = api_error(code="HTTP_ERROR", message=str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)
