"""Auth REST routes."""

from __future__ import annotations

from fastapi import APIRouter

import app.runtime as runtime
from app.auth.models import LoginRequest
from app.auth.models import LoginResponse
from app.auth.models import RegisterRequest
from app.auth.service import login_user
from app.auth.service import register_user

router = APIRouter()


@router.post("/api/auth/register")
def register(payload: RegisterRequest) -> dict[str, bool]:
    """Register a username with its password."""
    return register_user(store=runtime.credential_store, payload=payload)


@router.post("/api/auth/login")
def login(payload: LoginRequest) -> LoginResponse:
    """Check credentials and return the session token."""
    return login_user(store=runtime.credential_store, payload=payload)
