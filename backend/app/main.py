"""FastAPI application entrypoint for the credential service."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi import HTTPException

import app.runtime as runtime
from app.api.errors import handle_http_exception
from app.api.routers.auth import login
from app.api.routers.auth import register
from app.api.routers.auth import router as auth_router
from app.auth.models import LoginRequest
from app.auth.models import RegisterRequest
from app.runtime import startup


@asynccontextmanager
async def lifespan(_: FastAPI):
    startup()
    yield


app = FastAPI(lifespan=lifespan)
app.add_exception_handler(HTTPException, handle_http_exception)
app.include_router(auth_router)

__all__ = [
    "LoginRequest",
    "RegisterRequest",
    "app",
    "handle_http_exception",
    "login",
    "register",
    "runtime",
    "startup",
]
