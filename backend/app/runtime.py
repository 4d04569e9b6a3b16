"""Process-wide runtime state shared by REST handlers."""

from __future__ import annotations

from app.auth.service import build_credential_store
from app.auth.store import CredentialStore
from app.core.config import Settings
from app.core.config import load_settings
from app.core.logging_config import configure_logging

settings = load_settings()
credential_store: CredentialStore = build_credential_store(settings)


def startup() -> None:
    """Reload settings, configure logging and reset the in-memory store."""
    global settings, credential_store
    settings = load_settings()
    configure_logging(settings.credsvc_log_level)
    credential_store = build_credential_store(settings)


__all__ = [
    "Settings",
    "credential_store",
    "settings",
    "startup",
]
