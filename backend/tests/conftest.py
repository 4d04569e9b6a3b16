"""Shared fixtures for credential-service tests."""

from __future__ import annotations

from collections.abc import Generator
import importlib
from typing import Any

import pytest
from fastapi.testclient import TestClient

from app.auth.store import CredentialStore
from app.core.password import make_password_context

# bcrypt's minimum cost keeps the suite fast.
TEST_BCRYPT_ROUNDS = 4


@pytest.fixture
def register_payload() -> dict[str, Any]:
    """Default register/login payload used by API tests."""
    return {"username": "alice", "password": "secret1"}


@pytest.fixture
def credential_store() -> CredentialStore:
    """Fresh empty store with a cheap bcrypt cost."""
    return CredentialStore(password_context=make_password_context(TEST_BCRYPT_ROUNDS))


@pytest.fixture
def app_main(monkeypatch: pytest.MonkeyPatch):
    """Reloaded app module with a fresh runtime store."""
    monkeypatch.setenv("CREDSVC_BCRYPT_ROUNDS", str(TEST_BCRYPT_ROUNDS))
    monkeypatch.setenv("CREDSVC_LOG_LEVEL", "DEBUG")

    import app.main as main_module

    main_module = importlib.reload(main_module)
    main_module.startup()
    return main_module


@pytest.fixture
def client(app_main) -> Generator[TestClient, None, None]:
    with TestClient(app_main.app) as test_client:
        yield test_client
