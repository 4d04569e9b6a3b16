"""Password hashing helper tests."""

from __future__ import annotations

import pytest

from app.core.password import BCRYPT_MAX_PASSWORD_BYTES
from app.core.password import hash_password
from app.core.password import make_password_context
from app.core.password import verify_password

FAST_CONTEXT = make_password_context(4)


def test_hash_is_not_plaintext() -> None:
    """Input: plaintext abc -> Output: hash value differs from plaintext."""
    hashed = hash_password("abc", context=FAST_CONTEXT)
    assert hashed != "abc"
    assert hashed.startswith("$2b$04$")


def test_verify_matches_original_password() -> None:
    """Input: correct plaintext with its hash -> Output: verify True."""
    plaintext = "abc"
    hashed = hash_password(plaintext, context=FAST_CONTEXT)
    assert verify_password(plaintext, hashed, context=FAST_CONTEXT) is True


def test_verify_rejects_wrong_password() -> None:
    """Input: wrong plaintext with hash -> Output: verify False."""
    hashed = hash_password("abc", context=FAST_CONTEXT)
    assert verify_password("wrong", hashed, context=FAST_CONTEXT) is False


def test_same_password_hashes_differ_by_salt() -> None:
    first = hash_password("abc", context=FAST_CONTEXT)
    second = hash_password("abc", context=FAST_CONTEXT)

    assert first != second
    assert verify_password("abc", first, context=FAST_CONTEXT) is True
    assert verify_password("abc", second, context=FAST_CONTEXT) is True


def test_default_context_uses_configured_default_cost() -> None:
    hashed = hash_password("abc")
    assert hashed.startswith("$2b$10$")


def test_hash_rejects_password_over_bcrypt_limit() -> None:
    """Input: 73-byte password -> Output: ValueError instead of silent truncation."""
    with pytest.raises(ValueError):
        hash_password("x" * (BCRYPT_MAX_PASSWORD_BYTES + 1), context=FAST_CONTEXT)


def test_hash_accepts_password_at_bcrypt_limit() -> None:
    plaintext = "x" * BCRYPT_MAX_PASSWORD_BYTES
    hashed = hash_password(plaintext, context=FAST_CONTEXT)
    assert verify_password(plaintext, hashed, context=FAST_CONTEXT) is True


def test_verify_returns_false_for_unknown_hash_format() -> None:
    assert verify_password("abc", "not-a-bcrypt-hash", context=FAST_CONTEXT) is False


def test_verify_returns_false_for_overlong_password() -> None:
    hashed = hash_password("x" * BCRYPT_MAX_PASSWORD_BYTES, context=FAST_CONTEXT)
    overlong = "x" * (BCRYPT_MAX_PASSWORD_BYTES + 1)
    assert verify_password(overlong, hashed, context=FAST_CONTEXT) is False
