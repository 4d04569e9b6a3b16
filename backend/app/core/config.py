"""Application settings for the credential service and tests."""

from __future__ import annotations

import logging

from pydantic import Field
from pydantic import field_validator
from pydantic_settings import BaseSettings

DEFAULT_BCRYPT_ROUNDS = 10
DEFAULT_TOKEN_PREFIX = "session-for-"


class Settings(BaseSettings):
    """Typed settings loaded from environment variables or explicit kwargs."""

    credsvc_app_env: str = "dev"

    credsvc_bcrypt_rounds: int = Field(default=DEFAULT_BCRYPT_ROUNDS, ge=4, le=31)
    credsvc_token_prefix: str = Field(default=DEFAULT_TOKEN_PREFIX, min_length=1)

    credsvc_log_level: str = "INFO"

    @field_validator("credsvc_log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept only standard logging level names."""
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level


def load_settings() -> Settings:
    """Load settings from process environment."""
    return Settings()
