"""Logging configuration for the credential service."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Set up root logging and return the service logger."""
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
    return logging.getLogger("app")
