"""
Runtime settings read from the environment.

Nothing here is required: every value has a default so the library can be
imported and used without any configuration.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_logging_configured = False


@dataclass(frozen=True)
class Settings:
    """Library settings (see get_settings)."""

    log_level: str = "INFO"
    fd_epsilon: float = 1e-7
    day_count_basis: float = 365.0


def get_settings() -> Settings:
    """Build Settings from FXPRICING_* environment variables."""
    return Settings(
        log_level=os.environ.get("FXPRICING_LOG_LEVEL", "INFO").upper(),
        fd_epsilon=float(os.environ.get("FXPRICING_FD_EPSILON", "1e-7")),
        day_count_basis=float(os.environ.get("FXPRICING_DAY_COUNT_BASIS", "365.0")),
    )


def configure_logging(level: str | None = None) -> None:
    """Apply a basic logging configuration once per process."""
    global _logging_configured
    if _logging_configured:
        return
    logging.basicConfig(
        level=level or get_settings().log_level,
        format=LOG_FORMAT,
    )
    _logging_configured = True
