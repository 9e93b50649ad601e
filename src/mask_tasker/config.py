"""Runtime settings read from environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_DATA_URL = "http://localhost:8000/data/months"
DEFAULT_HTTP_TIMEOUT = 30.0
DEFAULT_CONNECT_TIMEOUT = 10.0


def _float_env(name: str, default: float) -> float:
    """Read a positive number from the environment, falling back to ``default``."""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("%s=%r is not a number, using %s", name, raw, default)
        return default
    if value <= 0:
        logger.warning("%s=%r must be positive, using %s", name, raw, default)
        return default
    return value


@dataclass(frozen=True)
class Settings:
    data_url: str = DEFAULT_DATA_URL
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            data_url=os.environ.get("SCORES_DATA_URL", DEFAULT_DATA_URL).rstrip("/"),
            http_timeout=_float_env("SCORES_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT),
            connect_timeout=_float_env("SCORES_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )

    @property
    def logging_level(self) -> int:
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.INFO


def get_settings() -> Settings:
    """Read settings fresh on each call so env changes apply without a restart."""
    return Settings.from_env()
