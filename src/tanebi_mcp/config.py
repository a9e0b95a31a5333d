"""Process configuration read once from the environment at startup."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://tanebi.app"
_DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

log = logging.getLogger("tanebi-mcp")


class ConfigError(Exception):
    """Raised when required configuration is missing."""


@dataclass(frozen=True, slots=True)
class Settings:
    api_key: str
    api_base_url: str = DEFAULT_BASE_URL
    log_level: str = _DEFAULT_LOG_LEVEL


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from *environ* (defaults to ``os.environ``).

    Raises:
        ConfigError: if ``TANEBI_API_KEY`` is unset or blank.

    An unknown ``TANEBI_LOG_LEVEL`` falls back to ``WARNING``.
    """
    env = os.environ if environ is None else environ

    api_key = env.get("TANEBI_API_KEY", "").strip()
    if not api_key:
        raise ConfigError(
            "TANEBI_API_KEY environment variable is required. "
            "Generate an API key from the Tanebi iOS app settings."
        )

    base_url = env.get("TANEBI_API_BASE_URL", "").rstrip("/") or DEFAULT_BASE_URL
    log_level = env.get("TANEBI_LOG_LEVEL", "").strip().upper() or _DEFAULT_LOG_LEVEL
    if log_level not in _LOG_LEVELS:
        log.warning(
            "Unknown TANEBI_LOG_LEVEL %r, using %s (expected one of %s)",
            log_level,
            _DEFAULT_LOG_LEVEL,
            ", ".join(sorted(_LOG_LEVELS)),
        )
        log_level = _DEFAULT_LOG_LEVEL

    return Settings(api_key=api_key, api_base_url=base_url, log_level=log_level)
