"""Shared CLI dependency helpers."""

from __future__ import annotations

import logging
from functools import lru_cache

from astarte_srvinfo.config import AppSettings


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return cached settings and configure logging once for CLI commands."""

    settings = AppSettings.from_env()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return settings


def reset_settings() -> None:
    """Clear the cached settings (useful for tests)."""

    get_settings.cache_clear()
