"""Lightweight application configuration loader."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no"}


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    log_level: str = "WARNING"
    # Reject malformed base URLs instead of only logging them.
    strict_base_url: bool = False

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("ASTARTE_SRVINFO_ENV", cls.environment),
            log_level=os.getenv("ASTARTE_SRVINFO_LOG_LEVEL", cls.log_level).upper(),
            strict_base_url=_env_bool("ASTARTE_SRVINFO_STRICT_BASE_URL", cls.strict_base_url),
        )


__all__ = ["AppSettings"]
