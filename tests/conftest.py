from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

# Ensure the src/ directory is importable when tests run via `uv run pytest`.
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from astarte_srvinfo.serviceinfo import ServiceInfo  # noqa: E402

ASTARTE_PAIRS: tuple[tuple[str, Any], ...] = (
    ("astarte:active", True),
    ("astarte:realm", "test"),
    ("astarte:secret", "s3cr3t"),
    ("astarte:baseurl", "http://api.astarte.localhost"),
    ("astarte:deviceid", "2TBn-jNESuuHamE2Zo1anA"),
)


@pytest.fixture
def astarte_pairs() -> list[tuple[str, Any]]:
    """Complete, well formed astarte module in wire order."""
    return list(ASTARTE_PAIRS)


@pytest.fixture
def service_info(astarte_pairs: list[tuple[str, Any]]) -> ServiceInfo:
    return ServiceInfo.from_pairs(astarte_pairs)
