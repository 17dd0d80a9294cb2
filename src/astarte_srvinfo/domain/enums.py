"""Enumerations used across the service info layer."""

from __future__ import annotations

from enum import StrEnum

MODULE_PREFIX = "astarte:"


class AstarteKey(StrEnum):
    """Field suffixes recognized under the ``astarte:`` module namespace."""

    ACTIVE = "active"
    REALM = "realm"
    SECRET = "secret"
    BASE_URL = "baseurl"
    DEVICE_ID = "deviceid"

    @property
    def key(self) -> str:
        """Fully namespaced service info key (e.g. ``astarte:realm``)."""

        return f"{MODULE_PREFIX}{self.value}"


# Module bookkeeping keys, mirrored from ``devmod``; carried on the wire but
# never stored in the record.
METADATA_SUFFIXES = frozenset({"nummodules", "modules"})


class ErrorKind(StrEnum):
    """Classification attached to service info failures."""

    DECODE = "decode"
    INVALID = "invalid"
    STATE = "state"


__all__ = ["METADATA_SUFFIXES", "MODULE_PREFIX", "AstarteKey", "ErrorKind"]
