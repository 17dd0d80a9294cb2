"""Service info parsing exceptions."""

from __future__ import annotations

from astarte_srvinfo.domain import AstarteKey, ErrorKind


class ServiceInfoError(RuntimeError):
    """Base class for service info failures."""

    kind: ErrorKind = ErrorKind.INVALID


class DecodeError(ServiceInfoError):
    """Raised when an entry value is malformed or of the wrong CBOR type."""

    kind = ErrorKind.DECODE

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class InvalidModuleError(ServiceInfoError):
    """Raised when the astarte module is duplicated, conflicting or incomplete."""

    kind = ErrorKind.INVALID

    def __init__(self, message: str, *, field: AstarteKey | None = None) -> None:
        super().__init__(message)
        self.field = field


class BuilderStateError(ServiceInfoError):
    """Raised when a builder is used after a failed ingest or after build()."""

    kind = ErrorKind.STATE


__all__ = ["BuilderStateError", "DecodeError", "InvalidModuleError", "ServiceInfoError"]
