"""Service info entries as exchanged during FDO TO2.

On the wire a ServiceInfo is a CBOR array of ``[key, value]`` pairs where the
key is a ``module:field`` text string and the value is a byte string wrapping
a CBOR encoded item.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, TypeVar

import cbor2

from .exceptions import DecodeError

T = TypeVar("T")


def _matches(value: object, expected_type: type[Any]) -> bool:
    # bool is an int subclass; CBOR keeps them apart so we do too.
    if expected_type is bool:
        return isinstance(value, bool)
    if expected_type is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, expected_type)


@dataclass(frozen=True, slots=True)
class ServiceInfoKv:
    """Single service info key with its still-encoded value."""

    key: str
    raw: bytes = field(repr=False)

    @classmethod
    def encode(cls, key: str, value: Any) -> ServiceInfoKv:
        return cls(key=key, raw=cbor2.dumps(value))

    @property
    def module(self) -> str:
        return self.key.partition(":")[0]

    @property
    def suffix(self) -> str:
        return self.key.partition(":")[2]

    def decode(self) -> Any:
        """Decode the wrapped CBOR item without any type expectation."""

        try:
            return cbor2.loads(self.raw)
        except cbor2.CBORDecodeError as exc:
            msg = f"Malformed CBOR value for {self.key}: {exc}"
            raise DecodeError(msg, key=self.key) from exc

    def value(self, expected_type: type[T]) -> T:
        """Decode the value, failing if it is not of ``expected_type``."""

        decoded = self.decode()
        if not _matches(decoded, expected_type):
            msg = (
                f"Invalid type for {self.key}: expected {expected_type.__name__}, "
                f"got {type(decoded).__name__}"
            )
            raise DecodeError(msg, key=self.key)
        return decoded


@dataclass(frozen=True, slots=True)
class ServiceInfo:
    """Ordered, immutable collection of service info entries."""

    entries: tuple[ServiceInfoKv, ...] = ()

    def __iter__(self) -> Iterator[ServiceInfoKv]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, Any]]) -> ServiceInfo:
        """Build entries from ``(key, python_value)`` pairs."""

        return cls(tuple(ServiceInfoKv.encode(key, value) for key, value in pairs))

    @classmethod
    def from_cbor(cls, data: bytes) -> ServiceInfo:
        try:
            decoded = cbor2.loads(data)
        except cbor2.CBORDecodeError as exc:
            raise DecodeError(f"Malformed service info: {exc}") from exc

        if not isinstance(decoded, list):
            raise DecodeError(f"Expected service info array, got {type(decoded).__name__}")

        entries: list[ServiceInfoKv] = []
        for index, item in enumerate(decoded):
            if not isinstance(item, list) or len(item) != 2:
                msg = f"Service info entry {index} is not a [key, value] pair"
                raise DecodeError(msg)
            key, raw = item
            if not isinstance(key, str):
                raise DecodeError(f"Service info entry {index} has a non-text key")
            if not isinstance(raw, bytes):
                raise DecodeError(f"Service info value for {key} is not a byte string", key=key)
            entries.append(ServiceInfoKv(key=key, raw=raw))
        return cls(tuple(entries))

    def to_cbor(self) -> bytes:
        return cbor2.dumps([[entry.key, entry.raw] for entry in self.entries])


__all__ = ["ServiceInfo", "ServiceInfoKv"]
