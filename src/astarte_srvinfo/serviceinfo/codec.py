"""Conversions between :class:`AstarteMod` and its CBOR representations."""

from __future__ import annotations

import cbor2
from pydantic import ValidationError

from astarte_srvinfo.domain import AstarteKey, AstarteMod

from .exceptions import DecodeError
from .models import ServiceInfo


def to_service_info(record: AstarteMod, *, active: bool = True) -> ServiceInfo:
    """Render the record as the ``astarte:*`` entries an owner server would send."""

    realm, secret, base_url, device_id = record.to_tuple()
    return ServiceInfo.from_pairs(
        (
            (AstarteKey.ACTIVE.key, active),
            (AstarteKey.REALM.key, realm),
            (AstarteKey.SECRET.key, secret),
            (AstarteKey.BASE_URL.key, base_url),
            (AstarteKey.DEVICE_ID.key, device_id),
        )
    )


def dump_astarte_mod(record: AstarteMod) -> bytes:
    """Encode the record as a CBOR ``[realm, secret, base_url, device_id]`` array."""

    return cbor2.dumps(list(record.to_tuple()))


def load_astarte_mod(data: bytes) -> AstarteMod:
    try:
        decoded = cbor2.loads(data)
    except cbor2.CBORDecodeError as exc:
        raise DecodeError(f"Malformed astarte module: {exc}") from exc

    if not isinstance(decoded, list) or len(decoded) != 4:
        raise DecodeError("Expected astarte module as a 4 element array")
    if not all(isinstance(item, str) for item in decoded):
        raise DecodeError("Astarte module fields must be text strings")

    try:
        return AstarteMod.from_tuple(decoded)
    except ValidationError as exc:
        raise DecodeError(f"Invalid astarte module: {exc}") from exc


__all__ = ["dump_astarte_mod", "load_astarte_mod", "to_service_info"]
