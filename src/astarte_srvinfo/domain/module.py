"""Astarte service info module record."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import SecretStr

from .base import DomainModel

AstarteModTuple = tuple[str, str, str, str]


class AstarteMod(DomainModel):
    """Connection parameters the owner server sends under the ``astarte`` module.

    | Key                | Disposition | CBOR type   | Meaning                                          |
    | ------------------ | ----------- | ----------- | ------------------------------------------------ |
    | astarte:active     | Required    | bool (True) | The module is active.                            |
    | astarte:realm      | Required    | tstr        | Realm the device belongs to (e.g. ``test``).     |
    | astarte:secret     | Required    | tstr        | Credential secret used to request the mTLS cert. |
    | astarte:baseurl    | Required    | tstr        | Base URL of the Astarte pairing API.             |
    | astarte:deviceid   | Required    | tstr        | Astarte device id (e.g. 2TBn-jNESuuHamE2Zo1anA). |
    | astarte:nummodules | Required    | uint        | See ``devmod:nummodules``.                       |
    | astarte:modules    | Required    | array       | See ``devmod:modules``.                          |
    """

    realm: str
    secret: SecretStr
    base_url: str
    device_id: str

    def to_tuple(self) -> AstarteModTuple:
        """Positional form stored alongside the device credentials."""

        return (self.realm, self.secret.get_secret_value(), self.base_url, self.device_id)

    @classmethod
    def from_tuple(cls, values: Sequence[str]) -> AstarteMod:
        if len(values) != 4:
            msg = f"Expected 4 astarte module fields, got {len(values)}"
            raise ValueError(msg)
        realm, secret, base_url, device_id = values
        return cls(realm=realm, secret=secret, base_url=base_url, device_id=device_id)


__all__ = ["AstarteMod", "AstarteModTuple"]
