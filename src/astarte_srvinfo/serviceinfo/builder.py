"""Accumulate ``astarte:*`` service info entries into an :class:`AstarteMod`."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from pydantic import AnyUrl, TypeAdapter, ValidationError

from astarte_srvinfo.config import AppSettings
from astarte_srvinfo.domain import METADATA_SUFFIXES, MODULE_PREFIX, AstarteKey, AstarteMod

from .exceptions import BuilderStateError, InvalidModuleError, ServiceInfoError
from .filters import filter_module
from .models import ServiceInfoKv

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)

_TEXT_FIELDS: dict[AstarteKey, str] = {
    AstarteKey.REALM: "realm",
    AstarteKey.SECRET: "secret",
    AstarteKey.BASE_URL: "base_url",
    AstarteKey.DEVICE_ID: "device_id",
}


class AstarteModBuilder:
    """Collects the astarte module fields from an unordered entry stream.

    Every text field may be set once; a second occurrence fails even when the
    value is identical. The ``active`` flag tolerates repetition as long as
    the value does not change. Once an ingest fails, or once :meth:`build`
    has been called, the builder refuses further use.
    """

    def __init__(
        self,
        *,
        strict_base_url: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        self.active: bool | None = None
        self.realm: str | None = None
        self.secret: str | None = None
        self.base_url: str | None = None
        self.device_id: str | None = None
        self._strict_base_url = strict_base_url
        self._logger = logger or logging.getLogger(__name__)
        self._poisoned = False
        self._consumed = False
        self._handlers: dict[str, Callable[[ServiceInfoKv], object]] = {
            AstarteKey.ACTIVE.value: self._ingest_active,
            AstarteKey.REALM.value: self._ingest_text,
            AstarteKey.SECRET.value: self._ingest_text,
            AstarteKey.BASE_URL.value: self._ingest_base_url,
            AstarteKey.DEVICE_ID.value: self._ingest_text,
        }

    def read(self, entries: Iterable[ServiceInfoKv]) -> None:
        """Ingest every ``astarte:`` entry of a full service info stream."""

        for entry in filter_module(entries, MODULE_PREFIX, logger=self._logger):
            self.ingest(entry)

    def ingest(self, entry: ServiceInfoKv) -> None:
        """Dispatch a single namespaced entry to its field handler."""

        self._ensure_usable()
        suffix = entry.key.removeprefix(MODULE_PREFIX)
        handler = self._handlers.get(suffix)
        if handler is None:
            if suffix in METADATA_SUFFIXES:
                self._logger.debug("Ignoring astarte module metadata key %s", entry.key)
            else:
                self._logger.warning("Unhandled astarte module key %s", entry.key)
            return

        try:
            handler(entry)
        except ServiceInfoError:
            self._poisoned = True
            raise

    def build(self) -> AstarteMod:
        """Validate the collected fields and return the immutable record."""

        self._ensure_usable()
        self._consumed = True

        if self.active is not True:
            self._logger.error("Astarte module active flag is unset or false")
        for key, attribute in _TEXT_FIELDS.items():
            if getattr(self, attribute) is None:
                self._logger.error("Astarte module %s is not set", key.key)

        if (
            self.active is not True
            or self.realm is None
            or self.secret is None
            or self.base_url is None
            or self.device_id is None
        ):
            msg = "invalid astarte service info module"
            raise InvalidModuleError(msg)

        return AstarteMod(
            realm=self.realm,
            secret=self.secret,
            base_url=self.base_url,
            device_id=self.device_id,
        )

    def _ensure_usable(self) -> None:
        if self._poisoned:
            msg = "builder rejected a previous entry and cannot be reused"
            raise BuilderStateError(msg)
        if self._consumed:
            msg = "builder has already been built"
            raise BuilderStateError(msg)

    def _ingest_active(self, entry: ServiceInfoKv) -> None:
        active = entry.value(bool)
        previous, self.active = self.active, active
        if previous is not None and previous != active:
            self._logger.error(
                "Conflicting astarte module active flag: %s then %s", previous, active
            )
            msg = "service info active replaced"
            raise InvalidModuleError(msg, field=AstarteKey.ACTIVE)

    def _ingest_text(self, entry: ServiceInfoKv) -> str:
        key = AstarteKey(entry.key.removeprefix(MODULE_PREFIX))
        attribute = _TEXT_FIELDS[key]
        value = entry.value(str)
        previous = getattr(self, attribute)
        if previous is not None:
            if key is AstarteKey.SECRET:
                self._logger.error("Multiple astarte module %s entries", key.key)
            else:
                self._logger.error(
                    "Multiple astarte module %s entries (previous %r)", key.key, previous
                )
            msg = f"service info {attribute} replaced"
            raise InvalidModuleError(msg, field=key)
        setattr(self, attribute, value)
        return value

    def _ingest_base_url(self, entry: ServiceInfoKv) -> None:
        base_url = self._ingest_text(entry)
        try:
            _URL_ADAPTER.validate_python(base_url)
        except ValidationError as exc:
            if self._strict_base_url:
                msg = f"astarte module base url is not a valid URL: {base_url!r}"
                raise InvalidModuleError(msg, field=AstarteKey.BASE_URL) from exc
            self._logger.warning("Astarte module base url %r is not a valid URL", base_url)


def parse_astarte_mod(
    entries: Iterable[ServiceInfoKv],
    *,
    settings: AppSettings | None = None,
    logger: logging.Logger | None = None,
) -> AstarteMod:
    """Filter, accumulate and validate the astarte module of a service info stream."""

    strict = settings.strict_base_url if settings is not None else False
    builder = AstarteModBuilder(strict_base_url=strict, logger=logger)
    builder.read(entries)
    return builder.build()


__all__ = ["AstarteModBuilder", "parse_astarte_mod"]
