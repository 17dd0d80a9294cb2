"""Namespace filtering over a full service info stream."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from astarte_srvinfo.domain import MODULE_PREFIX

from .models import ServiceInfoKv


def filter_module(
    entries: Iterable[ServiceInfoKv],
    prefix: str = MODULE_PREFIX,
    *,
    logger: logging.Logger | None = None,
) -> Iterator[ServiceInfoKv]:
    """Yield the entries whose key starts with ``prefix``, in input order."""

    log = logger or logging.getLogger(__name__)
    for entry in entries:
        if entry.key.startswith(prefix):
            yield entry
        else:
            log.debug("Skipping foreign module key %s", entry.key)


__all__ = ["filter_module"]
