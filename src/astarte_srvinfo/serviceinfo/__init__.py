"""Service info layer public exports."""

from .builder import AstarteModBuilder, parse_astarte_mod
from .codec import dump_astarte_mod, load_astarte_mod, to_service_info
from .exceptions import (
    BuilderStateError,
    DecodeError,
    InvalidModuleError,
    ServiceInfoError,
)
from .filters import filter_module
from .models import ServiceInfo, ServiceInfoKv

__all__ = [
    "AstarteModBuilder",
    "BuilderStateError",
    "DecodeError",
    "InvalidModuleError",
    "ServiceInfo",
    "ServiceInfoError",
    "ServiceInfoKv",
    "dump_astarte_mod",
    "filter_module",
    "load_astarte_mod",
    "parse_astarte_mod",
    "to_service_info",
]
