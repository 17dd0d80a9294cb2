"""Domain layer public exports."""

from .base import DomainModel
from .enums import METADATA_SUFFIXES, MODULE_PREFIX, AstarteKey, ErrorKind
from .module import AstarteMod, AstarteModTuple

__all__ = [
    "METADATA_SUFFIXES",
    "MODULE_PREFIX",
    "AstarteKey",
    "AstarteMod",
    "AstarteModTuple",
    "DomainModel",
    "ErrorKind",
]
