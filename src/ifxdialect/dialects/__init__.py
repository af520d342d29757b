"""
Dialect strategy registry.
"""

from .base import Dialect, DialectCapabilities
from .functions import NoArgFunction, SQLFunction, StandardFunction, VarArgsFunction
from .informix import InformixDialect, get_informix_dialect
from .registry import is_registered, register_dialect, registered_dialects, resolve_dialect, unregister_dialect

register_dialect(InformixDialect.name, get_informix_dialect)

__all__ = [
    "Dialect",
    "DialectCapabilities",
    "InformixDialect",
    "NoArgFunction",
    "SQLFunction",
    "StandardFunction",
    "VarArgsFunction",
    "get_informix_dialect",
    "is_registered",
    "register_dialect",
    "registered_dialects",
    "resolve_dialect",
    "unregister_dialect",
]
