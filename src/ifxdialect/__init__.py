"""
ifxdialect public package initialization.

Informix SQL dialect for the persistence layer: column type mapping,
SKIP/FIRST pagination, sequence and temporary-table DDL, and
constraint-violation parsing.
"""

from .config import DialectSettings  # noqa: F401
from .dialects import Dialect, DialectCapabilities, InformixDialect, register_dialect, resolve_dialect  # noqa: F401
from .exceptions import (  # noqa: F401
    ConstraintViolationError,
    DatabaseError,
    DialectError,
    InvalidArgumentError,
    MappingError,
    translate_exception,
)
from .query import paginate  # noqa: F401
from .schema import Column, ForeignKey, SchemaBuilder, Table  # noqa: F401
from .types import SQLType, TypeNames  # noqa: F401

__all__ = [
    "Column",
    "ConstraintViolationError",
    "DatabaseError",
    "Dialect",
    "DialectCapabilities",
    "DialectError",
    "DialectSettings",
    "ForeignKey",
    "InformixDialect",
    "InvalidArgumentError",
    "MappingError",
    "SQLType",
    "SchemaBuilder",
    "Table",
    "TypeNames",
    "paginate",
    "register_dialect",
    "resolve_dialect",
    "translate_exception",
]
