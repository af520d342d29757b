"""
Type codes and column type mapping tables.
"""

from .codes import SQLType, type_label
from .names import DEFAULT_LENGTH, DEFAULT_PRECISION, DEFAULT_SCALE, DEFAULT_TYPE_NAMES, TypeNames

__all__ = [
    "DEFAULT_LENGTH",
    "DEFAULT_PRECISION",
    "DEFAULT_SCALE",
    "DEFAULT_TYPE_NAMES",
    "SQLType",
    "TypeNames",
    "type_label",
]
