"""
Schema metadata and DDL generation.
"""

from .builder import SchemaBuilder
from .metadata import Column, ForeignKey, Table

__all__ = ["Column", "ForeignKey", "SchemaBuilder", "Table"]
