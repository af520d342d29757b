"""
Table metadata rendered by the schema builder.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Tuple

from ..types import DEFAULT_LENGTH, DEFAULT_PRECISION, DEFAULT_SCALE


@dataclass(frozen=True)
class Column:
    name: str
    type_code: int
    length: int = DEFAULT_LENGTH
    precision: int = DEFAULT_PRECISION
    scale: int = DEFAULT_SCALE
    nullable: bool = True
    unique: bool = False
    identity: bool = False
    default: Any = None


@dataclass(frozen=True)
class ForeignKey:
    """
    Foreign key from ``columns`` to ``referenced_table``.

    When ``references_primary_key`` is set the referenced columns are implied
    by the target's primary key and are left out of the DDL.
    """

    name: str
    columns: Tuple[str, ...]
    referenced_table: str
    referenced_columns: Tuple[str, ...] = ()
    references_primary_key: bool = True


@dataclass(frozen=True)
class Table:
    name: str
    columns: Tuple[Column, ...]
    primary_key: Tuple[str, ...] = ()
    primary_key_name: str | None = None
    foreign_keys: Tuple[ForeignKey, ...] = field(default_factory=tuple)

    def column(self, name: str) -> Column:
        for column in self.columns:
            if column.name == name:
                return column
        raise KeyError(f"Table '{self.name}' has no column '{name}'")
