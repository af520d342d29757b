"""
Type-code to column-type template tables.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from ..exceptions import MappingError
from .codes import SQLType, type_label

DEFAULT_LENGTH = 255
DEFAULT_PRECISION = 19
DEFAULT_SCALE = 2


class TypeNames:
    """
    Maps type codes, optionally bucketed by capacity, to column type templates.

    Templates may contain ``$l`` (length), ``$p`` (precision) and ``$s``
    (scale) placeholders. Bucketed entries are consulted in ascending
    capacity order and the first bucket large enough for the requested
    length wins; otherwise the unqualified entry applies. Codes unknown to
    this table are delegated to ``fallback``.
    """

    def __init__(self, fallback: Optional["TypeNames"] = None) -> None:
        self.fallback = fallback
        self._defaults: Dict[int, str] = {}
        self._weighted: Dict[int, Dict[int, str]] = {}
        self._frozen = False

    def register(self, type_code: int, template: str, *, capacity: int | None = None) -> None:
        if self._frozen:
            raise MappingError("Type mappings are read-only once the dialect is built.")
        if capacity is None:
            self._defaults[type_code] = template
            return
        buckets = self._weighted.setdefault(type_code, {})
        buckets[capacity] = template
        self._weighted[type_code] = dict(sorted(buckets.items()))

    def freeze(self) -> "TypeNames":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, type_code: int) -> str:
        template = self._defaults.get(type_code)
        if template is not None:
            return template
        if self.fallback is not None:
            return self.fallback.get(type_code)
        raise MappingError(f"No type mapping for SQL type code {type_label(type_code)}")

    def resolve(
        self,
        type_code: int,
        length: int = DEFAULT_LENGTH,
        precision: int = DEFAULT_PRECISION,
        scale: int = DEFAULT_SCALE,
    ) -> str:
        if type_code not in self._defaults and type_code not in self._weighted:
            if self.fallback is not None:
                return self.fallback.resolve(type_code, length, precision, scale)
            raise MappingError(f"No type mapping for SQL type code {type_label(type_code)}")
        for capacity, template in self._weighted.get(type_code, {}).items():
            if length <= capacity:
                return _render(template, length, precision, scale)
        return _render(self.get(type_code), length, precision, scale)

    def type_codes(self) -> List[int]:
        return sorted(set(self._defaults) | set(self._weighted))

    def __contains__(self, type_code: object) -> bool:
        return type_code in self._defaults or type_code in self._weighted


def _render(template: str, length: int, precision: int, scale: int) -> str:
    rendered = template.replace("$s", str(scale), 1)
    rendered = rendered.replace("$l", str(length), 1)
    return rendered.replace("$p", str(precision), 1)


def _build_default_type_names() -> TypeNames:
    names = TypeNames()
    names.register(SQLType.BIT, "bit")
    names.register(SQLType.BOOLEAN, "boolean")
    names.register(SQLType.TINYINT, "tinyint")
    names.register(SQLType.SMALLINT, "smallint")
    names.register(SQLType.INTEGER, "integer")
    names.register(SQLType.BIGINT, "bigint")
    names.register(SQLType.FLOAT, "float($p)")
    names.register(SQLType.DOUBLE, "double precision")
    names.register(SQLType.NUMERIC, "numeric($p,$s)")
    names.register(SQLType.REAL, "real")
    names.register(SQLType.DATE, "date")
    names.register(SQLType.TIME, "time")
    names.register(SQLType.TIMESTAMP, "timestamp")
    names.register(SQLType.VARBINARY, "bit varying($l)")
    names.register(SQLType.LONGVARBINARY, "bit varying($l)")
    names.register(SQLType.BLOB, "blob")
    names.register(SQLType.CHAR, "char($l)")
    names.register(SQLType.VARCHAR, "varchar($l)")
    names.register(SQLType.LONGVARCHAR, "varchar($l)")
    names.register(SQLType.CLOB, "clob")
    names.register(SQLType.NCHAR, "nchar($l)")
    names.register(SQLType.NVARCHAR, "nvarchar($l)")
    names.register(SQLType.LONGNVARCHAR, "nvarchar($l)")
    names.register(SQLType.NCLOB, "nclob")
    return names.freeze()


DEFAULT_TYPE_NAMES = _build_default_type_names()
