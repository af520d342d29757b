"""
Applies a dialect's row-limiting syntax to a complete SELECT statement.
"""

from __future__ import annotations

from ..dialects.base import Dialect
from ..exceptions import UnsupportedOperationError

MAX_ROWS = 2147483647


def paginate(sql: str, dialect: Dialect, *, limit: int | None = None, offset: int | None = None) -> str:
    """
    Return ``sql`` restricted to ``limit`` rows starting after ``offset`` rows.

    The statement is returned unchanged when neither value is given. A
    missing offset counts as zero and a missing limit as ``MAX_ROWS``.
    """
    if limit is None and offset is None:
        return sql
    capabilities = dialect.capabilities
    if not capabilities.supports_limit:
        raise UnsupportedOperationError(f"Dialect '{dialect.name}' does not support limit queries")
    first_row = offset or 0
    if first_row and not capabilities.supports_limit_offset:
        raise UnsupportedOperationError(f"Dialect '{dialect.name}' does not support limit offsets")
    max_rows = MAX_ROWS if limit is None else limit
    if capabilities.use_max_for_limit and limit is not None:
        max_rows = first_row + limit
    return dialect.limit_string(sql, first_row, max_rows)
