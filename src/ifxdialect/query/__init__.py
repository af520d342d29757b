"""
Query rewriting helpers.
"""

from .pagination import MAX_ROWS, paginate

__all__ = ["MAX_ROWS", "paginate"]
