"""
Utility helpers shared across ifxdialect packages.
"""

from .logging import configure_logging, get_logger
from .naming import join_names, unqualify

__all__ = [
    "configure_logging",
    "get_logger",
    "join_names",
    "unqualify",
]
