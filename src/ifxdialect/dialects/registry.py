"""
Name-based dialect resolution.
"""

from __future__ import annotations

from typing import Callable, Dict, List

from ..config import DialectSettings
from ..exceptions import DialectNotFoundError
from ..utils import get_logger
from .base import Dialect

DialectFactory = Callable[[DialectSettings], Dialect]

_factories: Dict[str, DialectFactory] = {}
logger = get_logger("dialects.registry")


def register_dialect(name: str, factory: DialectFactory) -> None:
    key = name.lower()
    if key in _factories:
        logger.debug("Replacing dialect registered for '%s'", key)
    else:
        logger.debug("Registered dialect for '%s'", key)
    _factories[key] = factory


def resolve_dialect(name: str, settings: DialectSettings | None = None) -> Dialect:
    factory = _factories.get(name.lower())
    if factory is None:
        raise DialectNotFoundError(f"No dialect registered for '{name}'")
    return factory(settings or DialectSettings())


def is_registered(name: str) -> bool:
    return name.lower() in _factories


def registered_dialects() -> List[str]:
    return sorted(_factories)


def unregister_dialect(name: str) -> None:
    _factories.pop(name.lower(), None)
