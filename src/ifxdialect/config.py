"""
Settings controlling optional dialect behaviour.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any, Mapping

from .exceptions import DialectConfigurationError

ENABLE_CURRENT_DATE_ENV = "IFXDIALECT_ENABLE_CURRENT_DATE"
USE_SYSDUAL_ENV = "IFXDIALECT_USE_SYSDUAL"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: Any, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise DialectConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


@dataclass(frozen=True)
class DialectSettings:
    """
    Optional behaviour toggles applied when a dialect is constructed.
    """

    enable_current_date_function: bool = False
    use_sysdual_for_current_date: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "DialectSettings":
        """
        Build settings from ``IFXDIALECT_*`` environment variables.
        """

        env = os.environ if environ is None else environ
        values: dict[str, bool] = {}
        raw = env.get(ENABLE_CURRENT_DATE_ENV)
        if raw:
            values["enable_current_date_function"] = _parse_bool(raw, key=ENABLE_CURRENT_DATE_ENV)
        raw = env.get(USE_SYSDUAL_ENV)
        if raw:
            values["use_sysdual_for_current_date"] = _parse_bool(raw, key=USE_SYSDUAL_ENV)
        return cls(**values)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "DialectSettings":
        """
        Build settings from a mapping keyed by field name.
        """

        known = {field.name for field in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise DialectConfigurationError(f"Unknown dialect settings: {', '.join(unknown)}")
        return cls(**{key: _parse_bool(value, key=key) for key, value in mapping.items()})
