"""
Constraint-name extraction from vendor error messages.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from ..utils import get_logger, unqualify
from .errors import ConstraintViolationError, DatabaseError

UNIQUE = "unique"
FOREIGN_KEY = "foreign_key"
REFERENCED_KEY = "referenced_key"

_ERROR_CODE_ATTRIBUTES = ("sqlcode", "errorcode", "error_code", "errno")
_SQLCODE_IN_MESSAGE = re.compile(r"SQLCODE\s*[=:]\s*(-?\d+)", re.IGNORECASE)

logger = get_logger("exceptions.constraints")


@dataclass(frozen=True)
class ErrorPattern:
    error_code: int
    prefix: str
    suffix: str
    kind: str


INFORMIX_ERROR_PATTERNS: tuple[ErrorPattern, ...] = (
    ErrorPattern(-268, "Unique constraint (", ") violated.", UNIQUE),
    ErrorPattern(
        -691,
        "Missing key in referenced table for referential constraint (",
        ").",
        FOREIGN_KEY,
    ),
    ErrorPattern(-692, "Key value for constraint (", ") is still being referenced.", REFERENCED_KEY),
)


def extract_using_template(prefix: str, suffix: str, message: str) -> str | None:
    """
    Return the text between ``prefix`` and the next ``suffix`` in ``message``.

    Both literals are matched case-sensitively. ``None`` when either is absent.
    """
    start = message.find(prefix)
    if start < 0:
        return None
    start += len(prefix)
    end = message.find(suffix, start)
    if end < 0:
        return None
    return message[start:end]


def extract_error_code(exc: BaseException) -> int | None:
    """
    Read the vendor error code from a DB-API exception.

    Integer attributes and an integer first argument win; otherwise an
    ``SQLCODE=<n>`` marker in the message text is used.
    """
    for attribute in _ERROR_CODE_ATTRIBUTES:
        value = getattr(exc, attribute, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    if exc.args and isinstance(exc.args[0], int) and not isinstance(exc.args[0], bool):
        return exc.args[0]
    match = _SQLCODE_IN_MESSAGE.search(str(exc))
    if match:
        return int(match.group(1))
    return None


class ConstraintNameExtractor:
    """
    Resolves violated constraint names using ordered error patterns.
    """

    def __init__(self, patterns: Iterable[ErrorPattern]) -> None:
        self.patterns: tuple[ErrorPattern, ...] = tuple(patterns)

    def pattern_for(self, error_code: int | None) -> ErrorPattern | None:
        for pattern in self.patterns:
            if pattern.error_code == error_code:
                return pattern
        return None

    def extract_constraint_name(self, error_code: int | None, message: str) -> str | None:
        pattern = self.pattern_for(error_code)
        if pattern is None:
            return None
        name = extract_using_template(pattern.prefix, pattern.suffix, message)
        if name is None:
            logger.debug("Error %s did not match its constraint template: %s", error_code, message)
            return None
        # names are reported as <table-owner>.<constraint-name>
        return unqualify(name)

    def extract_from_exception(self, exc: BaseException) -> str | None:
        return self.extract_constraint_name(extract_error_code(exc), str(exc))


def translate_exception(exc: BaseException, extractor: ConstraintNameExtractor) -> DatabaseError:
    """
    Convert a driver exception into the ifxdialect error hierarchy.

    Callers raise the result ``from exc`` to keep the driver error chained.
    """
    error_code = extract_error_code(exc)
    message = str(exc)
    pattern = extractor.pattern_for(error_code)
    if pattern is None:
        return DatabaseError(message, error_code=error_code)
    constraint_name = extractor.extract_constraint_name(error_code, message)
    if constraint_name is None:
        logger.debug("Unattributed constraint violation (error %s)", error_code)
    return ConstraintViolationError(
        message,
        error_code=error_code,
        constraint_name=constraint_name,
        kind=pattern.kind,
    )


informix_extractor = ConstraintNameExtractor(INFORMIX_ERROR_PATTERNS)
