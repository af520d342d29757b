"""
Error hierarchy for ifxdialect.
"""

from __future__ import annotations


class DialectError(RuntimeError):
    """Base error for dialect-related failures."""


class DialectConfigurationError(DialectError):
    """Raised when dialect settings are invalid."""


class DialectNotFoundError(DialectError):
    """Raised when no dialect is registered under the requested name."""


class MappingError(DialectError):
    """Raised when a type code has no column type mapping."""


class UnknownFunctionError(DialectError):
    """Raised when rendering a SQL function the dialect does not register."""


class UnsupportedOperationError(DialectError):
    """Raised when the dialect lacks support for the requested operation."""


class SchemaError(DialectError):
    """Raised when table metadata cannot be rendered as DDL."""


class InvalidArgumentError(DialectError, ValueError):
    """Raised when an operation receives an out-of-range argument."""


class DatabaseError(DialectError):
    """
    Structured form of a driver exception raised by the database.
    """

    def __init__(self, message: str, *, error_code: int | None = None) -> None:
        self.error_code = error_code
        super().__init__(message)


class ConstraintViolationError(DatabaseError):
    """
    Raised when the database reports a violated constraint.

    ``constraint_name`` is ``None`` when the message could not be attributed
    to a named constraint.
    """

    def __init__(
        self,
        message: str,
        *,
        error_code: int | None = None,
        constraint_name: str | None = None,
        kind: str | None = None,
    ) -> None:
        self.constraint_name = constraint_name
        self.kind = kind
        super().__init__(message, error_code=error_code)
