"""
Errors raised by ifxdialect and driver error translation.
"""

from .constraints import (
    FOREIGN_KEY,
    INFORMIX_ERROR_PATTERNS,
    REFERENCED_KEY,
    UNIQUE,
    ConstraintNameExtractor,
    ErrorPattern,
    extract_error_code,
    extract_using_template,
    informix_extractor,
    translate_exception,
)
from .errors import (
    ConstraintViolationError,
    DatabaseError,
    DialectConfigurationError,
    DialectError,
    DialectNotFoundError,
    InvalidArgumentError,
    MappingError,
    SchemaError,
    UnknownFunctionError,
    UnsupportedOperationError,
)

__all__ = [
    "ConstraintNameExtractor",
    "ConstraintViolationError",
    "DatabaseError",
    "DialectConfigurationError",
    "DialectError",
    "DialectNotFoundError",
    "ErrorPattern",
    "FOREIGN_KEY",
    "INFORMIX_ERROR_PATTERNS",
    "InvalidArgumentError",
    "MappingError",
    "REFERENCED_KEY",
    "SchemaError",
    "UNIQUE",
    "UnknownFunctionError",
    "UnsupportedOperationError",
    "extract_error_code",
    "extract_using_template",
    "informix_extractor",
    "translate_exception",
]
