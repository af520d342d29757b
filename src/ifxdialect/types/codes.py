"""
Generic SQL type codes shared by every dialect.
"""

from __future__ import annotations

from enum import IntEnum


class SQLType(IntEnum):
    """
    JDBC-compatible type codes identifying abstract column types.
    """

    BIT = -7
    TINYINT = -6
    SMALLINT = 5
    INTEGER = 4
    BIGINT = -5
    FLOAT = 6
    REAL = 7
    DOUBLE = 8
    NUMERIC = 2
    DECIMAL = 3
    CHAR = 1
    VARCHAR = 12
    LONGVARCHAR = -1
    DATE = 91
    TIME = 92
    TIMESTAMP = 93
    BINARY = -2
    VARBINARY = -3
    LONGVARBINARY = -4
    BOOLEAN = 16
    BLOB = 2004
    CLOB = 2005
    NCHAR = -15
    NVARCHAR = -9
    LONGNVARCHAR = -16
    NCLOB = 2011


def type_label(type_code: int) -> str:
    try:
        return SQLType(type_code).name
    except ValueError:
        return str(type_code)
