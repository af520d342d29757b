"""
Library example generating an Informix schema script and paged queries.
"""

from __future__ import annotations

from typing import Dict, List

from ifxdialect.config import DialectSettings
from ifxdialect.dialects import resolve_dialect
from ifxdialect.exceptions import translate_exception
from ifxdialect.query import paginate
from ifxdialect.schema import SchemaBuilder

from .tables import Book, Writer

SEQUENCES = ("writer_seq", "book_seq")


def build_schema_script(settings: DialectSettings | None = None) -> List[str]:
    dialect = resolve_dialect("informix", settings)
    builder = SchemaBuilder(dialect)
    statements: List[str] = []
    for sequence in SEQUENCES:
        statements.extend(builder.create_sequence_sql(sequence, increment_size=50))
    statements.extend(builder.create_script([Writer, Book]))
    return statements


def page_of_books(page: int, page_size: int = 20) -> str:
    dialect = resolve_dialect("informix")
    sql = f"select b.title from {dialect.format_table(Book.name)} b order by b.title"
    return paginate(sql, dialect, limit=page_size, offset=page * page_size)


def describe_violation(exc: Exception) -> Dict[str, object]:
    dialect = resolve_dialect("informix")
    error = translate_exception(exc, dialect.constraint_name_extractor)
    return {
        "error_code": error.error_code,
        "constraint": getattr(error, "constraint_name", None),
        "kind": getattr(error, "kind", None),
    }


def run_demo() -> List[str]:
    statements = build_schema_script()
    statements.append(page_of_books(2))
    for statement in statements:
        print(statement)
    return statements


if __name__ == "__main__":
    run_demo()
