"""
Schema builder converting table metadata into dialect-specific DDL.
"""

from __future__ import annotations

from typing import Any, Iterable, List

from ..dialects.base import Dialect
from ..exceptions import SchemaError, UnsupportedOperationError
from ..utils import get_logger, join_names, unqualify
from .metadata import Column, ForeignKey, Table


class SchemaBuilder:
    """
    Produces dialect-specific SQL for schema manipulation.
    """

    def __init__(self, dialect: Dialect) -> None:
        self.dialect = dialect
        self.logger = get_logger("schema.builder")

    # Tables --------------------------------------------------------------
    def create_table_sql(self, table: Table) -> str:
        pieces = [self.column_sql(column) for column in table.columns]
        if table.primary_key:
            pieces.append(f"primary key ({self._quoted_columns(table.primary_key)})")
        return f"create table {self.dialect.format_table(table.name)} ({', '.join(pieces)})"

    def drop_table_sql(self, table: Table) -> str:
        table_name = self.dialect.format_table(table.name)
        self.logger.warning(
            "DROP TABLE generated for %s; confirm destructive migration before applying.",
            table_name,
        )
        return f"drop table {table_name}"

    def column_sql(self, column: Column) -> str:
        capabilities = self.dialect.capabilities
        if column.identity and capabilities.supports_identity_columns:
            identity = self.dialect.identity_column_string(column.type_code)
            if capabilities.has_data_type_in_identity_column:
                identity = f"{self._column_type(column)} {identity}"
            return f"{self.dialect.quote_identifier(column.name)} {identity}"

        column_type = self._column_type(column)
        default_sql = self._default_clause(column.default)
        if default_sql:
            column_type = f"{column_type} {default_sql}"
        nullable = column.nullable and not column.identity
        definition = self.dialect.render_column_definition(column.name, column_type, nullable=nullable)
        if column.unique:
            definition = f"{definition} unique"
        return definition

    def add_column_sql(self, table: Table, column: Column) -> str:
        table_name = self.dialect.format_table(table.name)
        return f"alter table {table_name} {self.dialect.add_column_string} {self.column_sql(column)}"

    def insert_default_row_sql(self, table: Table) -> str:
        return f"insert into {self.dialect.format_table(table.name)} {self.dialect.no_columns_insert_string}"

    # Constraints ---------------------------------------------------------
    def add_primary_key_sql(self, table: Table) -> str:
        if not table.primary_key:
            raise SchemaError(f"Table '{table.name}' has no primary key")
        constraint_name = table.primary_key_name or f"pk_{unqualify(table.name)}"
        fragment = self.dialect.add_primary_key_constraint_string(constraint_name)
        columns = self._quoted_columns(table.primary_key)
        return f"alter table {self.dialect.format_table(table.name)}{fragment}({columns})"

    def add_foreign_key_sql(self, table: Table, foreign_key: ForeignKey) -> str:
        fragment = self.dialect.add_foreign_key_constraint_string(
            foreign_key.name,
            [self.dialect.quote_identifier(name) for name in foreign_key.columns],
            self.dialect.format_table(foreign_key.referenced_table),
            [self.dialect.quote_identifier(name) for name in foreign_key.referenced_columns],
            foreign_key.references_primary_key,
        )
        return f"alter table {self.dialect.format_table(table.name)}{fragment}"

    # Sequences -----------------------------------------------------------
    def create_sequence_sql(self, name: str, initial_value: int = 1, increment_size: int = 1) -> List[str]:
        self._require(self.dialect.capabilities.supports_sequences, "sequences")
        return self.dialect.create_sequence_strings(name, initial_value, increment_size)

    def drop_sequence_sql(self, name: str) -> str:
        self._require(self.dialect.capabilities.supports_sequences, "sequences")
        return self.dialect.drop_sequence_string(name)

    # Temporary tables ----------------------------------------------------
    def temporary_table_name(self, table: Table) -> str:
        return self.dialect.generate_temporary_table_name(unqualify(table.name))

    def create_temporary_table_sql(self, table: Table) -> str:
        self._require(self.dialect.capabilities.supports_temporary_tables, "temporary tables")
        name = self.dialect.format_table(self.temporary_table_name(table))
        columns = ", ".join(self.column_sql(column) for column in table.columns)
        statement = f"{self.dialect.create_temporary_table_string} {name} ({columns})"
        postfix = self.dialect.create_temporary_table_postfix
        return f"{statement} {postfix}" if postfix else statement

    def drop_temporary_table_sql(self, table: Table) -> str:
        self._require(self.dialect.capabilities.supports_temporary_tables, "temporary tables")
        name = self.dialect.format_table(self.temporary_table_name(table))
        return f"{self.dialect.drop_temporary_table_string} {name}"

    # Scripts -------------------------------------------------------------
    def create_script(self, tables: Iterable[Table]) -> List[str]:
        tables = list(tables)
        statements = [self.create_table_sql(table) for table in tables]
        for table in tables:
            statements.extend(self.add_foreign_key_sql(table, fk) for fk in table.foreign_keys)
        return statements

    # Helpers -------------------------------------------------------------
    def _column_type(self, column: Column) -> str:
        return self.dialect.type_name(column.type_code, column.length, column.precision, column.scale)

    def _quoted_columns(self, names: Iterable[str]) -> str:
        return join_names(self.dialect.quote_identifier(name) for name in names)

    def _default_clause(self, value: Any) -> str | None:
        if value is None:
            return None
        if isinstance(value, bool):
            return f"default {self.dialect.to_boolean_value_string(value)}"
        if isinstance(value, str):
            escaped = value.replace("'", "''")
            return f"default '{escaped}'"
        return f"default {value}"

    def _require(self, supported: bool, feature: str) -> None:
        if not supported:
            raise UnsupportedOperationError(f"Dialect '{self.dialect.name}' does not support {feature}")
