"""
Dialect strategy interfaces describing SQL rendering behaviors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from ..exceptions import ConstraintNameExtractor
from ..types import TypeNames


@dataclass(frozen=True)
class DialectCapabilities:
    """
    Feature flags describing backend capabilities.
    """

    supports_identity_columns: bool = False
    has_data_type_in_identity_column: bool = True
    supports_sequences: bool = False
    supports_pooled_sequences: bool = False
    supports_limit: bool = False
    supports_limit_offset: bool = False
    supports_variable_limit: bool = True
    bind_limit_parameters_first: bool = False
    use_max_for_limit: bool = False
    supports_temporary_tables: bool = False
    supports_current_timestamp_selection: bool = False
    is_current_timestamp_select_string_callable: bool = False
    supports_union_all: bool = False


class Dialect(Protocol):
    """
    Strategy interface consumed across the query and schema layers.
    """

    @property
    def name(self) -> str: ...

    @property
    def param_style(self) -> str: ...

    @property
    def capabilities(self) -> DialectCapabilities: ...

    @property
    def type_names(self) -> TypeNames: ...

    @property
    def constraint_name_extractor(self) -> ConstraintNameExtractor: ...

    @property
    def add_column_string(self) -> str: ...

    @property
    def create_temporary_table_string(self) -> str: ...

    @property
    def create_temporary_table_postfix(self) -> str: ...

    @property
    def drop_temporary_table_string(self) -> str: ...

    @property
    def no_columns_insert_string(self) -> str: ...

    def quote_identifier(self, identifier: str) -> str: ...

    def format_table(self, table_name: str) -> str: ...

    def parameter_placeholder(self, position: int | None = None) -> str: ...

    def type_name(self, type_code: int, length: int = ..., precision: int = ..., scale: int = ...) -> str: ...

    def render_column_definition(self, column: str, column_type: str, *, nullable: bool) -> str: ...

    def render_function(self, name: str, args: Sequence[str] = ()) -> str: ...

    def to_boolean_value_string(self, value: bool) -> str: ...

    def limit_string(self, query: str, offset: int, limit: int) -> str: ...

    def identity_column_string(self, type_code: int) -> str: ...

    def identity_select_string(self, table: str, column: str, type_code: int) -> str: ...

    def create_sequence_strings(self, sequence_name: str, initial_value: int = 1, increment_size: int = 1) -> list[str]: ...

    def drop_sequence_string(self, sequence_name: str) -> str: ...

    def generate_temporary_table_name(self, base_table_name: str) -> str: ...

    def add_primary_key_constraint_string(self, constraint_name: str) -> str: ...

    def add_foreign_key_constraint_string(
        self,
        constraint_name: str,
        foreign_key: Sequence[str],
        referenced_table: str,
        primary_key: Sequence[str],
        references_primary_key: bool,
    ) -> str: ...
