"""
Informix dialect implementation.

Targets Informix Dynamic Server. Column types prefer smart large objects
(``clob``/``blob``) over the legacy ``text``/``byte`` types, and generated
keys come from sequences rather than ``serial`` columns.
"""

from __future__ import annotations

import re
from typing import Dict, Final, Sequence

from ..config import DialectSettings
from ..exceptions import ConstraintNameExtractor, InvalidArgumentError, UnknownFunctionError, informix_extractor
from ..types import DEFAULT_LENGTH, DEFAULT_PRECISION, DEFAULT_SCALE, DEFAULT_TYPE_NAMES, SQLType, TypeNames
from ..utils import get_logger, join_names
from .base import Dialect, DialectCapabilities
from .functions import NoArgFunction, SQLFunction, VarArgsFunction, default_functions, merge_functions

_SELECT_KEYWORD = re.compile("select", re.IGNORECASE | re.ASCII)

CURRENT_DATE_SYSTABLES = "(select first 1 today from informix.systables)"
CURRENT_DATE_SYSDUAL = "(select today from sysmaster:sysdual)"


def _build_type_names() -> TypeNames:
    names = TypeNames(fallback=DEFAULT_TYPE_NAMES)

    names.register(SQLType.CHAR, "char($l)")
    names.register(SQLType.VARCHAR, "varchar($l)")
    names.register(SQLType.VARCHAR, "varchar($l)", capacity=255)
    names.register(SQLType.VARCHAR, "lvarchar($l)", capacity=32739)
    names.register(SQLType.LONGVARCHAR, "clob")
    names.register(SQLType.CLOB, "clob")

    # no bit type
    names.register(SQLType.BIT, "smallint")
    names.register(SQLType.TINYINT, "smallint")
    names.register(SQLType.SMALLINT, "smallint")
    names.register(SQLType.INTEGER, "integer")
    names.register(SQLType.BIGINT, "bigint")
    names.register(SQLType.FLOAT, "smallfloat")
    names.register(SQLType.REAL, "smallfloat")
    names.register(SQLType.DOUBLE, "float")
    names.register(SQLType.NUMERIC, "decimal")
    names.register(SQLType.DECIMAL, "decimal")

    names.register(SQLType.DATE, "date")
    names.register(SQLType.TIME, "datetime hour to second")
    names.register(SQLType.TIMESTAMP, "datetime year to fraction(5)")

    names.register(SQLType.BOOLEAN, "boolean")
    names.register(SQLType.BINARY, "byte")
    names.register(SQLType.VARBINARY, "blob")
    names.register(SQLType.LONGVARBINARY, "blob")
    names.register(SQLType.BLOB, "blob")
    return names.freeze()


def _build_functions(settings: DialectSettings) -> Dict[str, SQLFunction]:
    informix: Dict[str, SQLFunction] = {"concat": VarArgsFunction("(", "||", ")")}
    if settings.enable_current_date_function:
        expression = CURRENT_DATE_SYSDUAL if settings.use_sysdual_for_current_date else CURRENT_DATE_SYSTABLES
        informix["current_date"] = NoArgFunction(expression, has_parentheses=False)
    return merge_functions(default_functions(), informix)


class InformixDialect:
    """
    Informix dialect using qmark placeholders and SKIP/FIRST pagination.
    """

    name: Final[str] = "informix"
    param_style: Final[str] = "qmark"
    capabilities: Final[DialectCapabilities] = DialectCapabilities(
        supports_identity_columns=False,
        has_data_type_in_identity_column=False,
        supports_sequences=True,
        supports_pooled_sequences=True,
        supports_limit=True,
        supports_limit_offset=True,
        supports_variable_limit=False,
        bind_limit_parameters_first=False,
        use_max_for_limit=False,
        supports_temporary_tables=True,
        supports_current_timestamp_selection=True,
        is_current_timestamp_select_string_callable=False,
        supports_union_all=True,
    )

    add_column_string: Final[str] = "add"
    identity_insert_string: Final[str] = "0"
    no_columns_insert_string: Final[str] = "values (0)"
    create_temporary_table_string: Final[str] = "create temp table"
    create_temporary_table_postfix: Final[str] = "with no log"
    drop_temporary_table_string: Final[str] = "drop table"
    current_timestamp_select_string: Final[str] = (
        "select distinct current timestamp from informix.systables"
    )
    query_sequences_string: Final[str] = (
        "select systables.tabname from systables,syssequences "
        "where systables.tabid = syssequences.tabid"
    )

    def __init__(self, settings: DialectSettings | None = None) -> None:
        self.settings = settings or DialectSettings()
        self.logger = get_logger("dialects.informix")
        self._type_names = _build_type_names()
        self._functions = _build_functions(self.settings)
        self.logger.debug(
            "Informix dialect built with %s type mappings and %s functions",
            len(self._type_names.type_codes()),
            len(self._functions),
        )

    @property
    def type_names(self) -> TypeNames:
        return self._type_names

    @property
    def constraint_name_extractor(self) -> ConstraintNameExtractor:
        return informix_extractor

    # Identifiers ---------------------------------------------------------
    def quote_identifier(self, identifier: str) -> str:
        escaped = identifier.replace('"', '""')
        return f'"{escaped}"'

    def format_table(self, table_name: str) -> str:
        if "." in table_name:
            owner, table = table_name.split(".", 1)
            return f"{self.quote_identifier(owner)}.{self.quote_identifier(table)}"
        return self.quote_identifier(table_name)

    def parameter_placeholder(self, position: int | None = None) -> str:
        return "?"

    # Types and literals --------------------------------------------------
    def type_name(
        self,
        type_code: int,
        length: int = DEFAULT_LENGTH,
        precision: int = DEFAULT_PRECISION,
        scale: int = DEFAULT_SCALE,
    ) -> str:
        return self._type_names.resolve(type_code, length, precision, scale)

    def render_column_definition(self, column: str, column_type: str, *, nullable: bool) -> str:
        null_clause = "" if nullable else " not null"
        return f"{self.quote_identifier(column)} {column_type}{null_clause}"

    def to_boolean_value_string(self, value: bool) -> str:
        return "'t'" if value else "'f'"

    def render_function(self, name: str, args: Sequence[str] = ()) -> str:
        function = self._functions.get(name.lower())
        if function is None:
            raise UnknownFunctionError(f"Function '{name}' is not registered for {self.name}")
        return function.render(list(args))

    def has_function(self, name: str) -> bool:
        return name.lower() in self._functions

    # Pagination ----------------------------------------------------------
    def limit_string(self, query: str, offset: int, limit: int) -> str:
        """
        Insert ``SKIP``/``FIRST`` right after the first ``select`` keyword.

        ``SELECT FIRST <limit> ...`` or ``SELECT SKIP <offset> FIRST <limit> ...``.
        The keyword is located with a plain case-insensitive text search, so a
        ``select`` appearing earlier inside a literal or comment is matched.
        """
        if offset < 0 or limit < 0:
            raise InvalidArgumentError(
                "Cannot perform limit query with negative limit and/or offset value(s)"
            )
        match = _SELECT_KEYWORD.search(query)
        # no keyword: position -1 shifted by the keyword length
        index = match.end() if match else 5
        if offset == 0:
            clause = f" first {limit}"
        else:
            clause = f" skip {offset} first {limit}"
        self.logger.debug("Applying pagination clause '%s' at offset %s", clause.strip(), index)
        return f"{query[:index]}{clause}{query[index:]}"

    # Identity ------------------------------------------------------------
    def identity_column_string(self, type_code: int) -> str:
        return "bigserial not null" if type_code == SQLType.BIGINT else "serial not null"

    def identity_select_string(self, table: str, column: str, type_code: int) -> str:
        if type_code == SQLType.BIGINT:
            return "select dbinfo('bigserial') from systables where tabid=1"
        return "select dbinfo('sqlca.sqlerrd1') from systables where tabid=1"

    # Sequences -----------------------------------------------------------
    def select_sequence_next_val_string(self, sequence_name: str) -> str:
        return f"{sequence_name}.nextval"

    def sequence_next_val_string(self, sequence_name: str) -> str:
        return f"select {self.select_sequence_next_val_string(sequence_name)} from systables where tabid=1"

    def create_sequence_string(self, sequence_name: str) -> str:
        return f"create sequence {sequence_name}"

    def create_sequence_strings(
        self, sequence_name: str, initial_value: int = 1, increment_size: int = 1
    ) -> list[str]:
        if self.capabilities.supports_pooled_sequences:
            return [
                f"{self.create_sequence_string(sequence_name)} "
                f"start with {initial_value} increment by {increment_size}"
            ]
        return [self.create_sequence_string(sequence_name)]

    def drop_sequence_string(self, sequence_name: str) -> str:
        return f"drop sequence {sequence_name}"

    # Temporary tables ----------------------------------------------------
    def generate_temporary_table_name(self, base_table_name: str) -> str:
        return f"HT_{base_table_name}"

    # Constraints ---------------------------------------------------------
    def add_primary_key_constraint_string(self, constraint_name: str) -> str:
        # constraint name goes last
        return f" add constraint primary key constraint {constraint_name} "

    def add_foreign_key_constraint_string(
        self,
        constraint_name: str,
        foreign_key: Sequence[str],
        referenced_table: str,
        primary_key: Sequence[str],
        references_primary_key: bool,
    ) -> str:
        parts = [
            " add constraint ",
            " foreign key (",
            join_names(foreign_key),
            ") references ",
            referenced_table,
        ]
        if not references_primary_key:
            parts.extend([" (", join_names(primary_key), ")"])
        parts.extend([" constraint ", constraint_name])
        return "".join(parts)


def get_informix_dialect(settings: DialectSettings | None = None) -> Dialect:
    return InformixDialect(settings)
