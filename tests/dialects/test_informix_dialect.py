import pytest

from ifxdialect.config import DialectSettings
from ifxdialect.dialects import InformixDialect
from ifxdialect.exceptions import InvalidArgumentError, UnknownFunctionError
from ifxdialect.types import SQLType

dialect = InformixDialect()


def test_informix_identifiers():
    assert dialect.quote_identifier('bad"name') == '"bad""name"'
    assert dialect.format_table("informix.systables") == '"informix"."systables"'
    assert dialect.format_table("orders") == '"orders"'
    assert dialect.parameter_placeholder() == "?"


def test_limit_string_inserts_first_after_select():
    assert dialect.limit_string("select * from t", 0, 10) == "select first 10 * from t"
    assert dialect.limit_string("SELECT a FROM t", 0, 0) == "SELECT first 0 a FROM t"


def test_limit_string_inserts_skip_when_offset_given():
    assert dialect.limit_string("select * from t", 5, 10) == "select skip 5 first 10 * from t"


def test_limit_string_only_rewrites_first_select():
    sql = "select a from (select b from t)"
    assert dialect.limit_string(sql, 0, 3) == "select first 3 a from (select b from t)"


def test_limit_string_matches_select_inside_comment():
    sql = "/* select */ SELECT a FROM t"
    assert dialect.limit_string(sql, 0, 1) == "/* select first 1 */ SELECT a FROM t"


def test_limit_string_with_non_ascii_text_before_select():
    sql = "-- \u0130ade\nselect a from t"
    assert dialect.limit_string(sql, 0, 5) == "-- \u0130ade\nselect first 5 a from t"
    assert dialect.limit_string(sql, 2, 5) == "-- \u0130ade\nselect skip 2 first 5 a from t"


def test_limit_string_without_select_keyword():
    assert dialect.limit_string("values 1", 0, 2) == "value first 2s 1"


@pytest.mark.parametrize("offset, limit", [(-1, 5), (5, -1)])
def test_limit_string_rejects_negative_values(offset, limit):
    with pytest.raises(InvalidArgumentError):
        dialect.limit_string("select * from t", offset, limit)
    with pytest.raises(ValueError):
        dialect.limit_string("select * from t", offset, limit)


def test_constraint_fragments():
    assert dialect.add_column_string == "add"
    assert dialect.add_primary_key_constraint_string("pk_t") == " add constraint primary key constraint pk_t "
    assert (
        dialect.add_foreign_key_constraint_string("fk_x", ["a", "b"], "parent", ["id1", "id2"], False)
        == " add constraint  foreign key (a, b) references parent (id1, id2) constraint fk_x"
    )
    assert (
        dialect.add_foreign_key_constraint_string("fk_x", ["a", "b"], "parent", ["id1", "id2"], True)
        == " add constraint  foreign key (a, b) references parent constraint fk_x"
    )


def test_fragments_are_deterministic():
    first = dialect.add_foreign_key_constraint_string("fk", ["a"], "p", ["id"], False)
    second = InformixDialect().add_foreign_key_constraint_string("fk", ["a"], "p", ["id"], False)
    assert first == second
    assert dialect.limit_string("select 1", 2, 3) == dialect.limit_string("select 1", 2, 3)


def test_sequence_strings():
    assert dialect.create_sequence_string("s") == "create sequence s"
    assert dialect.create_sequence_strings("s", 1, 50) == ["create sequence s start with 1 increment by 50"]
    assert dialect.drop_sequence_string("s") == "drop sequence s"
    assert dialect.select_sequence_next_val_string("s") == "s.nextval"
    assert dialect.sequence_next_val_string("s") == "select s.nextval from systables where tabid=1"
    assert dialect.query_sequences_string.startswith("select systables.tabname from systables,syssequences")


def test_identity_strings():
    assert dialect.identity_column_string(SQLType.BIGINT) == "bigserial not null"
    assert dialect.identity_column_string(SQLType.INTEGER) == "serial not null"
    assert dialect.identity_select_string("t", "id", SQLType.BIGINT) == (
        "select dbinfo('bigserial') from systables where tabid=1"
    )
    assert dialect.identity_select_string("t", "id", SQLType.INTEGER) == (
        "select dbinfo('sqlca.sqlerrd1') from systables where tabid=1"
    )
    assert dialect.identity_insert_string == "0"


def test_temporary_table_and_misc_strings():
    assert dialect.create_temporary_table_string == "create temp table"
    assert dialect.create_temporary_table_postfix == "with no log"
    assert dialect.generate_temporary_table_name("orders") == "HT_orders"
    assert dialect.current_timestamp_select_string == "select distinct current timestamp from informix.systables"
    assert dialect.no_columns_insert_string == "values (0)"
    assert dialect.to_boolean_value_string(True) == "'t'"
    assert dialect.to_boolean_value_string(False) == "'f'"


def test_capabilities():
    caps = dialect.capabilities
    assert caps.supports_sequences and caps.supports_pooled_sequences
    assert not caps.supports_identity_columns
    assert not hasattr(caps, "supports_savepoints")
    assert caps.supports_limit and caps.supports_limit_offset
    assert not caps.supports_variable_limit
    assert caps.supports_temporary_tables
    assert caps.supports_union_all


def test_column_definition():
    assert dialect.render_column_definition("name", "varchar(20)", nullable=False) == '"name" varchar(20) not null'
    assert dialect.render_column_definition("name", "varchar(20)", nullable=True) == '"name" varchar(20)'


def test_functions():
    assert dialect.render_function("concat", ["a", "b", "c"]) == "(a||b||c)"
    assert dialect.render_function("UPPER", ["x"]) == "upper(x)"
    assert not dialect.has_function("current_date")
    with pytest.raises(UnknownFunctionError):
        dialect.render_function("current_date")


def test_current_date_function_toggles():
    systables = InformixDialect(DialectSettings(enable_current_date_function=True))
    assert systables.render_function("current_date") == "(select first 1 today from informix.systables)"

    sysdual = InformixDialect(
        DialectSettings(enable_current_date_function=True, use_sysdual_for_current_date=True)
    )
    assert sysdual.render_function("current_date") == "(select today from sysmaster:sysdual)"
    with pytest.raises(ValueError):
        sysdual.render_function("current_date", ["x"])
