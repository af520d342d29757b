import pytest

from ifxdialect.dialects import InformixDialect
from ifxdialect.exceptions import MappingError
from ifxdialect.types import DEFAULT_TYPE_NAMES, SQLType, TypeNames

dialect = InformixDialect()


def test_varchar_buckets_pick_smallest_capacity_that_fits():
    assert dialect.type_name(SQLType.VARCHAR, 100) == "varchar(100)"
    assert dialect.type_name(SQLType.VARCHAR, 255) == "varchar(255)"
    assert dialect.type_name(SQLType.VARCHAR, 256) == "lvarchar(256)"
    assert dialect.type_name(SQLType.VARCHAR, 32739) == "lvarchar(32739)"
    assert dialect.type_name(SQLType.VARCHAR, 40000) == "varchar(40000)"


def test_informix_specific_types():
    assert dialect.type_name(SQLType.CHAR, 10) == "char(10)"
    assert dialect.type_name(SQLType.BIT) == "smallint"
    assert dialect.type_name(SQLType.DOUBLE) == "float"
    assert dialect.type_name(SQLType.FLOAT) == "smallfloat"
    assert dialect.type_name(SQLType.NUMERIC, precision=10, scale=2) == "decimal"
    assert dialect.type_name(SQLType.TIME) == "datetime hour to second"
    assert dialect.type_name(SQLType.TIMESTAMP) == "datetime year to fraction(5)"
    assert dialect.type_name(SQLType.LONGVARCHAR) == "clob"
    assert dialect.type_name(SQLType.BINARY) == "byte"
    assert dialect.type_name(SQLType.VARBINARY) == "blob"


def test_unregistered_codes_use_shared_defaults():
    assert SQLType.NCHAR not in dialect.type_names
    assert dialect.type_name(SQLType.NCHAR, 20) == "nchar(20)"
    assert dialect.type_name(SQLType.NCLOB) == "nclob"


def test_default_table_substitutes_precision_and_scale():
    assert DEFAULT_TYPE_NAMES.resolve(SQLType.NUMERIC, precision=10, scale=3) == "numeric(10,3)"
    assert DEFAULT_TYPE_NAMES.resolve(SQLType.FLOAT) == "float(19)"


def test_unknown_type_code_raises():
    with pytest.raises(MappingError):
        dialect.type_name(9999)
    with pytest.raises(MappingError):
        TypeNames().get(SQLType.INTEGER)


def test_buckets_are_ordered_by_capacity():
    names = TypeNames()
    names.register(SQLType.VARCHAR, "c($l)")
    names.register(SQLType.VARCHAR, "b($l)", capacity=100)
    names.register(SQLType.VARCHAR, "a($l)", capacity=10)
    assert names.resolve(SQLType.VARCHAR, 10) == "a(10)"
    assert names.resolve(SQLType.VARCHAR, 11) == "b(11)"
    assert names.resolve(SQLType.VARCHAR, 101) == "c(101)"


def test_register_overwrites_existing_template():
    names = TypeNames()
    names.register(SQLType.INTEGER, "int")
    names.register(SQLType.INTEGER, "integer")
    assert names.get(SQLType.INTEGER) == "integer"
    assert 4 in names
    assert names.type_codes() == [SQLType.INTEGER]


def test_frozen_table_rejects_registration():
    assert dialect.type_names.frozen
    with pytest.raises(MappingError):
        dialect.type_names.register(SQLType.INTEGER, "int8")
