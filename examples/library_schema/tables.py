from ifxdialect.schema import Column, ForeignKey, Table
from ifxdialect.types import SQLType

Writer = Table(
    name="writer",
    columns=(
        Column("id", SQLType.BIGINT, nullable=False),
        Column("name", SQLType.VARCHAR, length=120, nullable=False),
        Column("biography", SQLType.VARCHAR, length=4000),
    ),
    primary_key=("id",),
)

Book = Table(
    name="library.book",
    columns=(
        Column("id", SQLType.BIGINT, nullable=False),
        Column("title", SQLType.VARCHAR, length=200, nullable=False),
        Column("writer_id", SQLType.BIGINT, nullable=False),
        Column("isbn", SQLType.CHAR, length=13, unique=True),
        Column("price", SQLType.DECIMAL, precision=10, scale=2),
        Column("published_at", SQLType.TIMESTAMP),
        Column("in_print", SQLType.BOOLEAN, default=True),
    ),
    primary_key=("id",),
    foreign_keys=(ForeignKey("fk_book_writer", ("writer_id",), "writer"),),
)
