from examples.library_schema import build_schema_script, describe_violation, page_of_books, run_demo


class FakeDriverError(Exception):
    def __init__(self, message, sqlcode):
        super().__init__(message)
        self.sqlcode = sqlcode


def test_schema_script_contains_sequences_tables_and_keys():
    script = build_schema_script()
    assert len(script) == 5
    assert script[0] == "create sequence writer_seq start with 1 increment by 50"
    assert script[2].startswith('create table "writer"')
    assert "lvarchar(4000)" in script[2]
    assert script[3].startswith('create table "library"."book"')
    assert "\"in_print\" boolean default 't'" in script[3]
    assert script[4].endswith("constraint fk_book_writer")


def test_page_of_books():
    assert page_of_books(2) == 'select skip 40 first 20 b.title from "library"."book" b order by b.title'
    assert page_of_books(0, 5) == 'select first 5 b.title from "library"."book" b order by b.title'


def test_describe_violation():
    exc = FakeDriverError("Unique constraint (informix.u_book_isbn) violated.", -268)
    assert describe_violation(exc) == {"error_code": -268, "constraint": "u_book_isbn", "kind": "unique"}


def test_run_demo_prints_statements(capsys):
    statements = run_demo()
    output = capsys.readouterr().out
    assert len(statements) == 6
    assert statements[-1] in output
