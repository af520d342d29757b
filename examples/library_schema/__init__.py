from .demo import (  # noqa: F401
    build_schema_script,
    describe_violation,
    page_of_books,
    run_demo,
)

__all__ = [
    "build_schema_script",
    "describe_violation",
    "page_of_books",
    "run_demo",
]
