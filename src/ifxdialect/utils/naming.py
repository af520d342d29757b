"""
Identifier helpers shared by the dialect and schema layers.
"""

from typing import Iterable


def join_names(names: Iterable[str], separator: str = ", ") -> str:
    """
    Join column or table names into a single list fragment.
    """
    return separator.join(names)


def unqualify(name: str) -> str:
    """
    Drop an owner prefix such as ``owner.`` from ``owner.name``.

    Only the first separator counts, so ``a.b.c`` becomes ``b.c``.
    """
    index = name.find(".")
    if index == -1:
        return name
    return name[index + 1 :]
