"""
SQL function templates rendered by dialects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Protocol, Sequence


class SQLFunction(Protocol):
    def render(self, args: Sequence[str]) -> str: ...


@dataclass(frozen=True)
class StandardFunction:
    """
    Renders ``name(arg, ...)``.
    """

    name: str

    def render(self, args: Sequence[str]) -> str:
        return f"{self.name}({', '.join(args)})"


@dataclass(frozen=True)
class VarArgsFunction:
    """
    Renders ``begin`` + args joined by ``separator`` + ``end``.
    """

    begin: str
    separator: str
    end: str

    def render(self, args: Sequence[str]) -> str:
        return f"{self.begin}{self.separator.join(args)}{self.end}"


@dataclass(frozen=True)
class NoArgFunction:
    """
    Renders a fixed expression that takes no arguments.
    """

    name: str
    has_parentheses: bool = True

    def render(self, args: Sequence[str]) -> str:
        if args:
            raise ValueError(f"Function '{self.name}' does not accept arguments")
        return f"{self.name}()" if self.has_parentheses else self.name


def default_functions() -> Dict[str, SQLFunction]:
    names = ("abs", "mod", "sqrt", "upper", "lower", "length", "coalesce", "nullif", "trim")
    return {name: StandardFunction(name) for name in names}


def merge_functions(*tables: Mapping[str, SQLFunction]) -> Dict[str, SQLFunction]:
    merged: Dict[str, SQLFunction] = {}
    for table in tables:
        merged.update({name.lower(): function for name, function in table.items()})
    return merged
