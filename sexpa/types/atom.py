"""Scalar and cross-reference values held as Node children.

Each variant is a frozen dataclass, so atoms are hashable and compare
structurally: equal only when both the variant and the payload match. That
makes them usable as Environment keys.

Floats render with Python's repr, so they always keep a fractional part and
use Python's spellings for special values: 1e5 renders as 100000.0 and NaN
as nan, not 100000 and NaN.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from sexpa import NodeId


@dataclass(frozen=True)
class Symbol:
    text: str

    def __str__(self):
        return self.text


@dataclass(frozen=True)
class Keyword:
    text: str

    def __str__(self):
        return self.text


@dataclass(frozen=True)
class Int:
    value: int

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class Float:
    value: float

    def __str__(self):
        return repr(self.value)


@dataclass(frozen=True)
class String:
    text: str

    def __str__(self):
        return self.text


@dataclass(frozen=True)
class Boolean:
    value: bool

    def __str__(self):
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Reference:
    """Stands in for a nested container, pointing at its Arena id."""

    node_id: NodeId

    def __str__(self):
        return f"%{self.node_id}"


Atom = Union[Symbol, Keyword, Int, Float, String, Boolean, Reference]

ATOM_TYPES = (Symbol, Keyword, Int, Float, String, Boolean, Reference)
