"""Symbol table threaded through evaluation.

Maps atoms to atoms. Evaluation passes one Environment down every recursive
call but nothing binds or reads names yet; the table is where bindings will
live once forms with binding semantics exist.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator

from sexpa.errors import InvalidKey, UnboundAtom
from sexpa.types.atom import ATOM_TYPES, Atom


class Environment:
    __slots__ = ("vars",)

    def __init__(self):
        self.vars: dict[Atom, Atom] = {}

    def define(self, key: Atom, value: Atom) -> None:
        """Bind `key` to `value`, replacing any previous binding.

        Raises InvalidKey if `key` is not an atom.
        """
        if not isinstance(key, ATOM_TYPES):
            raise InvalidKey(f"Cannot bind {key!r}: keys must be atoms")
        self.vars[key] = value

    def lookup(self, key: Atom) -> Atom:
        try:
            return self.vars[key]
        except KeyError:
            raise UnboundAtom(f"Cannot lookup unbound atom {key}") from None

    def __contains__(self, key: object) -> bool:
        return key in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __iter__(self) -> Iterator[Atom]:
        return iter(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {self}>"
