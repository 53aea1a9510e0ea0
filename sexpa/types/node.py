from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from sexpa.errors import UnsupportedDelimiter
from sexpa.types.atom import Atom


class NodeKind(Enum):
    EXEC = "exec"
    VECTOR = "vector"
    MAP = "map"
    STRING = "string"
    LIST = "list"

    @classmethod
    def from_delimiter(cls, delimiter: str, line: int | None = None, column: int | None = None) -> NodeKind:
        try:
            return _OPENERS[delimiter]
        except KeyError:
            raise UnsupportedDelimiter(
                f"Cannot open a container with {delimiter!r}", line, column
            ) from None


_OPENERS: dict[str, NodeKind] = {
    "(": NodeKind.EXEC,
    "[": NodeKind.VECTOR,
    "{": NodeKind.MAP,
    '"': NodeKind.STRING,
    "'": NodeKind.LIST,
}


@dataclass
class Node:
    """A container: its kind plus children in source order."""

    kind: NodeKind
    children: list[Atom] = field(default_factory=list)

    def push(self, atom: Atom) -> None:
        self.children.append(atom)

    def __str__(self) -> str:
        # An empty node keeps the separator: "(exec )".
        body = " ".join(str(child) for child in self.children)
        return f"({self.kind.value} {body})"
