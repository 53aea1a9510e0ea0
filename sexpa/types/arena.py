"""Read-only, id-indexed store of committed container nodes.

The Reader fills a plain dict while it runs and wraps it in an Arena once the
token stream is exhausted. Ids are dense from 0 and a parent's id is always
smaller than the id of any container nested inside it, so Reference atoms
only ever point forward and no cycle can form.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterator

from sexpa import NodeId
from sexpa.types.atom import Reference
from sexpa.types.node import Node


class Arena(Mapping):
    __slots__ = ("_items", "depth")

    def __init__(self, items: dict[NodeId, Node] | None = None, depth: int = 0):
        self._items = MappingProxyType(dict(items or {}))
        # deepest container nesting seen by the reader
        self.depth = depth

    def __getitem__(self, node_id: NodeId) -> Node:
        return self._items[node_id]

    def __iter__(self) -> Iterator[NodeId]:
        return iter(sorted(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def references(self, node_id: NodeId) -> list[NodeId]:
        """Ids of the containers directly nested in `node_id`, in source order."""
        return [c.node_id for c in self._items[node_id].children if isinstance(c, Reference)]

    def __repr__(self) -> str:
        return f"<Arena {len(self._items)} nodes>"
