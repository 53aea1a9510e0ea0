"""Reference-walking evaluator.

`evaluate` visits a node, renders it, then follows each Reference child in
order, depth first. It returns the largest id seen in the subtree so that a
driver can resume right after it; ids are assigned in open order, so
`returned + 1` is the next top-level form.

The walk recurses once per nesting level. Before walking, the interpreter's
recursion limit is raised to cover the deepest nesting the reader recorded.
"""

from __future__ import annotations

import sys

from sexpa import EmitFn, NodeId
from sexpa.types.arena import Arena
from sexpa.types.atom import Reference
from sexpa.types.environment import Environment
from sexpa.types.node import Node

# Frames reserved for the caller's own stack on top of the walk itself.
RECURSION_HEADROOM = 1000


def render_node(node: Node, node_id: NodeId | None = None) -> str:
    if node_id is None:
        return str(node)
    return f"{node_id} {node}"


def ensure_recursion_limit(depth: int) -> None:
    needed = depth + RECURSION_HEADROOM
    if sys.getrecursionlimit() < needed:
        sys.setrecursionlimit(needed)


def evaluate(
    arena: Arena,
    env: Environment,
    node_id: NodeId,
    emit: EmitFn = print,
    show_ids: bool = False,
) -> NodeId:
    """Visit `node_id` and everything it references, in pre-order.

    Ids missing from the arena are a no-op and come back unchanged.
    """
    ensure_recursion_limit(getattr(arena, "depth", 0))
    return _walk(arena, env, node_id, emit, show_ids)


def _walk(arena: Arena, env: Environment, node_id: NodeId, emit: EmitFn, show_ids: bool) -> NodeId:
    node = arena.get(node_id)
    if node is None:
        return node_id

    emit(render_node(node, node_id if show_ids else None))

    highest = node_id
    for child in node.children:
        if isinstance(child, Reference):
            subtree = _walk(arena, env, child.node_id, emit, show_ids)
            highest = max(highest, child.node_id, subtree)
    return highest
