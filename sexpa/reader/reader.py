"""
  Reader

Builds a flat Arena from a token sequence instead of a nested tree:

- an opening delimiter reserves the next id and pushes an empty Node
- if a container is already open it receives Reference(id) at that point,
  so a parent learns about a child before the child is complete
- a closing delimiter pops the innermost Node and commits it under its id
- any other token is inferred into an atom and appended to the open Node

Ids are handed out at open time, so a parent's id is smaller than any id
nested inside it and sibling subtrees occupy increasing id ranges.
" and ' reserve the string/list kinds but are skipped by the reader.
"""

from __future__ import annotations

from typing import Iterable

from loguru import logger

from sexpa import NodeId
from sexpa.errors import StackUnderflow, UnterminatedContainer
from sexpa.reader.atoms import infer
from sexpa.reader.tokenizer import Token, tokenize
from sexpa.types.arena import Arena
from sexpa.types.atom import Reference
from sexpa.types.node import Node, NodeKind

OPENERS = frozenset("([{")
CLOSERS = frozenset(")]}")
MARKERS = frozenset("\"'")


def read(tokens: Iterable[Token]) -> Arena:
    items: dict[NodeId, Node] = {}
    open_nodes: list[tuple[Node, Token]] = []
    ids: list[NodeId] = []
    next_id: NodeId = 0
    depth = 0

    for token in tokens:
        text = token.text
        if text in MARKERS:
            logger.debug("Skipping {!r} marker at {}:{}", text, token.line, token.column)
        elif text in OPENERS:
            if open_nodes:
                open_nodes[-1][0].push(Reference(next_id))
            ids.append(next_id)
            next_id += 1
            kind = NodeKind.from_delimiter(text, token.line, token.column)
            open_nodes.append((Node(kind), token))
            depth = max(depth, len(open_nodes))
        elif text in CLOSERS:
            if not open_nodes:
                raise StackUnderflow(f"Unmatched {text!r}", token.line, token.column)
            node_id = ids.pop()
            node, _ = open_nodes.pop()
            items[node_id] = node
            logger.debug("Committed node {} {}", node_id, node)
        else:
            atom = infer(token)
            if open_nodes:
                open_nodes[-1][0].push(atom)
            else:
                logger.debug("Discarding top-level atom {!r} at {}:{}", atom, token.line, token.column)

    if open_nodes:
        _, opener = open_nodes[-1]
        raise UnterminatedContainer(
            f"{len(open_nodes)} container(s) left open, innermost {opener.text!r}",
            opener.line,
            opener.column,
        )

    logger.debug("Read {} nodes, nested {} deep", len(items), depth)
    return Arena(items, depth)


def read_source(source: str) -> Arena:
    """Tokenize and read `source` in one step."""
    return read(tokenize(source))
