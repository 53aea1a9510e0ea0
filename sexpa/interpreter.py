from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from sexpa import EmitFn, NodeId, config
from sexpa.debug_utils.pprint import format_arena
from sexpa.errors import SexpaError, SourceUnreadable
from sexpa.evaluation.evaluator import evaluate
from sexpa.logging_utils import configure_logging
from sexpa.reader.reader import read_source
from sexpa.types.environment import Environment


def load_source(path: str | Path) -> str:
    """Read the whole source document as UTF-8 text."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceUnreadable(f"Could not read {path}: {exc}") from exc


class Interpreter:
    """
    Reads a source document into an Arena once, then walks it one top-level
    form at a time. A single Environment is shared by every form.
    """

    def __init__(self, source: str, emit: EmitFn = print, show_ids: bool | None = None):
        self.arena = read_source(source)
        self.env = Environment()
        self.emit = emit
        self.show_ids = config.get_show_ids() if show_ids is None else show_ids

    @classmethod
    def from_path(cls, path: str | Path, **kwargs) -> Interpreter:
        return cls(load_source(path), **kwargs)

    def dump_arena(self) -> None:
        """Emit the whole arena as an id-ordered table, then a blank line."""
        if not self.arena:
            return
        for line in format_arena(self.arena).split("\n"):
            self.emit(line)
        self.emit("")

    def run(self) -> list[NodeId]:
        """Evaluate every top-level form; returns the ids the cursor stopped at."""
        visited: list[NodeId] = []
        cursor: NodeId = 0
        while cursor < len(self.arena):
            if visited:
                self.emit("")
            highest = evaluate(self.arena, self.env, cursor, self.emit, self.show_ids)
            logger.debug("Top-level form {} spans ids {}..{}", len(visited), cursor, highest)
            visited.append(cursor)
            cursor = highest + 1
        return visited


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    configure_logging(config.get_log_level())
    if len(args) > 1:
        logger.error("usage: sexpa [PATH]")
        return 2
    path = Path(args[0]) if args else config.get_default_source_path()
    try:
        interp = Interpreter.from_path(path)
        if config.get_dump_arena():
            interp.dump_arena()
        interp.run()
    except SexpaError as exc:
        logger.error("{}: {}", type(exc).__name__, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
