"""Runtime logging helpers."""

from __future__ import annotations

import sys

from loguru import logger

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_DEFAULT_LEVEL = "WARNING"
_CONFIGURED_LEVEL: str | None = None


def _resolve_level(level: str) -> tuple[str, bool]:
    """Return `level` if loguru knows it, else the default and False."""
    try:
        logger.level(level)
    except ValueError:
        return _DEFAULT_LEVEL, False
    return level, True


def configure_logging(level: str = _DEFAULT_LEVEL) -> str:
    """Send sexpa's log records to stderr at `level` and return the level in use.

    Unknown level names fall back to WARNING. Repeated calls with the same
    level are no-ops.
    """
    global _CONFIGURED_LEVEL
    resolved, known = _resolve_level(level)
    if resolved != _CONFIGURED_LEVEL:
        logger.remove()
        logger.add(
            sys.stderr,
            level=resolved,
            format=_FORMAT,
            backtrace=False,
            diagnose=False,
        )
        logger.enable("sexpa")
        _CONFIGURED_LEVEL = resolved

    if not known:
        logger.warning("Unknown log level {!r}, using {}", level, resolved)
    return resolved
