from __future__ import annotations
import os
from pathlib import Path

# Defaults
_DEFAULT_SOURCE_PATH = Path("./src.clj")
_DEFAULT_LOG_LEVEL = "WARNING"

_TRUTHY = {"1", "true", "yes", "on"}


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def get_log_level() -> str:
    raw = os.environ.get("SEXPA_LOG_LEVEL")
    if not raw or not raw.strip():
        return _DEFAULT_LOG_LEVEL
    return raw.strip().upper()


def get_show_ids() -> bool:
    return flag_from_env("SEXPA_SHOW_IDS")


def get_default_source_path() -> Path:
    return _DEFAULT_SOURCE_PATH


def get_dump_arena() -> bool:
    return flag_from_env("SEXPA_DUMP_ARENA")
