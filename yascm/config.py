from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


_TRUTHY = {"1", "true", "yes", "on"}


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_load_roots() -> List[Path]:
    """Directories searched for relative `load` paths, after the current directory."""
    return paths_from_env('YASCM_LOAD_PATH', [])


def echo_enabled() -> bool:
    return os.environ.get('YASCM_ECHO', '').strip().lower() in _TRUTHY


def get_log_level() -> str:
    return os.environ.get('YASCM_LOG_LEVEL', 'WARNING').strip().upper()


def get_prompt() -> str:
    return os.environ.get('YASCM_PROMPT', '> ')
