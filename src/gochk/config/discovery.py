"""Locate and read ``gochk.toml``.

Search order: the GOCHK_CONFIG env var, then each directory from *start*
upward for ``gochk.toml`` or ``.gochk.toml``. The walk stops at the first
directory holding a ``go.mod``: a config above the module root belongs
to some other project.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator
from pathlib import Path
from typing import Any

CONFIG_FILENAMES = ("gochk.toml", ".gochk.toml")
CONFIG_ENV_VAR = "GOCHK_CONFIG"
_MODULE_MARKER = "go.mod"


def _ancestors(start: Path) -> Iterator[Path]:
    current = start.resolve()
    if current.is_file():
        current = current.parent
    yield current
    yield from current.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), or None."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    for directory in _ancestors(start or Path.cwd()):
        for name in CONFIG_FILENAMES:
            candidate = directory / name
            if candidate.is_file():
                return candidate
        if (directory / _MODULE_MARKER).is_file():
            break
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path*; a missing file reads as an empty table."""
    if not path.is_file():
        return {}
    with path.open("rb") as fh:
        return tomllib.load(fh)
