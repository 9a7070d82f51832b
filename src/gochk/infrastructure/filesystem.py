"""Traversal driver: walk a target tree, honor ignores, locate package files.

Only this module and :mod:`gochk.infrastructure.gomod` touch the
filesystem. The domain layer works on streams and path strings.
"""

from __future__ import annotations

import fnmatch
import os
from collections.abc import Iterator, Sequence
from enum import StrEnum
from pathlib import Path
from typing import TextIO

GO_SUFFIX = ".go"
TEST_SUFFIX = "_test"

_GLOB_CHARS = frozenset("*?[")


class IgnoreSignal(StrEnum):
    """What the walker should do with an entry."""

    NONE = "none"
    SKIP_DIR = "skip_dir"
    SKIP_FILE = "skip_file"


def _entry_matches(entry: str, name: str, *, is_dir: bool) -> bool:
    if name == entry:
        return True
    if _GLOB_CHARS.intersection(entry):
        return fnmatch.fnmatchcase(name, entry)
    if is_dir:
        return False
    # Plain entries name directories or whole file names; ``_test`` style
    # entries are file-name suffixes.
    return entry.startswith("_") and name.removesuffix(GO_SUFFIX).endswith(entry)


def match_ignore(ignore: Sequence[str], path: Path | str, *, is_dir: bool) -> IgnoreSignal:
    """Match the last component of *path* against the ignore entries.

    An ignored directory yields ``SKIP_DIR`` (prune the subtree); an
    ignored file yields ``SKIP_FILE``. Neither is an error.
    """
    name = Path(path).name
    for entry in ignore:
        entry = entry.strip().rstrip("/")
        if entry and _entry_matches(entry, name, is_dir=is_dir):
            return IgnoreSignal.SKIP_DIR if is_dir else IgnoreSignal.SKIP_FILE
    return IgnoreSignal.NONE


def is_go_source(path: Path) -> bool:
    return path.suffix == GO_SUFFIX


def is_go_test(path: Path) -> bool:
    return path.stem.endswith(TEST_SUFFIX)


def _is_checked(path: Path) -> bool:
    return is_go_source(path) and not is_go_test(path)


def walk_go_files(target: Path, ignore: Sequence[str] = ()) -> Iterator[Path]:
    """Yield ``.go`` files under *target* in sorted, deterministic order.

    A file target yields itself (if it is Go source and not ignored).
    Ignored directories are pruned without descending. ``_test.go`` files
    are never yielded, whatever *ignore* holds.
    """
    if target.is_file():
        if _is_checked(target) and match_ignore(ignore, target, is_dir=False) is IgnoreSignal.NONE:
            yield target
        return

    if match_ignore(ignore, target.resolve(), is_dir=True) is IgnoreSignal.SKIP_DIR:
        return

    for dirpath, dirnames, filenames in os.walk(target):
        dirnames[:] = sorted(
            d for d in dirnames if match_ignore(ignore, d, is_dir=True) is IgnoreSignal.NONE
        )
        for name in sorted(filenames):
            path = Path(dirpath) / name
            if not _is_checked(path):
                continue
            if match_ignore(ignore, name, is_dir=False) is IgnoreSignal.SKIP_FILE:
                continue
            yield path


def package_files(package_dir: Path) -> list[Path]:
    """Non-test ``.go`` files directly inside *package_dir*, sorted.

    Returns an empty list if the directory does not exist.
    """
    if not package_dir.is_dir():
        return []
    return sorted(
        p for p in package_dir.iterdir() if p.is_file() and is_go_source(p) and not is_go_test(p)
    )


def open_source(path: Path) -> TextIO:
    """Open a Go source file for reading.

    A leading byte order mark is dropped. Undecodable bytes are replaced
    rather than raised; import sections are ASCII in practice.
    """
    return path.open(encoding="utf-8-sig", errors="replace")
