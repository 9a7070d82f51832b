"""Layer classification by path segments.

A layer name matches a path when its segments appear as a contiguous run
of the path's segments: ``domain`` matches ``app/domain/user.go`` but not
``app/subdomain/user.go``. Layer names may span segments
(``internal/adapter``).

Tie-break when several layers match: the longest layer name wins; names
of equal length resolve to the one listed first in the order.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from gochk.domain.errors import ConfigError, LayerError

_SEPARATORS = re.compile(r"[\\/]+")


def path_segments(path: str) -> tuple[str, ...]:
    """Split a file path or (quoted) import path into non-empty segments."""
    cleaned = str(path).strip().strip('"`')
    return tuple(s for s in _SEPARATORS.split(cleaned) if s and s != ".")


def _contains_run(haystack: tuple[str, ...], needle: tuple[str, ...]) -> bool:
    if not needle or len(needle) > len(haystack):
        return False
    width = len(needle)
    return any(haystack[i : i + width] == needle for i in range(len(haystack) - width + 1))


def classify(path: str, order: Sequence[str]) -> int | None:
    """Return the rank of the layer *path* belongs to, or None if unordered."""
    segments = path_segments(path)
    best: int | None = None
    best_len = -1
    for rank, name in enumerate(order):
        if len(name) > best_len and _contains_run(segments, path_segments(name)):
            best, best_len = rank, len(name)
    return best


@dataclass(frozen=True)
class LayerOrder:
    """Validated, immutable layer order. Rank = position in ``names``."""

    names: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.names:
            raise ConfigError("dependency order must name at least one layer")
        blank = [n for n in self.names if not n.strip()]
        if blank:
            raise ConfigError("dependency order contains a blank layer name")
        dupes = sorted({n for n in self.names if self.names.count(n) > 1})
        if dupes:
            raise ConfigError(f"duplicate layer names in dependency order: {', '.join(dupes)}")

    @classmethod
    def of(cls, names: Sequence[str]) -> LayerOrder:
        return cls(tuple(names))

    def __len__(self) -> int:
        return len(self.names)

    def classify(self, path: str) -> int | None:
        return classify(path, self.names)

    def rank_of(self, name: str) -> int:
        try:
            return self.names.index(name)
        except ValueError:
            raise LayerError(f"unknown layer: {name!r}") from None

    def name_of(self, rank: int | None) -> str:
        """Layer name for *rank*; ``"unordered"`` for None."""
        if rank is None:
            return "unordered"
        self.validate_rank(rank)
        return self.names[rank]

    def validate_rank(self, rank: int) -> int:
        if not 0 <= rank < len(self.names):
            msg = f"layer rank {rank} is outside the configured order 0..{len(self.names) - 1}"
            raise LayerError(msg)
        return rank
