"""Go module discovery.

Walk-up finder for ``go.mod``, the same way ``go`` itself locates the
main module. The module path separates internal imports from third-party
and standard-library ones; the module root maps an internal import path
back to a package directory.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from gochk.domain.errors import ConfigError

GO_MOD = "go.mod"


@dataclass(frozen=True)
class GoModule:
    """Module path (``github.com/acme/app``) and the directory holding go.mod."""

    path: str
    root: Path

    def is_internal(self, import_path: str) -> bool:
        bare = import_path.strip('"`')
        return bare == self.path or bare.startswith(self.path + "/")

    def package_dir(self, import_path: str) -> Path:
        """Directory of an internal package. Caller checks :meth:`is_internal` first."""
        bare = import_path.strip('"`')
        rel = bare[len(self.path) :].lstrip("/")
        return self.root / rel if rel else self.root


def parse_module_path(text: str) -> str | None:
    """Return the ``module`` directive's path from go.mod contents."""
    for raw in text.splitlines():
        tokens = raw.split("//", 1)[0].split(None, 1)
        if len(tokens) == 2 and tokens[0] == "module":
            return tokens[1].strip().strip('"`') or None
    return None


def _read_go_mod(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"cannot read {path}: {exc}"
        raise ConfigError(msg) from exc


def find_go_module(start: Path) -> GoModule | None:
    """Walk up from *start* to the nearest go.mod declaring a module.

    Raises:
        ConfigError: a go.mod on the way up cannot be read or decoded.
    """
    current = start.resolve()
    if current.is_file():
        current = current.parent
    while True:
        candidate = current / GO_MOD
        if candidate.is_file():
            module_path = parse_module_path(_read_go_mod(candidate))
            if module_path:
                return GoModule(path=module_path, root=current)
        parent = current.parent
        if parent == current:
            return None
        current = parent
