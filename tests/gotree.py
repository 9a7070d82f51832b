"""Helpers for writing small Go source trees in tests."""

from __future__ import annotations

from pathlib import Path

MODULE = "example.com/shop"
ORDER = ("external", "adapter", "application", "domain")


def pkg(rel: str) -> str:
    """Quoted import literal for an internal package of :data:`MODULE`."""
    return f'"{MODULE}/{rel}"'


def write_go(root: Path, rel: str, *imports: str, package: str | None = None) -> Path:
    """Write a minimal Go file importing *imports* (bare paths, unquoted)."""
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    if not imports:
        block = ""
    elif len(imports) == 1:
        block = f'import "{imports[0]}"\n'
    else:
        block = "import (\n" + "".join(f'\t"{i}"\n' for i in imports) + ")\n"
    name = package or path.parent.name
    path.write_text(f"package {name}\n\n{block}\nfunc Noop() {{}}\n", encoding="utf-8")
    return path
