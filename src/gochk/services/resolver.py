"""Dependency resolution — transitive closure of a file's internal imports.

Uses an explicit FIFO worklist and a visited set keyed by canonical file
path, so deep or cyclic import graphs neither recurse nor loop. Every
edge found is attributed to the top-level file and its layer.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from pathlib import Path
from typing import NamedTuple

import structlog

from gochk.domain.imports import read_imports
from gochk.domain.layers import LayerOrder
from gochk.domain.types import Dependency
from gochk.infrastructure.filesystem import open_source, package_files
from gochk.infrastructure.gomod import GoModule

log = structlog.get_logger(__name__)


class Resolution(NamedTuple):
    """Edges found plus the first open error hit along the way (if any)."""

    dependencies: list[Dependency]
    error: OSError | None


def _canonical(path: Path) -> Path:
    try:
        return path.resolve()
    except OSError:
        return path.absolute()


def _as_order(order: LayerOrder | Sequence[str]) -> LayerOrder:
    return order if isinstance(order, LayerOrder) else LayerOrder.of(order)


def is_internal(import_path: str, order: LayerOrder, module: GoModule | None) -> bool:
    """Whether *import_path* belongs to the module under analysis.

    Without a known module, an import counts as internal when some
    configured layer claims it.
    """
    if module is not None:
        return module.is_internal(import_path)
    return order.classify(import_path) is not None


def classify_import(import_path: str, order: LayerOrder, module: GoModule | None) -> int | None:
    """Layer rank of an internal import, judged on the part below the module path."""
    if module is not None and module.is_internal(import_path):
        bare = import_path.strip('"`')
        return order.classify(bare[len(module.path) :])
    return order.classify(import_path)


def retrieve_dependencies(
    order: LayerOrder | Sequence[str],
    file_path: Path | str,
    current_layer: int,
    *,
    module: GoModule | None = None,
) -> Resolution:
    """Expand *file_path*'s internal imports into a flat list of edges.

    Raises:
        LayerError: *current_layer* is not a rank of *order*.
    """
    layer_order = _as_order(order)
    layer_order.validate_rank(current_layer)

    start = Path(file_path)
    top = str(file_path)
    worklist: deque[Path] = deque([start])
    visited: set[Path] = {_canonical(start)}
    dependencies: list[Dependency] = []
    first_error: OSError | None = None

    while worklist:
        current = worklist.popleft()
        try:
            with open_source(current) as stream:
                imports = read_imports(stream)
        except OSError as exc:
            log.warning("resolve.unreadable", path=str(current), error=str(exc))
            if first_error is None:
                first_error = exc
            continue

        via = top if current is start else str(current)
        for import_path in imports:
            if not is_internal(import_path, layer_order, module):
                continue
            import_layer = classify_import(import_path, layer_order, module)
            dependencies.append(
                Dependency(
                    file_path=top,
                    file_layer=current_layer,
                    import_path=import_path,
                    import_layer=import_layer,
                    via=via,
                )
            )
            if module is None:
                continue
            for pkg_file in package_files(module.package_dir(import_path)):
                key = _canonical(pkg_file)
                if key not in visited:
                    visited.add(key)
                    worklist.append(pkg_file)

    log.debug(
        "resolve.done",
        path=top,
        layer=current_layer,
        edges=len(dependencies),
        files=len(visited),
    )
    return Resolution(dependencies, first_error)
