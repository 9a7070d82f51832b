"""Violation checking and the per-tree check run.

Policy: a file at rank R may depend only on layers at rank >= R. With
the default order ``external, adapter, application, domain`` an adapter
file may import domain packages, while a domain file importing an
adapter package is a violation. Imports no layer claims never violate.

Result contract: a file with at least one violating edge yields exactly
one ``VIOLATED`` result. Clean files yield nothing unless ``show_all`` is
set, in which case layered clean files yield ``VERIFIED`` and unlayered
or unreadable files yield ``IGNORED``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from gochk.config.models import CheckConfig
from gochk.domain.errors import TargetNotFoundError
from gochk.domain.layers import LayerOrder
from gochk.domain.types import CheckResult, Dependency, ResultType
from gochk.infrastructure.filesystem import walk_go_files
from gochk.infrastructure.gomod import GoModule, find_go_module
from gochk.services.resolver import retrieve_dependencies
from gochk.services.telemetry import trace_span

log = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Violation checker
# ---------------------------------------------------------------------------


def is_violation(dep: Dependency) -> bool:
    return dep.import_layer is not None and dep.import_layer < dep.file_layer


def find_violations(dependencies: Iterable[Dependency]) -> list[Dependency]:
    return [d for d in dependencies if is_violation(d)]


def describe_violation(dep: Dependency, order: LayerOrder) -> str:
    """One line per violating edge: ``domain depends on adapter => file: "import"``."""
    line = (
        f"{order.name_of(dep.file_layer)} depends on {order.name_of(dep.import_layer)}"
        f" => {dep.file_path}: {dep.import_path}"
    )
    if not dep.is_direct:
        line += f" (via {dep.via})"
    return line


def evaluate(
    file_path: str,
    dependencies: Sequence[Dependency],
    order: LayerOrder,
) -> CheckResult | None:
    """Aggregate a file's edges into one ``VIOLATED`` result, or None if clean."""
    violations = find_violations(dependencies)
    if not violations:
        return None
    message = "\n".join(describe_violation(d, order) for d in violations)
    return CheckResult.of(
        ResultType.VIOLATED,
        message,
        file_path=file_path,
        dependencies=tuple(violations),
    )


# ---------------------------------------------------------------------------
# Check run
# ---------------------------------------------------------------------------


@dataclass
class CheckReport:
    """Everything a run produced; ``results`` is what reporters print."""

    results: list[CheckResult] = field(default_factory=list)
    files_checked: int = 0
    unreadable: list[str] = field(default_factory=list)
    module: GoModule | None = None

    @property
    def violations(self) -> list[CheckResult]:
        return [r for r in self.results if r.result_type is ResultType.VIOLATED]


def resolve_module(config: CheckConfig) -> GoModule | None:
    """Configured module path wins; otherwise the nearest go.mod above the target."""
    if config.module_path:
        root = config.module_root
        if root is None:
            found = find_go_module(config.target_path)
            root = found.root if found else _directory_of(config.target_path)
        return GoModule(path=config.module_path, root=root)
    return find_go_module(config.target_path)


def _directory_of(path: Path) -> Path:
    resolved = path.resolve()
    return resolved.parent if resolved.is_file() else resolved


def classify_file(path: Path, order: LayerOrder, module: GoModule | None) -> int | None:
    """Layer of a source file, judged on its path below the module root when known."""
    if module is not None:
        try:
            return order.classify(str(path.resolve().relative_to(module.root.resolve())))
        except ValueError:
            pass
    return order.classify(str(path))


def _bottom_violations(results: list[CheckResult]) -> list[CheckResult]:
    others = [r for r in results if r.result_type is not ResultType.VIOLATED]
    return others + [r for r in results if r.result_type is ResultType.VIOLATED]


def run_check(config: CheckConfig) -> CheckReport:
    """Walk ``config.target_path`` and check every Go file in traversal order.

    Raises:
        TargetNotFoundError: the target path does not exist.
    """
    target = config.target_path
    if not target.exists():
        raise TargetNotFoundError(f"target path does not exist: {target}")

    order = config.layer_order
    report = CheckReport(module=resolve_module(config))
    log.debug(
        "check.start",
        target=str(target),
        order=list(order.names),
        module=report.module.path if report.module else None,
    )

    with trace_span("walk") as span:
        for path in walk_go_files(target, config.ignore):
            result = _check_file(path, order, report, show_all=config.show_all)
            if result is not None:
                report.results.append(result)
        if span is not None:
            span.annotate("files", report.files_checked)

    if config.print_violations_at_bottom:
        report.results = _bottom_violations(report.results)
    log.debug(
        "check.done",
        files=report.files_checked,
        violations=len(report.violations),
    )
    return report


def _check_file(
    path: Path,
    order: LayerOrder,
    report: CheckReport,
    *,
    show_all: bool,
) -> CheckResult | None:
    file_path = str(path)
    report.files_checked += 1
    layer = classify_file(path, order, report.module)
    if layer is None:
        log.debug("check.unlayered", path=file_path)
        if show_all:
            message = f"no layer => {file_path}"
            return CheckResult.of(ResultType.IGNORED, message, file_path=file_path)
        return None

    dependencies, error = retrieve_dependencies(order, path, layer, module=report.module)
    if error is not None:
        report.unreadable.append(str(getattr(error, "filename", None) or file_path))

    result = evaluate(file_path, dependencies, order)
    if result is not None or not show_all:
        return result
    if error is not None and not dependencies:
        return CheckResult.of(
            ResultType.IGNORED,
            f"unreadable => {file_path}: {error.strerror or error}",
            file_path=file_path,
        )
    return CheckResult.of(
        ResultType.VERIFIED,
        f"{order.name_of(layer)} => {file_path}",
        file_path=file_path,
        dependencies=tuple(dependencies),
    )


def check(config: CheckConfig) -> list[CheckResult]:
    """Results of checking ``config.target_path``, in traversal order."""
    return run_check(config).results
