"""Operation-specific Rich renderers for ServiceResult.

Renderers write to a StringIO-backed Console; dispatch is by
``result.op`` with a generic key-value fallback.
"""

from __future__ import annotations

import json as _json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from gochk.output.console import create_console, get_output, style_for_color

if TYPE_CHECKING:
    from rich.console import Console

    from gochk.services.result import ServiceResult

Renderer = Callable[["ServiceResult", "Console"], None]

_LABELS = {
    "violated": "[Violated]",
    "verified": "[Verified]",
    "ignored": "[Ignored]",
}


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to text (plain when not on a terminal)."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output: one violating file per line, or a status word."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    violating = [
        str(r.get("file_path", ""))
        for r in result.data.get("results", [])
        if r.get("result_type") == "violated"
    ]
    if violating:
        return "\n".join(violating)
    return f"OK: {result.op}"


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="gochk.error")
    op = Text(f"  {result.op}", style="gochk.op")
    console.print(label, op, Text(" — "), Text(msg))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


def _render_check(result: ServiceResult, console: Console) -> None:
    """One labelled block per result, then a summary line."""
    items: list[dict[str, Any]] = result.data.get("results", [])
    for item in items:
        kind = str(item.get("result_type", ""))
        style = style_for_color(str(item.get("color", "")))
        label = Text(_LABELS.get(kind, f"[{kind}]"), style=style)
        lines = str(item.get("message", "")).splitlines() or [""]
        console.print(label, Text(lines[0], style=style))
        for line in lines[1:]:
            console.print(Text(" " * (len(label) + 1) + line, style=style))

    violations = int(result.data.get("violations", 0))
    files = int(result.data.get("files_checked", 0))
    if violations:
        summary = Text(f"{violations} violation(s) in {files} file(s) checked", style="gochk.error")
    else:
        summary = Text(f"OK  No violations in {files} file(s) checked", style="gochk.ok")
    if items:
        console.print()
    console.print(summary)


def _render_generic(result: ServiceResult, console: Console) -> None:
    console.print(Text("OK", style="gochk.ok"), Text(f"  {result.op}", style="gochk.op"))
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = _json.dumps(value, separators=(",", ":"))
        console.print(Text(f"  {key}: ", style="gochk.key"), Text(str(value)))


def _render_meta(console: Console, result: ServiceResult) -> None:
    telemetry = (result.meta or {}).get("telemetry")
    if not telemetry:
        return
    console.print(Text("telemetry:", style="dim"))
    _render_span(console, telemetry, depth=1)


def _render_span(console: Console, span: dict[str, Any], *, depth: int) -> None:
    indent = "  " * depth
    console.print(Text(f"{indent}{span.get('name')}  {span.get('duration_ms', 0)}ms", style="dim"))
    for child in span.get("children", []):
        _render_span(console, child, depth=depth + 1)


_OP_RENDERERS: dict[str, Renderer] = {
    "check": _render_check,
}
