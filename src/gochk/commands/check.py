"""Command: check a Go tree against the layer dependency order."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click
from pydantic import ValidationError

from gochk.commands._base import GochkCommand

if TYPE_CHECKING:
    from gochk.commands._context import AppContext


def _split_order(
    _ctx: click.Context, _param: click.Parameter, value: str | None
) -> tuple[str, ...] | None:
    if value is None:
        return None
    return tuple(name.strip() for name in value.split(","))


@click.command(
    cls=GochkCommand,
    examples="""\
  gochk check
  gochk check ./internal
  gochk check --order external,adapter,application,domain
  gochk check --ignore test --ignore _test --ignore mock
  gochk check --module github.com/acme/shop --show-all
  gochk --json check ./internal/domain/user.go""",
)
@click.argument("target", required=False, type=click.Path(path_type=Path))
@click.option(
    "--order",
    callback=_split_order,
    help="Comma-separated layers, outermost first. Each may import the ones after it.",
)
@click.option("--ignore", multiple=True, help="Directory or file name to skip (repeatable).")
@click.option("--module", "module_path", default=None, help="Go module path of the checked code.")
@click.option(
    "--show-all/--violations-only",
    default=None,
    help="Also report verified and ignored files.",
)
@click.option(
    "--violations-at-bottom/--in-order",
    default=None,
    help="Print violations after the other results.",
)
@click.pass_obj
def check(
    app: AppContext,
    target: Path | None,
    order: tuple[str, ...] | None,
    ignore: tuple[str, ...],
    module_path: str | None,
    show_all: bool | None,
    violations_at_bottom: bool | None,
) -> None:
    """Report files whose imports break the layer dependency order."""
    from gochk.services.check import CheckService, apply_overrides, invalid_config_result

    try:
        config = apply_overrides(
            app.settings.check,
            target_path=target,
            dependency_orders=order,
            ignore=ignore or None,
            module_path=module_path,
            show_all=show_all,
            print_violations_at_bottom=violations_at_bottom,
        )
    except ValidationError as exc:
        app.emit(invalid_config_result(exc))
        return

    app.emit(CheckService(config).check())
