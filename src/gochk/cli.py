"""Root CLI group for gochk with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from gochk import __version__
from gochk.commands import register_commands
from gochk.commands._context import AppContext
from gochk.config.settings import GochkSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="gochk")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Only list violating files.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and timing spans.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Path to gochk.toml.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """gochk — layered-architecture dependency checker for Go."""
    try:
        settings = GochkSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    except ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
