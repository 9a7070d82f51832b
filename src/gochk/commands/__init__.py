"""Subcommand modules for gochk.

register_commands() imports lazily so ``gochk --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Attach all subcommands to the root group."""
    from gochk.commands.check import check

    cli.add_command(check)
