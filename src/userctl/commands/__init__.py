"""Subcommand modules for userctl.

Provides register_commands() which uses deferred imports to keep
``userctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the command group and standalone commands on the root CLI group."""
    from userctl.commands.batch import batch
    from userctl.commands.convert import convert
    from userctl.commands.demo import demo

    cli.add_command(convert)
    cli.add_command(batch)
    cli.add_command(demo)
