"""Standalone command: run the end-to-end demonstration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from userctl.commands._base import UserctlCommand
from userctl.services.demo import demonstrate

if TYPE_CHECKING:
    from userctl.commands._context import AppContext


@click.command(
    cls=UserctlCommand,
    examples="""\
  userctl demo
  userctl --json demo""",
)
@click.pass_obj
def demo(app: AppContext) -> None:
    """Create a user, read it back, and map it to its name."""
    app.emit("demo", demonstrate(app.service))
