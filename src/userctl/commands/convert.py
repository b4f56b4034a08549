"""Command group: explicit conversions of raw text (number, string, boolean)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from userctl.commands._base import UserctlGroup
from userctl.domain.combinators import flat_map
from userctl.domain.conversions import to_boolean, to_number, to_string

if TYPE_CHECKING:
    from userctl.commands._context import AppContext

_CONVERT_EXAMPLES = """\
  userctl convert number 42
  userctl convert boolean TRUE
  userctl convert boolean --numeric 1
  userctl convert string --null"""


@click.group(cls=UserctlGroup, examples=_CONVERT_EXAMPLES)
def convert() -> None:
    """Run an explicit type conversion on a value."""


@convert.command()
@click.argument("value")
@click.pass_obj
def number(app: AppContext, value: str) -> None:
    """Parse VALUE as a number."""
    app.emit("convert_number", to_number(value))


@convert.command()
@click.argument("value", required=False)
@click.option("--null", "as_null", is_flag=True, help="Convert a null value instead of VALUE.")
@click.pass_obj
def string(app: AppContext, value: str | None, as_null: bool) -> None:
    """Render VALUE (or null) as a string."""
    if as_null:
        app.emit("convert_string", to_string(None))
        return
    if value is None:
        raise click.UsageError("Provide VALUE or --null.")
    app.emit("convert_string", to_string(value))


@convert.command()
@click.argument("value")
@click.option("--numeric", is_flag=True, help="Parse VALUE as a number (0 or 1) first.")
@click.pass_obj
def boolean(app: AppContext, value: str, numeric: bool) -> None:
    """Interpret VALUE as a boolean ("true"/"false", or 0/1 with --numeric)."""
    if numeric:
        app.emit("convert_boolean", flat_map(to_number(value), to_boolean))
        return
    app.emit("convert_boolean", to_boolean(value))
