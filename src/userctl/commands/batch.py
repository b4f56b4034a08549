"""Standalone command: apply a JSON file of operations to one in-memory store."""

from __future__ import annotations

import json
from typing import IO, TYPE_CHECKING

import click

from userctl.commands._base import UserctlCommand
from userctl.domain.result import err
from userctl.output.formatters import result_payload
from userctl.services.batch import run_batch

if TYPE_CHECKING:
    from userctl.commands._context import AppContext


@click.command(
    cls=UserctlCommand,
    examples="""\
  userctl batch ops.json
  userctl --json batch ops.json --keep-going
  echo '[{"op": "create", "name": "Ann", "email": "ann@example.com"}]' | userctl batch -""",
)
@click.argument("file", type=click.File("r", encoding="utf-8"))
@click.option("--keep-going", is_flag=True, help="Continue after a failed operation.")
@click.pass_obj
def batch(app: AppContext, file: IO[str], keep_going: bool) -> None:
    """Apply the operations in FILE (a JSON array) in order.

    Each item is an object with an "op" key: create (name, email),
    get (id), list, update (id, name?, email?) or delete (id).
    Use "-" to read from stdin.
    """
    try:
        items = json.load(file)
    except json.JSONDecodeError as exc:
        app.emit("batch", err(f"Error reading {file.name}: {exc}"))
        return

    if not isinstance(items, list):
        app.emit("batch", err("JSON file must contain a top-level array."))
        return

    outcomes = run_batch(app.service, items, keep_going=keep_going)
    failed = [outcome for outcome in outcomes if not outcome.result.ok]

    if app.settings.json_output:
        payloads = [
            {"index": outcome.index, **result_payload(outcome.op, outcome.result)}
            for outcome in outcomes
        ]
        click.echo(json.dumps(payloads, indent=2))
    else:
        for outcome in outcomes:
            click.echo(app.render(outcome.op, outcome.result), err=not outcome.result.ok)

    if failed:
        raise SystemExit(1)
