"""Human / JSON / quiet rendering of operation Results.

A Result does not know which operation produced it, so every formatter
takes the operation name (``op``) alongside the Result.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from userctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from userctl.domain.result import Result

_USER_KEYS = frozenset({"id", "name", "email"})


@dataclass(frozen=True)
class OutputSettings:
    """Output mode switches derived from the global CLI flags."""

    json_output: bool = False
    quiet: bool = False


def result_payload(op: str, result: Result[Any]) -> dict[str, Any]:
    """JSON-ready dict: ``op`` plus the Result's ``ok`` / ``data`` / ``error``."""
    dumped = result.model_dump(mode="json")
    payload: dict[str, Any] = {"ok": dumped["ok"], "op": op}
    if result.ok:
        payload["data"] = dumped["data"]
    else:
        payload["error"] = dumped["error"] or "Unknown error"
    return payload


def format_result(op: str, result: Result[Any], *, settings: OutputSettings | None = None) -> str:
    """Format a Result for display in the mode selected by *settings*."""
    settings = settings or OutputSettings()
    payload = result_payload(op, result)
    if settings.json_output:
        return _json.dumps(payload, indent=2)
    if settings.quiet:
        return _format_quiet(payload)
    return _render_human(payload)


def _format_quiet(payload: dict[str, Any]) -> str:
    if not payload["ok"]:
        return f"ERROR: {payload['op']} — {payload['error']}"
    data = payload["data"]
    if isinstance(data, list) and all(_is_user(item) for item in data):
        return "\n".join(str(item["id"]) for item in data)
    if _is_user(data):
        return str(data["id"])
    return f"OK: {payload['op']}"


def _render_human(payload: dict[str, Any]) -> str:
    console = create_console()
    if not payload["ok"]:
        line = Text("ERROR", style="userctl.error")
        line.append(f": {payload['op']} — ", style="userctl.op")
        line.append(payload["error"])
        console.print(line)
        return get_output(console).rstrip("\n")

    status = Text("OK", style="userctl.ok")
    status.append(f": {payload['op']}", style="userctl.op")
    console.print(status)
    data = payload["data"]
    if isinstance(data, list) and data and all(_is_user(item) for item in data):
        console.print(_user_table(data))
    elif isinstance(data, list) and not data:
        console.print(Text("  (no users)", style="userctl.key"))
    elif isinstance(data, dict):
        _print_mapping(console, data)
    elif data is not None:
        _print_mapping(console, {"value": data})
    return get_output(console).rstrip("\n")


def _print_mapping(console: Console, data: dict[str, Any]) -> None:
    for key, value in data.items():
        line = Text(f"  {key}: ", style="userctl.key")
        if isinstance(value, (dict, list)):
            line.append(_json.dumps(value, separators=(",", ":")))
        elif isinstance(value, bool):
            line.append("true" if value else "false")
        else:
            line.append(str(value))
        console.print(line)


def _user_table(users: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("ID", style="userctl.id", justify="right")
    table.add_column("Name", style="userctl.name")
    table.add_column("Email", style="userctl.email")
    for user in users:
        table.add_row(str(user["id"]), user["name"], user["email"])
    return table


def _is_user(value: Any) -> bool:
    return isinstance(value, dict) and _USER_KEYS.issubset(value)
