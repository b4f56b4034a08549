"""Tests for the batch command."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from userctl.cli import cli


def _write_ops(path: Path, ops: Any) -> str:
    path.write_text(json.dumps(ops), encoding="utf-8")
    return str(path)


SCENARIO = [
    {"op": "create", "name": "John Doe", "email": "john@example.com"},
    {"op": "create", "name": "Jane Doe", "email": "jane@example.com"},
    {"op": "update", "id": 2, "name": "Janet"},
    {"op": "delete", "id": "1"},
    {"op": "list"},
]


@pytest.mark.usefixtures("_isolated_cwd")
class TestBatchCommand:
    def test_all_succeed(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        ops_file = _write_ops(tmp_path / "ops.json", SCENARIO)
        result = cli_runner.invoke(cli, ["batch", ops_file])
        assert result.exit_code == 0
        assert result.output.count("OK: ") == 5
        assert "Janet" in result.output

    def test_json_output(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        ops_file = _write_ops(tmp_path / "ops.json", SCENARIO)
        result = cli_runner.invoke(cli, ["--json", "batch", ops_file])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [item["index"] for item in data] == [0, 1, 2, 3, 4]
        assert [item["op"] for item in data] == ["create", "create", "update", "delete", "list"]
        assert data[-1]["data"] == [{"id": 2, "name": "Janet", "email": "jane@example.com"}]

    def test_stops_at_first_failure(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        ops = [
            {"op": "create", "name": "John Doe", "email": "john@example.com"},
            {"op": "get", "id": "999"},
            {"op": "list"},
        ]
        result = cli_runner.invoke(cli, ["--json", "batch", _write_ops(tmp_path / "o.json", ops)])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert len(data) == 2
        assert data[1]["error"] == "User not found with ID: 999"

    def test_keep_going(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        ops = [
            {"op": "create", "name": "", "email": "john@example.com"},
            {"op": "create", "name": "John Doe", "email": "john@example.com"},
        ]
        ops_file = _write_ops(tmp_path / "o.json", ops)
        result = cli_runner.invoke(cli, ["--json", "batch", "--keep-going", ops_file])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert [item["ok"] for item in data] == [False, True]

    def test_human_error_line(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        ops = [{"op": "create", "name": "A", "email": "invalid-email"}]
        result = cli_runner.invoke(cli, ["batch", _write_ops(tmp_path / "o.json", ops)])
        assert result.exit_code == 1
        assert "ERROR: create — Invalid email format" in result.output

    def test_reads_stdin(self, cli_runner: CliRunner) -> None:
        ops = json.dumps([{"op": "create", "name": "Ann", "email": "ann@example.com"}])
        result = cli_runner.invoke(cli, ["-q", "batch", "-"], input=ops)
        assert result.exit_code == 0
        assert result.output.strip() == "1"

    def test_invalid_json(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text("{not json")
        result = cli_runner.invoke(cli, ["batch", str(bad)])
        assert result.exit_code == 1
        assert "Error reading" in result.output

    def test_top_level_must_be_array(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["batch", _write_ops(tmp_path / "o.json", {"op": "list"})])
        assert result.exit_code == 1
        assert "top-level array" in result.output

    def test_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["batch", str(tmp_path / "missing.json")])
        assert result.exit_code == 2
