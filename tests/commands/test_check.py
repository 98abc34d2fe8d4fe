"""Tests for the check command."""

import json

from click.testing import CliRunner

from condperiod.cli import cli


class TestCheckCommand:
    def test_valid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "C1-3P1D,C4-6P2D"])
        assert result.exit_code == 0
        assert "count: 2" in result.output
        assert "kind: category" in result.output

    def test_non_canonical_warns(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "C1-3P1D, C4-6P2D"])
        assert result.exit_code == 0
        assert "WARNING: Rule table is not in canonical form" in result.output

    def test_json_warnings_in_payload(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "C1-3P1D, C4-6P2D"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["warnings"] == ["Rule table is not in canonical form"]

    def test_format_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "C1-3"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["error"]["code"] == "FORMAT_ERROR"
        assert data["error"]["message"].startswith("Invalid string format")

    def test_validation_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "C3-1P1D"])
        assert result.exit_code == 1
        assert "greater than or equal to lower" in result.output

    def test_json_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "[", "--from-json"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "JSON_ERROR"
