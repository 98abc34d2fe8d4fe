"""Tests for the root condperiod CLI."""

from pathlib import Path

from click.testing import CliRunner

from condperiod import __version__
from condperiod.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "condperiod" in result.output
    for name in ("find", "check", "convert", "show"):
        assert name in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


def test_json_flag_accepted(cli_runner: CliRunner) -> None:
    assert cli_runner.invoke(cli, ["--json", "--version"]).exit_code == 0


def test_verbose_flag_accepted(cli_runner: CliRunner) -> None:
    assert cli_runner.invoke(cli, ["-v", "--version"]).exit_code == 0


def test_log_json_flag_accepted(cli_runner: CliRunner) -> None:
    assert cli_runner.invoke(cli, ["--log-json", "--version"]).exit_code == 0


# --- Configuration ---


def test_config_flag(cli_runner: CliRunner, tmp_path: Path) -> None:
    config = tmp_path / "rules.toml"
    config.write_text('[rules]\ntable = "C1-2P9D"\n')
    result = cli_runner.invoke(cli, ["-c", str(config), "find", "2"])
    assert result.exit_code == 0
    assert "P9D" in result.output


def test_invalid_config_table(cli_runner: CliRunner, tmp_path: Path) -> None:
    (tmp_path / "condperiod.toml").write_text('[rules]\ntable = "C9-1P1D"\n')
    result = cli_runner.invoke(cli, ["check"])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_invalid_toml(cli_runner: CliRunner, tmp_path: Path) -> None:
    (tmp_path / "condperiod.toml").write_text("[rules\n")
    result = cli_runner.invoke(cli, ["check"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.output


def test_output_json_from_config(cli_runner: CliRunner, tmp_path: Path) -> None:
    (tmp_path / "condperiod.toml").write_text("[output]\njson = true\n")
    result = cli_runner.invoke(cli, ["check", "C1-2P1D"])
    assert result.exit_code == 0
    assert '"ok": true' in result.output
