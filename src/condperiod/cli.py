"""Root CLI group for condperiod with global flags and command registration."""

from __future__ import annotations

import click
import pydantic

from condperiod import __version__
from condperiod.commands import register_commands
from condperiod.commands._context import AppContext
from condperiod.config.settings import CondperiodSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="condperiod")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """condperiod — resolve values against conditional period rules."""
    try:
        settings = CondperiodSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            verbose=verbose,
            log_json=log_json,
        )
    except pydantic.ValidationError as exc:
        msg = f"Invalid configuration: {exc}"
        raise click.ClickException(msg) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
