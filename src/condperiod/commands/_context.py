"""AppContext — per-invocation state shared by all commands.

The root group builds it once and subcommands receive it through
``@click.pass_obj``. It owns logging setup, the rule service and the
mapping from a ServiceResult to streams and exit status.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from condperiod.config.logging import configure_logging
from condperiod.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from condperiod.config.settings import CondperiodSettings
    from condperiod.services.result import ServiceResult
    from condperiod.services.rules import RuleService


class AppContext:
    """Settings plus lazily built services for one CLI run."""

    def __init__(self, settings: CondperiodSettings) -> None:
        self.settings = settings
        self._rules: RuleService | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(json_output=self.settings.wants_json, verbose=self.settings.verbose)

    @property
    def rules(self) -> RuleService:
        """Rule service, built on first use so ``--help`` does no work."""
        if self._rules is None:
            from condperiod.services.rules import RuleService

            self._rules = RuleService(self.settings)
        return self._rules

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; a failed result ends the process with status 1.

        Success goes to stdout. Failures, and warnings in human mode, go
        to stderr so stdout stays pipeable. JSON payloads already carry
        their warnings.
        """
        mode = self.output_settings
        text = format_result(result, settings=mode)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        click.echo(text)
        if mode.json_output:
            return
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)
