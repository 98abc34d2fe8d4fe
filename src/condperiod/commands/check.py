"""Command: validate a rule table."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from condperiod.commands._base import CpCommand, from_json_option, rules_argument

if TYPE_CHECKING:
    from condperiod.commands._context import AppContext


@click.command(
    cls=CpCommand,
    examples="""\
  condperiod check 'C1-3P1D,C4-6P2D'
  condperiod check '["DP1DP2DP1Y"]' --from-json
  condperiod check               # checks [rules] table from condperiod.toml""",
)
@rules_argument
@from_json_option
@click.pass_obj
def check(app: AppContext, rules: str | None, from_json: bool) -> None:
    """Validate RULES and print its kind, size and canonical form."""
    app.emit(app.rules.check(rules, from_json=from_json))
