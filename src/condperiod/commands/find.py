"""Command: resolve a value against a rule table."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from condperiod.commands._base import CpCommand, from_json_option

if TYPE_CHECKING:
    from condperiod.commands._context import AppContext


@click.command(
    cls=CpCommand,
    examples="""\
  condperiod find 4 --rules 'C1-3P1D,C4-6P2D'
  condperiod find P3D --rules 'DP1DP2DP1Y,DP3DP0DP2Y'
  condperiod find 4 --rules '["C1-3P1D","C4-6P2D"]' --from-json
  condperiod find 4              # uses [rules] table from condperiod.toml""",
)
@click.argument("value")
@click.option("-r", "--rules", default=None, help="Rule table (defaults to [rules] table).")
@from_json_option
@click.pass_obj
def find(app: AppContext, value: str, rules: str | None, from_json: bool) -> None:
    """Find the first period matching VALUE (a category or an ISO 8601 duration)."""
    app.emit(app.rules.find(value, rules, from_json=from_json))
