"""Command: list the periods of a rule table."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from condperiod.commands._base import CpCommand, from_json_option, rules_argument

if TYPE_CHECKING:
    from condperiod.commands._context import AppContext


@click.command(
    cls=CpCommand,
    examples="""\
  condperiod show 'C1-3P1D,C4-6P2D,C7-0P1Y'
  condperiod -v show             # include period ids""",
)
@rules_argument
@from_json_option
@click.pass_obj
def show(app: AppContext, rules: str | None, from_json: bool) -> None:
    """Show the periods of RULES as a table, in lookup order."""
    app.emit(app.rules.show(rules, from_json=from_json))
