"""Command: re-encode a rule table."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from condperiod.commands._base import CpCommand, from_json_option, rules_argument

if TYPE_CHECKING:
    from condperiod.commands._context import AppContext


@click.command(
    cls=CpCommand,
    examples="""\
  condperiod convert 'C1-3P1D,C4-6P2D'
  condperiod convert '["C1-3P1D","C4-6P2D"]' --from-json --to string""",
)
@rules_argument
@click.option(
    "--to",
    "target",
    type=click.Choice(["json", "string"]),
    default="json",
    help="Output encoding.",
)
@from_json_option
@click.pass_obj
def convert(app: AppContext, rules: str | None, target: str, from_json: bool) -> None:
    """Convert RULES between the compact string and JSON array encodings."""
    app.emit(app.rules.convert(rules, to=target, from_json=from_json))  # type: ignore[arg-type]
