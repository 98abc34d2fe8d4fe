"""Shared Click pieces for condperiod commands.

``CpCommand`` takes an ``examples`` text that an eager ``--examples``
flag prints, which keeps ``--help`` short. The decorators below are
shared by every command that reads a rule table.
"""

from __future__ import annotations

from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(getattr(ctx.command, "examples", None) or "")
    ctx.exit(0)


class CpCommand(click.Command):
    """Click command with an optional ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_print_examples,
                    help="Show usage examples and exit.",
                )
            )


rules_argument = click.argument("rules", required=False)

from_json_option = click.option(
    "--from-json",
    is_flag=True,
    help="Read the rule table as a JSON array of compact strings.",
)
