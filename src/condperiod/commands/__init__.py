"""Subcommand modules for condperiod.

Provides register_commands() which uses deferred imports to keep
``condperiod --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from condperiod.commands.check import check
    from condperiod.commands.convert import convert
    from condperiod.commands.find import find
    from condperiod.commands.show import show

    cli.add_command(find)
    cli.add_command(check)
    cli.add_command(convert)
    cli.add_command(show)
