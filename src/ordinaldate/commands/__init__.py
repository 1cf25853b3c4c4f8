"""Subcommand modules for ordinaldate.

Provides register_commands() which uses deferred imports to keep
``ordinaldate --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from ordinaldate.commands.check import check
    from ordinaldate.commands.parse import parse

    cli.add_command(parse)
    cli.add_command(check)
