"""Command: parse a single date string."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ordinaldate.commands._base import OrdinalDateCommand

if TYPE_CHECKING:
    from ordinaldate.commands._context import AppContext


@click.command(
    cls=OrdinalDateCommand,
    examples="""\
  ordinaldate parse "24th of May 1990"
  ordinaldate -q parse "1st of January -4000"
  ordinaldate --json parse 29th of February 2016""",
)
@click.argument("text", nargs=-1, required=True)
@click.pass_obj
def parse(app: AppContext, text: tuple[str, ...]) -> None:
    """Parse TEXT such as "24th of May 1990".

    Unquoted words are joined with single spaces.
    """
    app.emit(app.parse_service.parse(" ".join(text)))
