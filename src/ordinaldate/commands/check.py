"""Command: parse every line of a file and report failures."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from ordinaldate.commands._base import OrdinalDateCommand

if TYPE_CHECKING:
    from ordinaldate.commands._context import AppContext


@click.command(
    cls=OrdinalDateCommand,
    examples="""\
  ordinaldate check dates.txt
  ordinaldate --json check dates.txt
  ordinaldate check --fail-fast dates.txt
  cat dates.txt | ordinaldate check -""",
)
# Undecodable bytes become U+FFFD so the line fails like any other bad line.
@click.argument("file", type=click.File("r", encoding="utf-8", errors="replace"))
@click.option(
    "--fail-fast/--no-fail-fast",
    default=None,
    help="Stop at the first invalid line (default from [batch] fail_fast).",
)
@click.pass_obj
def check(app: AppContext, file: TextIO, fail_fast: bool | None) -> None:
    """Check that every line of FILE is a valid date ("-" reads stdin)."""
    with file:
        result = app.parse_service.check(file, source=file.name, fail_fast=fail_fast)
    app.emit(result)
