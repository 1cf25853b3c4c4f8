"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers are
dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from ordinaldate.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from ordinaldate.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if result.op == "parse":
        return f"{data['day']} {data['month']} {data['year']}"
    if result.op == "check":
        return f"{data['valid_count']}/{data['count']} valid"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="od.ok") if result.ok else Text("ERROR", style="od.error")
    console.print(label, Text(f"  {result.op}", style="od.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    console.print(Text(f"  {key}: ", style="od.key"), Text(str(value)), sep="")


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text(f"  warning: {warning}", style="od.warning"))


def _items_table(items: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Line", justify="right")
    table.add_column("Input", style="od.input")
    table.add_column("Result")
    for item in items:
        if item["ok"]:
            outcome = Text(f"{item['day']} {item['month_name']} {item['year']}", style="od.date")
        else:
            outcome = Text.assemble((item["code"], "od.code"), f"  {item['message']}")
        table.add_row(str(item["line"]), Text(item["input"]), outcome)
    return table


# ── Renderers by op ───────────────────────────────────────────────────


def _render_parse(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "day", data["day"])
    _field(console, "month", f"{data['month']} ({data['month_name']})")
    _field(console, "year", data["year"])
    if verbose:
        _field(console, "input", data["input"])


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    if data.get("items"):
        console.print(_items_table(data["items"]))
    _field(console, "valid", f"{data['valid_count']}/{data['count']}")
    if verbose and result.meta:
        for key, value in result.meta.items():
            _field(console, key, value)
    _render_warnings(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    _render_warnings(console, result)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    if result.error is None:
        console.print("  Unknown error")
        return
    console.print(Text.assemble(("  ", ""), (result.error.code, "od.code"), f"  {result.error.message}"))
    if result.op == "check" and result.data.get("items"):
        console.print(_items_table(result.data["items"]))
    if verbose:
        for key, value in result.error.detail.items():
            _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "parse": _render_parse,
    "check": _render_check,
}
