"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from condperiod.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from condperiod.services.result import ServiceResult


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


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text.assemble(("OK", "cp.ok"), (f"  {result.op}", "cp.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}:", style="cp.key")
    if key == "id":
        v = Text(str(value), style="cp.id")
    elif key == "period":
        v = Text(str(value), style="cp.period")
    elif key == "result":
        v = Text(str(value), style="cp.result")
    elif key == "kind":
        v = Text(str(value), style=style_for_kind(str(value)))
    elif isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def period_table(periods: list[dict[str, Any]], *, verbose: bool = False) -> Table:
    """Build a Rich Table of described periods, in lookup order."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right")
    table.add_column("Kind")
    table.add_column("Lower", justify="right")
    table.add_column("Upper", justify="right")
    table.add_column("Result", style="cp.result")
    if verbose:
        table.add_column("ID", style="cp.id", no_wrap=True)

    for item in periods:
        kind = str(item.get("kind", ""))
        upper = "∞" if item.get("unbounded") else str(item.get("upper", ""))
        row: list[str | Text] = [
            str(item.get("index", "")),
            Text(kind, style=style_for_kind(kind)),
            str(item.get("lower", "")),
            upper,
            str(item.get("result", "")),
        ]
        if verbose:
            row.append(str(item.get("id") or ""))
        table.add_row(*row)

    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text.assemble(("ERROR", "cp.error"), (f"  {result.op}", "cp.op"), " - ", msg))

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_find(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    if not data.get("matched"):
        _field(console, "value", data.get("value"))
        _field(console, "matched", False)
        return
    keys = ["value", "period", "index", "result"]
    if verbose:
        keys += ["kind", "lower", "upper", "id"]
    for key in keys:
        _field(console, key, data.get(key))


def _render_show(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    periods = result.data.get("periods", [])
    if not periods:
        console.print(Text("  (no periods)", style="dim"))
        return
    console.print(period_table(periods, verbose=verbose))


def _render_convert(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    # Raw output only, so the command can be piped.
    console.print(result.data.get("output", ""), markup=False, soft_wrap=True)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "find": _render_find,
    "show": _render_show,
    "convert": _render_convert,
    "check": _render_generic,
}
