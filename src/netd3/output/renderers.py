"""Rich renderers for ServiceResult.

Widget build summaries get a status block, plus an options table when
verbose. Anything else falls through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from netd3.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from netd3.services.result import ServiceResult

# Option values that look like renderer code rather than literals.
_EXPR_MARKERS = ("function", "Math.", "d.", "d3.")


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string."""
    console = create_console()
    if not result.ok:
        _render_error(result, console, verbose=verbose)
    elif "widget" in result.data:
        _render_widget(result, console, verbose=verbose)
    else:
        _render_generic(result, console)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if "output_file" in result.data:
        return str(result.data["output_file"])
    return f"OK: {result.op}"


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="netd3.ok"), Text(f"  {result.op}", style="netd3.op"))


def _field(console: Console, key: str, value: Any) -> None:
    style = "netd3.widget" if key == "widget" else ""
    console.print(Text(f"  {key}: ", style="netd3.key"), Text(str(value), style=style))


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"))
        _field(console, key, value)


def _render_widget(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    _status_line(console, result)
    for key in ("widget", "output_file", "node_count", "link_count"):
        if key in result.data:
            _field(console, key, result.data[key])

    sizing = result.data.get("sizing", {})
    width = sizing.get("width") or "fill"
    height = sizing.get("height") or "fill"
    _field(console, "size", f"{width} x {height}")

    if not verbose:
        return

    table = Table(title="options", show_header=True, header_style="bold")
    table.add_column("key", style="netd3.key")
    table.add_column("value")
    for key, value in result.data.get("options", {}).items():
        is_expr = isinstance(value, str) and any(m in value for m in _EXPR_MARKERS)
        table.add_row(key, Text(str(value), style="netd3.expr" if is_expr else ""))
    console.print(table)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    error = result.error
    label = Text("ERROR", style="netd3.error")
    message = error.message if error else "Unknown error"
    console.print(label, Text(f"  {result.op}", style="netd3.op"), Text(f" — {message}"))
    if verbose and error is not None:
        console.print(Text(f"  code: {error.code}", style="netd3.key"))
        for key, value in error.detail.items():
            _field(console, key, value)
