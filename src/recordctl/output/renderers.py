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

from recordctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from recordctl.services.result import ServiceResult

    Renderer = Callable[..., None]


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
    if result.op == "save_records" and "path" in result.data:
        return str(result.data["path"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="rec.ok")
    op = Text(f"  {result.op}", style="rec.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="rec.key")
    if key == "path":
        v = Text(str(value), style="rec.path")
    elif isinstance(value, int):
        v = Text(str(value), style="rec.count")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text(f"  warning: {warning}", style="rec.warning"))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="rec.error")
    op = Text(f"  {result.op}", style="rec.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if err and err.detail and (verbose or "path" in err.detail):
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Save renderer ─────────────────────────────────────────────────────


def _render_saved(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render save_records: where the data went and how much of it."""
    _status_line(console, result)
    d = result.data
    console.print(
        Text("  Data successfully saved to: "),
        Text(str(d.get("path", "")), style="rec.path"),
        sep="",
    )
    if "created_dir" in d:
        console.print(
            Text("  Created directory: "),
            Text(str(d["created_dir"]), style="rec.path"),
            sep="",
        )
    _field(console, "records", d.get("count", 0))
    if verbose and "bytes" in d:
        _field(console, "bytes", d["bytes"])
    _render_warnings(console, result)


# ── Inspect renderer ──────────────────────────────────────────────────


def _render_inspect(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the file summary report."""
    d = result.data
    console.print(Text("--- File Summary Report ---", style="rec.op"))
    table = Table(show_header=False, box=None, pad_edge=False, expand=False)
    table.add_column(style="rec.key")
    table.add_column()
    table.add_row("File Name:", str(d.get("file_name", "")))
    table.add_row("Full Path:", Text(str(d.get("path", "")), style="rec.path"))
    table.add_row("Number of Lines:", str(d.get("lines", 0)))
    table.add_row("Number of Words:", str(d.get("words", 0)))
    table.add_row("Number of Characters:", str(d.get("characters", 0)))
    console.print(table)
    console.print("---------------------------")
    _render_warnings(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    _render_warnings(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "save_records": _render_saved,
    "inspect_file": _render_inspect,
}
