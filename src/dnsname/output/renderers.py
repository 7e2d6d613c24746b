"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.  Name text is
always wrapped in :class:`~rich.text.Text` so brackets in a label are
never read as Rich markup.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from dnsname.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from dnsname.services.result import ServiceResult


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

    d = result.data
    if result.op == "parse":
        return str(d.get("ascii", ""))
    if result.op == "labels":
        return "\n".join(str(item["label"]) for item in d.get("items", []))
    if result.op == "compare":
        return str(d.get("order", ""))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="dns.ok")
    op = Text(f"  {result.op}", style="dns.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    line = Text(f"  {key}: ", style="dns.key")
    if key in ("ascii", "unicode", "name", "left", "right", "input"):
        line.append(str(value), style="dns.name")
    else:
        line.append(str(value))
    console.print(line)


def _label_text(label: str) -> Text:
    if not label:
        return Text("(empty)", style="dns.empty")
    return Text(label, style="dns.label")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        line = Text("  warning: ", style="dns.warning")
        line.append(warning)
        console.print(line)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="dns.error")
    op = Text(f"  {result.op}", style="dns.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if result.op == "check":
        for item in result.data.get("invalid", []):
            line = Text(f"  line {item['line']}: ", style="dns.key")
            line.append(str(item["input"]), style="dns.name")
            line.append(f"  {item['code']}: {item['message']}")
            console.print(line)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_parse(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a parsed name as key-value fields plus its labels."""
    _status_line(console, result)
    d = result.data
    for key in ("ascii", "unicode", "absolute", "length"):
        if key in d:
            _field(console, key, d[key])

    labels = d.get("labels", [])
    line = Text("  labels: ", style="dns.key")
    for i, label in enumerate(labels):
        if i:
            line.append(" · ", style="dim")
        line.append_text(_label_text(label))
    console.print(line)

    if verbose:
        _render_meta(console, result)


def _render_labels(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render labels as a positional table."""
    _status_line(console, result)
    _field(console, "name", result.data.get("name", ""))

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Label", no_wrap=True)
    table.add_column("Unicode")
    table.add_column("Length", justify="right")

    for item in result.data.get("items", []):
        table.add_row(
            str(item["position"]),
            _label_text(str(item["label"])),
            Text(str(item["unicode"])),
            str(item["length"]),
        )
    console.print(table)
    console.print(f"\n{result.data.get('count', 0)} labels")


def _render_compare(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    symbol = {"less": "<", "equal": "==", "greater": ">"}.get(d.get("order", ""), "?")
    line = Text("  ")
    line.append(str(d.get("left", "")), style="dns.name")
    line.append(f" {symbol} ")
    line.append(str(d.get("right", "")), style="dns.name")
    console.print(line)
    _field(console, "equal", d.get("equal"))


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    for key in ("count", "valid_count", "invalid_count"):
        _field(console, key, d.get(key, 0))
    if verbose:
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
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "parse": _render_parse,
    "labels": _render_labels,
    "compare": _render_compare,
    "check": _render_check,
}
