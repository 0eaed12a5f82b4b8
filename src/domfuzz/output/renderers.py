"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from domfuzz.output.console import create_console, get_output, style_for_status
from domfuzz.output.formatters import format_summary

if TYPE_CHECKING:
    from rich.console import Console

    from domfuzz.services.result import ServiceResult


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
        return f"ERROR: {result.op}: {msg}"
    if result.op == "list":
        return "\n".join(item["id"] for item in result.data.get("transformations", []))
    return ""


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="df.ok")
    op = Text(f"  {result.op}", style="df.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="df.key")
    v = Text(str(value), style="df.domain" if key == "domain" else "")
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="df.error")
    op = Text(f"  {result.op}", style="df.op")
    code = Text(f"  [{err.code}]" if err else "", style="df.key")
    console.print(label, op, code, Text(f"  {msg}"))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_generate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Run summary; the records themselves are streamed line by line."""
    _status_line(console, result)
    console.print(Text(f"  {format_summary(result)}"))
    statuses = result.data.get("statuses") or {}
    if statuses:
        parts = [Text(f"{name}={count}", style=style_for_status(name)) for name, count in sorted(statuses.items())]
        console.print(Text("  statuses: ", style="df.key"), *parts)
    if verbose:
        _field(console, "transformations", ", ".join(result.data.get("transformations", [])))
        for key, value in (result.data.get("stats") or {}).items():
            _field(console, key, value)
        _render_meta(console, result)


def _render_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Transformations table grouped by category, then bundles and aliases."""
    data = result.data
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Transformation", style="df.domain", no_wrap=True)
    table.add_column("Category", style="df.category")
    table.add_column("Bundles")
    table.add_column("Description")
    for item in data.get("transformations", []):
        summary = item["summary"]
        if item.get("requires_dictionary"):
            summary += " [dim](dictionary)[/dim]"
        table.add_row(item["id"], item["category"], ", ".join(item["bundles"]), summary)
    console.print(table)

    console.print()
    default = data.get("default_bundle")
    bundles = Table(show_header=True, pad_edge=False, expand=False)
    bundles.add_column("Bundle", style="df.op", no_wrap=True)
    bundles.add_column("Transformations")
    for name, ids in data.get("bundles", {}).items():
        label = f"{name} (default)" if name == default else name
        bundles.add_row(label, ", ".join(ids))
    console.print(bundles)

    aliases = data.get("aliases") or {}
    if aliases:
        console.print()
        console.print(Text("Aliases:", style="df.key"))
        for name, ids in aliases.items():
            console.print(f"  {name} -> {', '.join(ids)}")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS = {
    "generate": _render_generate,
    "list": _render_list,
}
