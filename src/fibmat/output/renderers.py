"""Rich renderers for Fibonacci results and errors."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from fibmat.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from fibmat.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        _render_fib(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: the bare value."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return str(result.data["value"])


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="fib.ok"), Text(f"  {result.op}", style="fib.op"), sep="")


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print one indented key-value field without wrapping long values."""
    k = Text(f"  {key}: ", style="fib.key")
    console.print(k, Text(str(value), style=style), sep="", soft_wrap=True)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the telemetry span tree attached under ``--verbose``."""
    telemetry = (result.meta or {}).get("telemetry")
    if not telemetry:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    _render_telemetry_tree(console, telemetry, indent=4)


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a span tree with color-coded timing."""
    prefix = " " * indent
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {span_data.get('name', '?')}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="fib.error"),
        Text(f"  {result.op}", style="fib.op"),
        Text(" — "),
        msg,
        sep="",
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


def _render_fib(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a computed Fibonacci number."""
    _status_line(console, result)
    data = result.data
    _field(console, "index", data.get("index", ""))
    value_style = "fib.negative" if data.get("sign", 0) < 0 else "fib.value"
    _field(console, "value", data.get("value", ""), style=value_style)
    _field(console, "digits", data.get("digits", ""))
    if verbose:
        _render_meta(console, result)
