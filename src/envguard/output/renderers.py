"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from envguard.output.console import create_console, get_output, style_for_status

if TYPE_CHECKING:
    from rich.console import Console

    from envguard.services.result import ServiceResult


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
    """Render minimal output for ``--quiet`` mode.

    ``get`` prints the bare value so shells can capture it.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    if result.op == "get":
        value = result.data.get("value")
        return "" if value is None else _plain(value)
    if result.op == "schema":
        return "\n".join(item["key"] for item in result.data.get("items", []))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _plain(value: Any) -> str:
    """Render a resolved value the way it would be written in the environment."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    line = Text("OK", style="eg.ok")
    line.append(f"  {result.op}", style="eg.op")
    console.print(line)


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    line = Text(f"  {key}: ", style="eg.dim")
    line.append(_plain(value) if value is not None else "(none)")
    console.print(line)


def _issues(console: Console, issues: list[dict[str, Any]], *, verbose: bool) -> None:
    for issue in issues:
        status = str(issue.get("status", "invalid"))
        line = Text("  ")
        line.append(status, style=style_for_status(status))
        line.append(f"  {issue.get('message', '')}")
        console.print(line)
        if verbose and issue.get("constraint"):
            console.print(Text(f"    constraint: {issue['constraint']}", style="eg.dim"))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    line = Text("ERROR", style="eg.error")
    line.append(f"  {result.op}", style="eg.op")
    line.append(f"  {msg}")
    console.print(line)

    if not err or not err.detail:
        return
    issues = err.detail.get("issues")
    if isinstance(issues, list):
        _issues(console, issues, verbose=verbose)
    elif verbose:
        console.print(Text("  detail:", style="eg.dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a healthy check as a key/status table."""
    items = result.data.get("items", [])
    _status_line(console, result)
    if not items:
        console.print("  No keys to check.")
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Key", style="eg.key")
    table.add_column("Status")
    if verbose:
        table.add_column("Registered")
    for item in items:
        status = str(item.get("status", ""))
        row: list[Any] = [item["key"], Text(status, style=style_for_status(status))]
        if verbose:
            row.append("yes" if item.get("registered") else "no")
        table.add_row(*row)
    console.print(table)
    console.print(f"{len(items)} keys checked, all valid")


def _render_get(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "key", data.get("key"))
    _field(console, "value", data.get("value"))
    _field(console, "origin", data.get("origin"))
    if verbose:
        _field(console, "type", data.get("type"))
        _field(console, "registered", "yes" if data.get("registered") else "no")


def _render_schema(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the schema as a table of keys, types and defaults."""
    items = result.data.get("items", [])
    _status_line(console, result)

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Key", style="eg.key")
    table.add_column("Type")
    table.add_column("Default")
    table.add_column("Description", style="eg.dim")
    if verbose:
        table.add_column("Constraints")
    for item in items:
        default = item.get("default")
        row: list[Any] = [
            item["key"],
            item.get("type", ""),
            Text(_plain(default)) if default is not None else Text("-", style="eg.dim"),
            Text(item.get("description", "")),
        ]
        if verbose:
            constraints = item.get("constraints") or {}
            row.append(Text(", ".join(f"{k}={v}" for k, v in constraints.items())))
        table.add_row(*row)
    console.print(table)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS = {
    "check": _render_check,
    "get": _render_get,
    "schema": _render_schema,
}
