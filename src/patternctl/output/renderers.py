"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
gets the rendered text back from :func:`render_result`.

Renderers are dispatched by ``result.op``.  Unknown ops fall through to a
generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from patternctl.output.console import (
    create_console,
    get_output,
    style_for_device,
    style_for_tier,
)

if TYPE_CHECKING:
    from rich.console import Console

    from patternctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: outcome messages only."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    data = result.data
    if "results" in data:
        return "\n".join(r["message"] for r in data["results"])
    if "steps" in data:
        return "\n".join(s["message"] for s in data["steps"])
    if "message" in data:
        return str(data["message"])
    if "lines" in data:
        return "\n".join(data["lines"])
    if "items" in data:
        return "\n".join(str(_item_key(item)) for item in data["items"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _item_key(item: dict[str, Any]) -> Any:
    return item.get("token", item.get("name", ""))


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="pc.ok"), Text(f"  {result.op}", style="pc.op"))


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="pc.key"), Text(str(value)), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            _render_span(console, value, indent=4)
        else:
            console.print(Text(f"    {key}: {value}"))


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    prefix = " " * indent
    line = Text(f"{prefix}{span.get('duration_ms', 0.0):>8.3f}ms  {span.get('name', '?')}")
    line.stylize("dim")
    annotations = span.get("annotations")
    if annotations:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="pc.error"),
        Text(f"  {result.op}", style="pc.op"),
        Text(f": {msg}"),
        sep="",
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Approval chain ────────────────────────────────────────────────────


def _render_approvals(result: ServiceResult, console: Console) -> None:
    for entry in result.data.get("results", []):
        outcome = entry.get("outcome")
        if outcome == "approved":
            style = style_for_tier(entry.get("tier_index"))
        elif outcome == "rejected":
            style = "pc.rejected"
        else:
            style = "pc.warning"
        console.print(
            Text(f"${entry['amount']}: ", style="pc.key"),
            Text(entry["message"], style=style),
            sep="",
        )


def _render_tiers(result: ServiceResult, console: Console) -> None:
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("#", justify="right")
    table.add_column("Tier")
    table.add_column("Range")
    for index, item in enumerate(result.data.get("items", [])):
        table.add_row(
            str(item["position"]),
            Text(item["name"], style=style_for_tier(index)),
            item["range"],
        )
    console.print(table)


# ── Remote control ────────────────────────────────────────────────────


def _render_press(result: ServiceResult, console: Console) -> None:
    data = result.data
    if data.get("status") == "unassigned":
        console.print(Text(data["message"], style="pc.unassigned"))
        return
    console.print(Text(data["message"], style=style_for_device(data.get("device"))))


def _render_buttons(result: ServiceResult, console: Console) -> None:
    console.print("Press a remote control button:")
    for item in result.data.get("items", []):
        console.print(
            Text(f"  {item['token']}. ", style="pc.token"),
            Text(item["command"]),
            sep="",
        )


def _render_remote_session(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    _field(console, "presses", result.data.get("presses", 0))
    _field(console, "unassigned", result.data.get("unassigned", 0))
    for kind, is_on in result.data.get("devices", {}).items():
        _field(console, kind, "on" if is_on else "off")


# ── Connection guard ──────────────────────────────────────────────────


def _render_connection(result: ServiceResult, console: Console) -> None:
    for step in result.data.get("steps", []):
        style = "pc.warning" if step["status"] == "already_active" else ""
        console.print(Text(step["message"], style=style))
    if "same_instance" in result.data:
        console.print(Text(f"Same instance: {result.data['same_instance']}"))


# ── File tree ─────────────────────────────────────────────────────────


def _render_tree(result: ServiceResult, console: Console) -> None:
    for line in result.data.get("lines", []):
        style = "pc.folder" if "+Folder:" in line else "pc.file"
        console.print(Text(line, style=style))


# ── Fallback ──────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"))
        _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "approve": _render_approvals,
    "approve_demo": _render_approvals,
    "list_tiers": _render_tiers,
    "press_button": _render_press,
    "list_buttons": _render_buttons,
    "remote_session": _render_remote_session,
    "connection": _render_connection,
    "show_tree": _render_tree,
}
