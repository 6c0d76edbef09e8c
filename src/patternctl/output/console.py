"""Rich Console factory and theme for patternctl output.

Consoles render into a StringIO buffer so every renderer keeps the
``render_result() -> str`` contract.  In non-TTY environments (tests,
pipes) Rich leaves out color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PATTERN_THEME = Theme(
    {
        "pc.ok": "bold green",
        "pc.error": "bold red",
        "pc.warning": "bold yellow",
        "pc.op": "bold cyan",
        "pc.key": "dim",
        "pc.token": "bold blue",
        "pc.unassigned": "red",
        "pc.rejected": "bold red",
        "pc.tier.0": "yellow",
        "pc.tier.1": "blue",
        "pc.tier.2": "green",
        "pc.device.light": "yellow",
        "pc.device.fan": "green",
        "pc.folder": "bold",
        "pc.file": "",
    }
)

_TIER_STYLE_COUNT = 3


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps test output stable).
    """
    return Console(
        file=StringIO(),
        theme=PATTERN_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_tier(index: int | None) -> str:
    """Tiers cycle through yellow, blue, green in chain order."""
    if index is None:
        return ""
    return f"pc.tier.{index % _TIER_STYLE_COUNT}"


def style_for_device(kind: str | None) -> str:
    return f"pc.device.{kind}" if kind in ("light", "fan") else ""
