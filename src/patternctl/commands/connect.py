"""Group: the single database-connection guard."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from patternctl.commands._base import PatternGroup

if TYPE_CHECKING:
    from patternctl.commands._context import AppContext
    from patternctl.services.connection import ConnectionService


@click.group(
    cls=PatternGroup,
    examples="""\
  patternctl connect demo
  patternctl --json connect demo""",
)
def connect() -> None:
    """Show that one process holds at most one live connection."""


def _service(app: AppContext) -> ConnectionService:
    from patternctl.services.connection import ConnectionService

    return ConnectionService(app.settings, lambda: app.connection)


@connect.command()
@click.pass_obj
def demo(app: AppContext) -> None:
    """Connect twice, compare handles, disconnect, then reconnect."""
    app.emit(_service(app).demo())


@connect.command(name="open")
@click.pass_obj
def open_(app: AppContext) -> None:
    """Open the connection (reports if one is already active)."""
    app.emit(_service(app).connect())


@connect.command()
@click.pass_obj
def close(app: AppContext) -> None:
    """Close the connection."""
    app.emit(_service(app).disconnect())
