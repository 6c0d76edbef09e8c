"""Command: print a composite file tree."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click
from click.core import ParameterSource

from patternctl.commands._base import PatternCommand

if TYPE_CHECKING:
    from patternctl.commands._context import AppContext


@click.command(
    cls=PatternCommand,
    examples="""\
  patternctl tree
  patternctl tree src
  patternctl tree . --max-depth 2 --all
  patternctl tree . --no-all""",
)
@click.argument("path", required=False, type=click.Path(path_type=Path))
@click.option("--max-depth", type=click.IntRange(min=0), default=None, help="Stop descending here.")
@click.option(
    "--all/--no-all",
    "show_hidden",
    default=False,
    help="Include dotfiles (overrides [tree] show_hidden).",
)
@click.pass_context
def tree(
    ctx: click.Context,
    path: Path | None,
    max_depth: int | None,
    show_hidden: bool,
) -> None:
    """Print PATH as a folder/file tree (a sample tree when PATH is omitted)."""
    from patternctl.services.tree import TreeService

    app: AppContext = ctx.obj
    svc = TreeService(app.settings)
    if path is None:
        app.emit(svc.demo())
        return

    # Omitted flag defers to config.
    if ctx.get_parameter_source("show_hidden") is ParameterSource.DEFAULT:
        hidden: bool | None = None
    else:
        hidden = show_hidden
    app.emit(svc.from_path(path, max_depth=max_depth, show_hidden=hidden))
