"""Group: purchase approvals through the tiered approval chain."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from patternctl.commands._base import PatternGroup

if TYPE_CHECKING:
    from patternctl.commands._context import AppContext


@click.group(
    cls=PatternGroup,
    examples="""\
  patternctl approve submit 500
  patternctl approve submit 500 3000 7000
  patternctl approve submit -10
  patternctl --json approve demo
  patternctl approve tiers""",
)
def approve() -> None:
    """Route purchase requests through the approval chain."""


@approve.command(
    context_settings={"ignore_unknown_options": True},
    examples="""\
  patternctl approve submit 500
  patternctl approve submit 1000 1001
  patternctl approve submit -- -10""",
)
@click.argument("amounts", nargs=-1, type=int, required=True)
@click.pass_obj
def submit(app: AppContext, amounts: tuple[int, ...]) -> None:
    """Submit one or more AMOUNTS; each is approved, rejected or refused."""
    from patternctl.services.approval import ApprovalService

    app.emit(ApprovalService(app.settings).submit(amounts))


@approve.command(
    examples="""\
  patternctl approve demo
  PATTERNCTL_APPROVAL__DEMO_AMOUNTS='[1, 1001, 5001]' patternctl approve demo""",
)
@click.pass_obj
def demo(app: AppContext) -> None:
    """Submit the demo amounts (500, 3000 and 7000 unless configured)."""
    from patternctl.services.approval import ApprovalService

    app.emit(ApprovalService(app.settings).demo())


@approve.command(
    examples="""\
  patternctl approve tiers
  patternctl --json approve tiers""",
)
@click.pass_obj
def tiers(app: AppContext) -> None:
    """List the approval tiers and the range each one owns."""
    from patternctl.services.approval import ApprovalService

    app.emit(ApprovalService(app.settings).list_tiers())
