"""Group: the remote control built on the command dispatch table."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from patternctl.commands._base import PatternGroup

if TYPE_CHECKING:
    from patternctl.commands._context import AppContext

STOP_ANSWER = "n"


@click.group(
    cls=PatternGroup,
    examples="""\
  patternctl remote buttons
  patternctl remote press 1
  patternctl remote run""",
)
def remote() -> None:
    """Press buttons on a remote control that drives a light and a fan."""


@remote.command(
    examples="""\
  patternctl remote press 1
  patternctl remote press 9
  patternctl --json remote press 3""",
)
@click.argument("token")
@click.pass_obj
def press(app: AppContext, token: str) -> None:
    """Press the button TOKEN once."""
    from patternctl.services.remote import RemoteService

    app.emit(RemoteService(app.settings).press(token))


@remote.command(
    examples="""\
  patternctl remote buttons
  patternctl -q remote buttons""",
)
@click.pass_obj
def buttons(app: AppContext) -> None:
    """List the button bindings."""
    from patternctl.services.remote import RemoteService

    app.emit(RemoteService(app.settings).list_buttons())


@remote.command(
    examples="""\
  patternctl remote run
  printf '1\\ny\\n3\\nn\\n' | patternctl remote run""",
)
@click.pass_obj
def run(app: AppContext) -> None:
    """Prompt for buttons until you answer 'n' to 'Continue?'."""
    from patternctl.services.remote import RemoteService
    from patternctl.services.result import ServiceResult

    if app.settings.no_interact:
        app.emit(
            ServiceResult.failure(
                "remote_run",
                "NON_INTERACTIVE",
                "The interactive remote needs prompts; use 'remote press' with --no-interact",
            )
        )
        return

    svc = RemoteService(app.settings)
    menu = svc.list_buttons()
    while True:
        app.emit(menu)
        token = click.prompt("Button", default="", show_default=False)
        app.emit(svc.press(token.strip()))
        answer = click.prompt("\nContinue? (y/n)", default="y", show_default=False)
        if answer.strip().lower() == STOP_ANSWER:
            break

    app.emit(svc.summary())
