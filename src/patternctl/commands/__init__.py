"""Subcommand modules for patternctl.

register_commands() imports each module only when the root group is
built, keeping ``patternctl --help`` cheap.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Attach the three groups and the standalone ``tree`` command."""
    from patternctl.commands.approve import approve
    from patternctl.commands.connect import connect
    from patternctl.commands.remote import remote
    from patternctl.commands.tree import tree

    cli.add_command(approve)
    cli.add_command(remote)
    cli.add_command(connect)
    cli.add_command(tree)
