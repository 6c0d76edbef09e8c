"""Root CLI group for patternctl with global flags and command registration."""

from __future__ import annotations

import click

from patternctl import __version__
from patternctl.commands import register_commands
from patternctl.commands._context import AppContext
from patternctl.config.settings import PatternSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="patternctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Outcome messages only.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logs and timing details.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
) -> None:
    """patternctl — design pattern demonstrations."""
    ctx.ensure_object(dict)
    settings = PatternSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
