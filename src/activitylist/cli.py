"""Root CLI group for activitylist with global flags and command registration."""

from __future__ import annotations

import click

from activitylist import __version__
from activitylist.commands import register_commands
from activitylist.commands._context import AppContext
from activitylist.config.settings import ActivitySettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="activitylist")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """activitylist: payment and refund activity traces.

    With no command, runs ``trace`` on stdin.
    """
    settings = ActivitySettings.from_cli(
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        from activitylist.commands.trace import trace

        ctx.invoke(trace)


register_commands(cli)
