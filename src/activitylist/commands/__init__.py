"""Subcommand modules for activitylist.

Provides register_commands() which uses deferred imports to keep
``activitylist --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from activitylist.commands.capabilities import capabilities
    from activitylist.commands.trace import trace

    cli.add_command(trace)
    cli.add_command(capabilities)
