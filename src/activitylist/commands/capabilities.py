"""Command: report an activity type's own vs. inherited operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from activitylist.commands._base import ActivityCommand

if TYPE_CHECKING:
    from activitylist.commands._context import AppContext


@click.command(
    cls=ActivityCommand,
    examples="""\
  activitylist capabilities Payment
  activitylist --json capabilities Refund""",
)
@click.argument("kind")
@click.pass_obj
def capabilities(app: AppContext, kind: str) -> None:
    """Show which operations KIND declares itself and which it inherits."""
    from activitylist.services.trace import TraceService

    app.emit(TraceService().capabilities(kind))
