"""Command: run one activity trace from a four-line script."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from activitylist.commands._base import ActivityCommand

if TYPE_CHECKING:
    from activitylist.commands._context import AppContext


@click.command(
    cls=ActivityCommand,
    examples="""\
  printf 'Payment\\n100 Alice\\n200\\nBob\\n' | OUTPUT_PATH=out.txt activitylist trace
  activitylist trace --input script.txt
  activitylist --json trace --input script.txt""",
)
@click.option(
    "--input",
    "input_file",
    type=click.File("r", encoding="utf-8"),
    default="-",
    help="Read the script from FILE instead of stdin.",
)
@click.pass_obj
def trace(app: AppContext, input_file: TextIO) -> None:
    """Construct an activity, update it, and write the trace lines.

    Lines go to the file named by OUTPUT_PATH, or to stdout when it is unset.
    """
    from activitylist.services.trace import TraceService

    result = TraceService(app.settings.output_path).run_stream(input_file)

    if result.ok and app.settings.output_path is None:
        # stdout already carries the trace itself.
        app.emit_warnings(result)
        return
    app.emit(result)
