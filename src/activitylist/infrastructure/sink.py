"""Append-only line sink for trace output.

The sink is opened once, written in order, and closed after the last
line. With no path it writes to stdout and leaves the stream open.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Generator, Iterable
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

logger = logging.getLogger(__name__)


class LineSink:
    """Writes newline-terminated lines to an underlying text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self.count = 0

    def write_line(self, line: str) -> None:
        self._stream.write(f"{line}\n")
        self.count += 1

    def write_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.write_line(line)


@contextmanager
def open_sink(path: Path | None) -> Generator[LineSink]:
    """Open a :class:`LineSink` on *path*, or on stdout when *path* is None.

    A file sink truncates any existing file and creates parent
    directories as needed.
    """
    if path is None:
        sink = LineSink(sys.stdout)
        yield sink
        sys.stdout.flush()
        return

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="\n") as fh:
        sink = LineSink(fh)
        yield sink
    logger.debug("Wrote %d line(s) to %s", sink.count, path)
