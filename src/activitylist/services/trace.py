"""TraceService — construct one activity, update it, report each step.

Pipeline: PARSE → CONSTRUCT → UPDATE → REPORT → WRITE

Input is four lines: type tag, ``"<amount> <name>"``, new amount,
new name. An unrecognized tag is a silent no-op (empty output), not an
error. Undecodable input, missing lines, non-integer amounts and an
unwritable output path fail fast with a structured ServiceError.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from pathlib import Path
from typing import Any, TextIO

from pydantic import BaseModel

from activitylist.domain.activity import (
    create_activity,
    declared_operations,
    get_name,
    operation_label,
    set_name,
)
from activitylist.domain.types import ActivityKind, name_field, name_label, parse_kind
from activitylist.infrastructure.sink import open_sink
from activitylist.services.result import ServiceResult

logger = logging.getLogger(__name__)

INPUT_LINE_COUNT = 4

# Optional sign, ASCII digits, no underscores.
_AMOUNT_RE = re.compile(r"[+-]?[0-9]+")


class TraceInputError(Exception):
    """Raised when trace input is missing or malformed."""

    def __init__(self, code: str, message: str, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.detail = detail or {}


class TraceInput(BaseModel):
    """Parsed trace input for a recognized activity kind."""

    model_config = {"frozen": True}

    kind: ActivityKind
    amount: int
    name: str
    new_amount: int
    new_name: str


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def read_input_lines(stream: TextIO) -> list[str]:
    """Read the whole stream and split it into lines.

    Raises:
        TraceInputError: ``INVALID_INPUT`` when the stream cannot be decoded.
    """
    try:
        text = stream.read()
    except UnicodeDecodeError as exc:
        raise TraceInputError(
            "INVALID_INPUT",
            f"Input is not valid text: {exc.reason} at byte {exc.start}",
            {"encoding": exc.encoding, "position": exc.start},
        ) from None
    return text.split("\n")


def _parse_amount(token: str, *, line: int) -> int:
    if _AMOUNT_RE.fullmatch(token) is None:
        raise TraceInputError(
            "INVALID_AMOUNT",
            f"Line {line}: expected an integer amount, got {token!r}",
            {"line": line, "value": token},
        )
    return int(token)


def parse_trace_input(lines: Sequence[str]) -> TraceInput | None:
    """Parse the four input lines.

    Returns None when the type tag matches no :class:`ActivityKind`.

    Raises:
        TraceInputError: ``MISSING_INPUT`` when fewer than four lines are
            present or line 2 has no name; ``INVALID_AMOUNT`` when an
            amount is not an integer.
    """
    if len(lines) < INPUT_LINE_COUNT:
        raise TraceInputError(
            "MISSING_INPUT",
            f"Expected {INPUT_LINE_COUNT} input lines, got {len(lines)}",
            {"lines": len(lines)},
        )

    kind = parse_kind(lines[0])
    if kind is None:
        return None

    tokens = lines[1].strip().split()
    if len(tokens) < 2:
        raise TraceInputError(
            "MISSING_INPUT",
            f"Line 2: expected '<amount> <{name_field(kind)}>', got {lines[1].strip()!r}",
            {"line": 2, "value": lines[1].strip()},
        )

    return TraceInput(
        kind=kind,
        amount=_parse_amount(tokens[0], line=2),
        name=tokens[1],
        new_amount=_parse_amount(lines[2].strip(), line=3),
        new_name=lines[3].strip(),
    )


# ---------------------------------------------------------------------------
# Trace
# ---------------------------------------------------------------------------


def build_trace(trace_input: TraceInput) -> list[str]:
    """Run one construction and both updates, returning the trace lines."""
    kind = trace_input.kind
    field = name_field(kind)
    record = create_activity(kind, trace_input.amount, trace_input.name)

    lines = [
        f"{kind} object created with amount {record.get_amount()} "
        f"and {field} {get_name(record, kind)}",
    ]

    if record.set_amount(trace_input.new_amount):
        lines.append(f"Amount updated to {trace_input.new_amount}")
    else:
        lines.append("Amount not updated")

    set_name(record, kind, trace_input.new_name)
    lines.append(f"{name_label(kind)} updated to {trace_input.new_name}")

    lines.append(
        f"{kind} object details - amount is {record.get_amount()} "
        f"and {field} is {get_name(record, kind)}"
    )

    for operation, declared in declared_operations(kind).items():
        flag = "true" if declared else "false"
        lines.append(f"{kind}.prototype has property {operation_label(operation)}: {flag}")

    return lines


class TraceService:
    """Drives one trace run and reports activity capabilities."""

    def __init__(self, output_path: Path | None = None) -> None:
        self._output_path = output_path

    def run_stream(self, stream: TextIO) -> ServiceResult:
        """Read the script from *stream*, then :meth:`run` it."""
        try:
            lines = read_input_lines(stream)
        except TraceInputError as exc:
            logger.debug("Rejected trace input: %s", exc.message)
            return ServiceResult.failure("trace", exc.code, exc.message, exc.detail)
        return self.run(lines)

    def run(self, lines: Sequence[str]) -> ServiceResult:
        """Parse *lines*, build the trace and write it to the sink."""
        op = "trace"
        warnings: list[str] = []

        try:
            trace_input = parse_trace_input(lines)
        except TraceInputError as exc:
            logger.debug("Rejected trace input: %s", exc.message)
            return ServiceResult.failure(op, exc.code, exc.message, exc.detail)

        if trace_input is None:
            tag = lines[0].strip()
            logger.debug("Unrecognized activity type %r, skipping", tag)
            warnings.append(f"Unrecognized activity type: {tag!r}")
            trace: list[str] = []
            kind = None
        else:
            trace = build_trace(trace_input)
            kind = str(trace_input.kind)

        try:
            with open_sink(self._output_path) as sink:
                sink.write_lines(trace)
        except OSError as exc:
            return ServiceResult.failure(
                op,
                "OUTPUT_ERROR",
                f"Cannot write trace to {self._output_path}: {exc.strerror or exc}",
                {"output_path": str(self._output_path)},
            )

        return ServiceResult.success(
            op,
            {
                "kind": kind,
                "lines_written": len(trace),
                "output_path": str(self._output_path) if self._output_path else None,
            },
            warnings,
        )

    def capabilities(self, tag: str) -> ServiceResult:
        """Report which capability operations *tag*'s class declares itself."""
        op = "capabilities"
        kind = parse_kind(tag)
        if kind is None:
            return ServiceResult.failure(
                op,
                "UNKNOWN_KIND",
                f"Unknown activity type: {tag!r}",
                {"known": [str(k) for k in ActivityKind]},
            )

        items = [
            {"operation": operation_label(name), "declared": declared}
            for name, declared in declared_operations(kind).items()
        ]
        return ServiceResult.success(op, {"kind": str(kind), "items": items})
