"""Activity kinds and the name field each kind carries.

The kind value doubles as the type tag read from the first input line
and as the class name printed in trace output.
"""

from __future__ import annotations

from enum import StrEnum


class ActivityKind(StrEnum):
    """Concrete activity types accepted by the trace driver."""

    PAYMENT = "Payment"
    REFUND = "Refund"


# Name field carried by each kind (attribute on the record).
NAME_FIELDS: dict[str, str] = {
    "Payment": "receiver",
    "Refund": "sender",
}


def parse_kind(tag: str) -> ActivityKind | None:
    """Return the kind for a type tag, or None if the tag is unrecognized.

    Matching is exact after trimming surrounding whitespace.
    """
    try:
        return ActivityKind(tag.strip())
    except ValueError:
        return None


def name_field(kind: ActivityKind) -> str:
    """Return the name field for *kind* (``receiver`` or ``sender``)."""
    return NAME_FIELDS[str(kind)]


def name_label(kind: ActivityKind) -> str:
    """Return the capitalized name field, e.g. ``Receiver``."""
    return name_field(kind).capitalize()
