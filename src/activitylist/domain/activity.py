"""Activity records — Activity, Payment, Refund.

Activity owns the amount and its validated setter. Payment and Refund
inherit the amount pair unchanged and each declare their own name pair
(receiver / sender) with an unconditional setter.

INVARIANT: ``amount > 0`` after every successful ``set_amount``.
Construction stores the amount as given; only the setter validates.
"""

from __future__ import annotations

from dataclasses import dataclass

from activitylist.domain.types import ActivityKind, name_field

# Amount operations, declared once on Activity.
AMOUNT_OPERATIONS: tuple[str, str] = ("set_amount", "get_amount")


@dataclass
class Activity:
    """Base record holding a monetary amount."""

    amount: int

    def set_amount(self, value: int) -> bool:
        """Store *value* if it is strictly positive.

        Returns False and leaves the amount unchanged otherwise.
        """
        if value <= 0:
            return False
        self.amount = value
        return True

    def get_amount(self) -> int:
        return self.amount


@dataclass
class Payment(Activity):
    """An activity paid out to a receiver."""

    receiver: str

    def set_receiver(self, receiver: str) -> None:
        self.receiver = receiver

    def get_receiver(self) -> str:
        return self.receiver


@dataclass
class Refund(Activity):
    """An activity refunded by a sender."""

    sender: str

    def set_sender(self, sender: str) -> None:
        self.sender = sender

    def get_sender(self) -> str:
        return self.sender


ACTIVITY_CLASSES: dict[str, type[Activity]] = {
    "Payment": Payment,
    "Refund": Refund,
}


def create_activity(kind: ActivityKind, amount: int, name: str) -> Activity:
    """Construct the record for *kind* with its initial amount and name."""
    cls = ACTIVITY_CLASSES[str(kind)]
    return cls(amount, name)  # type: ignore[call-arg]


def get_name(record: Activity, kind: ActivityKind) -> str:
    """Read the name field of *record* through its own getter."""
    getter = getattr(record, f"get_{name_field(kind)}")
    return getter()


def set_name(record: Activity, kind: ActivityKind, value: str) -> None:
    """Overwrite the name field of *record* through its own setter."""
    setter = getattr(record, f"set_{name_field(kind)}")
    setter(value)


def capability_operations(kind: ActivityKind) -> tuple[str, ...]:
    """The four operations reported for *kind*: amount pair, then name pair."""
    field = name_field(kind)
    return (*AMOUNT_OPERATIONS, f"set_{field}", f"get_{field}")


def declared_operations(kind: ActivityKind) -> dict[str, bool]:
    """Map each capability operation to whether *kind*'s class declares it.

    Inherited operations report False. Order follows
    :func:`capability_operations`.

    Read from the class namespace, so the result tracks the class bodies
    above: the amount pair lives only on :class:`Activity` and each
    subclass declares its own name pair, giving False, False, True, True.
    """
    cls = ACTIVITY_CLASSES[str(kind)]
    own = vars(cls)
    return {op: op in own for op in capability_operations(kind)}


def operation_label(operation: str) -> str:
    """External spelling of an operation name: ``set_amount`` -> ``setAmount``."""
    head, *rest = operation.split("_")
    return head + "".join(part.capitalize() for part in rest)
