"""Tests for activity kinds."""

import pytest

from activitylist.domain.types import ActivityKind, name_field, name_label, parse_kind


class TestActivityKind:
    def test_members(self) -> None:
        assert {k.value for k in ActivityKind} == {"Payment", "Refund"}

    def test_str_is_tag(self) -> None:
        assert str(ActivityKind.PAYMENT) == "Payment"
        assert f"{ActivityKind.REFUND}" == "Refund"


class TestParseKind:
    def test_exact_tags(self) -> None:
        assert parse_kind("Payment") is ActivityKind.PAYMENT
        assert parse_kind("Refund") is ActivityKind.REFUND

    def test_trims_whitespace(self) -> None:
        assert parse_kind("  Refund \r") is ActivityKind.REFUND

    @pytest.mark.parametrize("tag", ["Discount", "payment", "REFUND", ""])
    def test_unrecognized(self, tag: str) -> None:
        assert parse_kind(tag) is None


class TestNameField:
    def test_fields(self) -> None:
        assert name_field(ActivityKind.PAYMENT) == "receiver"
        assert name_field(ActivityKind.REFUND) == "sender"

    def test_labels(self) -> None:
        assert name_label(ActivityKind.PAYMENT) == "Receiver"
        assert name_label(ActivityKind.REFUND) == "Sender"
