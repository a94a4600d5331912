"""Tests for the capabilities CLI command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from activitylist.cli import cli


class TestCapabilitiesCommand:
    def test_payment_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["capabilities", "Payment"])
        assert result.exit_code == 0
        assert "setReceiver" in result.stdout
        assert "inherited" in result.stdout

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "capabilities", "Refund"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [item["declared"] for item in data["data"]["items"]] == [
            False,
            False,
            True,
            True,
        ]

    def test_unknown_kind(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["capabilities", "Discount"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "Unknown activity type" in result.stderr
