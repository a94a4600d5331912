"""Shared pytest fixtures and test helpers for activitylist tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's OUTPUT_PATH and ACTIVITYLIST_* vars out of tests."""
    monkeypatch.delenv("OUTPUT_PATH", raising=False)
    for key in list(os.environ):
        if key.startswith("ACTIVITYLIST_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def output_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point OUTPUT_PATH at a fresh file under the temp directory."""
    path = tmp_path / "out" / "trace.txt"
    monkeypatch.setenv("OUTPUT_PATH", str(path))
    return path
