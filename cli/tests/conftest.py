"""Shared fixtures for CLI tests."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _clean_senzing_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every ``SENZING_*`` variable so the CLI only sees what a test sets."""
    for name in list(os.environ):
        if name.startswith("SENZING_"):
            monkeypatch.delenv(name, raising=False)
