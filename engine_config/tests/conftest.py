"""Shared fixtures for engine_config tests."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _clean_senzing_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every ``SENZING_*`` variable so tests never see the host's configuration."""
    for name in list(os.environ):
        if name.startswith("SENZING_"):
            monkeypatch.delenv(name, raising=False)
