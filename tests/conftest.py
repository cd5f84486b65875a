"""Shared pytest fixtures and test helpers for pinctl tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from pinctl.config.settings import PinSettings
from pinctl.services.notation import NotationService


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop any PINCTL_* variables leaking in from the outer environment."""
    for key in list(os.environ):
        if key.startswith("PINCTL_"):
            monkeypatch.delenv(key)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> PinSettings:
    """Settings resolved from an empty directory (code defaults only)."""
    return PinSettings.from_cli(start=tmp_path)


@pytest.fixture
def service(settings: PinSettings) -> NotationService:
    return NotationService(settings)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so config discovery sees no pinctl.toml.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes. Tests that need the path can also request ``tmp_path`` directly
    (pytest deduplicates — it's the same directory).
    """
    monkeypatch.chdir(tmp_path)
