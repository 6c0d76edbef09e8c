"""Shared pytest fixtures for patternctl tests."""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from patternctl.config.settings import PatternSettings
from patternctl.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep a developer's PATTERNCTL_* variables out of every test."""
    for key in list(os.environ):
        if key.startswith("PATTERNCTL_"):
            monkeypatch.delenv(key, raising=False)
    yield
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> PatternSettings:
    """Default settings with config discovery rooted in an empty temp dir."""
    return PatternSettings.from_cli(search_from=tmp_path)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from an empty temp dir so no stray patternctl.toml is found.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.  Tests that need
    to drop a config file there can request ``tmp_path`` too (same dir).
    """
    monkeypatch.chdir(tmp_path)


def write_config(directory: Path, body: str) -> Path:
    """Write a patternctl.toml into *directory* and return its path."""
    path = directory / "patternctl.toml"
    path.write_text(body, encoding="utf-8")
    return path
