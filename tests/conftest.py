"""Shared pytest fixtures for mdfront tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run in a temp directory with no mdfront config in scope.

    The CLI reconfigures root logging; restore it afterwards.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MDFRONT_CONFIG", str(tmp_path / "no-config.toml"))
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
