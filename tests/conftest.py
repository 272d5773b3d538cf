"""
Pytest configuration for Workflow.

Provides fixtures for:
- Isolated settings (environment and cache reset)
- Root logger state restoration between tests
- A CLI runner for integration tests
"""

from __future__ import annotations

import logging
from typing import Generator

import pytest
from typer.testing import CliRunner

from workflow.config import Settings, get_settings

_SETTINGS_ENV_VARS = ("APP_ENV", "LOG_LEVEL", "LOG_JSON")


@pytest.fixture(autouse=True)
def isolated_settings(
    monkeypatch: pytest.MonkeyPatch, tmp_path
) -> Generator[None, None, None]:
    """
    Run each test without inherited settings env vars or a stray `.env` file.
    """
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    """
    Put back the root logger handlers and level after each test.
    """
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.
    """
    return Settings(app_env="test", log_level="DEBUG")


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
