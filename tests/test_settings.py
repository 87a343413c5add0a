"""Typed smoke tests for the settings loader.

These tests verify four guarantees:
1) Importing the module-level `settings` yields a `Settings` instance.
2) Environment variables override defaults after clearing the loader cache.
3) `get_logger()` respects the configured LOG_LEVEL when constructing loggers.
4) The live-report cutover feeds the classifier's default.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import UTC, datetime
from typing import Any

import pytest

from player_versions.core.settings import (
    DEFAULT_LIVE_REPORTS_CUTOVER,
    Settings,
    get_logger,
    load_settings,
    settings,
)


@pytest.fixture(autouse=True)  # type: ignore[misc]
def _fresh_settings() -> Iterator[None]:
    """Rebuild settings around each test so env overrides don't leak."""
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


def test_settings_instance_type() -> None:
    """`settings` should be an instance of the typed `Settings` model."""
    assert isinstance(settings, Settings)


def test_env_overrides_with_cache_clear(monkeypatch: Any) -> None:
    """Changing env vars should take effect after `load_settings.cache_clear()`."""
    monkeypatch.setenv("PLAYER_VERSIONS_ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("PLAYER_VERSIONS_LIVE_REPORTS_CUTOVER", "2025-08-01T00:00:00Z")

    load_settings.cache_clear()
    s = load_settings()

    assert s.environment == "test"
    assert s.is_test and not s.is_prod
    assert s.log_level == "DEBUG"
    assert s.live_reports_cutover == datetime(2025, 8, 1, tzinfo=UTC)


def test_cutover_default() -> None:
    s = load_settings()
    assert s.live_reports_cutover == DEFAULT_LIVE_REPORTS_CUTOVER


def test_get_logger_respects_level(monkeypatch: Any) -> None:
    """`get_logger()` should apply the numeric level derived from `LOG_LEVEL`."""
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    load_settings.cache_clear()

    logger = get_logger("player_versions.tests.settings")

    assert logger.level == logging.ERROR
    assert logger.handlers, "Expected at least one StreamHandler to be attached."
