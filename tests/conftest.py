"""
Pytest configuration for the stress tool.

Provides fixtures for:
- A reusable ConfigLoader
- A configuration carrying every default
- An empty workload driver registry
- Root logger isolation for tests that configure logging
"""

from __future__ import annotations

import logging
from typing import Generator

import pytest

from newts_stress import drivers
from newts_stress.config import get_settings
from newts_stress.domain.models import Command, Configuration
from newts_stress.loader import ConfigLoader


@pytest.fixture(scope="session")
def loader() -> ConfigLoader:
    """
    Session-scoped loader; it only holds the immutable option table.
    """
    return ConfigLoader()


@pytest.fixture
def default_config() -> Configuration:
    return Configuration(command=Command.INSERT)


@pytest.fixture
def empty_registry(monkeypatch: pytest.MonkeyPatch) -> dict:
    """
    Replace the driver registry so registrations never leak between tests.
    """
    registry: dict = {}
    monkeypatch.setattr(drivers, "_registry", registry)
    return registry


@pytest.fixture
def restore_root_logger() -> Generator[None, None, None]:
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Clear settings-related env vars and the cached Settings instance.
    """
    for name in ("APP_ENV", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
