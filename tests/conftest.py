"""Shared fixtures for integration tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from courier.foundation.application import ConfigStore, ConfigStoreSettings
from courier.infra.observability import LoggingSettings, shutdown_logging
from courier.infra.persistence import CACHE_PREFIX_KEY, CacheSettings

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def _detach_logging() -> Iterator[None]:
    """Remove the root log handler a client session installs."""
    yield
    shutdown_logging()


@pytest.fixture()
def store(tmp_path: Path) -> ConfigStore:
    """A fresh baseline store whose cache lives under tmp_path."""
    store = ConfigStore.with_defaults(ConfigStoreSettings(version="release-2.7"))
    store.set(CACHE_PREFIX_KEY, str(tmp_path / "cache"), notify=False)
    return store


@pytest.fixture()
def cache_settings() -> CacheSettings:
    return CacheSettings(cache_max_entries=100)


@pytest.fixture()
def logging_settings() -> LoggingSettings:
    """JSON logs so tests can parse captured output."""
    return LoggingSettings(log_level="INFO", environment="production")
