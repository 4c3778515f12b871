"""Shared fixtures for foundation-application tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from courier.foundation.application.config_settings import (
    ConfigStoreSettings,
    get_config_store_settings,
)
from courier.foundation.application.config_store import ConfigStore, reset_config_store

if TYPE_CHECKING:
    from collections.abc import Iterator

_SETTINGS_ENV = ("COURIER_VERSION", "COURIER_MODE", "EDITOR", "COURIER_HISTORY", "COURIER_PATH")


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear baseline env vars and the process-wide store around each test."""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    get_config_store_settings.cache_clear()
    reset_config_store()
    yield
    get_config_store_settings.cache_clear()
    reset_config_store()


@pytest.fixture()
def store() -> ConfigStore:
    """A fresh store holding only the baseline keys."""
    return ConfigStore.with_defaults(ConfigStoreSettings(version="9.9.9"))
