"""Shared fixtures for infra-observability tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from courier.infra.observability.logging import get_logging_settings, shutdown_logging

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _detach_logging() -> Iterator[None]:
    """Remove the root handler and cached settings left by configure_logging()."""
    yield
    shutdown_logging()
    get_logging_settings.cache_clear()
