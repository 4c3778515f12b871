"""Courier Infra Observability: structlog output for structlog and stdlib records."""

from __future__ import annotations

from courier.infra.observability.logging import (
    LoggingSettings,
    configure_logging,
    get_logger,
    get_logging_settings,
    shutdown_logging,
)

__all__ = [
    "LoggingSettings",
    "configure_logging",
    "get_logger",
    "get_logging_settings",
    "shutdown_logging",
]
