"""Log output for the mail client.

Two kinds of records reach the terminal: events emitted through structlog
(``get_logger(...).info("folder_opened", folder="INBOX")``) and plain
stdlib records that library modules emit with
``logging.getLogger(__name__).debug("config_key_set", extra={...})``.
``configure_logging()`` installs one root handler whose
``structlog.stdlib.ProcessorFormatter`` renders both the same way:

- level name and logger name on every event
- ``extra=`` fields lifted into the event
- ISO 8601 UTC timestamps
- values bound with ``structlog.contextvars.bind_contextvars``
- mail credentials replaced by ``REDACTED_VALUE``
- JSON lines when ``ENVIRONMENT=production``, coloured console lines otherwise

Usage:
    from courier.infra.observability import configure_logging, get_logger

    configure_logging()
    get_logger(__name__).info("folder_opened", folder="INBOX", messages=42)

Tests call ``shutdown_logging()`` to detach the handler again.
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from collections.abc import MutableMapping

Processor = structlog.types.Processor

# Field names whose values never reach the log output.
SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {
        "password",
        "passwd",
        "passphrase",
        "token",
        "api_key",
        "credential",
        "imap_password",
        "smtp_password",
        "pgp_passphrase",
    }
)

REDACTED_VALUE: str = "***REDACTED***"

_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Root handler installed by configure_logging(), and the root level it replaced.
_installed_handler: logging.Handler | None = None
_previous_root_level: int | None = None


class LoggingSettings(BaseSettings):
    """Log level and output format, read from ``LOG_LEVEL`` and ``ENVIRONMENT``.

    Example:
        >>> LoggingSettings(log_level="debug", environment="production").use_json_logs
        True
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        populate_by_name=True,
    )

    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Lowest level written to the terminal",
    )
    environment: str = Field(
        default="development",
        alias="ENVIRONMENT",
        description="production selects JSON lines; anything else the console renderer",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        return str(v).upper()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        if v not in _LEVEL_NAMES:
            msg = f"log_level must be one of {', '.join(_LEVEL_NAMES)}"
            raise ValueError(msg)
        return v

    @property
    def use_json_logs(self) -> bool:
        return self.environment == "production"

    @property
    def log_level_int(self) -> int:
        return getattr(logging, self.log_level, logging.INFO)


class SensitiveDataProcessor:
    """Replace credential values in an event with ``REDACTED_VALUE``.

    A field is sensitive when its lower-cased name is in ``SENSITIVE_FIELDS``
    or contains ``password`` or ``secret`` (``account_password``,
    ``oauth_client_secret``).
    """

    def __call__(
        self,
        logger: Any,
        method_name: str,
        event_dict: MutableMapping[str, Any],
    ) -> MutableMapping[str, Any]:
        for key in list(event_dict):
            if self._is_sensitive(key):
                event_dict[key] = REDACTED_VALUE
        return event_dict

    @staticmethod
    def _is_sensitive(key: str) -> bool:
        name = key.lower()
        return name in SENSITIVE_FIELDS or "password" in name or "secret" in name


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Return LoggingSettings from the environment, cached.

    Clear with ``get_logging_settings.cache_clear()`` in tests.
    """
    return LoggingSettings()


def _shared_processors() -> list[Processor]:
    """Steps applied to every event before rendering, whatever its origin."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        SensitiveDataProcessor(),
    ]


def _build_formatter(settings: LoggingSettings) -> structlog.stdlib.ProcessorFormatter:
    final: list[Processor] = [structlog.stdlib.ProcessorFormatter.remove_processors_meta]
    if settings.use_json_logs:
        final += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        final.append(structlog.dev.ConsoleRenderer(colors=True))

    # Stdlib records carry their context in ``extra=``; lift it into the event
    # before redaction runs.
    foreign_pre_chain: list[Processor] = [structlog.stdlib.ExtraAdder(), *_shared_processors()]

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=foreign_pre_chain,
        processors=final,
    )


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Route structlog events and stdlib records to stdout through one formatter.

    Calling it again replaces the handler installed by the previous call, so
    a client restarted in the same process writes each record once.

    Args:
        settings: Optional LoggingSettings. Loaded from the environment when
            omitted.
    """
    global _installed_handler, _previous_root_level
    if settings is None:
        settings = get_logging_settings()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter(settings))

    root = logging.getLogger()
    if _installed_handler is not None:
        root.removeHandler(_installed_handler)
    else:
        _previous_root_level = root.level
    root.addHandler(handler)
    root.setLevel(settings.log_level_int)
    _installed_handler = handler


def shutdown_logging() -> None:
    """Detach the handler installed by ``configure_logging()`` and reset structlog."""
    global _installed_handler, _previous_root_level
    root = logging.getLogger()
    if _installed_handler is not None:
        root.removeHandler(_installed_handler)
        _installed_handler = None
    if _previous_root_level is not None:
        root.setLevel(_previous_root_level)
        _previous_root_level = None
    structlog.reset_defaults()


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger backed by the stdlib logger ``name``.

    Without a name the calling module's name is used.
    """
    if name is None:
        return structlog.stdlib.get_logger()
    return structlog.stdlib.get_logger(name)
