"""Context-scoped injection of the configuration store.

Provides a ContextVar-based mechanism for handing a specific ConfigStore to
code further down the call stack without explicit parameter passing. When a
store is set here, ``get_config_store()`` returns it instead of the
process-wide instance, which keeps tests and embedded sessions isolated.

Usage:
    from courier.foundation.application.context import (
        clear_config_store,
        set_config_store,
    )

    token = set_config_store(ConfigStore.with_defaults())
    try:
        run_session()
    finally:
        clear_config_store(token)
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from contextvars import Token

    from courier.foundation.application.config_store import ConfigStore


# ContextVar for the injected store - None when nothing is injected
config_store_context: ContextVar[ConfigStore | None] = ContextVar(
    "config_store_context", default=None
)


class NoConfigStoreError(RuntimeError):
    """Raised when the injected store is accessed but none is set."""

    def __init__(self) -> None:
        super().__init__(
            "No configuration store in context. "
            "Call set_config_store() before accessing the current store."
        )


def set_config_store(store: ConfigStore) -> Token[ConfigStore | None]:
    """Inject a store for the current context.

    Args:
        store: The store to expose to downstream callers.

    Returns:
        Token for restoring the previous value via clear_config_store().
    """
    return config_store_context.set(store)


def clear_config_store(token: Token[ConfigStore | None]) -> None:
    """Restore the store that was in context before set_config_store().

    Args:
        token: The token returned from set_config_store.
    """
    config_store_context.reset(token)


def get_current_config_store() -> ConfigStore:
    """Get the injected store.

    Raises:
        NoConfigStoreError: If no store has been injected.
    """
    store = config_store_context.get()
    if store is None:
        raise NoConfigStoreError()
    return store


def get_optional_config_store() -> ConfigStore | None:
    """Get the injected store if available, or None."""
    return config_store_context.get()
