"""Process-wide configuration store.

The store maps case-sensitive key names to typed entries (string, integer,
list of strings). Exactly one entry exists per key: setting a key again
replaces its entry in place, whatever the new value's kind, so the number of
keys only grows when a previously unseen name is set.

The shared store is created lazily by ``get_config_store()`` and seeded with
the built-in baseline keys. Code that needs an isolated store constructs one
with ``ConfigStore.with_defaults()`` and injects it through
``courier.foundation.application.context``.

Example:
    >>> store = ConfigStore.with_defaults()
    >>> store.set("steve", "kemp").type
    'string'
    >>> store.set("steve", 1).type
    'integer'
    >>> len(store.keys())
    8
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any

from courier.foundation.application.config_settings import (
    ConfigStoreSettings,
    get_config_store_settings,
)
from courier.foundation.application.context import get_optional_config_store
from courier.foundation.domain.config_defaults import baseline_entries
from courier.foundation.domain.config_value_objects import ConfigType, to_config_value
from courier.foundation.domain.exceptions import ConfigKeyNotFoundError, ValidationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from courier.foundation.domain.config_value_objects import ConfigEntry

    ConfigObserver = Callable[[str, ConfigEntry], None]

logger = logging.getLogger(__name__)


class ConfigStore:
    """Authoritative holder of named configuration values.

    Every read and write of the entry table is guarded by a single re-entrant
    lock scoped to the store. Observers registered with ``subscribe()`` are invoked after
    the lock is released.

    Args:
        entries: Optional initial values, inserted in the given order. Each
            value is converted the same way ``set()`` converts it.

    Raises:
        UnsupportedConfigValueError: If an initial value is of an unsupported kind.
    """

    def __init__(self, entries: dict[str, Any] | None = None) -> None:
        self._lock = threading.RLock()
        self._entries: dict[str, ConfigEntry] = {
            key: to_config_value(value, key=key) for key, value in (entries or {}).items()
        }
        self._observers: list[ConfigObserver] = []

    @classmethod
    def with_defaults(cls, settings: ConfigStoreSettings | None = None) -> ConfigStore:
        """Create a store populated with the built-in baseline keys.

        Args:
            settings: Optional settings. If not provided, settings are
                loaded from environment variables.

        Returns:
            A new store holding exactly the baseline keys.
        """
        if settings is None:
            settings = get_config_store_settings()
        store = cls(
            baseline_entries(
                version=settings.version,
                mode=settings.mode,
                editor=settings.editor,
                history=settings.history,
                path=settings.script_path_list,
            )
        )
        logger.debug(
            "config_store_created",
            extra={"key_count": len(store), "version": settings.version},
        )
        return store

    @classmethod
    def instance(cls) -> ConfigStore:
        """Return the shared store. See ``get_config_store()``."""
        return get_config_store()

    def keys(self) -> list[str]:
        """Return all defined key names in insertion order."""
        with self._lock:
            return list(self._entries)

    def get(self, key: str) -> ConfigEntry | None:
        """Return the entry for ``key``, or None if it is not defined."""
        with self._lock:
            return self._entries.get(key)

    def require(self, key: str) -> ConfigEntry:
        """Return the entry for ``key``.

        Raises:
            ConfigKeyNotFoundError: If the key is not defined.
        """
        entry = self.get(key)
        if entry is None:
            raise ConfigKeyNotFoundError(key)
        return entry

    def set(self, key: str, value: Any, notify: bool = True) -> ConfigEntry:
        """Insert or fully replace the entry for ``key``.

        The value's runtime kind determines the entry type: text becomes
        STRING, a whole number INTEGER, and a sequence of text LIST. An
        existing key keeps its position in ``keys()``.

        Args:
            key: Configuration key name (case-sensitive).
            value: New value, or an existing ConfigEntry.
            notify: Whether registered observers are informed of the change.
                Has no effect on the stored value.

        Returns:
            The stored entry.

        Raises:
            ValidationError: If ``key`` is not a string.
            UnsupportedConfigValueError: If ``value`` is of an unsupported kind.
        """
        if not isinstance(key, str):
            raise ValidationError("key", "configuration keys must be strings")
        entry = to_config_value(value, key=key)

        with self._lock:
            previous = self._entries.get(key)
            self._entries[key] = entry
            observers = list(self._observers) if notify else []

        logger.debug(
            "config_key_set",
            extra={
                "key": key,
                "config_type": entry.type,
                "replaced": previous is not None,
                "type_changed": previous is not None and previous.type != entry.type,
            },
        )

        for observer in observers:
            observer(key, entry)
        return entry

    def delete(self, key: str) -> bool:
        """Remove ``key`` from the store.

        Returns:
            True if the key existed, False otherwise.
        """
        with self._lock:
            existed = self._entries.pop(key, None) is not None
        if existed:
            logger.debug("config_key_deleted", extra={"key": key})
        return existed

    def get_string(self, key: str, default: str | None = None) -> str | None:
        """Return the text value of ``key``, or ``default`` if absent or not a string."""
        entry = self.get(key)
        if entry is None or entry.type != ConfigType.STRING:
            return default
        return entry.value  # type: ignore[return-value]

    def get_integer(self, key: str, default: int | None = None) -> int | None:
        """Return the integer value of ``key``, or ``default`` if absent or not an integer."""
        entry = self.get(key)
        if entry is None or entry.type != ConfigType.INTEGER:
            return default
        return entry.value  # type: ignore[return-value]

    def get_list(self, key: str, default: list[str] | None = None) -> list[str] | None:
        """Return a copy of the list value of ``key``, or ``default``."""
        entry = self.get(key)
        if entry is None or entry.type != ConfigType.LIST:
            return default
        return entry.as_python()

    def snapshot(self) -> dict[str, dict[str, Any]]:
        """Return every entry as a plain ``{"type", "value"}`` dict, keyed by name."""
        with self._lock:
            return {key: entry.model_dump(mode="json") for key, entry in self._entries.items()}

    def subscribe(self, observer: ConfigObserver) -> Callable[[], None]:
        """Register ``observer(key, entry)`` to be called after notifying sets.

        Exceptions raised by an observer propagate to the caller of ``set()``.

        Returns:
            A callable that unregisters the observer.
        """
        with self._lock:
            self._observers.append(observer)

        def unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(keys={len(self)})"


_shared_store: ConfigStore | None = None
_shared_store_lock = threading.Lock()


def get_config_store() -> ConfigStore:
    """Return the store for the current context.

    A store injected with ``set_config_store()`` takes precedence. Otherwise
    the process-wide store is returned, created with its baseline keys on the
    first call. Repeated calls return the same object.
    """
    injected = get_optional_config_store()
    if injected is not None:
        return injected

    global _shared_store
    if _shared_store is None:
        with _shared_store_lock:
            if _shared_store is None:
                _shared_store = ConfigStore.with_defaults()
    return _shared_store


def reset_config_store() -> None:
    """Drop the process-wide store so the next access recreates it.

    Intended for tests; production code keeps one store per process.
    """
    global _shared_store
    with _shared_store_lock:
        _shared_store = None
