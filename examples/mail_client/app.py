"""Mail Client application factory.

Demonstrates the consumer pattern: the client registers its own defaults on
top of the store's built-in keys, then restores its cache from the directory
those defaults point at.

Usage::

    from examples.mail_client.app import create_mail_client

    client = create_mail_client()
    ...
    client.shutdown()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from courier.foundation.application import ConfigStore, get_config_store
from courier.infra.observability import configure_logging, get_logger
from courier.infra.persistence import CACHE_PREFIX_KEY, KeyValueCache

if TYPE_CHECKING:
    from collections.abc import Callable

    from courier.foundation.domain import ConfigEntry
    from courier.infra.observability import LoggingSettings
    from courier.infra.persistence import CacheSettings

# Keys the client adds to the store. Existing values are left alone so user
# configuration applied before startup wins.
CLIENT_DEFAULTS: dict[str, Any] = {
    CACHE_PREFIX_KEY: "~/.courier/cache",
    "index.limit": 500,
    "message.headers": ["Date", "From", "To", "Subject"],
}


@dataclass
class MailClient:
    """A running client session: its configuration store and cache."""

    store: ConfigStore
    cache: KeyValueCache
    logger: Any = field(default_factory=lambda: get_logger("mail_client"))
    _unsubscribe: Callable[[], None] | None = field(default=None, repr=False)

    def attach(self) -> None:
        """Start receiving change notifications from the store."""
        if self._unsubscribe is None:
            self._unsubscribe = self.store.subscribe(self.on_config_change)

    def on_config_change(self, key: str, entry: ConfigEntry) -> None:
        self.logger.info("config_changed", key=key, config_type=entry.type)

    def shutdown(self) -> None:
        """Stop observing the store and persist the cache.

        The cache is emptied first if it has grown too large.
        """
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self.cache.trim()
        saved = self.cache.save(self.store)
        self.logger.info("client_shutdown", cache_saved=saved, cache_size=self.cache.size())


def create_mail_client(
    *,
    store: ConfigStore | None = None,
    cache_settings: CacheSettings | None = None,
    logging_settings: LoggingSettings | None = None,
    overrides: dict[str, Any] | None = None,
) -> MailClient:
    """Create a client session backed by the shared configuration store.

    Args:
        store: Store to use. Defaults to ``get_config_store()``.
        cache_settings: Optional cache settings.
        logging_settings: Optional logging settings.
        overrides: Keys to set after the client defaults, e.g. from a user
            configuration file.
    """
    configure_logging(logging_settings)
    if store is None:
        store = get_config_store()

    for key, value in CLIENT_DEFAULTS.items():
        if key not in store:
            store.set(key, value, notify=False)

    client = MailClient(store=store, cache=KeyValueCache(cache_settings))
    client.attach()

    for key, value in (overrides or {}).items():
        store.set(key, value)

    loaded = client.cache.load(store)
    client.logger.info(
        "client_started",
        version=store.get_string("global.version"),
        keys=len(store),
        cache_entries=loaded,
    )
    return client
