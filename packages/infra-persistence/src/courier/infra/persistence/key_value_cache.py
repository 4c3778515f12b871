"""A general ``key = value`` text cache persisted to disk.

The cache file lives in the directory named by the ``cache.prefix``
configuration key and is named after ``global.version``, so a release and a
development checkout keep separate files::

    ~/.courier/cache/0.1.0
    ~/.courier/cache/0.2.0.dev3

Keys may be scoped to a file path with ``set_file()``. Such keys are stored
as ``path'name`` and are only written back by ``save()`` while the path still
exists, so entries for deleted messages drop out of the cache.

The file holds one ``key=value`` line per entry and the value is everything
after the last ``=``. ``set()`` therefore refuses values that could not be
read back: empty text, text containing ``=``, and line breaks in either the
key or the value.

Example:
    >>> cache = KeyValueCache()
    >>> cache.load(store)
    >>> cache.set("foo", "bar")
    >>> cache.get("foo")
    'bar'
    >>> cache.save(store)
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING

from courier.foundation.domain.config_defaults import GLOBAL_VERSION
from courier.foundation.domain.exceptions import ValidationError
from courier.infra.persistence.cache_settings import CacheSettings, get_cache_settings

if TYPE_CHECKING:
    from courier.foundation.application.config_store import ConfigStore

logger = logging.getLogger(__name__)

CACHE_PREFIX_KEY = "cache.prefix"

# Greedy match on the key name: the value is whatever follows the last "=".
_LINE_PATTERN = re.compile(r"^(.*)=([^=]+)$")
_FILE_KEY_PATTERN = re.compile(r"^(.*)'(.*)$")
_LINE_BREAKS = ("\n", "\r")


def file_key(path: str | Path, name: str) -> str:
    """Build the composite key used for file-scoped entries."""
    return f"{path}'{name}"


class KeyValueCache:
    """In-memory text cache with load/save against the configured cache file.

    Args:
        settings: Optional CacheSettings. If not provided, settings are
            loaded from environment variables.
    """

    def __init__(self, settings: CacheSettings | None = None) -> None:
        self._settings = settings or get_cache_settings()
        self._store: dict[str, str] = {}

    @property
    def settings(self) -> CacheSettings:
        """Get the cache settings."""
        return self._settings

    def set(self, name: str, value: object) -> None:
        """Set ``name`` to the text form of ``value``.

        Raises:
            ValidationError: If the entry could not be read back from the
                cache file.
        """
        text = str(value)
        if any(brk in name for brk in _LINE_BREAKS):
            raise ValidationError("name", "cache keys cannot contain line breaks", name=name)
        if not text or "=" in text or any(brk in text for brk in _LINE_BREAKS):
            raise ValidationError(
                "value",
                "cache values must be non-empty and contain no '=' or line breaks",
                name=name,
            )
        self._store[name] = text

    def get(self, name: str) -> str | None:
        """Get a value from the cache, if it exists."""
        return self._store.get(name)

    def set_file(self, path: str | Path, name: str, value: object) -> None:
        """Set a value scoped to a file path."""
        self.set(file_key(path, name), value)

    def get_file(self, path: str | Path, name: str) -> str | None:
        """Get a value scoped to a file path, if it exists."""
        return self.get(file_key(path, name))

    def size(self) -> int:
        return len(self._store)

    def flush(self) -> None:
        """Empty the cache."""
        self._store = {}

    def cache_file(self, store: ConfigStore) -> Path | None:
        """Resolve the cache file from ``cache.prefix`` and ``global.version``.

        Returns:
            The cache file path, or None when either key is unset.
        """
        prefix = store.get_string(CACHE_PREFIX_KEY)
        version = store.get_string(GLOBAL_VERSION)
        if not prefix or not version:
            return None
        return Path(prefix).expanduser() / version

    def load(self, store: ConfigStore) -> int:
        """Merge entries from the cache file into memory.

        Lines that do not look like ``key=value`` are skipped. A missing
        ``cache.prefix`` or a missing file is not an error.

        Returns:
            Number of entries read from disk.
        """
        path = self.cache_file(store)
        if path is None or not path.is_file():
            return 0

        loaded = 0
        with path.open(encoding=self._settings.cache_encoding) as handle:
            for line in handle:
                match = _LINE_PATTERN.match(line.rstrip("\r\n"))
                if match:
                    self.set(match.group(1), match.group(2))
                    loaded += 1

        logger.debug("cache_loaded", extra={"path": str(path), "entries": loaded})
        return loaded

    def save(self, store: ConfigStore) -> bool:
        """Write the cache to disk, creating the cache directory if needed.

        File-scoped entries whose path no longer exists are not written.

        Returns:
            True if a file was written, False when ``cache.prefix`` is unset.
        """
        path = self.cache_file(store)
        if path is None:
            return False

        path.parent.mkdir(parents=True, exist_ok=True)
        written = 0
        with path.open("w", encoding=self._settings.cache_encoding) as handle:
            for key, value in self._store.items():
                scoped = _FILE_KEY_PATTERN.match(key)
                if scoped and not Path(scoped.group(1)).exists():
                    continue
                handle.write(f"{key}={value}\n")
                written += 1

        logger.debug("cache_saved", extra={"path": str(path), "entries": written})
        return True

    def trim(self, limit: int | None = None) -> bool:
        """Flush the cache if it holds more than ``limit`` entries.

        Args:
            limit: Maximum entry count. Defaults to ``cache_max_entries``.

        Returns:
            True if the cache was flushed.
        """
        if limit is None:
            limit = self._settings.cache_max_entries
        size = self.size()
        if size <= limit:
            return False
        logger.info("cache_trimmed", extra={"entries": size, "limit": limit})
        self.flush()
        return True
