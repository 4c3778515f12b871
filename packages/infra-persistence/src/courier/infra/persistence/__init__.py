"""Courier Infra Persistence — on-disk key/value cache."""

from courier.infra.persistence.cache_settings import CacheSettings, get_cache_settings
from courier.infra.persistence.key_value_cache import (
    CACHE_PREFIX_KEY,
    KeyValueCache,
    file_key,
)

__all__ = [
    "CACHE_PREFIX_KEY",
    "CacheSettings",
    "KeyValueCache",
    "file_key",
    "get_cache_settings",
]
