"""Key/value cache configuration using Pydantic settings.

Where the cache lives on disk is itself configuration-store data
(``cache.prefix``), so it can be changed from user configuration at runtime.
The settings here cover the process-level knobs only.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CacheSettings(BaseSettings):
    """Configuration for the on-disk key/value cache.

    Environment Variables:
        COURIER_CACHE_MAX_ENTRIES: Entry count above which ``trim()`` empties
            the cache (default: 50000).
        COURIER_CACHE_ENCODING: Text encoding of the cache file (default: utf-8).

    Example:
        >>> settings = CacheSettings(cache_max_entries=10)
        >>> settings.cache_max_entries
        10
    """

    model_config = SettingsConfigDict(
        env_prefix="COURIER_",
        extra="ignore",
    )

    cache_max_entries: int = Field(
        default=50000,
        gt=0,
        description="Entry count above which trim() flushes the cache",
    )
    cache_encoding: str = Field(
        default="utf-8",
        description="Text encoding of the cache file",
    )


@lru_cache(maxsize=1)
def get_cache_settings() -> CacheSettings:
    """Get cached CacheSettings instance.

    Clear cache with ``get_cache_settings.cache_clear()`` for testing.
    """
    return CacheSettings()
