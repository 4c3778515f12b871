"""Environment-driven settings for the built-in configuration keys.

Values loaded here seed the baseline entries when the shared store is
created. Once the store exists, changing the environment has no effect;
callers update keys through ``ConfigStore.set()`` instead.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from courier.foundation.domain.config_defaults import (
    DEFAULT_EDITOR,
    DEFAULT_HISTORY,
    DEFAULT_MODE,
    DEFAULT_PATH,
)

DEFAULT_VERSION = "0.1.0"


class ConfigStoreSettings(BaseSettings):
    """Baseline configuration settings from environment variables.

    Environment Variables:
        COURIER_VERSION: Application version reported as ``global.version``.
        COURIER_MODE: Initial UI mode (default: maildir).
        EDITOR: External editor command (default: vim).
        COURIER_HISTORY: Input history length (default: 1000).
        COURIER_PATH: Script search path, ``os.pathsep`` separated.

    Example:
        >>> settings = ConfigStoreSettings(mode="index", history=50)
        >>> settings.history
        50
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        populate_by_name=True,
    )

    version: str = Field(
        default=DEFAULT_VERSION,
        alias="COURIER_VERSION",
        description="Application version",
    )
    mode: str = Field(
        default=DEFAULT_MODE,
        alias="COURIER_MODE",
        description="Initial UI mode",
    )
    editor: str = Field(
        default=DEFAULT_EDITOR,
        alias="EDITOR",
        description="External editor command",
    )
    history: int = Field(
        default=DEFAULT_HISTORY,
        ge=0,
        alias="COURIER_HISTORY",
        description="Input history length",
    )
    script_path: str = Field(
        default=os.pathsep.join(DEFAULT_PATH),
        alias="COURIER_PATH",
        description="Script search path, os.pathsep separated",
    )

    @field_validator("mode", mode="before")
    @classmethod
    def normalize_mode(cls, v: Any) -> str:
        """Normalize the UI mode to lowercase."""
        if isinstance(v, str):
            return v.strip().lower()
        return str(v)

    @property
    def script_path_list(self) -> list[str]:
        """Split ``script_path`` into its non-empty components."""
        return [part for part in self.script_path.split(os.pathsep) if part]


@lru_cache(maxsize=1)
def get_config_store_settings() -> ConfigStoreSettings:
    """Get cached ConfigStoreSettings instance.

    Clear cache with ``get_config_store_settings.cache_clear()`` for testing.
    """
    return ConfigStoreSettings()
