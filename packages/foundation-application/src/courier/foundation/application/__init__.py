"""Courier Foundation Application — the shared configuration store."""

from courier.foundation.application.config_settings import (
    ConfigStoreSettings,
    get_config_store_settings,
)
from courier.foundation.application.config_store import (
    ConfigStore,
    get_config_store,
    reset_config_store,
)
from courier.foundation.application.context import (
    NoConfigStoreError,
    clear_config_store,
    get_current_config_store,
    get_optional_config_store,
    set_config_store,
)

__all__ = [
    "ConfigStore",
    "ConfigStoreSettings",
    "NoConfigStoreError",
    "clear_config_store",
    "get_config_store",
    "get_config_store_settings",
    "get_current_config_store",
    "get_optional_config_store",
    "reset_config_store",
    "set_config_store",
]
