"""Courier Foundation Domain -- pure Python configuration primitives.

This package provides the typed configuration values, the built-in key
baseline, and the domain exception hierarchy shared by the other courier
packages.
"""

from courier.foundation.domain.config_defaults import BASELINE_KEYS, baseline_entries
from courier.foundation.domain.config_value_objects import (
    ConfigEntry,
    ConfigType,
    IntegerConfigValue,
    ListConfigValue,
    StringConfigValue,
    parse_config_value,
    to_config_value,
)
from courier.foundation.domain.exceptions import (
    ConfigKeyNotFoundError,
    DomainError,
    NotFoundError,
    UnsupportedConfigValueError,
    ValidationError,
)

__all__ = [
    "BASELINE_KEYS",
    "ConfigEntry",
    "ConfigKeyNotFoundError",
    "ConfigType",
    "DomainError",
    "IntegerConfigValue",
    "ListConfigValue",
    "NotFoundError",
    "StringConfigValue",
    "UnsupportedConfigValueError",
    "ValidationError",
    "baseline_entries",
    "parse_config_value",
    "to_config_value",
]
