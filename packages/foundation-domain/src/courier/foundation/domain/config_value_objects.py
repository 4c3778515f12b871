"""Typed configuration value objects for the configuration store.

Uses Pydantic discriminated unions so that a stored entry's ``type`` tag and
its payload can never disagree. ConfigType is the tag registry; to extend it,
add a member plus a matching ``*ConfigValue`` model and include the model in
``ConfigEntry``.

Example:
    Converting raw values into entries::

        from courier.foundation.domain.config_value_objects import (
            ConfigType,
            to_config_value,
        )

        entry = to_config_value("kemp")
        assert entry.type == ConfigType.STRING

        entry = to_config_value(["INBOX", "Sent"])
        assert entry.type == ConfigType.LIST
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, TypeAdapter

from courier.foundation.domain.exceptions import UnsupportedConfigValueError


class ConfigType(StrEnum):
    """Type tag carried by every configuration entry."""

    STRING = "string"
    INTEGER = "integer"
    LIST = "list"


class _BaseConfigValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    def as_python(self) -> Any:
        """Return a copy of the payload as a plain Python value."""
        return self.value  # type: ignore[attr-defined]


class StringConfigValue(_BaseConfigValue):
    """Text configuration value."""

    type: Literal["string"] = "string"
    value: StrictStr


class IntegerConfigValue(_BaseConfigValue):
    """Signed integer configuration value."""

    type: Literal["integer"] = "integer"
    value: StrictInt


class ListConfigValue(_BaseConfigValue):
    """Ordered list of text values (folder lists, header names, paths).

    The payload is held as a tuple so an entry handed out by the store cannot
    be changed in place; ``as_python()`` returns a new list.
    """

    type: Literal["list"] = "list"
    value: tuple[StrictStr, ...]

    def as_python(self) -> list[str]:
        return list(self.value)


ConfigEntry = Annotated[
    StringConfigValue | IntegerConfigValue | ListConfigValue,
    Field(discriminator="type"),
]
"""Discriminated union of all configuration entry types.

The ``type`` field on each model variant acts as the discriminator, which
gives zero-ambiguity deserialization via ``parse_config_value()``.
"""

_CONFIG_ENTRY_TYPES = (StringConfigValue, IntegerConfigValue, ListConfigValue)

_entry_adapter: TypeAdapter[ConfigEntry] = TypeAdapter(ConfigEntry)


def to_config_value(raw: Any, *, key: str = "value") -> ConfigEntry:
    """Build the entry matching a raw Python value's kind.

    Mapping:
    - ``str`` -> STRING
    - ``int`` -> INTEGER (``bool`` is stored as 0 or 1)
    - any other sequence whose items are all ``str`` -> LIST
    - an existing entry is returned unchanged

    Args:
        raw: The value to convert.
        key: Configuration key, used only for error context.

    Returns:
        The typed configuration entry.

    Raises:
        UnsupportedConfigValueError: If the value is none of the supported kinds.
    """
    if isinstance(raw, _CONFIG_ENTRY_TYPES):
        return raw
    if isinstance(raw, str):
        return StringConfigValue(value=raw)
    if isinstance(raw, bool):
        return IntegerConfigValue(value=int(raw))
    if isinstance(raw, int):
        return IntegerConfigValue(value=raw)
    if isinstance(raw, Sequence) and not isinstance(raw, bytes | bytearray):
        items = list(raw)
        if all(isinstance(item, str) for item in items):
            return ListConfigValue(value=tuple(items))
        raise UnsupportedConfigValueError(key, "list items must all be strings")
    raise UnsupportedConfigValueError(key, f"unsupported value kind {type(raw).__name__}")


def parse_config_value(data: dict[str, Any]) -> ConfigEntry:
    """Validate a ``{"type": ..., "value": ...}`` mapping into an entry.

    Raises:
        pydantic.ValidationError: If the tag is unknown or the payload does
            not match it.
    """
    return _entry_adapter.validate_python(data)
