"""Built-in configuration keys created when a store is constructed.

The baseline is a fixed, deterministic set of seven keys. Their values
describe the running process (application and interpreter versions, process
id) plus a few client defaults that the embedding application may override
with ``ConfigStore.set()`` later.

Example:
    >>> entries = baseline_entries(version="1.2.0")
    >>> list(entries) == list(BASELINE_KEYS)
    True
"""

from __future__ import annotations

import os
import platform
from typing import TYPE_CHECKING

from courier.foundation.domain.config_value_objects import (
    IntegerConfigValue,
    ListConfigValue,
    StringConfigValue,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from courier.foundation.domain.config_value_objects import ConfigEntry

GLOBAL_VERSION = "global.version"
PYTHON_VERSION = "python.version"
GLOBAL_PID = "global.pid"
GLOBAL_MODE = "global.mode"
GLOBAL_EDITOR = "global.editor"
GLOBAL_HISTORY = "global.history"
GLOBAL_PATH = "global.path"

BASELINE_KEYS: tuple[str, ...] = (
    GLOBAL_VERSION,
    PYTHON_VERSION,
    GLOBAL_PID,
    GLOBAL_MODE,
    GLOBAL_EDITOR,
    GLOBAL_HISTORY,
    GLOBAL_PATH,
)
"""Names of the built-in keys, in insertion order."""

DEFAULT_MODE = "maildir"
DEFAULT_EDITOR = "vim"
DEFAULT_HISTORY = 1000
DEFAULT_PATH: tuple[str, ...] = ("~/.courier/lib",)


def baseline_entries(
    *,
    version: str,
    mode: str = DEFAULT_MODE,
    editor: str = DEFAULT_EDITOR,
    history: int = DEFAULT_HISTORY,
    path: Sequence[str] = DEFAULT_PATH,
) -> dict[str, ConfigEntry]:
    """Build the baseline entries keyed by name, in ``BASELINE_KEYS`` order.

    Args:
        version: Application version string.
        mode: Initial UI mode.
        editor: External editor command.
        history: Input history length.
        path: Script search path.

    Returns:
        Mapping of key name to typed entry.
    """
    return {
        GLOBAL_VERSION: StringConfigValue(value=version),
        PYTHON_VERSION: StringConfigValue(value=platform.python_version()),
        GLOBAL_PID: IntegerConfigValue(value=os.getpid()),
        GLOBAL_MODE: StringConfigValue(value=mode),
        GLOBAL_EDITOR: StringConfigValue(value=editor),
        GLOBAL_HISTORY: IntegerConfigValue(value=history),
        GLOBAL_PATH: ListConfigValue(value=tuple(path)),
    }
