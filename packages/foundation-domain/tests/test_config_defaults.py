"""Tests for the built-in configuration baseline."""

from __future__ import annotations

import os
import platform

import pytest

from courier.foundation.domain.config_defaults import (
    BASELINE_KEYS,
    DEFAULT_EDITOR,
    DEFAULT_HISTORY,
    DEFAULT_MODE,
    DEFAULT_PATH,
    baseline_entries,
)
from courier.foundation.domain.config_value_objects import ConfigType


@pytest.mark.unit
class TestBaselineEntries:
    def test_seven_keys(self) -> None:
        assert len(BASELINE_KEYS) == 7
        assert len(set(BASELINE_KEYS)) == 7

    def test_keys_in_order(self) -> None:
        entries = baseline_entries(version="1.0.0")
        assert list(entries) == list(BASELINE_KEYS)

    def test_versions(self) -> None:
        entries = baseline_entries(version="2.7")
        assert entries["global.version"].value == "2.7"
        assert entries["python.version"].value == platform.python_version()

    def test_pid(self) -> None:
        entries = baseline_entries(version="1.0.0")
        assert entries["global.pid"].type == ConfigType.INTEGER
        assert entries["global.pid"].value == os.getpid()

    def test_defaults(self) -> None:
        entries = baseline_entries(version="1.0.0")
        assert entries["global.mode"].value == DEFAULT_MODE
        assert entries["global.editor"].value == DEFAULT_EDITOR
        assert entries["global.history"].value == DEFAULT_HISTORY
        assert entries["global.path"].as_python() == list(DEFAULT_PATH)

    def test_overrides(self) -> None:
        entries = baseline_entries(
            version="1.0.0",
            mode="index",
            editor="emacs",
            history=10,
            path=["/a", "/b"],
        )
        assert entries["global.mode"].value == "index"
        assert entries["global.editor"].value == "emacs"
        assert entries["global.history"].value == 10
        assert entries["global.path"].type == ConfigType.LIST
        assert entries["global.path"].as_python() == ["/a", "/b"]
