"""Unit tests for courier.foundation.application.context."""

from __future__ import annotations

import contextvars

import pytest

from courier.foundation.application.config_store import ConfigStore
from courier.foundation.application.context import (
    NoConfigStoreError,
    clear_config_store,
    get_current_config_store,
    get_optional_config_store,
    set_config_store,
)


class TestConfigStoreContext:
    @pytest.mark.unit
    def test_get_raises_when_no_store(self) -> None:
        with pytest.raises(NoConfigStoreError):
            get_current_config_store()

    @pytest.mark.unit
    def test_optional_returns_none_when_no_store(self) -> None:
        assert get_optional_config_store() is None

    @pytest.mark.unit
    def test_set_get_clear_lifecycle(self) -> None:
        store = ConfigStore()
        token = set_config_store(store)
        try:
            assert get_current_config_store() is store
            assert get_optional_config_store() is store
        finally:
            clear_config_store(token)
        assert get_optional_config_store() is None

    @pytest.mark.unit
    def test_nested_injection_restores_outer(self) -> None:
        outer, inner = ConfigStore(), ConfigStore()
        outer_token = set_config_store(outer)
        try:
            inner_token = set_config_store(inner)
            assert get_current_config_store() is inner
            clear_config_store(inner_token)
            assert get_current_config_store() is outer
        finally:
            clear_config_store(outer_token)

    @pytest.mark.unit
    def test_isolated_between_contexts(self) -> None:
        store = ConfigStore()

        def inject() -> None:
            set_config_store(store)

        contextvars.copy_context().run(inject)
        assert get_optional_config_store() is None

    @pytest.mark.unit
    def test_error_message(self) -> None:
        assert "set_config_store()" in str(NoConfigStoreError())
