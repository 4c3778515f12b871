"""Smoke tests to verify PEP 420 namespace package resolution.

Each test imports the leaf __init__.py of a courier package to confirm
the implicit namespace package layout works correctly.
"""

from __future__ import annotations


def test_foundation_domain_importable() -> None:
    import courier.foundation.domain  # noqa: F401


def test_foundation_application_importable() -> None:
    import courier.foundation.application  # noqa: F401


def test_infra_observability_importable() -> None:
    import courier.infra.observability  # noqa: F401


def test_infra_persistence_importable() -> None:
    import courier.infra.persistence  # noqa: F401
