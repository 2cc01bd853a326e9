"""
tests.conftest

Purpose:
    Shared pytest fixtures for api_errors tests.

Author:
    Kanir Pandya

Created:
    2026-10-19
"""

from __future__ import annotations

import pytest

from api_errors.registry import ERROR_REGISTRY, ErrorRegistry


@pytest.fixture()
def shared_registry(monkeypatch) -> ErrorRegistry:
    """
    The process-wide registry, restored to its previous entries after the test.

    IMPORTANT:
        Use this in any test that registers into the shared registry so
        registrations do not leak across tests.
    """
    monkeypatch.setattr(ERROR_REGISTRY, "_entries", ERROR_REGISTRY.snapshot())
    return ERROR_REGISTRY


@pytest.fixture()
def registry() -> ErrorRegistry:
    """A fresh, isolated registry seeded with the built-in error types."""
    return ErrorRegistry.with_defaults()
