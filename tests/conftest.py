"""Shared test fixtures for pagestrip."""

from __future__ import annotations

import pytest

from pagestrip.core.types import PaginationConfig
from pagestrip.request_context import StaticRequestContext
from pagestrip.state import PaginationState


@pytest.fixture(autouse=True)
def _clear_config_env(monkeypatch):
    """Keep the profile selector out of tests unless a test sets it."""
    monkeypatch.delenv("PAGESTRIP_CONFIG_NAME", raising=False)


@pytest.fixture
def make_state():
    """Build a state for a fixed request URL."""

    def _make(url: str = "/articles", **options) -> PaginationState:
        return PaginationState(
            PaginationConfig(**options),
            StaticRequestContext.from_url(url),
        )

    return _make
