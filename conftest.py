"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from services.deck_service import reset_deck_service
from utils.math_utils import CombinationCache


@pytest.fixture
def combination_cache() -> CombinationCache:
    """A fresh, empty combination memo so tests do not share cached state."""
    return CombinationCache()


@pytest.fixture(autouse=True)
def _reset_default_services():
    yield
    reset_deck_service()
