from __future__ import annotations

import pytest

from tests._fixtures.reflection_builder import ReflectionBuilder


@pytest.fixture
def builder() -> ReflectionBuilder:
    """Provide a builder for TypeDoc-shaped payloads with fresh ids."""
    return ReflectionBuilder()
