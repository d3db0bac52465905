"""Shared fixtures for property filter tests."""

from __future__ import annotations

import pytest

from collection_filtering.models import PropertyFilteringOptions, PropertyFilterProperty
from collection_filtering.operators_memory import build_default_registry


@pytest.fixture
def registry():
    """Default in-memory operator registry."""
    return build_default_registry()


@pytest.fixture
def options() -> PropertyFilteringOptions:
    """Schema with a text property and a numeric property without ``:``."""
    return PropertyFilteringOptions(
        filtering_properties=[
            PropertyFilterProperty(key="name", operators=[":", "!:", "^", "!^", "="]),
            PropertyFilterProperty(
                key="age", operators=["<", "<=", ">", ">=", "=", "!="]
            ),
        ]
    )
