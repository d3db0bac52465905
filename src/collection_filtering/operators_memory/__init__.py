"""
In-memory operator implementations.

Provides a MemoryOperator subclass for each PropertyFilterOperator and a
factory function to create registries.

Usage::

    from collection_filtering.operators_memory import build_default_registry

    registry = build_default_registry()
    result = registry.evaluate(PropertyFilterOperator.EQ, actual, expected)
"""

from __future__ import annotations

from ..evaluator import MemoryOperatorRegistry
from .standard import (
    EqualOperator,
    GreaterEqualOperator,
    GreaterThanOperator,
    LessEqualOperator,
    LessThanOperator,
    NotEqualOperator,
)
from .string import (
    ContainsOperator,
    NotContainsOperator,
    NotStartsWithOperator,
    StartsWithOperator,
)


def build_default_registry() -> MemoryOperatorRegistry:
    """
    Create a registry with all built-in operators.

    Every call returns a fresh instance, so predicates built from it never
    share state.

    Example:
        >>> registry = build_default_registry()
        >>> registry.evaluate(PropertyFilterOperator.EQ, 5, "5")
        True
    """
    registry = MemoryOperatorRegistry()
    registry.register_all(
        # Comparison
        EqualOperator(),
        NotEqualOperator(),
        GreaterThanOperator(),
        LessThanOperator(),
        GreaterEqualOperator(),
        LessEqualOperator(),
        # Text
        ContainsOperator(),
        NotContainsOperator(),
        StartsWithOperator(),
        NotStartsWithOperator(),
    )
    return registry


__all__ = [
    "build_default_registry",
    "MemoryOperatorRegistry",
]
