"""
In-memory operator evaluation strategy.

Provides the MemoryOperator protocol, a registry that maps
PropertyFilterOperator → evaluation strategy, and
``filter_using_operator`` which resolves an operator's match strategy
before falling back to the registry.

New operators are added by subclassing MemoryOperator and registering
via ``register()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from .dates import compare_dates, compare_timestamps
from .exceptions import UnsupportedMatchTypeError, UnsupportedOperatorError
from .operators import MatchType, PropertyFilterOperator

if TYPE_CHECKING:
    from .models import ExtendedOperator


class MemoryOperator(ABC):
    """
    Strategy interface for in-memory operator evaluation.

    Each operator is an isolated class with a single ``evaluate`` method.
    """

    @property
    @abstractmethod
    def name(self) -> PropertyFilterOperator:
        """The operator this strategy handles."""
        ...

    @abstractmethod
    def evaluate(
        self,
        field_value: Any,
        condition_value: Any,
    ) -> bool:
        """
        Evaluate the operator against concrete values.

        Args:
            field_value: The value read from the item.
            condition_value: The value carried by the filter token.

        Returns:
            True if the condition is satisfied.
        """
        ...


class MemoryOperatorRegistry:
    """
    Registry of MemoryOperator instances keyed by PropertyFilterOperator.

    Usage::

        registry = MemoryOperatorRegistry()
        registry.register(EqualOperator())

        result = registry.evaluate(PropertyFilterOperator.EQ, actual, expected)
    """

    def __init__(self) -> None:
        self._operators: dict[PropertyFilterOperator, MemoryOperator] = {}

    # -- registration --------------------------------------------------------

    def register(self, operator: MemoryOperator) -> None:
        """Register an operator strategy instance."""
        self._operators[operator.name] = operator

    def register_all(self, *operators: MemoryOperator) -> None:
        """Register multiple operator strategy instances at once."""
        for op in operators:
            self.register(op)

    def unregister(self, name: PropertyFilterOperator) -> None:
        """Remove an operator from the registry."""
        self._operators.pop(name, None)

    # -- look-up -------------------------------------------------------------

    def get(self, name: PropertyFilterOperator) -> MemoryOperator | None:
        """Return the registered operator or ``None``."""
        return self._operators.get(name)

    def has(self, name: PropertyFilterOperator) -> bool:
        return name in self._operators

    @property
    def supported_operators(self) -> set[PropertyFilterOperator]:
        return set(self._operators.keys())

    # -- evaluation shortcut -------------------------------------------------

    def evaluate(
        self,
        name: PropertyFilterOperator,
        field_value: Any,
        condition_value: Any,
    ) -> bool:
        """
        Look up the operator and evaluate.

        Raises:
            UnsupportedOperatorError: If the operator is not registered.
        """
        op = self.get(name)
        if op is None:
            raise UnsupportedOperatorError(
                getattr(name, "value", str(name)),
                [o.value for o in self._operators],
            )
        return op.evaluate(field_value, condition_value)


def _date_comparator(match: Any) -> Callable[[Any, Any], int | None] | None:
    if isinstance(match, str):
        if match == MatchType.DATE:
            return compare_dates
        if match == MatchType.DATETIME:
            return compare_timestamps
    return None


_ORDERING_CHECKS: dict[PropertyFilterOperator, Callable[[int], bool]] = {
    PropertyFilterOperator.LT: lambda result: result < 0,
    PropertyFilterOperator.LE: lambda result: result <= 0,
    PropertyFilterOperator.GT: lambda result: result > 0,
    PropertyFilterOperator.GE: lambda result: result >= 0,
    PropertyFilterOperator.EQ: lambda result: result == 0,
    PropertyFilterOperator.NE: lambda result: result != 0,
}


def _filter_by_date(
    comparator: Callable[[Any, Any], int | None],
    operator: PropertyFilterOperator,
    item_value: Any,
    token_value: Any,
) -> bool:
    check = _ORDERING_CHECKS.get(operator)
    if check is None:
        return False
    result = comparator(item_value, token_value)
    if result is None:
        # Unreadable dates are unordered: only "!=" holds.
        return operator is PropertyFilterOperator.NE
    return check(result)


def filter_using_operator(
    item_value: Any,
    token_value: Any,
    extended: ExtendedOperator,
    registry: MemoryOperatorRegistry,
) -> bool:
    """
    Evaluate one operator against an item value.

    Dispatch order: ``date`` / ``datetime`` match, callable match, then the
    registry for operators without a match.

    Raises:
        UnsupportedMatchTypeError: ``match`` is set to anything else.
        UnsupportedOperatorError: the registry has no such operator.
    """
    match = extended.match
    comparator = _date_comparator(match)
    if comparator is not None:
        return _filter_by_date(comparator, extended.operator, item_value, token_value)
    if callable(match):
        return bool(match(item_value, token_value))
    if match:
        raise UnsupportedMatchTypeError(match)
    return registry.evaluate(extended.operator, item_value, token_value)
