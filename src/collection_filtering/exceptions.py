"""
Property filter exception hierarchy.

All exceptions inherit from ``PropertyFilterError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class PropertyFilterError(Exception):
    """Base exception for all property filter errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class UnsupportedMatchTypeError(PropertyFilterError):
    """
    An operator declares a ``match`` that is neither a date tag nor callable.

    Raised while an item is evaluated, not when the predicate is built.
    """

    def __init__(self, match: Any) -> None:
        self.match = match
        super().__init__(
            f"Unsupported `operator.match` type given: {type(match).__name__} "
            f"({match!r}). Use 'date', 'datetime' or a callable."
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNSUPPORTED_MATCH_TYPE",
            "match_type": type(self.match).__name__,
            "message": str(self),
        }


class UnsupportedOperatorError(PropertyFilterError):
    """
    Operator has no in-memory implementation.

    Provides fuzzy-matched suggestions for likely intended operators.
    """

    def __init__(self, operator: str, valid_operators: list[str]) -> None:
        self.operator = operator
        self.valid_operators = valid_operators
        self.suggestions = get_close_matches(operator, valid_operators, n=3, cutoff=0.5)

        message = f"Unsupported operator given: '{operator}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        if valid_operators:
            message += f" Valid operators: {', '.join(sorted(valid_operators))}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNSUPPORTED_OPERATOR",
            "operator": self.operator,
            "suggestions": self.suggestions,
            "valid_operators": sorted(self.valid_operators),
        }
