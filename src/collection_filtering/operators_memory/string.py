"""Text operators: contains, not contains, starts with, not starts with.

All of them stringify both sides and ignore case.
"""

from __future__ import annotations

from typing import Any

from ..evaluator import MemoryOperator
from ..operators import PropertyFilterOperator
from ..utils import stringify


def _normalise(value: Any) -> str:
    return stringify(value).lower()


class ContainsOperator(MemoryOperator):
    @property
    def name(self) -> PropertyFilterOperator:
        return PropertyFilterOperator.CONTAINS

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        return _normalise(condition_value) in _normalise(field_value)


class NotContainsOperator(MemoryOperator):
    @property
    def name(self) -> PropertyFilterOperator:
        return PropertyFilterOperator.NOT_CONTAINS

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        return _normalise(condition_value) not in _normalise(field_value)


class StartsWithOperator(MemoryOperator):
    @property
    def name(self) -> PropertyFilterOperator:
        return PropertyFilterOperator.STARTS_WITH

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        return _normalise(field_value).startswith(_normalise(condition_value))


class NotStartsWithOperator(MemoryOperator):
    @property
    def name(self) -> PropertyFilterOperator:
        return PropertyFilterOperator.NOT_STARTS_WITH

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        return not _normalise(field_value).startswith(_normalise(condition_value))
