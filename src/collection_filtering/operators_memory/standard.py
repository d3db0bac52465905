"""Standard comparison operators: =, !=, >, <, >=, <=."""

from __future__ import annotations

import operator
from typing import Any

from ..evaluator import MemoryOperator
from ..operators import PropertyFilterOperator
from ..utils import loose_compare, loose_equals


class EqualOperator(MemoryOperator):
    @property
    def name(self) -> PropertyFilterOperator:
        return PropertyFilterOperator.EQ

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        return loose_equals(field_value, condition_value)


class NotEqualOperator(MemoryOperator):
    @property
    def name(self) -> PropertyFilterOperator:
        return PropertyFilterOperator.NE

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        return not loose_equals(field_value, condition_value)


class GreaterThanOperator(MemoryOperator):
    @property
    def name(self) -> PropertyFilterOperator:
        return PropertyFilterOperator.GT

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        return loose_compare(field_value, condition_value, operator.gt)


class LessThanOperator(MemoryOperator):
    @property
    def name(self) -> PropertyFilterOperator:
        return PropertyFilterOperator.LT

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        return loose_compare(field_value, condition_value, operator.lt)


class GreaterEqualOperator(MemoryOperator):
    @property
    def name(self) -> PropertyFilterOperator:
        return PropertyFilterOperator.GE

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        return loose_compare(field_value, condition_value, operator.ge)


class LessEqualOperator(MemoryOperator):
    @property
    def name(self) -> PropertyFilterOperator:
        return PropertyFilterOperator.LE

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        return loose_compare(field_value, condition_value, operator.le)
