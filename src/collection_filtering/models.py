"""
Immutable schema and query models.

The models accept Python field names as well as the camelCase keys a
property filter UI sends, so a JSON payload can be validated directly::

    query = PropertyFilterQuery.model_validate(
        {"tokens": [{"propertyKey": "status", "operator": "=", "value": "open"}],
         "operation": "and"}
    )
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .operators import FilterOperation, PropertyFilterOperator


class _FilterModel(BaseModel):
    model_config = ConfigDict(
        frozen=True, populate_by_name=True, arbitrary_types_allowed=True
    )


class ExtendedOperator(_FilterModel):
    """
    An operator paired with an optional match strategy.

    ``match`` may be ``"date"``, ``"datetime"`` or a callable
    ``(item_value, token_value) -> bool``. It is checked when an item is
    evaluated, not here.
    """

    operator: PropertyFilterOperator
    match: Any = None


class PropertyFilterProperty(_FilterModel):
    """A filterable property and the operators it accepts."""

    key: str
    operators: tuple[PropertyFilterOperator | ExtendedOperator, ...] = ()
    default_operator: PropertyFilterOperator | None = Field(
        default=None, alias="defaultOperator"
    )


class PropertyFilterToken(_FilterModel):
    """One filter condition. Without ``property_key`` it is a free-text token."""

    property_key: str | None = Field(default=None, alias="propertyKey")
    operator: PropertyFilterOperator
    value: Any = None


class PropertyFilterQuery(_FilterModel):
    """Tokens combined with a single logical operation."""

    tokens: tuple[PropertyFilterToken, ...] = ()
    operation: FilterOperation = FilterOperation.AND


FilteringFunction = Callable[[Any, PropertyFilterQuery], bool]


class PropertyFilteringOptions(_FilterModel):
    """
    Property filtering configuration for a collection.

    ``filtering_function`` replaces the default token combinator entirely.
    """

    filtering_properties: tuple[PropertyFilterProperty, ...] = Field(
        alias="filteringProperties"
    )
    filtering_function: FilteringFunction | None = Field(
        default=None, alias="filteringFunction"
    )
