"""
Property filter predicate builder.

Compiles a filtering configuration and a query into a single-item
predicate::

    predicate = create_property_filter_predicate(options, query)
    visible = [item for item in items if predicate(item)]

Tokens that name an undeclared property, or use an operator the property
does not accept, never match. Configuration defects (an unknown ``match``
type, an operator missing from the registry) raise while items are
evaluated and are not caught here.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Any, TypeVar

from .evaluator import MemoryOperatorRegistry, filter_using_operator
from .models import (
    ExtendedOperator,
    FilteringFunction,
    PropertyFilteringOptions,
    PropertyFilterProperty,
    PropertyFilterQuery,
    PropertyFilterToken,
)
from .operators import FilterOperation, PropertyFilterOperator
from .operators_memory import build_default_registry
from .utils import fixup_falsy_values, resolve_property

logger = logging.getLogger(__name__)

T = TypeVar("T")

Predicate = Callable[[Any], bool]
OperatorsMap = Mapping[PropertyFilterOperator, ExtendedOperator]
FilteringPropertiesMap = Mapping[str, OperatorsMap]

_PLAIN_CONTAINS = ExtendedOperator(operator=PropertyFilterOperator.CONTAINS)


def build_filtering_properties_map(
    properties: Iterable[PropertyFilterProperty],
) -> FilteringPropertiesMap:
    """
    Map every property key to the operators it accepts.

    The default operator (``=`` unless declared) is always present. Later
    declarations of the same operator replace earlier ones, so a match
    strategy given for the default operator wins over the bare default.
    """
    result: dict[str, OperatorsMap] = {}
    for prop in properties:
        default = prop.default_operator or PropertyFilterOperator.EQ
        operators: dict[PropertyFilterOperator, ExtendedOperator] = {
            default: ExtendedOperator(operator=default)
        }
        for op in prop.operators:
            if isinstance(op, ExtendedOperator):
                operators[op.operator] = op
            else:
                operators[op] = ExtendedOperator(operator=op)
        result[prop.key] = MappingProxyType(operators)
    return MappingProxyType(result)


def free_text_filter(
    value: Any,
    item: Any,
    operator: PropertyFilterOperator,
    properties_map: FilteringPropertiesMap,
    registry: MemoryOperatorRegistry,
) -> bool:
    """
    Match *value* against every property that accepts ``:``.

    Always uses plain case-insensitive containment on the raw item
    values. ``:`` returns whether any property matched; any other operator
    returns the negation.
    """
    matches = any(
        PropertyFilterOperator.CONTAINS in operators
        and filter_using_operator(
            resolve_property(item, key), value, _PLAIN_CONTAINS, registry
        )
        for key, operators in properties_map.items()
    )
    return matches if operator == PropertyFilterOperator.CONTAINS else not matches


def filter_by_token(
    token: PropertyFilterToken,
    item: Any,
    properties_map: FilteringPropertiesMap,
    registry: MemoryOperatorRegistry,
) -> bool:
    """Evaluate a single token against *item*."""
    if not token.property_key:
        return free_text_filter(
            token.value, item, token.operator, properties_map, registry
        )

    operators = properties_map.get(token.property_key)
    if operators is None or token.operator not in operators:
        return False

    extended = operators[token.operator]
    raw_value = resolve_property(item, token.property_key)
    # Custom matchers see the raw value.
    item_value = raw_value if extended.match else fixup_falsy_values(raw_value)
    return filter_using_operator(item_value, token.value, extended, registry)


def default_filtering_function(
    properties_map: FilteringPropertiesMap,
    registry: MemoryOperatorRegistry,
) -> FilteringFunction:
    """
    Combine token results with the query operation.

    A query without tokens matches everything, for ``or`` as well as
    ``and``.
    """

    def filtering_function(item: Any, query: PropertyFilterQuery) -> bool:
        results = (
            filter_by_token(token, item, properties_map, registry)
            for token in query.tokens
        )
        if query.operation == FilterOperation.AND:
            return all(results)
        if not query.tokens:
            return True
        return any(results)

    return filtering_function


def _log_unknown_properties(
    query: PropertyFilterQuery, properties_map: FilteringPropertiesMap
) -> None:
    for token in query.tokens:
        if token.property_key and token.property_key not in properties_map:
            logger.debug(
                "Token references undeclared property %r; it will not match",
                token.property_key,
            )


def create_property_filter_predicate(
    property_filtering: PropertyFilteringOptions | Mapping[str, Any] | None,
    query: PropertyFilterQuery | Mapping[str, Any] | None = None,
    *,
    registry: MemoryOperatorRegistry | None = None,
) -> Predicate | None:
    """
    Build a predicate for *query*, or ``None`` when filtering is disabled.

    Args:
        property_filtering: Filtering configuration. Mappings are validated
            into :class:`PropertyFilteringOptions`.
        query: Query to apply. Defaults to an empty ``and`` query.
        registry: Operator registry for comparisons without a ``match``.
            A fresh default registry is created when omitted.
    """
    if property_filtering is None:
        logger.debug("Property filtering disabled; no predicate built")
        return None
    if isinstance(property_filtering, Mapping):
        property_filtering = PropertyFilteringOptions.model_validate(
            property_filtering
        )
    if query is None:
        query = PropertyFilterQuery()
    elif isinstance(query, Mapping):
        query = PropertyFilterQuery.model_validate(query)

    properties_map = build_filtering_properties_map(
        property_filtering.filtering_properties
    )
    filtering_function = property_filtering.filtering_function
    if filtering_function is None:
        if registry is None:
            registry = build_default_registry()
        filtering_function = default_filtering_function(properties_map, registry)
    else:
        logger.debug("Using caller-supplied filtering function")

    _log_unknown_properties(query, properties_map)
    logger.debug(
        "Compiled property filter: %d properties, %d tokens, operation=%s",
        len(properties_map),
        len(query.tokens),
        query.operation.value,
    )

    def predicate(item: Any) -> bool:
        return filtering_function(item, query)

    return predicate


def property_filter(
    items: Iterable[T],
    query: PropertyFilterQuery | Mapping[str, Any] | None,
    property_filtering: PropertyFilteringOptions | Mapping[str, Any] | None,
    *,
    registry: MemoryOperatorRegistry | None = None,
) -> list[T]:
    """Return the items matching *query*; all items if filtering is disabled."""
    predicate = create_property_filter_predicate(
        property_filtering, query, registry=registry
    )
    if predicate is None:
        return list(items)
    return [item for item in items if predicate(item)]
