"""In-memory property filtering — schema + query -> per-item predicate."""

from .dates import compare_dates, compare_timestamps
from .evaluator import MemoryOperator, MemoryOperatorRegistry, filter_using_operator
from .exceptions import (
    PropertyFilterError,
    UnsupportedMatchTypeError,
    UnsupportedOperatorError,
)
from .models import (
    ExtendedOperator,
    FilteringFunction,
    PropertyFilteringOptions,
    PropertyFilterProperty,
    PropertyFilterQuery,
    PropertyFilterToken,
)
from .operators import FilterOperation, MatchType, PropertyFilterOperator
from .operators_memory import build_default_registry
from .predicate import (
    build_filtering_properties_map,
    create_property_filter_predicate,
    default_filtering_function,
    filter_by_token,
    free_text_filter,
    property_filter,
)
from .utils import fixup_falsy_values, loose_compare, loose_equals, stringify

__all__ = [
    # Core types
    "PropertyFilterOperator",
    "MatchType",
    "FilterOperation",
    "ExtendedOperator",
    "PropertyFilterProperty",
    "PropertyFilterToken",
    "PropertyFilterQuery",
    "PropertyFilteringOptions",
    "FilteringFunction",
    # Predicate builder
    "create_property_filter_predicate",
    "property_filter",
    "build_filtering_properties_map",
    "default_filtering_function",
    "filter_by_token",
    "free_text_filter",
    # Evaluator / strategy
    "MemoryOperator",
    "MemoryOperatorRegistry",
    "build_default_registry",
    "filter_using_operator",
    # Exceptions
    "PropertyFilterError",
    "UnsupportedMatchTypeError",
    "UnsupportedOperatorError",
    # Utilities
    "compare_dates",
    "compare_timestamps",
    "fixup_falsy_values",
    "loose_compare",
    "loose_equals",
    "stringify",
]
