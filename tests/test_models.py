"""Tests for schema and query models."""

from __future__ import annotations

import pydantic
import pytest

from collection_filtering.models import (
    ExtendedOperator,
    PropertyFilteringOptions,
    PropertyFilterProperty,
    PropertyFilterQuery,
    PropertyFilterToken,
)
from collection_filtering.operators import FilterOperation, PropertyFilterOperator


def test_query_defaults_to_empty_and():
    query = PropertyFilterQuery()
    assert query.tokens == ()
    assert query.operation is FilterOperation.AND


def test_token_from_camel_case_payload():
    token = PropertyFilterToken.model_validate(
        {"propertyKey": "status", "operator": "!=", "value": "closed"}
    )
    assert token.property_key == "status"
    assert token.operator is PropertyFilterOperator.NE
    assert token.value == "closed"


def test_token_without_property_key_is_free_text():
    token = PropertyFilterToken(operator=":", value="abc")
    assert token.property_key is None


def test_property_mixes_symbols_and_extended_operators():
    prop = PropertyFilterProperty.model_validate(
        {
            "key": "created",
            "defaultOperator": ">",
            "operators": ["<", {"operator": "=", "match": "date"}],
        }
    )
    assert prop.default_operator is PropertyFilterOperator.GT
    assert prop.operators[0] is PropertyFilterOperator.LT
    assert isinstance(prop.operators[1], ExtendedOperator)
    assert prop.operators[1].match == "date"


def test_extended_operator_keeps_any_match():
    def match(item_value, token_value):
        return True

    assert ExtendedOperator(operator="=", match=match).match is match
    assert ExtendedOperator(operator="=", match=42).match == 42


def test_unknown_operator_symbol_is_rejected():
    with pytest.raises(pydantic.ValidationError):
        PropertyFilterToken(property_key="a", operator="~", value=1)
    with pytest.raises(pydantic.ValidationError):
        PropertyFilterProperty(key="a", operators=["=", "=="])


def test_unknown_operation_is_rejected():
    with pytest.raises(pydantic.ValidationError):
        PropertyFilterQuery(operation="xor")


def test_models_are_frozen():
    token = PropertyFilterToken(property_key="a", operator="=", value=1)
    with pytest.raises(pydantic.ValidationError):
        token.value = 2


def test_options_from_camel_case_payload():
    options = PropertyFilteringOptions.model_validate(
        {
            "filteringProperties": [{"key": "name", "operators": [":"]}],
            "filteringFunction": lambda item, query: True,
        }
    )
    assert options.filtering_properties[0].key == "name"
    assert options.filtering_function is not None


def test_options_reject_non_callable_filtering_function():
    with pytest.raises(pydantic.ValidationError):
        PropertyFilteringOptions(filtering_properties=[], filtering_function="nope")


def test_ui_payload_extra_fields_are_ignored():
    prop = PropertyFilterProperty.model_validate(
        {"key": "name", "propertyLabel": "Name", "groupValuesLabel": "Names"}
    )
    assert prop.key == "name"
