from enum import Enum


class PropertyFilterOperator(str, Enum):
    """Operators a property filter token can use."""

    # Comparison
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    EQ = "="
    NE = "!="

    # Text
    CONTAINS = ":"
    NOT_CONTAINS = "!:"
    STARTS_WITH = "^"
    NOT_STARTS_WITH = "!^"


class MatchType(str, Enum):
    """Built-in match strategies for date-valued properties."""

    DATE = "date"
    DATETIME = "datetime"


class FilterOperation(str, Enum):
    """How the tokens of a query are combined."""

    AND = "and"
    OR = "or"
