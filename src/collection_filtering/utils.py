"""
Value helpers shared by the operators and the predicate builder.

Items handed to a property filter come straight from UI tables, so values of
different runtime types meet in one comparison (``5`` against ``"5"``, a
missing value against ``0``). These helpers implement the permissive
coercion rules the filter relies on for primitive values (``str``, numbers,
``bool`` and ``None``). Anything else is compared with Python's own
operators.

Two numbers are always compared as they are, so large ints, ``Decimal`` and
``Fraction`` values keep their precision. Coercion only happens when a
string, a boolean or ``None`` takes part.
"""

from __future__ import annotations

import decimal
import math
import numbers
import re
from collections.abc import Callable, Mapping
from typing import Any

# ---------------------------------------------------------------------------
# Primitive detection
# ---------------------------------------------------------------------------


def is_number(value: Any) -> bool:
    """Return ``True`` for numeric values other than booleans."""
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


def is_primitive(value: Any) -> bool:
    """Return ``True`` for values taking part in loose coercion."""
    return value is None or isinstance(value, str | bool) or is_number(value)


# ---------------------------------------------------------------------------
# Number coercion
# ---------------------------------------------------------------------------

_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_RADIX_RE = re.compile(r"^0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")
_INFINITIES = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def _parse_number(text: str) -> Any:
    if text in _INFINITIES:
        return _INFINITIES[text]
    try:
        if _RADIX_RE.match(text):
            return int(text, 0)
        if _INTEGER_RE.match(text):
            return int(text)
    except ValueError:
        # Beyond the interpreter's int string limit.
        return -math.inf if text.startswith("-") else math.inf
    if _DECIMAL_RE.match(text):
        return float(text)
    return math.nan


def to_number(value: Any) -> Any:
    """
    Convert a primitive to a number the way loose comparison does.

    - numbers are returned unchanged
    - ``None`` → ``0``
    - booleans → ``0`` / ``1``
    - strings are trimmed; ``""`` → ``0``; integer literals (including
      ``0x``/``0o``/``0b``) become exact ints, decimal literals floats, and
      ``Infinity`` literals infinities; anything else → ``NaN``
    - any other value → ``NaN``

    Nothing is forced through ``float``, so huge ints never overflow.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return 1 if value else 0
    if is_number(value):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        return _parse_number(text)
    return math.nan


def _numeric_op(left: Any, right: Any, op: Callable[[Any, Any], bool]) -> bool:
    try:
        return bool(op(left, right))
    except (TypeError, ArithmeticError):
        # Unorderable numbers (complex) and signalling Decimal NaN.
        return False


# ---------------------------------------------------------------------------
# Loose comparison
# ---------------------------------------------------------------------------


def loose_equals(left: Any, right: Any) -> bool:
    """
    Coercing equality.

    ``None`` only equals ``None``; booleans are compared as numbers; a
    number and a string are compared numerically (``5`` equals ``"5"``).
    Two strings compare exactly, two numbers compare directly.
    Non-primitive values use ``==``.
    """
    if not (is_primitive(left) and is_primitive(right)):
        return bool(left == right)
    if left is None or right is None:
        return left is None and right is None
    if isinstance(left, bool):
        return loose_equals(to_number(left), right)
    if isinstance(right, bool):
        return loose_equals(left, to_number(right))
    if isinstance(left, str) and isinstance(right, str):
        return left == right
    return _numeric_op(to_number(left), to_number(right), lambda a, b: a == b)


def loose_compare(left: Any, right: Any, op: Callable[[Any, Any], bool]) -> bool:
    """
    Apply a relational operator (``operator.lt`` etc.) with coercion.

    Two strings compare lexicographically. Any other pair of primitives is
    compared as numbers, so ``NaN`` on either side gives ``False``.
    A primitive is never ordered against a non-primitive, and
    non-primitives that Python cannot order give ``False``.
    """
    if is_primitive(left) and is_primitive(right):
        if isinstance(left, str) and isinstance(right, str):
            return bool(op(left, right))
        return _numeric_op(to_number(left), to_number(right), op)
    if is_primitive(left) or is_primitive(right):
        return False
    try:
        return bool(op(left, right))
    except TypeError:
        return False


# ---------------------------------------------------------------------------
# Stringification
# ---------------------------------------------------------------------------


def _format_float(value: float) -> str:
    """Shortest round-trip digits, laid out in positional or exponent form."""
    sign, digit_tuple, exponent = decimal.Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    count = len(digits)
    point = count + int(exponent)

    if count <= point <= 21:
        body = digits + "0" * (point - count)
    elif 0 < point <= 21:
        body = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        body = "0." + "0" * -point + digits
    else:
        power = point - 1
        mantissa = digits[0] + (f".{digits[1:]}" if count > 1 else "")
        body = f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"
    return ("-" if sign else "") + body


def stringify(value: Any) -> str:
    """
    Render a value for the text operators.

    Booleans render lowercase and ``None`` renders empty. Floats use the
    shortest digits that round-trip: positional up to 21 integer digits and
    down to 6 leading fractional zeros, exponent form outside that range
    (``3.0`` → ``"3"``, ``1e16`` → ``"10000000000000000"``,
    ``1e-7`` → ``"1e-7"``).
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value == 0:
            return "0"
        return _format_float(value)
    return str(value)


def fixup_falsy_values(value: Any) -> Any:
    """
    Normalise an item value before a default (no ``match``) comparison.

    Booleans become ``"true"`` / ``"false"``, zero is kept, and ``None``,
    ``""`` and ``NaN`` become ``""``. Everything else passes through.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    return value


# ---------------------------------------------------------------------------
# Item access
# ---------------------------------------------------------------------------


def resolve_property(item: Any, key: str) -> Any:
    """Read *key* from a mapping or an object; missing values are ``None``."""
    if isinstance(item, Mapping):
        return item.get(key)
    return getattr(item, key, None)
