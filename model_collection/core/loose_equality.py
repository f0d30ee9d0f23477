"""Loose Equality: value comparison that tolerates scalar type differences.

Invariants:
    - loose_equals(a, b) == loose_equals(b, a)
    - Anything equal under == is loosely equal
    - Never raises: incomparable values are simply not equal

Design Decisions:
    - Numeric strings compare numerically: "42" matches 42
    - Integers (and integer strings) stay int, so large ids compare exactly
    - Only plain decimal or exponent notation counts as numeric: no "1_000",
      "inf" or "nan"
    - bool compares by truthiness, None matches only falsy values
"""

import re
from numbers import Number

_INTEGER_STRING = re.compile(r"\s*[+-]?\d+\s*", re.ASCII)
_NUMERIC_STRING = re.compile(
    r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*", re.ASCII,
)


def loose_equals(left: object, right: object) -> bool:
    """Compare two values without requiring identical scalar types."""
    if left == right:
        return True
    if left is None or right is None:
        other = right if left is None else left
        return _is_falsy(other)
    if isinstance(left, bool) or isinstance(right, bool):
        return _is_truthy(left) == _is_truthy(right)

    left_number = _as_number(left)
    right_number = _as_number(right)
    if left_number is None or right_number is None:
        return False
    return left_number == right_number


def _as_number(value: object) -> int | float | None:
    """Numeric view of a number or a numeric string, None otherwise.

    ints are returned unchanged; int == float comparisons in Python are exact,
    so only genuinely fractional values go through float.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, Number):
        try:
            return float(value)
        except (TypeError, ValueError, OverflowError):
            return None
    if isinstance(value, str):
        try:
            if _INTEGER_STRING.fullmatch(value):
                return int(value)
            if _NUMERIC_STRING.fullmatch(value):
                return float(value)
        except ValueError:
            # int() refuses strings past sys.get_int_max_str_digits()
            return None
    return None


def _is_truthy(value: object) -> bool:
    try:
        return bool(value)
    except (TypeError, ValueError):
        return True


def _is_falsy(value: object) -> bool:
    return not _is_truthy(value)
