"""Conversions between wire numbers and exact decimals"""

import math
import re
from decimal import Decimal
from typing import Any, Union

Number = Union[Decimal, int, float, str]

# Optional sign, optional integer part, optional fraction; no exponent,
# whitespace or digit separators
NUMERIC_STRING = re.compile(r"[+-]?([0-9]*\.)?[0-9]+")


def check_numeric_string(value: Any) -> Any:
    """Reject strings that are not plain decimal numerals; other types pass through"""
    if isinstance(value, str) and not NUMERIC_STRING.fullmatch(value):
        raise ValueError(f"Not a plain decimal number: {value!r}")
    return value


def to_decimal(value: Number) -> Decimal:
    """
    Convert a numeric value to Decimal without binary floating point error.

    Floats go through str() so 99.99 becomes Decimal("99.99") rather than
    the exact binary expansion of the double.

    Raises:
        ValueError: If the value is NaN, infinite, or not a number
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a number: {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, (int, str)):
        try:
            result = Decimal(value)
        except ArithmeticError as e:
            raise ValueError(f"Not a number: {value!r}") from e
    else:
        raise ValueError(f"Not a number: {value!r}")

    if not result.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return result


def to_float(value: Decimal) -> float:
    """
    Convert a Decimal to float for JSON output.

    This is the only place precision may be lost. Negative zero is
    normalised to 0.0.

    Raises:
        OverflowError: If the value is outside the double range
    """
    result = float(value)
    if math.isinf(result):
        raise OverflowError(f"Balance {value} exceeds the representable range")
    return result + 0.0  # -0.0 + 0.0 == 0.0
