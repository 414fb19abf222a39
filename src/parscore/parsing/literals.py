"""
Literal interpretation for ParsCore leaf tokens.

Leaf tokens are booleans (``true``/``false`` in any case), integers, decimal
numbers or plain strings. There is no quoting or escape syntax.
"""

import math
import re

from parscore.core.types import LiteralValue

INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")
DECIMAL_PATTERN = re.compile(r"^[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?$")

BOOLEAN_WORDS = {"true": True, "false": False}


def is_boolean_literal(token: str) -> bool:
    """Check whether a token spells ``true`` or ``false``."""
    return token.strip().lower() in BOOLEAN_WORDS


def is_numeric_literal(token: str) -> bool:
    """Check whether a token is an integer or decimal number."""
    return bool(DECIMAL_PATTERN.match(token.strip()))


def is_scalar_literal(token: str) -> bool:
    """Check whether a token is a boolean or numeric literal."""
    return is_boolean_literal(token) or is_numeric_literal(token)


def coerce_literal(token: str, truncate_decimals: bool = False) -> LiteralValue:
    """
    Interpret a leaf token as a bool, int, float or str.

    Params:
        token: Raw token text
        truncate_decimals: Return decimals as int truncated toward zero
            rather than as float

    Returns:
        The coerced value; tokens that are neither boolean nor numeric are
        returned unchanged
    """
    text = token.strip()
    lowered = text.lower()
    if lowered in BOOLEAN_WORDS:
        return BOOLEAN_WORDS[lowered]
    if INTEGER_PATTERN.match(text):
        return int(text)
    if DECIMAL_PATTERN.match(text):
        number = float(text)
        if truncate_decimals and math.isfinite(number):
            return int(number)
        return number
    return text
