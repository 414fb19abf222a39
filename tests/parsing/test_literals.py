"""
Tests for literal coercion of leaf tokens.
"""

import pytest

from parscore.parsing.literals import (
    coerce_literal,
    is_boolean_literal,
    is_numeric_literal,
    is_scalar_literal,
)


class TestCoerceLiteral:
    """Test bool/int/float/str coercion."""

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("true", True),
            ("TRUE", True),
            ("False", False),
            ("42", 42),
            ("-7", -7),
            ("+3", 3),
            (" 12 ", 12),
            ("abc", "abc"),
            ("true_ish", "true_ish"),
            ('"1"', '"1"'),
        ],
    )
    def test_basic_values(self, token, expected):
        result = coerce_literal(token)
        assert result == expected
        assert type(result) is type(expected)

    def test_decimals_kept_as_float_by_default(self):
        assert coerce_literal("1.5") == 1.5
        assert coerce_literal(".5") == 0.5
        assert coerce_literal("2e3") == 2000.0

    def test_decimals_truncated_when_requested(self):
        assert coerce_literal("1.9", truncate_decimals=True) == 1
        assert coerce_literal("-1.9", truncate_decimals=True) == -1
        assert isinstance(coerce_literal("2.0", truncate_decimals=True), int)

    def test_overflowing_decimal_is_not_truncated(self):
        assert coerce_literal("1e999", truncate_decimals=True) == float("inf")

    def test_integers_unaffected_by_truncation(self):
        assert coerce_literal("10", truncate_decimals=True) == 10


class TestLiteralPredicates:
    """Test literal classification helpers."""

    def test_boolean(self):
        assert is_boolean_literal("true")
        assert is_boolean_literal(" FALSE ")
        assert not is_boolean_literal("yes")

    def test_numeric(self):
        assert is_numeric_literal("10")
        assert is_numeric_literal("-0.25")
        assert not is_numeric_literal("1.2.3")
        assert not is_numeric_literal("nan")
        assert not is_numeric_literal("")

    def test_scalar(self):
        assert is_scalar_literal("true")
        assert is_scalar_literal("5")
        assert not is_scalar_literal("equals[1,1]")
        assert not is_scalar_literal("status")
