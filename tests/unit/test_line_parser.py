"""
Unit tests for the free-text product list parser.

Run: pytest tests/unit/test_line_parser.py -v
"""

import pytest

from parsers.line_parser import parse_product_lines, split_segments
from models.matching import ProductRequest


# ===================
# SEGMENTING
# ===================

class TestSplitSegments:
    """Tests for newline/comma splitting."""

    def test_splits_on_newlines_and_commas(self):
        assert split_segments("Mug, Hoodie\nCap\r\nTote") == ["Mug", "Hoodie", "Cap", "Tote"]

    def test_drops_empty_and_whitespace_segments(self):
        assert split_segments(" Mug ,, \n\n  ,Cap\n") == ["Mug", "Cap"]

    def test_none_and_empty_return_empty(self):
        assert split_segments(None) == []
        assert split_segments("") == []
        assert split_segments(" , \n ") == []


# ===================
# LINE SHAPES
# ===================

class TestLineShapes:
    """Tests for each quantity pattern."""

    def test_leading_multiplier(self):
        """2x Mug -> Mug, 2"""
        assert parse_product_lines("2x Mug") == [ProductRequest(name="Mug", quantity=2)]

    def test_leading_multiplier_with_spaces_and_uppercase_x(self):
        assert parse_product_lines("12 X Coffee Mug") == [
            ProductRequest(name="Coffee Mug", quantity=12)
        ]

    def test_trailing_multiplier(self):
        """Mug x2 -> Mug, 2"""
        assert parse_product_lines("Mug x2") == [ProductRequest(name="Mug", quantity=2)]

    def test_trailing_multiplier_with_spaces(self):
        assert parse_product_lines("Baseball Cap x 4") == [
            ProductRequest(name="Baseball Cap", quantity=4)
        ]

    def test_dash_suffix(self):
        """Mug - 3 -> Mug, 3"""
        assert parse_product_lines("Mug - 3") == [ProductRequest(name="Mug", quantity=3)]

    def test_colon_suffix(self):
        assert parse_product_lines("Tote Bag: 5") == [ProductRequest(name="Tote Bag", quantity=5)]

    def test_fallback_name_only(self):
        """Mug -> Mug, 1"""
        assert parse_product_lines("Mug") == [ProductRequest(name="Mug", quantity=1)]

    def test_leading_wins_over_trailing(self):
        """Both shapes present: the leading multiplier is tried first."""
        assert parse_product_lines("3x Mug x2") == [ProductRequest(name="Mug x2", quantity=3)]

    def test_multiplier_wins_over_dash(self):
        assert parse_product_lines("T-Shirt x 2") == [ProductRequest(name="T-Shirt", quantity=2)]

    def test_hyphenated_name_without_quantity_falls_back(self):
        assert parse_product_lines("T-Shirt") == [ProductRequest(name="T-Shirt", quantity=1)]

    def test_zero_quantity_is_coerced_to_one(self):
        assert parse_product_lines("0x Mug") == [ProductRequest(name="Mug", quantity=1)]
        assert parse_product_lines("Mug - 0") == [ProductRequest(name="Mug", quantity=1)]

    def test_leading_zeros_parse_base_ten(self):
        assert parse_product_lines("010x Mug") == [ProductRequest(name="Mug", quantity=10)]


# ===================
# WHOLE INPUT
# ===================

class TestParseProductLines:
    """Tests for ordering, totality and counts."""

    def test_preserves_input_order(self):
        result = parse_product_lines("Hoodie x2\nMug\n3x Cap, Tote - 4")

        assert [r.name for r in result] == ["Hoodie", "Mug", "Cap", "Tote"]
        assert [r.quantity for r in result] == [2, 1, 3, 4]

    @pytest.mark.parametrize("text", [
        "Mug",
        "Mug, Cap",
        " , Mug,\n\n Cap x2 ,",
        "2x Mug\r\nHoodie - 1\nSticker: 9, , ,",
        "???, x, -, :",
    ])
    def test_output_length_matches_non_empty_segments(self, text):
        expected = [s.strip() for s in text.replace("\r\n", "\n").replace("\n", ",").split(",")]
        expected = [s for s in expected if s]

        assert len(parse_product_lines(text)) == len(expected)

    def test_malformed_lines_degrade_to_name_only(self):
        result = parse_product_lines("x, -, :, x5")

        assert all(r.quantity == 1 for r in result[:3])
        assert [r.name for r in result[:3]] == ["x", "-", ":"]

    def test_empty_input_returns_empty_list(self):
        assert parse_product_lines("") == []
        assert parse_product_lines(None) == []


# ===================
# OVERSIZED QUANTITIES
# ===================

class TestOversizedQuantities:
    """Huge digit runs must never break parsing."""

    def test_twenty_digit_quantity_is_exact(self):
        result = parse_product_lines("12345678901234567891x Mug")

        assert result == [ProductRequest(name="Mug", quantity=12345678901234567891)]

    def test_quantity_beyond_float_range_is_kept(self):
        digits = "1" + "0" * 400

        result = parse_product_lines(f"{digits}x Mug")

        assert result[0].name == "Mug"
        assert result[0].quantity == 10 ** 400

    def test_unconvertible_digit_run_degrades_to_name_only(self):
        segment = "9" * 5000 + " x Mug"

        result = parse_product_lines(f"{segment}\nHoodie x2")

        assert len(result) == 2
        assert result[0] == ProductRequest(name=segment, quantity=1)
        assert result[1] == ProductRequest(name="Hoodie", quantity=2)

    def test_trailing_unconvertible_digit_run_degrades(self):
        segment = "Mug x" + "9" * 5000

        result = parse_product_lines(segment)

        assert result == [ProductRequest(name=segment, quantity=1)]
