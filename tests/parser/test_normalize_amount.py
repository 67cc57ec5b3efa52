# -*- coding: utf-8 -*-
"""
Unit tests for normalize_amount module.
"""

import pytest
from resi.parser.normalize_amount import is_plausible_amount, normalize_amount


class TestNormalizeAmount:
    """Tests for normalize_amount function."""

    # === Local format ('.' groups, ',' decimals) ===

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("29.000,00", 29000),
            ("29.000", 29000),
            ("1.234.567", 1234567),
            ("150.000,50", 150001),
        ],
    )
    def test_local_format(self, token, expected):
        assert normalize_amount(token) == expected

    def test_ambiguous_single_group_reads_as_local(self):
        """1.234 -> 1234 (local format is tried first)"""
        assert normalize_amount("1.234") == 1234

    # === International format (',' groups, '.' decimals) ===

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("29,000.00", 29000),
            ("29,000", 29000),
            ("1,234,567", 1234567),
        ],
    )
    def test_international_format(self, token, expected):
        assert normalize_amount(token) == expected

    # === Plain digits ===

    def test_plain_digits(self):
        """50000 -> 50000"""
        assert normalize_amount("50000") == 50000

    def test_rounds_half_up(self):
        """500.50 -> 501"""
        assert normalize_amount("500.50") == 501

    def test_rounds_down_below_half(self):
        """500.49 -> 500"""
        assert normalize_amount("500.49") == 500

    def test_plain_with_decimal_comma(self):
        """29000,00 -> 29000"""
        assert normalize_amount("29000,00") == 29000

    def test_surrounding_whitespace(self):
        assert normalize_amount("  29.000  ") == 29000

    # === Unparseable ===

    @pytest.mark.parametrize(
        "token",
        ["", "abc", "1.00.000", "12.5", "1.000.000,5", "29.000,-", "Rp 29.000"],
    )
    def test_unparseable_returns_none(self, token):
        assert normalize_amount(token) is None

    def test_none_input(self):
        assert normalize_amount(None) is None

    def test_identifier_length_digit_run(self):
        """A 40 digit run is never an amount"""
        assert normalize_amount("1" * 40) is None


class TestIsPlausibleAmount:

    def test_inside_band(self):
        assert is_plausible_amount(25000, 1000, 1_000_000_000)

    def test_band_is_inclusive(self):
        assert is_plausible_amount(1000, 1000, 1_000_000_000)
        assert is_plausible_amount(1_000_000_000, 1000, 1_000_000_000)

    def test_outside_band(self):
        assert not is_plausible_amount(999, 1000, 1_000_000_000)
        assert not is_plausible_amount(1_000_000_001, 1000, 1_000_000_000)

    def test_none(self):
        assert not is_plausible_amount(None, 1000, 1_000_000_000)
