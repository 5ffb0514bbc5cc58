"""Tests for NOK and rate formatting."""

import pytest

from overtimecalc.sdk import format_nok, format_rate


class TestFormatNok:

    @pytest.mark.parametrize("amount,expected", [
        (0, "kr 0"),
        (999, "kr 999"),
        (1234, "kr 1 234"),
        (900000, "kr 900 000"),
        (1234567.4, "kr 1 234 567"),
        (1234.5, "kr 1 235"),
        (-2500, "kr -2 500"),
    ])
    def test_whole_kroner(self, amount, expected):
        assert format_nok(amount) == expected

    @pytest.mark.parametrize("amount,expected", [
        (1234.5, "kr 1 234,50"),
        (6461.538, "kr 6 461,54"),
        (0.125, "kr 0,13"),
        (-177.95, "kr -177,95"),
    ])
    def test_with_decimals(self, amount, expected):
        assert format_nok(amount, include_decimals=True) == expected

    def test_negative_rounding_to_zero_has_no_sign(self):
        assert format_nok(-0.2) == "kr 0"


class TestFormatRate:

    def test_percent(self):
        assert format_rate(0.433) == "43.3 %"
        assert format_rate(0) == "0.0 %"
