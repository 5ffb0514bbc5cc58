"""Tests for progressive bracket tax (trinnskatt) and the standard deduction."""

import pytest

from overtimecalc.sdk.taxes import (
    StandardDeductionRules,
    TaxBracket,
    bracket_tax,
    default_registry,
    standard_deduction,
)


@pytest.fixture
def brackets_2026():
    return default_registry().rates_for(2026).bracket_tax


class TestBracketTax:

    def test_zero_income(self, brackets_2026):
        assert bracket_tax(0, brackets_2026) == 0

    def test_below_first_threshold(self, brackets_2026):
        assert bracket_tax(200_000, brackets_2026) == 0

    def test_exactly_at_first_threshold(self, brackets_2026):
        assert bracket_tax(226_100, brackets_2026) == 0

    def test_exactly_at_second_threshold(self, brackets_2026):
        """Income at a threshold is taxed entirely in the lower brackets."""
        assert bracket_tax(318_300, brackets_2026) == pytest.approx(92_200 * 0.017)

    def test_one_krone_over_threshold_uses_next_rate(self, brackets_2026):
        at = bracket_tax(318_300, brackets_2026)
        over = bracket_tax(318_301, brackets_2026)
        assert over - at == pytest.approx(0.040)

    def test_mid_bracket(self, brackets_2026):
        expected = 92_200 * 0.017 + 406_750 * 0.040 + 174_950 * 0.137
        assert bracket_tax(900_000, brackets_2026) == pytest.approx(expected)
        assert bracket_tax(900_000, brackets_2026) == pytest.approx(41_805.55)

    def test_top_bracket_has_no_upper_bound(self, brackets_2026):
        assert bracket_tax(2_000_000, brackets_2026) == pytest.approx(229_450.45)
        marginal = bracket_tax(10_000_001, brackets_2026) - bracket_tax(10_000_000, brackets_2026)
        assert marginal == pytest.approx(0.178)

    def test_never_retroactive(self, brackets_2026):
        """Crossing into a higher bracket only taxes the excess at the higher rate."""
        below = bracket_tax(980_100, brackets_2026)
        above = bracket_tax(980_200, brackets_2026)
        assert above - below == pytest.approx(100 * 0.168)

    def test_synthetic_brackets(self):
        brackets = (
            TaxBracket(threshold=100, rate=0.1),
            TaxBracket(threshold=None, rate=0.5),
        )
        assert bracket_tax(50, brackets) == pytest.approx(5)
        assert bracket_tax(300, brackets) == pytest.approx(10 + 100)


class TestStandardDeduction:

    @pytest.fixture
    def rules(self):
        return StandardDeductionRules(rate=0.46, floor=4000, ceiling=95700)

    def test_floor(self, rules):
        assert standard_deduction(5000, rules) == 4000

    def test_percentage(self, rules):
        assert standard_deduction(100_000, rules) == pytest.approx(46_000)

    def test_ceiling(self, rules):
        assert standard_deduction(900_000, rules) == 95700
