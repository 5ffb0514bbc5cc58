"""Tests for annual tax and monthly withholding.

Expected values are worked by hand from the 2026 Skatteetaten constants.
"""

import pytest

from overtimecalc.sdk.taxes import (
    InvalidTableCodeError,
    UnsupportedYearError,
    WithholdingEngine,
)


TAX_YEAR = 2026


@pytest.fixture
def engine():
    return WithholdingEngine()


class TestAnnualTax:

    def test_known_value(self, engine):
        """900k, table 8115.

        general = 900000 - 95700 - 114210 - 115000 = 575090 -> 126519.80
        trinnskatt = 41805.55, trygdeavgift = 68400
        """
        assert engine.annual_tax(900_000, 8115, TAX_YEAR) == pytest.approx(236_725.35)

    def test_breakdown_components(self, engine):
        b = engine.annual_tax_breakdown(900_000, 8115, TAX_YEAR)
        assert b.standard_deduction == 95700
        assert b.table_adjustment == -115_000
        assert b.taxable_general_income == pytest.approx(575_090)
        assert b.bracket_tax == pytest.approx(41_805.55)
        assert b.national_insurance == pytest.approx(68_400)
        assert b.general_income_tax == pytest.approx(126_519.80)
        assert b.total == pytest.approx(236_725.35)
        assert b.to_dict()["total"] == pytest.approx(236_725.35)

    def test_addition_table_increases_taxable_income(self, engine):
        b = engine.annual_tax_breakdown(900_000, 9050, TAX_YEAR)
        assert b.taxable_general_income == pytest.approx(900_000 - 95_700 - 114_210 + 50_000)

    def test_low_income_pays_nothing(self, engine):
        assert engine.annual_tax(50_000, 8000, TAX_YEAR) == 0

    def test_taxable_general_income_floored_at_zero(self, engine):
        b = engine.annual_tax_breakdown(300_000, 8400, TAX_YEAR)
        assert b.taxable_general_income == 0
        assert b.general_income_tax == 0

    def test_national_insurance_threshold_is_exclusive(self, engine):
        assert engine.annual_tax_breakdown(69_650, 8000, TAX_YEAR).national_insurance == 0
        assert engine.annual_tax_breakdown(69_651, 8000, TAX_YEAR).national_insurance == pytest.approx(69_651 * 0.076)

    def test_invalid_table_code(self, engine):
        with pytest.raises(InvalidTableCodeError):
            engine.annual_tax(900_000, 7150, TAX_YEAR)

    def test_unsupported_year(self, engine):
        with pytest.raises(UnsupportedYearError):
            engine.annual_tax(900_000, 8115, 1999)


class TestMonthlyWithholding:

    def test_known_value(self, engine):
        """Annualized 75000 x 12 = 900000, spread over 10.5 periods."""
        assert engine.monthly_withholding(75_000, 8115, TAX_YEAR) == pytest.approx(236_725.35 / 10.5)
        assert engine.monthly_withholding(75_000, 8115, TAX_YEAR) == pytest.approx(22_545.27, abs=0.01)

    def test_higher_than_annual_over_twelve(self, engine):
        monthly = engine.monthly_withholding(75_000, 8115, TAX_YEAR)
        assert monthly > engine.annual_tax(900_000, 8115, TAX_YEAR) / 12

    def test_monotonic_in_income(self, engine):
        previous = -1.0
        for monthly_gross in range(0, 500_001, 2_500):
            current = engine.monthly_withholding(monthly_gross, 8115, TAX_YEAR)
            assert current >= previous, f"withholding dropped at {monthly_gross}"
            previous = current

    @pytest.mark.parametrize("monthly_gross", [30_000, 50_000, 75_000, 120_000])
    def test_deduction_table_withholds_less_than_addition(self, engine, monthly_gross):
        deduction = engine.monthly_withholding(monthly_gross, 8050, TAX_YEAR)
        addition = engine.monthly_withholding(monthly_gross, 9050, TAX_YEAR)
        assert deduction < addition

    def test_larger_deduction_lowers_withholding(self, engine):
        results = {t: engine.monthly_withholding(75_000, t, TAX_YEAR) for t in (8000, 8100, 8200)}
        assert results[8200] < results[8100] < results[8000]

    def test_larger_addition_raises_withholding(self, engine):
        assert engine.monthly_withholding(75_000, 9100, TAX_YEAR) > engine.monthly_withholding(75_000, 9050, TAX_YEAR)

    def test_invalid_table_code(self, engine):
        with pytest.raises(InvalidTableCodeError):
            engine.monthly_withholding(75_000, 9005, TAX_YEAR)

    def test_unsupported_year(self, engine):
        with pytest.raises(UnsupportedYearError):
            engine.monthly_withholding(75_000, 8115, 2099)
