"""Tests for calculation parameter validation."""

import pytest

from overtimecalc.sdk import (
    InvalidInputError,
    OvertimeCalcError,
    RateRegistry,
    default_registry,
    validate_parameters,
)


class TestValidParameters:

    def test_typical_inputs(self):
        result = validate_parameters(900_000, 10, 8115, 2026)
        assert result.valid
        assert result.errors == []
        assert result.warnings == []

    @pytest.mark.parametrize("salary", [100_000, 5_000_000, 750_000.5])
    def test_salary_bounds_inclusive(self, salary):
        assert validate_parameters(salary, 10, 8115, 2026).valid

    def test_zero_hours(self):
        assert validate_parameters(900_000, 0, 8115, 2026).valid


class TestErrors:

    @pytest.mark.parametrize("salary", [99_999, 5_000_001, 0, -500_000])
    def test_salary_out_of_range(self, salary):
        result = validate_parameters(salary, 10, 8115, 2026)
        assert not result.valid
        assert any("between 100,000 and 5,000,000" in e for e in result.errors)

    @pytest.mark.parametrize("salary", [None, "900000", True])
    def test_salary_not_a_number(self, salary):
        result = validate_parameters(salary, 10, 8115, 2026)
        assert "Yearly salary must be provided as a number" in result.errors

    @pytest.mark.parametrize("hours", [-1, -0.5, None, "10"])
    def test_bad_hours(self, hours):
        result = validate_parameters(900_000, hours, 8115, 2026)
        assert "Overtime hours must be zero or a positive number" in result.errors

    @pytest.mark.parametrize("code", [7150, 9000, 8401, None])
    def test_bad_table_code(self, code):
        result = validate_parameters(900_000, 10, code, 2026)
        assert any("Invalid table number" in e for e in result.errors)

    def test_unregistered_year(self):
        result = validate_parameters(900_000, 10, 8115, 2019)
        assert "Tax rates for year 2019 are not available" in result.errors

    def test_year_checked_against_given_registry(self):
        empty = RateRegistry({})
        result = validate_parameters(900_000, 10, 8115, 2026, registry=empty)
        assert not result.valid

    def test_collects_all_errors(self):
        result = validate_parameters(50, -1, 7150, 1999)
        assert len(result.errors) == 4


class TestWarnings:

    def test_high_hours_warns_without_rejecting(self):
        result = validate_parameters(900_000, 250, 8115, 2026)
        assert result.valid
        assert result.warnings == ["Overtime hours seems unusually high (>200 hours)"]

    def test_exactly_200_hours_no_warning(self):
        assert validate_parameters(900_000, 200, 8115, 2026).warnings == []


class TestResult:

    def test_raise_if_invalid(self):
        result = validate_parameters(50, 10, 8115, 2026)
        with pytest.raises(InvalidInputError) as exc_info:
            result.raise_if_invalid()
        assert exc_info.value.errors == result.errors
        assert isinstance(exc_info.value, OvertimeCalcError)

    def test_raise_if_valid_is_noop(self):
        validate_parameters(900_000, 10, 8115, 2026).raise_if_invalid()

    def test_to_dict(self):
        data = validate_parameters(900_000, 250, 7150, 2026).to_dict()
        assert data["valid"] is False
        assert len(data["errors"]) == 1
        assert len(data["warnings"]) == 1
