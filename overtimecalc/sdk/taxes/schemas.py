"""Pydantic schemas for tax rate tables.

These schemas validate the tax_rules/*.yaml files and provide typed access
to the per-year constants used by the withholding engine: bracket tax tiers,
national insurance, general income tax, standard deduction, personal
allowance and the withholding period divisor.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TaxBracket(BaseModel):
    """Single bracket tax tier.

    `threshold` is the cumulative upper bound of the tier. None marks the
    open-ended top tier.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    threshold: Optional[float] = Field(default=None, gt=0, description="Upper bound (None for the open-ended tier)")
    rate: float = Field(..., ge=0, lt=1, description="Marginal rate as decimal")

    @property
    def is_open_ended(self) -> bool:
        return self.threshold is None


class NationalInsuranceRules(BaseModel):
    """Trygdeavgift: flat rate on all income once above the exemption threshold."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    rate: float = Field(..., ge=0, lt=1)
    exemption_threshold: float = Field(..., ge=0, description="No contribution at or below this annual income")


class GeneralIncomeTaxRules(BaseModel):
    """Flat tax on alminnelig inntekt (taxable general income)."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    rate: float = Field(..., ge=0, lt=1)


class StandardDeductionRules(BaseModel):
    """Minstefradrag: percentage of gross income clamped to [floor, ceiling]."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    rate: float = Field(..., ge=0, lt=1)
    floor: float = Field(..., ge=0)
    ceiling: float = Field(..., ge=0)

    @model_validator(mode="after")
    def _floor_below_ceiling(self):
        if self.floor > self.ceiling:
            raise ValueError(f"standard deduction floor {self.floor} exceeds ceiling {self.ceiling}")
        return self


class TaxYearRates(BaseModel):
    """Complete rate table for one tax year."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    bracket_tax: tuple[TaxBracket, ...] = Field(..., min_length=1)
    national_insurance: NationalInsuranceRules
    general_income_tax: GeneralIncomeTaxRules
    standard_deduction: StandardDeductionRules
    personal_allowance: float = Field(..., ge=0)
    withholding_periods: float = Field(..., gt=0, le=12, description="Months annual withholding is spread over")

    @model_validator(mode="after")
    def _check_brackets(self):
        brackets = self.bracket_tax
        if not brackets[-1].is_open_ended:
            raise ValueError("last bracket must be open-ended (threshold: null)")

        previous = 0.0
        for bracket in brackets[:-1]:
            if bracket.is_open_ended:
                raise ValueError("only the last bracket may be open-ended")
            if bracket.threshold <= previous:
                raise ValueError(
                    f"bracket thresholds must be strictly ascending: {bracket.threshold} after {previous}"
                )
            previous = bracket.threshold
        return self
