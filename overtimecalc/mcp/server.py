"""Overtime Calc MCP Server - FastMCP implementation for calculator tools."""

import logging
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from overtimecalc.sdk import (
    OvertimeCalcError,
    OvertimeScenario,
    WithholdingEngine,
    default_registry,
    validate_parameters,
)

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("overtime-calc")


# --- Tools ---

@mcp.tool()
async def calculate_overtime(
    annual_salary: float = Field(description="Yearly salary in NOK (e.g., 900000)"),
    overtime_hours: float = Field(description="Overtime hours worked"),
    table_code: int = Field(description="Tax table number, 8000-8400 or 9010-9400 (e.g., 8115)"),
    tax_year: int = Field(default=2026, description="Tax year"),
) -> dict[str, Any]:
    """Calculate gross, tax and take-home pay for overtime hours. Returns both actual marginal tax and payslip withholding."""
    validation = validate_parameters(annual_salary, overtime_hours, table_code, tax_year)
    if not validation.valid:
        return {"error": "; ".join(validation.errors), "result": None}

    try:
        scenario = OvertimeScenario(annual_salary, overtime_hours, table_code, tax_year)
        result = WithholdingEngine().compute_overtime(scenario)
        return {
            "result": result.to_dict(),
            "warnings": validation.warnings,
        }
    except OvertimeCalcError as e:
        logger.error(f"Error calculating overtime: {e}")
        return {"error": str(e), "result": None}


@mcp.tool()
async def calculate_monthly_withholding(
    monthly_gross: float = Field(description="Gross pay for the month in NOK"),
    table_code: int = Field(description="Tax table number (e.g., 8115)"),
    tax_year: int = Field(default=2026, description="Tax year"),
) -> dict[str, Any]:
    """Calculate tabelltrekk withholding for one month's gross pay, with the annual tax components."""
    try:
        engine = WithholdingEngine()
        amount = engine.monthly_withholding(monthly_gross, table_code, tax_year)
        breakdown = engine.annual_tax_breakdown(monthly_gross * 12, table_code, tax_year)
        return {
            "monthly_gross": monthly_gross,
            "monthly_withholding": round(amount, 2),
            "annual_breakdown": {k: round(v, 2) for k, v in breakdown.to_dict().items()},
        }
    except OvertimeCalcError as e:
        logger.error(f"Error calculating withholding: {e}")
        return {"error": str(e), "monthly_withholding": None}


@mcp.tool()
async def validate_inputs(
    annual_salary: float = Field(description="Yearly salary in NOK"),
    overtime_hours: float = Field(description="Overtime hours"),
    table_code: int = Field(description="Tax table number"),
    tax_year: int = Field(default=2026, description="Tax year"),
) -> dict[str, Any]:
    """Check calculator inputs without calculating. Returns valid flag, errors and warnings."""
    return validate_parameters(annual_salary, overtime_hours, table_code, tax_year).to_dict()


@mcp.tool()
async def list_tax_years() -> dict[str, Any]:
    """List tax years with rate tables."""
    return {"years": default_registry().years()}


# --- Server Entry Point ---

def run_server():
    """Run the MCP server in stdio mode."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
