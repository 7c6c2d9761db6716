"""Income tax calculator — bracket-by-bracket breakdown."""

import logging
from decimal import Decimal

from src.calculators.income import annualise_income, consolidated_relief, derive_taxable_income
from src.calculators.models import (
    BusinessIncome,
    MixedIncome,
    SalaryIncome,
    TaxBreakdownLine,
    TaxCalculationResult,
)
from src.calculators.tax_data import DEFAULT_TAX_TABLE, TAX_TABLES, TaxBracket

logger = logging.getLogger(__name__)

_ZERO = Decimal("0")


def _format_naira(amount: Decimal) -> str:
    if amount == amount.to_integral_value():
        return f"₦{amount:,.0f}"
    return f"₦{amount:,.2f}"


def calculate_bracket_tax(
    taxable_income: Decimal,
    brackets: tuple[TaxBracket, ...],
) -> tuple[Decimal, list[TaxBreakdownLine]]:
    """Apply marginal rates band by band.

    Bands the income does not reach are left out of the breakdown. Income
    exactly at a band's limit is taxed entirely within that band.

    Args:
        taxable_income: Annual taxable income.
        brackets: Ascending bracket table ending in an unbounded band.

    Returns:
        Tuple of (total_tax, breakdown lines in band order).
    """
    if taxable_income <= 0:
        return _ZERO, [
            TaxBreakdownLine(description="Taxable Income", taxable=_ZERO, rate=_ZERO, tax=_ZERO)
        ]

    breakdown: list[TaxBreakdownLine] = []
    total_tax = _ZERO
    remaining = taxable_income
    last_limit = _ZERO

    for bracket in brackets:
        if remaining <= 0:
            break

        if bracket.limit is None:
            in_band = remaining
        else:
            in_band = min(remaining, bracket.limit - last_limit)

        if in_band > 0:
            tax = in_band * bracket.rate
            if last_limit == 0:
                label = "First"
            elif bracket.limit is None:
                label = "Remaining"
            else:
                label = "Next"

            breakdown.append(
                TaxBreakdownLine(
                    description=f"{label} {_format_naira(in_band)}",
                    taxable=in_band,
                    rate=bracket.rate,
                    tax=tax,
                )
            )
            total_tax += tax
            remaining -= in_band

        if bracket.limit is not None:
            last_limit = bracket.limit

    return max(total_tax, _ZERO), breakdown


def assemble_result(
    regime: str,
    annual_income: Decimal,
    taxable_income: Decimal,
    total_tax: Decimal,
    breakdown: list[TaxBreakdownLine],
    relief: Decimal = _ZERO,
) -> TaxCalculationResult:
    """Package engine figures into an immutable result."""
    effective_rate = (total_tax / annual_income * 100) if annual_income > 0 else _ZERO
    return TaxCalculationResult(
        regime=regime,
        total_tax=total_tax,
        annual_income=annual_income,
        taxable_income=max(taxable_income, _ZERO),
        relief=relief,
        net_income=annual_income - total_tax,
        effective_rate=effective_rate,
        breakdown=tuple(breakdown),
    )


def compute_tax(
    tax_input: SalaryIncome | BusinessIncome | MixedIncome,
    table: str = DEFAULT_TAX_TABLE,
) -> TaxCalculationResult:
    """Estimate annual personal income tax under one regime.

    The "new" table taxes income after the cash adjustment for business
    income. The "old" table taxes gross income less the Consolidated
    Relief Allowance and ignores the income source.

    Args:
        tax_input: Validated income description.
        table: "new" (2026 law) or "old" (pre-2026 law).

    Returns:
        TaxCalculationResult with totals and per-band breakdown.

    Raises:
        ValueError: If ``table`` is not a known bracket table.
    """
    if table not in TAX_TABLES:
        raise ValueError(f"Unknown tax table: {table}. Available: {', '.join(sorted(TAX_TABLES))}")

    annual_income = annualise_income(tax_input.income, tax_input.period)

    relief = _ZERO
    if table == "old":
        relief = consolidated_relief(annual_income)
        taxable_income = annual_income - relief
    else:
        taxable_income = derive_taxable_income(annual_income, tax_input)

    logger.debug(
        "Computing %s-law tax: annual=%s taxable=%s source=%s",
        table, annual_income, taxable_income, tax_input.source,
    )

    total_tax, breakdown = calculate_bracket_tax(taxable_income, TAX_TABLES[table])
    return assemble_result(table, annual_income, taxable_income, total_tax, breakdown, relief)
