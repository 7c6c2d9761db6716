"""Income normalisation and taxable-income derivation."""

import logging
from decimal import Decimal

from config.settings import settings
from src.calculators.models import BusinessIncome, MixedIncome, SalaryIncome
from src.calculators.tax_data import (
    CONSOLIDATED_RATE,
    FIXED_RELIEF,
    PERIODS_PER_YEAR,
    RELIEF_INCOME_RATE,
)

logger = logging.getLogger(__name__)

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


def annualise_income(income: Decimal, period: str) -> Decimal:
    """Convert income stated per ``period`` into an annual figure."""
    if income < 0:
        logger.warning("Negative income %s clamped to 0", income)
        income = _ZERO
    return income * PERIODS_PER_YEAR.get(period, 1)


def _fraction(percentage: Decimal, name: str) -> Decimal:
    """Turn a 0-100 percentage into a 0-1 fraction, clamping out-of-range values."""
    if percentage < 0 or percentage > _HUNDRED:
        logger.warning("%s %s outside [0, 100], clamping", name, percentage)
        percentage = min(max(percentage, _ZERO), _HUNDRED)
    return percentage / _HUNDRED


def resolve_business_percentage(tax_input: MixedIncome) -> Decimal:
    """Business share of a mixed income, falling back to the configured default."""
    if tax_input.business_income_percentage is not None:
        return tax_input.business_income_percentage
    default = Decimal(str(settings.default_business_income_percentage))
    logger.warning(
        "Mixed income without business_income_percentage, assuming %s%%", default
    )
    return default


def derive_taxable_income(
    annual_income: Decimal,
    tax_input: SalaryIncome | BusinessIncome | MixedIncome,
) -> Decimal:
    """Estimate the portion of annual income visible to the tax authority.

    Cash receipts are treated as unobserved: the cash share of business
    income is excluded from taxable income entirely. Salary income is
    always fully taxable.

    Args:
        annual_income: Annualised gross income (>= 0).
        tax_input: The caller's income description.

    Returns:
        Taxable income, never negative.
    """
    if isinstance(tax_input, BusinessIncome):
        non_cash = 1 - _fraction(tax_input.cash_percentage, "cash_percentage")
        taxable = annual_income * non_cash
    elif isinstance(tax_input, MixedIncome):
        business_share = _fraction(
            resolve_business_percentage(tax_input), "business_income_percentage"
        )
        business_portion = annual_income * business_share
        salary_portion = annual_income - business_portion
        non_cash = 1 - _fraction(tax_input.cash_percentage, "cash_percentage")
        taxable = salary_portion + business_portion * non_cash
    else:
        taxable = annual_income

    return max(taxable, _ZERO)


def consolidated_relief(annual_income: Decimal) -> Decimal:
    """Consolidated Relief Allowance under the pre-2026 regime.

    max(₦200,000, 1% of gross) + 20% of gross.
    """
    return max(FIXED_RELIEF, annual_income * RELIEF_INCOME_RATE) + CONSOLIDATED_RATE * annual_income
