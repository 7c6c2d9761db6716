"""Take-home pay summary — annual and per-period figures for a tax result."""

from decimal import Decimal
from typing import Any

from src.calculators.models import TaxCalculationResult
from src.calculators.tax_data import PERIODS_PER_YEAR


def calculate_take_home(
    result: TaxCalculationResult,
    pay_period: str = "monthly",
) -> dict[str, Any]:
    """Split a tax result into annual and per-period take-home figures.

    Args:
        result: Output of ``compute_tax``.
        pay_period: One of monthly, annually.

    Returns:
        Dict with annual and per-period gross, income tax and take-home.
    """
    if pay_period not in PERIODS_PER_YEAR:
        valid = ", ".join(sorted(PERIODS_PER_YEAR))
        return {"error": f"Invalid pay period: {pay_period}. Must be one of: {valid}"}

    periods = PERIODS_PER_YEAR[pay_period]
    divisor = Decimal(periods)

    return {
        "regime": result.regime,
        "pay_period": pay_period,
        "periods_per_year": periods,
        "annual": {
            "gross": float(result.annual_income),
            "income_tax": float(result.total_tax),
            "take_home": float(result.net_income),
        },
        "per_period": {
            "gross": float(result.annual_income / divisor),
            "income_tax": float(result.total_tax / divisor),
            "take_home": float(result.net_income / divisor),
        },
        "effective_rate": float(round(result.effective_rate, 2)),
    }
