"""Old-law vs new-law comparison with a plain-language insight."""

import logging
from decimal import Decimal
from functools import lru_cache

from config import load_yaml_config
from src.calculators.income_tax import compute_tax
from src.calculators.models import (
    BusinessIncome,
    MixedIncome,
    SalaryIncome,
    TaxCalculationResult,
    TaxComparison,
)

logger = logging.getLogger(__name__)

_TOP_BRACKET_RATE = Decimal("0.23")
_CASH_HEAVY_PERCENTAGE = Decimal("50")
_SIGNIFICANT_SAVINGS_SHARE = Decimal("0.15")
_MID_INCOME_RANGE = (Decimal("1000000"), Decimal("5000000"))


@lru_cache(maxsize=1)
def _insight_messages() -> dict[str, str]:
    return load_yaml_config("insights.yaml")["insights"]


def _format_rate(rate: Decimal) -> str:
    return f"{(rate * 100).normalize():f}%"


def generate_insight(
    new: TaxCalculationResult,
    old: TaxCalculationResult,
    tax_input: SalaryIncome | BusinessIncome | MixedIncome,
) -> str:
    """Pick the message that best explains the new-law outcome.

    Rules are checked in order; the first match wins.
    """
    messages = _insight_messages()
    savings = old.total_tax - new.total_tax
    highest_rate = new.highest_rate

    if new.total_tax <= 0:
        key = "tax_free"
    elif highest_rate >= _TOP_BRACKET_RATE:
        key = "top_bracket_salary" if isinstance(tax_input, SalaryIncome) else "top_bracket_business"
    elif isinstance(tax_input, BusinessIncome):
        key = "business_cash_heavy" if tax_input.cash_percentage > _CASH_HEAVY_PERCENTAGE else "business"
    elif isinstance(tax_input, MixedIncome):
        key = "mixed"
    elif savings > 0 and old.total_tax > 0 and savings / old.total_tax > _SIGNIFICANT_SAVINGS_SHARE:
        key = "significant_savings"
    elif _MID_INCOME_RANGE[0] < new.annual_income < _MID_INCOME_RANGE[1]:
        key = "salaried_mid_income"
    else:
        key = "default"

    logger.debug("Selected insight=%s", key)
    return messages[key].format(highest_bracket=_format_rate(highest_rate))


def compare_regimes(
    tax_input: SalaryIncome | BusinessIncome | MixedIncome,
) -> TaxComparison:
    """Run the engine under both regimes and summarise the difference.

    ``savings`` is positive when the new law charges less.
    """
    old = compute_tax(tax_input, "old")
    new = compute_tax(tax_input, "new")

    savings = old.total_tax - new.total_tax
    savings_percentage = (savings / old.total_tax * 100) if old.total_tax > 0 else Decimal("0")

    logger.info(
        "Compared regimes: old=%s new=%s savings=%s", old.total_tax, new.total_tax, savings
    )

    return TaxComparison(
        old=old,
        new=new,
        savings=savings,
        savings_percentage=savings_percentage,
        insight=generate_insight(new, old, tax_input),
    )
