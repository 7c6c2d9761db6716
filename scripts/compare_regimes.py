"""Compare pre-2026 and 2026 personal income tax for a single income.

Usage:
    python scripts/compare_regimes.py --income 150000 --period monthly
    python scripts/compare_regimes.py --income 6000000 --period annually \
        --source mixed --cash-percentage 40 --business-percentage 50
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config.settings import settings
from src.calculators.comparison import compare_regimes
from src.calculators.models import TaxCalculationResult, TaxComparison, parse_tax_input
from src.calculators.take_home import calculate_take_home

logging.basicConfig(level=settings.log_level, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


def log_result(title: str, result: TaxCalculationResult) -> None:
    """Log one regime's figures and band breakdown."""
    logger.info("")
    logger.info(title)
    logger.info("-" * 40)
    logger.info("  Annual gross income:  ₦%s", f"{result.annual_income:,.2f}")
    if result.relief:
        logger.info("  Relief allowance:     ₦%s", f"{result.relief:,.2f}")
    logger.info("  Taxable income:       ₦%s", f"{result.taxable_income:,.2f}")
    for line in result.breakdown:
        logger.info(
            "    %-28s %5s%%  ₦%s",
            line.description,
            f"{line.rate * 100:.0f}",
            f"{line.tax:,.2f}",
        )
    logger.info("  Total annual tax:     ₦%s", f"{result.total_tax:,.2f}")
    logger.info("  Effective rate:       %s%%", f"{result.effective_rate:.2f}")

    take_home = calculate_take_home(result, "monthly")
    logger.info("  Monthly take-home:    ₦%s", f"{take_home['per_period']['take_home']:,.2f}")


def log_comparison(comparison: TaxComparison) -> None:
    """Log the formatted comparison."""
    logger.info("=" * 70)
    logger.info("PERSONAL INCOME TAX — PRE-2026 vs 2026")
    logger.info("=" * 70)

    log_result("PRE-2026 (with Consolidated Relief Allowance)", comparison.old)
    log_result("2026 RULES", comparison.new)

    label = "Increase" if comparison.is_increase else "Savings"
    logger.info("")
    logger.info(
        "Annual %s: ₦%s (%s%%)",
        label,
        f"{abs(comparison.savings):,.2f}",
        f"{comparison.savings_percentage:.1f}",
    )
    logger.info("")
    logger.info("Insight: %s", comparison.insight)
    logger.info("=" * 70)


def main() -> None:
    """Parse arguments and run the comparison."""
    parser = argparse.ArgumentParser(description="Nigerian PIT regime comparison")
    parser.add_argument("--income", required=True, help="Gross income for the period")
    parser.add_argument("--period", choices=["monthly", "annually"], default="monthly")
    parser.add_argument("--source", choices=["salary", "business", "mixed"], default="salary")
    parser.add_argument(
        "--cash-percentage", default="0",
        help="Estimated share of business income received as cash (0-100)",
    )
    parser.add_argument(
        "--business-percentage", default=None,
        help="Share of total income from business, mixed source only (0-100)",
    )
    args = parser.parse_args()

    payload: dict[str, object] = {
        "income": args.income,
        "period": args.period,
        "source": args.source,
    }
    if args.source != "salary":
        payload["cash_percentage"] = args.cash_percentage
    if args.source == "mixed" and args.business_percentage is not None:
        payload["business_income_percentage"] = args.business_percentage

    try:
        tax_input = parse_tax_input(payload)
    except ValidationError as e:
        logger.error("Invalid input:\n%s", e)
        sys.exit(2)

    log_comparison(compare_regimes(tax_input))


if __name__ == "__main__":
    main()
