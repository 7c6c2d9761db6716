"""Nigerian PIT constants — bracket tables and Consolidated Relief Allowance.

Hardcoded Python constants (not DB-driven). Two regimes are modelled:

- "old": pre-2026 Personal Income Tax Act schedule. Gross income is reduced
  by the Consolidated Relief Allowance before bracketing.
- "new": Nigeria Tax Act 2025, effective 1 January 2026. The first ₦800,000
  sits in a 0% band; CRA no longer applies.

Limits are cumulative upper edges on annual taxable income in naira.
"""

from decimal import Decimal
from typing import Literal, NamedTuple


class TaxBracket(NamedTuple):
    """A single income tax bracket."""

    limit: Decimal | None  # inclusive upper edge; None = no cap
    rate: Decimal


TaxTable = Literal["new", "old"]

# Nigeria Tax Act 2025 (from 1 Jan 2026)
NEW_BRACKETS = (
    TaxBracket(Decimal("800000"), Decimal("0")),
    TaxBracket(Decimal("3000000"), Decimal("0.15")),
    TaxBracket(Decimal("5000000"), Decimal("0.18")),
    TaxBracket(Decimal("10000000"), Decimal("0.21")),
    TaxBracket(Decimal("20000000"), Decimal("0.23")),
    TaxBracket(None, Decimal("0.25")),
)

# PITA Sixth Schedule (2011 amendment, in force until 31 Dec 2025)
OLD_BRACKETS = (
    TaxBracket(Decimal("300000"), Decimal("0.07")),
    TaxBracket(Decimal("600000"), Decimal("0.11")),
    TaxBracket(Decimal("1100000"), Decimal("0.15")),
    TaxBracket(Decimal("1600000"), Decimal("0.19")),
    TaxBracket(Decimal("3200000"), Decimal("0.21")),
    TaxBracket(None, Decimal("0.24")),
)

TAX_TABLES: dict[str, tuple[TaxBracket, ...]] = {
    "new": NEW_BRACKETS,
    "old": OLD_BRACKETS,
}

DEFAULT_TAX_TABLE: TaxTable = "new"

# Consolidated Relief Allowance (old regime only):
# max(₦200,000, 1% of gross) + 20% of gross
FIXED_RELIEF = Decimal("200000")
RELIEF_INCOME_RATE = Decimal("0.01")
CONSOLIDATED_RATE = Decimal("0.20")

PERIODS_PER_YEAR: dict[str, int] = {
    "monthly": 12,
    "annually": 1,
}
