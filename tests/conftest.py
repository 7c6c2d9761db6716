"""Shared test fixtures."""

from pathlib import Path
from typing import Any

import pytest
import yaml

from src.calculators.models import BusinessIncome, MixedIncome, SalaryIncome

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def scenarios() -> list[dict[str, Any]]:
    """Load hand-verified reference scenarios from YAML."""
    data = yaml.safe_load((FIXTURES_DIR / "scenarios.yaml").read_text(encoding="utf-8"))
    return data["scenarios"]


@pytest.fixture
def salary_input() -> SalaryIncome:
    """₦150,000 a month from employment."""
    return SalaryIncome(income=150000, period="monthly")


@pytest.fixture
def business_input() -> BusinessIncome:
    """₦2m a year of business income, half received in cash."""
    return BusinessIncome(income=2000000, period="annually", cash_percentage=50)


@pytest.fixture
def mixed_input() -> MixedIncome:
    """₦6m a year, half from business, 40% of the business share in cash."""
    return MixedIncome(
        income=6000000,
        period="annually",
        cash_percentage=40,
        business_income_percentage=50,
    )
