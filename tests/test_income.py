"""Tests for income normalisation and taxable-income derivation."""

import logging
from decimal import Decimal

import pytest

from config.settings import settings
from src.calculators.income import (
    annualise_income,
    consolidated_relief,
    derive_taxable_income,
    resolve_business_percentage,
)
from src.calculators.models import BusinessIncome, MixedIncome, SalaryIncome

D = Decimal


class TestAnnualise:
    def test_monthly(self) -> None:
        assert annualise_income(D("150000"), "monthly") == D("1800000")

    def test_annually(self) -> None:
        assert annualise_income(D("2000000"), "annually") == D("2000000")

    def test_zero(self) -> None:
        assert annualise_income(D("0"), "monthly") == 0

    def test_negative_clamped(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            assert annualise_income(D("-5"), "monthly") == 0
        assert "clamped" in caplog.text


class TestDeriveTaxableIncome:
    def test_salary_fully_taxable(self) -> None:
        tax_input = SalaryIncome(income=1, period="annually")
        assert derive_taxable_income(D("1800000"), tax_input) == D("1800000")

    def test_business_excludes_cash_share(self) -> None:
        tax_input = BusinessIncome(income=1, period="annually", cash_percentage=50)
        assert derive_taxable_income(D("2000000"), tax_input) == D("1000000")

    def test_business_no_cash(self) -> None:
        tax_input = BusinessIncome(income=1, period="annually", cash_percentage=0)
        assert derive_taxable_income(D("2000000"), tax_input) == D("2000000")

    def test_mixed_discounts_business_share_only(self) -> None:
        tax_input = MixedIncome(
            income=1, period="annually", cash_percentage=40, business_income_percentage=50
        )
        assert derive_taxable_income(D("6000000"), tax_input) == D("4800000")

    def test_mixed_all_salary(self) -> None:
        tax_input = MixedIncome(
            income=1, period="annually", cash_percentage=100, business_income_percentage=0
        )
        assert derive_taxable_income(D("6000000"), tax_input) == D("6000000")

    def test_out_of_range_cash_clamped(self, caplog: pytest.LogCaptureFixture) -> None:
        """Values that bypass validation are clamped, never producing negative income."""
        tax_input = BusinessIncome.model_construct(
            income=D("1"), period="annually", cash_percentage=D("150")
        )
        with caplog.at_level(logging.WARNING):
            assert derive_taxable_income(D("2000000"), tax_input) == 0
        assert "cash_percentage" in caplog.text

    def test_negative_cash_clamped(self) -> None:
        tax_input = BusinessIncome.model_construct(
            income=D("1"), period="annually", cash_percentage=D("-20")
        )
        assert derive_taxable_income(D("2000000"), tax_input) == D("2000000")


class TestMissingBusinessSplit:
    """Mixed income without a business share uses the configured default."""

    def test_defaults_to_half(self, caplog: pytest.LogCaptureFixture) -> None:
        tax_input = MixedIncome(income=6000000, period="annually", cash_percentage=40)
        with caplog.at_level(logging.WARNING):
            assert resolve_business_percentage(tax_input) == D("50")
            assert derive_taxable_income(D("6000000"), tax_input) == D("4800000")
        assert "assuming 50" in caplog.text

    def test_configured_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "default_business_income_percentage", 100.0)
        tax_input = MixedIncome(income=6000000, period="annually", cash_percentage=40)
        assert derive_taxable_income(D("6000000"), tax_input) == D("3600000")

    def test_explicit_value_wins(self) -> None:
        tax_input = MixedIncome(
            income=1, period="annually", cash_percentage=0, business_income_percentage=25
        )
        assert resolve_business_percentage(tax_input) == D("25")


class TestConsolidatedRelief:
    def test_fixed_floor(self) -> None:
        """Below ₦20m gross, the ₦200,000 floor beats 1% of gross."""
        assert consolidated_relief(D("1800000")) == D("560000")

    def test_one_percent_above_floor(self) -> None:
        assert consolidated_relief(D("30000000")) == D("6300000")

    def test_zero_income(self) -> None:
        assert consolidated_relief(D("0")) == D("200000")
