"""Pydantic models for tax engine inputs and results."""

from decimal import Decimal
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator
from pydantic.alias_generators import to_camel

from config.settings import settings

IncomePeriod = Literal["monthly", "annually"]

# Accept both snake_case and the web form's camelCase keys.
_MODEL_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


# --- Inputs ---


class _IncomeBase(BaseModel):
    model_config = _MODEL_CONFIG

    income: Decimal = Field(ge=0)
    period: IncomePeriod = "monthly"


class SalaryIncome(_IncomeBase):
    """Fully visible employment income."""

    source: Literal["salary"] = "salary"


class BusinessIncome(_IncomeBase):
    """Business income, part of it received as untracked cash."""

    source: Literal["business"] = "business"
    cash_percentage: Decimal = Field(ge=0, le=100)


class MixedIncome(_IncomeBase):
    """Income split between salary and business activity.

    ``cash_percentage`` applies to the business share only. A missing
    ``business_income_percentage`` falls back to
    ``settings.default_business_income_percentage`` at calculation time,
    unless ``settings.require_business_income_percentage`` is set, in which
    case validation rejects it here.
    """

    source: Literal["mixed"] = "mixed"
    cash_percentage: Decimal = Field(ge=0, le=100)
    business_income_percentage: Decimal | None = Field(default=None, ge=0, le=100)

    @model_validator(mode="after")
    def _check_business_split(self) -> "MixedIncome":
        if self.business_income_percentage is None and settings.require_business_income_percentage:
            raise ValueError("business_income_percentage is required for mixed income")
        return self


TaxInput = Annotated[
    SalaryIncome | BusinessIncome | MixedIncome,
    Field(discriminator="source"),
]

_TAX_INPUT_ADAPTER: TypeAdapter[SalaryIncome | BusinessIncome | MixedIncome] = TypeAdapter(TaxInput)


def parse_tax_input(payload: dict[str, Any]) -> SalaryIncome | BusinessIncome | MixedIncome:
    """Validate a raw mapping (e.g. a submitted form) into a tax input.

    Raises:
        pydantic.ValidationError: On negative income, percentages outside
            [0, 100], an unknown source/period, or a missing business split
            when that is configured as required.
    """
    return _TAX_INPUT_ADAPTER.validate_python(payload)


# --- Results ---


class TaxBreakdownLine(BaseModel):
    """Tax charged on the slice of income falling in one band."""

    model_config = _MODEL_CONFIG

    description: str
    taxable: Decimal
    rate: Decimal
    tax: Decimal


class TaxCalculationResult(BaseModel):
    """Outcome of one engine run against a single bracket table."""

    model_config = _MODEL_CONFIG

    regime: Literal["new", "old"]
    total_tax: Decimal
    annual_income: Decimal
    taxable_income: Decimal
    relief: Decimal = Decimal("0")
    net_income: Decimal
    effective_rate: Decimal
    breakdown: tuple[TaxBreakdownLine, ...]

    @property
    def highest_rate(self) -> Decimal:
        """Marginal rate of the highest band touched."""
        return max((line.rate for line in self.breakdown), default=Decimal("0"))


class TaxComparison(BaseModel):
    """Old-law and new-law results for the same input."""

    model_config = _MODEL_CONFIG

    old: TaxCalculationResult
    new: TaxCalculationResult
    savings: Decimal
    savings_percentage: Decimal
    insight: str

    @property
    def is_increase(self) -> bool:
        return self.savings < 0
