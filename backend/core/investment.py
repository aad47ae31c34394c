from __future__ import annotations

from typing import Dict, List, Sequence

from pydantic import BaseModel, ConfigDict, Field


class InvestmentParams(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    months: int = Field(gt=0)
    initialAmount: float = Field(ge=0)
    monthlyContribution: float = Field(ge=0)
    # percent, e.g. 7 means 7% per year
    annualInterestRate: float = Field(ge=0, le=100)


class InvestmentWithId(InvestmentParams):
    id: str = Field(min_length=1)

    def to_params(self) -> InvestmentParams:
        return InvestmentParams.model_validate(self.model_dump(exclude={"id"}))


class MonthlyDataPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    month: int
    value: float
    monthlyInterest: float
    contribution: float


class InvestmentResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    monthlyData: List[MonthlyDataPoint]
    totalValue: float
    normalReturn: float
    totalGain: float
    totalContributions: float
    totalInterest: float


class MultipleInvestmentResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    investments: Dict[str, InvestmentResult]


def monthly_interest_rate(annual_interest_rate: float) -> float:
    """Convert an annual percentage (7 == 7%) to a per-month decimal rate."""
    return annual_interest_rate / 100 / 12


def calculate_investment(params: InvestmentParams) -> InvestmentResult:
    """
    Month-by-month balance for one scenario.

    Order of operations (per month):
      1) Interest on the opening balance (skipped in month 1).
      2) Add the monthly contribution and the interest.
      3) Record the closing balance.

    Starts from params.initialAmount; expects params that already went
    through validate_and_parse_params.
    """
    rate = monthly_interest_rate(params.annualInterestRate)
    contribution = params.monthlyContribution

    total = params.initialAmount
    monthly_data: List[MonthlyDataPoint] = []

    for i in range(params.months):
        interest = total * rate if i > 0 else 0.0
        total += contribution + interest

        monthly_data.append(
            MonthlyDataPoint(
                month=i + 1,
                value=total,
                monthlyInterest=interest,
                contribution=contribution,
            )
        )

    total_contributions = params.initialAmount + params.months * contribution
    # no-growth baseline; same sum as total_contributions, reported separately for charts
    normal_return = params.initialAmount + params.months * contribution

    return InvestmentResult(
        monthlyData=monthly_data,
        totalValue=total,
        normalReturn=normal_return,
        totalGain=total - normal_return,
        totalContributions=total_contributions,
        totalInterest=total - total_contributions,
    )


def calculate_multiple_investments(
    investments: Sequence[InvestmentWithId],
) -> MultipleInvestmentResult:
    """Run each scenario on its own and key the results by id (last id wins)."""
    results: Dict[str, InvestmentResult] = {}
    for investment in investments:
        results[investment.id] = calculate_investment(investment.to_params())
    return MultipleInvestmentResult(investments=results)


__all__ = [
    "InvestmentParams",
    "InvestmentWithId",
    "MonthlyDataPoint",
    "InvestmentResult",
    "MultipleInvestmentResult",
    "monthly_interest_rate",
    "calculate_investment",
    "calculate_multiple_investments",
]
