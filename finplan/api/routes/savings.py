"""Savings plan routes."""

from fastapi import APIRouter

from finplan.api.schemas import (
    SavingsRequest,
    SavingsScheduleResponse,
    SavingsSummaryResponse,
    YearlyGrowthResponse,
)
from finplan.engine.scenarios import run_savings
from finplan.models.results import SavingsResult
from finplan.models.savings import GrowthParameters

router = APIRouter(prefix="/api/v1/savings", tags=["savings"])


def to_parameters(req: SavingsRequest) -> GrowthParameters:
    return GrowthParameters(
        initial_balance=req.initial_balance,
        monthly_contribution=req.monthly_contribution,
        annual_return_rate=req.annual_return_rate,
        years=req.years,
    )


def summary_response(result: SavingsResult) -> SavingsSummaryResponse:
    return SavingsSummaryResponse(
        final_balance=result.summary.final_balance,
        total_invested=result.summary.total_invested,
        total_interest=result.summary.total_interest,
    )


def yearly_response(result: SavingsResult) -> list[YearlyGrowthResponse]:
    return [
        YearlyGrowthResponse(
            year=y.year,
            start_balance=y.start_balance,
            invested_this_year=y.invested_this_year,
            interest_earned_this_year=y.interest_earned_this_year,
            end_balance=y.end_balance,
            cumulative_invested=y.cumulative_invested,
            cumulative_interest=y.cumulative_interest,
        )
        for y in result.yearly
    ]


@router.post("/schedule", response_model=SavingsScheduleResponse)
def savings_schedule(req: SavingsRequest):
    """Year-by-year growth of a savings plan."""
    result = run_savings(to_parameters(req))
    return SavingsScheduleResponse(
        summary=summary_response(result),
        yearly=yearly_response(result),
    )
