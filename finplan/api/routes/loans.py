"""Loan amortization routes."""

import logging

from fastapi import APIRouter

from finplan.api.schemas import (
    LoanRequest,
    LoanScheduleResponse,
    LoanSummaryResponse,
    MonthlyPaymentAmountResponse,
    MonthlyPaymentResponse,
    YearlyPaymentResponse,
)
from finplan.config import settings
from finplan.engine.amortization import derive_monthly_payment
from finplan.engine.scenarios import run_loan
from finplan.models.loan import LoanParameters, YearlyPayment
from finplan.models.results import LoanResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/loans", tags=["loans"])


def to_parameters(req: LoanRequest) -> LoanParameters:
    return LoanParameters(
        principal=req.principal,
        annual_interest_rate=req.annual_interest_rate,
        initial_amortization_rate=req.initial_amortization_rate,
        equity=req.equity,
    )


def summary_response(result: LoanResult) -> LoanSummaryResponse:
    s = result.summary
    return LoanSummaryResponse(
        monthly_payment=s.monthly_payment,
        months=s.months,
        total_interest=s.total_interest,
        total_principal=s.total_principal,
        total_paid=s.total_paid,
        remaining_balance=s.remaining_balance,
        fully_amortized=s.fully_amortized,
        amortizes=s.amortizes,
        payoff_year=s.payoff_year,
        purchase_price=result.parameters.purchase_price,
        loan_to_value=result.parameters.loan_to_value,
    )


def yearly_response(rows: tuple[YearlyPayment, ...]) -> list[YearlyPaymentResponse]:
    return [
        YearlyPaymentResponse(
            year=y.year,
            interest=y.interest,
            principal=y.principal,
            total_payment=y.total_payment,
            remaining_balance=y.remaining_balance,
        )
        for y in rows
    ]


@router.post("/payment", response_model=MonthlyPaymentAmountResponse)
def monthly_payment(req: LoanRequest):
    """Fixed monthly annuity payment only, without building the schedule."""
    return MonthlyPaymentAmountResponse(
        monthly_payment=derive_monthly_payment(
            req.principal, req.annual_interest_rate, req.initial_amortization_rate
        )
    )


@router.post("/schedule", response_model=LoanScheduleResponse)
def loan_schedule(req: LoanRequest):
    """Full monthly schedule with yearly aggregation and totals."""
    result = run_loan(to_parameters(req), max_months=settings.max_amortization_months)
    if not result.summary.fully_amortized:
        logger.info(
            "Schedule truncated for principal=%s rate=%s amortization=%s",
            req.principal, req.annual_interest_rate, req.initial_amortization_rate,
        )

    monthly = [
        MonthlyPaymentResponse(
            month=m.month,
            year=m.year,
            interest=m.interest,
            principal=m.principal,
            total_payment=m.total_payment,
            remaining_balance=m.remaining_balance,
        )
        for m in result.monthly
    ]
    return LoanScheduleResponse(
        summary=summary_response(result),
        monthly=monthly,
        yearly=yearly_response(result.yearly),
    )
