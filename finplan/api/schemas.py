"""Pydantic schemas for API request/response models."""

from decimal import Decimal

from pydantic import BaseModel, Field

from finplan.config import settings


# ---- Request schemas ----

class LoanRequest(BaseModel):
    principal: Decimal = Field(..., gt=0, description="Loan amount")
    annual_interest_rate: Decimal = Field(..., ge=0, description="Nominal rate in percent, e.g. 3.5")
    initial_amortization_rate: Decimal = Field(..., ge=0, description="Initial repayment in percent, e.g. 2.0")
    equity: Decimal = Field(Decimal("0"), ge=0, description="Own funds, informational only")


class SavingsRequest(BaseModel):
    initial_balance: Decimal = Field(Decimal("0"), ge=0)
    monthly_contribution: Decimal = Field(Decimal("0"), ge=0)
    annual_return_rate: Decimal = Field(..., gt=-100, description="Expected return in percent, e.g. 7")
    years: int = Field(..., ge=0, le=settings.max_projection_years)


class NamedLoanRequest(LoanRequest):
    name: str = Field(..., min_length=1)


class NamedSavingsRequest(SavingsRequest):
    name: str = Field(..., min_length=1)


class LoanComparisonRequest(BaseModel):
    scenarios: list[NamedLoanRequest] = Field(..., min_length=1)


class SavingsComparisonRequest(BaseModel):
    scenarios: list[NamedSavingsRequest] = Field(..., min_length=1)


# ---- Response schemas ----

class MonthlyPaymentResponse(BaseModel):
    month: int
    year: int
    interest: Decimal
    principal: Decimal
    total_payment: Decimal
    remaining_balance: Decimal


class YearlyPaymentResponse(BaseModel):
    year: int
    interest: Decimal
    principal: Decimal
    total_payment: Decimal
    remaining_balance: Decimal


class LoanSummaryResponse(BaseModel):
    monthly_payment: Decimal
    months: int
    total_interest: Decimal
    total_principal: Decimal
    total_paid: Decimal
    remaining_balance: Decimal
    fully_amortized: bool
    amortizes: bool
    payoff_year: int | None = None
    purchase_price: Decimal
    loan_to_value: Decimal


class MonthlyPaymentAmountResponse(BaseModel):
    monthly_payment: Decimal


class LoanScheduleResponse(BaseModel):
    summary: LoanSummaryResponse
    monthly: list[MonthlyPaymentResponse] = []
    yearly: list[YearlyPaymentResponse] = []


class YearlyGrowthResponse(BaseModel):
    year: int
    start_balance: Decimal
    invested_this_year: Decimal
    interest_earned_this_year: Decimal
    end_balance: Decimal
    cumulative_invested: Decimal
    cumulative_interest: Decimal


class SavingsSummaryResponse(BaseModel):
    final_balance: Decimal
    total_invested: Decimal
    total_interest: Decimal


class SavingsScheduleResponse(BaseModel):
    summary: SavingsSummaryResponse
    yearly: list[YearlyGrowthResponse] = []


class NamedLoanResponse(BaseModel):
    name: str
    summary: LoanSummaryResponse
    yearly: list[YearlyPaymentResponse] = []


class NamedSavingsResponse(BaseModel):
    name: str
    summary: SavingsSummaryResponse
    yearly: list[YearlyGrowthResponse] = []
