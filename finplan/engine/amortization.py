"""Annuity loan amortization.

Pure functions: Decimal in, dataclass out. No I/O.

The monthly payment is fixed up front from the interest rate plus the
initial amortization rate, the way German annuity mortgages are quoted,
and the schedule runs until the balance reaches zero.
"""

import logging
from decimal import Decimal

from finplan.engine.rounding import round2, to_decimal
from finplan.models.loan import LoanParameters, MonthlyPayment, YearlyPayment
from finplan.models.results import LoanSummary

logger = logging.getLogger(__name__)

MAX_MONTHS = 1200  # 100 years


def derive_monthly_payment(
    principal: Decimal,
    annual_interest_rate: Decimal,
    initial_amortization_rate: Decimal,
) -> Decimal:
    """Fixed monthly annuity payment.

    Args:
        principal: Loan amount
        annual_interest_rate: Percent per year (e.g. 3.5)
        initial_amortization_rate: Percent of principal repaid in year one (e.g. 2.0)
    """
    principal = to_decimal(principal)
    rate = to_decimal(annual_interest_rate) + to_decimal(initial_amortization_rate)
    annual = principal * rate / 100
    return round2(annual / 12)


def generate_schedule(
    params: LoanParameters,
    max_months: int = MAX_MONTHS,
) -> tuple[MonthlyPayment, ...]:
    """Month-by-month schedule until the loan is repaid.

    Stops at max_months even if a balance remains (payment not covering
    interest). The truncated schedule is returned as-is.
    """
    payment = derive_monthly_payment(
        params.principal, params.annual_interest_rate, params.initial_amortization_rate
    )
    annual_rate = to_decimal(params.annual_interest_rate)
    balance = round2(params.principal)

    rows: list[MonthlyPayment] = []
    month = 1
    while balance > 0 and month <= max_months:
        # Divide the exact product so half-cent ties round up
        interest = round2(balance * annual_rate / 100 / 12)
        principal_paid = round2(payment - interest)

        # Final payment only clears what is left
        if balance < principal_paid:
            principal_paid = balance

        total = round2(interest + principal_paid)
        balance = max(Decimal("0.00"), round2(balance - principal_paid))

        rows.append(MonthlyPayment(
            month=month,
            year=(month - 1) // 12 + 1,
            interest=interest,
            principal=principal_paid,
            total_payment=total,
            remaining_balance=balance,
        ))
        month += 1

    if balance > 0 and rows:
        logger.warning(
            "Loan of %s not repaid after %d months (payment %s), %s outstanding",
            params.principal, len(rows), payment, balance,
        )

    return tuple(rows)


def aggregate_yearly(monthly: tuple[MonthlyPayment, ...]) -> tuple[YearlyPayment, ...]:
    """Fold a monthly schedule into calendar-year rows.

    A year closes on every 12th month or on the last row, so a trailing
    partial year is kept. Sums are rounded after each addition.
    """
    yearly: list[YearlyPayment] = []
    year = 1
    interest = Decimal("0")
    principal = Decimal("0")
    total = Decimal("0")

    for index, row in enumerate(monthly):
        interest = round2(interest + row.interest)
        principal = round2(principal + row.principal)
        total = round2(total + row.total_payment)

        if row.month % 12 == 0 or index == len(monthly) - 1:
            yearly.append(YearlyPayment(
                year=year,
                interest=interest,
                principal=principal,
                total_payment=total,
                remaining_balance=row.remaining_balance,
            ))
            year += 1
            interest = Decimal("0")
            principal = Decimal("0")
            total = Decimal("0")

    return tuple(yearly)


def amortizes(params: LoanParameters) -> bool:
    """Whether the payment exceeds the first month's interest on the full principal."""
    payment = derive_monthly_payment(
        params.principal, params.annual_interest_rate, params.initial_amortization_rate
    )
    annual_rate = to_decimal(params.annual_interest_rate)
    first_interest = round2(round2(params.principal) * annual_rate / 100 / 12)
    return payment > first_interest


def summarize(
    params: LoanParameters,
    monthly: tuple[MonthlyPayment, ...],
) -> LoanSummary:
    """Headline totals for a monthly schedule."""
    total_interest = Decimal("0")
    total_principal = Decimal("0")
    total_paid = Decimal("0")
    for row in monthly:
        total_interest = round2(total_interest + row.interest)
        total_principal = round2(total_principal + row.principal)
        total_paid = round2(total_paid + row.total_payment)

    remaining = monthly[-1].remaining_balance if monthly else round2(params.principal)
    fully_amortized = remaining == 0

    return LoanSummary(
        monthly_payment=derive_monthly_payment(
            params.principal, params.annual_interest_rate, params.initial_amortization_rate
        ),
        months=len(monthly),
        total_interest=total_interest,
        total_principal=total_principal,
        total_paid=total_paid,
        remaining_balance=remaining,
        fully_amortized=fully_amortized,
        amortizes=amortizes(params),
        payoff_year=monthly[-1].year if monthly and fully_amortized else None,
    )


generate_amortization_schedule = generate_schedule
