"""Savings plan growth: monthly contributions compounding at a fixed annual return.

Pure functions. No I/O.
"""

from decimal import Decimal

from finplan.engine.rounding import round2, to_decimal
from finplan.models.results import SavingsSummary
from finplan.models.savings import GrowthParameters, YearlyGrowth

MONTHS_PER_YEAR = 12


def monthly_return_rate(annual_return_rate: Decimal) -> Decimal:
    """Geometric monthly rate that compounds to the annual rate over 12 months.

    Not rounded: it is a multiplier, not an amount.
    """
    return (1 + to_decimal(annual_return_rate) / 100) ** (Decimal(1) / MONTHS_PER_YEAR) - 1


def generate_schedule(params: GrowthParameters) -> tuple[YearlyGrowth, ...]:
    """Year-by-year projection, simulated month by month.

    Interest is credited before each month's contribution. The result
    differs from a closed-form annuity because every monthly
    step is rounded to the cent.
    """
    rate = monthly_return_rate(params.annual_return_rate)
    contribution = round2(params.monthly_contribution)

    balance = round2(params.initial_balance)
    cumulative_invested = round2(params.initial_balance)
    cumulative_interest = Decimal("0")

    schedule: list[YearlyGrowth] = []
    for year in range(1, params.years + 1):
        start_balance = balance
        interest_earned = Decimal("0")
        invested = Decimal("0")

        for _ in range(MONTHS_PER_YEAR):
            interest = round2(balance * rate)
            interest_earned = round2(interest_earned + interest)
            balance = round2(balance + interest)

            balance = round2(balance + contribution)
            invested = round2(invested + contribution)

        cumulative_invested = round2(cumulative_invested + invested)
        cumulative_interest = round2(cumulative_interest + interest_earned)

        schedule.append(YearlyGrowth(
            year=year,
            start_balance=start_balance,
            invested_this_year=invested,
            interest_earned_this_year=interest_earned,
            end_balance=balance,
            cumulative_invested=cumulative_invested,
            cumulative_interest=cumulative_interest,
        ))

    return tuple(schedule)


def summarize(params: GrowthParameters, yearly: tuple[YearlyGrowth, ...]) -> SavingsSummary:
    if not yearly:
        initial = round2(params.initial_balance)
        return SavingsSummary(
            final_balance=initial,
            total_invested=initial,
            total_interest=Decimal("0"),
        )
    last = yearly[-1]
    return SavingsSummary(
        final_balance=last.end_balance,
        total_invested=last.cumulative_invested,
        total_interest=last.cumulative_interest,
    )


generate_growth_schedule = generate_schedule
