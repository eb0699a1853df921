from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class GrowthParameters:
    initial_balance: Decimal
    monthly_contribution: Decimal
    annual_return_rate: Decimal  # Percent, e.g. Decimal("7") for 7%/yr
    years: int


@dataclass(frozen=True)
class YearlyGrowth:
    year: int
    start_balance: Decimal
    invested_this_year: Decimal
    interest_earned_this_year: Decimal
    end_balance: Decimal
    cumulative_invested: Decimal  # Includes the initial balance
    cumulative_interest: Decimal
