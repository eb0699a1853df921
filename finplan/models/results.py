from dataclasses import dataclass, field
from decimal import Decimal

from finplan.models.loan import LoanParameters, MonthlyPayment, YearlyPayment
from finplan.models.savings import GrowthParameters, YearlyGrowth


@dataclass(frozen=True)
class LoanSummary:
    monthly_payment: Decimal = Decimal("0")
    months: int = 0
    total_interest: Decimal = Decimal("0")
    total_principal: Decimal = Decimal("0")
    total_paid: Decimal = Decimal("0")
    remaining_balance: Decimal = Decimal("0")  # Non-zero only when truncated

    # False when the schedule stopped at the period ceiling with debt left
    fully_amortized: bool = True
    # Payment exceeds the first month's interest on the full principal
    amortizes: bool = True

    payoff_year: int | None = None


@dataclass(frozen=True)
class LoanResult:
    parameters: LoanParameters
    summary: LoanSummary = field(default_factory=LoanSummary)
    monthly: tuple[MonthlyPayment, ...] = ()
    yearly: tuple[YearlyPayment, ...] = ()


@dataclass(frozen=True)
class SavingsSummary:
    final_balance: Decimal = Decimal("0")
    total_invested: Decimal = Decimal("0")
    total_interest: Decimal = Decimal("0")


@dataclass(frozen=True)
class SavingsResult:
    parameters: GrowthParameters
    summary: SavingsSummary = field(default_factory=SavingsSummary)
    yearly: tuple[YearlyGrowth, ...] = ()


@dataclass(frozen=True)
class NamedScenario:
    """A caller-labelled parameter set, e.g. one offer among several banks."""

    name: str
    parameters: LoanParameters | GrowthParameters
