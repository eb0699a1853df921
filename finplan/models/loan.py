from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

FOUR_PLACES = Decimal("0.0001")


@dataclass(frozen=True)
class LoanParameters:
    principal: Decimal  # Loan amount
    annual_interest_rate: Decimal  # Percent, e.g. Decimal("3.5") for 3.5%/yr
    initial_amortization_rate: Decimal  # Percent repaid in year one
    equity: Decimal = Decimal("0")  # Own funds; informational only

    @property
    def purchase_price(self) -> Decimal:
        return Decimal(str(self.principal)) + Decimal(str(self.equity))

    @property
    def loan_to_value(self) -> Decimal:
        if self.purchase_price <= 0:
            return Decimal("0")
        return (Decimal(str(self.principal)) / self.purchase_price).quantize(FOUR_PLACES, ROUND_HALF_UP)


@dataclass(frozen=True)
class MonthlyPayment:
    month: int
    year: int
    interest: Decimal
    principal: Decimal
    total_payment: Decimal
    remaining_balance: Decimal


@dataclass(frozen=True)
class YearlyPayment:
    year: int
    interest: Decimal
    principal: Decimal
    total_payment: Decimal
    remaining_balance: Decimal  # Balance after the last month of the year
