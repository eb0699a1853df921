"""Canonical test fixtures used across engine and API tests.

Loan: $250K, 3.5% interest, 2% initial amortization, $50K equity.
Savings: $10K start, $500/month, 7% annual return.
"""

import pytest
from decimal import Decimal

from finplan.models.loan import LoanParameters
from finplan.models.savings import GrowthParameters


@pytest.fixture
def canonical_loan() -> LoanParameters:
    """$250K annuity loan, paid off in month 348."""
    return LoanParameters(
        principal=Decimal("250000"),
        annual_interest_rate=Decimal("3.5"),
        initial_amortization_rate=Decimal("2.0"),
        equity=Decimal("50000"),
    )


@pytest.fixture
def short_loan() -> LoanParameters:
    """$10K loan at 5% + 20% repayment, ends mid-year 5."""
    return LoanParameters(
        principal=Decimal("10000"),
        annual_interest_rate=Decimal("5"),
        initial_amortization_rate=Decimal("20"),
    )


@pytest.fixture
def interest_only_loan() -> LoanParameters:
    """Payment exactly covers interest: never amortizes."""
    return LoanParameters(
        principal=Decimal("100000"),
        annual_interest_rate=Decimal("6"),
        initial_amortization_rate=Decimal("0"),
    )


@pytest.fixture
def canonical_savings() -> GrowthParameters:
    return GrowthParameters(
        initial_balance=Decimal("10000"),
        monthly_contribution=Decimal("500"),
        annual_return_rate=Decimal("7.0"),
        years=10,
    )
