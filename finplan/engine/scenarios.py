"""Scenario orchestrator: runs the engines and bundles schedules with their totals.

Pure computation. Every scenario is evaluated independently, so a caller
comparing several offers just gets one result per input.
"""

from finplan.engine import amortization, growth
from finplan.engine.amortization import MAX_MONTHS
from finplan.models.loan import LoanParameters
from finplan.models.results import LoanResult, NamedScenario, SavingsResult
from finplan.models.savings import GrowthParameters


def run_loan(params: LoanParameters, max_months: int = MAX_MONTHS) -> LoanResult:
    monthly = amortization.generate_schedule(params, max_months=max_months)
    return LoanResult(
        parameters=params,
        summary=amortization.summarize(params, monthly),
        monthly=monthly,
        yearly=amortization.aggregate_yearly(monthly),
    )


def run_savings(params: GrowthParameters) -> SavingsResult:
    yearly = growth.generate_schedule(params)
    return SavingsResult(
        parameters=params,
        summary=growth.summarize(params, yearly),
        yearly=yearly,
    )


def _check_names(scenarios: list[NamedScenario]) -> None:
    seen: set[str] = set()
    for scenario in scenarios:
        if scenario.name in seen:
            raise ValueError(f"Duplicate scenario name: {scenario.name!r}")
        seen.add(scenario.name)


def compare_loans(
    scenarios: list[NamedScenario],
    max_months: int = MAX_MONTHS,
) -> list[tuple[str, LoanResult]]:
    """Evaluate named loan scenarios in input order."""
    _check_names(scenarios)
    return [(s.name, run_loan(s.parameters, max_months=max_months)) for s in scenarios]


def compare_savings(scenarios: list[NamedScenario]) -> list[tuple[str, SavingsResult]]:
    """Evaluate named savings scenarios in input order."""
    _check_names(scenarios)
    return [(s.name, run_savings(s.parameters)) for s in scenarios]
