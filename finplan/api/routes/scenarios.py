"""Side-by-side scenario routes."""

from fastapi import APIRouter, HTTPException

from finplan.api.routes import loans, savings
from finplan.api.schemas import (
    LoanComparisonRequest,
    NamedLoanResponse,
    NamedSavingsResponse,
    SavingsComparisonRequest,
)
from finplan.config import settings
from finplan.engine.scenarios import compare_loans, compare_savings
from finplan.models.results import NamedScenario

router = APIRouter(prefix="/api/v1/scenarios", tags=["scenarios"])


@router.post("/loans", response_model=list[NamedLoanResponse])
def loan_scenarios(req: LoanComparisonRequest):
    """Evaluate several loan offers. Results keep the request order."""
    scenarios = [NamedScenario(name=s.name, parameters=loans.to_parameters(s)) for s in req.scenarios]
    try:
        results = compare_loans(scenarios, max_months=settings.max_amortization_months)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return [
        NamedLoanResponse(
            name=name,
            summary=loans.summary_response(result),
            yearly=loans.yearly_response(result.yearly),
        )
        for name, result in results
    ]


@router.post("/savings", response_model=list[NamedSavingsResponse])
def savings_scenarios(req: SavingsComparisonRequest):
    """Evaluate several savings plans. Results keep the request order."""
    scenarios = [NamedScenario(name=s.name, parameters=savings.to_parameters(s)) for s in req.scenarios]
    try:
        results = compare_savings(scenarios)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return [
        NamedSavingsResponse(
            name=name,
            summary=savings.summary_response(result),
            yearly=savings.yearly_response(result),
        )
        for name, result in results
    ]
