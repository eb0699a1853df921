"""CLI for loan and savings projections.

Usage:
    python -m finplan.cli loan 250000 --rate 3.5 --amortization 2 --equity 50000
    python -m finplan.cli loan 250000 --rate 3.5 --amortization 2 --monthly
    python -m finplan.cli savings --initial 10000 --monthly 500 --return 7 --years 20
"""

import argparse
import logging
from decimal import Decimal, InvalidOperation

from finplan.config import settings
from finplan.engine.scenarios import run_loan, run_savings
from finplan.models.loan import LoanParameters
from finplan.models.results import LoanResult, SavingsResult
from finplan.models.savings import GrowthParameters


# ── Helpers ──────────────────────────────────────────────────────────────────

def _amount(text: str) -> Decimal:
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")
    if not value.is_finite():
        raise argparse.ArgumentTypeError(f"not a finite number: {text!r}")
    return value


def _money(v: Decimal) -> str:
    return f"{v:,.2f}"


def _header(title: str) -> None:
    print(f"\n{'=' * 72}")
    print(f"  {title}")
    print(f"{'=' * 72}")


# ── Report sections ──────────────────────────────────────────────────────────

def print_loan(result: LoanResult, show_monthly: bool = False) -> None:
    p = result.parameters
    s = result.summary
    _header("Loan Summary")
    print(f"  Principal:          {_money(p.principal)}")
    if p.equity:
        print(f"  Equity:             {_money(p.equity)}")
        print(f"  Purchase Price:     {_money(p.purchase_price)}")
        print(f"  Loan-to-Value:      {float(p.loan_to_value) * 100:.2f}%")
    print(f"  Interest / Repay:   {p.annual_interest_rate}% / {p.initial_amortization_rate}%")
    print(f"  Monthly Payment:    {_money(s.monthly_payment)}")
    print(f"  Total Interest:     {_money(s.total_interest)}")
    print(f"  Total Paid:         {_money(s.total_paid)}")
    if s.fully_amortized:
        print(f"  Paid Off:           month {s.months} (year {s.payoff_year})")
    else:
        print(f"  NOT REPAID after {s.months} months, {_money(s.remaining_balance)} outstanding")

    if show_monthly:
        _header("Monthly Schedule")
        print(f"  {'Month':>5}  {'Interest':>12}  {'Principal':>12}  {'Payment':>12}  {'Balance':>14}")
        for m in result.monthly:
            print(
                f"  {m.month:>5}  {_money(m.interest):>12}  {_money(m.principal):>12}"
                f"  {_money(m.total_payment):>12}  {_money(m.remaining_balance):>14}"
            )

    _header("Yearly Schedule")
    print(f"  {'Year':>5}  {'Interest':>12}  {'Principal':>12}  {'Payment':>12}  {'Balance':>14}")
    for y in result.yearly:
        print(
            f"  {y.year:>5}  {_money(y.interest):>12}  {_money(y.principal):>12}"
            f"  {_money(y.total_payment):>12}  {_money(y.remaining_balance):>14}"
        )
    print()


def print_savings(result: SavingsResult) -> None:
    p = result.parameters
    s = result.summary
    _header("Savings Plan Summary")
    print(f"  Initial Balance:    {_money(p.initial_balance)}")
    print(f"  Monthly:            {_money(p.monthly_contribution)}")
    print(f"  Annual Return:      {p.annual_return_rate}%")
    print(f"  Final Balance:      {_money(s.final_balance)}")
    print(f"  Total Invested:     {_money(s.total_invested)}")
    print(f"  Total Interest:     {_money(s.total_interest)}")

    _header("Yearly Growth")
    print(f"  {'Year':>4}  {'Start':>14}  {'Invested':>12}  {'Interest':>12}  {'End':>14}")
    for y in result.yearly:
        print(
            f"  {y.year:>4}  {_money(y.start_balance):>14}  {_money(y.invested_this_year):>12}"
            f"  {_money(y.interest_earned_this_year):>12}  {_money(y.end_balance):>14}"
        )
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Loan amortization and savings plan projections")
    sub = parser.add_subparsers(dest="command", required=True)

    loan = sub.add_parser("loan", help="Annuity loan schedule")
    loan.add_argument("principal", type=_amount, help="Loan amount")
    loan.add_argument("--rate", type=_amount, required=True, help="Annual interest rate in percent")
    loan.add_argument("--amortization", type=_amount, required=True, help="Initial repayment rate in percent")
    loan.add_argument("--equity", type=_amount, default=Decimal("0"), help="Own funds (default: 0)")
    loan.add_argument("--monthly", action="store_true", help="Also print the monthly schedule")

    savings = sub.add_parser("savings", help="Savings plan growth")
    savings.add_argument("--initial", type=_amount, default=Decimal("0"), help="Starting balance (default: 0)")
    savings.add_argument("--monthly", type=_amount, default=Decimal("0"), help="Monthly contribution (default: 0)")
    savings.add_argument("--return", dest="annual_return", type=_amount, required=True, help="Annual return in percent")
    savings.add_argument("--years", type=int, required=True, help="Projection length in years")

    return parser


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "loan":
        if args.principal <= 0:
            parser.error("principal must be positive")
        if args.rate < 0 or args.amortization < 0:
            parser.error("rates must not be negative")
        params = LoanParameters(
            principal=args.principal,
            annual_interest_rate=args.rate,
            initial_amortization_rate=args.amortization,
            equity=args.equity,
        )
        print_loan(run_loan(params, max_months=settings.max_amortization_months), show_monthly=args.monthly)
        return

    if args.initial < 0 or args.monthly < 0:
        parser.error("balance and contribution must not be negative")
    if args.annual_return <= -100:
        parser.error("annual return must be above -100%")
    if not 0 <= args.years <= settings.max_projection_years:
        parser.error(f"years must be between 0 and {settings.max_projection_years}")
    params = GrowthParameters(
        initial_balance=args.initial,
        monthly_contribution=args.monthly,
        annual_return_rate=args.annual_return,
        years=args.years,
    )
    print_savings(run_savings(params))


if __name__ == "__main__":
    main()
