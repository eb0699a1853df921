from dataclasses import replace
from decimal import Decimal

from finplan.engine.growth import (
    generate_growth_schedule,
    generate_schedule,
    monthly_return_rate,
    summarize,
)
from finplan.models.savings import GrowthParameters


class TestMonthlyReturnRate:
    def test_geometric_rate(self):
        rate = monthly_return_rate(Decimal("7"))
        assert rate.quantize(Decimal("1E-12")) == Decimal("0.005654145387")

    def test_compounds_back_to_annual(self):
        rate = monthly_return_rate(Decimal("7"))
        assert abs((1 + rate) ** 12 - Decimal("1.07")) < Decimal("1E-20")

    def test_zero(self):
        assert monthly_return_rate(Decimal("0")) == 0

    def test_negative(self):
        assert monthly_return_rate(Decimal("-2")) < 0

    def test_plain_numbers(self):
        assert monthly_return_rate(7) == monthly_return_rate(Decimal("7"))
        assert monthly_return_rate(7.0) == monthly_return_rate(Decimal("7.0"))


class TestGenerateSchedule:
    def test_single_year(self, canonical_savings):
        schedule = generate_schedule(replace(canonical_savings, years=1))
        assert len(schedule) == 1
        y1 = schedule[0]
        assert y1.year == 1
        assert y1.start_balance == Decimal("10000.00")
        assert y1.invested_this_year == Decimal("6000.00")
        assert y1.interest_earned_this_year == Decimal("890.15")
        assert y1.end_balance == Decimal("16890.15")
        assert y1.cumulative_invested == Decimal("16000.00")
        assert y1.cumulative_interest == Decimal("890.15")

    def test_ten_years(self, canonical_savings):
        schedule = generate_schedule(canonical_savings)
        assert len(schedule) == 10
        assert schedule[1].interest_earned_this_year == Decimal("1372.46")
        assert schedule[1].end_balance == Decimal("24262.61")
        assert schedule[4].end_balance == Decimal("49623.45")
        last = schedule[-1]
        assert last.start_balance == Decimal("92530.12")
        assert last.interest_earned_this_year == Decimal("6667.26")
        assert last.end_balance == Decimal("105197.38")
        assert last.cumulative_invested == Decimal("70000.00")
        assert last.cumulative_interest == Decimal("35197.38")

    def test_end_balance_carries_over(self, canonical_savings):
        schedule = generate_schedule(canonical_savings)
        for i in range(1, len(schedule)):
            assert schedule[i].start_balance == schedule[i - 1].end_balance

    def test_end_balance_increases(self, canonical_savings):
        schedule = generate_schedule(canonical_savings)
        for i in range(1, len(schedule)):
            assert schedule[i].end_balance > schedule[i - 1].end_balance

    def test_balance_identity(self, canonical_savings):
        for y in generate_schedule(canonical_savings):
            assert y.end_balance == y.start_balance + y.invested_this_year + y.interest_earned_this_year
            assert y.end_balance == y.cumulative_invested + y.cumulative_interest

    def test_incremental_rounding_drifts_from_closed_form(self):
        """5% a year on 5000 would be exactly 250.00 without monthly rounding."""
        params = GrowthParameters(
            initial_balance=Decimal("5000"),
            monthly_contribution=Decimal("0"),
            annual_return_rate=Decimal("5"),
            years=3,
        )
        schedule = generate_schedule(params)
        assert [y.interest_earned_this_year for y in schedule] == [
            Decimal("249.99"), Decimal("262.52"), Decimal("275.63"),
        ]
        assert schedule[-1].end_balance == Decimal("5788.14")
        assert all(y.invested_this_year == 0 for y in schedule)

    def test_zero_return(self):
        params = GrowthParameters(
            initial_balance=Decimal("0"),
            monthly_contribution=Decimal("100"),
            annual_return_rate=Decimal("0"),
            years=3,
        )
        schedule = generate_schedule(params)
        assert [y.end_balance for y in schedule] == [
            Decimal("1200.00"), Decimal("2400.00"), Decimal("3600.00"),
        ]
        assert schedule[-1].cumulative_interest == 0

    def test_negative_return_shrinks_growth(self):
        params = GrowthParameters(
            initial_balance=Decimal("25000"),
            monthly_contribution=Decimal("250"),
            annual_return_rate=Decimal("-2"),
            years=2,
        )
        y1, y2 = generate_schedule(params)
        assert y1.interest_earned_this_year == Decimal("-527.60")
        assert y1.end_balance == Decimal("27472.40")
        assert y2.interest_earned_this_year == Decimal("-577.05")
        assert y2.end_balance == Decimal("29895.35")
        assert y2.cumulative_invested == Decimal("31000.00")
        assert y2.cumulative_interest == Decimal("-1104.65")

    def test_contribution_rounded_to_cents(self):
        params = GrowthParameters(
            initial_balance=Decimal("0"),
            monthly_contribution=Decimal("10.005"),
            annual_return_rate=Decimal("0"),
            years=1,
        )
        assert generate_schedule(params)[0].invested_this_year == Decimal("120.12")

    def test_plain_number_inputs(self, canonical_savings):
        expected = generate_schedule(replace(canonical_savings, years=1))
        assert generate_schedule(GrowthParameters(10000, 500, 7, 1)) == expected
        assert generate_schedule(GrowthParameters(10000.0, 500.0, 7.0, 1)) == expected
        assert expected[0].end_balance == Decimal("16890.15")

    def test_zero_years_empty(self, canonical_savings):
        assert generate_schedule(replace(canonical_savings, years=0)) == ()

    def test_negative_years_empty(self, canonical_savings):
        assert generate_schedule(replace(canonical_savings, years=-3)) == ()

    def test_deterministic(self, canonical_savings):
        assert generate_schedule(canonical_savings) == generate_schedule(canonical_savings)

    def test_public_alias(self, canonical_savings):
        assert generate_growth_schedule(canonical_savings) == generate_schedule(canonical_savings)


class TestSummarize:
    def test_from_last_year(self, canonical_savings):
        summary = summarize(canonical_savings, generate_schedule(canonical_savings))
        assert summary.final_balance == Decimal("105197.38")
        assert summary.total_invested == Decimal("70000.00")
        assert summary.total_interest == Decimal("35197.38")

    def test_empty_schedule(self, canonical_savings):
        params = replace(canonical_savings, years=0)
        summary = summarize(params, ())
        assert summary.final_balance == Decimal("10000.00")
        assert summary.total_invested == Decimal("10000.00")
        assert summary.total_interest == 0
