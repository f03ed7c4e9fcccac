"""Tests for the standalone payoff and loan calculators."""

from __future__ import annotations

import math

import pytest

from debtwise.errors import InvalidBudget, InvalidInput, SimulationDiverges
from debtwise.services.calculators import (
    loan_calculator,
    minimum_only_baseline,
    payoff_calculator,
    payoff_months,
)
from debtwise.services.debts import simulate_strategy
from tests.conftest import assert_float_equal


class TestPayoffMonths:
    def test_zero_apr_divides_evenly(self):
        assert payoff_months(1200, 0, 100) == 12
        assert payoff_months(1250, 0, 100) == 13

    def test_payment_not_covering_interest_never_pays_off(self):
        # 12% APR on 1000 accrues about 10 a month
        assert payoff_months(1000, 12, 5) == math.inf

    def test_nothing_to_pay(self):
        assert payoff_months(0, 12, 100) == 0
        assert payoff_months(500, 12, 0) == 0

    def test_matches_month_by_month_engine(self, debt_factory, start_date):
        result = simulate_strategy(
            [debt_factory(balance=5000, apr=12, minimum_payment=200)],
            strategy="avalanche",
            monthly_budget=200,
            start_date=start_date,
        )

        assert payoff_months(5000, 12, 200) == 29
        assert result.months == 29


class TestPayoffCalculator:
    def test_extra_payment_savings(self):
        comparison = payoff_calculator(5000, 12, 200, extra_payment=100)

        assert comparison.standard.months == 29
        assert comparison.standard.years == 2.4
        assert comparison.standard.total_interest == 800
        assert comparison.standard.total_paid == 5800
        assert comparison.accelerated.months == 19
        assert comparison.accelerated.years == 1.6
        assert comparison.accelerated.total_interest == 700
        assert comparison.time_saved_months == 10
        assert comparison.time_saved_years == 0.8
        assert comparison.interest_saved == 100
        assert comparison.extra_payment_total == 1900

    def test_without_extra_payment_nothing_is_saved(self):
        comparison = payoff_calculator(1200, 0, 100)

        assert comparison.standard == comparison.accelerated
        assert comparison.time_saved_months == 0
        assert comparison.interest_saved == 0

    def test_payment_below_interest_rejected(self):
        with pytest.raises(InvalidBudget, match="monthly interest"):
            payoff_calculator(1000, 24, 15)

    @pytest.mark.parametrize(
        ("kwargs", "error"),
        [
            ({"current_balance": 0, "apr": 5, "monthly_payment": 50}, InvalidInput),
            ({"current_balance": 100, "apr": -1, "monthly_payment": 50}, InvalidInput),
            ({"current_balance": 100, "apr": 5, "monthly_payment": "fifty"}, InvalidBudget),
            (
                {"current_balance": 100, "apr": 5, "monthly_payment": 50, "extra_payment": -5},
                InvalidBudget,
            ),
        ],
    )
    def test_invalid_inputs(self, kwargs, error):
        with pytest.raises(error):
            payoff_calculator(**kwargs)

    def test_to_dict_shape(self):
        payload = payoff_calculator(5000, 12, 200, extra_payment=100).to_dict()

        assert set(payload) == {"standard", "accelerated", "savings"}
        assert payload["savings"]["timeSavedMonths"] == 10
        assert payload["standard"]["totalPaid"] == 5800


class TestLoanCalculator:
    def test_level_payment_and_amortization(self):
        quote = loan_calculator(10000, 6, 36)

        assert quote.monthly_payment == 304.22
        assert_float_equal(quote.total_interest, 951.90, tolerance=0.05)
        assert_float_equal(quote.total_amount, 10951.90, tolerance=0.05)
        assert len(quote.schedule) == 36

        first = quote.schedule[0]
        assert first.month == 1
        assert first.interest == 50.0
        assert first.principal == 254.22
        assert quote.schedule[-1].remaining_balance == 0
        assert_float_equal(sum(row.principal for row in quote.schedule), 10000, tolerance=0.2)

    def test_zero_apr_loan(self):
        quote = loan_calculator(1200, 0, 12)

        assert quote.monthly_payment == 100
        assert quote.total_interest == 0
        assert quote.total_amount == 1200
        assert all(row.interest == 0 for row in quote.schedule)
        assert [row.remaining_balance for row in quote.schedule[-2:]] == [100, 0]

    @pytest.mark.parametrize("term", [0, -12, 1.5, True])
    def test_invalid_term(self, term):
        with pytest.raises(InvalidInput, match="term"):
            loan_calculator(1000, 5, term)

    def test_invalid_principal(self):
        with pytest.raises(InvalidInput, match="Principal"):
            loan_calculator(-1, 5, 12)


class TestMinimumOnlyBaseline:
    def test_each_debt_runs_on_its_own_minimum(self, debt_factory, start_date):
        debts = [
            debt_factory(name="Long", balance=1200, apr=0, minimum_payment=100),
            debt_factory(name="Short", balance=300, apr=0, minimum_payment=50),
        ]

        baseline = minimum_only_baseline(debts, start_date=start_date)

        assert [plan.months for plan in baseline.plans] == [12, 6]
        assert baseline.months == 12
        assert baseline.total_interest == 0
        assert baseline.total_paid == 1500

    def test_strategies_beat_minimum_payments(self, sample_debts, start_date):
        baseline = minimum_only_baseline(sample_debts, start_date=start_date)
        avalanche = simulate_strategy(
            sample_debts, strategy="avalanche", monthly_budget=700, start_date=start_date
        )

        assert baseline.months > avalanche.months
        assert baseline.interest_saved_by(avalanche) > 0

    def test_minimum_below_interest_diverges(self, debt_factory):
        debts = [debt_factory(balance=10000, apr=30, minimum_payment=200)]

        with pytest.raises(SimulationDiverges):
            minimum_only_baseline(debts, max_months=120)
