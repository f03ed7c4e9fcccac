"""Pytest configuration and shared fixtures for DebtWise tests.

Provides debt record factories, the sample portfolios reused across the
simulation tests, and float helpers for money comparisons.
"""

from __future__ import annotations

from datetime import date

import pytest

from debtwise.models.simulation import SimulationResult


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep DEBTWISE_* settings from the developer's shell or .env out of tests."""

    for name in (
        "DEBTWISE_DATA_DIR",
        "DEBTWISE_DEV_MODE",
        "DEBTWISE_MAX_MONTHS",
        "DEBTWISE_RECOMMENDATION_THRESHOLD",
    ):
        monkeypatch.delenv(name, raising=False)


# =============================================================================
# Debt Factories
# =============================================================================


@pytest.fixture
def debt_factory():
    """Factory for caller-shaped debt records (camelCase dictionaries).

    Returns:
        Callable: Function that builds a debt payload with sensible defaults
    """

    counter = {"next": 1}

    def _create_debt(
        name: str | None = None,
        balance: float = 1000.00,
        apr: float = 18.0,
        minimum_payment: float = 25.00,
        debt_id: str | None = None,
        **extra,
    ) -> dict:
        """Create a debt record.

        Args:
            name: Debt name/description
            balance: Current outstanding balance
            apr: Annual percentage rate (e.g., 18.0 for 18%)
            minimum_payment: Minimum monthly payment
            debt_id: Identifier; generated when omitted
        """
        index = counter["next"]
        counter["next"] += 1
        record = {
            "id": debt_id or f"debt-{index}",
            "name": name or f"Debt {index}",
            "balance": balance,
            "apr": apr,
            "minimumPayment": minimum_payment,
        }
        record.update(extra)
        return record

    return _create_debt


@pytest.fixture
def sample_debts():
    """Three-debt household used by the strategy tests."""

    return [
        {"id": "debt-1", "name": "Credit Card", "balance": 1500, "apr": 18, "minimumPayment": 50},
        {"id": "debt-2", "name": "Student Loan", "balance": 6000, "apr": 4.5, "minimumPayment": 120},
        {"id": "debt-3", "name": "Auto Loan", "balance": 3200, "apr": 7.9, "minimumPayment": 90},
    ]


@pytest.fixture
def high_rate_vs_small_balance():
    """Small cheap loan next to a large expensive card; the strategies disagree."""

    return [
        {"id": "loan", "name": "Family Loan", "balance": 9000, "apr": 3, "minimumPayment": 90},
        {"id": "card", "name": "Store Card", "balance": 12000, "apr": 28, "minimumPayment": 240},
    ]


@pytest.fixture
def start_date() -> date:
    return date(2024, 1, 1)


# =============================================================================
# Assertion Helpers
# =============================================================================


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert that two floats are equal within a tolerance.

    Args:
        actual: Actual value
        expected: Expected value
        tolerance: Maximum allowed difference (default 0.01 = 1 cent)

    Raises:
        AssertionError: If values differ by more than tolerance
    """
    assert (
        abs(actual - expected) < tolerance
    ), f"Expected {expected}, got {actual} (diff: {abs(actual - expected)})"


def assert_result_consistent(result: SimulationResult, monthly_budget: float) -> None:
    """Check the bookkeeping every finished simulation must satisfy."""

    slack = 0.01 * (len(result.debt_summaries) + 1)

    # Aggregate conservation
    assert_float_equal(
        sum(s.total_paid for s in result.debt_summaries), result.total_paid, tolerance=slack
    )
    assert_float_equal(
        sum(s.total_interest for s in result.debt_summaries), result.total_interest, tolerance=slack
    )

    # Per-debt conservation: everything owed was paid
    for summary in result.debt_summaries:
        assert_float_equal(
            summary.starting_balance + summary.total_interest, summary.total_paid, tolerance=0.03
        )
        assert summary.months_to_payoff is not None
        assert summary.payoff_date is not None

    # Schedule completeness
    assert len(result.schedule) == result.months
    if result.schedule:
        assert result.schedule[-1].remaining_balance == 0
        assert result.payoff_date == result.schedule[-1].date

    for index, entry in enumerate(result.schedule):
        assert entry.month_index == index + 1
        assert entry.total_paid <= monthly_budget + 0.01
        assert entry.total_interest >= 0
        assert entry.remaining_balance >= 0
        for payment in entry.payments:
            assert payment.payment >= 0
            assert payment.interest_accrued >= 0
            assert payment.balance_remaining >= 0
