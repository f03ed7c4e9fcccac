"""Debt payoff calculators."""

from __future__ import annotations

import logging
import math
from datetime import date, datetime
from typing import Any, Iterable

from ..config import default_config
from ..errors import BudgetTooLow, InvalidBudget, InvalidInput, SimulationDiverges
from ..models.debt import NormalizedDebt
from ..models.simulation import (
    DebtSummary,
    PaymentRecord,
    ScheduleEntry,
    SimulationOptions,
    SimulationResult,
    Strategy,
)
from .dates import add_months, coerce_date, to_iso
from .money import PAID_OFF_EPSILON, clamp_to_zero, is_paid_off, money_add, money_sub
from .normalizer import normalize_debts
from .ordering import DebtState, order_debts

logger = logging.getLogger(__name__)


def _validate_budget(monthly_budget: Any) -> float:
    try:
        budget = float(monthly_budget)
    except (TypeError, ValueError) as exc:
        raise InvalidBudget("Monthly budget must be a positive number.") from exc
    if not math.isfinite(budget) or budget <= 0:
        raise InvalidBudget("Monthly budget must be a positive number.")
    return budget


def _resolve_max_months(max_months: int | None) -> int:
    if max_months is None:
        return default_config().MAX_MONTHS
    if isinstance(max_months, bool) or not isinstance(max_months, int) or max_months < 1:
        raise InvalidInput(f"max_months must be a positive integer, got {max_months!r}.")
    return max_months


def minimum_required_budget(debts: Iterable[NormalizedDebt]) -> float:
    """Return the month-zero budget needed to cover every minimum payment."""

    return sum(min(debt.minimum_payment, debt.balance) for debt in debts)


def _accrue_interest(states: list[DebtState]) -> list[float]:
    interest = [0.0] * len(states)
    for state in states:
        if state.balance <= 0:
            continue
        accrued = state.balance * (state.apr / 100) / 12
        state.balance = money_add(state.balance, accrued)
        interest[state.position] = accrued
    return interest


def _pay_minimums(states: list[DebtState], budget: float, paid: list[float]) -> float:
    """Pay each debt's minimum in input order; return the unspent budget."""

    remaining = budget
    for state in states:
        if state.balance <= 0 or remaining <= 0:
            continue
        payment = min(state.debt.minimum_payment, state.balance, remaining)
        state.balance = money_sub(state.balance, payment)
        remaining = money_sub(remaining, payment)
        paid[state.position] += payment
    return remaining


def _pay_extra(
    states: list[DebtState], strategy: Strategy, remaining: float, paid: list[float]
) -> float:
    """Send leftover budget down the strategy order, cascading past cleared debts."""

    while remaining > 0:
        ordered = order_debts(states, strategy)
        if not ordered:
            break
        target = ordered[0]
        extra = min(target.balance, remaining)
        target.balance = money_sub(target.balance, extra)
        remaining = money_sub(remaining, extra)
        paid[target.position] += extra
    return remaining


def _calculate_schedule(
    *,
    debts: list[NormalizedDebt],
    strategy: Strategy,
    budget: float,
    start: date,
    max_months: int,
) -> SimulationResult:
    """Run the month loop over already validated inputs."""

    states = [DebtState(debt=debt, balance=debt.balance) for debt in debts]
    summaries = [
        DebtSummary(debt_id=debt.id, debt_name=debt.name, starting_balance=debt.balance)
        for debt in debts
    ]
    interest_totals = [0.0] * len(debts)
    paid_totals = [0.0] * len(debts)
    schedule: list[ScheduleEntry] = []
    total_interest = 0.0
    total_paid = 0.0

    # A cent or less at entry is already settled.
    for state, summary in zip(states, summaries):
        if is_paid_off(state.balance):
            state.balance = 0.0
            summary.months_to_payoff = 0
            summary.payoff_date = to_iso(start)

    month = 0
    while any(state.balance > PAID_OFF_EPSILON for state in states):
        if month >= max_months:
            logger.warning(
                "Simulation did not converge",
                extra={"strategy": strategy.value, "max_months": max_months},
            )
            raise SimulationDiverges(max_months)

        month += 1
        month_date = to_iso(add_months(start, month - 1))
        paid = [0.0] * len(states)

        interest = _accrue_interest(states)
        remaining = _pay_minimums(states, budget, paid)
        _pay_extra(states, strategy, remaining, paid)

        for state, summary in zip(states, summaries):
            if summary.months_to_payoff is None and is_paid_off(state.balance):
                summary.months_to_payoff = month
                summary.payoff_date = month_date
                state.balance = 0.0

        month_interest = sum(interest)
        month_paid = sum(paid)
        total_interest += month_interest
        total_paid += month_paid
        for index in range(len(states)):
            interest_totals[index] += interest[index]
            paid_totals[index] += paid[index]

        schedule.append(
            ScheduleEntry(
                month_index=month,
                date=month_date,
                total_interest=clamp_to_zero(month_interest),
                total_paid=clamp_to_zero(month_paid),
                remaining_balance=clamp_to_zero(sum(state.balance for state in states)),
                payments=[
                    PaymentRecord(
                        debt_id=state.debt.id,
                        debt_name=state.debt.name,
                        payment=clamp_to_zero(paid[state.position]),
                        interest_accrued=clamp_to_zero(interest[state.position]),
                        balance_remaining=clamp_to_zero(state.balance),
                    )
                    for state in states
                ],
            )
        )

    for index, summary in enumerate(summaries):
        summary.starting_balance = clamp_to_zero(summary.starting_balance)
        summary.total_interest = clamp_to_zero(interest_totals[index])
        summary.total_paid = clamp_to_zero(paid_totals[index])

    return SimulationResult(
        strategy=strategy,
        months=month,
        total_interest=clamp_to_zero(total_interest),
        total_paid=clamp_to_zero(total_paid),
        payoff_date=schedule[-1].date if schedule else to_iso(start),
        debt_summaries=summaries,
        schedule=schedule,
    )


def simulate_strategy(
    debts: Iterable[Any],
    *,
    strategy: Strategy | str = Strategy.SNOWBALL,
    monthly_budget: float,
    start_date: date | datetime | str | None = None,
    max_months: int | None = None,
) -> SimulationResult:
    """Simulate paying off ``debts`` with a fixed monthly budget.

    Each month interest accrues on every open balance, minimums are paid in
    input order, and whatever budget is left goes to the debt the strategy
    ranks first, cascading to the next one whenever a debt is cleared.

    Raises:
        InvalidInput: a debt is malformed or ``max_months`` is not positive
        InvalidStrategy: ``strategy`` is neither snowball nor avalanche
        InvalidBudget: ``monthly_budget`` is not a positive number
        BudgetTooLow: the budget cannot cover the month-zero minimums
        SimulationDiverges: balances remain after ``max_months`` months
    """

    normalized = normalize_debts(debts)
    resolved_strategy = Strategy.parse(strategy)
    budget = _validate_budget(monthly_budget)
    months_cap = _resolve_max_months(max_months)
    start = coerce_date(start_date)

    minimum_required = minimum_required_budget(normalized)
    if budget + 1e-9 < minimum_required:
        logger.warning(
            "Budget below minimum payments",
            extra={"monthly_budget": budget, "minimum_required": minimum_required},
        )
        raise BudgetTooLow(monthly_budget=budget, minimum_required=minimum_required)

    result = _calculate_schedule(
        debts=normalized,
        strategy=resolved_strategy,
        budget=budget,
        start=start,
        max_months=months_cap,
    )
    logger.info(
        "Simulation complete",
        extra={
            "strategy": resolved_strategy.value,
            "debt_count": len(normalized),
            "months": result.months,
            "total_interest": result.total_interest,
        },
    )
    return result


def simulate(debts: Iterable[Any], options: SimulationOptions) -> SimulationResult:
    """Run :func:`simulate_strategy` with a bundled set of options."""

    return simulate_strategy(
        debts,
        strategy=options.strategy,
        monthly_budget=options.monthly_budget,
        start_date=options.start_date,
        max_months=options.max_months,
    )


def snowball_schedule(
    *, debts: Iterable[Any], monthly_budget: float, start_date: date | None = None
) -> SimulationResult:
    """Return the payoff plan that clears the smallest balances first."""

    return simulate_strategy(
        debts, strategy=Strategy.SNOWBALL, monthly_budget=monthly_budget, start_date=start_date
    )


def avalanche_schedule(
    *, debts: Iterable[Any], monthly_budget: float, start_date: date | None = None
) -> SimulationResult:
    """Return the payoff plan that clears the highest APR first."""

    return simulate_strategy(
        debts, strategy=Strategy.AVALANCHE, monthly_budget=monthly_budget, start_date=start_date
    )
