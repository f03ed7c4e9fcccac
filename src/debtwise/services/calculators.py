"""Standalone debt calculators.

Closed-form helpers that answer single-debt questions without running the
month-by-month engine (payoff time, loan amortization) plus a baseline that
pays only the minimums on every debt, for measuring what a strategy saves.
All rates are APR percentages, as everywhere else in the package.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Iterable

from ..errors import InvalidBudget, InvalidInput
from ..models.simulation import SimulationResult, Strategy
from .debts import simulate_strategy
from .money import TENTH, clamp_to_zero, round_half_up, round_money
from .normalizer import normalize_debts

logger = logging.getLogger(__name__)


def _amount(
    value: Any, label: str, *, error: type[Exception] = InvalidInput, allow_zero: bool = False
) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise error(f"{label} must be a number.") from exc
    if not math.isfinite(number) or number < 0 or (number == 0 and not allow_zero):
        raise error(f"{label} must be {'non-negative' if allow_zero else 'positive'}.")
    return number


def payoff_months(balance: float, apr: float, monthly_payment: float) -> int | float:
    """Months needed to clear ``balance`` with a fixed payment.

    Returns ``math.inf`` when the payment never outpaces the monthly interest
    and ``0`` when there is nothing to pay or nothing paying it.
    """

    if balance <= 0 or monthly_payment <= 0:
        return 0
    rate = apr / 100 / 12
    if rate == 0:
        return math.ceil(balance / monthly_payment)
    if monthly_payment <= balance * rate:
        return math.inf
    months = -math.log(1 - balance * rate / monthly_payment) / math.log(1 + rate)
    return math.ceil(months)


@dataclass(slots=True)
class PayoffProjection:
    months: int
    years: float
    total_interest: float
    total_paid: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "months": self.months,
            "years": self.years,
            "totalInterest": self.total_interest,
            "totalPaid": self.total_paid,
        }


@dataclass(slots=True)
class PayoffComparison:
    """Standard payment against the same payment plus an extra amount."""

    standard: PayoffProjection
    accelerated: PayoffProjection
    time_saved_months: int
    time_saved_years: float
    interest_saved: float
    extra_payment_total: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "standard": self.standard.to_dict(),
            "accelerated": self.accelerated.to_dict(),
            "savings": {
                "timeSavedMonths": self.time_saved_months,
                "timeSavedYears": self.time_saved_years,
                "interestSaved": self.interest_saved,
                "extraPaymentTotal": self.extra_payment_total,
            },
        }


def _projection(balance: float, months: int, payment: float) -> tuple[PayoffProjection, float]:
    # Every payment is counted in full, including the last one
    interest = months * payment - balance
    projection = PayoffProjection(
        months=months,
        years=round_half_up(months / 12, TENTH),
        total_interest=round_money(interest),
        total_paid=round_money(months * payment),
    )
    return projection, interest


def payoff_calculator(
    current_balance: float,
    apr: float,
    monthly_payment: float,
    extra_payment: float = 0.0,
) -> PayoffComparison:
    """Estimate payoff time and interest with and without an extra payment.

    Raises:
        InvalidInput: the balance or APR is not usable
        InvalidBudget: a payment is invalid or never covers the monthly interest
    """

    balance = _amount(current_balance, "Current balance")
    apr = _amount(apr, "APR", allow_zero=True)
    payment = _amount(monthly_payment, "Monthly payment", error=InvalidBudget)
    extra = _amount(extra_payment, "Extra payment", error=InvalidBudget, allow_zero=True)

    standard_months = payoff_months(balance, apr, payment)
    if math.isinf(standard_months):
        raise InvalidBudget(
            f"Monthly payment ${payment:.2f} does not cover the "
            f"${balance * apr / 100 / 12:.2f} monthly interest."
        )
    accelerated_months = payoff_months(balance, apr, payment + extra)

    standard, standard_interest = _projection(balance, standard_months, payment)
    accelerated, accelerated_interest = _projection(balance, accelerated_months, payment + extra)
    time_saved = standard_months - accelerated_months
    return PayoffComparison(
        standard=standard,
        accelerated=accelerated,
        time_saved_months=time_saved,
        time_saved_years=round_half_up(time_saved / 12, TENTH),
        interest_saved=round_money(standard_interest - accelerated_interest),
        extra_payment_total=round_money(extra * accelerated_months),
    )


@dataclass(slots=True)
class AmortizationRow:
    month: int
    payment: float
    principal: float
    interest: float
    remaining_balance: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "month": self.month,
            "monthlyPayment": self.payment,
            "principalPayment": self.principal,
            "interestPayment": self.interest,
            "remainingBalance": self.remaining_balance,
        }


@dataclass(slots=True)
class LoanQuote:
    principal: float
    apr: float
    term_months: int
    monthly_payment: float
    total_interest: float
    total_amount: float
    schedule: list[AmortizationRow]

    def to_dict(self) -> dict[str, Any]:
        return {
            "monthlyPayment": self.monthly_payment,
            "totalInterest": self.total_interest,
            "totalAmount": self.total_amount,
            "schedule": [row.to_dict() for row in self.schedule],
            "summary": {
                "principal": self.principal,
                "interestRate": self.apr,
                "termMonths": self.term_months,
            },
        }


def loan_calculator(principal: float, apr: float, term_months: int) -> LoanQuote:
    """Level payment and full amortization schedule for a fixed-term loan."""

    principal = _amount(principal, "Principal")
    apr = _amount(apr, "APR", allow_zero=True)
    if isinstance(term_months, bool) or not isinstance(term_months, int) or term_months < 1:
        raise InvalidInput(f"Loan term must be a positive number of months, got {term_months!r}.")

    rate = apr / 100 / 12
    if rate == 0:
        payment = principal / term_months
    else:
        growth = (1 + rate) ** term_months
        payment = principal * rate * growth / (growth - 1)

    schedule = []
    remaining = principal
    for month in range(1, term_months + 1):
        interest = remaining * rate
        principal_part = payment - interest
        remaining = max(0.0, remaining - principal_part)
        schedule.append(
            AmortizationRow(
                month=month,
                payment=round_money(payment),
                principal=round_money(principal_part),
                interest=clamp_to_zero(interest),
                remaining_balance=clamp_to_zero(remaining),
            )
        )

    total_interest = payment * term_months - principal
    return LoanQuote(
        principal=round_money(principal),
        apr=apr,
        term_months=term_months,
        monthly_payment=round_money(payment),
        total_interest=clamp_to_zero(total_interest),
        total_amount=round_money(principal + total_interest),
        schedule=schedule,
    )


@dataclass(slots=True)
class MinimumOnlyBaseline:
    """Every debt paid at exactly its minimum, with nothing rolled over."""

    months: int
    total_interest: float
    total_paid: float
    plans: list[SimulationResult]

    def interest_saved_by(self, result: SimulationResult) -> float:
        return round_money(self.total_interest - result.total_interest)

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalMonths": self.months,
            "totalInterest": self.total_interest,
            "totalPaid": self.total_paid,
            "plans": [plan.to_dict() for plan in self.plans],
        }


def minimum_only_baseline(
    debts: Iterable[Any],
    start_date: date | datetime | str | None = None,
    *,
    max_months: int | None = None,
) -> MinimumOnlyBaseline:
    """Simulate each debt on its own minimum payment.

    Raises:
        SimulationDiverges: some minimum never outpaces that debt's interest
    """

    debts = normalize_debts(debts)
    plans = [
        simulate_strategy(
            [debt],
            strategy=Strategy.SNOWBALL,
            monthly_budget=debt.minimum_payment,
            start_date=start_date,
            max_months=max_months,
        )
        for debt in debts
    ]
    baseline = MinimumOnlyBaseline(
        months=max(plan.months for plan in plans),
        total_interest=round_money(sum(plan.total_interest for plan in plans)),
        total_paid=round_money(sum(plan.total_paid for plan in plans)),
        plans=plans,
    )
    logger.info(
        "Minimum-only baseline computed",
        extra={"months": baseline.months, "total_interest": baseline.total_interest},
    )
    return baseline
