"""Simulation options and result records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Optional

from ..errors import InvalidStrategy


class Strategy(str, Enum):
    """Debt prioritization rules."""

    SNOWBALL = "snowball"
    AVALANCHE = "avalanche"

    @classmethod
    def parse(cls, value: "Strategy | str") -> "Strategy":
        """Return the member for ``value``; names are case-insensitive."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidStrategy(value)


@dataclass(slots=True)
class SimulationOptions:
    strategy: Strategy | str
    monthly_budget: float
    start_date: Optional[date] = None
    max_months: Optional[int] = None


@dataclass(slots=True)
class PaymentRecord:
    """What one debt received during one simulated month."""

    debt_id: Any
    debt_name: Any
    payment: float
    interest_accrued: float
    balance_remaining: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "debtId": self.debt_id,
            "debtName": self.debt_name,
            "payment": self.payment,
            "interestAccrued": self.interest_accrued,
            "balanceRemaining": self.balance_remaining,
        }


@dataclass(slots=True)
class ScheduleEntry:
    """One simulated month."""

    month_index: int
    date: str
    total_interest: float
    total_paid: float
    remaining_balance: float
    payments: list[PaymentRecord] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "monthIndex": self.month_index,
            "date": self.date,
            "totalInterest": self.total_interest,
            "totalPaid": self.total_paid,
            "remainingBalance": self.remaining_balance,
            "payments": [payment.to_dict() for payment in self.payments],
        }


@dataclass(slots=True)
class DebtSummary:
    """Lifetime totals for a single debt.

    ``months_to_payoff`` and ``payoff_date`` stay ``None`` until the debt's
    balance first reaches zero.
    """

    debt_id: Any
    debt_name: Any
    starting_balance: float
    total_interest: float = 0.0
    total_paid: float = 0.0
    months_to_payoff: Optional[int] = None
    payoff_date: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "debtId": self.debt_id,
            "debtName": self.debt_name,
            "startingBalance": self.starting_balance,
            "totalInterest": self.total_interest,
            "totalPaid": self.total_paid,
            "monthsToPayoff": self.months_to_payoff,
            "payoffDate": self.payoff_date,
        }


@dataclass(slots=True)
class SimulationResult:
    """Full outcome of a payoff simulation."""

    strategy: Strategy
    months: int
    total_interest: float
    total_paid: float
    payoff_date: str
    debt_summaries: list[DebtSummary]
    schedule: list[ScheduleEntry]

    def summary_for(self, debt_id: Any) -> DebtSummary:
        for summary in self.debt_summaries:
            if summary.debt_id == debt_id:
                return summary
        raise KeyError(debt_id)

    def to_dict(self) -> dict[str, Any]:
        """Render the camelCase payload served to the web client."""

        return {
            "strategy": self.strategy.value,
            "months": self.months,
            "totalInterest": self.total_interest,
            "totalPaid": self.total_paid,
            "payoffDate": self.payoff_date,
            "debtSummaries": [summary.to_dict() for summary in self.debt_summaries],
            "schedule": [entry.to_dict() for entry in self.schedule],
        }
