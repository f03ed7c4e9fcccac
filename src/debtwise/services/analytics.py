"""Portfolio-level debt statistics for dashboards."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Iterable, Optional

from .money import clamp_to_zero


def _field(debt: Any, *names: str, default: Any = None) -> Any:
    for name in names:
        value = debt.get(name) if isinstance(debt, Mapping) else getattr(debt, name, None)
        if value is not None:
            return value
    return default


def _number(debt: Any, *names: str) -> float:
    try:
        return float(_field(debt, *names, default=0.0))
    except (TypeError, ValueError):
        return 0.0


def _as_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


@dataclass(slots=True)
class PortfolioTotals:
    principal: float
    balance: float
    paid: float
    average_apr: float


@dataclass(slots=True)
class NextDueDebt:
    id: Any
    name: Any
    due_date: Any
    balance: float


@dataclass(slots=True)
class PortfolioSummary:
    totals: PortfolioTotals
    progress: float
    next_due_debt: Optional[NextDueDebt]
    debts_count: int


@dataclass(slots=True)
class TypeDistribution:
    type: str
    principal: float
    balance: float


def portfolio_summary(debts: Iterable[Any]) -> PortfolioSummary:
    """Summarize balances, repayment progress, and the next debt coming due.

    ``principal`` is the amount originally borrowed and defaults to the current
    balance when a record does not carry it. Progress is the share of principal
    already repaid, in percent.
    """

    debts = list(debts)
    total_principal = 0.0
    total_balance = 0.0
    total_paid = 0.0
    apr_sum = 0.0
    for debt in debts:
        balance = _number(debt, "balance")
        total_principal += _number(debt, "principal") or balance
        total_balance += balance
        total_paid += _number(debt, "totalPaid", "total_paid")
        apr_sum += _number(debt, "apr", "interestRate", "interest_rate")

    progress = 0.0
    if total_principal > 0:
        progress = clamp_to_zero((total_principal - total_balance) / total_principal * 100)

    open_debts = []
    for position, debt in enumerate(debts):
        due = _as_date(_field(debt, "dueDate", "due_date"))
        if due is not None and _number(debt, "balance") > 0:
            open_debts.append((due, position, debt))

    next_due = None
    if open_debts:
        _, _, debt = min(open_debts, key=lambda item: (item[0], item[1]))
        next_due = NextDueDebt(
            id=_field(debt, "id"),
            name=_field(debt, "name"),
            due_date=_field(debt, "dueDate", "due_date"),
            balance=clamp_to_zero(_number(debt, "balance")),
        )

    return PortfolioSummary(
        totals=PortfolioTotals(
            principal=clamp_to_zero(total_principal),
            balance=clamp_to_zero(total_balance),
            paid=clamp_to_zero(total_paid),
            average_apr=clamp_to_zero(apr_sum / len(debts)) if debts else 0.0,
        ),
        progress=progress,
        next_due_debt=next_due,
        debts_count=len(debts),
    )


def distribution_by_type(debts: Iterable[Any]) -> list[TypeDistribution]:
    """Group principal and balance by debt type, in first-seen order."""

    grouped: dict[str, list[float]] = {}
    for debt in debts:
        key = str(_field(debt, "type") or "other")
        balance = _number(debt, "balance")
        totals = grouped.setdefault(key, [0.0, 0.0])
        totals[0] += _number(debt, "principal") or balance
        totals[1] += balance

    return [
        TypeDistribution(type=key, principal=clamp_to_zero(principal), balance=clamp_to_zero(balance))
        for key, (principal, balance) in grouped.items()
    ]


@dataclass(slots=True)
class PaymentTrends:
    """Parallel month series: ``paid[i]`` and ``payments[i]`` belong to ``months[i]``."""

    months: list[str]
    paid: list[float]
    payments: list[int]


def payment_trends(payments: Iterable[Any]) -> PaymentTrends:
    """Bucket payment records by calendar month (``YYYY-MM``), oldest first.

    Each record needs an ``amount`` and a ``paidAt``/``paid_at`` date; records
    without a readable date are left out.
    """

    grouped: dict[str, list[float]] = {}
    for payment in payments:
        paid_at = _as_date(_field(payment, "paidAt", "paid_at"))
        if paid_at is None:
            continue
        bucket = grouped.setdefault(f"{paid_at.year:04d}-{paid_at.month:02d}", [0.0, 0])
        bucket[0] += _number(payment, "amount")
        bucket[1] += 1

    months = sorted(grouped)
    return PaymentTrends(
        months=months,
        paid=[clamp_to_zero(grouped[month][0]) for month in months],
        payments=[int(grouped[month][1]) for month in months],
    )
