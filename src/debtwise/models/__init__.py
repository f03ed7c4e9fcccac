"""Data records for the payoff services."""

from __future__ import annotations

from .debt import DebtRecord, NormalizedDebt
from .simulation import (
    DebtSummary,
    PaymentRecord,
    ScheduleEntry,
    SimulationOptions,
    SimulationResult,
    Strategy,
)

__all__ = [
    "DebtRecord",
    "DebtSummary",
    "NormalizedDebt",
    "PaymentRecord",
    "ScheduleEntry",
    "SimulationOptions",
    "SimulationResult",
    "Strategy",
]
