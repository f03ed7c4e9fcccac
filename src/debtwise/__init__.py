"""DebtWise debt payoff planning core."""

from __future__ import annotations

from .config import BaseConfig, DevConfig
from .errors import (
    BudgetTooLow,
    DebtError,
    InvalidBudget,
    InvalidInput,
    InvalidStrategy,
    SimulationDiverges,
)
from .models import SimulationOptions, SimulationResult, Strategy
from .services.debts import simulate, simulate_strategy
from .services.extra_payment import calculate_extra_payment_effect
from .services.strategies import compare_strategies

__all__ = [
    "BaseConfig",
    "BudgetTooLow",
    "DebtError",
    "DevConfig",
    "InvalidBudget",
    "InvalidInput",
    "InvalidStrategy",
    "SimulationDiverges",
    "SimulationOptions",
    "SimulationResult",
    "Strategy",
    "calculate_extra_payment_effect",
    "compare_strategies",
    "simulate",
    "simulate_strategy",
]
