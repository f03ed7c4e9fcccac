"""Debt prioritization for snowball and avalanche payoff plans."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from ..models.debt import NormalizedDebt
from ..models.simulation import Strategy


@dataclass(slots=True)
class DebtState:
    """Mutable per-run view of a normalized debt."""

    debt: NormalizedDebt
    balance: float

    @property
    def position(self) -> int:
        return self.debt.position

    @property
    def apr(self) -> float:
        return self.debt.apr


SortKey = Callable[[DebtState], tuple]


def _snowball_key(state: DebtState) -> tuple:
    # Smallest balance first, then lowest APR, then input order.
    return (state.balance, state.apr, state.position)


def _avalanche_key(state: DebtState) -> tuple:
    # Highest APR first, then smallest balance, then input order.
    return (-state.apr, state.balance, state.position)


STRATEGY_KEYS: dict[Strategy, SortKey] = {
    Strategy.SNOWBALL: _snowball_key,
    Strategy.AVALANCHE: _avalanche_key,
}


def sort_key_for(strategy: Strategy | str) -> SortKey:
    return STRATEGY_KEYS[Strategy.parse(strategy)]


def order_debts(states: Iterable[DebtState], strategy: Strategy | str) -> list[DebtState]:
    """Return debts with a positive balance in payoff priority order."""

    key = sort_key_for(strategy)
    return sorted((state for state in states if state.balance > 0), key=key)
