"""Side-by-side comparison of the snowball and avalanche plans."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Iterable

from ..config import default_config
from ..models.simulation import SimulationResult, Strategy
from .debts import simulate_strategy
from .money import round_money
from .normalizer import normalize_debts

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class StrategyComparison:
    """Both plans plus the deltas used to recommend one of them.

    ``interest_savings`` and ``time_savings`` are snowball minus avalanche, so a
    positive number means avalanche is cheaper or faster.
    """

    snowball: SimulationResult
    avalanche: SimulationResult
    interest_savings: float
    time_savings: int
    recommended: Strategy
    reasoning: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "snowball": self.snowball.to_dict(),
            "avalanche": self.avalanche.to_dict(),
            "comparison": {
                "interestSavings": self.interest_savings,
                "timeSavings": self.time_savings,
                "recommendedStrategy": self.recommended.value,
                "reasoning": self.reasoning,
            },
        }


def recommend_strategy(interest_savings: float, threshold: float) -> tuple[Strategy, str]:
    """Pick avalanche only when it saves more than ``threshold`` in interest."""

    if interest_savings > threshold:
        return (
            Strategy.AVALANCHE,
            f"Avalanche saves ${abs(interest_savings):,.0f} in interest.",
        )
    return (
        Strategy.SNOWBALL,
        "The interest difference is small; snowball's quick wins make it easier to stick with.",
    )


def compare_strategies(
    debts: Iterable[Any],
    monthly_budget: float,
    start_date: date | datetime | str | None = None,
    *,
    max_months: int | None = None,
    threshold: float | None = None,
) -> StrategyComparison:
    """Simulate both strategies on the same inputs and recommend one.

    Errors from either simulation propagate unchanged.
    """

    debts = normalize_debts(debts)
    if threshold is None:
        threshold = default_config().RECOMMENDATION_THRESHOLD

    snowball = simulate_strategy(
        debts,
        strategy=Strategy.SNOWBALL,
        monthly_budget=monthly_budget,
        start_date=start_date,
        max_months=max_months,
    )
    avalanche = simulate_strategy(
        debts,
        strategy=Strategy.AVALANCHE,
        monthly_budget=monthly_budget,
        start_date=start_date,
        max_months=max_months,
    )

    interest_savings = round_money(snowball.total_interest - avalanche.total_interest)
    time_savings = snowball.months - avalanche.months
    recommended, reasoning = recommend_strategy(interest_savings, threshold)
    logger.info(
        "Strategies compared",
        extra={
            "interest_savings": interest_savings,
            "time_savings": time_savings,
            "recommended": recommended.value,
        },
    )
    return StrategyComparison(
        snowball=snowball,
        avalanche=avalanche,
        interest_savings=interest_savings,
        time_savings=time_savings,
        recommended=recommended,
        reasoning=reasoning,
    )
