"""What-if analysis for paying more than the base monthly budget."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Iterable

from ..errors import InvalidBudget
from ..models.simulation import SimulationResult, Strategy
from .debts import simulate_strategy
from .money import TENTH, round_half_up, round_money
from .normalizer import normalize_debts

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ExtraPaymentAnalysis:
    base: SimulationResult
    extra: SimulationResult
    extra_amount: float
    interest_savings: float
    time_savings: int
    years_time_savings: float
    roi: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "baseScenario": self.base.to_dict(),
            "extraPaymentScenario": self.extra.to_dict(),
            "benefits": {
                "extraAmount": self.extra_amount,
                "interestSavings": self.interest_savings,
                "timeSavings": self.time_savings,
                "yearsTimeSavings": self.years_time_savings,
                "roi": self.roi,
            },
        }


def extra_payment_roi(interest_savings: float, extra_amount: float, months: int) -> float:
    """Interest saved per dollar of extra payment, as a percentage."""

    denominator = extra_amount * months
    if denominator <= 0:
        return 0.0
    return interest_savings / denominator * 100


def calculate_extra_payment_effect(
    debts: Iterable[Any],
    base_budget: float,
    extra_amount: float,
    strategy: Strategy | str = Strategy.AVALANCHE,
    start_date: date | datetime | str | None = None,
    *,
    max_months: int | None = None,
) -> ExtraPaymentAnalysis:
    """Compare a plan at ``base_budget`` with the same plan at ``base_budget + extra_amount``."""

    try:
        extra_amount = float(extra_amount)
    except (TypeError, ValueError) as exc:
        raise InvalidBudget("Extra payment must be a non-negative number.") from exc
    if not math.isfinite(extra_amount) or extra_amount < 0:
        raise InvalidBudget("Extra payment must be a non-negative number.")

    debts = normalize_debts(debts)
    base = simulate_strategy(
        debts,
        strategy=strategy,
        monthly_budget=base_budget,
        start_date=start_date,
        max_months=max_months,
    )
    boosted = simulate_strategy(
        debts,
        strategy=strategy,
        monthly_budget=float(base_budget) + extra_amount,
        start_date=start_date,
        max_months=max_months,
    )

    interest_savings = round_money(base.total_interest - boosted.total_interest)
    time_savings = base.months - boosted.months
    roi = extra_payment_roi(interest_savings, extra_amount, boosted.months)
    logger.info(
        "Extra payment analysed",
        extra={
            "extra_amount": extra_amount,
            "interest_savings": interest_savings,
            "time_savings": time_savings,
        },
    )
    return ExtraPaymentAnalysis(
        base=base,
        extra=boosted,
        extra_amount=extra_amount,
        interest_savings=interest_savings,
        time_savings=time_savings,
        years_time_savings=round_half_up(time_savings / 12, TENTH),
        roi=roi,
    )
