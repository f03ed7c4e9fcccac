"""Service module exports."""

from . import (
    analytics,
    calculators,
    dates,
    debts,
    export_csv,
    extra_payment,
    money,
    normalizer,
    ordering,
    strategies,
)

__all__ = [
    "analytics",
    "calculators",
    "dates",
    "debts",
    "export_csv",
    "extra_payment",
    "money",
    "normalizer",
    "ordering",
    "strategies",
]
