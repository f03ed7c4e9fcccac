"""CSV export of payoff schedules."""

from __future__ import annotations

import csv
from pathlib import Path

from ..models.simulation import SimulationResult

HEADERS = [
    "month_index",
    "date",
    "debt_id",
    "debt_name",
    "payment",
    "interest_accrued",
    "balance_remaining",
]


def _serialize_value(value) -> str:
    if value is None:
        return ""
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)


def export_schedule_csv(*, result: SimulationResult, output_path: Path) -> Path:
    """Write one row per debt per simulated month to ``output_path``.

    Columns are deterministic (see ``HEADERS``). Returns the path written.
    """

    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=HEADERS, quoting=csv.QUOTE_MINIMAL)
        writer.writeheader()
        for entry in result.schedule:
            for payment in entry.payments:
                writer.writerow(
                    {
                        "month_index": _serialize_value(entry.month_index),
                        "date": entry.date,
                        "debt_id": _serialize_value(payment.debt_id),
                        "debt_name": _serialize_value(payment.debt_name),
                        "payment": _serialize_value(payment.payment),
                        "interest_accrued": _serialize_value(payment.interest_accrued),
                        "balance_remaining": _serialize_value(payment.balance_remaining),
                    }
                )

    return output_path
