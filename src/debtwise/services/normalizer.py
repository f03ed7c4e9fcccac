"""Validation of caller debts before simulation."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import replace
from typing import Any, Iterable

from pydantic import ValidationError

from ..errors import InvalidInput
from ..models.debt import DebtRecord, NormalizedDebt, debt_label
from .money import round_money

# Attribute names read from objects that are neither mappings nor DebtRecords
_ATTRIBUTE_FIELDS = (
    "id",
    "name",
    "balance",
    "principal",
    "apr",
    "interest_rate",
    "interestRate",
    "minimum_payment",
    "minimumPayment",
    "type",
    "due_date",
    "dueDate",
)


def _as_payload(debt: Any) -> dict[str, Any]:
    if isinstance(debt, Mapping):
        return dict(debt)
    payload = {}
    for attr in _ATTRIBUTE_FIELDS:
        value = getattr(debt, attr, None)
        if value is not None:
            payload[attr] = value
    return payload


def _parse_record(debt: Any, position: int) -> DebtRecord:
    if isinstance(debt, DebtRecord):
        return debt
    payload = _as_payload(debt)
    try:
        return DebtRecord.model_validate(payload)
    except ValidationError as exc:
        fields = sorted({str(err["loc"][0]) for err in exc.errors() if err.get("loc")})
        label = debt_label(payload.get("name"), payload.get("id"), position)
        raise InvalidInput(
            f"Debt '{label}' has missing or non-numeric fields: "
            f"{', '.join(fields) or 'unknown'}."
        ) from exc


def normalize_debt(debt: Any, position: int) -> NormalizedDebt:
    """Validate a single debt and return its canonical form.

    Debts that are already normalized are only re-indexed to ``position``.
    """

    if isinstance(debt, NormalizedDebt):
        return debt if debt.position == position else replace(debt, position=position)

    record = _parse_record(debt, position)
    label = debt_label(record.name, record.id, position)

    balance = float(record.balance)
    if not math.isfinite(balance) or balance <= 0 or round_money(balance) <= 0:
        raise InvalidInput(f"Debt '{label}' must have a positive balance.")
    apr = float(record.apr)
    if not math.isfinite(apr) or apr < 0:
        raise InvalidInput(f"Debt '{label}' must have a valid, non-negative APR.")
    minimum_payment = float(record.minimum_payment)
    if not math.isfinite(minimum_payment) or minimum_payment <= 0:
        raise InvalidInput(f"Debt '{label}' must have a positive minimum payment.")

    return NormalizedDebt(
        position=position,
        id=record.id,
        name=record.name,
        balance=round_money(balance),
        apr=apr,
        minimum_payment=minimum_payment,
        type=record.type,
        due_date=record.due_date,
    )


def normalize_debts(debts: Iterable[Any] | None) -> list[NormalizedDebt]:
    """Return validated debts in input order.

    Raises:
        InvalidInput: the list is empty or any debt is not simulatable
    """

    if debts is None or isinstance(debts, (str, bytes, Mapping)):
        raise InvalidInput("At least one debt is required to run a simulation.")
    items = list(debts)
    if not items:
        raise InvalidInput("At least one debt is required to run a simulation.")
    return [normalize_debt(debt, position) for position, debt in enumerate(items)]
