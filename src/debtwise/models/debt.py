"""Debt records accepted by the payoff services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class DebtRecord(BaseModel):
    """Caller-facing debt as it arrives from a form, API payload, or repository.

    Both the camelCase names used by the web client and snake_case names are
    accepted. ``balance`` falls back to ``principal`` and ``apr`` falls back to
    ``interestRate``; APR is a percent number (18.5 means 18.5% a year).
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    id: Any = None
    name: Any = None
    balance: float = Field(validation_alias=AliasChoices("balance", "principal"))
    apr: float = Field(validation_alias=AliasChoices("apr", "interestRate", "interest_rate"))
    minimum_payment: float = Field(
        validation_alias=AliasChoices("minimumPayment", "minimum_payment")
    )
    type: Any = None
    due_date: Any = Field(default=None, validation_alias=AliasChoices("dueDate", "due_date"))


def debt_label(name: Any, debt_id: Any, position: int) -> str:
    """Human-readable name for messages: the name, else the id, else "#n"."""

    if name is not None and name != "":
        return str(name)
    if debt_id is not None:
        return str(debt_id)
    return f"#{position + 1}"


@dataclass(frozen=True, slots=True)
class NormalizedDebt:
    """Validated debt used by the simulation engine.

    ``position`` is the index in the caller's list and is the final tie-break
    when ordering debts.
    """

    position: int
    id: Any
    name: Any
    balance: float
    apr: float
    minimum_payment: float
    type: Any = None
    due_date: Any = None

    @property
    def label(self) -> str:
        return debt_label(self.name, self.id, self.position)
