"""Error taxonomy for the debt payoff services."""

from __future__ import annotations


class DebtError(ValueError):
    """Base class for every failure raised by the payoff services.

    ``status_code`` is a hint for HTTP adapters; the services never act on it.
    """

    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(DebtError):
    """A debt record (or the debt list itself) cannot be simulated."""


class InvalidStrategy(DebtError):
    """The requested payoff strategy is not supported."""

    def __init__(self, strategy: object) -> None:
        super().__init__(f"Strategy must be 'snowball' or 'avalanche', got {strategy!r}.")
        self.strategy = strategy


class InvalidBudget(DebtError):
    """The monthly budget is missing, non-finite, or not positive."""


class BudgetTooLow(DebtError):
    """The monthly budget does not cover the month-zero minimum payments."""

    def __init__(self, *, monthly_budget: float, minimum_required: float) -> None:
        super().__init__(
            f"Monthly budget ${monthly_budget:.2f} is too low; "
            f"at least ${minimum_required:.2f} is required to cover minimum payments."
        )
        self.monthly_budget = monthly_budget
        self.minimum_required = minimum_required


class SimulationDiverges(DebtError):
    """Debts were not paid off within the simulation bound."""

    status_code = 422

    def __init__(self, max_months: int) -> None:
        super().__init__(
            f"Debts were not paid off within {max_months} months "
            f"({max_months // 12} years); increase the monthly budget."
        )
        self.max_months = max_months


__all__ = [
    "BudgetTooLow",
    "DebtError",
    "InvalidBudget",
    "InvalidInput",
    "InvalidStrategy",
    "SimulationDiverges",
]
