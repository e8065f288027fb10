"""Domain models for budget consumption."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

from .records import Budget

BudgetState = Literal["on_track", "warning", "exceeded"]


@dataclass(frozen=True)
class BudgetStatus:
    """Consumption of a budget over its effective window.

    Attributes:
        remaining: total_amount minus spent; negative when overspent.
        percentage: Share of the budget consumed; ``Decimal("Infinity")``
            for a zero budget with any spending.
    """

    budget: Budget
    spent: Decimal
    remaining: Decimal
    percentage: Decimal
    status: BudgetState


@dataclass(frozen=True)
class BudgetViolation:
    """Budget that is exceeded or past its alert threshold."""

    budget: Budget
    overspent: Decimal
    severity: Literal["warning", "critical"]


__all__ = ["BudgetState", "BudgetStatus", "BudgetViolation"]
