"""Domain models for debt payoff simulations."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

from .records import Debt

StrategyName = Literal["snowball", "avalanche"]


@dataclass(frozen=True)
class DebtPayment:
    """Split of one monthly payment between interest and principal."""

    interest: Decimal
    principal_paid: Decimal
    remaining_balance: Decimal


@dataclass(frozen=True)
class PayoffScheduleEntry:
    """One month of a single-debt amortization schedule."""

    month: int
    payment: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal


@dataclass(frozen=True)
class DebtPayoffSimulation:
    """Result of amortizing a single debt.

    ``paid_off`` is False when the month ceiling was reached with a balance
    left, which means the plan never repays the debt.
    """

    months: int
    total_interest: Decimal
    total_paid: Decimal
    final_balance: Decimal
    paid_off: bool
    schedule: list[PayoffScheduleEntry]


@dataclass(frozen=True)
class StrategyDebtMonth:
    """State of one debt at the end of a strategy month."""

    id: str
    name: str
    balance: Decimal
    payment: Decimal


@dataclass(frozen=True)
class StrategyMonth:
    """All debts at the end of one simulated month."""

    month: int
    debts: list[StrategyDebtMonth]


@dataclass(frozen=True)
class DebtPayoffStrategy:
    """Multi-debt simulation under a snowball or avalanche ordering.

    Attributes:
        debts: Debts in the strategy's priority order.
        paid_off: False when the month ceiling was hit before every
            balance reached zero.
    """

    strategy: StrategyName
    debts: list[Debt]
    extra_payment: Decimal
    months_to_payoff: int
    total_interest_paid: Decimal
    paid_off: bool
    schedule: list[StrategyMonth]


@dataclass(frozen=True)
class StrategyComparison:
    """Side-by-side result of both strategies with the same extra payment.

    Attributes:
        savings: Snowball interest minus avalanche interest.
    """

    snowball: DebtPayoffStrategy
    avalanche: DebtPayoffStrategy
    recommendation: StrategyName
    savings: Decimal


__all__ = [
    "StrategyName",
    "DebtPayment",
    "PayoffScheduleEntry",
    "DebtPayoffSimulation",
    "StrategyDebtMonth",
    "StrategyMonth",
    "DebtPayoffStrategy",
    "StrategyComparison",
]
