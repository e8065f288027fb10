"""Input records handed to the engine by the record-loading collaborator.

All records are read-only snapshots. Amounts are ``Decimal`` and follow the
signed convention: positive values are inflows, negative values outflows.
All records passed to one computation are assumed to share a currency.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class Transaction:
    """A posted transaction on one account."""

    id: str
    account_id: str
    amount: Decimal
    occurred_at: datetime
    currency: str = "EUR"
    merchant: str | None = None
    category: str | None = None
    budget_id: str | None = None


@dataclass(frozen=True)
class TransactionSplit:
    """Categorized share of a parent transaction's amount."""

    transaction_id: str
    amount: Decimal
    category_id: str | None = None


@dataclass(frozen=True)
class Account:
    """Account snapshot used for starting balances and net worth.

    Attributes:
        account_type: One of cash, bank, credit, ewallet, loan, investment
            or other.
        hidden: Hidden accounts are excluded from balances.
        archived: Archived accounts are excluded from balances.
    """

    id: str
    balance: Decimal
    name: str = ""
    account_type: str = "bank"
    currency: str = "EUR"
    hidden: bool = False
    archived: bool = False


@dataclass(frozen=True)
class Budget:
    """Spending limit over a period, optionally scoped to one category.

    Attributes:
        end_date: Inclusive end of the period; the end of the start month is
            used when missing.
        alert_threshold: Fraction (0-1) of total_amount that triggers a
            warning.
        carry_over: Whether an unspent remainder rolls into the next period.
    """

    id: str
    start_date: date
    total_amount: Decimal
    name: str = ""
    category_id: str | None = None
    end_date: date | None = None
    alert_threshold: Decimal | None = None
    carry_over: bool = False


@dataclass(frozen=True)
class Debt:
    """Outstanding debt with a simple annual interest rate."""

    id: str
    current_balance: Decimal
    interest_rate: Decimal
    minimum_payment: Decimal
    name: str = ""
    interest_type: str = "simple"


@dataclass(frozen=True)
class Goal:
    """Savings goal funded by a fixed monthly contribution."""

    id: str
    target_amount: Decimal
    current_amount: Decimal
    monthly_contribution: Decimal
    name: str = ""
    target_date: date | None = None


__all__ = [
    "Transaction",
    "TransactionSplit",
    "Account",
    "Budget",
    "Debt",
    "Goal",
]
