"""Port for loading one user's financial records."""

from typing import Protocol

from src.domain.models import (
    Account,
    Budget,
    Debt,
    Goal,
    Transaction,
    TransactionSplit,
)


class FinancialRecordsPort(Protocol):
    """Port exposing the raw records of a single user.

    Implementations are scoped to one user; the engine trusts that scoping
    and never filters by owner itself.
    """

    def fetch_transactions(self) -> list[Transaction]:
        """Return transactions ordered by occurrence."""

    def fetch_splits(self) -> list[TransactionSplit]:
        """Return the category splits of the transactions."""

    def fetch_accounts(self) -> list[Account]:
        """Return account snapshots with current balances."""

    def fetch_budgets(self) -> list[Budget]:
        """Return the user's budgets."""

    def fetch_debts(self) -> list[Debt]:
        """Return active debts."""

    def fetch_goals(self) -> list[Goal]:
        """Return savings goals."""


__all__ = ["FinancialRecordsPort"]
