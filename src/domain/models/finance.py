"""Domain models for financial aggregates."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures.

    Attributes:
        asset_total: Sum of positive balances on asset accounts.
        liability_total: Sum of absolute balances on loan/credit accounts.
        net_worth: Visible balances with liabilities counted negatively.
    """

    asset_total: Decimal
    liability_total: Decimal
    net_worth: Decimal
    currency_code: str


@dataclass(frozen=True)
class CashflowSummary:
    """Summary of cashflow totals."""

    total_in: Decimal
    total_out: Decimal
    currency_code: str

    @property
    def difference(self) -> Decimal:
        """Return total_in minus total_out."""
        return self.total_in - self.total_out


@dataclass(frozen=True)
class MonthlyCashflow:
    """Income and expense totals for one calendar month."""

    month: str
    income: Decimal
    expenses: Decimal
    net: Decimal


@dataclass(frozen=True)
class SplitValidation:
    """Whether splits add up to their parent transaction."""

    valid: bool
    difference: Decimal


@dataclass(frozen=True)
class AccountReconciliation:
    calculated: Decimal
    expected: Decimal
    difference: Decimal
    needs_reconciliation: bool


__all__ = [
    "NetWorthSummary",
    "CashflowSummary",
    "MonthlyCashflow",
    "SplitValidation",
    "AccountReconciliation",
]
