"""Domain services for account balances and net worth."""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from src.domain.constants import LIABILITY_ACCOUNT_TYPES
from src.domain.models import (
    Account,
    AccountReconciliation,
    NetWorthSummary,
    Transaction,
)
from src.utils.decimal_utils import ZERO, coerce_decimal

RECONCILIATION_TOLERANCE = Decimal("0.01")


def visible_accounts(accounts: Iterable[Account]) -> list[Account]:
    """Return accounts that are neither archived nor hidden."""
    return [
        account
        for account in accounts
        if not account.archived and not account.hidden
    ]


def calculate_starting_balance(accounts: Iterable[Account]) -> Decimal:
    """Sum the balances of visible accounts."""
    return sum(
        (coerce_decimal(account.balance) for account in visible_accounts(accounts)),
        ZERO,
    )


def compute_net_worth_summary(
    accounts: Iterable[Account],
    *,
    liability_types: Iterable[str] = LIABILITY_ACCOUNT_TYPES,
    currency_code: str = "EUR",
) -> NetWorthSummary:
    """Compute net worth totals from visible account balances.

    Args:
        accounts: Account snapshots of the user.
        liability_types: Account types treated as liabilities.
        currency_code: Currency the balances are expressed in.

    Returns:
        NetWorthSummary: Computed asset, liability, and net worth totals.
    """
    liability_types = tuple(liability_types)
    asset_total = ZERO
    liability_total = ZERO
    net_worth = ZERO
    for account in visible_accounts(accounts):
        balance = coerce_decimal(account.balance)
        if account.account_type in liability_types:
            liability_total += abs(balance)
            net_worth -= abs(balance)
        else:
            asset_total += max(ZERO, balance)
            net_worth += balance
    return NetWorthSummary(
        asset_total=asset_total,
        liability_total=liability_total,
        net_worth=net_worth,
        currency_code=currency_code,
    )


def calculate_account_balance(
    transactions: Iterable[Transaction],
    account_id: str,
) -> Decimal:
    """Sum the transactions posted on one account."""
    return sum(
        (
            coerce_decimal(tx.amount)
            for tx in transactions
            if tx.account_id == account_id
        ),
        ZERO,
    )


def reconcile_account(
    transactions: Sequence[Transaction],
    expected_balance: Decimal,
) -> AccountReconciliation:
    """Compare the transaction total with an expected balance."""
    calculated = sum((coerce_decimal(tx.amount) for tx in transactions), ZERO)
    expected = coerce_decimal(expected_balance)
    difference = abs(calculated - expected)
    return AccountReconciliation(
        calculated=calculated,
        expected=expected,
        difference=difference,
        needs_reconciliation=difference > RECONCILIATION_TOLERANCE,
    )


__all__ = [
    "visible_accounts",
    "calculate_starting_balance",
    "compute_net_worth_summary",
    "calculate_account_balance",
    "reconcile_account",
]
