"""Domain validation helpers.

Input problems are reported as warnings only; the engine still computes
with whatever records it was given.
"""

from collections.abc import Iterable, Sequence
from logging import Logger

from src.domain.models import Budget, Debt, Transaction, TransactionSplit
from src.domain.services.statistics import group_by
from src.domain.services.transactions import validate_splits
from src.utils.decimal_utils import coerce_decimal


def validate_split_totals(
    transactions: Sequence[Transaction],
    splits: Sequence[TransactionSplit],
    logger: Logger,
) -> int:
    """Warn when a transaction's splits do not add up to its amount.

    Args:
        transactions: Transactions of the user.
        splits: Transaction splits of the user.
        logger: Logger used for warnings.

    Returns:
        int: Number of transactions with mismatched splits.
    """
    amounts = {tx.id: tx.amount for tx in transactions}
    mismatches = 0
    for transaction_id, tx_splits in group_by(
        splits, lambda split: split.transaction_id
    ).items():
        if transaction_id not in amounts:
            logger.warning(
                f"Splits reference unknown transaction {transaction_id}"
            )
            continue
        result = validate_splits(amounts[transaction_id], tx_splits)
        if not result.valid:
            mismatches += 1
            logger.warning(
                f"Splits of transaction {transaction_id} differ from its "
                f"amount by {result.difference}"
            )
    return mismatches


def validate_budget_amounts(budgets: Iterable[Budget], logger: Logger) -> None:
    """Warn about budgets whose total is not strictly positive."""
    for budget in budgets:
        if coerce_decimal(budget.total_amount) <= 0:
            logger.warning(
                f"Budget {budget.id} has a non-positive total: "
                f"{budget.total_amount}"
            )


def validate_debt_terms(debts: Iterable[Debt], logger: Logger) -> None:
    """Warn about debts whose minimum payment never covers the interest."""
    for debt in debts:
        balance = coerce_decimal(debt.current_balance)
        interest = balance * coerce_decimal(debt.interest_rate) / 12
        if balance > 0 and coerce_decimal(debt.minimum_payment) <= interest:
            logger.warning(
                f"Minimum payment of debt {debt.id} does not cover its "
                f"monthly interest ({interest:.2f})"
            )


__all__ = [
    "validate_split_totals",
    "validate_budget_amounts",
    "validate_debt_terms",
]
