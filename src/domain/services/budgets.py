"""Domain services for budget consumption."""

from collections.abc import Iterable, Sequence
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from src.domain.constants import ADAPTIVE_BUDGET_BUFFER
from src.domain.models import (
    Budget,
    BudgetStatus,
    BudgetViolation,
    Transaction,
    TransactionSplit,
)
from src.utils.date_utils import add_months, as_date, end_of_month, start_of_month
from src.utils.decimal_utils import ZERO, coerce_decimal

INFINITY = Decimal("Infinity")


def resolve_budget_window(budget: Budget) -> tuple[date, date]:
    """Return the inclusive date window a budget covers.

    Open-ended budgets run until the end of their start month.
    """
    end = budget.end_date or end_of_month(budget.start_date)
    return budget.start_date, end


def calculate_spent(
    start: date,
    end: date,
    transactions: Sequence[Transaction],
    splits: Sequence[TransactionSplit],
    category_id: str | None = None,
) -> Decimal:
    """Sum spending between two dates (inclusive).

    Args:
        start: First day of the window.
        end: Last day of the window.
        transactions: Transactions of the user.
        splits: Transaction splits of the user.
        category_id: When set, only splits of this category are counted;
            otherwise every outflow transaction is counted.

    Returns:
        Decimal: Absolute amount spent in the window.
    """
    if category_id:
        occurred_on = {tx.id: as_date(tx.occurred_at) for tx in transactions}
        return sum(
            (
                abs(coerce_decimal(split.amount))
                for split in splits
                if split.category_id == category_id
                and split.transaction_id in occurred_on
                and start <= occurred_on[split.transaction_id] <= end
            ),
            ZERO,
        )
    return sum(
        (
            abs(coerce_decimal(tx.amount))
            for tx in transactions
            if coerce_decimal(tx.amount) < 0
            and start <= as_date(tx.occurred_at) <= end
        ),
        ZERO,
    )


def calculate_budget_status(
    budget: Budget,
    transactions: Sequence[Transaction],
    splits: Sequence[TransactionSplit],
) -> BudgetStatus:
    """Compute how much of a budget has been consumed.

    Args:
        budget: Budget to evaluate.
        transactions: Transactions of the user.
        splits: Transaction splits of the user.

    Returns:
        BudgetStatus: Spent, remaining and percentage figures with the
        on_track, warning or exceeded state. Exceeded wins over warning.
    """
    start, end = resolve_budget_window(budget)
    spent = calculate_spent(
        start,
        end,
        transactions,
        splits,
        category_id=budget.category_id,
    )
    total = coerce_decimal(budget.total_amount)
    remaining = total - spent
    if total == 0:
        percentage = INFINITY if spent > 0 else ZERO
    else:
        percentage = spent / total * 100

    status = "on_track"
    if spent > total:
        status = "exceeded"
    elif budget.alert_threshold and percentage >= (
        coerce_decimal(budget.alert_threshold) * 100
    ):
        status = "warning"

    return BudgetStatus(
        budget=budget,
        spent=spent,
        remaining=remaining,
        percentage=percentage,
        status=status,
    )


def get_budget_progress(
    budgets: Iterable[Budget],
    transactions: Sequence[Transaction],
    splits: Sequence[TransactionSplit],
) -> list[BudgetStatus]:
    """Return the status of every budget, in input order."""
    return [
        calculate_budget_status(budget, transactions, splits)
        for budget in budgets
    ]


def detect_budget_violations(
    statuses: Iterable[BudgetStatus],
) -> list[BudgetViolation]:
    """Return the budgets that are exceeded or past their alert threshold."""
    violations: list[BudgetViolation] = []
    for status in statuses:
        if status.status == "on_track":
            continue
        total = coerce_decimal(status.budget.total_amount)
        violations.append(
            BudgetViolation(
                budget=status.budget,
                overspent=max(ZERO, status.spent - total),
                severity=(
                    "critical" if status.status == "exceeded" else "warning"
                ),
            )
        )
    return violations


def calculate_carry_over(
    budget: Budget,
    previous_period_remaining: Decimal,
) -> Decimal:
    """Return the amount rolled into the next period (never negative)."""
    if not budget.carry_over:
        return ZERO
    return max(ZERO, coerce_decimal(previous_period_remaining))


def suggest_adaptive_budget(
    category_id: str | None,
    transactions: Sequence[Transaction],
    splits: Sequence[TransactionSplit],
    lookback_months: int = 3,
    as_of: date | None = None,
) -> Decimal:
    """Suggest a budget amount from recent spending.

    Averages spending over the ``lookback_months`` full months preceding
    ``as_of`` and adds a 10% buffer.

    Args:
        category_id: Category to scope spending to, or None for all outflows.
        transactions: Transactions of the user.
        splits: Transaction splits of the user.
        lookback_months: Number of full months to average.
        as_of: Reference date; defaults to today.

    Returns:
        Decimal: Suggested amount rounded to a whole unit.
    """
    if lookback_months <= 0:
        return ZERO
    reference = as_of or date.today()
    monthly: list[Decimal] = []
    for offset in range(1, lookback_months + 1):
        month_start = start_of_month(add_months(reference, -offset))
        monthly.append(
            calculate_spent(
                month_start,
                end_of_month(month_start),
                transactions,
                splits,
                category_id=category_id,
            )
        )
    average = sum(monthly, ZERO) / len(monthly)
    return (average * ADAPTIVE_BUDGET_BUFFER).quantize(
        Decimal("1"),
        rounding=ROUND_HALF_UP,
    )


__all__ = [
    "resolve_budget_window",
    "calculate_spent",
    "calculate_budget_status",
    "get_budget_progress",
    "detect_budget_violations",
    "calculate_carry_over",
    "suggest_adaptive_budget",
]
