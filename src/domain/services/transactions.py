"""Domain services for transactions and their splits."""

from collections.abc import Iterable, Mapping, Sequence
from datetime import date, datetime, time
from decimal import Decimal
from itertools import islice

from dateutil.rrule import rrulestr

from src.domain.constants import SPLIT_TOLERANCE
from src.domain.models import (
    CashflowSummary,
    MonthlyCashflow,
    SplitValidation,
    Transaction,
    TransactionSplit,
)
from src.utils.date_utils import add_months, as_date, end_of_month, start_of_month
from src.utils.decimal_utils import ZERO, coerce_decimal


def calculate_split_total(splits: Iterable[TransactionSplit]) -> Decimal:
    """Return the signed sum of split amounts."""
    return sum((coerce_decimal(split.amount) for split in splits), ZERO)


def validate_splits(
    transaction_amount,
    splits: Iterable[TransactionSplit],
) -> SplitValidation:
    """Check that splits add up to their parent amount within one cent.

    Signs are ignored so that splits recorded as positive shares of an
    outflow still validate.
    """
    split_total = calculate_split_total(splits)
    difference = abs(abs(coerce_decimal(transaction_amount)) - abs(split_total))
    return SplitValidation(
        valid=difference < SPLIT_TOLERANCE,
        difference=difference,
    )


def filter_transactions_by_period(
    transactions: Iterable[Transaction],
    start: date,
    end: date,
) -> list[Transaction]:
    """Return transactions that occurred between start and end inclusive."""
    return [
        tx for tx in transactions if start <= as_date(tx.occurred_at) <= end
    ]


def summarize_cashflow(
    transactions: Iterable[Transaction],
    currency_code: str = "EUR",
) -> CashflowSummary:
    """Total inflows and outflows of a set of transactions."""
    total_in = ZERO
    total_out = ZERO
    for tx in transactions:
        amount = coerce_decimal(tx.amount)
        if amount > 0:
            total_in += amount
        elif amount < 0:
            total_out += abs(amount)
    return CashflowSummary(
        total_in=total_in,
        total_out=total_out,
        currency_code=currency_code,
    )


def get_transaction_trends(
    transactions: Sequence[Transaction],
    months: int = 6,
    as_of: date | None = None,
) -> list[MonthlyCashflow]:
    """Return monthly income and expenses, oldest month first.

    The current month of ``as_of`` is the last entry.
    """
    reference = as_of or date.today()
    trends: list[MonthlyCashflow] = []
    for offset in range(months - 1, -1, -1):
        month_start = start_of_month(add_months(reference, -offset))
        period = filter_transactions_by_period(
            transactions,
            month_start,
            end_of_month(month_start),
        )
        summary = summarize_cashflow(period)
        trends.append(
            MonthlyCashflow(
                month=month_start.strftime("%b %Y"),
                income=summary.total_in,
                expenses=summary.total_out,
                net=summary.difference,
            )
        )
    return trends


def categorize_transaction(
    transaction: Transaction,
    rules: Mapping[str, str] | None = None,
) -> str | None:
    """Return the category of the first rule matching the merchant.

    Args:
        transaction: Transaction to categorize.
        rules: Merchant substring to category id, checked in order. Matching
            is case-insensitive.

    Returns:
        str | None: Matching category id, or None when the transaction has
        no merchant or no rule matches.
    """
    if not transaction.merchant or not rules:
        return None
    merchant = transaction.merchant.lower()
    for pattern, category_id in rules.items():
        if pattern.lower() in merchant:
            return category_id
    return None


def get_recurring_transaction_schedule(
    recurring_rule: str,
    start: date,
    count: int = 12,
) -> list[date]:
    """Expand a recurrence rule into its first occurrence dates.

    Args:
        recurring_rule: RFC 5545 rule, e.g. ``FREQ=MONTHLY;INTERVAL=2``.
        start: First occurrence.
        count: Maximum number of dates returned.

    Returns:
        list[date]: Occurrences in chronological order; empty when the rule
        cannot be parsed. Monthly rules starting on the 29th to 31st skip
        months lacking that day.
    """
    if count <= 0:
        return []
    try:
        rule = rrulestr(
            recurring_rule,
            dtstart=datetime.combine(start, time.min),
        )
    except (TypeError, ValueError):
        return []
    return [occurrence.date() for occurrence in islice(rule, count)]


__all__ = [
    "calculate_split_total",
    "validate_splits",
    "filter_transactions_by_period",
    "summarize_cashflow",
    "get_transaction_trends",
    "categorize_transaction",
    "get_recurring_transaction_schedule",
]
