"""Domain services detecting spending insights.

Four independent detectors each return zero or more ``Insight`` records.
Every insight carries the raw figures it was derived from in ``details`` so
that downstream consumers never need to recompute them.
"""

from collections.abc import Sequence
from datetime import date, datetime, time, timedelta
from uuid import uuid4

from src.domain.constants import (
    ANOMALY_LOOKBACK_DAYS,
    ANOMALY_MIN_TRANSACTIONS,
    ANOMALY_WARNING_Z_SCORE,
    ANOMALY_Z_SCORE_THRESHOLD,
    CATEGORY_MONTHLY_THRESHOLD,
    DEFAULT_MONTHS_TO_ANALYZE,
    TREND_CHANGE_THRESHOLD,
    TREND_WARNING_THRESHOLD,
)
from src.domain.models import Budget, Insight, Transaction, TransactionSplit
from src.domain.services.budgets import calculate_budget_status
from src.domain.services.statistics import compute_stats, group_by, z_score
from src.utils.date_utils import add_months, as_date, start_of_month
from src.utils.decimal_utils import ZERO, coerce_decimal


def detect_spending_anomalies(
    transactions: Sequence[Transaction],
    lookback_days: int = ANOMALY_LOOKBACK_DAYS,
    as_of: date | None = None,
) -> list[Insight]:
    """Flag merchants whose latest expense is far above their usual amount.

    Expenses of the trailing window are grouped by merchant. Merchants with
    fewer than three expenses are skipped. The most recent expense is scored
    against the merchant's mean and standard deviation.

    Args:
        transactions: Transactions of the user.
        lookback_days: Size of the trailing window in days.
        as_of: Last day of the window; defaults to today.

    Returns:
        list[Insight]: One anomaly insight per merchant with a z-score above
        2.5 (warning above 3, info otherwise).
    """
    reference = as_of or date.today()
    created_at = _created_at(reference)
    cutoff = reference - timedelta(days=lookback_days)
    expenses = [
        tx
        for tx in transactions
        if tx.merchant
        and coerce_decimal(tx.amount) < 0
        and as_date(tx.occurred_at) >= cutoff
    ]

    insights: list[Insight] = []
    by_merchant = group_by(expenses, lambda tx: tx.merchant)
    for merchant, merchant_txs in by_merchant.items():
        if len(merchant_txs) < ANOMALY_MIN_TRANSACTIONS:
            continue
        ordered = sorted(merchant_txs, key=lambda tx: tx.occurred_at)
        amounts = [abs(coerce_decimal(tx.amount)) for tx in ordered]
        stats = compute_stats(amounts)
        latest = amounts[-1]
        score = z_score(latest, stats.mean, stats.std_dev)
        if score <= ANOMALY_Z_SCORE_THRESHOLD:
            continue
        insights.append(
            Insight(
                id=f"anomaly-{uuid4().hex}",
                type="anomaly",
                title=f"Unusual spending at {merchant}",
                summary=(
                    f"A recent transaction of {latest:.2f} at \"{merchant}\" "
                    f"is {score:.1f} standard deviations above your usual "
                    f"{stats.mean:.2f}"
                ),
                details={
                    "merchant": merchant,
                    "transaction_id": ordered[-1].id,
                    "latest_amount": latest,
                    "average_amount": stats.mean,
                    "std_dev": stats.std_dev,
                    "z_score": score,
                    "transaction_count": len(ordered),
                },
                severity=(
                    "warning" if score > ANOMALY_WARNING_Z_SCORE else "info"
                ),
                created_at=created_at,
            )
        )
    return insights


def detect_trends(
    transactions: Sequence[Transaction],
    months_to_analyze: int = DEFAULT_MONTHS_TO_ANALYZE,
    as_of: date | None = None,
) -> list[Insight]:
    """Compare spending of the latest full month with the oldest one.

    The ``months_to_analyze`` full calendar months before ``as_of`` are
    bucketed. A rise above 15% yields an info insight (warning above 30%);
    a fall beyond 15% yields a positive insight.
    """
    if months_to_analyze < 2:
        return []
    reference = as_of or date.today()
    created_at = _created_at(reference)
    breakdown: list[dict] = []
    for offset in range(1, months_to_analyze + 1):
        month_start = start_of_month(add_months(reference, -offset))
        month_end = add_months(month_start, 1)
        spent = sum(
            (
                abs(coerce_decimal(tx.amount))
                for tx in transactions
                if coerce_decimal(tx.amount) < 0
                and month_start <= as_date(tx.occurred_at) < month_end
            ),
            ZERO,
        )
        breakdown.append(
            {"month": month_start.strftime("%b %Y"), "amount": spent}
        )

    latest = breakdown[0]["amount"]
    oldest = breakdown[-1]["amount"]
    if oldest <= 0:
        return []

    change_percent = (latest - oldest) / oldest * 100
    if change_percent > TREND_CHANGE_THRESHOLD:
        return [
            Insight(
                id=f"trend-increase-{uuid4().hex}",
                type="trend",
                title="Growing monthly spending",
                summary=(
                    f"Your spending increased by {change_percent:.1f}% over "
                    f"the past {months_to_analyze} months"
                ),
                details={
                    "change_percent": change_percent,
                    "monthly_breakdown": breakdown,
                    "latest_month": breakdown[0],
                    "oldest_month": breakdown[-1],
                },
                severity=(
                    "warning"
                    if change_percent > TREND_WARNING_THRESHOLD
                    else "info"
                ),
                created_at=created_at,
            )
        ]
    if change_percent < -TREND_CHANGE_THRESHOLD:
        return [
            Insight(
                id=f"trend-decrease-{uuid4().hex}",
                type="trend",
                title="Decreasing monthly spending",
                summary=(
                    f"Great job! Your spending decreased by "
                    f"{abs(change_percent):.1f}% over the past "
                    f"{months_to_analyze} months"
                ),
                details={
                    "change_percent": change_percent,
                    "monthly_breakdown": breakdown,
                    "latest_month": breakdown[0],
                    "oldest_month": breakdown[-1],
                },
                severity="positive",
                created_at=created_at,
            )
        ]
    return []


def detect_category_overuse(
    transactions: Sequence[Transaction],
    splits: Sequence[TransactionSplit],
    months_to_analyze: int = DEFAULT_MONTHS_TO_ANALYZE,
    as_of: date | None = None,
) -> list[Insight]:
    """Flag categories whose average monthly spending exceeds 500.

    Splits count when their parent transaction occurred on or after the
    first day of the month ``months_to_analyze`` months before ``as_of``.
    """
    if months_to_analyze <= 0:
        return []
    reference = as_of or date.today()
    created_at = _created_at(reference)
    window_start = start_of_month(add_months(reference, -months_to_analyze))
    occurred_on = {tx.id: as_date(tx.occurred_at) for tx in transactions}
    recent = [
        split
        for split in splits
        if split.category_id
        and split.transaction_id in occurred_on
        and occurred_on[split.transaction_id] >= window_start
    ]

    insights: list[Insight] = []
    for category_id, category_splits in group_by(
        recent, lambda split: split.category_id
    ).items():
        total_spent = sum(
            (abs(coerce_decimal(split.amount)) for split in category_splits),
            ZERO,
        )
        avg_per_month = total_spent / months_to_analyze
        if avg_per_month <= CATEGORY_MONTHLY_THRESHOLD:
            continue
        insights.append(
            Insight(
                id=f"category-{category_id}-{uuid4().hex}",
                type="recommendation",
                title="High spending in category",
                summary=(
                    f"You're spending an average of {avg_per_month:.2f} "
                    f"per month in this category"
                ),
                details={
                    "category_id": category_id,
                    "total_spent": total_spent,
                    "avg_per_month": avg_per_month,
                    "transaction_count": len(category_splits),
                    "months_analyzed": months_to_analyze,
                },
                severity="info",
                created_at=created_at,
            )
        )
    return insights


def detect_budget_risks(
    budgets: Sequence[Budget],
    transactions: Sequence[Transaction],
    splits: Sequence[TransactionSplit],
    as_of: date | None = None,
) -> list[Insight]:
    """Emit critical insights for exceeded budgets and warnings near limits."""
    created_at = _created_at(as_of or date.today())
    insights: list[Insight] = []
    for budget in budgets:
        status = calculate_budget_status(budget, transactions, splits)
        total = coerce_decimal(budget.total_amount)
        label = budget.name or budget.id
        if status.status == "exceeded":
            insights.append(
                Insight(
                    id=f"budget-exceeded-{budget.id}",
                    type="budget",
                    title=f"Budget exceeded: {label}",
                    summary=(
                        f"You've spent {status.spent:.2f} of {total:.2f} "
                        f"({status.percentage:.0f}%)"
                    ),
                    details={
                        "budget_id": budget.id,
                        "budget_name": budget.name,
                        "allocated": total,
                        "spent": status.spent,
                        "percentage": status.percentage,
                        "overspent": status.spent - total,
                    },
                    severity="critical",
                    created_at=created_at,
                )
            )
        elif status.status == "warning":
            insights.append(
                Insight(
                    id=f"budget-warning-{budget.id}",
                    type="budget",
                    title=f"Budget alert: {label}",
                    summary=(
                        f"You've used {status.percentage:.0f}% of your "
                        f"budget for {label}"
                    ),
                    details={
                        "budget_id": budget.id,
                        "budget_name": budget.name,
                        "allocated": total,
                        "spent": status.spent,
                        "percentage": status.percentage,
                        "remaining": status.remaining,
                    },
                    severity="warning",
                    created_at=created_at,
                )
            )
    return insights


def run_local_insights(
    transactions: Sequence[Transaction],
    budgets: Sequence[Budget],
    splits: Sequence[TransactionSplit] = (),
    months_to_analyze: int = DEFAULT_MONTHS_TO_ANALYZE,
    as_of: date | None = None,
) -> list[Insight]:
    """Run every detector.

    Returns:
        list[Insight]: Anomaly, trend, category overuse and budget risk
        insights, in that order.
    """
    reference = as_of or date.today()
    insights: list[Insight] = []
    insights.extend(detect_spending_anomalies(transactions, as_of=reference))
    insights.extend(
        detect_trends(transactions, months_to_analyze, as_of=reference)
    )
    insights.extend(
        detect_category_overuse(
            transactions,
            splits,
            months_to_analyze,
            as_of=reference,
        )
    )
    insights.extend(
        detect_budget_risks(budgets, transactions, splits, as_of=reference)
    )
    return insights


def _created_at(reference: date) -> datetime:
    # Midnight of the reference day; the wall clock is never read.
    return datetime.combine(reference, time.min)


__all__ = [
    "detect_spending_anomalies",
    "detect_trends",
    "detect_category_overuse",
    "detect_budget_risks",
    "run_local_insights",
]
