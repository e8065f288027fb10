"""Domain services for cash-flow forecasting.

Daily income and expense velocities come from a fixed 90-day lookback,
independent of the requested horizon. Confidence is a heuristic linear
decay, not a statistical interval.
"""

from collections.abc import Sequence
from datetime import date, timedelta
from decimal import Decimal

from src.domain.constants import (
    DEFAULT_FORECAST_HORIZON_DAYS,
    FORECAST_LOOKBACK_DAYS,
    HIGH_RISK_FRACTION,
    MEDIUM_RISK_FRACTION,
    MIN_END_OF_MONTH_CONFIDENCE,
    MIN_FORECAST_CONFIDENCE,
    OPTIMISTIC_NET_FACTOR,
    PESSIMISTIC_NET_FACTOR,
)
from src.domain.models import (
    Account,
    EndOfMonthPrediction,
    Forecast,
    ForecastDetails,
    ForecastPoint,
    ForecastScenarios,
    ForecastSummary,
    RiskLevel,
    Transaction,
)
from src.domain.services.accounts import calculate_starting_balance
from src.utils.date_utils import as_date, end_of_month
from src.utils.decimal_utils import ZERO, coerce_decimal, round_cents


def forecast_cashflow(
    transactions: Sequence[Transaction],
    accounts: Sequence[Account],
    horizon_days: int = DEFAULT_FORECAST_HORIZON_DAYS,
    as_of: date | None = None,
) -> Forecast:
    """Project the combined account balance day by day.

    Args:
        transactions: Historical transactions of the user.
        accounts: Accounts whose visible balances form the starting balance.
        horizon_days: Number of future days to project.
        as_of: Day the projection starts from; defaults to today.

    Returns:
        Forecast: Summary figures, daily points and scenario endpoints.
    """
    reference = as_of or date.today()
    cutoff = reference - timedelta(days=FORECAST_LOOKBACK_DAYS)

    total_income = ZERO
    total_expenses = ZERO
    for tx in transactions:
        if as_date(tx.occurred_at) < cutoff:
            continue
        amount = coerce_decimal(tx.amount)
        if amount > 0:
            total_income += amount
        elif amount < 0:
            total_expenses += abs(amount)

    avg_daily_income = total_income / FORECAST_LOOKBACK_DAYS
    avg_daily_expense = total_expenses / FORECAST_LOOKBACK_DAYS
    avg_daily_net = avg_daily_income - avg_daily_expense

    starting_balance = calculate_starting_balance(accounts)
    balance = starting_balance
    min_balance = starting_balance
    max_balance = starting_balance
    points: list[ForecastPoint] = []
    for day in range(1, horizon_days + 1):
        balance += avg_daily_net
        points.append(
            ForecastPoint(
                date=reference + timedelta(days=day),
                predicted_balance=round_cents(balance),
                confidence=max(
                    MIN_FORECAST_CONFIDENCE,
                    1 - (day / horizon_days) * 0.5,
                ),
            )
        )
        min_balance = min(min_balance, balance)
        max_balance = max(max_balance, balance)

    end_balance = (
        points[-1].predicted_balance if points else round_cents(starting_balance)
    )
    horizon = Decimal(max(horizon_days, 0))
    scenarios = ForecastScenarios(
        optimistic=round_cents(
            starting_balance + avg_daily_net * OPTIMISTIC_NET_FACTOR * horizon
        ),
        realistic=end_balance,
        pessimistic=round_cents(
            starting_balance + avg_daily_net * PESSIMISTIC_NET_FACTOR * horizon
        ),
    )
    summary = ForecastSummary(
        starting_balance=starting_balance,
        avg_daily_income=round_cents(avg_daily_income),
        avg_daily_expense=round_cents(avg_daily_expense),
        avg_daily_net=round_cents(avg_daily_net),
        horizon_days=horizon_days,
        risk_level=classify_risk(min_balance, starting_balance),
        min_balance=round_cents(min_balance),
        max_balance=round_cents(max_balance),
        end_balance=end_balance,
    )
    return Forecast(
        horizon_days=horizon_days,
        summary=summary,
        details=ForecastDetails(daily_points=points, scenarios=scenarios),
    )


def classify_risk(min_balance: Decimal, starting_balance: Decimal) -> RiskLevel:
    """Classify the lowest projected balance against the starting balance."""
    if min_balance < 0:
        return "critical"
    if min_balance < starting_balance * HIGH_RISK_FRACTION:
        return "high"
    if min_balance < starting_balance * MEDIUM_RISK_FRACTION:
        return "medium"
    return "low"


def predict_end_of_month_balance(
    transactions: Sequence[Transaction],
    accounts: Sequence[Account],
    as_of: date | None = None,
) -> EndOfMonthPrediction:
    """Forecast the balance on the last day of the current month."""
    reference = as_of or date.today()
    days_remaining = (end_of_month(reference) - reference).days
    forecast = forecast_cashflow(
        transactions,
        accounts,
        horizon_days=days_remaining,
        as_of=reference,
    )
    return EndOfMonthPrediction(
        predicted_balance=forecast.summary.end_balance,
        confidence=max(
            MIN_END_OF_MONTH_CONFIDENCE,
            1 - (days_remaining / 30) * 0.4,
        ),
        days_remaining=days_remaining,
    )


__all__ = [
    "forecast_cashflow",
    "classify_risk",
    "predict_end_of_month_balance",
]
