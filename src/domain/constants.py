"""Domain constants for finance analytics."""

from decimal import Decimal

# Hard ceiling guaranteeing termination of every payoff simulation.
MAX_SIMULATION_MONTHS = 600

FORECAST_LOOKBACK_DAYS = 90
DEFAULT_FORECAST_HORIZON_DAYS = 90
MIN_FORECAST_CONFIDENCE = 0.5
MIN_END_OF_MONTH_CONFIDENCE = 0.6
HIGH_RISK_FRACTION = Decimal("0.1")
MEDIUM_RISK_FRACTION = Decimal("0.3")
OPTIMISTIC_NET_FACTOR = Decimal("1.2")
PESSIMISTIC_NET_FACTOR = Decimal("0.8")

ANOMALY_LOOKBACK_DAYS = 90
ANOMALY_MIN_TRANSACTIONS = 3
ANOMALY_Z_SCORE_THRESHOLD = Decimal("2.5")
ANOMALY_WARNING_Z_SCORE = Decimal("3")

DEFAULT_MONTHS_TO_ANALYZE = 3
TREND_CHANGE_THRESHOLD = Decimal("15")
TREND_WARNING_THRESHOLD = Decimal("30")
CATEGORY_MONTHLY_THRESHOLD = Decimal("500")

ADAPTIVE_BUDGET_BUFFER = Decimal("1.1")
SPLIT_TOLERANCE = Decimal("0.01")

LIABILITY_ACCOUNT_TYPES = (
    "loan",
    "credit",
)


__all__ = [
    "MAX_SIMULATION_MONTHS",
    "FORECAST_LOOKBACK_DAYS",
    "DEFAULT_FORECAST_HORIZON_DAYS",
    "MIN_FORECAST_CONFIDENCE",
    "MIN_END_OF_MONTH_CONFIDENCE",
    "HIGH_RISK_FRACTION",
    "MEDIUM_RISK_FRACTION",
    "OPTIMISTIC_NET_FACTOR",
    "PESSIMISTIC_NET_FACTOR",
    "ANOMALY_LOOKBACK_DAYS",
    "ANOMALY_MIN_TRANSACTIONS",
    "ANOMALY_Z_SCORE_THRESHOLD",
    "ANOMALY_WARNING_Z_SCORE",
    "DEFAULT_MONTHS_TO_ANALYZE",
    "TREND_CHANGE_THRESHOLD",
    "TREND_WARNING_THRESHOLD",
    "CATEGORY_MONTHLY_THRESHOLD",
    "ADAPTIVE_BUDGET_BUFFER",
    "SPLIT_TOLERANCE",
    "LIABILITY_ACCOUNT_TYPES",
]
