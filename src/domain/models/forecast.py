"""Domain models for cash-flow forecasts."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Literal

RiskLevel = Literal["low", "medium", "high", "critical"]


@dataclass(frozen=True)
class ForecastPoint:
    """Projected balance for one future day."""

    date: date
    predicted_balance: Decimal
    confidence: float


@dataclass(frozen=True)
class ForecastSummary:
    """Headline figures of a forecast, rounded to cents."""

    starting_balance: Decimal
    avg_daily_income: Decimal
    avg_daily_expense: Decimal
    avg_daily_net: Decimal
    horizon_days: int
    risk_level: RiskLevel
    min_balance: Decimal
    max_balance: Decimal
    end_balance: Decimal


@dataclass(frozen=True)
class ForecastScenarios:
    """Endpoint balances under scaled daily net velocities."""

    optimistic: Decimal
    realistic: Decimal
    pessimistic: Decimal


@dataclass(frozen=True)
class ForecastDetails:
    daily_points: list[ForecastPoint]
    scenarios: ForecastScenarios


@dataclass(frozen=True)
class Forecast:
    """Cash-flow projection over a horizon of days."""

    horizon_days: int
    summary: ForecastSummary
    details: ForecastDetails


@dataclass(frozen=True)
class EndOfMonthPrediction:
    predicted_balance: Decimal
    confidence: float
    days_remaining: int


__all__ = [
    "RiskLevel",
    "ForecastPoint",
    "ForecastSummary",
    "ForecastScenarios",
    "ForecastDetails",
    "Forecast",
    "EndOfMonthPrediction",
]
