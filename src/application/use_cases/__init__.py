"""Application use cases package."""

from .compare_debt_strategies import (
    CompareDebtStrategiesUseCase,
    StrategyComparison,
)
from .forecast_cashflow import Forecast, ForecastCashflowUseCase
from .generate_insights import GenerateInsightsUseCase, Insight
from .get_budget_statuses import BudgetStatus, GetBudgetStatusesUseCase
from .simulate_goals import GoalSimulation, SimulateGoalsUseCase

__all__ = [
    "GetBudgetStatusesUseCase",
    "BudgetStatus",
    "CompareDebtStrategiesUseCase",
    "StrategyComparison",
    "ForecastCashflowUseCase",
    "Forecast",
    "GenerateInsightsUseCase",
    "Insight",
    "SimulateGoalsUseCase",
    "GoalSimulation",
]
