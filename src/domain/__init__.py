"""Domain package for the financial analytics engine."""

from .constants import MAX_SIMULATION_MONTHS
from .models import (
    Account,
    Budget,
    BudgetStatus,
    Debt,
    DebtPayoffSimulation,
    DebtPayoffStrategy,
    Forecast,
    Goal,
    GoalSimulation,
    Insight,
    StrategyComparison,
    Transaction,
    TransactionSplit,
)
from .services import (
    calculate_budget_status,
    compare_strategies,
    forecast_cashflow,
    run_local_insights,
    simulate_debt_payoff,
    simulate_goal_progress,
)

__all__ = [
    "MAX_SIMULATION_MONTHS",
    "Account",
    "Budget",
    "BudgetStatus",
    "Debt",
    "DebtPayoffSimulation",
    "DebtPayoffStrategy",
    "Forecast",
    "Goal",
    "GoalSimulation",
    "Insight",
    "StrategyComparison",
    "Transaction",
    "TransactionSplit",
    "calculate_budget_status",
    "compare_strategies",
    "forecast_cashflow",
    "run_local_insights",
    "simulate_debt_payoff",
    "simulate_goal_progress",
]
