"""Domain models package."""

from .budgets import BudgetState, BudgetStatus, BudgetViolation
from .debts import (
    DebtPayment,
    DebtPayoffSimulation,
    DebtPayoffStrategy,
    PayoffScheduleEntry,
    StrategyComparison,
    StrategyDebtMonth,
    StrategyMonth,
    StrategyName,
)
from .finance import (
    AccountReconciliation,
    CashflowSummary,
    MonthlyCashflow,
    NetWorthSummary,
    SplitValidation,
)
from .forecast import (
    EndOfMonthPrediction,
    Forecast,
    ForecastDetails,
    ForecastPoint,
    ForecastScenarios,
    ForecastSummary,
    RiskLevel,
)
from .goals import (
    GoalProgress,
    GoalProgressPoint,
    GoalRecommendation,
    GoalSimulation,
)
from .insights import Insight, InsightSeverity, InsightType
from .records import (
    Account,
    Budget,
    Debt,
    Goal,
    Transaction,
    TransactionSplit,
)
from .statistics import SeriesStats

__all__ = [
    "Account",
    "Budget",
    "Debt",
    "Goal",
    "Transaction",
    "TransactionSplit",
    "SeriesStats",
    "BudgetState",
    "BudgetStatus",
    "BudgetViolation",
    "StrategyName",
    "DebtPayment",
    "PayoffScheduleEntry",
    "DebtPayoffSimulation",
    "StrategyDebtMonth",
    "StrategyMonth",
    "DebtPayoffStrategy",
    "StrategyComparison",
    "RiskLevel",
    "ForecastPoint",
    "ForecastSummary",
    "ForecastScenarios",
    "ForecastDetails",
    "Forecast",
    "EndOfMonthPrediction",
    "InsightType",
    "InsightSeverity",
    "Insight",
    "GoalProgressPoint",
    "GoalSimulation",
    "GoalProgress",
    "GoalRecommendation",
    "NetWorthSummary",
    "CashflowSummary",
    "MonthlyCashflow",
    "SplitValidation",
    "AccountReconciliation",
]
