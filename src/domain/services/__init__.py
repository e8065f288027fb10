"""Domain services package."""

from .accounts import (
    calculate_account_balance,
    calculate_starting_balance,
    compute_net_worth_summary,
    reconcile_account,
    visible_accounts,
)
from .budgets import (
    calculate_budget_status,
    calculate_carry_over,
    calculate_spent,
    detect_budget_violations,
    get_budget_progress,
    resolve_budget_window,
    suggest_adaptive_budget,
)
from .debts import (
    calculate_debt_payment,
    compare_strategies,
    simulate_avalanche_strategy,
    simulate_debt_payoff,
    simulate_snowball_strategy,
)
from .forecast import (
    classify_risk,
    forecast_cashflow,
    predict_end_of_month_balance,
)
from .goals import (
    calculate_goal_progress,
    calculate_required_monthly_savings,
    get_goal_recommendations,
    simulate_goal_progress,
)
from .insights import (
    detect_budget_risks,
    detect_category_overuse,
    detect_spending_anomalies,
    detect_trends,
    run_local_insights,
)
from .statistics import compute_stats, group_by, percentile, sum_by, z_score
from .transactions import (
    calculate_split_total,
    categorize_transaction,
    filter_transactions_by_period,
    get_recurring_transaction_schedule,
    get_transaction_trends,
    summarize_cashflow,
    validate_splits,
)
from .validation import (
    validate_budget_amounts,
    validate_debt_terms,
    validate_split_totals,
)

__all__ = [
    "compute_stats",
    "z_score",
    "percentile",
    "group_by",
    "sum_by",
    "resolve_budget_window",
    "calculate_spent",
    "calculate_budget_status",
    "get_budget_progress",
    "detect_budget_violations",
    "calculate_carry_over",
    "suggest_adaptive_budget",
    "calculate_debt_payment",
    "simulate_debt_payoff",
    "simulate_snowball_strategy",
    "simulate_avalanche_strategy",
    "compare_strategies",
    "forecast_cashflow",
    "classify_risk",
    "predict_end_of_month_balance",
    "detect_spending_anomalies",
    "detect_trends",
    "detect_category_overuse",
    "detect_budget_risks",
    "run_local_insights",
    "calculate_goal_progress",
    "simulate_goal_progress",
    "calculate_required_monthly_savings",
    "get_goal_recommendations",
    "calculate_split_total",
    "validate_splits",
    "filter_transactions_by_period",
    "summarize_cashflow",
    "get_transaction_trends",
    "categorize_transaction",
    "get_recurring_transaction_schedule",
    "visible_accounts",
    "calculate_starting_balance",
    "compute_net_worth_summary",
    "calculate_account_balance",
    "reconcile_account",
    "validate_split_totals",
    "validate_budget_amounts",
    "validate_debt_terms",
]
