"""CLI adapter printing an analytics report for one records snapshot.

This module wires the analytics use cases to the JSON records repository
and prints budgets, debt strategies, the cash-flow forecast, insights and
goal projections as plain text.
"""

from src.infrastructure.container import (
    build_budget_statuses_use_case,
    build_debt_strategies_use_case,
    build_forecast_use_case,
    build_goals_use_case,
    build_insights_use_case,
    build_records_repository,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import EngineSettings


def main() -> None:
    """Run every analytics use case and print the report."""
    logger = get_app_logger()
    settings = EngineSettings.from_env()
    if settings.records_file is None:
        logger.warning(
            "FINANCE_RECORDS_FILE is required to build the analytics report."
        )
        return

    repository = build_records_repository(settings.records_file)
    try:
        statuses = build_budget_statuses_use_case(repository).execute()
        comparison = build_debt_strategies_use_case(repository).execute(
            extra_payment=settings.extra_payment
        )
        forecast = build_forecast_use_case(repository).execute(
            horizon_days=settings.horizon_days
        )
        insights = build_insights_use_case(repository).execute(
            months_to_analyze=settings.months_to_analyze
        )
        simulations = build_goals_use_case(repository).execute()
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    get_usage_logger().info(
        f"Analytics report built from {settings.records_file}"
    )

    print("Budgets")
    for status in statuses:
        label = status.budget.name or status.budget.id
        print(
            f"  {label}: spent={status.spent:.2f}, "
            f"remaining={status.remaining:.2f}, "
            f"percentage={status.percentage:.1f}%, status={status.status}"
        )

    print("Debts")
    if comparison is None:
        print("  no active debts")
    else:
        for result in (comparison.snowball, comparison.avalanche):
            months = (
                f"{result.months_to_payoff} months"
                if result.paid_off
                else "not paid off under current plan"
            )
            print(
                f"  {result.strategy}: {months}, "
                f"interest={result.total_interest_paid:.2f}"
            )
        print(
            f"  recommendation={comparison.recommendation}, "
            f"savings={comparison.savings:.2f}"
        )

    summary = forecast.summary
    print(f"Forecast ({summary.horizon_days} days)")
    print(
        f"  start={summary.starting_balance:.2f}, "
        f"end={summary.end_balance:.2f}, min={summary.min_balance:.2f}, "
        f"max={summary.max_balance:.2f}, risk={summary.risk_level}"
    )
    scenarios = forecast.details.scenarios
    print(
        f"  optimistic={scenarios.optimistic:.2f}, "
        f"pessimistic={scenarios.pessimistic:.2f}"
    )

    print("Insights")
    for insight in insights:
        print(f"  [{insight.severity}] {insight.title}: {insight.summary}")

    print("Goals")
    for simulation in simulations:
        label = simulation.goal.name or simulation.goal.id
        if simulation.months_to_target is None:
            print(f"  {label}: not achievable without contributions")
            continue
        print(
            f"  {label}: {simulation.months_to_target} months, "
            f"completion={simulation.estimated_completion}, "
            f"achievable={simulation.is_achievable}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
