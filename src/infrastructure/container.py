"""Composition root for wiring infrastructure adapters."""

from pathlib import Path

from src.application.ports.records_repository import FinancialRecordsPort
from src.application.use_cases import (
    CompareDebtStrategiesUseCase,
    ForecastCashflowUseCase,
    GenerateInsightsUseCase,
    GetBudgetStatusesUseCase,
    SimulateGoalsUseCase,
)
from src.infrastructure.json_records_repository import (
    JsonFinancialRecordsRepository,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import EngineSettings


def build_records_repository(
    records_file: Path | str | None = None,
) -> FinancialRecordsPort:
    """Return the records repository for the configured snapshot."""
    resolved = records_file or EngineSettings.from_env().records_file
    if resolved is None:
        raise RuntimeError(
            "No records snapshot configured. Set FINANCE_RECORDS_FILE."
        )
    return JsonFinancialRecordsRepository(resolved)


def build_budget_statuses_use_case(
    repository: FinancialRecordsPort,
) -> GetBudgetStatusesUseCase:
    return GetBudgetStatusesUseCase(repository, logger=get_app_logger())


def build_debt_strategies_use_case(
    repository: FinancialRecordsPort,
) -> CompareDebtStrategiesUseCase:
    return CompareDebtStrategiesUseCase(repository, logger=get_app_logger())


def build_forecast_use_case(
    repository: FinancialRecordsPort,
) -> ForecastCashflowUseCase:
    return ForecastCashflowUseCase(repository, logger=get_app_logger())


def build_insights_use_case(
    repository: FinancialRecordsPort,
) -> GenerateInsightsUseCase:
    return GenerateInsightsUseCase(repository, logger=get_app_logger())


def build_goals_use_case(
    repository: FinancialRecordsPort,
) -> SimulateGoalsUseCase:
    return SimulateGoalsUseCase(repository, logger=get_app_logger())


__all__ = [
    "build_records_repository",
    "build_budget_statuses_use_case",
    "build_debt_strategies_use_case",
    "build_forecast_use_case",
    "build_insights_use_case",
    "build_goals_use_case",
]
