"""Use case to compute the consumption status of every budget."""

from src.application.ports.records_repository import FinancialRecordsPort
from src.domain.models import BudgetStatus
from src.domain.services.budgets import get_budget_progress
from src.domain.services.validation import (
    validate_budget_amounts,
    validate_split_totals,
)
from src.infrastructure.logging.logger import get_app_logger


class GetBudgetStatusesUseCase:
    """Compute spent, remaining and state for each budget of a user."""

    def __init__(
        self,
        records_repository: FinancialRecordsPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            records_repository: Port providing the user's records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._records_repository = records_repository
        self._logger = logger or get_app_logger()

    def execute(self) -> list[BudgetStatus]:
        """Return the status of every budget, in repository order."""
        budgets = self._records_repository.fetch_budgets()
        transactions = self._records_repository.fetch_transactions()
        splits = self._records_repository.fetch_splits()
        validate_budget_amounts(budgets, self._logger)
        validate_split_totals(transactions, splits, self._logger)

        statuses = get_budget_progress(budgets, transactions, splits)
        exceeded = sum(1 for status in statuses if status.status == "exceeded")
        warnings = sum(1 for status in statuses if status.status == "warning")
        self._logger.info(
            f"Budget statuses computed: budgets={len(statuses)}, "
            f"exceeded={exceeded}, warning={warnings}"
        )
        return statuses


__all__ = ["GetBudgetStatusesUseCase", "BudgetStatus"]
