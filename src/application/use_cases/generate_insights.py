"""Use case to generate spending insights for a user."""

from datetime import date

from src.application.ports.records_repository import FinancialRecordsPort
from src.domain.constants import DEFAULT_MONTHS_TO_ANALYZE
from src.domain.models import Insight
from src.domain.services.insights import run_local_insights
from src.domain.services.validation import validate_split_totals
from src.infrastructure.logging.logger import get_app_logger


class GenerateInsightsUseCase:
    """Run every insight detector over a user's records."""

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

    def execute(
        self,
        months_to_analyze: int = DEFAULT_MONTHS_TO_ANALYZE,
        as_of: date | None = None,
    ) -> list[Insight]:
        """Return anomaly, trend, category and budget insights.

        Args:
            months_to_analyze: Number of months used by trend and category
                detectors.
            as_of: Reference date; defaults to today.

        Returns:
            list[Insight]: Newly generated, unacknowledged insights.
        """
        transactions = self._records_repository.fetch_transactions()
        budgets = self._records_repository.fetch_budgets()
        splits = self._records_repository.fetch_splits()
        validate_split_totals(transactions, splits, self._logger)

        insights = run_local_insights(
            transactions,
            budgets,
            splits,
            months_to_analyze=months_to_analyze,
            as_of=as_of,
        )
        by_type: dict[str, int] = {}
        for insight in insights:
            by_type[insight.type] = by_type.get(insight.type, 0) + 1
        self._logger.info(
            f"Generated {len(insights)} insights: {by_type}"
        )
        return insights


__all__ = ["GenerateInsightsUseCase", "Insight"]
