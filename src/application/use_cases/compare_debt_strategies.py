"""Use case to compare snowball and avalanche payoff strategies."""

from decimal import Decimal

from src.application.ports.records_repository import FinancialRecordsPort
from src.domain.models import StrategyComparison
from src.domain.services.debts import compare_strategies
from src.domain.services.validation import validate_debt_terms
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import ZERO, coerce_decimal


class CompareDebtStrategiesUseCase:
    """Simulate both payoff strategies over a user's debts."""

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
        extra_payment: Decimal = ZERO,
    ) -> StrategyComparison | None:
        """Return the strategy comparison.

        Args:
            extra_payment: Monthly amount paid on top of the minimums.

        Returns:
            StrategyComparison | None: Comparison of both strategies, or None
            when the user has no debts.
        """
        debts = self._records_repository.fetch_debts()
        if not debts:
            self._logger.info("No debts to compare strategies for")
            return None
        validate_debt_terms(debts, self._logger)

        comparison = compare_strategies(debts, coerce_decimal(extra_payment))
        for result in (comparison.snowball, comparison.avalanche):
            if not result.paid_off:
                self._logger.warning(
                    f"{result.strategy} strategy does not pay off all debts "
                    f"within {result.months_to_payoff} months"
                )
        self._logger.info(
            f"Debt strategies compared: debts={len(debts)}, "
            f"recommendation={comparison.recommendation}, "
            f"savings={comparison.savings:.2f}"
        )
        return comparison


__all__ = ["CompareDebtStrategiesUseCase", "StrategyComparison"]
