"""Use case to forecast a user's cash flow."""

from datetime import date

from src.application.ports.records_repository import FinancialRecordsPort
from src.domain.constants import DEFAULT_FORECAST_HORIZON_DAYS
from src.domain.models import Forecast
from src.domain.services.forecast import forecast_cashflow
from src.infrastructure.logging.logger import get_app_logger


class ForecastCashflowUseCase:
    """Project account balances over a horizon of days."""

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
        horizon_days: int = DEFAULT_FORECAST_HORIZON_DAYS,
        as_of: date | None = None,
    ) -> Forecast:
        """Return the cash-flow forecast.

        Args:
            horizon_days: Number of future days to project.
            as_of: Day the projection starts from; defaults to today.

        Returns:
            Forecast: Summary, daily points and scenarios.
        """
        transactions = self._records_repository.fetch_transactions()
        accounts = self._records_repository.fetch_accounts()
        forecast = forecast_cashflow(
            transactions,
            accounts,
            horizon_days=horizon_days,
            as_of=as_of,
        )
        summary = forecast.summary
        self._logger.info(
            f"Forecast computed: horizon={horizon_days}d, "
            f"start={summary.starting_balance}, end={summary.end_balance}, "
            f"risk={summary.risk_level}"
        )
        return forecast


__all__ = ["ForecastCashflowUseCase", "Forecast"]
