"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

from src.domain.constants import (
    DEFAULT_FORECAST_HORIZON_DAYS,
    DEFAULT_MONTHS_TO_ANALYZE,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


@dataclass(frozen=True)
class EngineSettings:
    """Settings for running the analytics report.

    Attributes:
        records_file: Optional path to a JSON records snapshot.
        horizon_days: Forecast horizon in days.
        extra_payment: Monthly extra payment for debt strategies.
        months_to_analyze: Months used by trend and category insights.
    """

    records_file: Optional[Path] = None
    horizon_days: int = DEFAULT_FORECAST_HORIZON_DAYS
    extra_payment: Decimal = Decimal("0")
    months_to_analyze: int = DEFAULT_MONTHS_TO_ANALYZE

    @classmethod
    def from_env(cls) -> "EngineSettings":
        """Build settings from environment variables.

        Returns:
            EngineSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        raw_records = os.getenv("FINANCE_RECORDS_FILE")
        if raw_records:
            records_file = cls._normalize_path(raw_records, logger=logger)
        else:
            records_file = cls._default_records_file(logger=logger)
        return cls(
            records_file=records_file,
            horizon_days=cls._read_int(
                "FORECAST_HORIZON_DAYS",
                DEFAULT_FORECAST_HORIZON_DAYS,
                logger,
            ),
            extra_payment=cls._read_decimal(
                "DEBT_EXTRA_PAYMENT",
                Decimal("0"),
                logger,
            ),
            months_to_analyze=cls._read_int(
                "INSIGHTS_LOOKBACK_MONTHS",
                DEFAULT_MONTHS_TO_ANALYZE,
                logger,
            ),
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize the records file path.

        Args:
            raw_path: Raw file path string, optionally a file:// URI.
            logger: Logger used for warnings.

        Returns:
            Path: Resolved filesystem path.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Records file does not exist at {path}")
        return path

    @staticmethod
    def _default_records_file(logger) -> Path | None:
        """Return a default records snapshot when available.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single snapshot is found in data/.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.json"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .json files found in data/. "
                "Set FINANCE_RECORDS_FILE to choose one."
            )
        return None

    @staticmethod
    def _read_int(name: str, default: int, logger) -> int:
        raw = os.getenv(name)
        if not raw:
            return default
        try:
            return int(raw.strip())
        except ValueError:
            logger.warning(f"Invalid integer for {name}: '{raw}'")
            return default

    @staticmethod
    def _read_decimal(name: str, default: Decimal, logger) -> Decimal:
        raw = os.getenv(name)
        if not raw:
            return default
        try:
            value = Decimal(raw.strip())
        except InvalidOperation:
            logger.warning(f"Invalid amount for {name}: '{raw}'")
            return default
        if not value.is_finite():
            logger.warning(f"Invalid amount for {name}: '{raw}'")
            return default
        return value


__all__ = ["EngineSettings"]
