"""Tests for the GenerateInsightsUseCase."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.generate_insights import (
    GenerateInsightsUseCase,
)
from src.domain.models import Budget, Transaction


def test_execute_runs_detectors_and_logs_counts() -> None:
    repository = MagicMock()
    repository.fetch_transactions.return_value = [
        Transaction("t1", "main", Decimal("-1000"), datetime(2026, 7, 10)),
        Transaction("t2", "main", Decimal("-1500"), datetime(2026, 9, 10)),
    ]
    repository.fetch_budgets.return_value = [
        Budget(
            id="sep",
            start_date=date(2026, 9, 1),
            total_amount=Decimal("1000"),
        )
    ]
    repository.fetch_splits.return_value = []
    logger = MagicMock()

    insights = GenerateInsightsUseCase(repository, logger=logger).execute(
        as_of=date(2026, 10, 17),
    )

    assert [(i.type, i.severity) for i in insights] == [
        ("trend", "warning"),
        ("budget", "critical"),
    ]
    assert all(insight.acknowledged is False for insight in insights)
    assert "Generated 2 insights" in logger.info.call_args.args[0]
