"""Tests for the GetBudgetStatusesUseCase."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_budget_statuses import (
    GetBudgetStatusesUseCase,
)
from src.domain.models import Budget, Transaction, TransactionSplit


def test_execute_returns_statuses_in_repository_order() -> None:
    """Use case should compute one status per budget and log totals."""
    repository = MagicMock()
    repository.fetch_budgets.return_value = [
        Budget(
            id="food",
            start_date=date(2026, 9, 1),
            total_amount=Decimal("100"),
            category_id="groceries",
        ),
        Budget(
            id="all",
            start_date=date(2026, 9, 1),
            total_amount=Decimal("1000"),
            alert_threshold=Decimal("0.5"),
        ),
    ]
    repository.fetch_transactions.return_value = [
        Transaction("t1", "main", Decimal("-600"), datetime(2026, 9, 3)),
    ]
    repository.fetch_splits.return_value = [
        TransactionSplit("t1", Decimal("-150"), "groceries"),
        TransactionSplit("t1", Decimal("-450"), "home"),
    ]
    logger = MagicMock()

    statuses = GetBudgetStatusesUseCase(repository, logger=logger).execute()

    assert [status.budget.id for status in statuses] == ["food", "all"]
    assert [status.status for status in statuses] == ["exceeded", "warning"]
    assert statuses[0].spent == Decimal("150")
    assert statuses[1].remaining == Decimal("400")
    logger.warning.assert_not_called()
    assert "exceeded=1" in logger.info.call_args.args[0]


def test_execute_warns_about_invalid_records() -> None:
    repository = MagicMock()
    repository.fetch_budgets.return_value = [
        Budget(id="empty", start_date=date(2026, 9, 1), total_amount=0),
    ]
    repository.fetch_transactions.return_value = []
    repository.fetch_splits.return_value = [
        TransactionSplit("missing", Decimal("-5"), "food"),
    ]
    logger = MagicMock()

    statuses = GetBudgetStatusesUseCase(repository, logger=logger).execute()

    assert statuses[0].percentage == 0
    assert statuses[0].status == "on_track"
    assert logger.warning.call_count == 2
