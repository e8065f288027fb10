"""Tests for the analytics_report_cli adapter."""

from datetime import date, datetime
from decimal import Decimal
import json
from pathlib import Path
from unittest.mock import MagicMock

from src.adapters import analytics_report_cli
from src.domain.models import (
    Account,
    Budget,
    Debt,
    Goal,
    Transaction,
)
from src.infrastructure import container
from src.infrastructure.settings import EngineSettings


def _patch_common(monkeypatch, settings: EngineSettings):
    fake_logger = MagicMock()
    fake_usage_logger = MagicMock()
    monkeypatch.setattr(
        analytics_report_cli, "get_app_logger", lambda: fake_logger
    )
    monkeypatch.setattr(
        analytics_report_cli, "get_usage_logger", lambda: fake_usage_logger
    )
    monkeypatch.setattr(container, "get_app_logger", lambda: fake_logger)
    monkeypatch.setattr(
        analytics_report_cli.EngineSettings,
        "from_env",
        classmethod(lambda cls: settings),
    )
    return fake_logger, fake_usage_logger


def _repository() -> MagicMock:
    repository = MagicMock()
    repository.fetch_transactions.return_value = [
        Transaction("t1", "main", Decimal("-300"), datetime.now()),
    ]
    repository.fetch_splits.return_value = []
    repository.fetch_accounts.return_value = [
        Account(id="main", balance=Decimal("5000")),
    ]
    repository.fetch_budgets.return_value = [
        Budget(
            id="monthly",
            name="Monthly",
            start_date=date.today().replace(day=1),
            total_amount=Decimal("1000"),
        )
    ]
    repository.fetch_debts.return_value = [
        Debt("card", Decimal("1000"), Decimal("0.18"), Decimal("50"), "Card"),
    ]
    repository.fetch_goals.return_value = [
        Goal("trip", Decimal("900"), Decimal("0"), Decimal("300"), "Trip"),
        Goal("boat", Decimal("9000"), Decimal("0"), Decimal("0"), "Boat"),
    ]
    return repository


def test_main_prints_every_section(monkeypatch, capsys):
    """The CLI should run every use case and print the report."""
    settings = EngineSettings(
        records_file=Path("records.json"),
        horizon_days=30,
        extra_payment=Decimal("25"),
    )
    fake_logger, fake_usage_logger = _patch_common(monkeypatch, settings)
    repository = _repository()
    monkeypatch.setattr(
        analytics_report_cli,
        "build_records_repository",
        lambda path: repository,
    )

    analytics_report_cli.main()

    out = capsys.readouterr().out
    for section in ("Budgets", "Debts", "Forecast (30 days)", "Insights"):
        assert section in out
    assert "Monthly: spent=300.00" in out
    assert "recommendation=snowball" in out
    assert "Trip: 3 months" in out
    assert "Boat: not achievable without contributions" in out
    fake_usage_logger.info.assert_called_once()
    fake_logger.error.assert_not_called()


def test_main_requires_records_file(monkeypatch, capsys):
    fake_logger, _ = _patch_common(monkeypatch, EngineSettings())
    builder = MagicMock()
    monkeypatch.setattr(
        analytics_report_cli, "build_records_repository", builder
    )

    analytics_report_cli.main()

    builder.assert_not_called()
    fake_logger.warning.assert_called_once()
    assert capsys.readouterr().out == ""


def test_main_logs_repository_errors(monkeypatch, capsys):
    fake_logger, fake_usage_logger = _patch_common(
        monkeypatch,
        EngineSettings(records_file=Path("broken.json")),
    )
    repository = MagicMock()
    repository.fetch_budgets.side_effect = RuntimeError("Malformed snapshot")
    monkeypatch.setattr(
        analytics_report_cli,
        "build_records_repository",
        lambda path: repository,
    )

    analytics_report_cli.main()

    fake_logger.error.assert_called_once_with("Malformed snapshot")
    fake_usage_logger.info.assert_not_called()
    assert capsys.readouterr().out == ""


def test_main_logs_malformed_snapshot_rows(monkeypatch, tmp_path, capsys):
    """A bad row in the snapshot is logged instead of raising."""
    snapshot = tmp_path / "records.json"
    snapshot.write_text(
        json.dumps(
            {
                "transactions": [
                    {
                        "id": "t1",
                        "account_id": "main",
                        "amount": "-5",
                        "occurred_at": "not-a-date",
                    }
                ]
            }
        ),
        encoding="utf-8",
    )
    fake_logger, fake_usage_logger = _patch_common(
        monkeypatch,
        EngineSettings(records_file=snapshot),
    )

    analytics_report_cli.main()

    fake_logger.error.assert_called_once()
    assert "Malformed transactions row 0" in fake_logger.error.call_args.args[0]
    fake_usage_logger.info.assert_not_called()
    assert capsys.readouterr().out == ""
