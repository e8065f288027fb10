"""Tests for infrastructure settings."""

from decimal import Decimal
from pathlib import Path

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import EngineSettings

ENV_VARS = (
    "FINANCE_RECORDS_FILE",
    "FORECAST_HORIZON_DAYS",
    "DEBT_EXTRA_PAYMENT",
    "INSIGHTS_LOOKBACK_MONTHS",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        settings_module,
        "get_app_logger",
        lambda: _RecordingLogger(),
    )


class _RecordingLogger:
    warnings: list[str] = []

    def warning(self, message: str) -> None:
        _RecordingLogger.warnings.append(message)


def test_from_env_defaults_without_data(tmp_path: Path) -> None:
    settings = EngineSettings.from_env()

    assert settings.records_file is None
    assert settings.horizon_days == 90
    assert settings.extra_payment == Decimal("0")
    assert settings.months_to_analyze == 3


def test_from_env_uses_file_path(monkeypatch, tmp_path: Path) -> None:
    """File paths should resolve to Path instances."""
    snapshot = tmp_path / "records.json"
    snapshot.write_text("{}", encoding="utf-8")
    monkeypatch.setenv("FINANCE_RECORDS_FILE", str(snapshot))

    settings = EngineSettings.from_env()

    assert isinstance(settings.records_file, Path)
    assert settings.records_file == snapshot.resolve()


def test_from_env_accepts_file_uri(monkeypatch, tmp_path: Path) -> None:
    snapshot = tmp_path / "records.json"
    snapshot.write_text("{}", encoding="utf-8")
    monkeypatch.setenv("FINANCE_RECORDS_FILE", snapshot.as_uri())

    settings = EngineSettings.from_env()

    assert settings.records_file == snapshot.resolve()


def test_from_env_picks_single_data_snapshot(tmp_path: Path) -> None:
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "user.json").write_text("{}", encoding="utf-8")

    settings = EngineSettings.from_env()

    assert settings.records_file == (data_dir / "user.json").resolve()


def test_from_env_warns_on_ambiguous_data_dir(tmp_path: Path) -> None:
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "a.json").write_text("{}", encoding="utf-8")
    (data_dir / "b.json").write_text("{}", encoding="utf-8")
    _RecordingLogger.warnings.clear()

    settings = EngineSettings.from_env()

    assert settings.records_file is None
    assert any("Multiple" in message for message in _RecordingLogger.warnings)


def test_from_env_reads_numeric_overrides(monkeypatch) -> None:
    monkeypatch.setenv("FORECAST_HORIZON_DAYS", " 30 ")
    monkeypatch.setenv("DEBT_EXTRA_PAYMENT", "150.50")
    monkeypatch.setenv("INSIGHTS_LOOKBACK_MONTHS", "6")

    settings = EngineSettings.from_env()

    assert settings.horizon_days == 30
    assert settings.extra_payment == Decimal("150.50")
    assert settings.months_to_analyze == 6


def test_from_env_falls_back_on_invalid_numbers(monkeypatch) -> None:
    monkeypatch.setenv("FORECAST_HORIZON_DAYS", "soon")
    monkeypatch.setenv("DEBT_EXTRA_PAYMENT", "NaN")
    _RecordingLogger.warnings.clear()

    settings = EngineSettings.from_env()

    assert settings.horizon_days == 90
    assert settings.extra_payment == Decimal("0")
    assert len(_RecordingLogger.warnings) == 2
