"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from src.infrastructure.logging import logger as logger_module


def test_logger_builder_writes_daily_file_under_subdir(tmp_path, monkeypatch):
    """LoggerBuilder should place the log file under logs/<subdir>."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20261017"),
    )

    builder = logger_module.LoggerBuilder()
    built = (
        builder.name("finance_engine.test_builder")
        .subdir("reports")
        .prefix("report_logs")
        .console(False)
        .level(logging.WARNING)
        .build()
    )

    assert built.name == "finance_engine.test_builder"
    assert built.level == logging.WARNING
    assert built.propagate is False
    file_handlers = [
        h for h in built.handlers if isinstance(h, logging.FileHandler)
    ]
    assert len(file_handlers) == 1
    expected = tmp_path / "logs" / "reports" / "20261017_report_logs.log"
    assert file_handlers[0].baseFilename == str(expected)
    assert not any(
        type(h) is logging.StreamHandler for h in built.handlers
    )
    # Building again reuses the configured logger.
    assert builder.build() is built
    for handler in list(built.handlers):
        handler.close()
        built.removeHandler(handler)


def test_builder_uses_injected_handler_factories(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    file_handler = logging.NullHandler()
    console_handler = logging.NullHandler()
    fmt = logging.Formatter("%(message)s")

    built = (
        logger_module.LoggerBuilder()
        .name("finance_engine.test_factories")
        .formatter(lambda: fmt)
        .file_handler(lambda path, formatter: file_handler)
        .console_handler(lambda formatter: console_handler)
        .build()
    )

    assert built.handlers == [file_handler, console_handler]
    built.handlers.clear()


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should apply the provided formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "engine.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert isinstance(file_handler, logging.FileHandler)
    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert isinstance(console_handler, logging.StreamHandler)
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_singleton_delegates_to_underlying_logger(monkeypatch):
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    wrapper = logger_module.Logger("engine")
    wrapper.info("hello")
    wrapper.warning("warn")
    wrapper.error("err")
    wrapper.debug("dbg")
    wrapper.critical("crit")

    fake_logger.info.assert_called_with("hello")
    fake_logger.warning.assert_called_with("warn")
    fake_logger.error.assert_called_with("err")
    fake_logger.debug.assert_called_with("dbg")
    fake_logger.critical.assert_called_with("crit")
    assert logger_module.Logger("other") is wrapper


def test_app_and_usage_loggers_are_distinct_singletons(monkeypatch):
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: MagicMock(),
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert app_logger.logger is not usage_logger.logger
