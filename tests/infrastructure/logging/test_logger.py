"""Tests for the dashboard loggers."""

import logging
from datetime import date
from unittest.mock import MagicMock

import pytest

from src.application.use_cases import get_monthly_spending, spending_engine
from src.application.use_cases.time_window import TimeWindowNavigator
from src.infrastructure.logging import logger as logger_module


@pytest.fixture
def fresh_loggers(tmp_path, monkeypatch):
    """Point log files at tmp_path and reset the logger singletons."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20241017"),
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)
    names = ("receipts.app", "receipts.usage", "receipts.test")
    for name in names:
        logging.getLogger(name).handlers.clear()
    yield tmp_path
    for name in names:
        for handler in logging.getLogger(name).handlers:
            handler.close()
        logging.getLogger(name).handlers.clear()


def _file_handler(logger: logging.Logger) -> logging.FileHandler:
    handlers = [
        h for h in logger.handlers if isinstance(h, logging.FileHandler)
    ]
    assert len(handlers) == 1
    return handlers[0]


def test_app_logger_writes_daily_app_logs(fresh_loggers):
    """The app logger is named receipts.app and logs under logs/app."""
    app_logger = logger_module.get_app_logger()

    assert app_logger.logger.name == "receipts.app"
    assert app_logger.logger.propagate is False
    expected = fresh_loggers / "logs" / "app" / "20241017_app_logs.log"
    assert _file_handler(app_logger.logger).baseFilename == str(expected)
    assert logger_module.get_app_logger() is app_logger


def test_usage_logger_is_separate_from_app_logger(fresh_loggers):
    usage_logger = logger_module.get_usage_logger()

    assert usage_logger.logger.name == "receipts.usage"
    expected = fresh_loggers / "logs" / "usage" / "20241017_usage_logs.log"
    assert _file_handler(usage_logger.logger).baseFilename == str(expected)
    assert usage_logger is not logger_module.get_app_logger()


def test_builder_reuses_configured_logger(fresh_loggers):
    """Building an existing logger again keeps its original handlers."""
    builder = (
        logger_module.LoggerBuilder()
        .name("receipts.test")
        .subdir("cli")
        .prefix("cli_logs")
        .console(False)
        .level(logging.WARNING)
    )

    built = builder.build()
    rebuilt = builder.prefix("other_logs").build()

    assert rebuilt is built
    assert built.level == logging.WARNING
    assert len(built.handlers) == 1
    assert _file_handler(built).baseFilename.endswith("20241017_cli_logs.log")


def test_messages_reach_the_log_file(fresh_loggers):
    app_logger = logger_module.get_app_logger()

    app_logger.warning("3 receipts have no usable date and were excluded")
    for handler in app_logger.logger.handlers:
        handler.flush()

    log_path = fresh_loggers / "logs" / "app" / "20241017_app_logs.log"
    content = log_path.read_text(encoding="utf-8")
    assert "receipts.app - WARNING - 3 receipts have no usable date" in content


def test_wrapper_delegates_every_level(monkeypatch):
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    usage_logger = logger_module.get_usage_logger()
    usage_logger.info("spending-summary started")
    usage_logger.warning("bad month")
    usage_logger.error("db down")
    usage_logger.debug("rows=3")
    usage_logger.critical("abort")

    fake_logger.info.assert_called_with("spending-summary started")
    fake_logger.warning.assert_called_with("bad month")
    fake_logger.error.assert_called_with("db down")
    fake_logger.debug.assert_called_with("rows=3")
    fake_logger.critical.assert_called_with("abort")


def test_use_cases_default_to_app_logger(monkeypatch):
    """Use cases built without a logger log through get_app_logger()."""
    app_logger = MagicMock()
    monkeypatch.setattr(
        get_monthly_spending, "get_app_logger", lambda: app_logger
    )
    monkeypatch.setattr(spending_engine, "get_app_logger", lambda: app_logger)
    source = MagicMock()
    source.fetch_receipts.return_value = []

    get_monthly_spending.GetMonthlySpendingUseCase(
        source,
        today=lambda: date(2024, 5, 1),
    ).execute()
    engine = spending_engine.SpendingAggregationEngine(
        TimeWindowNavigator(today=lambda: date(2024, 5, 1))
    )
    engine.apply_snapshot([])

    messages = [call.args[0] for call in app_logger.info.call_args_list]
    assert "Fetched 0 receipts from the store" in messages
    assert "Received receipt snapshot with 0 records" in messages
