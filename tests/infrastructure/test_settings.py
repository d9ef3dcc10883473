"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import SpendingSettings


def _isolate(monkeypatch) -> MagicMock:
    logger = MagicMock()
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    for name in (
        "SPENDING_TOP_N",
        "RECEIPTS_SNAPSHOT_LIMIT",
        "AVAILABLE_MONTHS",
        "SPENDING_CURRENCY",
    ):
        monkeypatch.delenv(name, raising=False)
    return logger


def test_from_env_uses_defaults(monkeypatch) -> None:
    """Unset variables fall back to the defaults."""
    _isolate(monkeypatch)

    settings = SpendingSettings.from_env()

    assert settings == SpendingSettings(
        top_n=5,
        snapshot_limit=100,
        available_months=24,
        currency="USD",
    )


def test_from_env_reads_values(monkeypatch) -> None:
    _isolate(monkeypatch)
    monkeypatch.setenv("SPENDING_TOP_N", "3")
    monkeypatch.setenv("RECEIPTS_SNAPSHOT_LIMIT", "250")
    monkeypatch.setenv("SPENDING_CURRENCY", " eur ")

    settings = SpendingSettings.from_env()

    assert settings.top_n == 3
    assert settings.snapshot_limit == 250
    assert settings.currency == "EUR"


def test_from_env_warns_on_invalid_values(monkeypatch) -> None:
    """Invalid integers are reported and replaced by defaults."""
    logger = _isolate(monkeypatch)
    monkeypatch.setenv("SPENDING_TOP_N", "five")
    monkeypatch.setenv("AVAILABLE_MONTHS", "0")

    settings = SpendingSettings.from_env()

    assert settings.top_n == 5
    assert settings.available_months == 24
    assert logger.warning.call_count == 2
