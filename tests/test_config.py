import logging

import pytest

from ledgerconv import logging_setup
from ledgerconv.config import icici_credit_cr_is_debit
from ledgerconv.errors import ConfigurationError, LedgerconvError


def test_cr_polarity_defaults_to_debit():
    assert icici_credit_cr_is_debit() is True


@pytest.mark.parametrize(
    ("value", "expected"),
    [("debit", True), (" DR ", True), ("credit", False), ("Positive", False), ("", True)],
)
def test_cr_polarity_from_env(monkeypatch, value, expected):
    monkeypatch.setenv("LEDGERCONV_ICICI_CREDIT_CR", value)
    assert icici_credit_cr_is_debit() is expected


def test_cr_polarity_rejects_typos(monkeypatch):
    monkeypatch.setenv("LEDGERCONV_ICICI_CREDIT_CR", "crdit")
    with pytest.raises(ConfigurationError) as ei:
        icici_credit_cr_is_debit()
    assert isinstance(ei.value, LedgerconvError)
    assert isinstance(ei.value, ValueError)


@pytest.mark.parametrize(
    ("level", "expected"),
    [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("15", 15), ("bogus", logging.INFO)],
)
def test_parse_level(level, expected):
    assert logging_setup._parse_level(level) == expected


def test_parse_level_falls_back_to_env(monkeypatch):
    monkeypatch.setenv("LEDGERCONV_LOG_LEVEL", "ERROR")
    assert logging_setup._parse_level(None) == logging.ERROR


def test_get_logger_is_silent_until_configured(monkeypatch):
    monkeypatch.setattr(logging_setup, "_CONFIGURED", False)
    pkg = logging.getLogger("ledgerconv")
    monkeypatch.setattr(pkg, "handlers", [])

    logger = logging_setup.get_logger("ledgerconv.test")

    assert logger.name == "ledgerconv.test"
    assert any(isinstance(h, logging.NullHandler) for h in pkg.handlers)
