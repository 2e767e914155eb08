"""
Тесты для настройки логирования
"""

import logging

from src.core import logging_config
from src.core.logging_config import DEFAULT_FORMAT, get_logger, setup_logging
from src.core.math.bignum import BigNum
from src.core.registry import ConstantRegistry


def test_get_logger_uses_module_name():
    logger = get_logger("src.core.math.exponential")

    assert isinstance(logger, logging.Logger)
    assert logger.name == "src.core.math.exponential"


def test_setup_logging_defaults(monkeypatch):
    """Уровень по имени, формат по умолчанию, вывод в stdout."""
    calls = []
    monkeypatch.setattr(logging_config.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    setup_logging("debug")

    assert calls[0]["level"] == logging.DEBUG
    assert calls[0]["format"] == DEFAULT_FORMAT
    assert isinstance(calls[0]["handlers"][0], logging.StreamHandler)


def test_setup_logging_custom_format(monkeypatch):
    calls = []
    monkeypatch.setattr(logging_config.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    setup_logging("WARNING", format_string="%(message)s")

    assert calls[0]["level"] == logging.WARNING
    assert calls[0]["format"] == "%(message)s"


def test_core_logs_at_debug(caplog):
    """Ядро пишет только DEBUG-сообщения."""
    caplog.set_level(logging.DEBUG, logger="src.core.registry")

    ConstantRegistry().define("two", BigNum.TWO)

    assert "constant two defined as 2.0" in caplog.text
    assert all(record.levelno == logging.DEBUG for record in caplog.records)
