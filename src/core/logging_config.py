"""
Logging setup.

Единая точка настройки логирования для всех модулей.
Числовое ядро пишет только DEBUG-сообщения (сходимость рядов, выбор ветвей),
поэтому по умолчанию его логи не видны.
"""

import logging
import sys
from typing import Optional


DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
) -> None:
    """
    Настройка логирования процесса.

    Args:
        level: Уровень логирования (DEBUG, INFO, WARNING, ERROR)
        format_string: Формат сообщений (по умолчанию DEFAULT_FORMAT)
    """
    if format_string is None:
        format_string = DEFAULT_FORMAT

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(name: str) -> logging.Logger:
    """
    Логгер для модуля.

    Args:
        name: Имя логгера (обычно __name__)

    Returns:
        Экземпляр logging.Logger
    """
    return logging.getLogger(name)
