"""
utils/logging.py

Логирование решателя: один именованный логгер на процесс, вывод в stdout
и (по желанию) дублирование в файл.
"""

import logging
import sys
from typing import Optional


LOGGER_NAME = "watersort_solver"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


class SolverLogger:
    """Обёртка над logging.Logger с консольным handler."""

    def __init__(self, name: str = LOGGER_NAME, level: int = logging.INFO):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        # Повторное создание не должно добавлять второй handler
        if not self.logger.handlers:
            console = logging.StreamHandler(sys.stdout)
            console.setLevel(level)
            console.setFormatter(_formatter())
            self.logger.addHandler(console)

    def set_level(self, level: int):
        """Меняет уровень логгера и всех его handlers (--verbose в CLI)."""
        self.logger.setLevel(level)
        for handler in self.logger.handlers:
            handler.setLevel(level)

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str, exc_info: bool = False):
        self.logger.error(message, exc_info=exc_info)


_default_logger: Optional[SolverLogger] = None


def get_logger() -> SolverLogger:
    """Общий логгер решателя; создаётся при первом обращении."""
    global _default_logger
    if _default_logger is None:
        _default_logger = SolverLogger()
    return _default_logger


def setup_file_logging(log_file: str = "watersort_solver.log",
                       level: int = logging.INFO) -> logging.FileHandler:
    """
    Дублирует лог в файл.

    Returns:
        Добавленный handler (чтобы вызывающий мог его снять и закрыть)
    """
    handler = logging.FileHandler(log_file, encoding='utf-8')
    handler.setLevel(level)
    handler.setFormatter(_formatter())
    get_logger().logger.addHandler(handler)
    return handler
