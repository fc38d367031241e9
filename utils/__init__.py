"""
utils - Логирование, ошибки, конфигурация, мониторинг.
"""

from .logging import get_logger, setup_file_logging, SolverLogger
from .error_handling import (
    SolverError,
    InvalidPuzzleError,
    ContainerError,
    IllegalMoveError,
    InternalInconsistencyError,
    validate_puzzle,
)
from .config import SolverConfig, load_config
from .monitoring import PerformanceMonitor, get_monitor, monitor_time

__all__ = [
    'get_logger',
    'setup_file_logging',
    'SolverLogger',
    'SolverError',
    'InvalidPuzzleError',
    'ContainerError',
    'IllegalMoveError',
    'InternalInconsistencyError',
    'validate_puzzle',
    'SolverConfig',
    'load_config',
    'PerformanceMonitor',
    'get_monitor',
    'monitor_time',
]
