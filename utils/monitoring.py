"""
utils/monitoring.py

Мониторинг производительности: время решений по стратегиям и счётчики исходов.
"""

import time
import threading
from typing import Dict, List, Any, Optional
from collections import defaultdict
from datetime import datetime
from functools import wraps

from .logging import get_logger


class PerformanceMonitor:
    """Монитор производительности."""

    def __init__(self):
        self.metrics: Dict[str, List[float]] = defaultdict(list)
        self.counters: Dict[str, int] = defaultdict(int)
        self.timestamps: Dict[str, List[datetime]] = defaultdict(list)
        self.logger = get_logger()
        self._lock = threading.Lock()

    def record_time(self, operation: str, elapsed: float):
        """
        Записывает время выполнения операции.

        Args:
            operation: имя операции
            elapsed: время в секундах
        """
        with self._lock:
            self.metrics[operation].append(elapsed)
            self.timestamps[operation].append(datetime.now())

    def increment_counter(self, counter: str, value: int = 1):
        """
        Увеличивает счётчик.

        Args:
            counter: имя счётчика
            value: значение для увеличения
        """
        with self._lock:
            self.counters[counter] += value

    def get_stats(self, operation: Optional[str] = None) -> Dict[str, Any]:
        """
        Возвращает статистику.

        Args:
            operation: имя операции (если None, возвращает общую статистику)

        Returns:
            Словарь со статистикой
        """
        with self._lock:
            if operation:
                return self._operation_stats(operation)

            return {
                'operations': {op: self._operation_stats(op) for op in self.metrics},
                'counters': dict(self.counters),
                'total_operations': sum(len(times) for times in self.metrics.values())
            }

    def _operation_stats(self, operation: str) -> Dict[str, Any]:
        times = self.metrics.get(operation)
        if not times:
            return {}
        return {
            'operation': operation,
            'count': len(times),
            'total': sum(times),
            'average': sum(times) / len(times),
            'min': min(times),
            'max': max(times),
            'last': times[-1]
        }

    def log_stats(self):
        """Пишет сводку в лог."""
        stats = self.get_stats()
        self.logger.info(f"Всего операций: {stats['total_operations']}")
        for op, op_stats in stats['operations'].items():
            self.logger.info(
                f"  {op}: {op_stats['count']} раз, среднее {op_stats['average']:.3f}s"
            )
        for counter, value in stats['counters'].items():
            self.logger.info(f"  {counter}: {value}")

    def reset(self):
        """Сбрасывает все метрики."""
        with self._lock:
            self.metrics.clear()
            self.counters.clear()
            self.timestamps.clear()


# Глобальный монитор
_monitor: Optional[PerformanceMonitor] = None


def get_monitor() -> PerformanceMonitor:
    """Возвращает глобальный монитор."""
    global _monitor
    if _monitor is None:
        _monitor = PerformanceMonitor()
    return _monitor


def monitor_time(operation: str):
    """
    Декоратор для мониторинга времени выполнения.

    Usage:
        @monitor_time('my_function')
        def my_function():
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            monitor = get_monitor()
            start = time.time()
            try:
                result = func(*args, **kwargs)
            except Exception:
                monitor.record_time(f"{operation}_error", time.time() - start)
                raise
            monitor.record_time(operation, time.time() - start)
            return result
        return wrapper
    return decorator
