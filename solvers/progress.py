"""
solvers/progress.py

Управление поиском: прогресс, отмена, бюджет времени.

Поиск идёт в одном потоке, а снимок прогресса и отмену можно запрашивать
из другого (UI, веб-API). Все счётчики защищены блокировкой.
"""

import threading
import time
from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict, Optional


@dataclass(frozen=True)
class SearchProgress:
    """Снимок прогресса поиска."""
    states_processed: int = 0
    current_depth: int = 0
    best_move_count: Optional[int] = None
    status: str = 'Idle'
    is_running: bool = False
    elapsed: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


ProgressCallback = Callable[[SearchProgress], None]


class SearchControl:
    """
    Точка кооперативной синхронизации поиска.

    Решатель вызывает checkpoint() на каждом раскрытии состояния и проверяет
    is_cancelled() / time_exceeded(). Каждые progress_interval состояний
    обновляется текст статуса и вызывается progress_callback.
    """

    def __init__(self, progress_interval: int = 1000,
                 progress_callback: Optional[ProgressCallback] = None,
                 clock: Callable[[], float] = time.time):
        self.progress_interval = max(1, progress_interval)
        self.progress_callback = progress_callback
        self.clock = clock

        self._lock = threading.Lock()
        self._cancel_flag = threading.Event()
        self._states_processed = 0
        self._current_depth = 0
        self._best_move_count: Optional[int] = None
        self._status = 'Idle'
        self._is_running = False
        self._start_time: Optional[float] = None
        self._end_time: Optional[float] = None
        self._time_limit: Optional[float] = None

    # === Жизненный цикл ===

    def start(self, time_limit: Optional[float] = None,
              status: str = 'Initializing solver...'):
        """
        Сбрасывает счётчики перед новым решением. Отмена, запрошенная до
        start(), не сбрасывается: решение остановится на первой проверке.
        """
        with self._lock:
            self._states_processed = 0
            self._current_depth = 0
            self._best_move_count = None
            self._status = status
            self._is_running = True
            self._start_time = self.clock()
            self._end_time = None
            self._time_limit = time_limit

    def finish(self, status: str, best_move_count: Optional[int] = None):
        """Фиксирует итог; запрос отмены относится только к этому решению."""
        with self._lock:
            self._cancel_flag.clear()
            self._status = status
            self._is_running = False
            self._end_time = self.clock()
            if best_move_count is not None:
                self._best_move_count = best_move_count

    def set_status(self, status: str):
        with self._lock:
            self._status = status

    def set_time_limit(self, time_limit: Optional[float]):
        """None — без ограничения по времени."""
        with self._lock:
            self._time_limit = time_limit

    @property
    def time_limit(self) -> Optional[float]:
        return self._time_limit

    # === Отмена и лимиты ===

    def cancel(self):
        self._cancel_flag.set()

    def is_cancelled(self) -> bool:
        return self._cancel_flag.is_set()

    def elapsed(self) -> float:
        if self._start_time is None:
            return 0.0
        end = self._end_time if self._end_time is not None else self.clock()
        return end - self._start_time

    def time_exceeded(self) -> bool:
        limit = self._time_limit
        if limit is None or self._start_time is None:
            return False
        return self.clock() - self._start_time > limit

    # === Прогресс ===

    def checkpoint(self, states_processed: int, depth: int, label: str = 'Search'):
        """Вызывается решателем на каждом раскрытом состоянии."""
        with self._lock:
            self._states_processed = states_processed
            self._current_depth = depth
            periodic = states_processed % self.progress_interval == 0
            if periodic:
                self._status = f"{label} searching... (depth {depth}, states {states_processed})"

        if periodic and self.progress_callback is not None:
            self.progress_callback(self.snapshot())

    def snapshot(self) -> SearchProgress:
        """Снимок прогресса; безопасен в любой момент и из любого потока."""
        with self._lock:
            return SearchProgress(
                states_processed=self._states_processed,
                current_depth=self._current_depth,
                best_move_count=self._best_move_count,
                status=self._status,
                is_running=self._is_running,
                elapsed=self.elapsed(),
            )
