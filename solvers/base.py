"""
solvers/base.py

Базовый класс для всех решателей.
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Sequence, TYPE_CHECKING

from core.move import Move
from core.state import PuzzleState
from utils.error_handling import IllegalMoveError, InternalInconsistencyError
from utils.logging import get_logger
from .progress import SearchControl

if TYPE_CHECKING:
    from .result import SolveResult, SolveStatus


DEFAULT_STATE_LIMIT = 1_000_000


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    states_processed: int = 0
    states_pruned: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0
    solution_length: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return (
            f"States: {self.states_processed}, "
            f"Pruned: {self.states_pruned}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Все решатели наследуют от него и реализуют метод search().
    Неудачи поиска (лимиты, отмена, исчерпание) возвращаются как
    SolveResult, а не исключения.
    """
    name = 'base'
    label = 'Search'
    optimal = False

    def __init__(self, state_limit: int = DEFAULT_STATE_LIMIT, verbose: bool = False):
        self.state_limit = state_limit
        self.verbose = verbose
        self.stats = SolverStats()
        self._start_time = 0.0

    @abstractmethod
    def search(self, state: PuzzleState, control: Optional[SearchControl] = None) -> 'SolveResult':
        """
        Ищет решение.

        Args:
            state: начальная позиция
            control: прогресс/отмена/бюджет времени

        Returns:
            SolveResult со списком ходов или типизированной причиной неудачи
        """
        pass

    def _begin(self):
        self.stats = SolverStats()
        self._start_time = time.time()

    def _log(self, message: str) -> None:
        """Пишет сообщение в лог если verbose=True."""
        if self.verbose:
            get_logger().info(f"[{self.__class__.__name__}] {message}")

    def _expand(self, state: PuzzleState, move: Move) -> PuzzleState:
        """
        Применяет сгенерированный ход. Недопустимый сгенерированный ход —
        нарушение инварианта, поиск прерывается.
        """
        try:
            return state.apply_move(move)
        except (IllegalMoveError, IndexError) as e:
            raise InternalInconsistencyError(
                f"Сгенерированный ход {move} недопустим в состоянии {state.key!r}: {e}"
            ) from e

    def _finish(self, status: 'SolveStatus', moves: Sequence[Move] = (),
                message: str = '') -> 'SolveResult':
        from .result import SolveResult

        self.stats.time_elapsed = time.time() - self._start_time
        self.stats.solution_length = len(moves)
        self._log(f"{status.value}: {self.stats}")
        return SolveResult(
            status=status,
            moves=list(moves),
            strategy=self.name,
            stats=self.stats,
            message=message,
        )

    @staticmethod
    def format_solution(moves: Sequence[Move]) -> list:
        """Форматирует список ходов."""
        return [str(m) for m in moves]
