"""
solvers/result.py

Типизированный результат решения.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from analysis.complexity import PuzzleComplexity
from core.move import Move
from .base import SolverStats


class SolveStatus(Enum):
    SOLVED = 'solved'
    ALREADY_SOLVED = 'already_solved'
    TIMED_OUT = 'timed_out'
    STATE_LIMIT_REACHED = 'state_limit_reached'
    EXHAUSTED = 'exhausted'
    CANCELLED = 'cancelled'
    INVALID_PUZZLE = 'invalid_puzzle'
    INTERNAL_ERROR = 'internal_error'


STATUS_MESSAGES = {
    SolveStatus.SOLVED: 'Solution found!',
    SolveStatus.ALREADY_SOLVED: 'Puzzle already solved',
    SolveStatus.TIMED_OUT: 'No solution found within time limit',
    SolveStatus.STATE_LIMIT_REACHED: 'Maximum states processed',
    SolveStatus.EXHAUSTED: 'Search exhausted: no solution from reachable states',
    SolveStatus.CANCELLED: 'Solving cancelled',
    SolveStatus.INVALID_PUZZLE: 'Invalid puzzle',
    SolveStatus.INTERNAL_ERROR: 'Internal solver error',
}

SUCCESS_STATUSES = (SolveStatus.SOLVED, SolveStatus.ALREADY_SOLVED)
LIMIT_STATUSES = (SolveStatus.TIMED_OUT, SolveStatus.STATE_LIMIT_REACHED)


@dataclass
class SolveResult:
    """
    Результат solve().

    Attributes:
        status: исход поиска
        moves: ходы (пусто при любой неудаче и для уже решённой головоломки)
        strategy: 'bfs' | 'astar' | None (до выбора стратегии)
        stats: статистика решателя
        complexity: классификация стартовой позиции
        message: пояснение для пользователя
        error: текст ошибки для INVALID_PUZZLE / INTERNAL_ERROR
    """
    status: SolveStatus
    moves: List[Move] = field(default_factory=list)
    strategy: Optional[str] = None
    stats: SolverStats = field(default_factory=SolverStats)
    complexity: Optional[PuzzleComplexity] = None
    message: str = ''
    error: Optional[str] = None

    def __post_init__(self):
        if not self.message:
            self.message = STATUS_MESSAGES[self.status]

    @property
    def success(self) -> bool:
        return self.status in SUCCESS_STATUSES

    @property
    def move_count(self) -> int:
        return len(self.moves)

    @property
    def hit_limit(self) -> bool:
        """Мягкая неудача: «не найдено в пределах лимитов»."""
        return self.status in LIMIT_STATUSES

    @property
    def is_optimal(self) -> bool:
        """Минимальность гарантирована только для BFS."""
        if self.status is SolveStatus.ALREADY_SOLVED:
            return True
        return self.status is SolveStatus.SOLVED and self.strategy == 'bfs'

    @property
    def proven_unsolvable(self) -> bool:
        """Исчерпание доказывает нерешаемость только для BFS (без отсечений)."""
        return self.status is SolveStatus.EXHAUSTED and self.strategy == 'bfs'

    def to_dict(self) -> Dict[str, Any]:
        return {
            'status': self.status.value,
            'success': self.success,
            'moves': [m.to_dict() for m in self.moves],
            'notation': [str(m) for m in self.moves],
            'move_count': self.move_count,
            'strategy': self.strategy,
            'optimal': self.is_optimal,
            'proven_unsolvable': self.proven_unsolvable,
            'stats': self.stats.to_dict(),
            'complexity': self.complexity.to_dict() if self.complexity else None,
            'message': self.message,
            'error': self.error,
        }
