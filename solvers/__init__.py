"""
solvers - Решатели Water Sort

Экспортирует:
- BFSSolver: поиск в ширину (кратчайшее решение)
- AStarSolver: A* с эвристиками (большие головоломки)
- GovernorSolver: анализ позиции и выбор алгоритма
- solve: решение с настройками по умолчанию
"""

from .base import BaseSolver, SolverStats
from .progress import SearchControl, SearchProgress
from .result import SolveResult, SolveStatus
from .bfs import BFSSolver
from .astar import AStarSolver, SearchNode
from .governor import GovernorSolver, solve

__all__ = [
    'BaseSolver',
    'SolverStats',
    'SearchControl',
    'SearchProgress',
    'SolveResult',
    'SolveStatus',
    'BFSSolver',
    'AStarSolver',
    'SearchNode',
    'GovernorSolver',
    'solve',
]
