"""
solvers/astar.py

A* решатель с эвристикой для больших головоломок.
"""

from dataclasses import dataclass
from heapq import heappush, heappop
from typing import Dict, List, Optional, Set, Tuple

from .base import BaseSolver, DEFAULT_STATE_LIMIT
from .progress import SearchControl
from .result import SolveResult, SolveStatus
from core.state import PuzzleState
from heuristics import estimate, smart_moves


@dataclass
class SearchNode:
    """Узел открытого списка: f = g + h."""
    state: PuzzleState
    g: int
    h: int

    @property
    def f(self) -> int:
        return self.g + self.h


class AStarSolver(BaseSolver):
    """
    A* решатель.

    f(n) = g(n) + h(n)
    - g(n) = количество сделанных ходов
    - h(n) = эвристическая оценка до цели (не допустимая)

    Оценка может переоценивать, поэтому найденное решение не обязательно
    кратчайшее. Соседи берутся из smart_moves(): без обратного хода и
    в порядке приоритета. Пустой открытый список ничего не доказывает.
    """
    name = 'astar'
    label = 'A*'
    optimal = False

    def __init__(self, state_limit: int = DEFAULT_STATE_LIMIT,
                 advanced_heuristics: bool = True, verbose: bool = False):
        super().__init__(state_limit, verbose)
        self.advanced_heuristics = advanced_heuristics

    def _estimate(self, state: PuzzleState) -> int:
        return estimate(state, advanced=self.advanced_heuristics)

    def search(self, state: PuzzleState, control: Optional[SearchControl] = None) -> SolveResult:
        control = control or SearchControl()
        self._begin()
        control.set_status('Running A* search...')
        self._log(
            f"Starting A* (containers={len(state)}, advanced={self.advanced_heuristics}, "
            f"time_limit={control.time_limit})"
        )

        counter = 0
        heap: List[Tuple[int, int, SearchNode]] = []
        root = SearchNode(state, 0, self._estimate(state))
        heappush(heap, (root.f, counter, root))
        g_score: Dict[str, int] = {state.key: 0}
        closed: Set[str] = set()

        while heap:
            if control.is_cancelled():
                return self._finish(SolveStatus.CANCELLED)
            if control.time_exceeded():
                return self._finish(SolveStatus.TIMED_OUT)

            _, _, node = heappop(heap)
            current = node.state
            key = current.key

            # Устаревшие записи: состояние уже закрыто или найден путь короче
            if key in closed or node.g > g_score[key]:
                continue

            self.stats.states_processed += 1
            self.stats.max_depth = max(self.stats.max_depth, node.g)
            control.checkpoint(self.stats.states_processed, node.g, self.label)

            if current.is_solved():
                return self._finish(SolveStatus.SOLVED, current.path)

            closed.add(key)

            if self.stats.states_processed > self.state_limit:
                return self._finish(SolveStatus.STATE_LIMIT_REACHED)

            moves, pruned = smart_moves(current)
            self.stats.states_pruned += pruned

            for move in moves:
                child = self._expand(current, move)
                child_key = child.key
                if child_key in closed:
                    continue

                tentative_g = node.g + 1
                if tentative_g < g_score.get(child_key, float('inf')):
                    g_score[child_key] = tentative_g
                    counter += 1
                    child_node = SearchNode(child, tentative_g, self._estimate(child))
                    heappush(heap, (child_node.f, counter, child_node))

        return self._finish(
            SolveStatus.EXHAUSTED,
            message='Heuristic search exhausted its frontier; solvability not proven'
        )
