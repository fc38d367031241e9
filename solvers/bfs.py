"""
solvers/bfs.py

BFS решатель — гарантирует кратчайшее решение.
"""

from collections import deque
from typing import Optional

from .base import BaseSolver
from .progress import SearchControl
from .result import SolveResult, SolveStatus
from core.moves import generate_legal_moves
from core.state import PuzzleState


class BFSSolver(BaseSolver):
    """
    Поиск в ширину по полному (неотсечённому) множеству ходов.

    Состояние помечается посещённым при постановке в очередь, поэтому
    первое извлечённое решённое состояние даёт минимальное число ходов.
    Пустая очередь доказывает, что решения нет.
    """
    name = 'bfs'
    label = 'BFS'
    optimal = True

    def search(self, state: PuzzleState, control: Optional[SearchControl] = None) -> SolveResult:
        control = control or SearchControl()
        self._begin()
        control.set_status('Running BFS search...')
        self._log(f"Starting BFS (containers={len(state)}, limit={self.state_limit})")

        queue = deque([state])
        visited = {state.key}

        while queue:
            if control.is_cancelled():
                return self._finish(SolveStatus.CANCELLED)

            current = queue.popleft()
            self.stats.states_processed += 1
            depth = current.move_count
            self.stats.max_depth = max(self.stats.max_depth, depth)
            control.checkpoint(self.stats.states_processed, depth, self.label)

            if current.is_solved():
                return self._finish(SolveStatus.SOLVED, current.path)

            if self.stats.states_processed > self.state_limit:
                return self._finish(SolveStatus.STATE_LIMIT_REACHED)

            for move in generate_legal_moves(current):
                child = self._expand(current, move)
                if child.key not in visited:
                    visited.add(child.key)
                    queue.append(child)

        return self._finish(
            SolveStatus.EXHAUSTED,
            message='No solution exists: every reachable state was explored'
        )
