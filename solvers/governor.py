"""
solvers/governor.py

Governor (Диспетчер) — публичная точка входа решателя.

Анализирует головоломку, выбирает алгоритм (BFS для малых, A* для
остальных), запускает его с бюджетом времени и лимитом состояний,
очищает и проверяет найденное решение.
"""

import time
from typing import Callable, Iterable, Optional

from .astar import AStarSolver
from .base import BaseSolver, SolverStats
from .bfs import BFSSolver
from .progress import SearchControl, SearchProgress, ProgressCallback
from .result import SolveResult, SolveStatus
from analysis.complexity import PuzzleComplexity, analyze_complexity, choose_strategy
from core.container import Container
from core.state import PuzzleState
from solutions.optimize import remove_reversals
from solutions.verify import verify_solution
from utils.config import SolverConfig
from utils.error_handling import (
    InvalidPuzzleError,
    InternalInconsistencyError,
    SolverError,
    validate_puzzle,
)
from utils.logging import get_logger
from utils.monitoring import get_monitor


class GovernorSolver:
    """
    Governor решатель — анализирует позицию и выбирает алгоритм.

    Критерии выбора:
    - Не больше 8 пробирок и 6 цветов → BFS (кратчайшее решение)
    - Иначе → A* с бюджетом времени по уровню сложности

    solve() никогда не бросает исключений: любая неудача возвращается
    как SolveResult с соответствующим статусом.
    """

    def __init__(self, config: Optional[SolverConfig] = None,
                 progress_callback: Optional[ProgressCallback] = None,
                 verbose: bool = False,
                 clock: Callable[[], float] = time.time):
        self.config = config or SolverConfig()
        self.verbose = verbose
        self.control = SearchControl(
            progress_interval=self.config.progress_interval,
            progress_callback=progress_callback,
            clock=clock,
        )
        self.last_result: Optional[SolveResult] = None

    def _log(self, message: str) -> None:
        if self.verbose:
            get_logger().info(f"[Governor] {message}")

    # === Публичный API ===

    def get_progress(self) -> SearchProgress:
        """Снимок прогресса; можно вызывать из другого потока."""
        return self.control.snapshot()

    def cancel(self):
        """Запрашивает остановку текущего решения."""
        self._log("Cancellation requested")
        self.control.cancel()

    def solve(self, containers: Iterable[Container]) -> SolveResult:
        """Решает головоломку."""
        start_time = time.time()
        self.control.start()

        result = self._solve(containers)

        monitor = get_monitor()
        monitor.record_time(f"solve_{result.strategy or 'none'}", time.time() - start_time)
        monitor.increment_counter(result.status.value)

        best = result.move_count if result.success else None
        self.control.finish(result.message, best_move_count=best)
        self._log(f"{result.status.value}: {result.message} ({result.move_count} moves)")

        self.last_result = result
        return result

    # === Внутреннее ===

    def _solve(self, containers: Iterable[Container]) -> SolveResult:
        try:
            containers = list(containers) if containers is not None else None
            validate_puzzle(containers)
            root = PuzzleState.from_containers(containers)
        except (InvalidPuzzleError, TypeError) as e:
            get_logger().warning(f"Invalid puzzle: {e}")
            return SolveResult(SolveStatus.INVALID_PUZZLE, error=str(e))

        if root.is_solved():
            self._log("Puzzle already solved")
            return SolveResult(SolveStatus.ALREADY_SOLVED)

        complexity = analyze_complexity(root)
        strategy = self._select_strategy(complexity)
        solver = self._create_solver(strategy)

        if strategy == 'astar':
            time_limit = self.config.time_limit
            if time_limit is None:
                time_limit = complexity.time_limit
            self.control.set_time_limit(time_limit)

        try:
            result = solver.search(root, self.control)
            if result.status is SolveStatus.SOLVED:
                result.moves = self._post_process(root, result.moves, result.stats)
                result.message = 'Solution found and optimized!'
        except SolverError as e:
            get_logger().error(f"{solver.__class__.__name__}: {e}")
            result = SolveResult(
                SolveStatus.INTERNAL_ERROR, strategy=strategy,
                stats=solver.stats, error=str(e)
            )
        except Exception as e:
            get_logger().error(
                f"{solver.__class__.__name__}: Неожиданная ошибка: {e}",
                exc_info=True
            )
            result = SolveResult(
                SolveStatus.INTERNAL_ERROR, strategy=strategy,
                stats=solver.stats, error=str(e)
            )

        result.complexity = complexity
        return result

    def _select_strategy(self, complexity: PuzzleComplexity) -> str:
        if self.config.strategy != 'auto':
            self._log(f"→ Chosen: {self.config.strategy} (задано конфигурацией)")
            return self.config.strategy

        strategy, reason = choose_strategy(
            complexity,
            max_containers=self.config.bfs_max_containers,
            max_colors=self.config.bfs_max_colors,
        )
        self._log(f"Analysis: {complexity}")
        self._log(f"→ Chosen: {strategy} ({reason})")
        return strategy

    def _create_solver(self, strategy: str) -> BaseSolver:
        if strategy == 'bfs':
            return BFSSolver(state_limit=self.config.state_limit, verbose=self.verbose)
        return AStarSolver(
            state_limit=self.config.state_limit,
            advanced_heuristics=self.config.advanced_heuristics,
            verbose=self.verbose,
        )

    def _post_process(self, root: PuzzleState, moves, stats: SolverStats):
        if self.config.optimize_solution:
            cleaned = remove_reversals(root, moves)
            if len(cleaned) < len(moves):
                self._log(f"Removed {len(moves) - len(cleaned)} reversed moves")
            moves = cleaned

        if not verify_solution(root, moves):
            raise InternalInconsistencyError(
                f"Найденное решение ({len(moves)} ходов) не проходит проверку"
            )

        stats.solution_length = len(moves)
        return moves


def solve(containers: Iterable[Container],
          progress_callback: Optional[ProgressCallback] = None,
          verbose: bool = False,
          **config) -> SolveResult:
    """
    Решает головоломку с настройками по умолчанию.

    Args:
        containers: пробирки
        progress_callback: вызывается каждые progress_interval состояний
        **config: поля SolverConfig (state_limit, strategy, ...)
    """
    solver_config = SolverConfig.from_dict(config)
    return GovernorSolver(solver_config, progress_callback, verbose).solve(containers)
