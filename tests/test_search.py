"""
tests/test_search.py

Тесты BFS и A* решателей и SearchControl.
"""

import itertools

import pytest

from core.move import Move
from solvers import AStarSolver, BFSSolver, SearchControl, SolveStatus
from solutions import verify_solution
from utils.error_handling import InternalInconsistencyError


# === BFS ===

def test_bfs_finds_shortest_solution(tiny_state):
    """Кратчайшее решение обмена двух цветов — 3 хода."""
    result = BFSSolver().search(tiny_state)

    assert result.status is SolveStatus.SOLVED
    assert len(result.moves) == 3
    assert verify_solution(tiny_state, result.moves)
    assert result.is_optimal
    assert result.stats.solution_length == 3
    assert result.stats.states_processed > 0


def test_bfs_is_deterministic(three_state):
    first = BFSSolver().search(three_state)
    second = BFSSolver().search(three_state)

    assert first.status is SolveStatus.SOLVED
    assert first.moves == second.moves
    assert len(first.moves) == 5


def test_bfs_exhausts_stuck_puzzle(stuck_state):
    """Нет ходов: одно обработанное состояние, нерешаемость доказана."""
    result = BFSSolver().search(stuck_state)

    assert result.status is SolveStatus.EXHAUSTED
    assert result.moves == []
    assert result.stats.states_processed == 1
    assert result.proven_unsolvable


def test_bfs_state_limit(tiny_state):
    result = BFSSolver(state_limit=1).search(tiny_state)

    assert result.status is SolveStatus.STATE_LIMIT_REACHED
    assert result.stats.states_processed == 2
    assert result.moves == []
    assert result.hit_limit


def test_expand_rejects_illegal_generated_move(stuck_state):
    """Ход в заполненную пробирку при раскрытии — нарушение инварианта поиска."""
    with pytest.raises(InternalInconsistencyError, match="Сгенерированный ход"):
        BFSSolver()._expand(stuck_state, Move(0, 1))


def test_expand_rejects_out_of_range_move(stuck_state):
    with pytest.raises(InternalInconsistencyError):
        AStarSolver()._expand(stuck_state, Move(0, 5))


def test_bfs_cancelled_before_first_expansion(tiny_state):
    control = SearchControl()
    control.cancel()

    result = BFSSolver().search(tiny_state, control)

    assert result.status is SolveStatus.CANCELLED
    assert result.stats.states_processed == 0


def test_bfs_reports_progress(three_state):
    snapshots = []
    control = SearchControl(progress_interval=1, progress_callback=snapshots.append)
    control.start()

    result = BFSSolver().search(three_state, control)

    assert len(snapshots) == result.stats.states_processed
    processed = [s.states_processed for s in snapshots]
    assert processed == sorted(processed)
    assert all(s.is_running for s in snapshots)
    assert 'BFS' in snapshots[-1].status


# === A* ===

def test_astar_solves_classic(classic_state):
    result = AStarSolver().search(classic_state)

    assert result.status is SolveStatus.SOLVED
    assert verify_solution(classic_state, result.moves)
    assert result.strategy == 'astar'
    assert not result.is_optimal


def test_astar_is_not_shorter_than_bfs(three_state, tiny_state):
    for state in (tiny_state, three_state):
        optimal = BFSSolver().search(state)
        heuristic = AStarSolver().search(state)
        assert heuristic.status is SolveStatus.SOLVED
        assert len(heuristic.moves) >= len(optimal.moves)


def test_astar_simple_heuristic(three_state):
    result = AStarSolver(advanced_heuristics=False).search(three_state)

    assert result.status is SolveStatus.SOLVED
    assert verify_solution(three_state, result.moves)


def test_astar_times_out_with_fake_clock(classic_state):
    """Часы сдвигаются на 10 секунд при каждом обращении."""
    control = SearchControl(clock=itertools.count(0, 10).__next__)
    control.start(time_limit=5.0)

    result = AStarSolver().search(classic_state, control)

    assert result.status is SolveStatus.TIMED_OUT
    assert result.moves == []
    assert result.stats.states_processed == 0


def test_astar_state_limit(classic_state):
    result = AStarSolver(state_limit=1).search(classic_state)

    assert result.status is SolveStatus.STATE_LIMIT_REACHED
    assert result.stats.states_processed == 2


def test_astar_exhausted_is_not_a_proof(stuck_state):
    result = AStarSolver().search(stuck_state)

    assert result.status is SolveStatus.EXHAUSTED
    assert result.stats.states_processed == 1
    assert not result.proven_unsolvable


# === SearchControl ===

def test_search_control_lifecycle():
    clock = iter([100.0, 103.0, 104.0, 104.0]).__next__
    control = SearchControl(clock=clock)
    assert control.snapshot().status == 'Idle'
    assert not control.snapshot().is_running

    control.start(time_limit=2.0)             # 100
    assert control.time_exceeded()             # 103 - 100 > 2
    control.finish('done', best_move_count=4)  # 104

    snapshot = control.snapshot()              # конец зафиксирован
    assert snapshot.status == 'done'
    assert snapshot.best_move_count == 4
    assert not snapshot.is_running
    assert snapshot.elapsed == 4.0
    assert snapshot.to_dict()['best_move_count'] == 4


def test_cancel_before_start_is_kept_until_finish():
    """Отмена до start() не теряется; finish() сбрасывает её для следующего решения."""
    control = SearchControl()
    control.cancel()
    control.start()
    assert control.is_cancelled(), "Отмена до start() должна сохраниться"

    control.finish("Search cancelled")
    assert not control.is_cancelled()

    control.start()
    assert not control.is_cancelled()
