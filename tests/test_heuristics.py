"""
tests/test_heuristics.py

Тесты эвристики h(n) и отсечения/приоритизации ходов.
"""

from collections import deque

from core.container import Container
from core.move import Move
from core.moves import generate_legal_moves
from core.state import PuzzleState
from heuristics import (
    combined_heuristic,
    estimate,
    heuristic_empty_shortage,
    heuristic_fragmentation,
    heuristic_misplaced,
    heuristic_mixed,
    is_fragmenting_move,
    is_reversal,
    prioritize_moves,
    score_move,
    simple_heuristic,
    smart_moves,
    will_complete_target,
)


def _reachable(state, limit=5000):
    seen = {state.key}
    queue = deque([state])
    result = []
    while queue and len(result) < limit:
        current = queue.popleft()
        result.append(current)
        for move in generate_legal_moves(current):
            child = current.apply_move(move)
            if child.key not in seen:
                seen.add(child.key)
                queue.append(child)
    return result


# === Оценка ===

def test_heuristic_terms_on_tiny(tiny_state):
    assert heuristic_misplaced(tiny_state) == 2
    assert heuristic_fragmentation(tiny_state) == 1
    assert heuristic_empty_shortage(tiny_state) == 1
    assert heuristic_mixed(tiny_state) == 2
    assert combined_heuristic(tiny_state) == 6
    assert simple_heuristic(tiny_state) == 2


def test_estimate_dispatch(tiny_state):
    assert estimate(tiny_state) == combined_heuristic(tiny_state)
    assert estimate(tiny_state, advanced=False) == simple_heuristic(tiny_state)


def test_solved_state_has_zero_estimate():
    state = PuzzleState.from_layers([['r', 'r'], ['b', 'b'], [], []], 2)
    assert combined_heuristic(state) == 0
    assert simple_heuristic(state) == 0


def test_fragmentation_counts_containers_per_color():
    """Цвет в трёх пробирках даёт избыток 2, в двух — 1; ceil(3 / 2) = 2."""
    state = PuzzleState.from_layers([['r', 'b'], ['r', 'b'], ['r'], []], 3)
    assert heuristic_fragmentation(state) == 2


def test_estimate_is_non_negative_and_zero_only_when_solved(three_state):
    """Для каждого достижимого состояния h ≥ 0, и h == 0 ⇒ решено."""
    for state in _reachable(three_state):
        for advanced in (True, False):
            h = estimate(state, advanced)
            assert h >= 0
            if h == 0 and advanced:
                assert state.is_solved(), f"h == 0 в нерешённом состоянии {state.key}"


# === Отсечение и приоритет ===

def test_is_reversal():
    path = [Move(0, 2)]
    assert is_reversal(Move(2, 0), path)
    assert not is_reversal(Move(0, 2), path)
    assert not is_reversal(Move(2, 0), [])


def test_will_complete_target():
    source = Container(0, 4, ['b', 'r', 'r'])
    assert will_complete_target(source, Container(1, 4, ['r', 'r']))
    assert not will_complete_target(source, Container(1, 4, []))
    assert not will_complete_target(source, Container(1, 4, ['b', 'r']))
    assert not will_complete_target(source, Container(1, 4, ['r']))


def test_is_fragmenting_move():
    sorted_red = Container(0, 4, ['r', 'r'])
    assert is_fragmenting_move(sorted_red, Container(1, 4, ['b']))
    assert not is_fragmenting_move(sorted_red, Container(1, 4, []))
    assert not is_fragmenting_move(sorted_red, Container(1, 4, ['r']))
    assert not is_fragmenting_move(Container(0, 4, ['r']), Container(1, 4, ['b']))


def test_score_move():
    """+100 завершает, +50 в пустую, +30 тот же цвет, +5 за слой серии."""
    state = PuzzleState.from_layers([['b', 'r', 'r'], ['r', 'r'], []], 4)
    assert score_move(state, Move(0, 1)) == 140
    assert score_move(state, Move(0, 2)) == 60
    assert score_move(state, Move(1, 0)) == 40
    assert score_move(state, Move(1, 2)) == 60


def test_prioritize_is_stable_and_descending():
    state = PuzzleState.from_layers([['b', 'r', 'r'], ['r', 'r'], []], 4)
    moves = generate_legal_moves(state)
    assert moves == [Move(0, 1), Move(0, 2), Move(1, 0), Move(1, 2)]
    assert prioritize_moves(state, moves) == [Move(0, 1), Move(0, 2), Move(1, 2), Move(1, 0)]


def test_smart_moves_skips_reversal():
    state = PuzzleState.from_layers([['b', 'b'], [], ['r']], 2).apply_move(Move(0, 1))
    assert generate_legal_moves(state) == [Move(1, 0), Move(2, 0)]

    moves, pruned = smart_moves(state)

    assert moves == [Move(2, 0)]
    assert pruned == 1


def test_smart_moves_is_ordering_only_at_root(tiny_state):
    moves, pruned = smart_moves(tiny_state)
    assert pruned == 0
    assert sorted(moves) == sorted(generate_legal_moves(tiny_state))
