"""
heuristics/pruning.py

Отсечение и упорядочивание ходов для эвристического поиска.
BFS использует полный генератор без отсечений.
"""

from typing import List, Optional, Sequence, Tuple

from core.container import Container
from core.move import Move
from core.moves import generate_legal_moves
from core.state import PuzzleState


SCORE_COMPLETES_TARGET = 100
SCORE_EMPTY_TARGET = 50
SCORE_SAME_COLOR = 30
SCORE_PER_RUN_UNIT = 5


def is_reversal(move: Move, path: Sequence[Move]) -> bool:
    """Ход отменяет предыдущий (from/to поменяны местами)."""
    return bool(path) and move.is_reverse_of(path[-1])


def will_complete_target(source: Container, target: Container) -> bool:
    """
    Ход завершит непустой приёмник: приёмник одноцветный, верхняя серия
    источника того же цвета и заполняет всё свободное место.
    """
    if target.is_empty() or not target.is_uniform():
        return False
    if source.top_color() != target.top_color():
        return False
    return source.top_run_length() >= target.free_space()


def is_fragmenting_move(source: Container, target: Container) -> bool:
    """
    Переливание из уже упорядоченной (одноцветной, длиной > 1) пробирки
    в непустую пробирку с другим верхним цветом, если оно не завершает приёмник.
    """
    if len(source) <= 1 or not source.is_uniform():
        return False
    if target.is_empty() or target.top_color() == source.top_color():
        return False
    return not will_complete_target(source, target)


def score_move(state: PuzzleState, move: Move) -> int:
    """Приоритет хода: чем больше, тем раньше его исследуем."""
    source = state[move.source]
    target = state[move.target]
    score = 0

    if will_complete_target(source, target):
        score += SCORE_COMPLETES_TARGET

    if target.is_empty():
        score += SCORE_EMPTY_TARGET
    elif source.top_color() == target.top_color():
        score += SCORE_SAME_COLOR

    score += source.top_run_length() * SCORE_PER_RUN_UNIT
    return score


def prune_moves(state: PuzzleState, moves: Sequence[Move],
                path: Optional[Sequence[Move]] = None) -> Tuple[List[Move], int]:
    """
    Убирает отмену предыдущего хода и «разрушающие» переливания.

    Returns:
        (оставшиеся ходы, сколько отсечено)
    """
    if path is None:
        path = state.path

    kept = []
    for move in moves:
        if is_reversal(move, path):
            continue
        if is_fragmenting_move(state[move.source], state[move.target]):
            continue
        kept.append(move)
    return kept, len(moves) - len(kept)


def prioritize_moves(state: PuzzleState, moves: Sequence[Move]) -> List[Move]:
    """Сортировка по убыванию score_move; при равенстве — порядок генерации."""
    return sorted(moves, key=lambda m: score_move(state, m), reverse=True)


def smart_moves(state: PuzzleState) -> Tuple[List[Move], int]:
    """
    Допустимые ходы после отсечения, в порядке приоритета.

    Returns:
        (ходы, сколько отсечено)
    """
    kept, pruned = prune_moves(state, generate_legal_moves(state))
    return prioritize_moves(state, kept), pruned
