"""
core/moves.py

Генерация допустимых ходов.
"""

from typing import List

from .move import Move
from .state import PuzzleState


def generate_legal_moves(state: PuzzleState) -> List[Move]:
    """
    Все упорядоченные пары (from, to), from != to, для которых
    can_pour_into истинно. O(n²) на состояние.
    """
    containers = state.containers
    moves = []

    for from_index, source in enumerate(containers):
        # Из пустой пробирки переливать нечего
        if source.is_empty():
            continue

        for to_index, target in enumerate(containers):
            if from_index == to_index:
                continue
            if source.can_pour_into(target):
                moves.append(Move(from_index, to_index))

    return moves


def has_legal_moves(state: PuzzleState) -> bool:
    containers = state.containers
    return any(
        source.can_pour_into(target)
        for i, source in enumerate(containers)
        for j, target in enumerate(containers)
        if i != j
    )
