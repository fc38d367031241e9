"""
solutions/optimize.py

Пост-обработка найденного решения: удаление пар «ход и обратный ход».
"""

from typing import List, Sequence

from core.move import Move
from core.state import PuzzleState


def remove_reversals(initial_state: PuzzleState, moves: Sequence[Move]) -> List[Move]:
    """
    Удаляет соседние пары ходов, где второй ход обращает первый.

    Пара (a → b, b → a) вырезается только если она ничего не меняет:
    состояние после пары совпадает с состоянием до неё. Например при
    A=[r], B=[r] переливание A→B и обратно B→A переносит обе единицы,
    и такая пара не пустая.

    Используется стек: после удаления пары новые соседи тоже
    проверяются (каскад).

    Raises:
        IllegalMoveError: во входном списке есть недопустимый ход
    """
    result: List[Move] = []
    states: List[PuzzleState] = [initial_state]

    for move in moves:
        current = states[-1]
        after = current.apply_move(move)

        if result and move.is_reverse_of(result[-1]) and after.key == states[-2].key:
            result.pop()
            states.pop()
            continue

        result.append(Move(*move))
        states.append(after)

    return result
