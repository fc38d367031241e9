"""
solutions/verify.py

Проверка решения повторным проигрыванием ходов.
"""

from typing import Sequence

from core.move import Move
from core.state import PuzzleState
from utils.error_handling import IllegalMoveError


def replay(state: PuzzleState, moves: Sequence[Move]) -> PuzzleState:
    """
    Применяет ходы по порядку и возвращает итоговое состояние.

    Raises:
        IllegalMoveError: первый недопустимый ход
    """
    current = state
    for index, move in enumerate(moves):
        try:
            current = current.apply_move(Move(*move))
        except IndexError as e:
            raise IllegalMoveError(move[0], move[1], f"ход №{index + 1}: {e}") from e
    return current


def verify_solution(state: PuzzleState, moves: Sequence[Move]) -> bool:
    """
    Проверяет корректность решения.

    Правила:
    - каждый ход допустим в состоянии, где он применяется;
    - после всех ходов головоломка решена.
    """
    try:
        final = replay(state, moves)
    except IllegalMoveError:
        return False
    return final.is_solved()
