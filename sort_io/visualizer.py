"""
sort_io/visualizer.py

Визуализация пробирок и решений.
"""

from typing import List, Optional, Sequence

from core.move import Move
from core.state import PuzzleState

EMPTY_SLOT = '·'


def display_state(state: PuzzleState) -> str:
    """
    Текстовое представление позиции: одна строка на пробирку,
    слои слева направо снизу вверх.

    Args:
        state: позиция

    Returns:
        Строка для вывода
    """
    width = max((len(c) for layer in state.layers() for c in layer), default=1)
    lines = []

    for index, container in enumerate(state.containers, 1):
        cells = list(container.layers) + [EMPTY_SLOT] * container.free_space()
        row = " ".join(f"{cell:<{width}}" for cell in cells).rstrip()
        mark = " ✓" if container.is_complete() else ""
        lines.append(f"{index:>2} | {row}{mark}")

    return "\n".join(lines)


def format_solution(moves: Optional[Sequence[Move]]) -> str:
    """
    Форматирует список ходов для вывода.

    Args:
        moves: список ходов или None

    Returns:
        Форматированная строка
    """
    if moves is None:
        return "❌ Решение не найдено"
    if not moves:
        return "✅ Головоломка уже решена"

    lines = [f"✅ Найдено решение за {len(moves)} ходов:"]
    for i, move in enumerate(moves, 1):
        lines.append(f"  {i:2}. {move}")

    return "\n".join(lines)


def format_solution_states(state: PuzzleState, moves: Sequence[Move]) -> List[str]:
    """Позиция после каждого хода (для --show-states)."""
    blocks = []
    current = state
    for i, move in enumerate(moves, 1):
        current = current.apply_move(move)
        blocks.append(f"Ход {i}: {move}\n{display_state(current)}")
    return blocks
