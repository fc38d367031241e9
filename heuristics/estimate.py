"""
heuristics/estimate.py

Оценка h(n) оставшегося числа ходов для best-first поиска.

Эвристика НЕ доказана допустимой: она может переоценивать расстояние,
поэтому решения A* не гарантированно минимальны.
"""

from collections import defaultdict
from typing import Dict, Set

from core.state import PuzzleState


def _is_open(container) -> bool:
    """Непустая и незавершённая пробирка — с ней ещё надо работать."""
    return not container.is_empty() and not container.is_complete()


def heuristic_misplaced(state: PuzzleState) -> int:
    """
    Слои, отличные от нижнего цвета своей пробирки
    (нижний цвет — то, чем пробирка «должна» стать).
    """
    total = 0
    for container in state.containers:
        if _is_open(container):
            target = container.layers[0]
            total += sum(1 for color in container.layers if color != target)
    return total


def heuristic_fragmentation(state: PuzzleState) -> int:
    """
    ceil(excess / 2), где для каждого цвета, разнесённого по нескольким
    пробиркам, excess += (число пробирок с этим цветом) - 1.
    """
    holders: Dict[str, Set[int]] = defaultdict(set)
    for index, container in enumerate(state.containers):
        for color in container.layers:
            holders[color].add(index)

    excess = sum(len(indices) - 1 for indices in holders.values() if len(indices) > 1)
    return (excess + 1) // 2


def heuristic_empty_shortage(state: PuzzleState) -> int:
    """Штраф, когда пустых пробирок меньше двух."""
    return max(0, 2 - state.empty_count())


def heuristic_mixed(state: PuzzleState) -> int:
    """Для каждой незавершённой пробирки с k > 1 цветами добавляем k - 1."""
    total = 0
    for container in state.containers:
        if _is_open(container):
            distinct = len(container.distinct_colors())
            if distinct > 1:
                total += distinct - 1
    return total


def combined_heuristic(state: PuzzleState) -> int:
    """
    Комбинированная эвристика:
    misplaced + ceil(fragmentation / 2) + empty_shortage + mixed.

    Все слагаемые — неотрицательные целые. Если каждого цвета ровно
    capacity слоёв, h == 0 только для решённого состояния (необходимое,
    но не достаточное условие допустимости).
    """
    return (
        heuristic_misplaced(state)
        + heuristic_fragmentation(state)
        + heuristic_empty_shortage(state)
        + heuristic_mixed(state)
    )


def simple_heuristic(state: PuzzleState) -> int:
    """Простая оценка: половина слоёв в незавершённых пробирках (с округлением вверх)."""
    layers = sum(len(c) for c in state.containers if _is_open(c))
    return (layers + 1) // 2


def estimate(state: PuzzleState, advanced: bool = True) -> int:
    """Выбирает эвристику по флагу advanced_heuristics."""
    if advanced:
        return combined_heuristic(state)
    return simple_heuristic(state)
