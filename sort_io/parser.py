"""
sort_io/parser.py

Парсинг входных данных.
"""

import re
from typing import List, Sequence

from core.container import Container, CONTAINER_SEPARATOR, LAYER_SEPARATOR
from utils.error_handling import InvalidPuzzleError


DEFAULT_CAPACITY = 4

_CAPACITY_RE = re.compile(r'capacity=(\d+)')
_TUBES_RE = re.compile(r'tubes=(\S*)')


def parse_puzzle(text: str) -> List[Container]:
    """
    Парсит текстовый формат описания головоломки.

    Формат: capacity=4 tubes=R,B,R,B|B,R,B,R||

    Пробирки разделяются '|', слои внутри пробирки — ',' снизу вверх.
    Пустой сегмент — пустая пробирка. capacity необязателен (по умолчанию 4).

    Args:
        text: строка с описанием

    Returns:
        Список пробирок

    Raises:
        InvalidPuzzleError: неверный формат или недопустимая позиция
    """
    text = text or ''
    tubes_match = _TUBES_RE.search(text)
    if not tubes_match:
        raise InvalidPuzzleError(
            "Неверный формат. Ожидается: capacity=4 tubes=R,B,R,B|B,R,B,R||"
        )

    capacity_match = _CAPACITY_RE.search(text)
    capacity = int(capacity_match.group(1)) if capacity_match else DEFAULT_CAPACITY

    layers = []
    for part in tubes_match.group(1).split(CONTAINER_SEPARATOR):
        colors = [c.strip() for c in part.split(LAYER_SEPARATOR)] if part.strip() else []
        layers.append(colors)

    return containers_from_layers(layers, capacity)


def containers_from_layers(tubes: Sequence[Sequence[str]], capacity: int = DEFAULT_CAPACITY) -> List[Container]:
    """
    Строит пробирки из списков слоёв (снизу вверх).

    Raises:
        InvalidPuzzleError: не список списков, пустой ввод, переполнение, плохой цвет
    """
    if isinstance(tubes, (str, bytes)) or not isinstance(tubes, Sequence):
        raise InvalidPuzzleError("tubes должен быть списком пробирок")
    if not tubes:
        raise InvalidPuzzleError("Нужна хотя бы одна пробирка")

    containers = []
    for index, tube in enumerate(tubes):
        if isinstance(tube, (str, bytes)) or not isinstance(tube, Sequence):
            raise InvalidPuzzleError(f"Пробирка {index} должна быть списком цветов")
        containers.append(Container(index, capacity, tube))
    return containers


def format_puzzle(containers: Sequence[Container]) -> str:
    """Обратное преобразование в текстовый формат parse_puzzle()."""
    capacity = containers[0].capacity if containers else DEFAULT_CAPACITY
    tubes = CONTAINER_SEPARATOR.join(c.to_string() for c in containers)
    return f"capacity={capacity} tubes={tubes}"
