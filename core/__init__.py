"""
core - Ядро Water Sort

Базовые структуры данных: пробирка, ход, состояние, генерация ходов.
"""

from .container import Container, LAYER_SEPARATOR, CONTAINER_SEPARATOR
from .move import Move
from .state import PuzzleState, canonical_key, parse_key
from .moves import generate_legal_moves, has_legal_moves

__all__ = [
    'Container', 'Move', 'PuzzleState',
    'LAYER_SEPARATOR', 'CONTAINER_SEPARATOR',
    'canonical_key', 'parse_key',
    'generate_legal_moves', 'has_legal_moves',
]
