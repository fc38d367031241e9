"""
sort_io/presets.py

Предустановленные головоломки (CLI-демо и /api/preset/<name>).
"""

from typing import Any, Dict, List

from core.container import Container
from .parser import containers_from_layers


PRESETS: Dict[str, Dict[str, Any]] = {
    'tiny': {
        'name': 'Две пробирки с обменом',
        'capacity': 2,
        'tubes': [['red', 'blue'], ['blue', 'red'], []],
    },
    'classic': {
        'name': 'Три цвета',
        'capacity': 4,
        'tubes': [
            ['red', 'blue', 'green', 'red'],
            ['blue', 'green', 'red', 'blue'],
            ['green', 'red', 'blue', 'green'],
            [],
            [],
        ],
    },
    'medium': {
        'name': 'Четыре цвета',
        'capacity': 4,
        'tubes': [
            ['red', 'blue', 'green', 'yellow'],
            ['yellow', 'red', 'blue', 'green'],
            ['green', 'yellow', 'red', 'blue'],
            ['blue', 'green', 'yellow', 'red'],
            [],
            [],
        ],
    },
    'stuck': {
        'name': 'Тупик (нет ходов)',
        'capacity': 2,
        'tubes': [['red', 'blue'], ['blue', 'red']],
    },
}


def get_preset(name: str) -> Dict[str, Any]:
    """
    Описание предустановки.

    Raises:
        KeyError: неизвестное имя
    """
    return PRESETS[name]


def preset_containers(name: str) -> List[Container]:
    preset = get_preset(name)
    return containers_from_layers(preset['tubes'], preset['capacity'])
