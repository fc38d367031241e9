"""
sort_io - Ввод/вывод для Water Sort

Экспортирует:
- Парсинг входных данных
- Предустановленные головоломки
- Визуализация пробирок и решений
"""

from .parser import parse_puzzle, containers_from_layers, format_puzzle
from .presets import PRESETS, get_preset, preset_containers
from .visualizer import display_state, format_solution, format_solution_states

__all__ = [
    'parse_puzzle',
    'containers_from_layers',
    'format_puzzle',
    'PRESETS',
    'get_preset',
    'preset_containers',
    'display_state',
    'format_solution',
    'format_solution_states',
]
