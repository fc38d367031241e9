"""
tests/conftest.py

Общие фикстуры: корень проекта в sys.path и типовые головоломки.
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.container import Container
from core.state import PuzzleState
from utils.monitoring import get_monitor


def make_containers(tubes, capacity):
    return [Container(i, capacity, tube) for i, tube in enumerate(tubes)]


# Обмен двух цветов через пустую пробирку, кратчайшее решение в 3 хода
TINY = ([['r', 'b'], ['b', 'r'], []], 2)

# Полные пробирки с разными верхними цветами и без пустой: ходов нет
STUCK = ([['r', 'b'], ['b', 'r']], 2)

# Ёмкость 3, два цвета, решается за 5 ходов
THREE = ([['r', 'b', 'r'], ['b', 'r', 'b'], []], 3)

# Ёмкость 4, три цвета, две пустые пробирки
CLASSIC = ([
    ['red', 'blue', 'green', 'red'],
    ['blue', 'green', 'red', 'blue'],
    ['green', 'red', 'blue', 'green'],
    [],
    [],
], 4)


@pytest.fixture
def tiny_containers():
    return make_containers(*TINY)


@pytest.fixture
def stuck_containers():
    return make_containers(*STUCK)


@pytest.fixture
def three_containers():
    return make_containers(*THREE)


@pytest.fixture
def classic_containers():
    return make_containers(*CLASSIC)


@pytest.fixture
def tiny_state():
    return PuzzleState.from_layers(*TINY)


@pytest.fixture
def three_state():
    return PuzzleState.from_layers(*THREE)


@pytest.fixture
def classic_state():
    return PuzzleState.from_layers(*CLASSIC)


@pytest.fixture
def stuck_state():
    return PuzzleState.from_layers(*STUCK)


@pytest.fixture(autouse=True)
def reset_monitor():
    """Глобальный монитор не должен переносить счётчики между тестами."""
    get_monitor().reset()
    yield
    get_monitor().reset()
