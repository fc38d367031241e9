"""
tests/test_sort_io.py

Тесты парсера, предустановок и текстового вывода.
"""

import pytest

from core.move import Move
from core.state import PuzzleState
from sort_io import (
    PRESETS,
    containers_from_layers,
    display_state,
    format_puzzle,
    format_solution,
    format_solution_states,
    parse_puzzle,
    preset_containers,
)
from utils.error_handling import InvalidPuzzleError, validate_puzzle


def test_parse_puzzle():
    containers = parse_puzzle("capacity=4 tubes=R,B,R,B|B,R,B,R||")

    assert len(containers) == 4
    assert [c.layers for c in containers] == [['R', 'B', 'R', 'B'], ['B', 'R', 'B', 'R'], [], []]
    assert all(c.capacity == 4 for c in containers)
    assert [c.id for c in containers] == [0, 1, 2, 3]
    assert validate_puzzle(containers)


def test_parse_puzzle_default_capacity():
    containers = parse_puzzle("tubes=red,blue|")
    assert containers[0].capacity == 4
    assert containers[1].is_empty()


@pytest.mark.parametrize('text', [
    '',
    None,
    'capacity=4',
    'capacity=2 tubes=a,b,c|',
    'capacity=0 tubes=a|',
])
def test_parse_puzzle_errors(text):
    with pytest.raises(InvalidPuzzleError):
        parse_puzzle(text)


def test_format_puzzle_inverse():
    text = "capacity=2 tubes=r,b|b,r|"
    assert format_puzzle(parse_puzzle(text)) == text


@pytest.mark.parametrize('tubes', [None, 'r,b', [], ['r', 'b'], [['r'], 5]])
def test_containers_from_layers_errors(tubes):
    with pytest.raises(InvalidPuzzleError):
        containers_from_layers(tubes, 2)


@pytest.mark.parametrize('name', sorted(PRESETS))
def test_presets_are_valid(name):
    """Каждого цвета ровно на одну полную пробирку."""
    containers = preset_containers(name)
    assert validate_puzzle(containers)

    state = PuzzleState(containers)
    capacity = PRESETS[name]['capacity']
    assert all(count == capacity for count in state.color_counts().values())


def test_display_state():
    state = PuzzleState.from_layers([['r', 'r'], ['b'], []], 2)
    text = display_state(state)
    lines = text.splitlines()

    assert len(lines) == 3
    assert lines[0].startswith(' 1 |')
    assert '✓' in lines[0]
    assert '·' in lines[1]
    assert '✓' not in lines[2]


def test_format_solution():
    assert 'не найдено' in format_solution(None)
    assert 'уже решена' in format_solution([])

    text = format_solution([Move(0, 2), Move(1, 0)])
    assert '2 ходов' in text
    assert '1 → 3' in text
    assert '2 → 1' in text


def test_format_solution_states(tiny_state):
    blocks = format_solution_states(tiny_state, [Move(0, 2), Move(1, 0), Move(1, 2)])

    assert len(blocks) == 3
    assert blocks[0].startswith('Ход 1: 1 → 3')
    assert blocks[-1].count('✓') == 2
