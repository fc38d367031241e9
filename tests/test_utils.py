"""
tests/test_utils.py

Тесты конфигурации, мониторинга, логирования и обработки ошибок.
"""

import json
import logging

import pytest

from core.container import Container
from utils.config import SolverConfig, load_config
from utils.error_handling import (
    IllegalMoveError,
    InvalidPuzzleError,
    SolverError,
    validate_puzzle,
)
from utils.logging import SolverLogger, get_logger, setup_file_logging
from utils.monitoring import PerformanceMonitor, get_monitor, monitor_time


# === Конфигурация ===

def test_config_defaults():
    config = SolverConfig()
    assert config.state_limit == 1_000_000
    assert config.progress_interval == 1000
    assert config.strategy == 'auto'
    assert config.time_limit is None
    assert config.advanced_heuristics is True
    assert config.optimize_solution is True
    assert (config.bfs_max_containers, config.bfs_max_colors) == (8, 6)


@pytest.mark.parametrize('kwargs', [
    {'strategy': 'dfs'},
    {'state_limit': 0},
    {'progress_interval': 0},
    {'time_limit': -1},
    {'state_limit': 'abc'},
    {'state_limit': 10.5},
    {'progress_interval': True},
    {'time_limit': 'x'},
    {'strategy': ['bfs']},
    {'advanced_heuristics': 'no'},
])
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        SolverConfig(**kwargs)


def test_config_accepts_integer_time_limit():
    assert SolverConfig(time_limit=3).time_limit == 3


def test_config_replace_with_wrong_type_raises_value_error():
    """Значения из JSON-запроса приходят как есть; неверный тип не должен давать TypeError."""
    with pytest.raises(ValueError, match="state_limit"):
        SolverConfig().replace(state_limit='abc')


def test_config_from_dict_rejects_unknown_keys():
    with pytest.raises(ValueError):
        SolverConfig.from_dict({'strategy': 'bfs', 'beam_width': 10})


def test_config_replace_ignores_none():
    config = SolverConfig(strategy='bfs').replace(strategy=None, state_limit=10)
    assert config.strategy == 'bfs'
    assert config.state_limit == 10


def test_load_config(tmp_path):
    path = tmp_path / 'solver.json'
    path.write_text(json.dumps({'strategy': 'astar', 'time_limit': 2.5}), encoding='utf-8')

    config = load_config(str(path))

    assert config.strategy == 'astar'
    assert config.time_limit == 2.5
    assert config.to_dict()['state_limit'] == 1_000_000


def test_load_config_rejects_non_object(tmp_path):
    path = tmp_path / 'solver.json'
    path.write_text('[1, 2]', encoding='utf-8')

    with pytest.raises(ValueError):
        load_config(str(path))


# === Мониторинг ===

def test_performance_monitor():
    monitor = PerformanceMonitor()
    monitor.record_time('solve_bfs', 0.5)
    monitor.record_time('solve_bfs', 1.5)
    monitor.increment_counter('solved')

    stats = monitor.get_stats()
    assert stats['total_operations'] == 2
    assert stats['counters'] == {'solved': 1}
    assert stats['operations']['solve_bfs']['average'] == 1.0
    assert monitor.get_stats('solve_bfs')['max'] == 1.5
    assert monitor.get_stats('missing') == {}

    monitor.reset()
    assert monitor.get_stats()['total_operations'] == 0


def test_monitor_time_decorator():
    @monitor_time('work')
    def work():
        return 42

    @monitor_time('fail')
    def fail():
        raise RuntimeError('boom')

    assert work() == 42
    with pytest.raises(RuntimeError):
        fail()

    stats = get_monitor().get_stats()
    assert stats['operations']['work']['count'] == 1
    assert 'fail_error' in stats['operations']


# === Логирование ===

def test_file_logging(tmp_path):
    log_file = tmp_path / 'solver.log'
    handler = setup_file_logging(str(log_file))
    try:
        get_logger().info('запись в файл')
        handler.flush()
        assert 'запись в файл' in log_file.read_text(encoding='utf-8')
    finally:
        logging.getLogger('watersort_solver').removeHandler(handler)
        handler.close()


def test_logger_is_shared_and_level_applies_to_handlers():
    logger = get_logger()
    assert get_logger() is logger

    handlers_before = list(logger.logger.handlers)
    SolverLogger()
    assert logger.logger.handlers == handlers_before, "Повторное создание не должно добавлять handler"

    level_before = logger.logger.level
    try:
        logger.set_level(logging.DEBUG)
        assert all(h.level == logging.DEBUG for h in logger.logger.handlers)
    finally:
        logger.set_level(level_before)


# === Ошибки ===

def test_error_hierarchy():
    assert issubclass(InvalidPuzzleError, SolverError)
    error = IllegalMoveError(0, 1, 'приёмник заполнен')
    assert isinstance(error, SolverError)
    assert 'приёмник заполнен' in str(error)


def test_validate_puzzle():
    assert validate_puzzle([Container(0, 2, ['r']), Container(1, 3, [])])
    with pytest.raises(InvalidPuzzleError):
        validate_puzzle([])
    with pytest.raises(InvalidPuzzleError):
        validate_puzzle([Container(0, 2), Container(0, 2)])
