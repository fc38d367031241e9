"""
web/app.py

Flask JSON API для Water Sort Solver.
"""

import os
import sys
import threading
import uuid
from typing import Any, Dict, List, Tuple

from flask import Flask, request, jsonify

# Добавляем корень проекта в path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from analysis import analyze_complexity, choose_strategy
from core.container import Container
from core.moves import generate_legal_moves
from core.state import PuzzleState
from heuristics import estimate
from solvers import GovernorSolver, SolveStatus
from sort_io import PRESETS, containers_from_layers
from sort_io.parser import DEFAULT_CAPACITY
from utils.config import SolverConfig
from utils.error_handling import InvalidPuzzleError, validate_puzzle
from utils.logging import get_logger
from utils.monitoring import get_monitor, monitor_time

app = Flask(__name__)

# Параметры SolverConfig, которые можно передать в теле запроса
REQUEST_CONFIG_KEYS = ('strategy', 'time_limit', 'state_limit', 'advanced_heuristics')

# Фоновые решения: job_id -> {'solver', 'thread', 'result'}.
# Готовое задание удаляется после того, как его результат отдан клиенту.
JOBS: Dict[str, Dict[str, Any]] = {}
_jobs_lock = threading.Lock()

# Сколько готовых, но не запрошенных заданий держать в памяти
MAX_FINISHED_JOBS = 100


def parse_request_puzzle(data) -> Tuple[List[Container], SolverConfig]:
    """
    Пробирки и конфигурация из тела запроса.

    {
        "capacity": 4,
        "tubes": [["red", "blue"], []],   // снизу вверх
        "strategy": "auto"
    }

    Raises:
        InvalidPuzzleError: неверная головоломка
        ValueError: неверные параметры решателя
    """
    if not isinstance(data, dict):
        raise InvalidPuzzleError('Тело запроса должно быть JSON-объектом')

    containers = containers_from_layers(data.get('tubes'), data.get('capacity', DEFAULT_CAPACITY))
    overrides = {key: data.get(key) for key in REQUEST_CONFIG_KEYS}
    config = SolverConfig().replace(**overrides)
    return containers, config


def _bad_request(error: str):
    return jsonify({'success': False, 'error': error}), 400


@app.route('/api/solve', methods=['POST'])
@monitor_time('api_solve')
def solve():
    """Синхронное решение головоломки."""
    try:
        containers, config = parse_request_puzzle(request.get_json(silent=True))
    except (InvalidPuzzleError, ValueError) as e:
        return _bad_request(str(e))

    get_logger().info(f"Solve request: strategy={config.strategy}, tubes={len(containers)}")
    result = GovernorSolver(config).solve(containers)

    status_code = 400 if result.status is SolveStatus.INVALID_PUZZLE else 200
    return jsonify(result.to_dict()), status_code


@app.route('/api/jobs', methods=['POST'])
@monitor_time('api_start_job')
def start_job():
    """Запускает решение в фоновом потоке; прогресс — GET /api/jobs/<id>."""
    try:
        containers, config = parse_request_puzzle(request.get_json(silent=True))
    except (InvalidPuzzleError, ValueError) as e:
        return _bad_request(str(e))

    job_id = uuid.uuid4().hex
    solver = GovernorSolver(config)
    job = {'solver': solver, 'thread': None, 'result': None}

    def solve_in_thread():
        job['result'] = solver.solve(containers)

    thread = threading.Thread(target=solve_in_thread, daemon=True)
    job['thread'] = thread
    with _jobs_lock:
        _evict_finished_jobs()
        JOBS[job_id] = job
    thread.start()

    get_logger().info(f"Job {job_id} started: strategy={config.strategy}, tubes={len(containers)}")
    return jsonify({'job_id': job_id}), 202


def _evict_finished_jobs():
    """Удаляет самые старые готовые задания сверх MAX_FINISHED_JOBS. Вызывать под _jobs_lock."""
    finished = [job_id for job_id, job in JOBS.items() if job['result'] is not None]
    for job_id in finished[:max(0, len(finished) - MAX_FINISHED_JOBS)]:
        del JOBS[job_id]


def _get_job(job_id: str):
    with _jobs_lock:
        return JOBS.get(job_id)


@app.route('/api/jobs/<job_id>', methods=['GET'])
def get_job(job_id):
    """
    Прогресс и (когда готов) результат фонового решения.
    Готовый результат отдаётся один раз, после этого задание удаляется.
    """
    job = _get_job(job_id)
    if job is None:
        return jsonify({'error': 'Job not found'}), 404

    result = job['result']
    if result is not None:
        with _jobs_lock:
            JOBS.pop(job_id, None)

    return jsonify({
        'job_id': job_id,
        'done': result is not None,
        'progress': job['solver'].get_progress().to_dict(),
        'result': result.to_dict() if result is not None else None,
    })


@app.route('/api/jobs/<job_id>/cancel', methods=['POST'])
def cancel_job(job_id):
    job = _get_job(job_id)
    if job is None:
        return jsonify({'error': 'Job not found'}), 404

    job['solver'].cancel()
    return jsonify({'job_id': job_id, 'cancel_requested': True})


@app.route('/api/analyze', methods=['POST'])
@monitor_time('api_analyze')
def analyze():
    """Анализ позиции без решения: сложность, выбор алгоритма, ходы."""
    try:
        containers, config = parse_request_puzzle(request.get_json(silent=True))
        validate_puzzle(containers)
    except (InvalidPuzzleError, ValueError) as e:
        return _bad_request(str(e))

    state = PuzzleState(containers)
    complexity = analyze_complexity(state)
    strategy, reason = choose_strategy(
        complexity,
        max_containers=config.bfs_max_containers,
        max_colors=config.bfs_max_colors,
    )
    moves = generate_legal_moves(state)

    return jsonify({
        'is_solved': state.is_solved(),
        'complexity': complexity.to_dict(),
        'strategy': strategy,
        'reason': reason,
        'heuristic': estimate(state, advanced=config.advanced_heuristics),
        'moves_available': len(moves),
        'moves': [m.to_dict() for m in moves],
        'key': state.key,
    })


@app.route('/api/stats', methods=['GET'])
def get_stats():
    """Статистика решений (время по алгоритмам, счётчики исходов)."""
    return jsonify(get_monitor().get_stats())


@app.route('/api/preset/<name>')
def get_preset(name):
    """Получить предустановленную позицию."""
    if name not in PRESETS:
        return jsonify({'error': 'Preset not found'}), 404

    return jsonify(PRESETS[name])


if __name__ == '__main__':
    print("=" * 50)
    print("Water Sort Solver - JSON API")
    print("=" * 50)
    print("\nListening on http://localhost:5000")
    print()

    app.run(debug=True, host='0.0.0.0', port=5000)
