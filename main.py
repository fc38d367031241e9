#!/usr/bin/env python3
"""
main.py

Точка входа для Water Sort Solver.

Использование:
    python main.py                                   # демо-головоломка
    python main.py "capacity=4 tubes=R,B,R,B|B,R,B,R||"  # своя позиция
    python main.py --preset medium --strategy astar  # выбор решателя
"""

import argparse
import logging
import sys

from core.state import PuzzleState
from sort_io import (
    PRESETS,
    display_state,
    format_solution,
    format_solution_states,
    parse_puzzle,
    preset_containers,
)
from solvers import GovernorSolver, SolveStatus
from utils.config import STRATEGIES, SolverConfig, load_config
from utils.error_handling import InvalidPuzzleError
from utils.logging import get_logger, setup_file_logging
from utils.monitoring import get_monitor


EXIT_SOLVED = 0
EXIT_NOT_SOLVED = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Water Sort Solver',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py                                    # демо (classic)
  python main.py "capacity=2 tubes=red,blue|blue,red|"
  python main.py --preset medium --strategy astar   # A*
  python main.py --preset classic --show-states     # позиция после каждого хода
        """
    )
    parser.add_argument(
        'input', nargs='?',
        help='Позиция в формате: capacity=4 tubes=R,B,R,B|B,R,B,R||'
    )
    parser.add_argument(
        '--preset', '-p', choices=sorted(PRESETS),
        help='Предустановленная головоломка (по умолчанию classic)'
    )
    parser.add_argument(
        '--strategy', '-s', choices=STRATEGIES,
        help='Выбор решателя (default: auto)'
    )
    parser.add_argument('--time-limit', type=float, help='Бюджет времени A* в секундах')
    parser.add_argument('--state-limit', type=int, help='Максимум обработанных состояний')
    parser.add_argument(
        '--simple-heuristic', action='store_true',
        help='Простая эвристика вместо комбинированной'
    )
    parser.add_argument('--config', help='JSON-файл с настройками SolverConfig')
    parser.add_argument('--log-file', help='Дублировать лог в файл')
    parser.add_argument('--verbose', '-v', action='store_true', help='Подробный лог')
    parser.add_argument(
        '--show-states', action='store_true',
        help='Показывать позицию после каждого хода'
    )
    return parser


def load_solver_config(args) -> SolverConfig:
    """Конфигурация из файла (если задан) с переопределениями из аргументов."""
    config = load_config(args.config) if args.config else SolverConfig()
    return config.replace(
        strategy=args.strategy,
        time_limit=args.time_limit,
        state_limit=args.state_limit,
        advanced_heuristics=False if args.simple_heuristic else None,
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logger = get_logger()
    if args.verbose:
        logger.set_level(logging.DEBUG)
    if args.log_file:
        setup_file_logging(args.log_file, logging.DEBUG if args.verbose else logging.INFO)

    print("=" * 50)
    print("🧪 Water Sort Solver")
    print("=" * 50)

    try:
        config = load_solver_config(args)
    except (OSError, ValueError) as e:
        print(f"❌ Ошибка конфигурации: {e}")
        return EXIT_INVALID

    try:
        if args.input:
            containers = parse_puzzle(args.input)
        else:
            containers = preset_containers(args.preset or 'classic')
    except InvalidPuzzleError as e:
        print(f"❌ Ошибка: {e}")
        return EXIT_INVALID

    state = PuzzleState(containers)
    print("\nВходная позиция:")
    print(display_state(state))
    print(f"\n🔧 Решатель: {config.strategy}")
    print("-" * 50)

    result = GovernorSolver(config, verbose=args.verbose).solve(containers)

    if result.status is SolveStatus.INVALID_PUZZLE:
        print(f"❌ Ошибка: {result.error}")
        return EXIT_INVALID

    if result.success:
        print(f"\n{format_solution(result.moves)}")
        if args.show_states and result.moves:
            print()
            print("\n\n".join(format_solution_states(state, result.moves)))
    else:
        print(f"\n❌ {result.message}")
        if result.error:
            print(f"   {result.error}")

    if result.strategy:
        optimal = "кратчайшее" if result.is_optimal else "не обязательно кратчайшее"
        print(f"\n🔧 Алгоритм: {result.strategy} ({optimal})")
    if result.complexity:
        print(f"📊 Сложность: {result.complexity.difficulty.value}")
    print(f"⏱ {result.stats}")

    if args.verbose:
        get_monitor().log_stats()

    return EXIT_SOLVED if result.success else EXIT_NOT_SOLVED


if __name__ == "__main__":
    sys.exit(main())
