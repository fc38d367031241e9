"""
analysis/complexity.py

Классификация сложности головоломки: уровень, бюджет времени и выбор
алгоритма поиска (BFS или A*).
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Tuple

from core.state import PuzzleState


class Difficulty(Enum):
    EASY = 'Easy'
    MEDIUM = 'Medium'
    HARD = 'Hard'
    EXPERT = 'Expert'


# (макс. пробирок, макс. цветов, бюджет времени в секундах); остальное считается Expert
DIFFICULTY_TIERS: Tuple[Tuple[Difficulty, int, int, float], ...] = (
    (Difficulty.EASY, 6, 4, 5.0),
    (Difficulty.MEDIUM, 10, 8, 15.0),
    (Difficulty.HARD, 12, 10, 30.0),
)
EXPERT_TIME_LIMIT = 60.0

BFS_MAX_CONTAINERS = 8
BFS_MAX_COLORS = 6


@dataclass(frozen=True)
class PuzzleComplexity:
    """Характеристики стартовой позиции."""
    containers: int
    colors: int
    total_units: int
    incomplete_containers: int
    difficulty: Difficulty
    time_limit: float

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['difficulty'] = self.difficulty.value
        return data


def classify(containers: int, colors: int) -> Tuple[Difficulty, float]:
    """Уровень сложности и бюджет времени по (число пробирок, число цветов)."""
    for difficulty, max_containers, max_colors, time_limit in DIFFICULTY_TIERS:
        if containers <= max_containers and colors <= max_colors:
            return difficulty, time_limit
    return Difficulty.EXPERT, EXPERT_TIME_LIMIT


def analyze_complexity(state: PuzzleState) -> PuzzleComplexity:
    """Анализирует позицию и возвращает характеристики."""
    containers = len(state)
    colors = len(state.colors())
    difficulty, time_limit = classify(containers, colors)

    return PuzzleComplexity(
        containers=containers,
        colors=colors,
        total_units=state.total_units(),
        incomplete_containers=state.incomplete_count(),
        difficulty=difficulty,
        time_limit=time_limit,
    )


def choose_strategy(complexity: PuzzleComplexity,
                    max_containers: int = BFS_MAX_CONTAINERS,
                    max_colors: int = BFS_MAX_COLORS) -> Tuple[str, str]:
    """
    Выбирает алгоритм.

    Returns:
        ('bfs' | 'astar', причина)
    """
    if complexity.containers <= max_containers and complexity.colors <= max_colors:
        return 'bfs', (
            f"Малая головоломка ({complexity.containers} пробирок, {complexity.colors} цветов), "
            f"BFS даст кратчайшее решение"
        )
    return 'astar', (
        f"Сложность {complexity.difficulty.value} ({complexity.containers} пробирок, "
        f"{complexity.colors} цветов), эвристический поиск, бюджет {complexity.time_limit:.0f}s"
    )
