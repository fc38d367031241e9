"""
analysis - Анализ позиций

Экспортирует:
- Классификацию сложности и выбор стратегии
"""

from .complexity import (
    Difficulty,
    PuzzleComplexity,
    analyze_complexity,
    classify,
    choose_strategy,
)

__all__ = [
    'Difficulty',
    'PuzzleComplexity',
    'analyze_complexity',
    'classify',
    'choose_strategy',
]
