"""
heuristics - Эвристические функции

Экспортирует:
- Оценки h(n) (комбинированная и простая)
- Отсечение и приоритизацию ходов
"""

from .estimate import (
    heuristic_misplaced,
    heuristic_fragmentation,
    heuristic_empty_shortage,
    heuristic_mixed,
    combined_heuristic,
    simple_heuristic,
    estimate
)
from .pruning import (
    is_reversal,
    is_fragmenting_move,
    will_complete_target,
    score_move,
    prune_moves,
    prioritize_moves,
    smart_moves
)

__all__ = [
    'heuristic_misplaced',
    'heuristic_fragmentation',
    'heuristic_empty_shortage',
    'heuristic_mixed',
    'combined_heuristic',
    'simple_heuristic',
    'estimate',
    'is_reversal',
    'is_fragmenting_move',
    'will_complete_target',
    'score_move',
    'prune_moves',
    'prioritize_moves',
    'smart_moves'
]
