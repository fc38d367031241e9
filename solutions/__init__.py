"""
solutions - Пост-обработка и проверка решений.
"""

from .optimize import remove_reversals
from .verify import replay, verify_solution

__all__ = [
    'remove_reversals',
    'replay',
    'verify_solution',
]
