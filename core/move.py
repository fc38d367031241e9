"""
core/move.py

Ход — переливание из пробирки source в пробирку target.
Допустимость хода зависит от состояния, а не от самого хода.
"""

from typing import Dict, NamedTuple


class Move(NamedTuple):
    """Ход (source, target), индексы пробирок с нуля."""
    source: int
    target: int

    def reverse(self) -> 'Move':
        return Move(self.target, self.source)

    def is_reverse_of(self, other: 'Move') -> bool:
        return self.source == other.target and self.target == other.source

    def to_dict(self) -> Dict[str, int]:
        return {'from': self.source, 'to': self.target}

    @classmethod
    def from_dict(cls, data: Dict[str, int]) -> 'Move':
        return cls(int(data['from']), int(data['to']))

    def __str__(self) -> str:
        # Для человека пробирки нумеруются с 1
        return f"{self.source + 1} → {self.target + 1}"
