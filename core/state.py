"""
core/state.py

Снимок всех пробирок в момент поиска.

Состояние неизменяемо после создания: дочерние состояния получаются через
apply_move(), который копирует все пробирки родителя и выполняет переливание
в копиях. Дедупликация идёт по каноническому ключу содержимого, путь ходов
в ключ не входит.
"""

from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from .container import Container, LAYER_SEPARATOR, CONTAINER_SEPARATOR
from .move import Move


def canonical_key(containers: Iterable[Container]) -> str:
    """
    Канонический ключ: слои каждой пробирки через ',', пробирки через '|',
    в порядке индексов.

    Цвета непустые и не содержат разделителей (проверяется в Container),
    поэтому ключ однозначен: parse_key(canonical_key(x)) восстанавливает
    содержимое x, и равенство ключей равносильно равенству содержимого.
    """
    return CONTAINER_SEPARATOR.join(LAYER_SEPARATOR.join(c.layers) for c in containers)


def parse_key(key: str) -> Tuple[Tuple[str, ...], ...]:
    """Обратное преобразование ключа в слои пробирок."""
    return tuple(
        tuple(part.split(LAYER_SEPARATOR)) if part else ()
        for part in key.split(CONTAINER_SEPARATOR)
    )


class PuzzleState:
    """Состояние головоломки: пробирки + путь ходов от корня."""
    __slots__ = ('_containers', '_path', '_key')

    def __init__(self, containers: Sequence[Container], path: Tuple[Move, ...] = ()):
        # Пробирки принадлежат состоянию; снаружи передавайте копии
        # (from_containers делает это сам).
        self._containers: Tuple[Container, ...] = tuple(containers)
        self._path: Tuple[Move, ...] = tuple(path)
        self._key = canonical_key(self._containers)

    @classmethod
    def from_containers(cls, containers: Iterable[Container]) -> 'PuzzleState':
        """Корневое состояние из пробирок вызывающего кода (глубокая копия)."""
        return cls([c.clone() for c in containers])

    @classmethod
    def from_layers(cls, layers: Sequence[Sequence[str]], capacity: int = 4) -> 'PuzzleState':
        """Корневое состояние из списков слоёв (снизу вверх)."""
        return cls([Container(i, capacity, tube) for i, tube in enumerate(layers)])

    # === Доступ ===

    @property
    def containers(self) -> Tuple[Container, ...]:
        """Пробирки только для чтения. Для изменений — clone_containers()."""
        return self._containers

    @property
    def path(self) -> Tuple[Move, ...]:
        return self._path

    @property
    def move_count(self) -> int:
        return len(self._path)

    @property
    def last_move(self) -> Optional[Move]:
        return self._path[-1] if self._path else None

    @property
    def key(self) -> str:
        return self._key

    def __len__(self) -> int:
        return len(self._containers)

    def __getitem__(self, index: int) -> Container:
        return self._containers[index]

    def clone_containers(self) -> List[Container]:
        return [c.clone() for c in self._containers]

    def layers(self) -> Tuple[Tuple[str, ...], ...]:
        return tuple(tuple(c.layers) for c in self._containers)

    # === Переходы ===

    def apply_move(self, move: Move) -> 'PuzzleState':
        """
        Новое состояние после хода. Текущее не меняется.

        Raises:
            IllegalMoveError: ход недопустим
            IndexError: индекс пробирки вне диапазона
        """
        source, target = move
        if not (0 <= source < len(self._containers) and 0 <= target < len(self._containers)):
            raise IndexError(f"Ход {move} вне диапазона пробирок 0..{len(self._containers) - 1}")

        new_containers = [c.clone() for c in self._containers]
        new_containers[source].pour_into(new_containers[target])
        return PuzzleState(new_containers, self._path + (Move(source, target),))

    def can_apply(self, move: Move) -> bool:
        source, target = move
        if not (0 <= source < len(self._containers) and 0 <= target < len(self._containers)):
            return False
        return self._containers[source].can_pour_into(self._containers[target])

    # === Анализ ===

    def is_solved(self) -> bool:
        """Каждая пробирка пуста или завершена."""
        return all(c.is_empty() or c.is_complete() for c in self._containers)

    def colors(self) -> Set[str]:
        result: Set[str] = set()
        for c in self._containers:
            result.update(c.layers)
        return result

    def color_counts(self) -> Dict[str, int]:
        counts: Counter = Counter()
        for c in self._containers:
            counts.update(c.layers)
        return dict(counts)

    def total_units(self) -> int:
        return sum(len(c) for c in self._containers)

    def empty_count(self) -> int:
        return sum(1 for c in self._containers if c.is_empty())

    def incomplete_count(self) -> int:
        """Непустые и незавершённые пробирки."""
        return sum(1 for c in self._containers if not c.is_empty() and not c.is_complete())

    # === Сравнение ===

    def __eq__(self, other) -> bool:
        if not isinstance(other, PuzzleState):
            return NotImplemented
        return self._key == other._key

    def __hash__(self):
        return hash(self._key)

    def __repr__(self) -> str:
        return f"PuzzleState({self._key!r}, moves={len(self._path)})"
