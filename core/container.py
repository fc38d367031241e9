"""
core/container.py

Пробирка: стек цветных слоёв фиксированной ёмкости.
Слои хранятся снизу вверх, последний элемент — верхний слой.
"""

from typing import Iterable, List, Optional, Set

from utils.error_handling import InvalidPuzzleError, ContainerError, IllegalMoveError

# Разделители канонического ключа состояния (см. core/state.py).
# Цвета не могут их содержать, иначе ключ перестанет быть однозначным.
LAYER_SEPARATOR = ','
CONTAINER_SEPARATOR = '|'


def check_color(color) -> str:
    """Проверяет, что цвет — непустая строка без разделителей ключа."""
    if not isinstance(color, str) or not color:
        raise InvalidPuzzleError(f"Цвет должен быть непустой строкой: {color!r}")
    if LAYER_SEPARATOR in color or CONTAINER_SEPARATOR in color:
        raise InvalidPuzzleError(
            f"Цвет {color!r} содержит зарезервированный символ "
            f"'{LAYER_SEPARATOR}' или '{CONTAINER_SEPARATOR}'"
        )
    return color


class Container:
    """Пробирка с жидкостью."""
    __slots__ = ('id', 'capacity', 'layers')

    def __init__(self, id: int, capacity: int = 4, layers: Optional[Iterable[str]] = None):
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity <= 0:
            raise InvalidPuzzleError(f"Ёмкость пробирки {id} должна быть положительным целым: {capacity!r}")

        self.id = id
        self.capacity = capacity
        self.layers: List[str] = [check_color(c) for c in (layers or ())]

        if len(self.layers) > capacity:
            raise InvalidPuzzleError(
                f"Пробирка {id} переполнена: {len(self.layers)} слоёв при ёмкости {capacity}"
            )

    def validate(self):
        """Повторная проверка инвариантов (слои могли поменять снаружи)."""
        if len(self.layers) > self.capacity:
            raise InvalidPuzzleError(
                f"Пробирка {self.id} переполнена: {len(self.layers)} слоёв при ёмкости {self.capacity}"
            )
        for color in self.layers:
            check_color(color)

    # === Состояние ===

    def __len__(self) -> int:
        return len(self.layers)

    def is_empty(self) -> bool:
        return not self.layers

    def is_full(self) -> bool:
        return len(self.layers) == self.capacity

    def is_uniform(self) -> bool:
        """Непустая и одноцветная (не обязательно полная)."""
        if not self.layers:
            return False
        first = self.layers[0]
        return all(color == first for color in self.layers)

    def is_complete(self) -> bool:
        """Полная и одноцветная. Пустая пробирка не считается завершённой."""
        return self.is_full() and self.is_uniform()

    def free_space(self) -> int:
        return self.capacity - len(self.layers)

    def top_color(self) -> Optional[str]:
        if not self.layers:
            return None
        return self.layers[-1]

    def bottom_color(self) -> Optional[str]:
        if not self.layers:
            return None
        return self.layers[0]

    def top_run_length(self) -> int:
        """Сколько верхних слоёв подряд совпадают с верхним цветом."""
        if not self.layers:
            return 0
        top = self.layers[-1]
        run = 0
        for color in reversed(self.layers):
            if color != top:
                break
            run += 1
        return run

    def top_colors(self, count: int) -> List[str]:
        """Не более count слоёв из верхней одноцветной серии."""
        return [self.layers[-1]] * min(count, self.top_run_length()) if self.layers else []

    def distinct_colors(self) -> Set[str]:
        return set(self.layers)

    # === Изменение ===

    def push(self, color: str):
        """Добавляет один слой сверху."""
        if self.is_full():
            raise ContainerError(f"Пробирка {self.id} заполнена")
        self.layers.append(check_color(color))

    def pop(self) -> str:
        """Снимает и возвращает верхний слой."""
        if not self.layers:
            raise ContainerError(f"Пробирка {self.id} пуста")
        return self.layers.pop()

    def can_pour_into(self, other: 'Container') -> bool:
        """
        Можно ли перелить из этой пробирки в other.

        Правила: источник не пуст, приёмник не полон, приёмник пуст
        или верхние цвета совпадают.
        """
        if other is self or not self.layers:
            return False
        if other.is_full():
            return False
        if other.is_empty():
            return True
        return self.layers[-1] == other.layers[-1]

    def pour_into(self, other: 'Container') -> int:
        """
        Переливает максимальную верхнюю одноцветную серию, которая помещается в other.

        Returns:
            Количество перелитых слоёв (k = min(серия, свободное место))

        Raises:
            IllegalMoveError: ход недопустим, обе пробирки не изменены
        """
        if not self.can_pour_into(other):
            raise IllegalMoveError(self.id, other.id, self._illegal_reason(other))

        amount = min(self.top_run_length(), other.free_space())
        for _ in range(amount):
            other.layers.append(self.layers.pop())
        return amount

    def _illegal_reason(self, other: 'Container') -> str:
        if other is self:
            return "источник и приёмник совпадают"
        if self.is_empty():
            return "источник пуст"
        if other.is_full():
            return "приёмник заполнен"
        return f"цвета не совпадают ({self.top_color()} ≠ {other.top_color()})"

    # === Служебное ===

    def clone(self) -> 'Container':
        """Глубокая копия (собственный список слоёв)."""
        new = Container.__new__(Container)
        new.id = self.id
        new.capacity = self.capacity
        new.layers = list(self.layers)
        return new

    def to_string(self) -> str:
        return LAYER_SEPARATOR.join(self.layers)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Container):
            return NotImplemented
        return (self.id == other.id and self.capacity == other.capacity
                and self.layers == other.layers)

    __hash__ = None  # изменяемый объект; ключ состояния хранит PuzzleState

    def __repr__(self) -> str:
        return f"Container(id={self.id}, capacity={self.capacity}, layers={self.layers!r})"
