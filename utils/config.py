"""
utils/config.py

Настройки решателя: лимиты, выбор стратегии, эвристики.
Можно загрузить из JSON-файла.
"""

import json
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Optional

from .logging import get_logger


STRATEGIES = ('auto', 'bfs', 'astar')


@dataclass
class SolverConfig:
    """
    Параметры поиска.

    Attributes:
        state_limit: потолок обработанных состояний (общий для BFS и A*)
        progress_interval: как часто (в состояниях) обновлять статус прогресса
        strategy: 'auto' (по классификатору), 'bfs' или 'astar'
        time_limit: переопределение бюджета времени уровня сложности (сек)
        advanced_heuristics: комбинированная эвристика вместо простой
        optimize_solution: убирать пары взаимно обратных ходов
        bfs_max_containers: BFS выбирается при числе пробирок не больше этого
        bfs_max_colors: ... и числе цветов не больше этого
    """
    state_limit: int = 1_000_000
    progress_interval: int = 1000
    strategy: str = 'auto'
    time_limit: Optional[float] = None
    advanced_heuristics: bool = True
    optimize_solution: bool = True
    bfs_max_containers: int = 8
    bfs_max_colors: int = 6

    def __post_init__(self):
        self._check_types()
        if self.strategy not in STRATEGIES:
            raise ValueError(
                f"Unknown strategy: {self.strategy}. Available: {', '.join(STRATEGIES)}"
            )
        if self.state_limit < 1:
            raise ValueError("state_limit должен быть положительным")
        if self.progress_interval < 1:
            raise ValueError("progress_interval должен быть положительным")
        if self.time_limit is not None and self.time_limit < 0:
            raise ValueError("time_limit не может быть отрицательным")

    def _check_types(self):
        """Неверный тип поля (например, строка из JSON вместо числа) — ValueError."""
        for name in ('state_limit', 'progress_interval', 'bfs_max_containers', 'bfs_max_colors'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} должен быть целым числом, получено {value!r}")

        for name in ('advanced_heuristics', 'optimize_solution'):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(f"{name} должен быть true/false, получено {value!r}")

        if not isinstance(self.strategy, str):
            raise ValueError(f"strategy должна быть строкой, получено {self.strategy!r}")

        limit = self.time_limit
        if limit is not None and (isinstance(limit, bool) or not isinstance(limit, (int, float))):
            raise ValueError(f"time_limit должен быть числом, получено {limit!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SolverConfig':
        """Создаёт конфигурацию из словаря; неизвестные ключи — ошибка."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Неизвестные параметры конфигурации: {', '.join(sorted(unknown))}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def replace(self, **overrides: Any) -> 'SolverConfig':
        """Копия с изменёнными полями (None-значения игнорируются)."""
        data = self.to_dict()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return SolverConfig.from_dict(data)


def load_config(path: str) -> SolverConfig:
    """
    Загружает SolverConfig из JSON-файла.

    Args:
        path: путь к файлу

    Returns:
        SolverConfig

    Raises:
        ValueError: если файл не JSON-объект или содержит неизвестные ключи
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Конфигурация должна быть JSON-объектом: {path}")

    config = SolverConfig.from_dict(data)
    get_logger().debug(f"Config loaded from {path}: {config}")
    return config
