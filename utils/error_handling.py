"""
utils/error_handling.py

Иерархия исключений решателя и проверка головоломки перед решением.
"""


class SolverError(Exception):
    """Базовое исключение для решателей."""
    pass


class InvalidPuzzleError(SolverError):
    """Некорректная головоломка: пустой список пробирок, неверная ёмкость, переполнение, плохой цвет."""
    pass


class ContainerError(SolverError):
    """push в заполненную пробирку или pop из пустой."""
    pass


class IllegalMoveError(SolverError):
    """Переливание нарушает правила (can_pour_into == False). Состояние не меняется."""

    def __init__(self, source: int, target: int, reason: str = ""):
        self.source = source
        self.target = target
        self.reason = reason
        message = f"Недопустимый ход {source} → {target}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class InternalInconsistencyError(SolverError):
    """
    Нарушен внутренний инвариант поиска (например, сгенерированный ход
    оказался недопустимым). Попытка решения прерывается целиком.
    """
    pass


def validate_puzzle(containers) -> bool:
    """
    Валидирует набор пробирок перед решением.

    Args:
        containers: список Container

    Returns:
        True если головоломка валидна

    Raises:
        InvalidPuzzleError: если головоломка невалидна
    """
    from core.container import Container

    if containers is None:
        raise InvalidPuzzleError("Список пробирок не может быть None")

    containers = list(containers)
    if not containers:
        raise InvalidPuzzleError("Нужна хотя бы одна пробирка")

    for index, container in enumerate(containers):
        if not isinstance(container, Container):
            raise InvalidPuzzleError(
                f"Элемент {index} не является Container: {type(container).__name__}"
            )
        if container.id != index:
            raise InvalidPuzzleError(
                f"Идентификатор пробирки {container.id} не совпадает с позицией {index}"
            )
        container.validate()

    return True
