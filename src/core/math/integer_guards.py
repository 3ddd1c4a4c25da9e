"""
Integer Guards — валидация аргументов целочисленных примитивов

Модуль задаёт единые правила проверки аргументов для всех операций над
целыми произвольной точности:
- Проверка типа (int, но не bool)
- Проверка нижней границы с указанием имени параметра
- Типы исключений для невалидных аргументов и пустых последовательностей

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Невалидный аргумент никогда не clamp-ится молча (всегда исключение)
2. Сообщение об ошибке всегда содержит имя параметра
3. Ошибки аргументов являются подклассами ValueError
"""

from typing import Final


# Имя параметра по умолчанию для сообщений об ошибках
DEFAULT_PARAM_NAME: Final[str] = "value"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgumentError(ValueError):
    """
    Невалидный аргумент целочисленной операции.

    Это ошибка программиста, а не recoverable-состояние: вызывающий код
    должен исправить аргумент, а не перехватывать исключение.

    Attributes:
        param_name: Имя невалидного параметра
        reason: Почему значение отклонено
    """

    def __init__(self, param_name: str, reason: str):
        self.param_name = param_name
        self.reason = reason
        super().__init__(f"{param_name} {reason}")


class EmptySequenceError(ValueError):
    """
    Свёртка (reduce) пустой последовательности.

    Для GCD/LCM над пустым множеством нет универсального нейтрального
    элемента, поэтому пустой вход — ошибка, а не значение по умолчанию.
    """

    pass


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_integer(value: int, name: str = DEFAULT_PARAM_NAME) -> None:
    """
    Валидация, что значение является целым числом.

    bool формально является подклассом int, но как аргумент арифметики
    почти всегда означает ошибку вызова, поэтому отклоняется.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не int или является bool
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")


def validate_min_int(value: int, name: str, min_value: int) -> None:
    """
    Валидация, что целое значение не меньше заданной границы.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (включительно)

    Raises:
        TypeError: Если value не int
        InvalidArgumentError: Если value < min_value
    """
    validate_integer(value, name)

    if value < min_value:
        raise InvalidArgumentError(
            name, f"must be greater than or equal to {min_value}, got {value}"
        )


def validate_non_negative_int(value: int, name: str = DEFAULT_PARAM_NAME) -> None:
    """
    Валидация, что целое значение неотрицательное.

    Raises:
        TypeError: Если value не int
        InvalidArgumentError: Если value < 0
    """
    validate_integer(value, name)

    if value < 0:
        raise InvalidArgumentError(name, f"must be a non-negative integer, got {value}")
