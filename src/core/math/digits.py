"""
Digits — подсчёт десятичных цифр целых произвольной точности

- get_length: количество десятичных цифр |value|
- get_significant_digits: количество цифр без хвостовых нулей
- get_range: полуоткрытый диапазон [start, stop) без ограничения разрядности
"""

from typing import Iterator

from src.core.math.integer_guards import validate_integer


def get_length(value: int) -> int:
    """
    Количество десятичных цифр в |value|.

    Считается повторным делением на 10 до нуля, поэтому для 0 цикл не
    выполняется ни разу и результат 0.

    Examples:
        >>> get_length(0)
        0
        >>> get_length(100)
        3
        >>> get_length(-100)
        3
    """
    validate_integer(value)

    result = 0
    copy = abs(value)
    while copy > 0:
        copy //= 10
        result += 1

    return result


def get_significant_digits(value: int) -> int:
    """
    Количество значащих цифр: десятичная запись |value| без хвостовых нулей.

    Знак не участвует в подсчёте: считается модуль, поэтому -1200 и 1200
    дают одинаковый результат (2). Хвостовые нули снимаются делением на 10,
    а не через str(), которое для int длиннее 4300 цифр запрещено
    (sys.get_int_max_str_digits).

    Examples:
        >>> get_significant_digits(0)
        0
        >>> get_significant_digits(1200)
        2
        >>> get_significant_digits(-1200)
        2
        >>> get_significant_digits(1002)
        4
    """
    validate_integer(value)

    if value == 0:
        return 0

    magnitude = abs(value)
    while magnitude % 10 == 0:
        magnitude //= 10

    return get_length(magnitude)


def get_range(start: int, stop: int) -> Iterator[int]:
    """
    Ленивый полуоткрытый диапазон start, start + 1, ..., stop - 1.

    Пустой, если start >= stop.

    Examples:
        >>> list(get_range(3, 6))
        [3, 4, 5]
        >>> list(get_range(5, 5))
        []
    """
    validate_integer(start, "start")
    validate_integer(stop, "stop")

    return _count_up(start, stop)


def _count_up(start: int, stop: int) -> Iterator[int]:
    current = start
    while current < stop:
        yield current
        current += 1
