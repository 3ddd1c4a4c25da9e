"""
GCD / LCM — редукция целых произвольной точности

Модуль предоставляет:
- gcd/lcm для пары целых (по абсолютным значениям)
- gcd_of/lcm_of для последовательностей (свёртка слева направо)
- is_coprime (взаимная простота)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат gcd/lcm всегда неотрицательный
2. gcd(0, 0) == 0, lcm(x, 0) == 0 (деления на ноль не происходит)
3. Свёртка пустой последовательности → EmptySequenceError
"""

from functools import reduce
from typing import Iterable

from src.core.math.integer_guards import EmptySequenceError, validate_integer


# =============================================================================
# ПАРНЫЕ ОПЕРАЦИИ
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель абсолютных значений a и b.

    Классический алгоритм Евклида: большее (по модулю) значение заменяется
    остатком от деления на меньшее, пока одно из них не станет нулём.
    Результат — максимум из двух оставшихся значений, что корректно
    обрабатывает случай, когда один из аргументов изначально равен нулю.

    Args:
        a: Первое целое (любого знака)
        b: Второе целое (любого знака)

    Returns:
        gcd(|a|, |b|) >= 0

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(-12, 18)
        6
        >>> gcd(7, 0)
        7
        >>> gcd(0, 0)
        0
    """
    validate_integer(a, "a")
    validate_integer(b, "b")

    abs_a = abs(a)
    abs_b = abs(b)

    while abs_a != 0 and abs_b != 0:
        if abs_a > abs_b:
            abs_a %= abs_b
        else:
            abs_b %= abs_a

    return max(abs_a, abs_b)


def lcm(a: int, b: int) -> int:
    """
    Наименьшее общее кратное абсолютных значений a и b.

    lcm(a, b) = |a| * |b| / gcd(a, b). Если gcd == 0 (оба аргумента нули),
    результат 0 без деления.

    Examples:
        >>> lcm(4, 6)
        12
        >>> lcm(-4, 6)
        12
        >>> lcm(5, 0)
        0
    """
    validate_integer(a, "a")
    validate_integer(b, "b")

    abs_a = abs(a)
    abs_b = abs(b)

    divisor = gcd(abs_a, abs_b)
    if divisor == 0:
        return 0

    return abs_a * abs_b // divisor


def is_coprime(a: int, b: int) -> bool:
    """
    Проверка взаимной простоты: gcd(a, b) == 1.

    Examples:
        >>> is_coprime(8, 15)
        True
        >>> is_coprime(8, 12)
        False
    """
    return gcd(a, b) == 1


# =============================================================================
# СВЁРТКА ПОСЛЕДОВАТЕЛЬНОСТЕЙ
# =============================================================================


def _reduce_non_empty(numbers: Iterable[int], op, name: str) -> int:
    iterator = iter(numbers)
    try:
        first = next(iterator)
    except StopIteration:
        raise EmptySequenceError(f"{name} of an empty sequence is undefined") from None

    validate_integer(first, "numbers[0]")
    return reduce(op, iterator, abs(first))


def gcd_of(numbers: Iterable[int]) -> int:
    """
    GCD последовательности: попарная свёртка слева направо.

    Args:
        numbers: Непустая последовательность (или итератор) целых

    Returns:
        gcd всех элементов (>= 0)

    Raises:
        EmptySequenceError: Если последовательность пустая

    Examples:
        >>> gcd_of([12, 18, 30])
        6
        >>> gcd_of([-5])
        5
    """
    return _reduce_non_empty(numbers, gcd, "gcd")


def lcm_of(numbers: Iterable[int]) -> int:
    """
    LCM последовательности: попарная свёртка слева направо.

    Raises:
        EmptySequenceError: Если последовательность пустая

    Examples:
        >>> lcm_of([2, 3, 4])
        12
    """
    return _reduce_non_empty(numbers, lcm, "lcm")
