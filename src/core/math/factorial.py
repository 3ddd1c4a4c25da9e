"""
Fast Factorial — факториал методом «разделяй и властвуй»

Вместо накопительного произведения 2 * 3 * ... * n (где один множитель
неограниченно растёт, а другой остаётся малым) диапазон [2, n] рекурсивно
делится пополам, и перемножаются результаты половин. Так большинство
умножений выполняется над малыми операндами одинакового размера, и лишь
несколько — над большими; для длинной арифметики это асимптотически быстрее.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 0! == 1! == 1
2. factorial(n) == n * factorial(n - 1) для n >= 1
3. Глубина рекурсии multiply_range ~ log2(stop - start)
"""

from src.core.math.integer_guards import InvalidArgumentError, validate_integer, validate_non_negative_int


def factorial(n: int) -> int:
    """
    Факториал n!.

    Args:
        n: Неотрицательное целое

    Returns:
        n!

    Raises:
        InvalidArgumentError: Если n < 0

    Examples:
        >>> factorial(0)
        1
        >>> factorial(5)
        120
        >>> factorial(10)
        3628800
    """
    validate_non_negative_int(n, "n")

    if n == 0 or n == 1:
        return 1

    return multiply_range(2, n)


def multiply_range(start: int, stop: int) -> int:
    """
    Произведение всех целых из замкнутого диапазона [start, stop].

    Диапазон делится в середине, результаты половин перемножаются.
    Базовые случаи: ширина 1 — произведение двух концов, ширина 0 —
    единственное значение.

    Args:
        start: Начало диапазона (включительно)
        stop: Конец диапазона (включительно), stop >= start

    Returns:
        start * (start + 1) * ... * stop

    Raises:
        InvalidArgumentError: Если stop < start

    Examples:
        >>> multiply_range(2, 5)
        120
        >>> multiply_range(7, 7)
        7
    """
    validate_integer(start, "start")
    validate_integer(stop, "stop")

    if stop < start:
        raise InvalidArgumentError("stop", f"must be >= start ({start}), got {stop}")

    return _multiply_range(start, stop)


def _multiply_range(start: int, stop: int) -> int:
    diff = stop - start
    if diff == 1:
        return start * stop
    if diff == 0:
        return start

    half = (start + stop) // 2
    return _multiply_range(start, half) * _multiply_range(half + 1, stop)
