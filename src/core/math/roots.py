"""
Integer Roots — извлечение целых корней бисекцией

Модуль обеспечивает точное извлечение корней из целых произвольной точности:
- square_root: floor(sqrt(value))
- nth_root: floor-корень степени root с точным остатком (RootResult)
- square: value * value

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никакой float-арифметики: только int-умножение и int ** int
2. square_root(v) ** 2 <= v < (square_root(v) + 1) ** 2
3. nth_root: root ** k + remainder == value, remainder >= 0
4. Невалидные аргументы (root < 1, value < 0) → InvalidArgumentError

Две бисекции намеренно НЕ унифицированы: у square_root цикл идёт пока
high > low + 1, у nth_root — до ширины интервала ровно 1, и выход по
точному совпадению у них разный.
"""

import logging

from src.core.domain.root_result import RootResult
from src.core.math.integer_guards import validate_integer, validate_min_int, validate_non_negative_int

logger = logging.getLogger(__name__)


# =============================================================================
# SQUARE
# =============================================================================


def square(value: int) -> int:
    """Квадрат целого: value * value."""
    validate_integer(value)

    return value * value


# =============================================================================
# SQUARE ROOT
# =============================================================================


def square_root(value: int) -> int:
    """
    Целый квадратный корень: floor(sqrt(value)).

    Алгоритм: бисекция по [0, value]. На каждом шаге берётся середина n,
    p = n * n; при p > value сдвигается high, при p < value — low, при
    p == value поиск завершается сразу. Цикл идёт пока high > low + 1.
    Результат — n, если последняя проба совпала точно, иначе low.

    Args:
        value: Неотрицательное целое

    Returns:
        Наибольшее r, для которого r * r <= value

    Raises:
        InvalidArgumentError: Если value < 0

    Examples:
        >>> square_root(10)
        3
        >>> square_root(9)
        3
        >>> square_root(0)
        0
    """
    validate_non_negative_int(value, "value")

    # Бисекция по [0, 1] не делает ни одной пробы
    if value < 2:
        return value

    n = 0
    p = 0
    low = 0
    high = value

    while high > low + 1:
        n = (high + low) >> 1
        p = n * n
        if value < p:
            high = n
        elif value > p:
            low = n
        else:
            break

    return n if value == p else low


# =============================================================================
# NTH ROOT
# =============================================================================


def nth_root(value: int, root: int) -> RootResult:
    """
    Целый корень степени root с остатком.

    Возвращает единственное r >= 0, для которого
    r ** root <= value < (r + 1) ** root, и remainder = value - r ** root.

    Алгоритм: бисекция по [0, value]. tstsq = nval ** root вычисляется
    точно; при tstsq > value сдвигается верхняя граница, при
    tstsq < value — нижняя, при равенстве нижняя граница фиксируется и
    поиск завершается. Иначе цикл завершается, когда ширина интервала
    становится равной 1. Остаток вычисляется один раз после цикла, поэтому
    на ветке точного совпадения он равен нулю.

    Стоимость: верхняя граница поиска равна value, поэтому первые пробы
    возводят в степень root числа порядка value // 2; размер tstsq
    достигает ~root * bit_length(value) бит. При большом root и большом
    value это доминирует во времени и памяти.

    Args:
        value: Неотрицательное целое
        root: Степень корня (>= 1)

    Returns:
        RootResult(root=r, remainder=value - r ** root, power=root)

    Raises:
        InvalidArgumentError: Если root < 1 или value < 0

    Examples:
        >>> nth_root(1000, 3).as_tuple()
        (10, 0)
        >>> nth_root(999, 3).as_tuple()
        (9, 270)
    """
    validate_min_int(root, "root", 1)
    validate_non_negative_int(value, "value")

    # Fast paths
    if value == 1:
        return RootResult(root=1, remainder=0, power=root)
    if value == 0:
        return RootResult(root=0, remainder=0, power=root)
    if root == 1:
        return RootResult(root=value, remainder=0, power=root)

    upperbound = value
    lowerbound = 0
    iterations = 0

    while True:
        iterations += 1
        nval = (upperbound + lowerbound) >> 1
        tstsq = nval**root

        if tstsq > value:
            upperbound = nval
        elif tstsq < value:
            lowerbound = nval
        else:
            lowerbound = nval
            break

        if upperbound - lowerbound == 1:
            break

    logger.debug(
        "nth_root: power=%d, bits=%d, iterations=%d",
        root,
        value.bit_length(),
        iterations,
    )

    remainder = value - lowerbound**root
    return RootResult(root=lowerbound, remainder=remainder, power=root)
