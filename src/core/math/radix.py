"""
Radix Math — точная целочисленная арифметика над основаниями систем счисления

Модуль обеспечивает точные (без float-погрешности) примитивы над radix:
- Целочисленный корень n-й степени
- Поиск общего корня двух оснований (common radix root)
- Точный целочисленный логарифм для степенных оснований
- Расчёт бюджета цифр дробной части по точности источника
- Валидация параметров

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все результаты точные: float используется только как начальная оценка
2. Каждая оценка проверяется и корректируется целочисленно
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Минимально допустимое основание системы счисления
MIN_RADIX: Final[int] = 2


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_radix(radix: int, name: str = "radix") -> None:
    """
    Валидация основания системы счисления.

    Args:
        radix: Проверяемое основание
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если radix не целое (bool отвергается) или radix < 2
    """
    if isinstance(radix, bool) or not isinstance(radix, int):
        raise ValueError(f"{name} must be an integer, got {radix!r}")

    if radix < MIN_RADIX:
        raise ValueError(f"{name} must be >= {MIN_RADIX}, got {radix}")


def validate_non_negative_int(value: int, name: str) -> None:
    """
    Валидация, что значение — неотрицательное целое.

    Raises:
        ValueError: Если value не int или value < 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


# =============================================================================
# КОРНИ И ЛОГАРИФМЫ
# =============================================================================


def integer_root(value: int, degree: int) -> int:
    """
    Целочисленный корень: наибольшее r, такое что r ** degree <= value.

    Целочисленный метод Ньютона от заведомо большей оценки 2 ** ceil(bits / degree):
    последовательность убывает и останавливается ровно на floor-корне,
    поэтому результат точен для значений любого размера.

    Args:
        value: Неотрицательное целое
        degree: Степень корня (>= 1)

    Returns:
        floor(value ** (1 / degree))

    Examples:
        >>> integer_root(64, 3)
        4
        >>> integer_root(63, 3)
        3
    """
    validate_non_negative_int(value, "value")
    if degree < 1:
        raise ValueError(f"degree must be >= 1, got {degree}")

    if value < 2 or degree == 1:
        return value

    root = 1 << -(-value.bit_length() // degree)

    while True:
        estimate = ((degree - 1) * root + value // root ** (degree - 1)) // degree
        if estimate >= root:
            return root
        root = estimate


def radix_roots(radix: int) -> list[int]:
    """
    Все целые r >= 2, для которых radix является точной степенью r.

    Сам radix всегда входит в список (r ** 1 == radix).

    Examples:
        >>> radix_roots(64)
        [64, 8, 4, 2]
        >>> radix_roots(10)
        [10]
    """
    validate_radix(radix)

    roots = [radix]
    degree = 2

    while (root := integer_root(radix, degree)) >= MIN_RADIX:
        if root ** degree == radix:
            roots.append(root)
        degree += 1

    return roots


def find_common_radix_root(radix_a: int, radix_b: int) -> int | None:
    """
    Наибольший общий корень двух оснований.

    Наибольшее r >= 2, такое что существуют i, j >= 1: r ** i == radix_a
    и r ** j == radix_b. Для равных оснований это само основание.

    Returns:
        Общий корень или None, если его нет

    Examples:
        >>> find_common_radix_root(4, 8)
        2
        >>> find_common_radix_root(4, 16)
        4
        >>> find_common_radix_root(5, 7) is None
        True
    """
    common = set(radix_roots(radix_a)) & set(radix_roots(radix_b))
    return max(common) if common else None


def exact_log(value: int, base: int) -> int | None:
    """
    Точный целочисленный логарифм.

    Returns:
        n, если base ** n == value, иначе None

    Examples:
        >>> exact_log(256, 4)
        4
        >>> exact_log(10, 3) is None
        True
    """
    validate_radix(base, "base")
    validate_non_negative_int(value, "value")

    power = 0
    current = 1

    while current < value:
        current *= base
        power += 1

    return power if current == value else None


# =============================================================================
# ТОЧНОСТЬ ДРОБНОЙ ЧАСТИ
# =============================================================================


def fraction_digit_budget(
    source_digits: int,
    source_radix: int,
    target_radix: int,
    precision: int,
) -> int:
    """
    Бюджет цифр целевой дробной части.

    Политика точности:
    - precision > 0: бюджет ровно precision
    - precision <= 0: минимальное b, при котором target_radix ** -b не грубее
      source_radix ** -source_digits, минус precision (т.е. плюс |precision|)

    Эквивалентно ceil(source_digits * log(source_radix) / log(target_radix)) - precision,
    но вычисляется точно в целых числах.

    Args:
        source_digits: Количество цифр дробной части источника
        source_radix: Основание источника
        target_radix: Основание цели
        precision: Запрошенная точность

    Returns:
        Бюджет цифр (>= 0)

    Examples:
        >>> fraction_digit_budget(2, 16, 10, 0)
        3
        >>> fraction_digit_budget(2, 16, 10, -2)
        5
        >>> fraction_digit_budget(2, 16, 10, 6)
        6
    """
    validate_non_negative_int(source_digits, "source_digits")
    validate_radix(source_radix, "source_radix")
    validate_radix(target_radix, "target_radix")

    if precision > 0:
        return precision

    resolution = source_radix ** source_digits

    # Float-оценка, скорректированная целочисленно
    budget = max(0, math.ceil(source_digits * math.log(source_radix) / math.log(target_radix)))

    while budget > 0 and target_radix ** (budget - 1) >= resolution:
        budget -= 1
    while target_radix ** budget < resolution:
        budget += 1

    return budget - precision
