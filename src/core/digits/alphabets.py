"""
Canonical Alphabets — алфавиты по умолчанию для целочисленных оснований

Когда система счисления задаётся только числом radix, символы цифр
генерируются по правилу:

    radix <= 62       : 0-9A-Za-z (префикс нужной длины)
    radix == 64       : стандартный base64 алфавит A-Za-z0-9+/
    radix 63, 65..256 : сырые байтовые значения chr(0) .. chr(radix - 1)
    radix > 256       : "#" + десятичное значение, дополненное нулями
                        до ширины числа цифр (radix - 1)
"""

import string
from typing import Final

from src.core.math.radix import validate_radix

# =============================================================================
# АЛФАВИТЫ
# =============================================================================

ALPHANUMERIC_DIGITS: Final[str] = string.digits + string.ascii_uppercase + string.ascii_lowercase

BASE64_DIGITS: Final[str] = string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/"

# Наибольший radix с однобайтовыми символами
MAX_BYTE_RADIX: Final[int] = 256

# Префикс многосимвольных цифр для radix > 256
MULTI_CHARACTER_PREFIX: Final[str] = "#"


def canonical_digits(radix: int) -> tuple[str, ...]:
    """
    Канонический алфавит для основания radix.

    Args:
        radix: Основание (>= 2)

    Returns:
        Кортеж символов длины radix, индекс = значение цифры

    Examples:
        >>> canonical_digits(16)[10]
        'A'
        >>> canonical_digits(64)[62]
        '+'
        >>> canonical_digits(512)[32]
        '#032'
    """
    validate_radix(radix)

    if radix <= len(ALPHANUMERIC_DIGITS):
        return tuple(ALPHANUMERIC_DIGITS[:radix])

    if radix == len(BASE64_DIGITS):
        return tuple(BASE64_DIGITS)

    if radix <= MAX_BYTE_RADIX:
        return tuple(chr(value) for value in range(radix))

    width = len(str(radix - 1))
    return tuple(f"{MULTI_CHARACTER_PREFIX}{value:0{width}d}" for value in range(radix))
