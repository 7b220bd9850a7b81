"""
Digit systems: алфавиты цифр, разбиение строк и таблицы замены блоков.
"""

from src.core.digits.alphabets import (
    ALPHANUMERIC_DIGITS,
    BASE64_DIGITS,
    MAX_BYTE_RADIX,
    MULTI_CHARACTER_PREFIX,
    canonical_digits,
)
from src.core.digits.conversion_table import ConversionTable, build_conversion_table
from src.core.digits.digit_system import DigitSource, DigitSystem, as_digit_system

__all__ = [
    # Alphabets
    "ALPHANUMERIC_DIGITS",
    "BASE64_DIGITS",
    "MAX_BYTE_RADIX",
    "MULTI_CHARACTER_PREFIX",
    "canonical_digits",
    # Conversion table
    "ConversionTable",
    "build_conversion_table",
    # Digit system
    "DigitSource",
    "DigitSystem",
    "as_digit_system",
]
