"""
Native Integer Backend — делегирование арифметике int интерпретатора

int в Python имеет произвольную точность и реализован на C, поэтому этот
backend самый быстрый из доступных и стоит первым в приоритете реестра.
"""

from src.core.math.backend import ArithmeticBackend
from src.core.math.radix import validate_non_negative_int


class NativeIntegerBackend(ArithmeticBackend):
    """Backend на встроенном int."""

    name = "native"

    def from_int(self, number: int) -> int:
        validate_non_negative_int(number, "number")
        return number

    def to_int(self, value: int) -> int:
        return value

    def add(self, a: int, b: int) -> int:
        return a + b

    def multiply(self, a: int, b: int) -> int:
        return a * b

    def power(self, a: int, exponent: int) -> int:
        validate_non_negative_int(exponent, "exponent")
        return a ** exponent

    def compare(self, a: int, b: int) -> int:
        return (a > b) - (a < b)

    def divide_with_remainder(self, a: int, b: int) -> tuple[int, int]:
        return divmod(a, b)

    def is_zero(self, value: int) -> bool:
        return value == 0
