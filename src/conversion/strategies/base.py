"""
Conversion Strategy — базовый класс стратегий конвертации

Стратегия параметризуется упорядоченной парой (source, target) систем
счисления и преобразует последовательность значений цифр источника
(старшая цифра первой) в последовательность значений цифр цели.

Стратегия не хранит состояния между вызовами, кроме кэша производных
структур (таблица замены, дочерние стратегии), привязанного к паре систем.
"""

from typing import Sequence

from src.core.digits import DigitSystem
from src.core.errors import InvalidDigit, UnsupportedOperation


def trim_leading_zeros(values: list[int]) -> list[int]:
    """Удаление ведущих нулей целой части; ноль сворачивается в [0]."""
    start = 0
    while start < len(values) and values[start] == 0:
        start += 1
    return values[start:] or [0]


def trim_trailing_zeros(values: list[int]) -> list[int]:
    """Удаление хвостовых нулей дробной части; ноль сворачивается в [0]."""
    end = len(values)
    while end > 0 and values[end - 1] == 0:
        end -= 1
    return values[:end] or [0]


class ConversionStrategy:
    """
    Базовая стратегия: обе операции не поддерживаются.

    Подклассы переопределяют convert_integer и/или convert_fraction.
    """

    name: str = ""

    def __init__(self, source: DigitSystem, target: DigitSystem):
        self.source = source
        self.target = target

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.source.radix} -> {self.target.radix})"

    def convert_integer(self, values: Sequence[int]) -> list[int]:
        """
        Конвертация целой части.

        Raises:
            UnsupportedOperation: Если стратегия не поддерживает целые части
        """
        raise UnsupportedOperation(f"{self.name or type(self).__name__} does not support integer conversion")

    def convert_fraction(self, values: Sequence[int], digit_budget: int | None = None) -> list[int]:
        """
        Конвертация дробной части.

        Raises:
            UnsupportedOperation: Если стратегия не поддерживает дробные части
        """
        raise UnsupportedOperation(f"{self.name or type(self).__name__} does not support fraction conversion")

    def convert(
        self,
        values: Sequence[int],
        fraction: bool = False,
        digit_budget: int | None = None,
    ) -> list[int]:
        """Конвертация целой (fraction=False) или дробной части."""
        if fraction:
            return self.convert_fraction(values, digit_budget)
        return self.convert_integer(values)

    def validate_values(self, values: Sequence[int]) -> list[int]:
        """
        Проверка, что все значения — цифры источника.

        Raises:
            InvalidDigit: Если значение вне [0, source.radix)
        """
        radix = self.source.radix
        for value in values:
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < radix:
                raise InvalidDigit(f"Invalid digit value {value!r} for radix {radix}")
        return list(values)
