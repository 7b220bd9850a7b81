"""
Decimal — конвертация через промежуточную величину произвольной точности

Целая часть вычисляется как величина по схеме Горнера и раскладывается
по основанию цели повторным делением. Дробная часть — числитель над
source_radix ** n, повторно умножаемый на target_radix; цифры усекаются.

Скорость полностью определяется backend'ом арифметики.
"""

from typing import Sequence

from src.conversion.strategies.base import ConversionStrategy, trim_trailing_zeros
from src.core.digits import DigitSystem
from src.core.math.backend import ArithmeticBackend
from src.core.math.radix import fraction_digit_budget


class DecimalStrategy(ConversionStrategy):
    """Конвертация через backend арифметики произвольной точности."""

    name = "decimal"

    def __init__(self, source: DigitSystem, target: DigitSystem, backend: ArithmeticBackend):
        super().__init__(source, target)
        self.backend = backend

    def convert_integer(self, values: Sequence[int]) -> list[int]:
        return self.backend.convert_integer(
            self.validate_values(values), self.source.radix, self.target.radix
        )

    def convert_fraction(self, values: Sequence[int], digit_budget: int | None = None) -> list[int]:
        """
        Args:
            values: Значения цифр после разделителя
            digit_budget: Максимум цифр результата; None — по точности источника
        """
        values = self.validate_values(values)

        if digit_budget is None:
            digit_budget = fraction_digit_budget(
                len(values), self.source.radix, self.target.radix, 0
            )

        result = self.backend.convert_fraction(
            values, self.source.radix, self.target.radix, digit_budget
        )
        return trim_trailing_zeros(result)
