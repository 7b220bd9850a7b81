"""Identity: перенос значений цифр между системами с одинаковым radix."""

from typing import Sequence

from src.conversion.strategies.base import (
    ConversionStrategy,
    trim_leading_zeros,
    trim_trailing_zeros,
)
from src.core.errors import UnsupportedOperation


class IdentityStrategy(ConversionStrategy):
    """
    Значения цифр не меняются, меняются только символы (при рендеринге).

    Результат нормализуется: ведущие нули целой части и хвостовые нули
    дробной удаляются.
    """

    name = "identity"

    def __init__(self, source, target):
        super().__init__(source, target)
        if source.radix != target.radix:
            raise UnsupportedOperation(
                f"Identity conversion requires equal radices, got {source.radix} and {target.radix}"
            )

    def convert_integer(self, values: Sequence[int]) -> list[int]:
        return trim_leading_zeros(self.validate_values(values))

    def convert_fraction(self, values: Sequence[int], digit_budget: int | None = None) -> list[int]:
        return trim_trailing_zeros(self.validate_values(values))
