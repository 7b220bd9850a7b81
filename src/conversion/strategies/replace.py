"""
Replace — конвертация заменой блоков цифр через общий корень оснований

Применима, если у оснований есть общий корень r (оба основания — целые
степени r). Если меньшее основание и есть r, конвертация выполняется за
один проход по таблице замены. Иначе число проходит через промежуточную
систему с основанием r: source → r → target, двумя дочерними стратегиями.

Целая часть дополняется нулями слева до кратного размеру блока,
дробная — справа. Результат очищается от ведущих (целая) или хвостовых
(дробная) нулей, но никогда не становится пустым.

Таблица и дочерние стратегии строятся лениво при первом использовании
под блокировкой и кэшируются на время жизни стратегии.
"""

import threading
from typing import Sequence

from src.conversion.strategies.base import (
    ConversionStrategy,
    trim_leading_zeros,
    trim_trailing_zeros,
)
from src.core.digits import ConversionTable, DigitSystem
from src.core.errors import UnavailableConversion


class ReplaceStrategy(ConversionStrategy):
    """Конвертация заменой блоков (без арифметики)."""

    name = "replace"

    def __init__(self, source: DigitSystem, target: DigitSystem):
        super().__init__(source, target)
        self.root = source.find_common_radix_root(target)

        self._lock = threading.Lock()
        self._table: ConversionTable | None = None
        self._children: tuple["ReplaceStrategy", "ReplaceStrategy"] | None = None

    @property
    def is_direct(self) -> bool:
        """True, если меньшее основание совпадает с общим корнем (один проход)."""
        return self.root == min(self.source.radix, self.target.radix)

    @property
    def table(self) -> ConversionTable:
        if self._table is None:
            with self._lock:
                if self._table is None:
                    self._table = self.source.create_conversion_table(self.target)
        return self._table

    @property
    def children(self) -> tuple["ReplaceStrategy", "ReplaceStrategy"]:
        """Дочерние стратегии source → root и root → target."""
        if self._children is None:
            with self._lock:
                if self._children is None:
                    root = DigitSystem(self.root)
                    self._children = (
                        ReplaceStrategy(self.source, root),
                        ReplaceStrategy(root, self.target),
                    )
        return self._children

    def convert_integer(self, values: Sequence[int]) -> list[int]:
        return self._convert(values, fraction=False)

    def convert_fraction(self, values: Sequence[int], digit_budget: int | None = None) -> list[int]:
        # Замена точна, бюджет цифр не применяется
        return self._convert(values, fraction=True)

    def _convert(self, values: Sequence[int], fraction: bool) -> list[int]:
        if self.root is None:
            raise UnavailableConversion(
                f"No common radix root between {self.source.radix} and {self.target.radix}"
            )

        values = self.validate_values(values)
        if not values:
            return [0]

        if self.is_direct:
            return self.replace(values, fraction)

        first, second = self.children
        return second.replace(first.replace(values, fraction), fraction)

    def replace(self, values: list[int], fraction: bool) -> list[int]:
        """
        Один проход замены по таблице.

        Args:
            values: Значения цифр источника (старшая первой)
            fraction: True для дробной части (дополнение справа)

        Returns:
            Нормализованные значения цифр цели
        """
        table = self.table
        size = table.source_size
        zeros = [0] * (-len(values) % size)
        padded = values + zeros if fraction else zeros + values

        result: list[int] = []
        for position in range(0, len(padded), size):
            result.extend(table.lookup(tuple(padded[position:position + size])))

        return trim_trailing_zeros(result) if fraction else trim_leading_zeros(result)
