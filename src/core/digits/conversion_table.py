"""
Conversion Table — таблица замены блоков цифр между степенными основаниями

Если одно основание является целой степенью другого (large = small ** size),
то каждой цифре большего основания однозначно соответствует блок из size
цифр меньшего основания. Таблица перечисляет все small ** size блоков,
поэтому её построение стоит O(small ** size): строить её можно только
для действительно степенных пар.
"""

import itertools
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from src.core.errors import InvalidDigit, UnsupportedOperation
from src.core.math.radix import exact_log, validate_radix


@dataclass(frozen=True)
class ConversionTable:
    """
    Двунаправленная таблица замены блоков значений цифр.

    Attributes:
        source_radix: Основание источника
        target_radix: Основание цели
        source_size: Длина блока источника (в цифрах)
        target_size: Длина блока цели (в цифрах)
        mapping: Блок источника → блок цели (значения, старшая цифра первой)
    """

    source_radix: int
    target_radix: int
    source_size: int
    target_size: int
    mapping: Mapping[tuple[int, ...], tuple[int, ...]]

    def lookup(self, chunk: tuple[int, ...]) -> tuple[int, ...]:
        """
        Замена одного блока.

        Raises:
            InvalidDigit: Если блок не является допустимым блоком источника
        """
        try:
            return self.mapping[chunk]
        except KeyError:
            raise InvalidDigit(
                f"Invalid digit chunk {chunk!r} for radix {self.source_radix}"
            ) from None

    def inverse(self) -> "ConversionTable":
        """Таблица обратного направления (target → source)."""
        return ConversionTable(
            source_radix=self.target_radix,
            target_radix=self.source_radix,
            source_size=self.target_size,
            target_size=self.source_size,
            mapping=MappingProxyType({v: k for k, v in self.mapping.items()}),
        )


def build_conversion_table(source_radix: int, target_radix: int) -> ConversionTable:
    """
    Построение таблицы замены между степенными основаниями.

    Args:
        source_radix: Основание источника
        target_radix: Основание цели

    Returns:
        ConversionTable для направления source → target

    Raises:
        UnsupportedOperation: Если ни одно основание не является целой степенью другого
    """
    validate_radix(source_radix, "source_radix")
    validate_radix(target_radix, "target_radix")

    small, large = sorted((source_radix, target_radix))
    size = exact_log(large, small)

    if size is None:
        raise UnsupportedOperation(
            f"Replacement requires one radix to be a power of the other, "
            f"got {source_radix} and {target_radix}"
        )

    # product() перечисляет блоки в лексикографическом порядке,
    # т.е. i-й блок есть запись числа i в основании small
    mapping = {
        chunk: (value,)
        for value, chunk in enumerate(itertools.product(range(small), repeat=size))
    }

    table = ConversionTable(
        source_radix=small,
        target_radix=large,
        source_size=size,
        target_size=1,
        mapping=MappingProxyType(mapping),
    )

    return table if source_radix == small else table.inverse()
