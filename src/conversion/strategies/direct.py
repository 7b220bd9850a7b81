"""
Direct — конвертация длинным делением без промежуточной величины

Последовательность цифр источника делится на target_radix прямо в месте:
каждый проход слева направо ведёт остаток r = digit + r * source_radix и
выдаёт одну цифру цели (финальный остаток). Ведущие нули частного
удаляются на каждом проходе, поэтому рабочая последовательность не растёт.

Только целые части. Остаток достигает source_radix * target_radix - 1,
поэтому при ограниченном безопасном диапазоне нативных целых стратегия
отказывает с PossibleOverflow вместо искажённого результата.
"""

import sys
from dataclasses import dataclass
from typing import Sequence

from src.conversion.strategies.base import ConversionStrategy
from src.core.digits import DigitSystem
from src.core.errors import PossibleOverflow


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class DirectConfig:
    """Конфигурация Direct-стратегии.

    Attributes:
        safe_integer_limit: наибольшее безопасное значение остатка
            (по умолчанию размер машинного слова интерпретатора)
    """

    safe_integer_limit: int = sys.maxsize

    def __post_init__(self):
        if self.safe_integer_limit < 1:
            raise ValueError(
                f"safe_integer_limit must be positive, got {self.safe_integer_limit}"
            )


# =============================================================================
# STRATEGY
# =============================================================================


class DirectStrategy(ConversionStrategy):
    """Длинное деление по цифрам (только целые части)."""

    name = "direct"

    def __init__(
        self,
        source: DigitSystem,
        target: DigitSystem,
        config: DirectConfig | None = None,
    ):
        super().__init__(source, target)
        self.config = config or DirectConfig()

    @property
    def max_remainder(self) -> int:
        return self.source.radix * self.target.radix - 1

    def convert_integer(self, values: Sequence[int]) -> list[int]:
        """
        Raises:
            PossibleOverflow: Если остаток может превысить safe_integer_limit
        """
        if self.max_remainder > self.config.safe_integer_limit:
            raise PossibleOverflow(
                f"Remainder may reach {self.max_remainder} for radices "
                f"{self.source.radix} and {self.target.radix}, "
                f"exceeding safe limit {self.config.safe_integer_limit}"
            )

        source_radix = self.source.radix
        target_radix = self.target.radix
        number = self.validate_values(values)
        result = []

        while True:
            quotient = []
            remainder = 0

            for value in number:
                remainder = value + remainder * source_radix

                if remainder >= target_radix:
                    digit, remainder = divmod(remainder, target_radix)
                    quotient.append(digit)
                elif quotient:
                    quotient.append(0)

            result.append(remainder)
            number = quotient

            if not number:
                break

        return result[::-1]
