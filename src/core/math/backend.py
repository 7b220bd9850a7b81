"""
Arithmetic Backend — интерфейс арифметики произвольной точности

Backend предоставляет примитивы над неотрицательными величинами произвольного
размера (add, multiply, power, compare, divide_with_remainder) и на их основе
реализует конвертацию последовательностей значений цифр между основаниями
через промежуточную величину (decimal conversion).

Представление величины непрозрачно и принадлежит backend'у. Величины
создаются и уничтожаются в пределах одного вызова, разделяемого
изменяемого состояния нет.

АЛГОРИТМ (целая часть):
    value = Horner(digits, source_radix)       # блоками по k цифр
    while value != 0:
        value, r = divmod(value, target_radix ** m)
        emit m цифр r

АЛГОРИТМ (дробная часть):
    numerator = Horner(digits), denominator = source_radix ** len(digits)
    repeat budget раз, пока numerator != 0:
        numerator *= target_radix
        digit, numerator = divmod(numerator, denominator)
    Последняя цифра усекается, а не округляется.
"""

from abc import ABC, abstractmethod
from typing import Any, Final, Sequence

from src.core.math.radix import validate_non_negative_int, validate_radix

# Верхняя граница блока, который вычисляется нативно до передачи в backend
NATIVE_BLOCK_LIMIT: Final[int] = 10 ** 9


def native_block_size(radix: int, limit: int = NATIVE_BLOCK_LIMIT) -> int:
    """
    Наибольшее k >= 1, такое что radix ** k <= limit.

    Examples:
        >>> native_block_size(10)
        9
        >>> native_block_size(16)
        7
    """
    size = 1
    while radix ** (size + 1) <= limit:
        size += 1
    return size


class ArithmeticBackend(ABC):
    """
    Базовый класс backend'ов арифметики произвольной точности.

    Подклассы реализуют примитивы; конвертация последовательностей цифр
    общая и построена только на примитивах.
    """

    # Имя в реестре backend'ов
    name: str = ""

    @classmethod
    def is_available(cls) -> bool:
        """Доступен ли backend в текущем окружении."""
        return True

    # =========================================================================
    # ПРИМИТИВЫ
    # =========================================================================

    @abstractmethod
    def from_int(self, number: int) -> Any:
        """Величина из неотрицательного нативного int."""

    @abstractmethod
    def to_int(self, value: Any) -> int:
        """Нативный int из величины (используется только для малых величин)."""

    @abstractmethod
    def add(self, a: Any, b: Any) -> Any:
        """a + b"""

    @abstractmethod
    def multiply(self, a: Any, b: Any) -> Any:
        """a * b"""

    @abstractmethod
    def power(self, a: Any, exponent: int) -> Any:
        """a ** exponent (exponent — нативный неотрицательный int)"""

    @abstractmethod
    def compare(self, a: Any, b: Any) -> int:
        """-1, 0 или +1 по модулю величин."""

    @abstractmethod
    def divide_with_remainder(self, a: Any, b: Any) -> tuple[Any, Any]:
        """
        (a // b, a % b)

        Raises:
            ZeroDivisionError: Если b равно нулю
        """

    def is_zero(self, value: Any) -> bool:
        return self.compare(value, self.from_int(0)) == 0

    # =========================================================================
    # КОНВЕРТАЦИЯ
    # =========================================================================

    def evaluate(self, values: Sequence[int], radix: int) -> Any:
        """
        Величина последовательности значений цифр (старшая цифра первой).

        Схема Горнера по блокам: k цифр сворачиваются нативно, затем
        value = value * radix ** k + block.
        """
        validate_radix(radix)

        block = native_block_size(radix)
        value = self.from_int(0)
        head = len(values) % block or block
        position = 0

        while position < len(values):
            size = head if position == 0 else block
            chunk = 0
            for digit in values[position:position + size]:
                chunk = chunk * radix + digit

            if self.is_zero(value):
                value = self.from_int(chunk)
            else:
                shifted = self.multiply(value, self.power(self.from_int(radix), size))
                value = self.add(shifted, self.from_int(chunk))

            position += size

        return value

    def convert_integer(
        self,
        values: Sequence[int],
        source_radix: int,
        target_radix: int,
    ) -> list[int]:
        """
        Конвертация целой части.

        Args:
            values: Значения цифр в source_radix (старшая первой)
            source_radix: Основание источника
            target_radix: Основание цели

        Returns:
            Значения цифр в target_radix без ведущих нулей, ноль — [0]
        """
        validate_radix(target_radix, "target_radix")

        value = self.evaluate(values, source_radix)
        if self.is_zero(value):
            return [0]

        block = native_block_size(target_radix)
        divisor = self.power(self.from_int(target_radix), block)
        result: list[int] = []

        while not self.is_zero(value):
            value, remainder = self.divide_with_remainder(value, divisor)
            chunk = self.to_int(remainder)

            for _ in range(block):
                chunk, digit = divmod(chunk, target_radix)
                result.append(digit)

        while len(result) > 1 and result[-1] == 0:
            result.pop()

        return result[::-1]

    def convert_fraction(
        self,
        values: Sequence[int],
        source_radix: int,
        target_radix: int,
        digit_budget: int,
    ) -> list[int]:
        """
        Конвертация дробной части.

        Генерация останавливается при точном нуле остатка или по исчерпании
        бюджета. Последняя цифра усекается, поэтому увеличение бюджета
        никогда не меняет уже выданные цифры.

        Args:
            values: Значения цифр после разделителя в source_radix
            source_radix: Основание источника
            target_radix: Основание цели
            digit_budget: Максимальное количество цифр результата

        Returns:
            Значения цифр в target_radix (старшая первой), минимум [0]
        """
        validate_radix(target_radix, "target_radix")
        validate_non_negative_int(digit_budget, "digit_budget")

        numerator = self.evaluate(values, source_radix)
        denominator = self.power(self.from_int(source_radix), len(values))
        multiplier = self.from_int(target_radix)
        result: list[int] = []

        while len(result) < digit_budget and not self.is_zero(numerator):
            numerator = self.multiply(numerator, multiplier)
            digit, numerator = self.divide_with_remainder(numerator, denominator)
            result.append(self.to_int(digit))

        return result or [0]
