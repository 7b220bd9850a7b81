"""
Chunked Decimal Backend — арифметика произвольной точности с нуля

Величина — каноническая десятичная строка без ведущих нулей ("0" для нуля).
Для операций строка режется на блоки по CHUNK_DIGITS десятичных цифр
(младший блок первым), чтобы каждая промежуточная операция оставалась в
пределах нативного машинного слова:

- блок < 10^9, произведение двух блоков < 10^18 < 2^63

Операции:
- add: поблочное сложение с переносом от младшего блока
- subtract: поблочное вычитание с заёмом (a >= b)
- multiply: школьное умножение блок × блок с переносом, O(n·m)
- power: возведение в степень повторным возведением в квадрат
- compare: сравнение модулей по длине, затем лексикографически
- divide_with_remainder: короткое деление для делителя <= CHUNK_BASE,
  иначе длинное деление по десятичным цифрам

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все величины неотрицательны и канонизированы
2. Ни одна промежуточная операция не выходит за 2^63
"""

from typing import Final

from src.core.math.backend import ArithmeticBackend
from src.core.math.radix import validate_non_negative_int

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Десятичных цифр в одном блоке
CHUNK_DIGITS: Final[int] = 9

# Основание блока
CHUNK_BASE: Final[int] = 10 ** CHUNK_DIGITS

ZERO: Final[str] = "0"
ONE: Final[str] = "1"


# =============================================================================
# БЛОКИ
# =============================================================================


def split_chunks(value: str, size: int = CHUNK_DIGITS) -> list[int]:
    """
    Разбиение десятичной строки на блоки справа налево.

    Returns:
        Блоки, младший первым

    Examples:
        >>> split_chunks("12345678901", 9)
        [345678901, 12]
    """
    return [int(value[max(0, end - size):end]) for end in range(len(value), 0, -size)]


def join_chunks(chunks: list[int], size: int = CHUNK_DIGITS) -> str:
    """
    Сборка десятичной строки из блоков (младший первым).

    Examples:
        >>> join_chunks([345678901, 12], 9)
        '12345678901'
    """
    while len(chunks) > 1 and chunks[-1] == 0:
        chunks.pop()

    if not chunks:
        return ZERO

    head = str(chunks[-1])
    tail = "".join(f"{chunk:0{size}d}" for chunk in reversed(chunks[:-1]))
    return head + tail


def canonical(value: str) -> str:
    """Удаление ведущих нулей; пустая строка — ноль."""
    return value.lstrip("0") or ZERO


# =============================================================================
# BACKEND
# =============================================================================


class ChunkedDecimalBackend(ArithmeticBackend):
    """Backend на десятичных блоках, реализованный без внешних библиотек."""

    name = "chunked"

    def from_int(self, number: int) -> str:
        validate_non_negative_int(number, "number")
        # str(int) ограничен по длине в новых интерпретаторах, поэтому
        # большие значения собираются из блоков
        chunks = []
        while number >= CHUNK_BASE:
            number, chunk = divmod(number, CHUNK_BASE)
            chunks.append(chunk)
        chunks.append(number)
        return join_chunks(chunks)

    def to_int(self, value: str) -> int:
        result = 0
        for chunk in reversed(split_chunks(value)):
            result = result * CHUNK_BASE + chunk
        return result

    def add(self, a: str, b: str) -> str:
        if a == ZERO:
            return b
        if b == ZERO:
            return a

        left = split_chunks(a)
        right = split_chunks(b)
        result = []
        carry = 0

        for index in range(max(len(left), len(right))):
            chunk = carry
            chunk += left[index] if index < len(left) else 0
            chunk += right[index] if index < len(right) else 0
            carry, chunk = divmod(chunk, CHUNK_BASE)
            result.append(chunk)

        if carry:
            result.append(carry)

        return join_chunks(result)

    def subtract(self, a: str, b: str) -> str:
        """
        a - b для a >= b.

        Raises:
            ValueError: Если a < b
        """
        if b == ZERO:
            return a
        if self.compare(a, b) < 0:
            raise ValueError(f"Cannot subtract larger magnitude {b} from {a}")

        left = split_chunks(a)
        right = split_chunks(b)
        result = []
        borrow = 0

        for index, chunk in enumerate(left):
            chunk -= borrow + (right[index] if index < len(right) else 0)
            borrow = 1 if chunk < 0 else 0
            result.append(chunk + CHUNK_BASE if borrow else chunk)

        return join_chunks(result)

    def multiply(self, a: str, b: str) -> str:
        if a == ZERO or b == ZERO:
            return ZERO
        if a == ONE:
            return b
        if b == ONE:
            return a

        left = split_chunks(a)
        right = split_chunks(b)
        result = [0] * (len(left) + len(right))

        for i, x in enumerate(left):
            if x == 0:
                continue

            carry = 0
            for j, y in enumerate(right):
                carry, result[i + j] = divmod(result[i + j] + x * y + carry, CHUNK_BASE)

            position = i + len(right)
            while carry:
                carry, result[position] = divmod(result[position] + carry, CHUNK_BASE)
                position += 1

        return join_chunks(result)

    def power(self, a: str, exponent: int) -> str:
        validate_non_negative_int(exponent, "exponent")

        if exponent == 0 or a == ONE:
            return ONE
        if exponent == 1:
            return a

        # a ** (2 ** k) для всех 2 ** k <= exponent
        squares = [a]
        while exponent >= 1 << len(squares):
            squares.append(self.multiply(squares[-1], squares[-1]))

        result = ONE
        for bit, square in enumerate(squares):
            if exponent & (1 << bit):
                result = self.multiply(result, square)

        return result

    def compare(self, a: str, b: str) -> int:
        if len(a) != len(b):
            return 1 if len(a) > len(b) else -1
        return (a > b) - (a < b)

    def is_zero(self, value: str) -> bool:
        return value == ZERO

    def divide_with_remainder(self, a: str, b: str) -> tuple[str, str]:
        if b == ZERO:
            raise ZeroDivisionError("division by zero magnitude")

        if self.compare(a, b) < 0:
            return ZERO, a

        if len(b) <= CHUNK_DIGITS + 1 and int(b) <= CHUNK_BASE:
            return self._short_divide(a, int(b))

        return self._long_divide(a, b)

    def _short_divide(self, a: str, divisor: int) -> tuple[str, str]:
        """Деление на делитель не больше CHUNK_BASE (остаток помещается в блок)."""
        quotient = []
        remainder = 0

        for chunk in reversed(split_chunks(a)):
            digit, remainder = divmod(remainder * CHUNK_BASE + chunk, divisor)
            quotient.append(digit)

        return join_chunks(quotient[::-1]), str(remainder)

    def _long_divide(self, a: str, b: str) -> tuple[str, str]:
        """Длинное деление по десятичным цифрам делимого."""
        quotient = []
        remainder = ZERO

        for digit in a:
            remainder = canonical(remainder + digit)
            count = 0

            while self.compare(remainder, b) >= 0:
                remainder = self.subtract(remainder, b)
                count += 1

            quotient.append(str(count))

        return canonical("".join(quotient)), remainder
