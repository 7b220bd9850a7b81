"""
DigitSystem — система счисления с произвольным алфавитом цифр

Система счисления определяется упорядоченным набором уникальных символов:
индекс символа = значение цифры, radix = количество символов.

Источники построения:
- int: основание, алфавит генерируется canonical_digits()
- str: каждый символ строки — отдельная цифра
- list/tuple: произвольные hashable символы (строки любой длины, числа, объекты)

Правило регистра:
- Строковые символы сопоставляются без учёта регистра, если никакие два
  символа не отличаются только регистром; иначе вся система чувствительна
  к регистру.

String conflict:
- True, если строковые представления символов разной длины или не уникальны
  (с учётом правила регистра). Тогда наивное разбиение плоской строки
  потенциально неоднозначно.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждое значение 0..radix-1 имеет ровно один символ и наоборот
2. Экземпляр неизменяем после построения
3. Сравнение символов — по равенству значений, не по строковой семантике
"""

from collections.abc import Hashable, Iterable, Sequence
from types import MappingProxyType
from typing import Any, Union

from src.core.digits.alphabets import canonical_digits
from src.core.digits.conversion_table import ConversionTable, build_conversion_table
from src.core.errors import InvalidDigit, InvalidNumberBase, UnsupportedTokenization
from src.core.math.radix import MIN_RADIX, find_common_radix_root

DigitSource = Union[int, str, Sequence[Hashable]]


class DigitSystem:
    """
    Неизменяемая система счисления.

    Attributes:
        digits: Кортеж символов, индекс = значение
        radix: Основание
        is_case_sensitive: Чувствительность к регистру (фиксируется при построении)
        has_string_conflict: Неоднозначность разбиения плоской строки
    """

    __slots__ = (
        "_digits",
        "_value_map",
        "_case_sensitive",
        "_string_map",
        "_string_lengths",
        "_string_conflict",
    )

    def __init__(self, source: DigitSource):
        """
        Args:
            source: radix (int), строка односимвольных цифр или последовательность символов

        Raises:
            InvalidNumberBase: Если источник некорректен
        """
        digits = self._digits_from_source(source)

        if len(digits) < MIN_RADIX:
            raise InvalidNumberBase(
                f"Number base must have at least {MIN_RADIX} digits, got {len(digits)}"
            )

        try:
            value_map = {digit: value for value, digit in enumerate(digits)}
        except TypeError as e:
            raise InvalidNumberBase(f"Digits must be hashable: {e}") from None

        if len(value_map) != len(digits):
            raise InvalidNumberBase("Number base must not contain duplicate digits")

        folded = {self._fold(digit): value for digit, value in value_map.items()}
        self._case_sensitive = len(folded) != len(value_map)

        self._digits = digits
        self._value_map = MappingProxyType(value_map if self._case_sensitive else folded)
        self._init_string_map()

    @staticmethod
    def _digits_from_source(source: DigitSource) -> tuple[Any, ...]:
        if isinstance(source, bool):
            raise InvalidNumberBase(f"Invalid number base: {source!r}")

        if isinstance(source, int):
            if source < MIN_RADIX:
                raise InvalidNumberBase(f"Radix must be >= {MIN_RADIX}, got {source}")
            return canonical_digits(source)

        if isinstance(source, str):
            return tuple(source)

        if isinstance(source, DigitSystem):
            return source.digits

        if isinstance(source, (list, tuple)):
            return tuple(source)

        raise InvalidNumberBase(f"Invalid number base type: {type(source).__name__}")

    @staticmethod
    def _fold(digit: Any) -> Any:
        return digit.lower() if isinstance(digit, str) else digit

    def _init_string_map(self) -> None:
        """Карта строковых представлений для разбиения строк и детекция конфликтов."""
        forms = [str(digit) for digit in self._digits]
        if not self._case_sensitive:
            forms = [form.lower() for form in forms]

        string_map = {form: digit for form, digit in zip(forms, self._digits) if form}
        lengths = sorted({len(form) for form in string_map}, reverse=True)

        conflict = len(string_map) != len(forms) or len(lengths) > 1

        self._string_map = MappingProxyType(string_map)
        self._string_lengths = tuple(lengths)
        self._string_conflict = conflict

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    @property
    def digits(self) -> tuple[Any, ...]:
        return self._digits

    @property
    def radix(self) -> int:
        return len(self._digits)

    @property
    def is_case_sensitive(self) -> bool:
        return self._case_sensitive

    @property
    def has_string_conflict(self) -> bool:
        return self._string_conflict

    def __len__(self) -> int:
        return len(self._digits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitSystem):
            return NotImplemented
        return self._digits == other._digits

    def __hash__(self) -> int:
        return hash(self._digits)

    def __repr__(self) -> str:
        return f"DigitSystem(radix={self.radix})"

    # =========================================================================
    # СИМВОЛЫ ↔ ЗНАЧЕНИЯ
    # =========================================================================

    def _key(self, digit: Any) -> Any:
        return digit if self._case_sensitive else self._fold(digit)

    def has_digit(self, digit: Any) -> bool:
        """Проверка принадлежности символа системе (без исключений)."""
        try:
            return self._key(digit) in self._value_map
        except TypeError:
            return False

    def get_value(self, digit: Any) -> int:
        """
        Значение символа.

        Raises:
            InvalidDigit: Если символ не распознан с учётом правила регистра
        """
        try:
            return self._value_map[self._key(digit)]
        except (KeyError, TypeError):
            raise InvalidDigit(f"Invalid digit {digit!r} for radix {self.radix}") from None

    def get_digit(self, value: int) -> Any:
        """
        Канонический символ значения.

        Raises:
            InvalidDigit: Если value вне [0, radix)
        """
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < self.radix:
            raise InvalidDigit(f"Invalid digit value {value!r} for radix {self.radix}")
        return self._digits[value]

    def get_values(self, digits: Iterable[Any]) -> list[int]:
        return [self.get_value(digit) for digit in digits]

    def get_digits(self, values: Iterable[int]) -> list[Any]:
        return [self.get_digit(value) for value in values]

    # =========================================================================
    # ОТНОШЕНИЯ МЕЖДУ ОСНОВАНИЯМИ
    # =========================================================================

    def find_common_radix_root(self, other: "DigitSystem") -> int | None:
        """
        Наибольший общий корень оснований.

        Examples:
            >>> DigitSystem(4).find_common_radix_root(DigitSystem(8))
            2
        """
        return find_common_radix_root(self.radix, other.radix)

    def create_conversion_table(self, target: "DigitSystem") -> ConversionTable:
        """
        Таблица замены блоков значений в систему target.

        Стоимость O(small ** size); вызывать только для степенных пар.

        Raises:
            UnsupportedOperation: Если основания не связаны целой степенью
        """
        return build_conversion_table(self.radix, target.radix)

    # =========================================================================
    # РАЗБИЕНИЕ СТРОК
    # =========================================================================

    def split_string(self, text: str) -> list[Any]:
        """
        Разбиение плоской строки на символы системы.

        Для алфавитов фиксированной ширины — прямой проход по блокам.
        Для алфавитов переменной ширины — жадный поиск наидлиннейшего
        совпадения с откатом на один токен: из совпавших в позиции символов
        выбирается единственный, после которого разбор может продолжиться.
        Пустая строка читается как ноль.

        Args:
            text: Строка цифр

        Returns:
            Список символов системы (старшая цифра первой)

        Raises:
            InvalidDigit: Если в некоторой позиции ни один символ не совпал
            UnsupportedTokenization: Если в позиции несколько жизнеспособных вариантов

        Examples:
            >>> DigitSystem(["0100", "10001"]).split_string("01000100")
            ['0100', '0100']
        """
        if text == "":
            return [self._digits[0]]

        if not self._case_sensitive:
            text = text.lower()

        if len(self._string_lengths) == 1 and not self._string_conflict:
            return self._split_fixed(text, self._string_lengths[0])

        return self._split_variable(text)

    def _split_fixed(self, text: str, width: int) -> list[Any]:
        if len(text) % width:
            raise InvalidDigit(
                f"Length of {text!r} is not a multiple of digit width {width}"
            )

        result = []
        for position in range(0, len(text), width):
            chunk = text[position:position + width]
            if chunk not in self._string_map:
                raise InvalidDigit(f"Invalid digit {chunk!r} for radix {self.radix}")
            result.append(self._string_map[chunk])

        return result

    def _matches_at(self, text: str, position: int) -> list[str]:
        """Символы, совпадающие в позиции, от длинного к короткому."""
        return [
            text[position:position + length]
            for length in self._string_lengths
            if position + length <= len(text)
            and text[position:position + length] in self._string_map
        ]

    def _split_variable(self, text: str) -> list[Any]:
        result = []
        position = 0

        while position < len(text):
            matches = self._matches_at(text, position)

            if not matches:
                raise InvalidDigit(
                    f"Invalid digit at position {position} of {text!r} for radix {self.radix}"
                )

            if len(matches) > 1:
                viable = [
                    match
                    for match in matches
                    if position + len(match) == len(text)
                    or self._matches_at(text, position + len(match))
                ]
                if len(viable) > 1:
                    raise UnsupportedTokenization(
                        f"Ambiguous digits {viable!r} at position {position} of {text!r}"
                    )
                matches = viable or matches

            result.append(self._string_map[matches[0]])
            position += len(matches[0])

        return result


def as_digit_system(base: Union[DigitSystem, DigitSource]) -> DigitSystem:
    """Приведение значения к DigitSystem (готовые экземпляры переиспользуются)."""
    return base if isinstance(base, DigitSystem) else DigitSystem(base)
