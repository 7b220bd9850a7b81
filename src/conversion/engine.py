"""
Conversion Engine — оркестратор конвертации чисел между системами счисления

Pipeline одного вызова:
1. Отделение необязательного знака
2. Отделение необязательного разделителя дробной части
3. Разбиение каждой части на значения цифр системы источника
4. Независимая конвертация целой и дробной частей
5. Сборка: знак + целая часть + разделитель + дробная часть

Выбор стратегии (самая быстрая применимая первой):
    одинаковый radix → Identity
    общий корень     → Replace
    есть backend     → Decimal
    иначе            → Direct (только целая часть; дробь → UnavailableConversion)

Политика точности дробной части:
- precision > 0: бюджет ровно precision цифр
- precision <= 0: бюджет по точности источника минус precision
Конвертация завершается раньше бюджета при точном нуле остатка.

Формат результата повторяет формат входа: строка → строка,
последовательность символов → список символов.

Движок никогда не логирует: каждый вызов даёт ровно один результат
или одно исключение из src.core.errors.
"""

from dataclasses import dataclass
from typing import Any, Final, Sequence, Union

from src.conversion.strategies import (
    ConversionStrategy,
    DecimalStrategy,
    DirectConfig,
    DirectStrategy,
    IdentityStrategy,
    ReplaceStrategy,
)
from src.core.digits import DigitSource, DigitSystem, as_digit_system
from src.core.errors import MalformedInput, UnavailableConversion
from src.core.math.backend import ArithmeticBackend
from src.core.math.radix import fraction_digit_budget
from src.core.math.registry import AUTO_BACKEND, BackendSpec, resolve_backend

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

DEFAULT_SIGN: Final[str] = "-"
DEFAULT_SEPARATOR: Final[str] = "."

# precision <= 0: автоматический бюджет по точности источника
DEFAULT_PRECISION: Final[int] = -1

NumberInput = Union[str, Sequence[Any]]


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EngineConfig:
    """Конфигурация движка конвертации.

    Attributes:
        precision: точность дробной части (см. политику точности)
        sign: маркер отрицательного числа
        separator: разделитель дробной части
    """

    precision: int = DEFAULT_PRECISION
    sign: Any = DEFAULT_SIGN
    separator: Any = DEFAULT_SEPARATOR

    def __post_init__(self):
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise ValueError(f"precision must be an integer, got {self.precision!r}")
        if self.sign == "" or self.separator == "":
            raise ValueError("sign and separator must be non-empty")
        if self.sign == self.separator:
            raise ValueError(f"sign and separator must differ, got {self.sign!r}")


# =============================================================================
# PARSED NUMBER
# =============================================================================


@dataclass(frozen=True)
class ParsedNumber:
    """Структура числа после отделения знака и разделителя."""

    negative: bool
    integer: Sequence[Any]
    fraction: Sequence[Any] | None


# =============================================================================
# ENGINE
# =============================================================================


class ConversionEngine:
    """Конвертация чисел произвольного размера и точности между системами счисления.

    Системы счисления и стратегии строятся один раз при создании движка
    и переиспользуются между вызовами; backend арифметики разрешается
    реестром один раз.
    """

    def __init__(
        self,
        source: Union[DigitSystem, DigitSource],
        target: Union[DigitSystem, DigitSource],
        config: EngineConfig | None = None,
        backend: BackendSpec = AUTO_BACKEND,
        direct_config: DirectConfig | None = None,
    ):
        """
        Args:
            source: система счисления источника (или значение для DigitSystem)
            target: система счисления цели (или значение для DigitSystem)
            config: конфигурация движка (опционально, используется default)
            backend: "auto", имя backend'а, экземпляр или None (без decimal)
            direct_config: конфигурация Direct-стратегии
        """
        self.source = as_digit_system(source)
        self.target = as_digit_system(target)
        self.config = config or EngineConfig()
        self.common_root = self.source.find_common_radix_root(self.target)

        self._identity = (
            IdentityStrategy(self.source, self.target)
            if self.source.radix == self.target.radix
            else None
        )
        self._replace = (
            ReplaceStrategy(self.source, self.target)
            if self.common_root is not None
            else None
        )
        self._direct = DirectStrategy(self.source, self.target, direct_config)
        self._decimal: DecimalStrategy | None = None
        self.backend = resolve_backend(backend)

    # =========================================================================
    # BACKEND
    # =========================================================================

    @property
    def backend(self) -> ArithmeticBackend | None:
        """Backend арифметики (None — decimal-конвертация отключена)."""
        return self._decimal.backend if self._decimal is not None else None

    @backend.setter
    def backend(self, backend: ArithmeticBackend | None) -> None:
        self._decimal = (
            DecimalStrategy(self.source, self.target, backend)
            if backend is not None
            else None
        )

    # =========================================================================
    # ВЫБОР СТРАТЕГИИ
    # =========================================================================

    def select_strategy(self, fraction: bool = False) -> ConversionStrategy:
        """
        Самая быстрая применимая стратегия.

        Raises:
            UnavailableConversion: Дробь без общего корня и без backend'а
        """
        for strategy in (self._identity, self._replace, self._decimal):
            if strategy is not None:
                return strategy

        if fraction:
            raise UnavailableConversion(
                f"Fraction conversion from radix {self.source.radix} to "
                f"{self.target.radix} requires an arithmetic backend"
            )

        return self._direct

    # =========================================================================
    # КОНВЕРТАЦИЯ ЧАСТЕЙ
    # =========================================================================

    def convert_integer(self, digits: Sequence[Any]) -> list[Any]:
        """
        Конвертация целой части, заданной символами источника.

        Args:
            digits: Символы источника (старшая цифра первой)

        Returns:
            Символы цели без ведущих нулей
        """
        values = self.select_strategy().convert_integer(self.source.get_values(digits))
        return self.target.get_digits(values)

    def convert_fraction(self, digits: Sequence[Any], precision: int | None = None) -> list[Any]:
        """
        Конвертация дробной части, заданной символами источника.

        Args:
            digits: Символы после разделителя
            precision: Точность (None — из конфигурации)

        Returns:
            Символы цели без хвостовых нулей
        """
        precision = self.config.precision if precision is None else precision
        source_values = self.source.get_values(digits)
        budget = fraction_digit_budget(
            len(source_values), self.source.radix, self.target.radix, precision
        )

        values = self.select_strategy(fraction=True).convert_fraction(source_values, budget)
        return self.target.get_digits(values)

    # =========================================================================
    # КОНВЕРТАЦИЯ ЧИСЛА
    # =========================================================================

    def parse(self, number: NumberInput) -> ParsedNumber:
        """
        Отделение знака и разделителя дробной части.

        Маркеры всегда структурные: ведущий sign — знак, каждый separator —
        разделитель, даже если система источника содержит такой же символ.

        Raises:
            MalformedInput: Несколько разделителей или нет ни одной цифры
        """
        sign = self.config.sign
        separator = self.config.separator
        is_text = isinstance(number, str)
        items: Sequence[Any] = number if is_text else list(number)

        negative = self._starts_with(items, sign, is_text)
        if negative:
            items = items[len(sign):] if is_text else items[1:]

        parts = self._split(items, separator, is_text)
        if len(parts) > 2:
            raise MalformedInput(f"Number contains {len(parts) - 1} fraction separators")

        if all(len(part) == 0 for part in parts):
            raise MalformedInput(f"Number {number!r} contains no digits")

        return ParsedNumber(
            negative=negative,
            integer=parts[0],
            fraction=parts[1] if len(parts) == 2 else None,
        )

    def _starts_with(self, items: Sequence[Any], marker: Any, is_text: bool) -> bool:
        if is_text:
            return isinstance(marker, str) and items.startswith(marker)
        return len(items) > 0 and items[0] == marker

    def _split(self, items: Sequence[Any], separator: Any, is_text: bool) -> list[Sequence[Any]]:
        if is_text:
            return items.split(separator) if isinstance(separator, str) else [items]

        parts: list[list[Any]] = [[]]
        for item in items:
            if item == separator:
                parts.append([])
            else:
                parts[-1].append(item)
        return parts

    def _tokenize(self, part: Sequence[Any], is_text: bool) -> list[Any]:
        if is_text:
            return self.source.split_string(part) if part else []
        return list(part)

    def _check_markers(
        self,
        negative: bool,
        integer: list[Any],
        fraction: list[Any] | None,
        is_text: bool,
    ) -> None:
        """
        Проверка, что результат читается обратно той же структурой.

        Raises:
            UnavailableConversion: Цифра цели совпадает с маркером
        """
        sign = self.config.sign
        separator = self.config.separator
        parts = [integer] if fraction is None else [integer, fraction]

        if is_text:
            texts = ["".join(str(digit) for digit in part) for part in parts]
            clash = isinstance(separator, str) and any(separator in text for text in texts)
            # Повторный знак после снятого знака читается как цифра
            clash = clash or (not negative and self._starts_with(texts[0], sign, True))
        else:
            clash = any(separator in part for part in parts)
            clash = clash or (not negative and integer[0] == sign)

        if clash:
            raise UnavailableConversion(
                f"Digits of radix {self.target.radix} collide with sign {sign!r} "
                f"or separator {separator!r}; the result cannot be read back"
            )

    def convert(self, number: NumberInput, precision: int | None = None) -> NumberInput:
        """
        Конвертация числа со знаком и дробной частью.

        Args:
            number: Строка или последовательность символов источника
            precision: Точность дробной части (None — из конфигурации)

        Returns:
            Число в системе цели в том же формате, что и вход

        Raises:
            MalformedInput: Нарушена структура числа
            InvalidDigit: Символ не распознан системой источника
            UnsupportedTokenization: Строку нельзя однозначно разбить
            UnavailableConversion: Дробь без применимой стратегии или
                цифры результата совпадают с маркерами

        Examples:
            >>> ConversionEngine(16, 2).convert("A37334")
            '101000110111001100110100'
            >>> ConversionEngine(16, 10).convert("-1BCC7.A", precision=1)
            '-113863.6'
        """
        is_text = isinstance(number, str)
        parsed = self.parse(number)

        integer = self.convert_integer(self._tokenize(parsed.integer, is_text))
        fraction = None
        if parsed.fraction is not None:
            fraction = self.convert_fraction(self._tokenize(parsed.fraction, is_text), precision)

        self._check_markers(parsed.negative, integer, fraction, is_text)

        result: list[Any] = [self.config.sign] if parsed.negative else []
        result.extend(integer)
        if fraction is not None:
            result.append(self.config.separator)
            result.extend(fraction)

        return "".join(str(item) for item in result) if is_text else result
