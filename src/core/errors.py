"""
Conversion Errors — таксономия отказов конвертации

Все ошибки конвертации поверхностно доступны вызывающему коду как отдельные,
инспектируемые исключения. Ни одна из них не перехватывается и не повторяется
внутри движка: конвертация детерминирована, одинаковый вход всегда падает
одинаково.

Иерархия:
    ConversionError
    ├── InvalidNumberBase        (ValueError)    — некорректное определение системы счисления
    ├── InvalidDigit             (ValueError)    — символ/значение неизвестны системе
    ├── MalformedInput           (ValueError)    — структура числа нарушена
    ├── UnsupportedTokenization  (RuntimeError)  — неоднозначный алфавит переменной ширины
    ├── UnsupportedOperation     (RuntimeError)  — стратегия вызвана вне своего контракта
    ├── UnavailableConversion    (RuntimeError)  — нет применимой стратегии или цифра совпала с маркером
    └── PossibleOverflow         (OverflowError) — остаток Direct выходит за безопасный диапазон
"""


class ConversionError(Exception):
    """Базовый класс всех отказов конвертации."""

    pass


class InvalidNumberBase(ConversionError, ValueError):
    """
    Некорректное определение системы счисления.

    Возникает при radix < 2, менее чем двух символах, дубликатах символов
    или неподдерживаемом типе источника (например, bool).
    """

    pass


class InvalidDigit(ConversionError, ValueError):
    """Символ не распознан системой счисления или значение вне [0, radix)."""

    pass


class MalformedInput(ConversionError, ValueError):
    """
    Нарушена структура числа.

    Несколько разделителей дробной части, пустое число, знак без цифр.
    """

    pass


class UnsupportedTokenization(ConversionError, RuntimeError):
    """
    Строку невозможно однозначно разбить на символы алфавита.

    Жадный поиск с откатом на один токен не является полным разрешением
    неоднозначной грамматики: для некоторых алфавитов переменной ширины
    разбиение принципиально неоднозначно.
    """

    pass


class UnsupportedOperation(ConversionError, RuntimeError):
    """Стратегия вызвана для операции вне своего контракта (например, Direct на дроби)."""

    pass


class UnavailableConversion(ConversionError, RuntimeError):
    """Нет применимой стратегии или цифра результата читалась бы как знак или разделитель."""

    pass


class PossibleOverflow(ConversionError, OverflowError):
    """
    Промежуточный остаток Direct-стратегии может превысить безопасный диапазон.

    Остаток длинного деления достигает source_radix * target_radix - 1.
    """

    pass
