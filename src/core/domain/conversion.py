"""
Conversion — модели запроса и результата сериализованной конвертации

Immutable Pydantic модели для конвертаций, приходящих в виде JSON
(соответствуют схемам conversion_request / conversion_result).
"""

from typing import Any, Final, Union

from pydantic import BaseModel, Field, field_validator

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Допустимые значения поля backend (None отключает decimal-конвертацию)
BACKEND_CHOICES: Final[tuple[str, ...]] = ("auto", "native", "chunked")

NumberValue = Union[str, list[Any]]
BaseValue = Union[int, str, list[Any]]


# =============================================================================
# REQUEST
# =============================================================================


class ConversionRequest(BaseModel):
    """
    Запрос конвертации одного числа.

    source/target — значение для построения DigitSystem:
    radix (int >= 2), строка односимвольных цифр или список символов.
    """

    number: NumberValue = Field(..., description="Число: строка или список символов")
    source: BaseValue = Field(..., description="Система счисления источника")
    target: BaseValue = Field(..., description="Система счисления цели")
    precision: int = Field(-1, description="Точность дробной части (<= 0 — автоматически)")
    sign: str = Field("-", min_length=1, description="Маркер отрицательного числа")
    separator: str = Field(".", min_length=1, description="Разделитель дробной части")
    backend: str | None = Field("auto", description="Backend арифметики")

    model_config = {"frozen": True}

    @field_validator("source", "target", mode="before")
    @classmethod
    def validate_base(cls, v: Any) -> Any:
        """Основание: int >= 2 (не bool), строка или список из >= 2 символов"""
        if isinstance(v, bool):
            raise ValueError("number base must not be a boolean")
        if isinstance(v, int) and v < 2:
            raise ValueError(f"radix must be >= 2, got {v}")
        if isinstance(v, (str, list)) and len(v) < 2:
            raise ValueError(f"number base must have at least 2 digits, got {len(v)}")
        return v

    @field_validator("backend")
    @classmethod
    def validate_backend(cls, v: str | None) -> str | None:
        if v is not None and v not in BACKEND_CHOICES:
            raise ValueError(f"backend must be one of {BACKEND_CHOICES} or null, got {v!r}")
        return v

    @field_validator("separator")
    @classmethod
    def validate_separator_differs_from_sign(cls, v: str, info) -> str:
        """Проверка, что separator отличается от sign"""
        if "sign" in info.data and info.data["sign"] == v:
            raise ValueError(f"separator {v!r} must differ from sign")
        return v

    def base_key(self, value: BaseValue) -> Any:
        """Hashable ключ основания (для кэша движков)."""
        return tuple(value) if isinstance(value, list) else value


# =============================================================================
# RESULT
# =============================================================================


class ConversionResult(BaseModel):
    """Результат конвертации одного числа."""

    number: NumberValue = Field(..., description="Исходное число")
    result: NumberValue = Field(..., description="Число в системе цели")
    source_radix: int = Field(..., ge=2, description="Основание источника")
    target_radix: int = Field(..., ge=2, description="Основание цели")
    negative: bool = Field(..., description="Отрицательное ли число")
    precision: int = Field(..., description="Запрошенная точность (<= 0 — относительно длины дробной части)")
    strategy: str = Field(..., min_length=1, description="Стратегия целой части")

    model_config = {"frozen": True}
