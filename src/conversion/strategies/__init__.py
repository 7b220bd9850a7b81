"""
Conversion strategies

Взаимозаменяемые алгоритмы конвертации последовательностей значений цифр:
- IdentityStrategy: одинаковый radix, меняются только символы
- ReplaceStrategy: замена блоков через общий корень оснований
- DecimalStrategy: через промежуточную величину backend'а арифметики
- DirectStrategy: длинное деление по цифрам (только целые части)
"""

from src.conversion.strategies.base import (
    ConversionStrategy,
    trim_leading_zeros,
    trim_trailing_zeros,
)
from src.conversion.strategies.decimal import DecimalStrategy
from src.conversion.strategies.direct import DirectConfig, DirectStrategy
from src.conversion.strategies.identity import IdentityStrategy
from src.conversion.strategies.replace import ReplaceStrategy

__all__ = [
    # Base
    "ConversionStrategy",
    "trim_leading_zeros",
    "trim_trailing_zeros",
    # Strategies
    "IdentityStrategy",
    "ReplaceStrategy",
    "DecimalStrategy",
    "DirectStrategy",
    # Config
    "DirectConfig",
]
