"""
Number conversion: движок, стратегии и выполнение сериализованных запросов.
"""

from src.conversion.engine import (
    DEFAULT_PRECISION,
    DEFAULT_SEPARATOR,
    DEFAULT_SIGN,
    ConversionEngine,
    EngineConfig,
    ParsedNumber,
)
from src.conversion.requests import RequestExecutor, execute_batch, execute_request

__all__ = [
    # Constants
    "DEFAULT_PRECISION",
    "DEFAULT_SEPARATOR",
    "DEFAULT_SIGN",
    # Engine
    "ConversionEngine",
    "EngineConfig",
    "ParsedNumber",
    # Requests
    "RequestExecutor",
    "execute_request",
    "execute_batch",
]
