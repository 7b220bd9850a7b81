"""
Request Execution — выполнение сериализованных запросов конвертации

Запрос проходит два уровня проверки:
1. JSON Schema контракт conversion_request (jsonschema)
2. Pydantic модель ConversionRequest

Движки кэшируются по (source, target, sign, separator, backend), поэтому
построение систем счисления и таблиц замены не повторяется для пакета
запросов с одинаковыми основаниями. Кэш ограничен ENGINE_CACHE_SIZE
записями (LRU): параметры приходят из внешних данных.
"""

import logging
from functools import lru_cache
from typing import Any, Dict, Final, Iterable

from jsonschema import ValidationError

from src.conversion.engine import ConversionEngine, EngineConfig
from src.core.contracts import ConversionRequestValidator
from src.core.domain.conversion import ConversionRequest, ConversionResult

logger = logging.getLogger(__name__)

# Максимум движков в кэше одного исполнителя
ENGINE_CACHE_SIZE: Final[int] = 128


def _build_engine(source, target, sign, separator, backend) -> ConversionEngine:
    return ConversionEngine(
        source,
        target,
        config=EngineConfig(sign=sign, separator=separator),
        backend=backend,
    )


class RequestExecutor:
    """Исполнитель запросов конвертации с кэшем движков."""

    def __init__(self, cache_size: int = ENGINE_CACHE_SIZE):
        if cache_size < 1:
            raise ValueError(f"cache_size must be positive, got {cache_size}")

        self._validator = ConversionRequestValidator()
        self._build = lru_cache(maxsize=cache_size)(_build_engine)

    def engine_for(self, request: ConversionRequest) -> ConversionEngine:
        """Движок для запроса (строится один раз на набор параметров)."""
        return self._build(
            request.base_key(request.source),
            request.base_key(request.target),
            request.sign,
            request.separator,
            request.backend,
        )

    def cache_info(self):
        """Статистика кэша движков (hits, misses, maxsize, currsize)."""
        return self._build.cache_info()

    def execute(self, payload: Dict[str, Any]) -> ConversionResult:
        """
        Выполнение одного запроса.

        Args:
            payload: Данные запроса (dict, соответствующий conversion_request)

        Returns:
            ConversionResult

        Raises:
            ValidationError: Если payload нарушает контракт
            pydantic.ValidationError: Если payload не проходит проверку модели
            ConversionError: Если конвертация невозможна
        """
        try:
            self._validator.validate(payload)
        except ValidationError:
            for error in self._validator.iter_errors(payload):
                logger.warning(
                    "Rejected conversion request at %s: %s",
                    error.json_path,
                    error.message,
                )
            raise

        request = ConversionRequest.model_validate(payload)
        engine = self.engine_for(request)
        result = engine.convert(request.number, precision=request.precision)

        logger.debug(
            "Converted %r from radix %d to radix %d",
            request.number,
            engine.source.radix,
            engine.target.radix,
        )

        return ConversionResult(
            number=request.number,
            result=result,
            source_radix=engine.source.radix,
            target_radix=engine.target.radix,
            negative=engine.parse(request.number).negative,
            precision=request.precision,
            strategy=engine.select_strategy().name,
        )

    def execute_batch(self, payloads: Iterable[Dict[str, Any]]) -> list[ConversionResult]:
        """Выполнение пакета запросов; первый отказ прерывает пакет."""
        return [self.execute(payload) for payload in payloads]


# Глобальный исполнитель
_EXECUTOR = RequestExecutor()


def execute_request(payload: Dict[str, Any]) -> ConversionResult:
    """Выполнение одного запроса глобальным исполнителем."""
    return _EXECUTOR.execute(payload)


def execute_batch(payloads: Iterable[Dict[str, Any]]) -> list[ConversionResult]:
    """Выполнение пакета запросов глобальным исполнителем."""
    return _EXECUTOR.execute_batch(payloads)
