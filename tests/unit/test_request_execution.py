"""
Тесты для выполнения сериализованных запросов конвертации

Проверяемые инварианты:
1. Запрос проходит JSON Schema и Pydantic проверки до конвертации
2. Результат соответствует контракту conversion_result
3. Движки кэшируются по параметрам запроса
4. Отказы конвертации доходят до вызывающего кода без изменений
"""

import logging

import jsonschema
import pydantic
import pytest

from src.conversion import RequestExecutor, execute_batch, execute_request
from src.core.contracts import validate_conversion_result
from src.core.domain import ConversionRequest
from src.core.errors import MalformedInput, UnavailableConversion


@pytest.fixture
def executor():
    return RequestExecutor()


class TestExecuteRequest:
    """Тесты выполнения одного запроса."""

    def test_signed_fraction(self, executor):
        result = executor.execute(
            {"number": "-1BCC7.A", "source": 16, "target": 10, "precision": 1}
        )

        assert result.result == "-113863.6"
        assert result.negative is True
        assert result.source_radix == 16
        assert result.target_radix == 10
        assert result.precision == 1
        assert result.strategy == "decimal"

    def test_result_matches_contract(self, executor):
        result = executor.execute({"number": "A37334", "source": 16, "target": 2})

        assert result.result == "101000110111001100110100"
        assert result.strategy == "replace"
        validate_conversion_result(result.model_dump())

    def test_list_number(self, executor):
        result = executor.execute(
            {"number": ["bar", "foo", "bar"], "source": ["foo", "bar"], "target": 10}
        )

        assert result.result == ["5"]
        assert result.negative is False

    def test_custom_markers(self, executor):
        result = executor.execute(
            {"number": "~1,1", "source": 2, "target": 10, "sign": "~", "separator": ","}
        )

        assert result.result == "~1,5"
        assert result.negative is True

    def test_precision_echoes_request(self, executor):
        """0.A (16) = 0.625 обрывается раньше бюджета; precision остаётся запрошенным."""
        result = executor.execute({"number": "0.A", "source": 16, "target": 10, "precision": 20})
        default = executor.execute({"number": "0.A7", "source": 16, "target": 10})

        assert result.result == "0.625"
        assert result.precision == 20
        assert default.result == "0.6523"
        assert default.precision == -1

    def test_module_level_function(self):
        result = execute_request({"number": "0.1", "source": 3, "target": 10, "precision": 6})

        assert result.result == "0.333333"


class TestEngineCache:
    """Тесты кэша движков."""

    def test_engine_reused(self, executor):
        request = ConversionRequest(number="1", source=["a", "b"], target=10)

        assert executor.engine_for(request) is executor.engine_for(request)

    def test_engine_per_parameters(self, executor):
        native = ConversionRequest(number="1", source=16, target=10, backend="native")
        chunked = ConversionRequest(number="1", source=16, target=10, backend="chunked")

        assert executor.engine_for(native) is not executor.engine_for(chunked)
        assert executor.engine_for(chunked).backend.name == "chunked"

    def test_precision_not_part_of_key(self, executor):
        first = ConversionRequest(number="1", source=16, target=10, precision=1)
        second = ConversionRequest(number="1", source=16, target=10, precision=8)

        assert executor.engine_for(first) is executor.engine_for(second)

    def test_cache_is_bounded(self):
        executor = RequestExecutor(cache_size=2)

        for radix in range(2, 12):
            executor.execute({"number": "1", "source": radix, "target": 10})

        info = executor.cache_info()
        assert info.maxsize == 2
        assert info.currsize == 2

    def test_evicted_engine_rebuilt(self):
        executor = RequestExecutor(cache_size=1)
        first = ConversionRequest(number="1", source=16, target=10)
        second = ConversionRequest(number="1", source=8, target=10)

        engine = executor.engine_for(first)
        executor.engine_for(second)

        rebuilt = executor.engine_for(first)
        assert rebuilt is not engine
        assert rebuilt.convert("FF") == "255"

    def test_invalid_cache_size(self):
        with pytest.raises(ValueError, match="cache_size"):
            RequestExecutor(cache_size=0)


class TestRequestFailures:
    """Тесты отказов."""

    def test_contract_violation(self, executor, caplog):
        with caplog.at_level(logging.WARNING, logger="src.conversion.requests"):
            with pytest.raises(jsonschema.ValidationError):
                executor.execute({"number": "1", "source": 1, "target": 10})

        assert "Rejected conversion request" in caplog.text

    def test_every_violation_logged(self, executor, caplog):
        payload = {"number": "1", "source": 1, "target": 1, "precision": "x"}

        with caplog.at_level(logging.WARNING, logger="src.conversion.requests"):
            with pytest.raises(jsonschema.ValidationError):
                executor.execute(payload)

        rejected = [r for r in caplog.records if "Rejected conversion request" in r.message]
        assert len(rejected) == 3
        for path in ("$.source", "$.target", "$.precision"):
            assert path in caplog.text

    def test_model_violation(self, executor):
        """Схема не сравнивает sign и separator, модель сравнивает."""
        with pytest.raises(pydantic.ValidationError):
            executor.execute(
                {"number": "1", "source": 10, "target": 2, "sign": "~", "separator": "~"}
            )

    def test_conversion_error_propagates(self, executor):
        with pytest.raises(MalformedInput):
            executor.execute({"number": "1.2.3", "source": 10, "target": 2})

    def test_no_backend_fraction(self, executor):
        with pytest.raises(UnavailableConversion):
            executor.execute({"number": "0.1", "source": 3, "target": 10, "backend": None})

    def test_no_backend_integer_uses_direct(self, executor):
        result = executor.execute({"number": "102", "source": 3, "target": 10, "backend": None})

        assert result.result == "11"
        assert result.strategy == "direct"


class TestExecuteBatch:
    """Тесты пакетного выполнения."""

    def test_batch(self):
        results = execute_batch(
            [
                {"number": "FF", "source": 16, "target": 10},
                {"number": "255", "source": 10, "target": 16},
                {"number": "11111111", "source": 2, "target": 16},
            ]
        )

        assert [result.result for result in results] == ["255", "FF", "FF"]

    def test_batch_stops_on_first_failure(self, executor):
        payloads = iter(
            [
                {"number": "1", "source": 10, "target": 2},
                {"number": "1.2.3", "source": 10, "target": 2},
                {"number": "2", "source": 10, "target": 2},
            ]
        )

        with pytest.raises(MalformedInput):
            executor.execute_batch(payloads)

        assert next(payloads)["number"] == "2"
