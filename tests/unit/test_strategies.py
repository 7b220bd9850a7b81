"""
Тесты для стратегий конвертации

Coverage:
- Identity: перенос значений, нормализация нулей
- Replace: один проход и два прохода через общий корень
- Decimal: оба backend'а, бюджет цифр дробной части
- Direct: длинное деление, PossibleOverflow, отказ на дробях
- Согласованность стратегий между собой
"""

import threading
import time

import pytest

from src.conversion.strategies import (
    ConversionStrategy,
    DecimalStrategy,
    DirectConfig,
    DirectStrategy,
    IdentityStrategy,
    ReplaceStrategy,
)
from src.conversion.strategies.base import trim_leading_zeros, trim_trailing_zeros
from src.core.digits import DigitSystem
from src.core.errors import (
    InvalidDigit,
    PossibleOverflow,
    UnavailableConversion,
    UnsupportedOperation,
)
from src.core.math.chunked_decimal import ChunkedDecimalBackend
from src.core.math.native_integer import NativeIntegerBackend


def base(radix):
    return DigitSystem(radix)


def to_values(number: int, radix: int) -> list[int]:
    """Значения цифр числа (старшая первой)."""
    values = []
    while True:
        number, digit = divmod(number, radix)
        values.append(digit)
        if not number:
            return values[::-1]


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


class TestTrimming:
    """Тесты нормализации последовательностей."""

    def test_trim_leading_zeros(self):
        assert trim_leading_zeros([0, 0, 1, 0]) == [1, 0]
        assert trim_leading_zeros([0, 0]) == [0]
        assert trim_leading_zeros([]) == [0]

    def test_trim_trailing_zeros(self):
        assert trim_trailing_zeros([0, 1, 0, 0]) == [0, 1]
        assert trim_trailing_zeros([0]) == [0]
        assert trim_trailing_zeros([]) == [0]


class TestBaseStrategy:
    """Базовая стратегия не поддерживает ни одной операции."""

    def test_operations_unsupported(self):
        strategy = ConversionStrategy(base(10), base(2))

        with pytest.raises(UnsupportedOperation):
            strategy.convert_integer([1])

        with pytest.raises(UnsupportedOperation):
            strategy.convert([1], fraction=True)

    def test_validate_values(self):
        strategy = ConversionStrategy(base(10), base(2))

        assert strategy.validate_values((1, 2, 3)) == [1, 2, 3]
        with pytest.raises(InvalidDigit):
            strategy.validate_values([10])
        with pytest.raises(InvalidDigit):
            strategy.validate_values([-1])
        with pytest.raises(InvalidDigit):
            strategy.validate_values([True])


# =============================================================================
# IDENTITY
# =============================================================================


class TestIdentityStrategy:
    """Тесты Identity-стратегии."""

    def test_values_unchanged(self):
        strategy = IdentityStrategy(base(16), DigitSystem("0123456789abcdef"))

        assert strategy.convert_integer([10, 3, 7]) == [10, 3, 7]
        assert strategy.convert_fraction([1, 0, 15]) == [1, 0, 15]

    def test_zeros_normalized(self):
        strategy = IdentityStrategy(base(10), base(10))

        assert strategy.convert_integer([0, 0, 4, 2]) == [4, 2]
        assert strategy.convert_fraction([5, 0, 0]) == [5]
        assert strategy.convert_integer([0, 0]) == [0]
        assert strategy.convert_fraction([]) == [0]

    def test_requires_equal_radices(self):
        with pytest.raises(UnsupportedOperation):
            IdentityStrategy(base(10), base(16))

    def test_invalid_value(self):
        with pytest.raises(InvalidDigit):
            IdentityStrategy(base(2), base(2)).convert_integer([2])


# =============================================================================
# REPLACE
# =============================================================================


class TestReplaceStrategy:
    """Тесты Replace-стратегии."""

    def test_single_pass_integer(self):
        strategy = ReplaceStrategy(base(16), base(2))

        assert strategy.is_direct
        # A37334 → 101000110111001100110100
        assert strategy.convert_integer([10, 3, 7, 3, 3, 4]) == [
            int(d) for d in "101000110111001100110100"
        ]

    def test_single_pass_pads_integer_left(self):
        strategy = ReplaceStrategy(base(2), base(16))

        # 1 1010 → 1A
        assert strategy.convert_integer([1, 1, 0, 1, 0]) == [1, 10]

    def test_single_pass_pads_fraction_right(self):
        strategy = ReplaceStrategy(base(2), base(16))

        # 0.1 (2) = 0.8 (16)
        assert strategy.convert_fraction([1]) == [8]
        # 0.00001 (2) = 0.08 (16)
        assert strategy.convert_fraction([0, 0, 0, 0, 1]) == [0, 8]

    def test_two_pass_through_root(self):
        """8 ↔ 32 через общий корень 2."""
        forward = ReplaceStrategy(base(8), base(32))
        backward = ReplaceStrategy(base(32), base(8))

        assert forward.root == 2
        assert not forward.is_direct
        # 77 (8) = 63 = 1V (32)
        assert forward.convert_integer([7, 7]) == [1, 31]
        assert backward.convert_integer([1, 31]) == [7, 7]

    def test_two_pass_fraction(self):
        """64 → 256 через общий корень 4: 1/64 = 4/256."""
        strategy = ReplaceStrategy(base(64), base(256))

        assert strategy.root == 4
        assert strategy.convert_fraction([1]) == [4]
        assert ReplaceStrategy(base(256), base(64)).convert_fraction([4]) == [1]

    def test_results_normalized(self):
        strategy = ReplaceStrategy(base(16), base(2))

        assert strategy.convert_integer([0, 0, 1]) == [1]
        assert strategy.convert_integer([0]) == [0]
        assert strategy.convert_fraction([8, 0]) == [1]
        assert strategy.convert_fraction([]) == [0]

    def test_children_cached(self):
        strategy = ReplaceStrategy(base(8), base(32))

        assert strategy.children is strategy.children
        assert strategy.children[0].target.radix == 2

    def test_concurrent_first_use_builds_once(self, monkeypatch):
        """Потоки, одновременно начавшие конвертацию, делят одни таблицы."""
        original = DigitSystem.create_conversion_table
        built = []

        def counting(self, other):
            built.append((self.radix, other.radix))
            # Расширяем окно гонки
            time.sleep(0.01)
            return original(self, other)

        monkeypatch.setattr(DigitSystem, "create_conversion_table", counting)

        strategy = ReplaceStrategy(base(8), base(32))
        barrier = threading.Barrier(8)
        results = []
        children = []

        def worker():
            barrier.wait()
            results.append(strategy.convert_integer([7, 7]))
            children.append(strategy.children)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results == [[1, 31]] * 8
        # По одной таблице на каждый проход: 8 → 2 и 2 → 32
        assert sorted(built) == [(2, 32), (8, 2)]
        assert all(pair is children[0] for pair in children)

    def test_no_common_root(self):
        with pytest.raises(UnavailableConversion):
            ReplaceStrategy(base(10), base(16)).convert_integer([1])

    def test_matches_decimal(self):
        """Replace и Decimal дают одинаковые целые части."""
        backend = NativeIntegerBackend()

        for source_radix, target_radix in [(2, 16), (8, 32), (64, 256), (27, 9), (4, 8)]:
            replace = ReplaceStrategy(base(source_radix), base(target_radix))
            decimal = DecimalStrategy(base(source_radix), base(target_radix), backend)

            for number in (0, 1, 255, 12345678901234567890):
                values = to_values(number, source_radix)
                assert replace.convert_integer(values) == decimal.convert_integer(values)


# =============================================================================
# DECIMAL
# =============================================================================


class TestDecimalStrategy:
    """Тесты Decimal-стратегии."""

    @pytest.mark.parametrize("backend", [NativeIntegerBackend(), ChunkedDecimalBackend()])
    def test_integer(self, backend):
        strategy = DecimalStrategy(base(16), base(10), backend)

        assert strategy.convert_integer([1, 11, 12, 12, 7]) == [1, 1, 3, 8, 6, 3]
        assert strategy.convert_integer([0, 0]) == [0]

    @pytest.mark.parametrize("backend", [NativeIntegerBackend(), ChunkedDecimalBackend()])
    def test_fraction_budget(self, backend):
        strategy = DecimalStrategy(base(3), base(10), backend)

        assert strategy.convert_fraction([1], 6) == [3, 3, 3, 3, 3, 3]
        assert strategy.convert_fraction([1], 1) == [3]

    def test_fraction_default_budget(self):
        """Без бюджета — точность источника: 0.A7 (16) → 0.652."""
        strategy = DecimalStrategy(base(16), base(10), NativeIntegerBackend())

        assert strategy.convert_fraction([10, 7]) == [6, 5, 2]

    def test_fraction_trailing_zeros_trimmed(self):
        strategy = DecimalStrategy(base(10), base(3), NativeIntegerBackend())

        # 0.5 (10) = 0.111... (3); 0.0 (10) → 0
        assert strategy.convert_fraction([5], 4) == [1, 1, 1, 1]
        assert strategy.convert_fraction([0], 4) == [0]

    def test_invalid_value(self):
        strategy = DecimalStrategy(base(10), base(3), NativeIntegerBackend())

        with pytest.raises(InvalidDigit):
            strategy.convert_integer([1, 10])


# =============================================================================
# DIRECT
# =============================================================================


class TestDirectStrategy:
    """Тесты Direct-стратегии."""

    def test_integer(self):
        strategy = DirectStrategy(base(16), base(10))

        assert strategy.convert_integer([1, 11, 12, 12, 7]) == [1, 1, 3, 8, 6, 3]

    def test_zero_and_leading_zeros(self):
        strategy = DirectStrategy(base(10), base(7))

        assert strategy.convert_integer([0]) == [0]
        assert strategy.convert_integer([]) == [0]
        # 49 (10) = 100 (7)
        assert strategy.convert_integer([0, 0, 4, 9]) == [1, 0, 0]

    def test_matches_python_int(self):
        strategy = DirectStrategy(base(10), base(7))
        number = 98765432109876543210987654321

        assert strategy.convert_integer(to_values(number, 10)) == to_values(number, 7)

    def test_possible_overflow(self):
        """11 * 10 - 1 = 109 > 100."""
        strategy = DirectStrategy(base(11), base(10), DirectConfig(safe_integer_limit=100))

        assert strategy.max_remainder == 109
        with pytest.raises(PossibleOverflow):
            strategy.convert_integer([1, 0])

    def test_limit_boundary(self):
        strategy = DirectStrategy(base(11), base(10), DirectConfig(safe_integer_limit=109))

        # 10 (11) = 11 (10)
        assert strategy.convert_integer([1, 0]) == [1, 1]

    def test_overflow_is_overflow_error(self):
        strategy = DirectStrategy(base(11), base(10), DirectConfig(safe_integer_limit=100))

        with pytest.raises(OverflowError):
            strategy.convert_integer([1])

    def test_fraction_unsupported(self):
        with pytest.raises(UnsupportedOperation):
            DirectStrategy(base(10), base(3)).convert_fraction([5])

    def test_invalid_config(self):
        with pytest.raises(ValueError, match="safe_integer_limit"):
            DirectConfig(safe_integer_limit=0)
