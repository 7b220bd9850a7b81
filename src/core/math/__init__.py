"""
Core math modules

Точная radix-арифметика и backend'ы арифметики произвольной точности.
"""

# Radix math
from src.core.math.radix import (
    MIN_RADIX,
    exact_log,
    find_common_radix_root,
    fraction_digit_budget,
    integer_root,
    radix_roots,
    validate_non_negative_int,
    validate_radix,
)

# Arithmetic backends
from src.core.math.backend import (
    NATIVE_BLOCK_LIMIT,
    ArithmeticBackend,
    native_block_size,
)
from src.core.math.chunked_decimal import (
    CHUNK_BASE,
    CHUNK_DIGITS,
    ChunkedDecimalBackend,
)
from src.core.math.native_integer import NativeIntegerBackend

# Registry
from src.core.math.registry import (
    AUTO_BACKEND,
    BACKEND_PRIORITY,
    available_backends,
    get_backend,
    register_backend,
    resolve_backend,
)

__all__ = [
    # Radix math: Constants
    "MIN_RADIX",
    # Radix math: Functions
    "exact_log",
    "find_common_radix_root",
    "fraction_digit_budget",
    "integer_root",
    "radix_roots",
    "validate_non_negative_int",
    "validate_radix",
    # Backends: Constants
    "NATIVE_BLOCK_LIMIT",
    "CHUNK_BASE",
    "CHUNK_DIGITS",
    # Backends: Types
    "ArithmeticBackend",
    "ChunkedDecimalBackend",
    "NativeIntegerBackend",
    # Backends: Functions
    "native_block_size",
    # Registry
    "AUTO_BACKEND",
    "BACKEND_PRIORITY",
    "available_backends",
    "get_backend",
    "register_backend",
    "resolve_backend",
]
