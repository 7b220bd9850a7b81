"""
Backend Registry — упорядоченный реестр backend'ов арифметики

Реестр разрешается один раз при построении движка конвертации:
выбирается первый доступный backend в порядке BACKEND_PRIORITY (самый
быстрый первым). Вызывающий код может явно указать backend по имени,
передать готовый экземпляр или отключить decimal-конвертацию (None).
"""

import logging
from typing import Final, Union

from src.core.math.backend import ArithmeticBackend
from src.core.math.chunked_decimal import ChunkedDecimalBackend
from src.core.math.native_integer import NativeIntegerBackend

logger = logging.getLogger(__name__)

# Автоматический выбор backend'а
AUTO_BACKEND: Final[str] = "auto"

# Приоритет backend'ов: самый быстрый первым, детерминированный порядок
BACKEND_PRIORITY: Final[tuple[str, ...]] = (
    NativeIntegerBackend.name,
    ChunkedDecimalBackend.name,
)

BackendSpec = Union[ArithmeticBackend, str, None]

_REGISTRY: dict[str, type[ArithmeticBackend]] = {
    NativeIntegerBackend.name: NativeIntegerBackend,
    ChunkedDecimalBackend.name: ChunkedDecimalBackend,
}


def register_backend(backend_class: type[ArithmeticBackend]) -> None:
    """
    Регистрация backend'а под его именем.

    Зарегистрированный backend, отсутствующий в BACKEND_PRIORITY,
    доступен только по явному имени.

    Raises:
        ValueError: Если у backend'а нет имени
    """
    if not backend_class.name:
        raise ValueError(f"Backend {backend_class.__name__} must define a name")
    _REGISTRY[backend_class.name] = backend_class


def available_backends() -> list[str]:
    """Имена доступных backend'ов в порядке приоритета."""
    ordered = [name for name in BACKEND_PRIORITY if name in _REGISTRY]
    ordered += sorted(name for name in _REGISTRY if name not in BACKEND_PRIORITY)
    return [name for name in ordered if _REGISTRY[name].is_available()]


def get_backend(name: str) -> ArithmeticBackend:
    """
    Экземпляр backend'а по имени.

    Raises:
        ValueError: Если backend не зарегистрирован или недоступен
    """
    backend_class = _REGISTRY.get(name)
    if backend_class is None:
        raise ValueError(f"Unknown arithmetic backend: {name!r}")
    if not backend_class.is_available():
        raise ValueError(f"Arithmetic backend {name!r} is not available")
    return backend_class()


def resolve_backend(spec: BackendSpec = AUTO_BACKEND) -> ArithmeticBackend | None:
    """
    Разрешение backend'а.

    Args:
        spec: "auto" — первый доступный по приоритету; имя — конкретный
            backend; экземпляр — используется как есть; None — без backend'а

    Returns:
        Экземпляр backend'а или None
    """
    if spec is None or isinstance(spec, ArithmeticBackend):
        return spec

    if spec != AUTO_BACKEND:
        return get_backend(spec)

    for name in available_backends():
        logger.debug("Resolved arithmetic backend %r", name)
        return _REGISTRY[name]()

    logger.info("No arithmetic backend available, decimal conversion disabled")
    return None
