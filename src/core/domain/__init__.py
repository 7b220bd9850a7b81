"""
Domain models and value objects.

Contains the serialized conversion request and result models.
"""

from src.core.domain.conversion import (
    BACKEND_CHOICES,
    ConversionRequest,
    ConversionResult,
)

__all__ = [
    "BACKEND_CHOICES",
    "ConversionRequest",
    "ConversionResult",
]
