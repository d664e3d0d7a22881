"""Observability – structured logging helpers."""
from eksblowfish.observability.logging.filters import SensitiveFieldsFilter
from eksblowfish.observability.logging.factory import JsonLoggerFactory
from eksblowfish.observability.logging.processors import get_logger

__all__ = [
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
