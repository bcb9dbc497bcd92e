"""Bundled attribute converters."""

from .collection_converters import ListAttributeConverter, MapAttributeConverter
from .float_converter import FloatAttributeConverter
from .integer_converter import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN, IntegerAttributeConverter
from .timestamp_converter import TimestampAttributeConverter, timestamp_converter

__all__ = [
    "FloatAttributeConverter",
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    "IntegerAttributeConverter",
    "ListAttributeConverter",
    "MapAttributeConverter",
    "TimestampAttributeConverter",
    "timestamp_converter",
]
