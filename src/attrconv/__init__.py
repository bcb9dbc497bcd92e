"""
Bidirectional conversion between typed domain values and store attribute values.

Typical usage::

    from attrconv import AttributeValue, IntegerAttributeConverter, timestamp_converter

    numbers = IntegerAttributeConverter.create()
    numbers.to_attribute_value(7)  # AttributeValue(N='7')

    created = timestamp_converter(pattern="yyyyMMddHHmmssSSS", time_zone="UTC")
    created.from_attribute_value(AttributeValue.from_string("20200102030405006"))
"""

import logging

from .attribute_value import AttributeValue, AttributeValueType
from .config import TimestampFormat
from .context import ConversionContext
from .converter import AttributeConverter
from .converters import (
    FloatAttributeConverter,
    IntegerAttributeConverter,
    ListAttributeConverter,
    MapAttributeConverter,
    TimestampAttributeConverter,
    timestamp_converter,
)
from .exceptions import (
    ConfigurationError,
    ConversionError,
    FormatError,
    UnsupportedConversionError,
    UnsupportedTypeError,
    ValidationError,
)
from .scalar_registry import ScalarConverter, ScalarConverterRegistry, standard_registry
from .visitor import TypeConvertingVisitor

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AttributeConverter",
    "AttributeValue",
    "AttributeValueType",
    "ConfigurationError",
    "ConversionContext",
    "ConversionError",
    "FloatAttributeConverter",
    "FormatError",
    "IntegerAttributeConverter",
    "ListAttributeConverter",
    "MapAttributeConverter",
    "ScalarConverter",
    "ScalarConverterRegistry",
    "TimestampAttributeConverter",
    "TimestampFormat",
    "TypeConvertingVisitor",
    "UnsupportedConversionError",
    "UnsupportedTypeError",
    "ValidationError",
    "standard_registry",
    "timestamp_converter",
]
