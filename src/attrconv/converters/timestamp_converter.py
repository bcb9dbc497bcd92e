"""
Formatted timestamp converter.

Timestamps are stored as String attributes rendered with a date-time pattern
in a configured time zone, for example::

    converter = timestamp_converter(datetime, pattern="yyyyMMddHHmmssSSS", time_zone="UTC")

The converter is composed of two parts resolved when it is constructed:
- a ``DateTimeFormatter`` built from the pattern and zone
- a registry ``ScalarConverter`` between an aware ``datetime`` and the target
  type (``datetime``, epoch-millisecond ``int``, epoch-second ``float``,
  ``date``, ``numpy.datetime64`` ...)

Round trips are exact only at the pattern's resolution: ``yyyy-MM-dd`` keeps
the calendar date (time of day comes back as midnight) and ``SSS`` keeps
milliseconds (microseconds are truncated).
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Generic, Optional, TypeVar

from ..attribute_value import AttributeValue
from ..config import TimestampFormat
from ..context import ConversionContext, resolve_context
from ..converter import AttributeConverter
from ..exceptions import ConfigurationError, ValidationError
from ..scalar_registry import ScalarConverter, ScalarConverterRegistry, standard_registry
from ..time_helpers import DateTimeFormatter
from ..validation_guards import require_aware
from ..visitor import TypeConvertingVisitor

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TimestampAttributeConverter(AttributeConverter[T], Generic[T]):
    """
    Stores ``target_type`` values as formatted timestamp Strings.

    Args:
        target_type: Domain type served by the converter (default ``datetime``)
        timestamp_format: Pattern and time zone (defaults to ISO-8601 in UTC)
        registry: Scalar registry used to reach ``target_type`` (defaults to
            the standard registry)

    Raises:
        ConfigurationError: If the pattern is malformed or the zone unknown
        UnsupportedTypeError: If the registry has no path from ``datetime`` to
            ``target_type``
    """

    __slots__ = ("_target_type", "_format", "_formatter", "_scalar")

    def __init__(
        self,
        target_type: Any = datetime,
        timestamp_format: Optional[TimestampFormat] = None,
        *,
        registry: Optional[ScalarConverterRegistry] = None,
    ) -> None:
        timestamp_format = timestamp_format if timestamp_format is not None else TimestampFormat()
        if not isinstance(timestamp_format, TimestampFormat):
            raise ConfigurationError.invalid_value(
                "timestamp_format", timestamp_format, "Expected a TimestampFormat"
            )
        formatter = DateTimeFormatter.of_pattern(timestamp_format.pattern, timestamp_format.time_zone)
        registry = registry if registry is not None else standard_registry()
        scalar: ScalarConverter[datetime, T] = registry.get_converter(datetime, target_type)

        self._target_type = target_type
        self._format = timestamp_format
        self._formatter = formatter
        self._scalar = scalar
        logger.debug(
            "Created timestamp converter for %s with pattern %r in %s",
            getattr(target_type, "__qualname__", target_type),
            timestamp_format.pattern,
            formatter.zone_name,
        )

    @property
    def timestamp_format(self) -> TimestampFormat:
        return self._format

    @property
    def formatter(self) -> DateTimeFormatter:
        return self._formatter

    def type(self) -> Any:
        return self._target_type

    def to_attribute_value(self, value: T, context: Optional[ConversionContext] = None) -> AttributeValue:
        context = resolve_context(context)
        if value is None:
            raise ValidationError(value=value, constraint="timestamp must not be None", context=context.describe())
        instant = self._to_instant(value, context)
        return AttributeValue.from_string(self._formatter.format(instant))

    def from_attribute_value(self, attribute_value: AttributeValue, context: Optional[ConversionContext] = None) -> T:
        context = resolve_context(context)
        instant = attribute_value.convert(_TimestampVisitor(self, context))
        return self._from_instant(instant, context)

    def _to_instant(self, value: T, context: ConversionContext) -> datetime:
        try:
            instant = self._scalar.unconvert(value)
        except ValidationError:
            raise
        except (ValueError, TypeError, OverflowError, AttributeError) as exc:
            raise ValidationError(
                value=value, constraint=f"cannot be represented as a timestamp ({exc})", context=context.describe()
            ) from exc
        return require_aware(instant, context=context)

    def _from_instant(self, instant: datetime, context: ConversionContext) -> T:
        try:
            return self._scalar.convert(instant)
        except ValidationError:
            raise
        except (ValueError, TypeError, OverflowError) as exc:
            raise ValidationError(
                value=instant,
                constraint=f"cannot be represented as {getattr(self._target_type, '__qualname__', self._target_type)}",
                context=context.describe(),
            ) from exc


class _TimestampVisitor(TypeConvertingVisitor[datetime]):
    def __init__(self, owner: TimestampAttributeConverter[Any], context: ConversionContext) -> None:
        super().__init__(owner.type(), TimestampAttributeConverter, context)
        self._formatter = owner.formatter

    def convert_string(self, value: str) -> datetime:
        return self._formatter.parse(value)


def timestamp_converter(
    target_type: Any = datetime,
    *,
    pattern: Optional[str] = None,
    time_zone: Optional[str] = None,
    registry: Optional[ScalarConverterRegistry] = None,
) -> TimestampAttributeConverter[Any]:
    """Build a fully configured timestamp converter; omitted options use the defaults."""
    options = {}
    if pattern is not None:
        options["pattern"] = pattern
    if time_zone is not None:
        options["time_zone"] = time_zone
    return TimestampAttributeConverter(target_type, TimestampFormat.from_options(options), registry=registry)


__all__ = ["TimestampAttributeConverter", "timestamp_converter"]
