"""Exception classes raised by the conversion framework.

All conversion failures inherit from ``ConversionError`` so callers can catch
the whole family at once, while the concrete classes also inherit from the
closest built-in exception (``ValueError``, ``TypeError``, ``LookupError``).

Exception classes support two patterns:
1. No-argument raise: raise ValidationError()
2. Contextual attributes: err = ValidationError(value=float("nan"), constraint="finite"); raise err
"""

from __future__ import annotations

from typing import Any


def _type_name(candidate: Any) -> str:
    if isinstance(candidate, type):
        return candidate.__qualname__
    return str(candidate)


class ConversionError(Exception):
    """Base exception for all conversion errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Conversion error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class FormatError(ConversionError, ValueError):
    """Payload text or shape is malformed."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Payload text or shape is malformed"
        super().__init__(message, **kwargs)

    @classmethod
    def invalid_number(cls, text: object) -> "FormatError":
        """Create error for text that is not a base-10 numeral."""
        return cls(f"Invalid number text: {text!r}", value=text)

    @classmethod
    def invalid_payload(cls, variant: str, value: object, expected: str) -> "FormatError":
        """Create error for a payload of the wrong shape."""
        return cls(
            f"{variant} payload must be {expected} (received {type(value).__name__}: {value!r})",
            value=value,
        )

    @classmethod
    def unparsable(cls, text: str, pattern: str) -> "FormatError":
        """Create error for text that does not match a date-time pattern."""
        return cls(f"Text {text!r} does not match pattern {pattern!r}", value=text, pattern=pattern)


class ValidationError(ConversionError, ValueError):
    """Value is outside the representable range."""

    def __init__(
        self,
        message: str = "",
        *,
        value: Any = None,
        constraint: str = "",
        context: str = "",
        **kwargs: Any,
    ) -> None:
        if not message:
            message = "Value is outside the representable range"
            if constraint:
                message = f"Value {value!r} violates constraint: {constraint}"
            if context:
                message += f" (at {context})"
        super().__init__(message, value=value, constraint=constraint, context=context, **kwargs)


class UnsupportedConversionError(ConversionError, TypeError):
    """Attribute value variant is not accepted by the converter."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Attribute value variant is not accepted by the converter"
        super().__init__(message, **kwargs)

    @classmethod
    def for_variant(
        cls, source_type: str, target_type: Any, converter: Any = None, context: str = ""
    ) -> "UnsupportedConversionError":
        """Create error naming the rejected variant and the requested type."""
        msg = f"Cannot convert an attribute value of type {source_type} into {_type_name(target_type)}"
        if converter is not None:
            msg += f" using {_type_name(converter)}"
        if context:
            msg += f" (at {context})"
        return cls(
            msg,
            source_type=source_type,
            target_type=target_type,
            converter=converter,
            context=context,
        )


class UnsupportedTypeError(ConversionError, LookupError):
    """No converter path exists between the requested types."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "No converter path exists between the requested types"
        super().__init__(message, **kwargs)

    @classmethod
    def no_path(cls, source_type: Any, target_type: Any) -> "UnsupportedTypeError":
        """Create error for a failed registry lookup."""
        return cls(
            f"No scalar converter from {_type_name(source_type)} to {_type_name(target_type)}",
            source_type=source_type,
            target_type=target_type,
        )


class ConfigurationError(ConversionError):
    """Configuration is invalid or missing."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Configuration is invalid or missing"
        super().__init__(message, **kwargs)

    @classmethod
    def invalid_pattern(cls, pattern: str, reason: str) -> "ConfigurationError":
        """Create error for a malformed date-time pattern."""
        return cls(f"Invalid date-time pattern {pattern!r}: {reason}", pattern=pattern, reason=reason)

    @classmethod
    def invalid_timezone(cls, tz_name: object) -> "ConfigurationError":
        """Create error for an unrecognized time-zone identifier."""
        return cls(f"Unknown time zone {tz_name!r}", time_zone=tz_name)

    @classmethod
    def invalid_value(cls, param_name: str, value: object, reason: str = "") -> "ConfigurationError":
        """Create error for invalid value."""
        msg = f"Invalid value for {param_name}: {value!r}"
        if reason:
            msg += f". {reason}"
        return cls(msg, param_name=param_name, value=value)

    @classmethod
    def missing_value(cls, param_name: str, context: str = "") -> "ConfigurationError":
        """Create error for missing value."""
        msg = f"{param_name} is missing or empty"
        if context:
            msg += f": {context}"
        return cls(msg, param_name=param_name)


__all__ = [
    "ConfigurationError",
    "ConversionError",
    "FormatError",
    "UnsupportedConversionError",
    "UnsupportedTypeError",
    "ValidationError",
]
