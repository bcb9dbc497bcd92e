"""Encode and decode attribute values in the store's JSON wire format.

Each attribute value is a single-key object whose key is the variant tag::

    {"S": "text"}  {"N": "42"}  {"BOOL": true}  {"NULL": true}  {"B": "<base64>"}
    {"SS": [...]}  {"NS": [...]}  {"BS": [...]}  {"L": [...]}  {"M": {...}}
"""

from __future__ import annotations

import base64
import binascii
from typing import Any, Dict, Mapping, Union

import orjson

from .attribute_value import AttributeValue, AttributeValueType
from .exceptions import FormatError


JsonLike = Union[str, bytes, bytearray, memoryview]


def _encode_binary(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


def _decode_binary(text: Any) -> bytes:
    if not isinstance(text, str):
        raise FormatError.invalid_payload("Binary", text, "base64 text")
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise FormatError(f"Invalid base64 payload: {text!r}", value=text) from exc


def _require_list(tag: str, payload: Any) -> list:
    if not isinstance(payload, list):
        raise FormatError.invalid_payload(tag, payload, "a JSON array")
    return payload


def to_wire(value: AttributeValue) -> Dict[str, Any]:
    """Render an attribute value as its JSON-compatible wire mapping."""
    match value.type:
        case AttributeValueType.B:
            payload: Any = _encode_binary(value.value)
        case AttributeValueType.BS:
            payload = [_encode_binary(member) for member in value.value]
        case AttributeValueType.SS | AttributeValueType.NS:
            payload = list(value.value)
        case AttributeValueType.NULL:
            payload = True
        case AttributeValueType.L:
            payload = [to_wire(item) for item in value.value]
        case AttributeValueType.M:
            payload = {key: to_wire(item) for key, item in value.value.items()}
        case _:
            payload = value.value
    return {value.type.value: payload}


def from_wire(payload: Any) -> AttributeValue:
    """
    Rebuild an attribute value from its wire mapping.

    Raises:
        FormatError: If the mapping is not a single known tag with a valid payload
    """
    if not isinstance(payload, Mapping) or len(payload) != 1:
        raise FormatError.invalid_payload("Attribute value", payload, "a single-key object")
    ((tag, body),) = payload.items()
    try:
        variant = AttributeValueType(tag)
    except ValueError as exc:
        raise FormatError(f"Unknown attribute value tag: {tag!r}", value=tag) from exc

    match variant:
        case AttributeValueType.NULL:
            if body is not True:
                raise FormatError.invalid_payload("Null", body, "true")
            return AttributeValue.from_null()
        case AttributeValueType.B:
            return AttributeValue.from_binary(_decode_binary(body))
        case AttributeValueType.BS:
            return AttributeValue.from_binary_set(_decode_binary(item) for item in _require_list("BS", body))
        case AttributeValueType.SS | AttributeValueType.NS:
            return AttributeValue(variant, _require_list(tag, body))
        case AttributeValueType.L:
            return AttributeValue.from_list(from_wire(item) for item in _require_list("L", body))
        case AttributeValueType.M:
            if not isinstance(body, Mapping):
                raise FormatError.invalid_payload("Map", body, "a JSON object")
            return AttributeValue.from_map({key: from_wire(item) for key, item in body.items()})
        case _:
            return AttributeValue(variant, body)


def item_to_wire(item: Mapping[str, AttributeValue]) -> Dict[str, Any]:
    """Render a whole item (attribute name to value) in wire form."""
    return {name: to_wire(value) for name, value in item.items()}


def item_from_wire(payload: Any) -> Dict[str, AttributeValue]:
    if not isinstance(payload, Mapping):
        raise FormatError.invalid_payload("Item", payload, "a JSON object")
    return {name: from_wire(value) for name, value in payload.items()}


def _loads_json(payload: JsonLike) -> Any:
    match payload:
        case bytes() | bytearray() | memoryview() | str():
            pass
        case _:
            raise FormatError.invalid_payload("Wire payload", payload, "JSON text or bytes")
    try:
        return orjson.loads(payload)
    except orjson.JSONDecodeError as exc:
        raise FormatError("Wire payload is not valid JSON") from exc


def dumps(value: AttributeValue) -> str:
    return orjson.dumps(to_wire(value)).decode("utf-8")


def loads(payload: JsonLike) -> AttributeValue:
    return from_wire(_loads_json(payload))


def dumps_item(item: Mapping[str, AttributeValue]) -> str:
    return orjson.dumps(item_to_wire(item)).decode("utf-8")


def loads_item(payload: JsonLike) -> Dict[str, AttributeValue]:
    return item_from_wire(_loads_json(payload))


__all__ = [
    "dumps",
    "dumps_item",
    "from_wire",
    "item_from_wire",
    "item_to_wire",
    "loads",
    "loads_item",
    "to_wire",
]
