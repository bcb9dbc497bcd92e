"""Tests for the JSON wire codec."""

import orjson
import pytest

from attrconv import AttributeValue, FormatError
from attrconv.wire_codec import dumps, dumps_item, from_wire, item_from_wire, loads, loads_item, to_wire


def test_scalar_variants():
    assert to_wire(AttributeValue.from_string("x")) == {"S": "x"}
    assert to_wire(AttributeValue.from_number("1.5")) == {"N": "1.5"}
    assert to_wire(AttributeValue.from_boolean(False)) == {"BOOL": False}
    assert to_wire(AttributeValue.from_null()) == {"NULL": True}
    assert to_wire(AttributeValue.from_binary(b"\x00\xff")) == {"B": "AP8="}


def test_set_and_collection_variants():
    nested = AttributeValue.from_map(
        {
            "tags": AttributeValue.from_string_set(["a", "b"]),
            "blobs": AttributeValue.from_binary_set([b"\x01"]),
            "scores": AttributeValue.from_list([AttributeValue.from_number_set(["1", "2"])]),
        }
    )
    assert to_wire(nested) == {
        "M": {
            "tags": {"SS": ["a", "b"]},
            "blobs": {"BS": ["AQ=="]},
            "scores": {"L": [{"NS": ["1", "2"]}]},
        }
    }
    assert from_wire(to_wire(nested)) == nested


def test_dumps_and_loads():
    value = AttributeValue.from_list([AttributeValue.from_number("7"), AttributeValue.from_null()])
    text = dumps(value)
    assert orjson.loads(text) == {"L": [{"N": "7"}, {"NULL": True}]}
    assert loads(text) == value
    assert loads(text.encode("utf-8")) == value


def test_items():
    item = {"id": AttributeValue.from_string("abc"), "count": AttributeValue.from_number("3")}
    assert orjson.loads(dumps_item(item)) == {"id": {"S": "abc"}, "count": {"N": "3"}}
    assert loads_item(dumps_item(item)) == item


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"S": "a", "N": "1"},
        {"X": "a"},
        {"NULL": False},
        {"N": 7},
        {"N": "seven"},
        {"B": "not base64!"},
        {"B": 12},
        {"SS": "a"},
        {"SS": []},
        {"L": {"S": "a"}},
        {"M": []},
        {"BOOL": "true"},
        ["S", "a"],
    ],
)
def test_malformed_wire_values(payload):
    with pytest.raises(FormatError):
        from_wire(payload)


def test_item_must_be_object():
    with pytest.raises(FormatError):
        item_from_wire([{"S": "a"}])


@pytest.mark.parametrize("payload", ["{not json", 12, None])
def test_loads_rejects_bad_input(payload):
    with pytest.raises(FormatError):
        loads(payload)
