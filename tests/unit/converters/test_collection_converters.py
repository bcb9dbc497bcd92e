"""Tests for list and map attribute converters."""

import pytest

from attrconv import (
    AttributeValue,
    ConversionContext,
    FloatAttributeConverter,
    IntegerAttributeConverter,
    ListAttributeConverter,
    MapAttributeConverter,
    UnsupportedConversionError,
    ValidationError,
)


@pytest.fixture
def int_list():
    return ListAttributeConverter.create(IntegerAttributeConverter.create())


@pytest.fixture
def float_map():
    return MapAttributeConverter.create(FloatAttributeConverter.create())


class TestListConverter:
    def test_type_token(self, int_list):
        assert int_list.type() == list[int]

    def test_round_trip(self, int_list):
        stored = int_list.to_attribute_value([1, 2, 3])
        assert stored == AttributeValue.from_list(
            [AttributeValue.from_number("1"), AttributeValue.from_number("2"), AttributeValue.from_number("3")]
        )
        assert int_list.from_attribute_value(stored) == [1, 2, 3]

    def test_empty_list(self, int_list):
        assert int_list.from_attribute_value(int_list.to_attribute_value([])) == []

    def test_accepts_any_iterable(self, int_list):
        assert int_list.to_attribute_value(range(2)) == int_list.to_attribute_value((0, 1))

    @pytest.mark.parametrize("value", ["123", b"12", {"a": 1}, 5])
    def test_rejects_non_sequences(self, int_list, value):
        with pytest.raises(ValidationError, match="must be a sequence"):
            int_list.to_attribute_value(value)

    def test_element_error_names_index(self, int_list):
        with pytest.raises(ValidationError, match=r"\(at scores\[1\]\)"):
            int_list.to_attribute_value([1, 2.5], ConversionContext.for_attribute("scores"))

    def test_read_error_names_index(self, int_list):
        stored = AttributeValue.from_list([AttributeValue.from_number("1"), AttributeValue.from_boolean(True)])
        with pytest.raises(UnsupportedConversionError) as excinfo:
            int_list.from_attribute_value(stored, ConversionContext.for_attribute("scores"))
        assert excinfo.value.context == "scores[1]"

    def test_rejects_non_list_variant(self, int_list):
        with pytest.raises(UnsupportedConversionError, match="using ListAttributeConverter"):
            int_list.from_attribute_value(AttributeValue.from_number_set(["1"]))


class TestMapConverter:
    def test_type_token(self, float_map):
        assert float_map.type() == dict[str, float]

    def test_round_trip(self, float_map):
        value = {"low": 1.25, "high": 9.5}
        stored = float_map.to_attribute_value(value)
        assert stored.value["low"] == AttributeValue.from_number("1.25")
        assert float_map.from_attribute_value(stored) == value

    def test_rejects_non_string_keys(self, float_map):
        with pytest.raises(ValidationError, match="map keys must be str"):
            float_map.to_attribute_value({1: 1.0})

    def test_rejects_non_mapping(self, float_map):
        with pytest.raises(ValidationError, match="must be a mapping"):
            float_map.to_attribute_value([("a", 1.0)])

    def test_value_error_names_key(self, float_map):
        with pytest.raises(ValidationError) as excinfo:
            float_map.to_attribute_value({"ok": 1.0, "bad": float("inf")}, ConversionContext.for_attribute("bands"))
        assert excinfo.value.context == "bands.bad"

    def test_nested_collections(self):
        converter = MapAttributeConverter(ListAttributeConverter(IntegerAttributeConverter()))
        assert converter.type() == dict[str, list[int]]
        stored = converter.to_attribute_value({"a": [1], "b": []})
        assert converter.from_attribute_value(stored) == {"a": [1], "b": []}

        broken = AttributeValue.from_map({"a": AttributeValue.from_list([AttributeValue.from_boolean(True)])})
        with pytest.raises(UnsupportedConversionError) as excinfo:
            converter.from_attribute_value(broken, ConversionContext.for_attribute("groups"))
        assert excinfo.value.context == "groups.a[0]"
