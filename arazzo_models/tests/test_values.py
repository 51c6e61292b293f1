from __future__ import annotations

import math

import pytest

from arazzo_models.errors import NumericParseFailure, UnsupportedKey, UnsupportedValueKind
from arazzo_models.loader.formats import JSON_FORMAT, YAML_FORMAT
from arazzo_models.loader.yaml_tree import compose_yaml
from arazzo_models.values import (
    I64_MIN,
    U64_MAX,
    ArrayValue,
    BooleanValue,
    FloatValue,
    IntegerValue,
    NullValue,
    ObjectValue,
    StringValue,
    UIntegerValue,
    integer,
)


def _yaml_value(text: str):
    return YAML_FORMAT.to_any_value(compose_yaml(text))


def test_json_numbers_keep_their_numeric_class() -> None:
    assert JSON_FORMAT.to_any_value(2) == UIntegerValue(2)
    assert JSON_FORMAT.to_any_value(0) == UIntegerValue(0)
    assert JSON_FORMAT.to_any_value(-100) == IntegerValue(-100)
    assert JSON_FORMAT.to_any_value(1.234) == FloatValue(1.234)


def test_json_integer_range_boundaries() -> None:
    assert integer(U64_MAX) == UIntegerValue(U64_MAX)
    assert integer(I64_MIN) == IntegerValue(I64_MIN)
    assert integer(U64_MAX + 1) == FloatValue(float(U64_MAX + 1))
    assert integer(I64_MIN - 1) == FloatValue(float(I64_MIN - 1))


def test_json_booleans_are_not_numbers() -> None:
    assert JSON_FORMAT.to_any_value(True) == BooleanValue(True)
    assert JSON_FORMAT.to_any_value(False) == BooleanValue(False)


def test_json_containers_convert_recursively() -> None:
    value = JSON_FORMAT.to_any_value({"list": [1, "a", None], "nested": {"ok": True}})

    assert value == ObjectValue(
        {
            "list": ArrayValue([UIntegerValue(1), StringValue("a"), NullValue()]),
            "nested": ObjectValue({"ok": BooleanValue(True)}),
        }
    )
    assert value.kind == "Object"


def test_json_non_string_key_is_rejected() -> None:
    with pytest.raises(UnsupportedKey) as excinfo:
        JSON_FORMAT.to_any_value({"outer": {1: "a"}})

    assert excinfo.value.key_kind == "Number"


def test_json_unknown_python_type_is_rejected() -> None:
    with pytest.raises(UnsupportedValueKind) as excinfo:
        JSON_FORMAT.to_any_value({"a": {1, 2}})

    assert excinfo.value.kind == "set"


def test_yaml_integers_are_always_signed() -> None:
    assert _yaml_value("2") == IntegerValue(2)
    assert _yaml_value("-100") == IntegerValue(-100)


def test_yaml_scalars_map_directly() -> None:
    assert _yaml_value("1.234") == FloatValue(1.234)
    assert _yaml_value("true") == BooleanValue(True)
    assert _yaml_value("~") == NullValue()
    assert _yaml_value("hello") == StringValue("hello")
    assert _yaml_value("'2'") == StringValue("2")


def test_yaml_core_schema_scalars() -> None:
    for text in ("NO", "no", "yes", "Y", "on", "off", "1:30"):
        assert _yaml_value(text) == StringValue(text)

    assert _yaml_value("True") == BooleanValue(True)
    assert _yaml_value("FALSE") == BooleanValue(False)
    assert _yaml_value("010") == IntegerValue(10)
    assert _yaml_value("0o17") == IntegerValue(15)
    assert _yaml_value("0x1F") == IntegerValue(31)
    assert _yaml_value("1e3") == FloatValue(1000.0)
    assert _yaml_value("-.inf") == FloatValue(-math.inf)


def test_yaml_special_floats() -> None:
    assert _yaml_value(".inf") == FloatValue(math.inf)
    assert math.isnan(_yaml_value(".nan").value)


def test_yaml_timestamps_read_as_text() -> None:
    assert _yaml_value("2024-01-01") == StringValue("2024-01-01")


def test_yaml_integer_outside_signed_range_fails() -> None:
    with pytest.raises(NumericParseFailure) as excinfo:
        _yaml_value("9223372036854775808")

    assert excinfo.value.raw_text == "9223372036854775808"


def test_yaml_malformed_tagged_numbers_fail() -> None:
    with pytest.raises(NumericParseFailure):
        _yaml_value("!!float abc")

    with pytest.raises(NumericParseFailure):
        _yaml_value("!!int abc")


def test_yaml_alias_is_rejected() -> None:
    with pytest.raises(UnsupportedValueKind) as excinfo:
        _yaml_value("a: &anchor 1\nb: *anchor\n")

    assert excinfo.value.kind == "Alias"


def test_yaml_unknown_tag_is_rejected() -> None:
    with pytest.raises(UnsupportedValueKind) as excinfo:
        _yaml_value("!custom thing")

    assert excinfo.value.kind == "!custom"


def test_yaml_non_string_key_is_rejected() -> None:
    with pytest.raises(UnsupportedKey) as excinfo:
        _yaml_value("{1: a}")

    assert excinfo.value.key_kind == "Integer"


def test_yaml_first_nested_error_aborts() -> None:
    with pytest.raises(NumericParseFailure):
        _yaml_value("items:\n  - 1\n  - !!int nope\n")


def test_to_plain_sorts_object_keys() -> None:
    value = ObjectValue({"b": UIntegerValue(1), "a": ArrayValue([StringValue("x")])})

    plain = value.to_plain()

    assert list(plain) == ["a", "b"]
    assert plain == {"a": ["x"], "b": 1}


def test_values_are_immutable() -> None:
    value = ArrayValue([StringValue("x")])

    assert isinstance(value.items, tuple)
    with pytest.raises(AttributeError):
        value.items = ()  # type: ignore[misc]
