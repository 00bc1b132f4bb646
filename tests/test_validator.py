"""Tests for validators of hmrpc."""

from __future__ import annotations

import pytest
import voluptuous as vol

from hmrpc import validator as val
from hmrpc.const import ChannelDirection
from hmrpc.exceptions import MissingField, TypeMismatch


@pytest.mark.parametrize(
    ("validator", "value", "expected"),
    [
        (val.string, "", ""),
        (val.integer, 2**40, 2**40),
        (val.int32, -(2**31), -(2**31)),
        (val.int32, 2**31 - 1, 2**31 - 1),
        (val.uint8, 0, 0),
        (val.uint8, 255, 255),
        (val.float32, 1, 1.0),
        (val.float32, -0.5, -0.5),
        (val.boolean, False, False),
        (val.int_flag, 0, False),
        (val.int_flag, 1, True),
        (val.enum_index, 2, "2"),
        (val.enum_index, "2", "2"),
        (val.channel_direction, 1, ChannelDirection.SENDER),
        (val.string_list, ["A", "B"], ("A", "B")),
        (val.string_list, [], ()),
        (val.struct_list, [{"ID": "A"}], ({"ID": "A"},)),
    ],
)
def test_valid_values(validator, value, expected) -> None:
    """Test validators with valid wire values."""
    assert validator(value) == expected


@pytest.mark.parametrize(
    ("validator", "value"),
    [
        (val.string, 1),
        (val.string, None),
        (val.integer, True),
        (val.integer, 1.0),
        (val.int32, 2**31),
        (val.int32, -(2**31) - 1),
        (val.uint8, -1),
        (val.uint8, 256),
        (val.float32, True),
        (val.float32, "1.0"),
        (val.float32, 3.5e38),
        (val.boolean, 1),
        (val.int_flag, "1"),
        (val.int_flag, True),
        (val.enum_index, 1.0),
        (val.channel_direction, 3),
        (val.channel_direction, "SENDER"),
        (val.string_list, "AB"),
        (val.string_list, [1]),
        (val.struct_list, ["A"]),
    ],
)
def test_invalid_values(validator, value) -> None:
    """Test validators with invalid wire values."""
    with pytest.raises(val.KindInvalid):
        validator(value)


def test_optional() -> None:
    """Test that optional passes nil through."""
    validator = val.optional(val.int32)
    assert validator(None) is None
    assert validator(1) == 1
    with pytest.raises(val.KindInvalid):
        validator("1")


def test_validate() -> None:
    """Test the translation of voluptuous errors."""
    schema = vol.Schema({vol.Required("A"): val.int32}, extra=vol.ALLOW_EXTRA)
    assert val.validate(schema, {"A": 1, "B": 2}) == {"A": 1, "B": 2}

    with pytest.raises(MissingField) as exc_missing:
        val.validate(schema, {}, field="PARAM")
    assert exc_missing.value.field == "PARAM.A"

    with pytest.raises(TypeMismatch) as exc_type:
        val.validate(schema, {"A": "1"})
    assert exc_type.value.field == "A"
    assert exc_type.value.expected_kind == "32-bit integer"

    with pytest.raises(TypeMismatch) as exc_struct:
        val.validate(schema, [1], field="PARAM")
    assert exc_struct.value.field == "PARAM"
    assert exc_struct.value.expected_kind == "struct"
