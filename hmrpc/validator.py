"""
Validator functions used within hmrpc.

Each validator checks one wire value kind of the XML-RPC value tree and raises
KindInvalid on mismatch. validate() runs a voluptuous schema against a wire
struct and translates the first voluptuous error into a DecodeException.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping, Sequence
import contextlib
from typing import Any, Final, TypeVar

import voluptuous as vol

from hmrpc.const import FLOAT32_MAX, INT32_MAX, INT32_MIN, UINT8_MAX, ChannelDirection
from hmrpc.exceptions import DecodeException, MissingField, TypeMismatch

_T = TypeVar("_T")

KIND_STRUCT: Final = "struct"
KIND_ARRAY: Final = "array"
KIND_STRING: Final = "string"


class KindInvalid(vol.Invalid):
    """The wire value is not of the expected kind."""

    def __init__(self, kind: str, path: list[Hashable] | None = None) -> None:
        """Init the KindInvalid."""
        super().__init__(f"expected {kind}", path=path)
        self.kind = kind


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def string(value: Any) -> str:
    """Validate a string."""
    if isinstance(value, str):
        return value
    raise KindInvalid(KIND_STRING)


def integer(value: Any) -> int:
    """Validate an integer."""
    if _is_integer(value):
        return int(value)
    raise KindInvalid("integer")


def int32(value: Any) -> int:
    """Validate a signed 32-bit integer."""
    if _is_integer(value) and INT32_MIN <= value <= INT32_MAX:
        return int(value)
    raise KindInvalid("32-bit integer")


def uint8(value: Any) -> int:
    """Validate an unsigned 8-bit integer."""
    if _is_integer(value) and 0 <= value <= UINT8_MAX:
        return int(value)
    raise KindInvalid("8-bit unsigned integer")


def float32(value: Any) -> float:
    """Validate a number within the 32-bit float range. Integers are accepted."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise KindInvalid("32-bit float")
    if abs(value) > FLOAT32_MAX:
        raise KindInvalid("32-bit float")
    return float(value)


def boolean(value: Any) -> bool:
    """Validate a boolean."""
    if isinstance(value, bool):
        return value
    raise KindInvalid("boolean")


def int_flag(value: Any) -> bool:
    """Validate a 0/1 integer and convert it to bool."""
    if _is_integer(value):
        return value != 0
    raise KindInvalid("0/1 integer")


def enum_index(value: Any) -> str:
    """Validate an enum index. Integer indices are stringified."""
    if isinstance(value, str):
        return value
    if _is_integer(value):
        return str(value)
    raise KindInvalid("enum index")


def channel_direction(value: Any) -> ChannelDirection:
    """Validate a channel direction."""
    if _is_integer(value):
        with contextlib.suppress(ValueError):
            return ChannelDirection(value)
    raise KindInvalid("channel direction")


def string_list(value: Any) -> tuple[str, ...]:
    """Validate an array of strings."""
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        if all(isinstance(item, str) for item in value):
            return tuple(value)
    raise KindInvalid("array of strings")


def struct_list(value: Any) -> tuple[Mapping[str, Any], ...]:
    """Validate an array of structs."""
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        if all(isinstance(item, Mapping) for item in value):
            return tuple(value)
    raise KindInvalid("array of structs")


def optional(validator: Callable[[Any], _T]) -> Callable[[Any], _T | None]:
    """Return a validator that passes a nil wire value through."""

    def validate_optional(value: Any) -> _T | None:
        if value is None:
            return None
        return validator(value)

    return validate_optional


def validate(schema: vol.Schema, value: Any, field: str | None = None) -> dict[str, Any]:
    """Validate a wire struct against a schema."""
    if not isinstance(value, Mapping):
        raise TypeMismatch(field or KIND_STRUCT, KIND_STRUCT)
    try:
        return dict(schema(dict(value)))
    except vol.MultipleInvalid as ex:
        raise to_decode_exception(error=ex.errors[0], field=field) from ex


def to_decode_exception(error: vol.Invalid, field: str | None = None) -> DecodeException:
    """Translate a voluptuous error into a DecodeException."""
    name = ".".join(str(part) for part in ([field] if field else []) + list(error.path))
    if isinstance(error, vol.RequiredFieldInvalid):
        return MissingField(name)
    if isinstance(error, KindInvalid):
        return TypeMismatch(name, error.kind)
    return TypeMismatch(name, error.msg)
