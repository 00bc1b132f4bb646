"""
Parameter descriptions and paramsets.

A parameter description is one of six variants, selected by its TYPE field.
BOOL and ACTION share one shape; the tag is kept in the type field so that
actions stay distinguishable from persisted booleans.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
import logging
from typing import Any, Final

import voluptuous as vol

from hmrpc import validator as val
from hmrpc.const import ParameterDataField as PDF, ParameterType, SpecialField
from hmrpc.exceptions import DecodeException, TypeMismatch, UnknownDiscriminant
from hmrpc.model.bitfield import ParameterFlags, ParameterOperations

_LOGGER: Final = logging.getLogger(__name__)

# parameter id -> wire value, used for reading and writing
Paramset = dict[str, Any]

_SCHEMA_TYPE: Final = vol.Schema(
    {vol.Required(PDF.TYPE.value): val.string},
    extra=vol.ALLOW_EXTRA,
)

_COMMON_FIELDS: Final = {
    vol.Required(PDF.TYPE.value): val.string,
    vol.Optional(PDF.UNIT.value): val.optional(val.string),
    vol.Optional(PDF.TAB_ORDER.value): val.optional(val.int32),
    vol.Optional(PDF.CONTROL.value): val.optional(val.string),
}


def _build_schema(
    flags_validator: Callable[[Any], int],
    value_validator: Callable[[Any], Any],
    extra_fields: Mapping[vol.Marker, Any] | None = None,
) -> vol.Schema:
    """Return the schema of one parameter variant."""
    return vol.Schema(
        {
            **_COMMON_FIELDS,
            vol.Required(PDF.OPERATIONS.value): flags_validator,
            vol.Required(PDF.FLAGS.value): flags_validator,
            vol.Required(PDF.DEFAULT.value): value_validator,
            vol.Required(PDF.MIN.value): value_validator,
            vol.Required(PDF.MAX.value): value_validator,
            **(extra_fields or {}),
        },
        extra=vol.ALLOW_EXTRA,
    )


_SCHEMA_FLOAT: Final = _build_schema(
    flags_validator=val.int32,
    value_validator=val.float32,
    extra_fields={vol.Optional(PDF.SPECIAL.value): val.optional(val.struct_list)},
)
_SCHEMA_INTEGER: Final = _build_schema(
    flags_validator=val.int32,
    value_validator=val.int32,
    extra_fields={vol.Optional(PDF.SPECIAL.value): val.optional(val.struct_list)},
)
_SCHEMA_BOOL: Final = _build_schema(flags_validator=val.int32, value_validator=val.boolean)
# ENUM carries operations and flags as 8-bit values.
_SCHEMA_ENUM: Final = _build_schema(
    flags_validator=val.uint8,
    value_validator=val.enum_index,
    extra_fields={vol.Required(PDF.VALUE_LIST.value): val.string_list},
)
_SCHEMA_STRING: Final = _build_schema(flags_validator=val.int32, value_validator=val.string)

_SCHEMA_SPECIAL_FLOAT: Final = vol.Schema(
    {
        vol.Required(SpecialField.ID.value): val.string,
        vol.Required(SpecialField.VALUE.value): val.float32,
    },
    extra=vol.ALLOW_EXTRA,
)
_SCHEMA_SPECIAL_INTEGER: Final = vol.Schema(
    {
        vol.Required(SpecialField.ID.value): val.string,
        vol.Required(SpecialField.VALUE.value): val.int32,
    },
    extra=vol.ALLOW_EXTRA,
)


@dataclass(frozen=True, kw_only=True, slots=True)
class SpecialValue:
    """A named preset of a numeric parameter, e.g. NOT_USED -> 111600."""

    id: str
    value: float | int


@dataclass(frozen=True, kw_only=True, slots=True)
class ParameterDescription:
    """Fields shared by all parameter variants."""

    type: ParameterType
    # Bitfield: 1=Read, 2=Write, 4=Event
    operations: int
    # Bitfield: 0x01=Visible, 0x02=Internal, 0x04=Transform, 0x08=Service, 0x10=Sticky
    flags: int
    unit: str | None = None
    tab_order: int | None = None
    control: str | None = None

    @property
    def operation_set(self) -> ParameterOperations:
        """Return the supported operations."""
        return ParameterOperations(raw=self.operations)

    @property
    def flag_set(self) -> ParameterFlags:
        """Return the UI flags."""
        return ParameterFlags(raw=self.flags)


@dataclass(frozen=True, kw_only=True, slots=True)
class FloatParameterDescription(ParameterDescription):
    """Description of a FLOAT parameter."""

    default: float
    min: float
    max: float
    special: tuple[SpecialValue, ...] | None = None


@dataclass(frozen=True, kw_only=True, slots=True)
class IntegerParameterDescription(ParameterDescription):
    """Description of an INTEGER parameter."""

    default: int
    min: int
    max: int
    special: tuple[SpecialValue, ...] | None = None


@dataclass(frozen=True, kw_only=True, slots=True)
class BoolParameterDescription(ParameterDescription):
    """Description of a BOOL or ACTION parameter."""

    default: bool
    min: bool
    max: bool

    @property
    def is_action(self) -> bool:
        """Return if the parameter is a command rather than a persisted value."""
        return self.type == ParameterType.ACTION


@dataclass(frozen=True, kw_only=True, slots=True)
class EnumParameterDescription(ParameterDescription):
    """
    Description of an ENUM parameter.

    default, min and max are indices into values, kept as strings.
    """

    default: str
    min: str
    max: str
    values: tuple[str, ...] = ()


@dataclass(frozen=True, kw_only=True, slots=True)
class StringParameterDescription(ParameterDescription):
    """Description of a STRING parameter."""

    default: str
    min: str
    max: str


# parameter id -> parameter description
ParamsetDescription = dict[str, ParameterDescription]


def _get_common(data: Mapping[str, Any]) -> dict[str, Any]:
    """Return the fields shared by all variants."""
    return {
        "type": ParameterType(data[PDF.TYPE]),
        "operations": data[PDF.OPERATIONS],
        "flags": data[PDF.FLAGS],
        "unit": data.get(PDF.UNIT),
        "tab_order": data.get(PDF.TAB_ORDER),
        "control": data.get(PDF.CONTROL),
        "default": data[PDF.DEFAULT],
        "min": data[PDF.MIN],
        "max": data[PDF.MAX],
    }


def _decode_specials(
    specials: tuple[Mapping[str, Any], ...] | None, schema: vol.Schema, field: str | None
) -> tuple[SpecialValue, ...] | None:
    """Decode the special values of a numeric parameter."""
    if specials is None:
        return None
    prefix = f"{field}.{PDF.SPECIAL}" if field else PDF.SPECIAL.value
    result: list[SpecialValue] = []
    for idx, special in enumerate(specials):
        data = val.validate(schema, special, field=f"{prefix}.{idx}")
        result.append(SpecialValue(id=data[SpecialField.ID], value=data[SpecialField.VALUE]))
    return tuple(result)


def _decode_float(value: Any, field: str | None) -> FloatParameterDescription:
    data = val.validate(_SCHEMA_FLOAT, value, field=field)
    return FloatParameterDescription(
        **_get_common(data),
        special=_decode_specials(data.get(PDF.SPECIAL), _SCHEMA_SPECIAL_FLOAT, field),
    )


def _decode_integer(value: Any, field: str | None) -> IntegerParameterDescription:
    data = val.validate(_SCHEMA_INTEGER, value, field=field)
    return IntegerParameterDescription(
        **_get_common(data),
        special=_decode_specials(data.get(PDF.SPECIAL), _SCHEMA_SPECIAL_INTEGER, field),
    )


def _decode_bool(value: Any, field: str | None) -> BoolParameterDescription:
    data = val.validate(_SCHEMA_BOOL, value, field=field)
    return BoolParameterDescription(**_get_common(data))


def _decode_enum(value: Any, field: str | None) -> EnumParameterDescription:
    data = val.validate(_SCHEMA_ENUM, value, field=field)
    return EnumParameterDescription(**_get_common(data), values=data[PDF.VALUE_LIST])


def _decode_string(value: Any, field: str | None) -> StringParameterDescription:
    data = val.validate(_SCHEMA_STRING, value, field=field)
    return StringParameterDescription(**_get_common(data))


_PARAMETER_DECODERS: Final[Mapping[str, Callable[[Any, str | None], ParameterDescription]]] = {
    ParameterType.ACTION: _decode_bool,
    ParameterType.BOOL: _decode_bool,
    ParameterType.ENUM: _decode_enum,
    ParameterType.FLOAT: _decode_float,
    ParameterType.INTEGER: _decode_integer,
    ParameterType.STRING: _decode_string,
}


def decode_parameter_description(value: Any, field: str | None = None) -> ParameterDescription:
    """
    Decode a parameter description struct.

    The TYPE field selects the variant. field is used as prefix for the
    field names reported in decode errors.
    """
    tag = val.validate(_SCHEMA_TYPE, value, field=field)[PDF.TYPE]
    if (decoder := _PARAMETER_DECODERS.get(tag)) is None:
        raise UnknownDiscriminant(tag)
    return decoder(value, field)


def decode_paramset_description(value: Any) -> ParamsetDescription:
    """Decode a paramset description. Fails if any parameter fails."""
    if not isinstance(value, Mapping):
        raise TypeMismatch("paramset description", val.KIND_STRUCT)
    paramset_description: ParamsetDescription = {}
    for parameter, parameter_data in value.items():
        try:
            paramset_description[parameter] = decode_parameter_description(
                parameter_data, field=parameter
            )
        except DecodeException as ex:
            _LOGGER.debug("DECODE_PARAMSET_DESCRIPTION: %s failed: %s", parameter, ex)
            raise
    return paramset_description


def decode_paramset(value: Any) -> Paramset:
    """Decode a paramset. Values are passed through uninterpreted."""
    if not isinstance(value, Mapping):
        raise TypeMismatch("paramset", val.KIND_STRUCT)
    return dict(value)
