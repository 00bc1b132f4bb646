"""Typed domain model decoded from XML-RPC responses."""

from __future__ import annotations

from hmrpc.model.bitfield import (
    CapabilitySet,
    DeleteFlags,
    DeviceFlags,
    ParameterFlags,
    ParameterOperations,
    RxModes,
)
from hmrpc.model.device import (
    DeviceDescription,
    decode_device_description,
    decode_device_descriptions,
    get_devices,
    index_device_descriptions,
    resolve_channels,
)
from hmrpc.model.parameter import (
    BoolParameterDescription,
    EnumParameterDescription,
    FloatParameterDescription,
    IntegerParameterDescription,
    ParameterDescription,
    Paramset,
    ParamsetDescription,
    SpecialValue,
    StringParameterDescription,
    decode_parameter_description,
    decode_paramset,
    decode_paramset_description,
)
from hmrpc.model.roles import parse_role_list
from hmrpc.model.service_message import (
    ServiceMessage,
    decode_service_message,
    decode_service_messages,
)

__all__ = [
    "BoolParameterDescription",
    "CapabilitySet",
    "DeleteFlags",
    "DeviceDescription",
    "DeviceFlags",
    "EnumParameterDescription",
    "FloatParameterDescription",
    "IntegerParameterDescription",
    "ParameterDescription",
    "ParameterFlags",
    "ParameterOperations",
    "Paramset",
    "ParamsetDescription",
    "RxModes",
    "ServiceMessage",
    "SpecialValue",
    "StringParameterDescription",
    "decode_device_description",
    "decode_device_descriptions",
    "decode_parameter_description",
    "decode_paramset",
    "decode_paramset_description",
    "decode_service_message",
    "decode_service_messages",
    "get_devices",
    "index_device_descriptions",
    "parse_role_list",
    "resolve_channels",
]
