"""
Projection of decoded entities for presentation.

The decoders keep the wire representation (empty parent, optional flags).
The functions here map it to plain, JSON-ready structures with camelCase keys:
an empty parent becomes None, capability sets become named booleans and
XML-RPC specific values become strings.
"""

from __future__ import annotations

import base64
from collections.abc import Mapping
from datetime import datetime
from typing import Any
import xmlrpc.client

from hmrpc.model.bitfield import CapabilitySet
from hmrpc.model.device import DeviceDescription
from hmrpc.model.parameter import (
    EnumParameterDescription,
    FloatParameterDescription,
    IntegerParameterDescription,
    ParameterDescription,
    Paramset,
    ParamsetDescription,
)
from hmrpc.model.service_message import ServiceMessage


def to_camel_case(name: str) -> str:
    """Convert a snake_case name to camelCase."""
    first, *rest = name.split("_")
    return first + "".join(part.capitalize() for part in rest)


def optional_parent(parent: str) -> str | None:
    """Return the parent address or None for devices."""
    return parent or None


def project_capability_set(capability_set: CapabilitySet | None) -> dict[str, bool] | None:
    """Return the named booleans of a capability set."""
    if capability_set is None:
        return None
    return {to_camel_case(label): state for label, state in capability_set.as_dict().items()}


def project_value(value: Any) -> Any:
    """Return a JSON-ready copy of an untyped wire value."""
    if isinstance(value, xmlrpc.client.DateTime):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, xmlrpc.client.Binary):
        return base64.b64encode(value.data).decode("ascii")
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(value).decode("ascii")
    if isinstance(value, (list, tuple)):
        return [project_value(item) for item in value]
    if isinstance(value, Mapping):
        return {str(key): project_value(item) for key, item in value.items()}
    return value


def _optional_list(value: tuple[str, ...] | None) -> list[str] | None:
    return None if value is None else list(value)


def project_device_description(device_description: DeviceDescription) -> dict[str, Any]:
    """Return the presentation of a device or channel description."""
    dd = device_description
    return {
        "type": dd.type_name,
        "address": dd.address,
        "rfAddress": dd.rf_address,
        "children": list(dd.children),
        "parent": optional_parent(dd.parent),
        "parentType": dd.parent_type,
        "index": dd.index,
        "aes": dd.aes_enabled,
        "paramSets": list(dd.paramsets),
        "firmware": dd.firmware,
        "availableFirmware": dd.available_firmware,
        "updatable": dd.updatable,
        "version": dd.version,
        "visible": dd.visible,
        "internal": dd.internal,
        "deletable": dd.deletable,
        "linkSourceRoles": _optional_list(dd.link_source_roles),
        "linkTargetRoles": _optional_list(dd.link_target_roles),
        "direction": None if dd.direction is None else dd.direction.name.lower(),
        "group": dd.group,
        "team": dd.team,
        "teamTag": dd.team_tag,
        "teamChannels": _optional_list(dd.team_channels),
        "interface": dd.interface,
        "roaming": dd.roaming,
        "rxMode": project_capability_set(dd.rx_mode),
    }


def project_parameter_description(parameter_description: ParameterDescription) -> dict[str, Any]:
    """Return the presentation of a parameter description."""
    pd = parameter_description
    projection: dict[str, Any] = {
        "type": pd.type.lower(),
        "operations": pd.operations,
        "flags": pd.flags,
        "default": getattr(pd, "default", None),
        "min": getattr(pd, "min", None),
        "max": getattr(pd, "max", None),
        "unit": pd.unit,
        "tabOrder": pd.tab_order,
        "control": pd.control,
    }
    if isinstance(pd, (FloatParameterDescription, IntegerParameterDescription)):
        projection["special"] = (
            None
            if pd.special is None
            else [{"id": special.id, "value": special.value} for special in pd.special]
        )
    if isinstance(pd, EnumParameterDescription):
        projection["values"] = list(pd.values)
    return projection


def project_paramset_description(
    paramset_description: ParamsetDescription,
) -> dict[str, dict[str, Any]]:
    """Return the presentation of a paramset description."""
    return {
        parameter: project_parameter_description(parameter_description)
        for parameter, parameter_description in paramset_description.items()
    }


def project_paramset(paramset: Paramset) -> dict[str, Any]:
    """Return the presentation of a paramset."""
    return {parameter: project_value(value) for parameter, value in paramset.items()}


def project_service_message(service_message: ServiceMessage) -> dict[str, Any]:
    """Return the presentation of a service message."""
    return {
        "address": service_message.address,
        "id": service_message.message_id,
        "value": project_value(service_message.value),
    }
