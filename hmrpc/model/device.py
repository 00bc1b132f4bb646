"""Device and channel descriptions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
import logging
from typing import Any, Final

import voluptuous as vol

from hmrpc import validator as val
from hmrpc.const import ChannelDirection, DeviceDescriptionField as DDF
from hmrpc.exceptions import TypeMismatch
from hmrpc.model.bitfield import DeviceFlags, RxModes
from hmrpc.model.roles import parse_role_list

_LOGGER: Final = logging.getLogger(__name__)

_SCHEMA_DEVICE_DESCRIPTION: Final = vol.Schema(
    {
        vol.Required(DDF.TYPE.value): val.string,
        vol.Required(DDF.ADDRESS.value): val.string,
        vol.Optional(DDF.RF_ADDRESS.value): val.optional(val.int32),
        vol.Optional(DDF.CHILDREN.value): val.optional(val.string_list),
        vol.Required(DDF.PARENT.value): val.string,
        vol.Optional(DDF.PARENT_TYPE.value): val.optional(val.string),
        vol.Optional(DDF.INDEX.value): val.optional(val.int32),
        vol.Optional(DDF.AES_ACTIVE.value): val.optional(val.int_flag),
        vol.Required(DDF.PARAMSETS.value): val.string_list,
        vol.Optional(DDF.FIRMWARE.value): val.optional(val.string),
        vol.Optional(DDF.AVAILABLE_FIRMWARE.value): val.optional(val.string),
        vol.Optional(DDF.UPDATABLE.value): val.optional(val.boolean),
        vol.Optional(DDF.VERSION.value): val.optional(val.int32),
        vol.Required(DDF.FLAGS.value): val.int32,
        vol.Optional(DDF.LINK_SOURCE_ROLES.value): val.optional(val.string),
        vol.Optional(DDF.LINK_TARGET_ROLES.value): val.optional(val.string),
        vol.Optional(DDF.DIRECTION.value): val.optional(val.channel_direction),
        vol.Optional(DDF.GROUP.value): val.optional(val.string),
        vol.Optional(DDF.TEAM.value): val.optional(val.string),
        vol.Optional(DDF.TEAM_TAG.value): val.optional(val.string),
        vol.Optional(DDF.TEAM_CHANNELS.value): val.optional(val.string_list),
        vol.Optional(DDF.INTERFACE.value): val.optional(val.string),
        vol.Optional(DDF.ROAMING.value): val.optional(val.int_flag),
        vol.Optional(DDF.RX_MODE.value): val.optional(val.int32),
    },
    extra=vol.ALLOW_EXTRA,
)


@dataclass(frozen=True, kw_only=True, slots=True)
class DeviceDescription:
    """
    Description of a device or one of its channels.

    Devices and channels share one shape. A device has an empty parent,
    a channel carries the address of its device as parent.
    """

    type_name: str
    address: str
    paramsets: tuple[str, ...]
    parent: str
    flags: int
    rf_address: int | None = None
    children: tuple[str, ...] = ()
    parent_type: str | None = None
    index: int | None = None
    aes_enabled: bool = False
    firmware: str | None = None
    available_firmware: str | None = None
    updatable: bool = False
    version: int | None = None
    link_source_roles: tuple[str, ...] | None = None
    link_target_roles: tuple[str, ...] | None = None
    direction: ChannelDirection | None = None
    group: str | None = None
    team: str | None = None
    team_tag: str | None = None
    team_channels: tuple[str, ...] | None = None
    interface: str | None = None
    roaming: bool | None = None
    rx_mode: RxModes | None = None

    @property
    def display_flags(self) -> DeviceFlags:
        """Return the UI display flags."""
        return DeviceFlags(raw=self.flags)

    @property
    def visible(self) -> bool:
        """This object should be visible to the end user."""
        return self.display_flags.visible

    @property
    def internal(self) -> bool:
        """This object is only used internally."""
        return self.display_flags.internal

    @property
    def deletable(self) -> bool:
        """This object can be deleted."""
        return self.display_flags.deletable

    @property
    def is_device(self) -> bool:
        """Return if this describes a device."""
        return self.parent == ""

    @property
    def is_channel(self) -> bool:
        """Return if this describes a channel."""
        return self.parent != ""


def decode_device_description(value: Any) -> DeviceDescription:
    """Decode a device description struct."""
    data = val.validate(_SCHEMA_DEVICE_DESCRIPTION, value)
    rx_mode = data.get(DDF.RX_MODE)
    device_description = DeviceDescription(
        type_name=data[DDF.TYPE],
        address=data[DDF.ADDRESS],
        paramsets=data[DDF.PARAMSETS],
        parent=data[DDF.PARENT],
        flags=data[DDF.FLAGS],
        rf_address=data.get(DDF.RF_ADDRESS),
        children=data.get(DDF.CHILDREN) or (),
        parent_type=data.get(DDF.PARENT_TYPE),
        index=data.get(DDF.INDEX),
        aes_enabled=bool(data.get(DDF.AES_ACTIVE)),
        firmware=data.get(DDF.FIRMWARE),
        available_firmware=data.get(DDF.AVAILABLE_FIRMWARE),
        updatable=bool(data.get(DDF.UPDATABLE)),
        version=data.get(DDF.VERSION),
        link_source_roles=parse_role_list(data.get(DDF.LINK_SOURCE_ROLES)),
        link_target_roles=parse_role_list(data.get(DDF.LINK_TARGET_ROLES)),
        direction=data.get(DDF.DIRECTION),
        group=data.get(DDF.GROUP),
        team=data.get(DDF.TEAM),
        team_tag=data.get(DDF.TEAM_TAG),
        team_channels=data.get(DDF.TEAM_CHANNELS),
        interface=data.get(DDF.INTERFACE),
        roaming=data.get(DDF.ROAMING),
        rx_mode=None if rx_mode is None else RxModes(raw=rx_mode),
    )
    _LOGGER.debug(
        "DECODE_DEVICE_DESCRIPTION: %s %s",
        device_description.type_name,
        device_description.address,
    )
    return device_description


def decode_device_descriptions(value: Any) -> tuple[DeviceDescription, ...]:
    """Decode an array of device description structs. Fails on the first invalid entry."""
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes)):
        raise TypeMismatch("device descriptions", val.KIND_ARRAY)
    return tuple(decode_device_description(item) for item in value)


def index_device_descriptions(
    device_descriptions: Iterable[DeviceDescription],
) -> dict[str, DeviceDescription]:
    """Return the device descriptions by address."""
    return {dd.address: dd for dd in device_descriptions}


def get_devices(device_descriptions: Iterable[DeviceDescription]) -> tuple[DeviceDescription, ...]:
    """Return the descriptions of devices, skipping channels."""
    return tuple(dd for dd in device_descriptions if dd.is_device)


def resolve_channels(
    device: DeviceDescription, index: Mapping[str, DeviceDescription]
) -> Iterator[DeviceDescription]:
    """
    Yield the channel descriptions of a device.

    Child addresses that can not be found in index are logged and skipped.
    """
    for channel_address in device.children:
        if (channel := index.get(channel_address)) is not None:
            yield channel
        elif channel_address:
            _LOGGER.warning(
                "RESOLVE_CHANNELS: Unknown channel address %s of device %s",
                channel_address,
                device.address,
            )
