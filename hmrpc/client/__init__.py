"""The client-object and its methods."""

from __future__ import annotations

from datetime import timedelta
import logging
from typing import Any, Final

from hmrpc import config
from hmrpc.client.xml_rpc import XmlRpcProxy
from hmrpc.const import (
    DEFAULT_TLS,
    DEFAULT_VERIFY_TLS,
    DeviceDescriptionField,
    InstallMode,
    ParamsetKey,
)
from hmrpc.exceptions import (
    BaseHomematicException,
    ClientException,
    DecodeException,
    TypeMismatch,
)
from hmrpc.model.bitfield import NO_DELETE_FLAGS, DeleteFlags
from hmrpc.model.device import DeviceDescription, decode_device_description
from hmrpc.model.parameter import (
    Paramset,
    ParamsetDescription,
    decode_paramset,
    decode_paramset_description,
)
from hmrpc.model.service_message import ServiceMessage, decode_service_messages
from hmrpc.support import build_headers, build_xml_rpc_uri, reduce_args
from hmrpc.validator import KIND_ARRAY

__all__ = ["Client", "XmlRpcProxy", "create_client"]

_LOGGER: Final = logging.getLogger(__name__)


class Client:
    """
    Client to a single HomeMatic interface process.

    Transport failures are raised as ClientException.
    Responses that can not be decoded raise the DecodeException of the decoder.
    """

    def __init__(self, proxy: XmlRpcProxy) -> None:
        """Initialize the Client."""
        self._proxy: Final = proxy

    @property
    def interface_id(self) -> str:
        """Return the interface id of the client."""
        return self._proxy.interface_id

    def stop(self) -> None:
        """Stop the underlying proxy."""
        self._proxy.stop()

    async def list_devices(self) -> tuple[DeviceDescription, ...]:
        """
        Return the descriptions of all devices and channels.

        Entries that can not be decoded are logged and skipped.
        """
        try:
            raw_device_descriptions = await self._proxy.listDevices()
        except BaseHomematicException as ex:
            raise ClientException(f"LIST_DEVICES failed: {reduce_args(args=ex.args)}") from ex

        if not isinstance(raw_device_descriptions, (list, tuple)):
            raise TypeMismatch("device descriptions", KIND_ARRAY)
        device_descriptions: list[DeviceDescription] = []
        for raw_device_description in raw_device_descriptions:
            try:
                device_descriptions.append(decode_device_description(raw_device_description))
            except DecodeException as dex:
                _LOGGER.warning(
                    "LIST_DEVICES: Skipping device %s on %s: %s",
                    _get_address(raw_device_description),
                    self.interface_id,
                    reduce_args(args=dex.args),
                )
        return tuple(device_descriptions)

    async def get_device_description(self, address: str) -> DeviceDescription:
        """Return the description of a device or channel."""
        try:
            raw_device_description = await self._proxy.getDeviceDescription(address)
        except BaseHomematicException as ex:
            raise ClientException(
                f"GET_DEVICE_DESCRIPTION failed for {address}: {reduce_args(args=ex.args)}"
            ) from ex
        return decode_device_description(raw_device_description)

    async def get_paramset_description(
        self, address: str, paramset_key: ParamsetKey | str
    ) -> ParamsetDescription:
        """Return the description of one paramset of a device or channel."""
        try:
            _LOGGER.debug(
                "GET_PARAMSET_DESCRIPTION: address %s, paramset_key %s",
                address,
                paramset_key,
            )
            raw_paramset_description = await self._proxy.getParamsetDescription(
                address, paramset_key
            )
        except BaseHomematicException as ex:
            raise ClientException(
                f"GET_PARAMSET_DESCRIPTION failed for {address}/{paramset_key}: {reduce_args(args=ex.args)}"
            ) from ex
        return decode_paramset_description(raw_paramset_description)

    async def get_paramset_descriptions(
        self, device_description: DeviceDescription
    ) -> dict[str, ParamsetDescription]:
        """Return the descriptions of all paramsets named by a device description."""
        return {
            paramset_key: await self.get_paramset_description(
                address=device_description.address, paramset_key=paramset_key
            )
            for paramset_key in device_description.paramsets
        }

    async def get_paramset_id(self, address: str, paramset_key: ParamsetKey | str) -> str:
        """Return the id of a paramset."""
        try:
            return str(await self._proxy.getParamsetId(address, paramset_key))
        except BaseHomematicException as ex:
            raise ClientException(
                f"GET_PARAMSET_ID failed for {address}/{paramset_key}: {reduce_args(args=ex.args)}"
            ) from ex

    async def get_paramset(self, address: str, paramset_key: ParamsetKey | str) -> Paramset:
        """
        Return a paramset from the backend.

        Address is usually the channel_address,
        but for bidcos devices there is a master paramset at the device.
        """
        try:
            _LOGGER.debug(
                "GET_PARAMSET: address %s, paramset_key %s",
                address,
                paramset_key,
            )
            raw_paramset = await self._proxy.getParamset(address, paramset_key)
        except BaseHomematicException as ex:
            raise ClientException(
                f"GET_PARAMSET failed for {address}/{paramset_key}: {reduce_args(args=ex.args)}"
            ) from ex
        return decode_paramset(raw_paramset)

    async def put_paramset(
        self, address: str, paramset_key: ParamsetKey | str, values: Paramset
    ) -> None:
        """Set paramsets manually."""
        try:
            _LOGGER.debug(
                "PUT_PARAMSET: address %s, paramset_key %s, values %s",
                address,
                paramset_key,
                values,
            )
            await self._proxy.putParamset(address, paramset_key, values)
        except BaseHomematicException as ex:
            raise ClientException(
                f"PUT_PARAMSET failed for {address}/{paramset_key}/{values}: {reduce_args(args=ex.args)}"
            ) from ex

    async def get_value(self, address: str, parameter: str) -> Any:
        """Return a value from the backend."""
        try:
            _LOGGER.debug("GET_VALUE: address %s, parameter %s", address, parameter)
            return await self._proxy.getValue(address, parameter)
        except BaseHomematicException as ex:
            raise ClientException(
                f"GET_VALUE failed for {address}/{parameter}: {reduce_args(args=ex.args)}"
            ) from ex

    async def set_value(self, address: str, parameter: str, value: Any) -> None:
        """Set single value on paramset VALUES."""
        try:
            _LOGGER.debug(
                "SET_VALUE: address %s, parameter %s, value %s", address, parameter, value
            )
            await self._proxy.setValue(address, parameter, value)
        except BaseHomematicException as ex:
            raise ClientException(
                f"SET_VALUE failed for {address}/{parameter}/{value}: {reduce_args(args=ex.args)}"
            ) from ex

    async def determine_parameter(
        self, address: str, paramset_key: ParamsetKey | str, parameter: str
    ) -> None:
        """Ask the backend to determine the current value of a parameter."""
        try:
            await self._proxy.determineParameter(address, paramset_key, parameter)
        except BaseHomematicException as ex:
            raise ClientException(
                f"DETERMINE_PARAMETER failed for {address}/{paramset_key}/{parameter}: {reduce_args(args=ex.args)}"
            ) from ex

    async def delete_device(self, address: str, flags: DeleteFlags = NO_DELETE_FLAGS) -> None:
        """Delete a device from the backend."""
        try:
            _LOGGER.debug("DELETE_DEVICE: address %s, flags %s", address, flags.labels)
            await self._proxy.deleteDevice(address, int(flags))
        except BaseHomematicException as ex:
            raise ClientException(
                f"DELETE_DEVICE failed for {address}: {reduce_args(args=ex.args)}"
            ) from ex

    async def abort_delete_device(self, address: str) -> None:
        """Abort a deferred deletion of a device."""
        try:
            await self._proxy.abortDeleteDevice(address)
        except BaseHomematicException as ex:
            raise ClientException(
                f"ABORT_DELETE_DEVICE failed for {address}: {reduce_args(args=ex.args)}"
            ) from ex

    async def set_install_mode(
        self,
        on: bool = True,
        t: timedelta | None = None,
        mode: InstallMode = InstallMode.NORMAL,
        device_address: str | None = None,
    ) -> None:
        """
        Activate or deactivate install mode on the backend.

        Without a duration only the state is sent. With a duration either
        the install mode or the address of the single device to learn is sent.
        """
        args: list[Any] = [on]
        if t is not None:
            args.append(int(t.total_seconds()))
            if device_address:
                args.append(device_address)
            else:
                args.append(mode)
        try:
            await self._proxy.setInstallMode(*args)
        except BaseHomematicException as ex:
            raise ClientException(f"SET_INSTALL_MODE failed: {reduce_args(args=ex.args)}") from ex

    async def get_install_mode(self) -> timedelta:
        """Get remaining time install mode is active from the backend."""
        try:
            remaining = await self._proxy.getInstallMode()
        except BaseHomematicException as ex:
            raise ClientException(f"GET_INSTALL_MODE failed: {reduce_args(args=ex.args)}") from ex
        return timedelta(seconds=int(remaining))

    async def get_key_mismatch_device(self, reset: bool = False) -> str:
        """Return the address of a device with a mismatching AES key."""
        try:
            return str(await self._proxy.getKeyMissmatchDevice(reset))
        except BaseHomematicException as ex:
            raise ClientException(
                f"GET_KEY_MISMATCH_DEVICE failed: {reduce_args(args=ex.args)}"
            ) from ex

    async def set_temp_key(self, passphrase: str) -> None:
        """Set a temporary AES key."""
        try:
            await self._proxy.setTempKey(passphrase)
        except BaseHomematicException as ex:
            raise ClientException(f"SET_TEMP_KEY failed: {reduce_args(args=ex.args)}") from ex

    async def get_service_messages(self) -> tuple[ServiceMessage, ...]:
        """Return all pending service messages."""
        try:
            raw_service_messages = await self._proxy.getServiceMessages()
        except BaseHomematicException as ex:
            raise ClientException(
                f"GET_SERVICE_MESSAGES failed: {reduce_args(args=ex.args)}"
            ) from ex
        return decode_service_messages(raw_service_messages)


async def create_client(
    host: str,
    port: int = config.DEFAULT_PORT,
    path: str | None = None,
    username: str | None = None,
    password: str | None = None,
    tls: bool = DEFAULT_TLS,
    verify_tls: bool = DEFAULT_VERIFY_TLS,
    interface_id: str | None = None,
) -> Client:
    """Create a client for the interface process listening on host and port."""
    proxy = XmlRpcProxy(
        max_workers=config.MAX_WORKERS,
        interface_id=interface_id or f"{host}-{port}",
        uri=build_xml_rpc_uri(host=host, port=port, path=path, tls=tls),
        headers=build_headers(username=username, password=password),
        tls=tls,
        verify_tls=verify_tls,
    )
    try:
        await proxy.do_init()
    except BaseHomematicException as ex:
        proxy.stop()
        raise ClientException(
            f"CREATE_CLIENT failed for {proxy.interface_id}: {reduce_args(args=ex.args)}"
        ) from ex
    return Client(proxy=proxy)


def _get_address(raw_device_description: Any) -> Any:
    """Return the address of an undecodable device description, if any."""
    if isinstance(raw_device_description, dict):
        return raw_device_description.get(DeviceDescriptionField.ADDRESS)
    return None
