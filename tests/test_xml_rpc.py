"""Tests for the XML-RPC proxy of hmrpc."""

from __future__ import annotations

import errno
from typing import Any
from unittest.mock import patch
import xmlrpc.client

import pytest

from hmrpc.client.xml_rpc import XmlRpcProxy, _cleanup_args
from hmrpc.const import InstallMode, ParamsetKey
from hmrpc.exceptions import AuthFailure, ClientException, NoConnection, UnsupportedException
from hmrpc.model.bitfield import DeleteFlags

from tests import const

# pylint: disable=protected-access

_URI = f"http://{const.CCU_HOST}:{const.CCU_PORT}"


def _get_proxy() -> XmlRpcProxy:
    return XmlRpcProxy(max_workers=1, interface_id=const.INTERFACE_ID, uri=_URI)


def test_cleanup_args() -> None:
    """Test that enums and capability sets are sent as plain values."""
    assert _cleanup_args("listDevices", ()) == ("listDevices", ())
    method, args = _cleanup_args(
        "putParamset",
        (const.CHANNEL_ADDRESS, ParamsetKey.MASTER, {"MODE": InstallMode.RESET}),
    )
    assert method == "putParamset"
    assert args == (const.CHANNEL_ADDRESS, "MASTER", {"MODE": 2})
    assert type(args[1]) is str
    assert type(args[2]["MODE"]) is int
    _, args = _cleanup_args(
        "deleteDevice", (const.DEVICE_ADDRESS, DeleteFlags.from_options(force=True))
    )
    assert args == (const.DEVICE_ADDRESS, 2)
    assert type(args[1]) is int


@pytest.mark.asyncio()
async def test_request() -> None:
    """Test that requests run through the executor with cleaned args."""
    proxy = _get_proxy()
    try:
        with patch(
            "xmlrpc.client.ServerProxy._ServerProxy__request", return_value={"STATE": True}
        ) as mock_request:
            result = await proxy.getParamset(const.CHANNEL_ADDRESS, ParamsetKey.VALUES)
        assert result == {"STATE": True}
        assert mock_request.call_args.args[1:] == (
            "getParamset",
            (const.CHANNEL_ADDRESS, "VALUES"),
        )
    finally:
        proxy.stop()


@pytest.mark.asyncio()
@pytest.mark.parametrize(
    ("side_effect", "expected"),
    [
        (xmlrpc.client.Fault(-2, "Unknown Parameter value"), ClientException),
        (OSError(errno.ECONNREFUSED, "Connection refused"), NoConnection),
        (OSError(errno.EPIPE, "Broken pipe"), NoConnection),
        (xmlrpc.client.ProtocolError(_URI, 401, "Unauthorized", {}), AuthFailure),
        (xmlrpc.client.ProtocolError(_URI, 500, "Internal Server Error", {}), NoConnection),
        (TypeError("cannot marshal"), ClientException),
        (ValueError("unexpected"), ClientException),
    ],
)
async def test_request_errors(side_effect: Exception, expected: type[Exception]) -> None:
    """Test the mapping of transport errors."""
    proxy = _get_proxy()
    try:
        with (
            patch(
                "xmlrpc.client.ServerProxy._ServerProxy__request", side_effect=side_effect
            ),
            pytest.raises(expected) as exc,
        ):
            await proxy.getValue(const.CHANNEL_ADDRESS, "STATE")
        assert exc.value.__cause__ is side_effect
    finally:
        proxy.stop()


@pytest.mark.asyncio()
async def test_supported_methods() -> None:
    """Test that methods not announced by the backend are rejected."""

    def request(_proxy: XmlRpcProxy, method: str, params: tuple[Any, ...]) -> Any:
        if method == "system.listMethods":
            return ["system.listMethods", "getValue"]
        return True

    proxy = _get_proxy()
    try:
        with patch("xmlrpc.client.ServerProxy._ServerProxy__request", side_effect=request):
            await proxy.do_init()
            assert proxy.supported_methods == ("system.listMethods", "getValue", "ping")
            assert await proxy.getValue(const.CHANNEL_ADDRESS, "STATE") is True
            with pytest.raises(UnsupportedException):
                await proxy.setValue(const.CHANNEL_ADDRESS, "STATE", False)
    finally:
        proxy.stop()
