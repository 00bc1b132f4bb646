"""Helpers for tests."""

from __future__ import annotations

import copy
from typing import Any
from unittest.mock import AsyncMock, Mock

from tests import const


def get_wire(value: Any, **changes: Any) -> Any:
    """
    Return a deep copy of a wire fixture.

    Keys given with None are removed, all others are set.
    """
    result = copy.deepcopy(value)
    for key, new_value in changes.items():
        if new_value is None:
            result.pop(key, None)
        else:
            result[key] = new_value
    return result


def get_mock_proxy(**return_values: Any) -> Mock:
    """Return a proxy mock with async remote methods."""
    proxy = Mock()
    proxy.interface_id = const.INTERFACE_ID
    defaults: dict[str, Any] = {
        "listDevices": [
            get_wire(const.DEVICE),
            get_wire(const.MAINTENANCE_CHANNEL),
            get_wire(const.CHANNEL),
        ],
        "getDeviceDescription": get_wire(const.CHANNEL),
        "getParamsetDescription": get_wire(const.PARAMSET_DESCRIPTION_VALUES),
        "getParamsetId": "switch_values",
        "getParamset": get_wire(const.PARAMSET_VALUES),
        "putParamset": "",
        "getValue": True,
        "setValue": "",
        "determineParameter": "",
        "deleteDevice": "",
        "abortDeleteDevice": "",
        "setInstallMode": "",
        "getInstallMode": 42,
        "getKeyMissmatchDevice": "",
        "setTempKey": "",
        "getServiceMessages": copy.deepcopy(const.SERVICE_MESSAGES),
    }
    defaults.update(return_values)
    for method, return_value in defaults.items():
        setattr(proxy, method, AsyncMock(return_value=return_value))
    return proxy
