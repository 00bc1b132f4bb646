"""Constants for tests."""

from __future__ import annotations

from typing import Any, Final

CCU_HOST: Final = "127.0.0.1"
CCU_PORT: Final = 2010
CCU_USERNAME: Final = "user"
CCU_PASSWORD: Final = "pass"
INTERFACE_ID: Final = "test-BidCos-RF"

DEVICE_ADDRESS: Final = "EQ0123456"
CHANNEL_ADDRESS: Final = "EQ0123456:1"

# A device as reported by listDevices, with only the required fields.
MINIMAL_DEVICE: Final[dict[str, Any]] = {
    "TYPE": "HM-LC-Sw1-FM",
    "ADDRESS": DEVICE_ADDRESS,
    "PARENT": "",
    "PARAMSETS": ["MASTER"],
    "FLAGS": 1,
}

DEVICE: Final[dict[str, Any]] = {
    "TYPE": "HM-LC-Sw1-FM",
    "ADDRESS": DEVICE_ADDRESS,
    "RF_ADDRESS": 1193046,
    "CHILDREN": ["EQ0123456:0", CHANNEL_ADDRESS],
    "PARENT": "",
    "PARAMSETS": ["MASTER", "SERVICE"],
    "FIRMWARE": "2.8",
    "AVAILABLE_FIRMWARE": "2.9",
    "UPDATABLE": True,
    "VERSION": 13,
    "FLAGS": 1,
    "INTERFACE": "KEQ1234567",
    "ROAMING": 0,
    "RX_MODE": 0x01,
}

MAINTENANCE_CHANNEL: Final[dict[str, Any]] = {
    "TYPE": "MAINTENANCE",
    "ADDRESS": "EQ0123456:0",
    "PARENT": DEVICE_ADDRESS,
    "PARENT_TYPE": "HM-LC-Sw1-FM",
    "INDEX": 0,
    "PARAMSETS": ["MASTER", "VALUES"],
    "VERSION": 13,
    "FLAGS": 3,
    "DIRECTION": 0,
    "AES_ACTIVE": 0,
}

CHANNEL: Final[dict[str, Any]] = {
    "TYPE": "SWITCH",
    "ADDRESS": CHANNEL_ADDRESS,
    "PARENT": DEVICE_ADDRESS,
    "PARENT_TYPE": "HM-LC-Sw1-FM",
    "INDEX": 1,
    "PARAMSETS": ["LINK", "MASTER", "VALUES"],
    "VERSION": 13,
    "FLAGS": 1,
    "DIRECTION": 2,
    "AES_ACTIVE": 1,
    "LINK_SOURCE_ROLES": "",
    "LINK_TARGET_ROLES": "SWITCH WCS_TIPTRONIC_SENSOR WEATHER_CS",
    "GROUP": "",
    "TEAM": "",
    "TEAM_TAG": "",
}

PARAMETER_STATE: Final[dict[str, Any]] = {
    "TYPE": "BOOL",
    "OPERATIONS": 7,
    "FLAGS": 1,
    "DEFAULT": False,
    "MIN": False,
    "MAX": True,
    "UNIT": "",
    "TAB_ORDER": 0,
    "CONTROL": "SWITCH.STATE",
    "ID": "STATE",
}

PARAMETER_INHIBIT: Final[dict[str, Any]] = {
    "TYPE": "BOOL",
    "OPERATIONS": 7,
    "FLAGS": 1,
    "DEFAULT": False,
    "MIN": False,
    "MAX": True,
    "UNIT": "",
    "TAB_ORDER": 1,
}

PARAMETER_PRESS_SHORT: Final[dict[str, Any]] = {
    "TYPE": "ACTION",
    "OPERATIONS": 6,
    "FLAGS": 1,
    "DEFAULT": False,
    "MIN": False,
    "MAX": True,
    "UNIT": "",
    "TAB_ORDER": 2,
}

PARAMETER_ON_TIME: Final[dict[str, Any]] = {
    "TYPE": "FLOAT",
    "OPERATIONS": 2,
    "FLAGS": 1,
    "DEFAULT": 0.0,
    "MIN": 0.0,
    "MAX": 8580000,
    "UNIT": "s",
    "TAB_ORDER": 3,
    "SPECIAL": [{"ID": "NOT_USED", "VALUE": 111600.0}],
}

PARAMETER_RSSI: Final[dict[str, Any]] = {
    "TYPE": "INTEGER",
    "OPERATIONS": 5,
    "FLAGS": 1,
    "DEFAULT": 0,
    "MIN": -128,
    "MAX": 127,
    "UNIT": "dBm",
    "SPECIAL": [{"ID": "UNKNOWN", "VALUE": 1}],
}

PARAMETER_WORKING: Final[dict[str, Any]] = {
    "TYPE": "ENUM",
    "OPERATIONS": 5,
    "FLAGS": 3,
    "DEFAULT": 0,
    "MIN": 0,
    "MAX": 2,
    "VALUE_LIST": ["A", "B", "C"],
}

PARAMETER_DEVICE_NAME: Final[dict[str, Any]] = {
    "TYPE": "STRING",
    "OPERATIONS": 3,
    "FLAGS": 1,
    "DEFAULT": "",
    "MIN": "",
    "MAX": "",
}

PARAMSET_DESCRIPTION_VALUES: Final[dict[str, Any]] = {
    "STATE": PARAMETER_STATE,
    "INHIBIT": PARAMETER_INHIBIT,
    "PRESS_SHORT": PARAMETER_PRESS_SHORT,
    "ON_TIME": PARAMETER_ON_TIME,
    "RSSI_DEVICE": PARAMETER_RSSI,
    "WORKING": PARAMETER_WORKING,
}

PARAMSET_VALUES: Final[dict[str, Any]] = {
    "STATE": True,
    "INHIBIT": False,
    "ON_TIME": 0.0,
    "WORKING": 0,
}

SERVICE_MESSAGES: Final[list[list[Any]]] = [
    ["ABC1234:1", "LOWBAT", True],
    ["EQ0123456:0", "CONFIG_PENDING", True],
    ["EQ0123456:0", "UNREACH", False],
]
