"""Constants used by hmrpc."""

from __future__ import annotations

from enum import IntEnum, StrEnum
from typing import Final

BIDCOS_WIRED_PORT: Final = 2001
BIDCOS_RF_PORT: Final = 2010

DEFAULT_ENCODING: Final = "ISO-8859-1"
DEFAULT_MAX_WORKERS: Final = 1
DEFAULT_TIMEOUT: Final = 60  # default timeout for a connection
DEFAULT_TLS: Final = False
DEFAULT_VERIFY_TLS: Final = False

ENV_HOST: Final = "HM_HOST"
ENV_PASSWORD: Final = "HM_PASSWORD"
ENV_PORT: Final = "HM_PORT"
ENV_USERNAME: Final = "HM_USERNAME"

ROLE_SEPARATOR: Final = " "
SERVICE_MESSAGE_ARITY: Final = 3

INT32_MIN: Final = -(2**31)
INT32_MAX: Final = 2**31 - 1
UINT8_MAX: Final = 2**8 - 1
FLOAT32_MAX: Final = 3.4028234663852886e38


class DeviceDescriptionField(StrEnum):
    """Enum with the field names of a device description struct."""

    ADDRESS = "ADDRESS"
    AES_ACTIVE = "AES_ACTIVE"
    AVAILABLE_FIRMWARE = "AVAILABLE_FIRMWARE"
    CHILDREN = "CHILDREN"
    DIRECTION = "DIRECTION"
    FIRMWARE = "FIRMWARE"
    FLAGS = "FLAGS"
    GROUP = "GROUP"
    INDEX = "INDEX"
    INTERFACE = "INTERFACE"
    LINK_SOURCE_ROLES = "LINK_SOURCE_ROLES"
    LINK_TARGET_ROLES = "LINK_TARGET_ROLES"
    PARAMSETS = "PARAMSETS"
    PARENT = "PARENT"
    PARENT_TYPE = "PARENT_TYPE"
    RF_ADDRESS = "RF_ADDRESS"
    ROAMING = "ROAMING"
    RX_MODE = "RX_MODE"
    TEAM = "TEAM"
    TEAM_CHANNELS = "TEAM_CHANNELS"
    TEAM_TAG = "TEAM_TAG"
    TYPE = "TYPE"
    UPDATABLE = "UPDATABLE"
    VERSION = "VERSION"


class ParameterDataField(StrEnum):
    """Enum with the field names of a parameter description struct."""

    CONTROL = "CONTROL"
    DEFAULT = "DEFAULT"
    FLAGS = "FLAGS"
    MAX = "MAX"
    MIN = "MIN"
    OPERATIONS = "OPERATIONS"
    SPECIAL = "SPECIAL"
    TAB_ORDER = "TAB_ORDER"
    TYPE = "TYPE"
    UNIT = "UNIT"
    VALUE_LIST = "VALUE_LIST"


class SpecialField(StrEnum):
    """Enum with the field names of a special value struct."""

    ID = "ID"
    VALUE = "VALUE"


class ParameterType(StrEnum):
    """Enum for homematic parameter types."""

    ACTION = "ACTION"  # Usually buttons, send Boolean to trigger
    BOOL = "BOOL"
    ENUM = "ENUM"
    FLOAT = "FLOAT"
    INTEGER = "INTEGER"
    STRING = "STRING"


class ParamsetKey(StrEnum):
    """Enum with paramset keys."""

    LINK = "LINK"
    MASTER = "MASTER"
    SERVICE = "SERVICE"
    VALUES = "VALUES"


class ChannelDirection(IntEnum):
    """Direction of a channel in a direct link."""

    NONE = 0  # channel does not support direct linking
    SENDER = 1
    RECEIVER = 2


class InstallMode(IntEnum):
    """Enum with homematic install modes."""

    NORMAL = 1
    RESET = 2


class DeviceFlag(IntEnum):
    """Enum with flags for UI display of devices and channels."""

    VISIBLE = 0x01
    INTERNAL = 0x02
    DONT_DELETE = 0x08


class DeleteFlag(IntEnum):
    """Enum with flags used when deleting devices."""

    RESET = 0x01  # reset to factory state before deletion
    FORCE = 0x02  # delete even if not reachable
    DEFER = 0x04  # delete at the next opportunity if not reachable


class RxMode(IntEnum):
    """Enum for homematic rx modes."""

    ALWAYS = 0x01
    BURST = 0x02
    CONFIG = 0x04
    WAKEUP = 0x08
    LAZY_CONFIG = 0x10


class Operations(IntEnum):
    """Enum with homematic operations."""

    READ = 0x01
    WRITE = 0x02
    EVENT = 0x04


class Flag(IntEnum):
    """Enum with homematic parameter flags."""

    VISIBLE = 0x01
    INTERNAL = 0x02
    TRANSFORM = 0x04
    SERVICE = 0x08
    STICKY = 0x10
