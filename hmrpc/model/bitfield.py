"""
Capability sets decoded from integer bitmasks.

A capability set keeps only the raw integer. Every named boolean is computed
from it on access, unknown bits are ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar, Final, Self

from hmrpc.const import DeleteFlag, DeviceFlag, Flag, Operations, RxMode


@dataclass(frozen=True, slots=True)
class CapabilitySet:
    """Named booleans over one integer bitmask."""

    raw: int
    _BITS: ClassVar[Mapping[str, int]] = {}

    def has(self, label: str) -> bool:
        """Return if the bit for label is set."""
        return bool(self.raw & self._BITS[label])

    @property
    def labels(self) -> tuple[str, ...]:
        """Return the labels of all set, known bits."""
        return tuple(label for label, bit in self._BITS.items() if self.raw & bit)

    def as_dict(self) -> dict[str, bool]:
        """Return all known labels with their state."""
        return {label: self.has(label) for label in self._BITS}

    @classmethod
    def from_labels(cls, *labels: str) -> Self:
        """Encode a capability set from labels."""
        raw = 0
        for label in labels:
            raw |= cls._BITS[label]
        return cls(raw=raw)

    def __int__(self) -> int:
        """Return the raw bitmask."""
        return self.raw


class DeviceFlags(CapabilitySet):
    """Flags for UI display of a device or channel."""

    __slots__ = ()
    _BITS: ClassVar[Mapping[str, int]] = {
        "visible": DeviceFlag.VISIBLE,
        "internal": DeviceFlag.INTERNAL,
        "dont_delete": DeviceFlag.DONT_DELETE,
    }

    @property
    def visible(self) -> bool:
        """This object should be visible to the end user."""
        return self.has("visible")

    @property
    def internal(self) -> bool:
        """This object is only used internally and is not visible to the end user."""
        return self.has("internal")

    @property
    def deletable(self) -> bool:
        """This object can be deleted."""
        return not self.has("dont_delete")


class DeleteFlags(CapabilitySet):
    """Flags sent along with a delete request. Never decoded from a response."""

    __slots__ = ()
    _BITS: ClassVar[Mapping[str, int]] = {
        "reset": DeleteFlag.RESET,
        "force": DeleteFlag.FORCE,
        "defer": DeleteFlag.DEFER,
    }

    @classmethod
    def from_options(cls, reset: bool = False, force: bool = False, defer: bool = False) -> Self:
        """Encode the delete options."""
        options = {"reset": reset, "force": force, "defer": defer}
        return cls.from_labels(*(label for label, enabled in options.items() if enabled))

    @property
    def reset(self) -> bool:
        """The device is reset to the factory state before deletion."""
        return self.has("reset")

    @property
    def force(self) -> bool:
        """The device is also deleted when it is not reachable."""
        return self.has("force")

    @property
    def defer(self) -> bool:
        """If the device is not reachable, it is deleted at the next opportunity."""
        return self.has("defer")


class RxModes(CapabilitySet):
    """Receive modes of a device."""

    __slots__ = ()
    _BITS: ClassVar[Mapping[str, int]] = {
        "always": RxMode.ALWAYS,
        "burst": RxMode.BURST,
        "config": RxMode.CONFIG,
        "wakeup": RxMode.WAKEUP,
        "lazy_config": RxMode.LAZY_CONFIG,
    }

    @property
    def always(self) -> bool:
        """The device is permanently on receive."""
        return self.has("always")

    @property
    def burst(self) -> bool:
        """The device operates in wake on radio mode."""
        return self.has("burst")

    @property
    def config(self) -> bool:
        """The device can be reached after pressing the configuration key."""
        return self.has("config")

    @property
    def wakeup(self) -> bool:
        """The device can be woken up after a direct communication with the central."""
        return self.has("wakeup")

    @property
    def lazy_config(self) -> bool:
        """The device can be configured after a normal operation, e.g. a key press."""
        return self.has("lazy_config")


class ParameterOperations(CapabilitySet):
    """Operations supported by a parameter."""

    __slots__ = ()
    _BITS: ClassVar[Mapping[str, int]] = {
        "read": Operations.READ,
        "write": Operations.WRITE,
        "event": Operations.EVENT,
    }

    @property
    def readable(self) -> bool:
        """Return if the parameter can be read."""
        return self.has("read")

    @property
    def writable(self) -> bool:
        """Return if the parameter can be written."""
        return self.has("write")

    @property
    def sends_events(self) -> bool:
        """Return if the parameter sends events."""
        return self.has("event")


class ParameterFlags(CapabilitySet):
    """UI flags of a parameter."""

    __slots__ = ()
    _BITS: ClassVar[Mapping[str, int]] = {
        "visible": Flag.VISIBLE,
        "internal": Flag.INTERNAL,
        "transform": Flag.TRANSFORM,
        "service": Flag.SERVICE,
        "sticky": Flag.STICKY,
    }

    @property
    def visible(self) -> bool:
        """Return if the parameter should be visible to the end user."""
        return self.has("visible")

    @property
    def internal(self) -> bool:
        """Return if the parameter is only used internally."""
        return self.has("internal")

    @property
    def transform(self) -> bool:
        """Return if changes of the parameter may be transformed by the device."""
        return self.has("transform")

    @property
    def service(self) -> bool:
        """Return if the parameter is reported as a service message."""
        return self.has("service")

    @property
    def sticky(self) -> bool:
        """Return if a service message of the parameter is sticky."""
        return self.has("sticky")


NO_DELETE_FLAGS: Final = DeleteFlags(raw=0)
