"""Service messages reported by the backend."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging
from typing import Any, Final

from hmrpc import validator as val
from hmrpc.const import SERVICE_MESSAGE_ARITY
from hmrpc.exceptions import ArityError, TypeMismatch

_LOGGER: Final = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True, slots=True)
class ServiceMessage:
    """An active fault or condition of a device or channel."""

    # Address of the channel that generated the service message.
    address: str
    # CONFIG_PENDING, UNREACH, LOWBAT, ...
    message_id: str
    # Meaning depends on message_id.
    value: Any


def _is_array(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def decode_service_message(value: Any) -> ServiceMessage:
    """Decode a positional [address, message_id, value] record."""
    if not _is_array(value):
        raise TypeMismatch("service message", val.KIND_ARRAY)
    if len(value) != SERVICE_MESSAGE_ARITY:
        raise ArityError(SERVICE_MESSAGE_ARITY, len(value))
    address, message_id, message_value = value
    if not isinstance(address, str):
        raise TypeMismatch("address", val.KIND_STRING)
    if not isinstance(message_id, str):
        raise TypeMismatch("message_id", val.KIND_STRING)
    return ServiceMessage(address=address, message_id=message_id, value=message_value)


def decode_service_messages(value: Any) -> tuple[ServiceMessage, ...]:
    """Decode an array of service messages. Fails on the first invalid entry."""
    if not _is_array(value):
        raise TypeMismatch("service messages", val.KIND_ARRAY)
    service_messages = tuple(decode_service_message(item) for item in value)
    _LOGGER.debug("DECODE_SERVICE_MESSAGES: %i service messages", len(service_messages))
    return service_messages
