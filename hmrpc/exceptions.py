"""Module for hmrpc exceptions."""

from __future__ import annotations

from typing import Any


class BaseHomematicException(Exception):
    """hmrpc base exception."""

    def __init__(self, name: str, *args: Any) -> None:
        """Init the BaseHomematicException."""
        if args and isinstance(args[0], BaseException):
            self.name = args[0].__class__.__name__
            args = _reduce_args(args=args[0].args)
        else:
            self.name = name
        super().__init__(_reduce_args(args=args))


class ClientException(BaseHomematicException):
    """hmrpc Client exception."""

    def __init__(self, *args: Any) -> None:
        """Init the ClientException."""
        super().__init__("ClientException", *args)


class UnsupportedException(BaseHomematicException):
    """hmrpc unsupported exception."""

    def __init__(self, *args: Any) -> None:
        """Init the UnsupportedException."""
        super().__init__("UnsupportedException", *args)


class NoConnection(BaseHomematicException):
    """hmrpc NoConnection exception."""

    def __init__(self, *args: Any) -> None:
        """Init the NoConnection."""
        super().__init__("NoConnection", *args)


class AuthFailure(BaseHomematicException):
    """hmrpc AuthFailure exception."""

    def __init__(self, *args: Any) -> None:
        """Init the AuthFailure."""
        super().__init__("AuthFailure", *args)


class DecodeException(BaseHomematicException):
    """
    A wire value could not be decoded into a domain entity.

    Decoding of the enclosing entity is aborted as a whole.
    """


class UnknownDiscriminant(DecodeException):
    """The parameter type tag is not one of the known types."""

    def __init__(self, tag: Any) -> None:
        """Init the UnknownDiscriminant."""
        self.tag = tag
        super().__init__("UnknownDiscriminant", f"Unknown parameter type: {tag!r}")


class MissingField(DecodeException):
    """A required wire field is absent."""

    def __init__(self, field: str) -> None:
        """Init the MissingField."""
        self.field = field
        super().__init__("MissingField", f"Required field {field} is missing")


class TypeMismatch(DecodeException):
    """A wire field is present but not of the expected kind."""

    def __init__(self, field: str, expected_kind: str) -> None:
        """Init the TypeMismatch."""
        self.field = field
        self.expected_kind = expected_kind
        super().__init__("TypeMismatch", f"Field {field} is not a valid {expected_kind}")


class ArityError(DecodeException):
    """A positional record does not have the expected number of elements."""

    def __init__(self, expected: int, actual: int) -> None:
        """Init the ArityError."""
        self.expected = expected
        self.actual = actual
        super().__init__("ArityError", f"Expected {expected} elements, got {actual}")


def _reduce_args(args: tuple[Any, ...]) -> tuple[Any, ...] | Any:
    """Return the first arg, if there is only one arg."""
    return args[0] if len(args) == 1 else args
