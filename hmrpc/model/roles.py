"""Parser for the link role lists of a channel."""

from __future__ import annotations

from hmrpc.const import ROLE_SEPARATOR


def parse_role_list(value: str | None) -> tuple[str, ...] | None:
    """
    Parse a space separated role list.

    An absent field stays absent, an empty string is an empty list.
    Tokens keep their order and are not deduplicated.
    """
    if value is None:
        return None
    if value == "":
        return ()
    return tuple(value.split(ROLE_SEPARATOR))
