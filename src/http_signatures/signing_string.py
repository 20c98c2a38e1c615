"""Canonical signing string construction."""

from __future__ import annotations

from http_signatures.exceptions import MissingHeader
from http_signatures.header_list import REQUEST_TARGET, HeaderList
from http_signatures.message import Message


def _header_value(message: Message, name: str) -> str:
    if name == REQUEST_TARGET:
        return f"{message.method.lower()} {message.path}"

    values = message.header(name)
    if values is None:
        raise MissingHeader(name)
    return ", ".join(values)


def build_signing_string(message: Message, header_list: HeaderList) -> str:
    """
    Build the string that gets signed.

    One ``"<name>: <value>"`` line per listed header, in list order, joined
    with ``\\n`` and no trailing newline. Multiple values of one header are
    joined with ``", "``.

    Raises:
        MissingHeader: If a listed header is absent from the message
    """
    return "\n".join(f"{name}: {_header_value(message, name)}" for name in header_list)
