"""Exceptions raised while signing or verifying HTTP messages."""

from __future__ import annotations


class HttpSignatureError(Exception):
    """Base class for HTTP signature errors."""

    pass


class UnknownAlgorithm(HttpSignatureError):
    """Algorithm name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown algorithm: {name!r}")
        self.name = name


class UnknownKeyId(HttpSignatureError, KeyError):
    """Key id is not present in the key store."""

    def __init__(self, key_id: str) -> None:
        super().__init__(f"Unknown key id: {key_id!r}")
        self.key_id = key_id

    def __str__(self) -> str:
        return str(self.args[0])


class MissingHeader(HttpSignatureError):
    """A header named in the header list is absent from the message."""

    def __init__(self, header: str) -> None:
        super().__init__(f"Header missing from message: {header!r}")
        self.header = header


class MalformedSignatureHeader(HttpSignatureError):
    """Signature parameters do not match the header grammar."""

    pass


class IllegalHeader(HttpSignatureError):
    """Header list contains a name that cannot be signed."""

    def __init__(self, header: str, reason: str) -> None:
        super().__init__(f"Illegal header {header!r}: {reason}")
        self.header = header


class EmptyHeaderList(HttpSignatureError):
    """Header list has no entries."""

    pass
