"""Base class for signature algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod

SUPPORTED_DIGESTS = ("sha1", "sha256", "sha384", "sha512")


def to_bytes(value: bytes | str, encoding: str = "utf-8") -> bytes:
    """Encode text input, pass bytes through."""
    if isinstance(value, str):
        return value.encode(encoding)
    return value


def signing_bytes(data: bytes | str) -> bytes:
    """
    Bytes of a signing string.

    Header values and paths are decoded from the wire as latin-1, so encoding
    back with latin-1 restores the exact bytes that were received.

    Raises:
        UnicodeEncodeError: If the text holds characters outside latin-1
    """
    return to_bytes(data, "latin-1")


class Algorithm(ABC):
    """A named, stateless signing function."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Identifier used in the ``algorithm`` signature parameter."""
        pass

    @abstractmethod
    def sign(self, key: bytes | str, data: bytes | str) -> bytes:
        """
        Sign data with the given key material.

        Args:
            key: Opaque key material (shared secret or PEM private key)
            data: Signing string; text is encoded as latin-1

        Returns:
            Raw signature bytes
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
