"""Signing keys and key lookup."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from http_signatures.exceptions import UnknownKeyId

_INVALID_KEY_ID_RE = re.compile(r'["\\\x00-\x1f\x7f]')


@dataclass(frozen=True)
class Key:
    """Key id paired with opaque key material."""

    id: str
    secret: bytes | str = field(repr=False)

    def __post_init__(self) -> None:
        # Serialized unescaped inside keyId="...".
        if not self.id or _INVALID_KEY_ID_RE.search(self.id):
            raise ValueError(f"Key id cannot be carried in a signature header: {self.id!r}")


class KeyStore:
    """Read-only mapping from key id to Key."""

    def __init__(
        self,
        keys: Mapping[str, bytes | str] | Iterable[Key],
        default_key_id: str | None = None,
    ) -> None:
        """
        Initialize the key store.

        Args:
            keys: Mapping of key id to key material, or Key instances
            default_key_id: Key used for signing; optional when the store holds one key
        """
        if isinstance(keys, Mapping):
            entries = {key_id: Key(key_id, secret) for key_id, secret in keys.items()}
        else:
            entries = {key.id: key for key in keys}

        self._keys = MappingProxyType(entries)

        if default_key_id is not None and default_key_id not in entries:
            raise UnknownKeyId(default_key_id)
        self._default_key_id = default_key_id

    def fetch(self, key_id: str) -> Key:
        """
        Look up a key by id.

        Raises:
            UnknownKeyId: If the id is not in the store
        """
        try:
            return self._keys[key_id]
        except KeyError:
            raise UnknownKeyId(key_id) from None

    def default_key(self) -> Key:
        """
        Key used for signing.

        Raises:
            UnknownKeyId: If no default is configured and the store is ambiguous
        """
        if self._default_key_id is not None:
            return self._keys[self._default_key_id]
        if len(self._keys) == 1:
            return next(iter(self._keys.values()))
        raise UnknownKeyId("<default>")

    def __contains__(self, key_id: object) -> bool:
        return key_id in self._keys

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f"KeyStore(ids={sorted(self._keys)!r})"
