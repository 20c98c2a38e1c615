"""HMAC signature algorithms (hmac-sha1, hmac-sha256, ...)."""

from __future__ import annotations

import hashlib
import hmac

from http_signatures.algorithm.base import SUPPORTED_DIGESTS, Algorithm, signing_bytes, to_bytes


class Hmac(Algorithm):
    """Keyed hash over the signing string with a shared secret."""

    def __init__(self, digest: str) -> None:
        if digest not in SUPPORTED_DIGESTS:
            raise ValueError(f"Unsupported digest: {digest}")
        self._digest = digest
        self._digestmod = getattr(hashlib, digest)

    @property
    def name(self) -> str:
        return f"hmac-{self._digest}"

    def sign(self, key: bytes | str, data: bytes | str) -> bytes:
        return hmac.new(to_bytes(key), signing_bytes(data), self._digestmod).digest()
