"""No-op algorithm for wiring tests."""

from __future__ import annotations

from http_signatures.algorithm.base import Algorithm


class Null(Algorithm):
    """Returns the literal ``b"null"`` regardless of input."""

    @property
    def name(self) -> str:
        return "null"

    def sign(self, key: bytes | str, data: bytes | str) -> bytes:
        return b"null"
