"""Convenience bundle of a key store with a ready signer and verifier."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from http_signatures import algorithm as algorithms
from http_signatures.common.settings import Settings, get_settings
from http_signatures.header_list import DEFAULT_HEADERS
from http_signatures.key import Key, KeyStore
from http_signatures.signer import Signer
from http_signatures.verifier import Verifier


class Context:
    """Signing and verification configured from one set of keys."""

    def __init__(
        self,
        keys: KeyStore | Mapping[str, bytes | str] | Iterable[Key],
        signing_key_id: str | None = None,
        algorithm: str = "hmac-sha256",
        headers: Sequence[str] | None = None,
        implicit_headers: Sequence[str] = DEFAULT_HEADERS,
    ) -> None:
        """
        Initialize the context.

        Args:
            keys: Key store, or key material to build one from
            signing_key_id: Key used by the signer
            algorithm: Name of the signing algorithm
            headers: Headers covered by the signer; defaults to the implicit list
            implicit_headers: List assumed when a signature omits ``headers``

        Raises:
            UnknownAlgorithm: If the algorithm name is not registered
            UnknownKeyId: If the signing key cannot be resolved
        """
        if isinstance(keys, KeyStore):
            self.key_store = keys
        else:
            self.key_store = KeyStore(keys, default_key_id=signing_key_id)

        key = (
            self.key_store.fetch(signing_key_id)
            if signing_key_id is not None
            else self.key_store.default_key()
        )
        self.signer = Signer(
            key=key,
            algorithm=algorithms.create(algorithm),
            header_list=headers,
            implicit_headers=implicit_headers,
        )
        self.verifier = Verifier(self.key_store, implicit_headers=implicit_headers)

    @classmethod
    def from_settings(
        cls,
        keys: KeyStore | Mapping[str, bytes | str] | Iterable[Key],
        settings: Settings | None = None,
    ) -> Context:
        """Build a context from settings, defaulting to the environment."""
        if settings is None:
            settings = get_settings()

        return cls(
            keys,
            signing_key_id=settings.signing_key_id,
            algorithm=settings.algorithm,
            headers=settings.signed_headers,
            implicit_headers=settings.implicit_headers,
        )
