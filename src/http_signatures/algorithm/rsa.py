"""RSA PKCS#1 v1.5 signature algorithms (rsa-sha1, rsa-sha256, ...)."""

from __future__ import annotations

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from http_signatures.algorithm.base import SUPPORTED_DIGESTS, Algorithm, signing_bytes, to_bytes

_HASHES: dict[str, type[hashes.HashAlgorithm]] = {
    "sha1": hashes.SHA1,
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
}


class Rsa(Algorithm):
    """RSA signature over the digest of the signing string."""

    def __init__(self, digest: str) -> None:
        if digest not in SUPPORTED_DIGESTS:
            raise ValueError(f"Unsupported digest: {digest}")
        self._digest = digest
        self._hash = _HASHES[digest]

    @property
    def name(self) -> str:
        return f"rsa-{self._digest}"

    def sign(self, key: bytes | str, data: bytes | str) -> bytes:
        """
        Sign data with a PEM-encoded RSA private key.

        PKCS#1 v1.5 padding is deterministic, so the verifier can re-sign
        and compare.

        Raises:
            ValueError: If the key material is not an RSA private key
        """
        try:
            private_key = serialization.load_pem_private_key(to_bytes(key), password=None)
        except (TypeError, UnsupportedAlgorithm) as exc:
            raise ValueError(f"Unusable private key: {exc}") from exc

        if not isinstance(private_key, rsa.RSAPrivateKey):
            raise ValueError("Key is not an RSA private key")

        return private_key.sign(signing_bytes(data), padding.PKCS1v15(), self._hash())
