"""Verifies signed HTTP messages."""

from __future__ import annotations

import base64
import hmac
from collections.abc import Sequence

from http_signatures import algorithm as algorithms
from http_signatures.common.logging import get_logger
from http_signatures.exceptions import HttpSignatureError, MalformedSignatureHeader
from http_signatures.header_list import DEFAULT_HEADERS, HeaderList
from http_signatures.key import KeyStore
from http_signatures.message import Message
from http_signatures.signature_parameters import SignatureParameters
from http_signatures.signing_string import build_signing_string

logger = get_logger(__name__)


def _single(values: list[str] | None, name: str) -> str | None:
    if values is None:
        return None
    if len(values) != 1:
        raise MalformedSignatureHeader(f"Multiple {name} headers")
    return values[0]


def read_signature_parameters(message: Message) -> SignatureParameters:
    """
    Parse signature parameters from ``Signature``, falling back to ``Authorization``.

    Raises:
        MalformedSignatureHeader: If neither header holds a valid parameter block
    """
    signature = _single(message.header("Signature"), "Signature")
    if signature is not None:
        return SignatureParameters.parse(signature)

    authorization = _single(message.header("Authorization"), "Authorization")
    if authorization is not None:
        return SignatureParameters.parse_authorization(authorization)

    raise MalformedSignatureHeader("No Signature or Authorization header")


class Verifier:
    """Checks message signatures against a key store."""

    def __init__(
        self,
        key_store: KeyStore,
        implicit_headers: Sequence[str] = DEFAULT_HEADERS,
    ) -> None:
        self._key_store = key_store
        self._implicit = HeaderList(implicit_headers)

    @property
    def implicit_headers(self) -> HeaderList:
        return self._implicit

    def verify(self, message: Message) -> SignatureParameters:
        """
        Verify a message and return its signature parameters.

        Raises:
            HttpSignatureError: If the signature cannot be checked or does not match
        """
        params = read_signature_parameters(message)
        key = self._key_store.fetch(params.key_id)
        algorithm = algorithms.create(params.algorithm)

        signing_string = build_signing_string(message, params.header_list(self._implicit))
        try:
            raw = algorithm.sign(key.secret, signing_string)
        except ValueError as exc:
            raise HttpSignatureError(f"Signing failed: {exc}") from exc
        expected = base64.b64encode(raw)

        if not hmac.compare_digest(expected, params.signature.encode("utf-8")):
            raise HttpSignatureError("Signature mismatch")
        return params

    def valid(self, message: Message) -> bool:
        """True if the message carries a valid signature; never raises."""
        try:
            self.verify(message)
        except HttpSignatureError as exc:
            logger.debug(
                "Signature rejected",
                reason=type(exc).__name__,
                detail=str(exc),
            )
            return False
        return True
