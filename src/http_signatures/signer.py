"""Signs HTTP messages."""

from __future__ import annotations

import base64
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from http_signatures.algorithm import Algorithm
from http_signatures.common.logging import get_logger
from http_signatures.header_list import DEFAULT_HEADERS, HeaderList
from http_signatures.key import Key
from http_signatures.message import Message
from http_signatures.signature_parameters import SignatureParameters
from http_signatures.signing_string import build_signing_string

logger = get_logger(__name__)


@dataclass(frozen=True)
class SignatureHeaders:
    """Header values produced by signing a message."""

    signature: str
    authorization: str

    def apply(self, message: Message) -> None:
        message.set_header("Signature", self.signature)
        message.set_header("Authorization", self.authorization)


class Signer:
    """Signs messages with one key, algorithm and header list."""

    def __init__(
        self,
        key: Key,
        algorithm: Algorithm,
        header_list: HeaderList | Iterable[str] | None = None,
        implicit_headers: Sequence[str] = DEFAULT_HEADERS,
    ) -> None:
        """
        Initialize the signer.

        Args:
            key: Key whose material is handed to the algorithm
            algorithm: Signature algorithm
            header_list: Headers to cover; defaults to the implicit list
            implicit_headers: List a verifier assumes when ``headers`` is omitted
        """
        self._key = key
        self._algorithm = algorithm
        self._implicit = HeaderList(implicit_headers)
        if header_list is None:
            self._header_list = self._implicit
        elif isinstance(header_list, HeaderList):
            self._header_list = header_list
        else:
            self._header_list = HeaderList(header_list)

    @property
    def header_list(self) -> HeaderList:
        return self._header_list

    def signature_headers(self, message: Message) -> SignatureHeaders:
        """
        Compute the ``Signature`` and ``Authorization`` values without touching the message.

        Raises:
            MissingHeader: If a covered header is absent from the message
        """
        signing_string = build_signing_string(message, self._header_list)
        raw = self._algorithm.sign(self._key.secret, signing_string)

        params = SignatureParameters(
            key_id=self._key.id,
            algorithm=self._algorithm.name,
            signature=base64.b64encode(raw).decode("ascii"),
            headers=None if self._header_list == self._implicit else self._header_list,
        )
        logger.debug(
            "Signed message",
            key_id=self._key.id,
            algorithm=self._algorithm.name,
            headers=self._header_list.to_string(),
        )
        return SignatureHeaders(
            signature=params.to_string(),
            authorization=params.to_authorization(),
        )

    def sign(self, message: Message) -> Message:
        """
        Sign a message in place and return it.

        Both headers are set together; on failure the message is untouched.
        """
        self.signature_headers(message).apply(message)
        return message
