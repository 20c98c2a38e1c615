"""Signature parameter block: serialization and parsing."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from http_signatures.exceptions import HttpSignatureError, MalformedSignatureHeader
from http_signatures.header_list import DEFAULT_HEADERS, HeaderList

AUTHORIZATION_SCHEME = "Signature"

_PARAM_NAMES = ("keyId", "algorithm", "headers", "signature")
_REQUIRED = ("keyId", "algorithm", "signature")

# name="value" pairs separated by commas, optional whitespace after each comma.
_PARAM_RE = re.compile(r'([A-Za-z]+)="([^"]*)"')
_SEPARATOR_RE = re.compile(r",[ \t]*")


@dataclass(frozen=True)
class SignatureParameters:
    """Parsed ``keyId`` / ``algorithm`` / ``headers`` / ``signature`` block."""

    key_id: str
    algorithm: str
    signature: str
    headers: HeaderList | None = None

    def header_list(self, implicit: HeaderList | Sequence[str] = DEFAULT_HEADERS) -> HeaderList:
        """Declared header list, or the implicit one when omitted."""
        if self.headers is not None:
            return self.headers
        return implicit if isinstance(implicit, HeaderList) else HeaderList(implicit)

    def to_string(self) -> str:
        parts = [f'keyId="{self.key_id}"', f'algorithm="{self.algorithm}"']
        if self.headers is not None:
            parts.append(f'headers="{self.headers.to_string()}"')
        parts.append(f'signature="{self.signature}"')
        return ",".join(parts)

    def to_authorization(self) -> str:
        return f"{AUTHORIZATION_SCHEME} {self.to_string()}"

    @classmethod
    def parse(cls, value: str) -> SignatureParameters:
        """
        Parse a ``Signature`` header value.

        Parameters may appear in any order. Every part of the value must be
        a quoted ``name="value"`` pair with a known name.

        Raises:
            MalformedSignatureHeader: If the value does not match the grammar
        """
        params: dict[str, str] = {}
        pos = 0
        length = len(value)

        while pos < length:
            match = _PARAM_RE.match(value, pos)
            if match is None:
                raise MalformedSignatureHeader(f"Unparseable signature parameters at offset {pos}")

            name, param_value = match.group(1), match.group(2)
            if name not in _PARAM_NAMES:
                raise MalformedSignatureHeader(f"Unknown signature parameter: {name}")
            if name in params:
                raise MalformedSignatureHeader(f"Duplicate signature parameter: {name}")
            params[name] = param_value
            pos = match.end()

            if pos == length:
                break
            separator = _SEPARATOR_RE.match(value, pos)
            if separator is None or separator.end() == length:
                raise MalformedSignatureHeader(f"Expected ',' at offset {pos}")
            pos = separator.end()

        missing = [name for name in _REQUIRED if not params.get(name)]
        if missing:
            raise MalformedSignatureHeader(f"Missing signature parameters: {', '.join(missing)}")

        headers = None
        if "headers" in params:
            try:
                headers = HeaderList.from_string(params["headers"])
            except HttpSignatureError as exc:
                raise MalformedSignatureHeader(f"Invalid headers parameter: {exc}") from exc

        return cls(
            key_id=params["keyId"],
            algorithm=params["algorithm"],
            signature=params["signature"],
            headers=headers,
        )

    @classmethod
    def parse_authorization(cls, value: str) -> SignatureParameters:
        """
        Parse an ``Authorization: Signature ...`` header value.

        Raises:
            MalformedSignatureHeader: If the scheme is not ``Signature``
        """
        scheme, _, params = value.partition(" ")
        if scheme.lower() != AUTHORIZATION_SCHEME.lower() or not params:
            raise MalformedSignatureHeader("Authorization scheme is not Signature")
        return cls.parse(params.lstrip())
