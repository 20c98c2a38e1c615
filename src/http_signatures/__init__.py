"""
http_signatures: signing and verifying HTTP messages.

Implements the draft-cavage HTTP Signatures scheme: a canonical signing
string built from selected headers, signed with HMAC or RSA and carried in
the ``Signature`` / ``Authorization`` headers.
"""

from http_signatures.algorithm import Algorithm, create
from http_signatures.context import Context
from http_signatures.exceptions import (
    EmptyHeaderList,
    HttpSignatureError,
    IllegalHeader,
    MalformedSignatureHeader,
    MissingHeader,
    UnknownAlgorithm,
    UnknownKeyId,
)
from http_signatures.header_list import DEFAULT_HEADERS, REQUEST_TARGET, HeaderList
from http_signatures.key import Key, KeyStore
from http_signatures.message import HttpMessage, Message, RequestMessage
from http_signatures.signature_parameters import SignatureParameters
from http_signatures.signer import SignatureHeaders, Signer
from http_signatures.signing_string import build_signing_string
from http_signatures.verifier import Verifier

__version__ = "1.0.0"

__all__ = [
    "Algorithm",
    "Context",
    "DEFAULT_HEADERS",
    "EmptyHeaderList",
    "HeaderList",
    "HttpMessage",
    "HttpSignatureError",
    "IllegalHeader",
    "Key",
    "KeyStore",
    "MalformedSignatureHeader",
    "Message",
    "MissingHeader",
    "REQUEST_TARGET",
    "RequestMessage",
    "SignatureHeaders",
    "SignatureParameters",
    "Signer",
    "UnknownAlgorithm",
    "UnknownKeyId",
    "Verifier",
    "build_signing_string",
    "create",
]
