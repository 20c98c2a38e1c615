"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from http_signatures.common.settings import Settings
from http_signatures.message import HttpMessage

FILES = Path(__file__).parent / "files"

# Test request from draft-cavage-http-signatures appendix C.
EXAMPLE_DATE = "Sun, 05 Jan 2014 21:31:40 GMT"
EXAMPLE_HEADERS = ["(request-target)", "host", "date", "content-type", "digest", "content-length"]


@pytest.fixture(scope="session")
def rsa_private_pem() -> bytes:
    """Fixed PEM-encoded RSA private key used by the known-answer vectors."""
    return (FILES / "test.pem").read_bytes()


@pytest.fixture
def example_headers() -> list[str]:
    """Header list covering the example request."""
    return list(EXAMPLE_HEADERS)


@pytest.fixture
def example_message() -> HttpMessage:
    """POST request used by the draft's examples."""
    return HttpMessage(
        "POST",
        "/foo?param=value&pet=dog",
        {
            "Host": "example.com",
            "Date": EXAMPLE_DATE,
            "Digest": "SHA-256=X48E9qOokqqrvdts8nOJRJN3OWDUoyWxBf7kbu9DBPE=",
            "Content-Type": "application/json",
            "Content-Length": "18",
        },
    )


@pytest.fixture
def settings() -> Settings:
    """Create test settings."""
    return Settings(
        algorithm="hmac-sha256",
        signing_key_id="pda",
        signed_headers=("(request-target)", "host", "date"),
        auth_exempt_paths=("/health",),
    )
