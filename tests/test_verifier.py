"""Tests for signature verification."""

import pytest

from http_signatures.algorithm import Hmac
from http_signatures.key import Key, KeyStore
from http_signatures.message import HttpMessage
from http_signatures.signer import Signer
from http_signatures.verifier import Verifier

DATE = "Fri, 01 Aug 2014 13:44:32 -0700"
DATE_DIFFERENT = "Fri, 01 Aug 2014 13:44:33 -0700"

HMAC_SIGNATURE = (
    'keyId="pda",'
    'algorithm="hmac-sha256",'
    'headers="(request-target) date",'
    'signature="cS2VvndvReuTLy52Ggi4j6UaDqGm9hMb4z0xJZ6adqU="'
)

RSA_SIGNATURE = (
    'keyId="pda",'
    'algorithm="rsa-sha256",'
    'headers="(request-target) date",'
    'signature="mbbHMheEdsKThhcijxB+2H8MazfYk5hR//HIccc0H4CQqy3fwMLwPThgGiiwpIVYD93IPjkESkaVXAK2AJiX'
    "xNdd2tk2tfVtDOPRKjDGVhY0KIOHimohyCEpdtw9RI/mzyunAHa+qwp0fhscTa0RaPwiDfPf3a/KluuKcmEy5J4Do"
    "FBN0S1QRJfQ8z5y2WhM0Lhb6PRCq9S6QfuV1Cd+P0wmQ2OTb4oxAqjUHmT51k8PLfqRVMhiGuJTE5h9XWx2FJHhx6"
    'YKZFw6rNAsMcoWn59xnSRrBUSSWLzVVJJBqaV+GqMZ5qmMpvKOG1/C8QVQP92w+i96jqHGgR2jJk7jbg=="'
)


def _tamper_signature(message: HttpMessage) -> None:
    message.set_header("Signature", message["Signature"].replace('signature="', 'signature="x'))


class VerifierContract:
    """Shared rejection cases; subclasses provide verifier and message fixtures."""

    def test_verifies_valid_message(self, verifier, message):
        """An untouched signed message is valid."""
        assert verifier.valid(message) is True

    def test_rejects_missing_headers(self, verifier, message):
        """A message without any headers is invalid."""
        message.clear_headers()
        assert verifier.valid(message) is False

    def test_rejects_tampered_path(self, verifier, message):
        """Changing the path invalidates the signature."""
        message.path += "x"
        assert verifier.valid(message) is False

    def test_rejects_tampered_date(self, verifier, message):
        """Changing a covered header invalidates the signature."""
        message.set_header("Date", DATE_DIFFERENT)
        assert verifier.valid(message) is False

    def test_rejects_tampered_signature(self, verifier, message):
        """Changing the signature value invalidates it."""
        _tamper_signature(message)
        assert verifier.valid(message) is False

    def test_rejects_malformed_signature(self, verifier, message):
        """A header outside the grammar is invalid, not an error."""
        message.set_header("Signature", "foo=bar,baz=bla,yadda=yadda")
        assert verifier.valid(message) is False

    def test_rejects_unknown_key_id(self, verifier, message):
        """Key ids missing from the store are invalid."""
        message.set_header("Signature", message["Signature"].replace('keyId="pda"', 'keyId="other"'))
        assert verifier.valid(message) is False

    def test_rejects_unknown_algorithm(self, verifier, message):
        """Unregistered algorithm names are invalid."""
        value = message["Signature"]
        algorithm = value.split('algorithm="', 1)[1].split('"', 1)[0]
        message.set_header("Signature", value.replace(algorithm, "bogus-name"))
        assert verifier.valid(message) is False

    def test_rejects_missing_covered_header(self, verifier, message):
        """A covered header removed after signing is invalid."""
        message.remove_header("Date")
        assert verifier.valid(message) is False

    def test_authorization_fallback(self, verifier, message):
        """Authorization is used when Signature is absent."""
        value = message["Signature"]
        message.remove_header("Signature")
        message.set_header("Authorization", f"Signature {value}")
        assert verifier.valid(message) is True

    def test_rejects_duplicate_signature_headers(self, verifier, message):
        """Two Signature headers are ambiguous and rejected."""
        message.add_header("Signature", message["Signature"])
        assert verifier.valid(message) is False


class TestHmacVerifier(VerifierContract):
    """Verification against a fixed hmac-sha256 vector."""

    @pytest.fixture
    def verifier(self):
        """Verifier holding the shared secret."""
        return Verifier(KeyStore({"pda": "secret"}))

    @pytest.fixture
    def message(self):
        """Request carrying the pinned hmac-sha256 signature."""
        return HttpMessage("GET", "/path?query=123", {"Date": DATE, "Signature": HMAC_SIGNATURE})

    def test_rejects_wrong_secret(self, message):
        """A different secret does not verify."""
        assert Verifier(KeyStore({"pda": "not-the-secret"})).valid(message) is False

    def test_rejects_mismatched_algorithm(self, message):
        """Declaring a different digest does not verify."""
        message.set_header("Signature", HMAC_SIGNATURE.replace("hmac-sha256", "hmac-sha1"))
        assert Verifier(KeyStore({"pda": "secret"})).valid(message) is False

    def test_verify_returns_parameters(self, verifier, message):
        """verify returns the parsed parameters."""
        params = verifier.verify(message)
        assert params.key_id == "pda"
        assert params.headers.to_string() == "(request-target) date"

    def test_non_ascii_signature_rejected(self, verifier, message):
        """Non-ASCII signature values are rejected without raising."""
        message.set_header("Signature", HMAC_SIGNATURE.replace('signature="', 'signature="é'))
        assert verifier.valid(message) is False


class TestRsaVerifier(VerifierContract):
    """Verification against a fixed rsa-sha256 vector."""

    @pytest.fixture
    def verifier(self, rsa_private_pem):
        """Verifier holding the RSA test key."""
        return Verifier(KeyStore({"pda": rsa_private_pem}))

    @pytest.fixture
    def message(self):
        """Request carrying the pinned rsa-sha256 signature."""
        return HttpMessage("GET", "/path?query=123", {"Date": DATE, "Signature": RSA_SIGNATURE})

    def test_rejects_hmac_key_material(self, message):
        """A shared secret is not a usable RSA key."""
        assert Verifier(KeyStore({"pda": "secret"})).valid(message) is False


class TestImplicitHeaders:
    """Test verification when the headers parameter is absent."""

    def test_headers_parameter_absent(self):
        """Signer and verifier agree on the default list."""
        message = HttpMessage("GET", "/", {"Date": DATE})
        Signer(Key("pda", "secret"), Hmac("sha256"), None).sign(message)

        assert "headers=" not in message["Signature"]
        assert Verifier(KeyStore({"pda": "secret"})).valid(message) is True

    def test_verifier_and_signer_must_agree(self):
        """A verifier with a different implicit list rejects the message."""
        message = HttpMessage("GET", "/", {"Date": DATE, "Host": "example.com"})
        Signer(Key("pda", "secret"), Hmac("sha256"), None, implicit_headers=["host"]).sign(message)

        assert Verifier(KeyStore({"pda": "secret"}), implicit_headers=["host"]).valid(message) is True
        assert Verifier(KeyStore({"pda": "secret"})).valid(message) is False

    def test_latin1_header_round_trip(self):
        """Headers with bytes above 0x7F sign and verify."""
        message = HttpMessage("GET", "/", {"Date": DATE, "X-Name": "caf\xe9"})
        Signer(Key("pda", "secret"), Hmac("sha256"), ["date", "x-name"]).sign(message)
        assert Verifier(KeyStore({"pda": "secret"})).valid(message) is True
