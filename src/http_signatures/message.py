"""Message boundary: the narrow view of an HTTP request used for signing."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Protocol, runtime_checkable

from starlette.datastructures import MutableHeaders
from starlette.requests import Request

HeaderInput = Mapping[str, str | Sequence[str]] | Iterable[tuple[str, str]]


@runtime_checkable
class Message(Protocol):
    """What the signer and verifier need from an HTTP request."""

    @property
    def method(self) -> str: ...

    @property
    def path(self) -> str: ...

    def header(self, name: str) -> list[str] | None:
        """All values of a header (case-insensitive), or None if absent."""
        ...

    def set_header(self, name: str, value: str) -> None:
        """Set a header, replacing any previous values."""
        ...


def _raw_headers(headers: HeaderInput | None) -> list[tuple[bytes, bytes]]:
    raw: list[tuple[bytes, bytes]] = []
    if headers is None:
        return raw

    pairs: Iterable[tuple[str, str | Sequence[str]]]
    pairs = headers.items() if isinstance(headers, Mapping) else headers
    for name, value in pairs:
        values = [value] if isinstance(value, str) else list(value)
        for item in values:
            raw.append((name.lower().encode("latin-1"), item.encode("latin-1")))
    return raw


class HttpMessage:
    """
    In-memory HTTP request.

    Headers are stored case-insensitively with ordered values per name.
    """

    def __init__(self, method: str, path: str, headers: HeaderInput | None = None) -> None:
        self.method = method
        self.path = path
        self._headers = MutableHeaders(raw=_raw_headers(headers))

    def header(self, name: str) -> list[str] | None:
        values = self._headers.getlist(name)
        return values or None

    def set_header(self, name: str, value: str) -> None:
        self._headers[name] = value

    def add_header(self, name: str, value: str) -> None:
        """Append a value, keeping existing ones."""
        self._headers.append(name, value)

    def remove_header(self, name: str) -> None:
        if name in self._headers:
            del self._headers[name]

    def clear_headers(self) -> None:
        self._headers = MutableHeaders()

    def __getitem__(self, name: str) -> str:
        """Comma-joined header value, as a client library would present it."""
        values = self.header(name)
        if values is None:
            raise KeyError(name)
        return ", ".join(values)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._headers

    def __repr__(self) -> str:
        return f"HttpMessage({self.method!r}, {self.path!r})"


class RequestMessage:
    """Read-only adapter over an incoming starlette request."""

    def __init__(self, request: Request) -> None:
        self._request = request

    @property
    def method(self) -> str:
        return self._request.method

    @property
    def path(self) -> str:
        scope = self._request.scope
        raw_path = scope.get("raw_path")
        path = raw_path.decode("latin-1") if raw_path else self._request.url.path
        query = scope.get("query_string", b"").decode("latin-1")
        if query:
            path = f"{path}?{query}"
        return path

    def header(self, name: str) -> list[str] | None:
        values = self._request.headers.getlist(name)
        return values or None

    def set_header(self, name: str, value: str) -> None:
        raise TypeError("Incoming request headers are read-only")
