"""Ordered list of header names covered by a signature."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from http_signatures.exceptions import EmptyHeaderList, IllegalHeader

REQUEST_TARGET = "(request-target)"

# Header list assumed when a signature omits the ``headers`` parameter.
DEFAULT_HEADERS: tuple[str, ...] = ("date",)

# A signature cannot cover the headers that carry it.
ILLEGAL_HEADERS = frozenset({"authorization", "signature"})

_TOKEN_RE = re.compile(r"^[!#$%&'*+.^_`|~0-9a-z-]+$")


class HeaderList:
    """Ordered, lower-cased header names, possibly including ``(request-target)``."""

    def __init__(self, names: Iterable[str]) -> None:
        normalized = tuple(name.lower() for name in names)
        if not normalized:
            raise EmptyHeaderList("Header list must not be empty")

        seen: set[str] = set()
        for name in normalized:
            if name in ILLEGAL_HEADERS:
                raise IllegalHeader(name, "signature headers cannot be signed")
            if name != REQUEST_TARGET and not _TOKEN_RE.match(name):
                raise IllegalHeader(name, "not a valid header name")
            if name in seen:
                raise IllegalHeader(name, "listed more than once")
            seen.add(name)

        self._names = normalized

    @classmethod
    def from_string(cls, value: str) -> HeaderList:
        """Parse the space-separated wire form, e.g. ``"(request-target) host date"``."""
        return cls(value.split(" ") if value else ())

    def to_string(self) -> str:
        return " ".join(self._names)

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._names

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HeaderList):
            return self._names == other._names
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._names)

    def __repr__(self) -> str:
        return f"HeaderList({list(self._names)!r})"
