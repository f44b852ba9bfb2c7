"""
Request header container and merge rules.

Mandatory headers are computed per request:
- `User-Agent` always,
- `Content-Type` + `Content-Encoding` only when the request carries a body.

Caller headers are applied afterwards, each exactly once and in iteration order.
When a caller header names a mandatory header (case-insensitive), the caller's
value replaces it.
"""

from __future__ import annotations

from typing import ItemsView, Iterator, Mapping, Union

from simplehttp.core.body import BodyDescriptor
from simplehttp.core.constants import CONTENT_ENCODING, CONTENT_TYPE, USER_AGENT


class HttpHeader:
    """Ordered, case-sensitive header builder handed to `get`/`post`.

    >>> HttpHeader().add("X-Trace", "1").add("Accept", "text/plain").get_headers()
    {'X-Trace': '1', 'Accept': 'text/plain'}
    """

    def __init__(self, headers: Mapping[str, str] | None = None):
        self._headers: dict[str, str] = {}
        if headers:
            self.add_all(headers)

    def add(self, name: str, value: str) -> HttpHeader:
        self._headers[str(name)] = str(value)
        return self

    def add_all(self, headers: Mapping[str, str]) -> HttpHeader:
        for name, value in headers.items():
            self.add(name, value)
        return self

    def get_headers(self) -> dict[str, str]:
        return dict(self._headers)

    def items(self) -> ItemsView[str, str]:
        return self._headers.items()

    def __iter__(self) -> Iterator[str]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __contains__(self, name: object) -> bool:
        return name in self._headers

    def __repr__(self) -> str:
        return f"HttpHeader({self._headers!r})"


HeaderInput = Union[HttpHeader, Mapping[str, str], None]


def mandatory_headers(*, user_agent: str, body: BodyDescriptor) -> dict[str, str]:
    """Return the headers this library always sends for `body`."""
    headers = {USER_AGENT: user_agent}
    if body.has_body:
        headers[CONTENT_TYPE] = body.content_type
        headers[CONTENT_ENCODING] = body.encoding
    return headers


def merge_headers(mandatory: Mapping[str, str], caller: HeaderInput = None) -> dict[str, str]:
    """Apply `caller` headers on top of `mandatory` ones.

    A caller header that collides with a mandatory name (ignoring case) takes
    over that slot: the caller's spelling and value win, the position is kept.
    Caller headers are otherwise applied as given, each exactly once.
    """
    merged: dict[str, str] = dict(mandatory)
    if not caller:
        return merged

    mandatory_by_lower = {name.lower(): name for name in mandatory}
    for name, value in caller.items():
        existing = mandatory_by_lower.pop(name.lower(), None)
        if existing is not None and existing != name:
            merged = {(name if k == existing else k): v for k, v in merged.items()}
        merged[name] = str(value)
    return merged
