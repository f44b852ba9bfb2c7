"""
Request intent.

`build_request` turns `get`/`post` arguments into one immutable `HttpRequest`
that any transport can send. Building a request never touches the network.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal, Mapping

from simplehttp.core.body import NO_BODY, BodyDescriptor, select_body
from simplehttp.core.constants import DEFAULT_ENCODING, DEFAULT_USER_AGENT
from simplehttp.core.headers import HeaderInput, mandatory_headers, merge_headers
from simplehttp.core.urls import build_url


Method = Literal["GET", "POST"]


@dataclass(frozen=True)
class HttpRequest:
    """One fully assembled request (method, final URL, merged headers, body)."""

    method: Method
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: BodyDescriptor = NO_BODY

    def content(self) -> bytes | None:
        """Body bytes for the transport, or None for a bodiless request."""
        return self.body.payload() if self.body.has_body else None


def build_request(
    method: Method,
    url: str,
    *,
    params: Mapping[str, str | None] | None = None,
    header: HeaderInput = None,
    data: str | None = None,
    encode: bool = False,
    user_agent: str = DEFAULT_USER_AGENT,
    encoding: str = DEFAULT_ENCODING,
) -> HttpRequest:
    """Assemble a request.

    GET requests never carry a body, so `data` is ignored for them.
    """
    request_url = build_url(url, params, encode=encode, encoding=encoding)
    body = select_body(data, encoding=encoding) if method == "POST" else NO_BODY
    headers = merge_headers(mandatory_headers(user_agent=user_agent, body=body), header)
    return HttpRequest(
        method=method, url=request_url, headers=MappingProxyType(headers), body=body
    )
