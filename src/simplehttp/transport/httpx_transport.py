"""httpx-backed transport (the default)."""

from __future__ import annotations

import httpx

from simplehttp.config.settings import Settings
from simplehttp.core.request import HttpRequest
from simplehttp.transport.base import Http


class HttpxHttp(Http):
    """Send requests with httpx.

    Without a shared `client` each call opens (and closes) its own
    `httpx.Client`. A shared client is reused across calls and threads; its
    lifetime belongs to the caller.
    """

    transport_errors = (httpx.HTTPError, httpx.InvalidURL, OSError)

    def __init__(
        self,
        client: httpx.Client | None = None,
        *,
        timeout_seconds: float | None = None,
        settings: Settings | None = None,
    ):
        super().__init__(timeout_seconds=timeout_seconds, settings=settings)
        self._client = client

    def _send(self, request: HttpRequest) -> str:
        if self._client is not None:
            return self._request(self._client, request)
        with httpx.Client(timeout=self.timeout_seconds) as client:
            return self._request(client, request)

    def _request(self, client: httpx.Client, request: HttpRequest) -> str:
        resp = client.request(
            request.method,
            request.url,
            headers=dict(request.headers),
            content=request.content(),
            timeout=self.timeout_seconds,
        )
        # Without a declared charset, decode with the configured encoding.
        if "charset" not in resp.headers.get("content-type", "").lower():
            resp.encoding = self.encoding
        return resp.text
