"""requests-backed transport."""

from __future__ import annotations

import requests

from simplehttp.config.settings import Settings
from simplehttp.core.request import HttpRequest
from simplehttp.transport.base import Http


class RequestsHttp(Http):
    """Send requests with `requests`, optionally through a shared `Session`."""

    transport_errors = (requests.RequestException, OSError)

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        timeout_seconds: float | None = None,
        settings: Settings | None = None,
    ):
        super().__init__(timeout_seconds=timeout_seconds, settings=settings)
        self._session = session

    def _send(self, request: HttpRequest) -> str:
        send = self._session.request if self._session is not None else requests.request
        resp = send(
            request.method,
            request.url,
            headers=dict(request.headers),
            data=request.content(),
            timeout=self.timeout_seconds,
        )
        # Without a declared charset, decode with the configured encoding.
        if "charset" not in resp.headers.get("content-type", "").lower():
            resp.encoding = self.encoding
        return resp.text
