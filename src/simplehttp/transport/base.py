"""
Transport-independent HTTP facade.

`Http` owns the request-construction rules (URL/query assembly, header merge,
body selection) and the error contract. Subclasses only send an already built
`HttpRequest` and declare which exceptions their engine raises.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Mapping

from simplehttp.config.settings import Settings, get_settings
from simplehttp.core.headers import HeaderInput
from simplehttp.core.request import HttpRequest, Method, build_request
from simplehttp.exceptions import HttpExecutionError

logger = logging.getLogger(__name__)


class Http(ABC):
    """One blocking round trip per call, body returned as text."""

    # Exception types of the underlying engine that mean "the call did not complete".
    transport_errors: tuple[type[BaseException], ...] = (OSError,)

    def __init__(self, *, timeout_seconds: float | None = None, settings: Settings | None = None):
        self._settings = settings or get_settings()
        http = self._settings.http
        self.timeout_seconds = float(timeout_seconds if timeout_seconds is not None else http.timeout_seconds)
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")
        self.user_agent = http.user_agent
        self.encoding = http.encoding

    @abstractmethod
    def _send(self, request: HttpRequest) -> str:
        """Send `request` and return the decoded response body."""

    def build(
        self,
        method: Method,
        url: str,
        *,
        params: Mapping[str, str | None] | None = None,
        header: HeaderInput = None,
        data: str | None = None,
        encode: bool = False,
    ) -> HttpRequest:
        return build_request(
            method,
            url,
            params=params,
            header=header,
            data=data,
            encode=encode,
            user_agent=self.user_agent,
            encoding=self.encoding,
        )

    def execute(self, request: HttpRequest) -> str:
        """Send `request` once; transport failures become `HttpExecutionError`.

        The response status is not inspected.
        """
        logger.debug("%s %s", request.method, request.url)
        try:
            return self._send(request)
        except self.transport_errors as exc:
            logger.warning("%s %s failed: %s", request.method, request.url, exc)
            raise HttpExecutionError(request.method, request.url, exc) from exc

    def get(
        self,
        url: str,
        params: Mapping[str, str | None] | None = None,
        header: HeaderInput = None,
        *,
        encode: bool = False,
    ) -> str:
        """GET `url` (plus optional query `params`) and return the body text."""
        return self.execute(self.build("GET", url, params=params, header=header, encode=encode))

    def post(
        self,
        url: str,
        data: str | None = None,
        header: HeaderInput = None,
        *,
        params: Mapping[str, str | None] | None = None,
        encode: bool = False,
    ) -> str:
        """POST to `url` and return the body text.

        - `data` is sent as a JSON text body; empty or None means no body.
        - `params` are form fields appended to the URL as a query string, so
          `post(url, params={...})` is a bodiless POST.
        """
        return self.execute(
            self.build("POST", url, params=params, header=header, data=data, encode=encode)
        )
