"""Transport lookup by name (`http.transport` in settings)."""

from __future__ import annotations

from typing import Callable

from simplehttp.config.settings import Settings, get_settings
from simplehttp.exceptions import TransportNotAvailableError
from simplehttp.transport.base import Http
from simplehttp.transport.httpx_transport import HttpxHttp
from simplehttp.transport.requests_transport import RequestsHttp


TRANSPORTS: dict[str, Callable[..., Http]] = {
    "httpx": HttpxHttp,
    "requests": RequestsHttp,
}


def create_http(name: str | None = None, settings: Settings | None = None) -> Http:
    """Instantiate the transport `name` (defaults to the configured one)."""
    settings = settings or get_settings()
    key = (name or settings.http.transport).strip().lower()
    factory = TRANSPORTS.get(key)
    if factory is None:
        known = ", ".join(sorted(TRANSPORTS))
        raise TransportNotAvailableError(f"Unknown transport '{name}'. Expected one of: {known}")
    return factory(settings=settings)
