"""
Module-level `get`/`post`.

Call sites use these functions and never name a transport. The backing `Http`
is created lazily from settings and can be swapped with `set_http()`, e.g. to
move every caller from httpx to requests, or to inject a fake in tests.
"""

from __future__ import annotations

import threading
from typing import Mapping

from simplehttp.core.headers import HeaderInput
from simplehttp.transport.base import Http
from simplehttp.transport.registry import create_http


_lock = threading.Lock()
_http: Http | None = None


def get_http() -> Http:
    """Return the process-wide `Http`, creating it on first use."""
    global _http
    with _lock:
        if _http is None:
            _http = create_http()
        return _http


def set_http(http: Http) -> None:
    global _http
    with _lock:
        _http = http


def reset_http() -> None:
    """Forget the current `Http`; the next call rebuilds it from settings."""
    global _http
    with _lock:
        _http = None


def get(
    url: str,
    params: Mapping[str, str | None] | None = None,
    header: HeaderInput = None,
    *,
    encode: bool = False,
) -> str:
    return get_http().get(url, params, header, encode=encode)


def post(
    url: str,
    data: str | None = None,
    header: HeaderInput = None,
    *,
    params: Mapping[str, str | None] | None = None,
    encode: bool = False,
) -> str:
    return get_http().post(url, data, header, params=params, encode=encode)
