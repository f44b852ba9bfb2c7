"""
Request URL assembly.

Query parameters are appended to the base URL as `key=value` pairs in the
mapping's iteration order. Only values are percent-encoded (form encoding,
UTF-8); keys are always inserted literally.
"""

from __future__ import annotations

from typing import Mapping
from urllib.parse import quote_plus

from simplehttp.core.constants import DEFAULT_ENCODING


def to_query_string(
    params: Mapping[str, str | None] | None,
    *,
    encode: bool = False,
    encoding: str = DEFAULT_ENCODING,
) -> str:
    """Join `params` into `k1=v1&k2=v2`; `None` values become `key=`."""
    if not params:
        return ""
    pairs: list[str] = []
    for key, value in params.items():
        text = "" if value is None else str(value)
        if encode:
            text = quote_plus(text, encoding=encoding)
        pairs.append(f"{key}={text}")
    return "&".join(pairs)


def build_url(
    base_url: str,
    params: Mapping[str, str | None] | None = None,
    *,
    encode: bool = False,
    encoding: str = DEFAULT_ENCODING,
) -> str:
    """Append `params` to `base_url`.

    The separator is `&` when `base_url` already contains a `?`, otherwise `?`.
    A trailing `?` or `&` on `base_url` is not collapsed.
    """
    query = to_query_string(params, encode=encode, encoding=encoding)
    if not query:
        return base_url
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{query}"
