"""Header names and request defaults shared by every transport."""

from __future__ import annotations

USER_AGENT = "User-Agent"
CONTENT_TYPE = "Content-Type"
CONTENT_ENCODING = "Content-Encoding"

CONTENT_TYPE_JSON = "application/json"
DEFAULT_ENCODING = "UTF-8"

DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/80.0.3987.132 Safari/537.36"
)
