"""
Request body selection.

A POST either carries no body at all or a raw text body declared as JSON.
Form fields are never encoded into the body; they travel as query parameters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from simplehttp.core.constants import CONTENT_TYPE_JSON, DEFAULT_ENCODING


BodyKind = Literal["none", "raw"]


@dataclass(frozen=True)
class BodyDescriptor:
    """Classification of the request body chosen before execution."""

    kind: BodyKind = "none"
    content: str | None = None
    encoding: str | None = None
    content_type: str | None = None

    @property
    def has_body(self) -> bool:
        return self.kind == "raw"

    def payload(self) -> bytes:
        """Encoded body bytes (empty for a bodiless request)."""
        if not self.has_body or self.content is None:
            return b""
        return self.content.encode(self.encoding or DEFAULT_ENCODING)


NO_BODY = BodyDescriptor()


def select_body(data: str | None, *, encoding: str = DEFAULT_ENCODING) -> BodyDescriptor:
    """Pick the body kind for `data`; `None` and `""` mean no body."""
    if not data:
        return NO_BODY
    return BodyDescriptor(
        kind="raw",
        content=data,
        encoding=encoding,
        content_type=CONTENT_TYPE_JSON,
    )
