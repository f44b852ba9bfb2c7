"""
Error types.

Every transport failure (connection refused, timeout, interrupted read, protocol
violation) surfaces as `HttpExecutionError`. HTTP error statuses are not
failures: a 404 body is returned like a 200 body.
"""

from __future__ import annotations


class SimpleHttpError(Exception):
    """Base class for errors raised by simplehttp."""


class HttpExecutionError(SimpleHttpError):
    """The request did not complete; `cause` holds the transport's exception."""

    def __init__(self, method: str, url: str, cause: BaseException):
        super().__init__(f"{method} {url} failed: {cause}")
        self.method = method
        self.url = url
        self.cause = cause


class TransportNotAvailableError(SimpleHttpError):
    """Raised when a transport name is not registered."""
