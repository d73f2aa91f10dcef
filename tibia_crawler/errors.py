"""Error taxonomy shared by fetchers and parsers.

Exception tree:
    TibiaCrawlerError
    +-- ContextCanceled    (caller aborted before a network attempt)
    +-- TransportError     (DNS, connection, timeout, undecodable body; retryable)
    +-- RateLimited        (tibia.com answered 403; retryable)
    +-- MaintenanceError   (redirected to the maintenance host)
    +-- UnknownStatusCode  (any other response; retryable)
    +-- StructureError     (expected markup token absent)
"""

from __future__ import annotations

from typing import Optional


class TibiaCrawlerError(Exception):
    """Base exception for all crawler errors."""

    retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class ContextCanceled(TibiaCrawlerError):
    """The cancellation signal was set before a request could be made."""


class TransportError(TibiaCrawlerError):
    """The request never produced a usable response."""

    retryable = True


class RateLimited(TibiaCrawlerError):
    """tibia.com refused the request with HTTP 403."""

    retryable = True


class MaintenanceError(TibiaCrawlerError):
    """tibia.com redirected to its maintenance host.

    Retrying cannot help until maintenance ends, so the retry loop surfaces
    this immediately.
    """


class UnknownStatusCode(TibiaCrawlerError):
    """tibia.com answered with a status code the parser does not handle."""

    retryable = True


class StructureError(TibiaCrawlerError):
    """A marker the extractor depends on is missing from the page.

    Usually means tibia.com changed its markup.
    """


__all__ = [
    "ContextCanceled",
    "MaintenanceError",
    "RateLimited",
    "StructureError",
    "TibiaCrawlerError",
    "TransportError",
    "UnknownStatusCode",
]
