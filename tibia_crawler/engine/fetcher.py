"""HTTP fetching with response classification and bounded retries."""

from __future__ import annotations

from dataclasses import dataclass
from threading import Event
from typing import Any

import httpx
import structlog

from ..config import MAINTENANCE_HOST, CrawlerConfig
from ..errors import (
    ContextCanceled,
    MaintenanceError,
    RateLimited,
    TibiaCrawlerError,
    TransportError,
    UnknownStatusCode,
)
from ..infra import Limiter


@dataclass(slots=True)
class FetchRequest:
    """Input for the fetcher."""

    url: str
    retries: int = 1
    rate_limiter: Limiter | None = None
    cancel: Event | None = None
    timeout: float | None = None


def build_http_client(config: CrawlerConfig) -> httpx.Client:
    """Default client used when callers do not supply their own."""

    headers = {"User-Agent": config.user_agent} if config.user_agent else None
    return httpx.Client(
        follow_redirects=False,
        timeout=config.request_timeout,
        headers=headers,
    )


class Fetcher:
    """Issue GET requests against tibia.com and classify the outcome.

    Transport failures, 403s and unexpected status codes are retried up to the
    request's attempt budget. A redirect to the maintenance host is raised at
    once since retrying cannot help.
    """

    def __init__(
        self,
        client: httpx.Client,
        *,
        maintenance_host: str = MAINTENANCE_HOST,
        context: str = "fetcher",
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self.client = client
        self.maintenance_host = maintenance_host
        self.context = context
        self.logger = logger or structlog.get_logger("tibia_crawler.fetcher")

    def fetch(self, request: FetchRequest) -> str:
        """Return the body of ``request.url`` as text.

        ``retries`` of 0 or 1 means a single attempt. On exhaustion the error
        of the last attempt is raised.
        """
        max_attempts = max(1, request.retries)
        last_error: TibiaCrawlerError | None = None
        for attempt in range(1, max_attempts + 1):
            try:
                return self._attempt(request)
            except TibiaCrawlerError as exc:
                last_error = exc
                self.logger.warning(
                    "fetch_attempt_failed",
                    url=request.url,
                    attempt=attempt,
                    max_attempts=max_attempts,
                    error=str(exc),
                    error_type=type(exc).__name__,
                    retryable=exc.retryable,
                )
                if not exc.retryable:
                    raise
        assert last_error is not None
        raise last_error

    def _attempt(self, request: FetchRequest) -> str:
        if request.cancel is not None and request.cancel.is_set():
            raise ContextCanceled(f"{self.context}: request canceled", url=request.url)

        if request.rate_limiter is not None:
            request.rate_limiter.take()

        request_kwargs: dict[str, Any] = {
            "method": "GET",
            "url": request.url,
            "follow_redirects": False,
        }
        if request.timeout is not None:
            request_kwargs["timeout"] = request.timeout

        try:
            # Non-streaming request: the body is read and decoded in full and
            # the connection released on every path, error statuses included.
            response = self.client.request(**request_kwargs)
        except httpx.HTTPError as exc:
            raise TransportError(
                f"{self.context}: failed to make request: {exc}", url=request.url
            ) from exc

        try:
            self._raise_for_status(response, request.url)
            return response.text
        finally:
            response.close()

    def _raise_for_status(self, response: httpx.Response, url: str) -> None:
        status = response.status_code
        if status == httpx.codes.OK:
            return
        if status == httpx.codes.FORBIDDEN:
            raise RateLimited(
                f"{self.context}: request forbidden by cip", url=url, status_code=status
            )
        if status == httpx.codes.FOUND:
            location = response.headers.get("Location")
            if not location:
                raise UnknownStatusCode(
                    f"{self.context}: failed to get location from response",
                    url=url,
                    status_code=status,
                )
            try:
                host = response.url.join(location).host
            except httpx.InvalidURL as exc:
                raise UnknownStatusCode(
                    f"{self.context}: invalid location {location!r}",
                    url=url,
                    status_code=status,
                ) from exc
            if host == self.maintenance_host:
                self.logger.warning("fetch_maintenance", url=url, location=location)
                raise MaintenanceError(
                    f"{self.context}: tibia.com is under maintenance",
                    url=url,
                    status_code=status,
                )
        raise UnknownStatusCode(
            f"{self.context}: unknown status code {status}", url=url, status_code=status
        )


__all__ = ["FetchRequest", "Fetcher", "build_http_client"]
