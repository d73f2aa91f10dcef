"""Pydantic models describing crawler configuration."""

from __future__ import annotations

from datetime import datetime, time, timezone
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_BASE_URL = "https://www.tibia.com/"
MAINTENANCE_HOST = "maintenance.tibia.com"


class ServerSaveWindow(BaseModel):
    """Daily UTC interval after which cached tibia.com data is stale.

    Only the time of day matters: the window repeats every day and
    ``is_refresh_due`` ignores the date component of the instant it is given.
    """

    start: time = time(7, 58)
    end: time = time(9, 0)

    @field_validator("start", "end", mode="before")
    @classmethod
    def _coerce_time(cls, value: Any) -> Any:
        if isinstance(value, str):
            text = value.strip()
            for fmt in ("%H:%M", "%H:%M:%S"):
                try:
                    return datetime.strptime(text, fmt).time()
                except ValueError:
                    continue
            raise ValueError("server save boundaries must be HH:MM or HH:MM:SS")
        return value

    @model_validator(mode="after")
    def _validate_order(self) -> "ServerSaveWindow":
        if self.end <= self.start:
            raise ValueError("server save end must be later than start")
        return self

    def is_refresh_due(self, now: datetime | None = None) -> bool:
        """Report whether ``now`` falls strictly inside the window.

        Args:
            now: instant to test, defaults to the current time. Naive values
                are treated as UTC.
        """
        if now is None:
            now = datetime.now(timezone.utc)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        else:
            now = now.astimezone(timezone.utc)
        moment = now.time()
        return self.start < moment < self.end


class RateLimitConfig(BaseModel):
    """Pace applied before every request made to tibia.com."""

    enabled: bool = False
    rate: int = 1
    per_seconds: float = 0.75

    @model_validator(mode="after")
    def _validate_positive(self) -> "RateLimitConfig":
        if self.rate < 1:
            raise ValueError("rate must be >= 1")
        if self.per_seconds <= 0:
            raise ValueError("per_seconds must be > 0")
        return self


class CrawlerConfig(BaseModel):
    """Process-wide settings, resolved once at start-up."""

    base_url: str = DEFAULT_BASE_URL
    maintenance_host: str = MAINTENANCE_HOST
    request_timeout: float = 15.0
    retries: int = 1
    user_agent: str | None = None
    rate_limit: RateLimitConfig = Field(default_factory=RateLimitConfig)
    server_save: ServerSaveWindow = Field(default_factory=ServerSaveWindow)

    @field_validator("base_url")
    @classmethod
    def _validate_base_url(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL: {value!r}")
        return value

    @model_validator(mode="after")
    def _validate_numbers(self) -> "CrawlerConfig":
        if self.request_timeout <= 0:
            raise ValueError("request_timeout must be > 0")
        if self.retries < 0:
            raise ValueError("retries must be >= 0")
        return self

    def endpoint_url(self, endpoint: str) -> str:
        """Join ``endpoint`` onto the base URL without doubling slashes."""

        return self.base_url.rstrip("/") + "/" + endpoint.lstrip("/")


__all__ = [
    "CrawlerConfig",
    "DEFAULT_BASE_URL",
    "MAINTENANCE_HOST",
    "RateLimitConfig",
    "ServerSaveWindow",
]
