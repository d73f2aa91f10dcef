"""Blocking rate limiter shared by every request made to tibia.com."""

from __future__ import annotations

import time
from threading import Lock
from typing import Callable, Protocol

from ..config import RateLimitConfig


class Limiter(Protocol):
    """Anything that can gate a request."""

    def take(self) -> float:
        """Block until the caller may proceed and return the admission time."""


class RateLimiter:
    """Space admissions at least ``per / rate`` seconds apart.

    Safe to share across threads: callers queue on an internal lock, so
    concurrent ``take`` calls are admitted one slot after another.
    """

    def __init__(
        self,
        rate: int = 1,
        per: float = 0.75,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if rate < 1:
            raise ValueError("rate must be >= 1")
        if per <= 0:
            raise ValueError("per must be > 0")
        self.interval = per / rate
        self._clock = clock
        self._sleep = sleep
        self._lock = Lock()
        self._last: float | None = None

    @classmethod
    def from_config(cls, config: RateLimitConfig) -> "RateLimiter | None":
        if not config.enabled:
            return None
        return cls(config.rate, config.per_seconds)

    def take(self) -> float:
        with self._lock:
            now = self._clock()
            if self._last is not None:
                wait = self._last + self.interval - now
                if wait > 0:
                    self._sleep(wait)
                    now = self._last + self.interval
            self._last = now
            return now


__all__ = ["Limiter", "RateLimiter"]
