"""Contract shared by every tibia.com page parser."""

from __future__ import annotations

from dataclasses import dataclass
from threading import Event
from typing import Protocol, TypeVar, runtime_checkable

import httpx

from ..infra import Limiter

A = TypeVar("A", contravariant=True)
P = TypeVar("P", covariant=True)


@dataclass(slots=True)
class ParseOptions:
    """Per-call knobs accepted by parsers.

    ``http_client`` and ``rate_limiter`` override the parser's defaults for
    this call only. ``retries`` is the attempt budget (0 and 1 both mean one
    attempt); ``None`` falls back to the configured value. When
    ``disallow_cached_responses`` is set the parser must not answer from its
    cache.
    """

    http_client: httpx.Client | None = None
    rate_limiter: Limiter | None = None
    retries: int | None = None
    disallow_cached_responses: bool = False


@runtime_checkable
class Parser(Protocol[A, P]):
    """Fetch one tibia.com page and turn it into structured data.

    Implementations may cache results, but must honour
    ``ParseOptions.disallow_cached_responses``.
    """

    @property
    def url(self) -> str:
        """The tibia.com endpoint this parser reads."""

    def parse(
        self,
        args: A,
        options: ParseOptions | None = None,
        *,
        cancel: Event | None = None,
    ) -> P:
        """Return parsed data or raise a ``TibiaCrawlerError``."""


__all__ = ["ParseOptions", "Parser"]
