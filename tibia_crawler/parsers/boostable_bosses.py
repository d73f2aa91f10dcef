"""Parser for the tibia.com Boostable Bosses library page.

The page lists every boss that can be boosted and highlights today's boosted
boss. Its content only changes at server save, so parsed results are cached
in memory and refreshed when the server-save window is open or when the
caller refuses cached data.
"""

from __future__ import annotations

from datetime import datetime, timezone
from html import unescape
from threading import Event
from typing import Callable

import httpx
import structlog
from pydantic import ValidationError

from ..config import CrawlerConfig
from ..engine import FetchRequest, Fetcher, MarkerScanner, SnapshotCache, build_http_client
from ..errors import StructureError, TibiaCrawlerError
from ..infra import Limiter, RateLimiter
from ..logging_conf import component_logger
from ..tibia import AMOUNT_OF_BOOSTABLE_BOSSES, BoostableBoss, BoostableBosses
from .base import ParseOptions

ENDPOINT = "/library/?subtopic=boostablebosses"
CONTEXT = "boostable bosses"

START_MARKER = '<div class="main-content Content">'
END_MARKER = '<div id="Footer" class="main-footer">'

TODAY_CHECKER = "Today's boosted boss: "
BOSSES_CHECKER = '<div class="CaptionContainer">'

TODAY_BOSS_START = 'title="' + TODAY_CHECKER
TODAY_BOSS_END = '" src="'
TODAY_BOSS_IMG = "https://static.tibia.com/images/global/header/monsters/"

BOSSES_IMG = "https://static.tibia.com/images/library/"
BOSS_NAME_START = "border=0 /> <div>"
BOSS_NAME_END = "</div>"

IMG_END = '"'


class BoostableBossesExtractor:
    """Turn the raw page into ``BoostableBosses`` by ordered marker scanning."""

    def __init__(self, logger: structlog.BoundLogger | None = None) -> None:
        self.logger = logger or component_logger("boostable_bosses")

    def extract(self, data: str) -> BoostableBosses:
        lines = self._content_lines(data)

        boosted: BoostableBoss | None = None
        bosses: list[BoostableBoss] | None = None
        for line in lines:
            if boosted is None and TODAY_CHECKER in line:
                boosted = self._read_boosted_line(line)
            if BOSSES_CHECKER in line:
                bosses = self._read_bosses_line(line, boosted)
                # The whole listing sits on a single line.
                break

        if boosted is None:
            raise StructureError(f"{CONTEXT}: boosted boss not found")
        if bosses is None:
            raise StructureError(f"{CONTEXT}: boss list not found")

        if len(bosses) != AMOUNT_OF_BOOSTABLE_BOSSES:
            self.logger.warning(
                "unexpected_boss_count",
                expected=AMOUNT_OF_BOOSTABLE_BOSSES,
                found=len(bosses),
            )
        if not any(boss.is_boosted for boss in bosses):
            self.logger.warning("boosted_boss_not_listed", boosted=boosted.name)

        try:
            return BoostableBosses(boosted=boosted, bosses=tuple(bosses))
        except ValidationError as exc:
            raise StructureError(f"{CONTEXT}: inconsistent boosted flags: {exc}") from exc

    @staticmethod
    def _content_lines(data: str) -> list[str]:
        scanner = MarkerScanner(data, context=CONTEXT)
        scanner.seek(START_MARKER, "main content", past=False)
        content = scanner.read_until(END_MARKER, "end of content")

        # Records are "\n"-delimited only; other Unicode line boundaries may
        # sit inside the single-line listing.
        lines = [line.removesuffix("\r") for line in content.split("\n")]
        if not lines:
            raise StructureError(f"{CONTEXT}: no lines found")
        return lines

    @staticmethod
    def _read_boosted_line(line: str) -> BoostableBoss:
        scanner = MarkerScanner(line, context=CONTEXT)
        name = scanner.between(TODAY_BOSS_START, TODAY_BOSS_END, "today boss")
        image_url = scanner.between(TODAY_BOSS_IMG, IMG_END, "today boss img", keep_start=True)
        return BoostableBoss(name=unescape(name), image_url=image_url, is_boosted=True)

    @staticmethod
    def _read_bosses_line(line: str, boosted: BoostableBoss | None) -> list[BoostableBoss]:
        boosted_name = boosted.name if boosted is not None else None
        scanner = MarkerScanner(line, context=CONTEXT)
        bosses: list[BoostableBoss] = []
        while BOSSES_IMG in scanner:
            image_url = scanner.between(BOSSES_IMG, IMG_END, "boss img", keep_start=True)
            name = unescape(scanner.between(BOSS_NAME_START, BOSS_NAME_END, "boss name"))
            bosses.append(
                BoostableBoss(name=name, image_url=image_url, is_boosted=name == boosted_name)
            )
        return bosses


class BoostableBossesParser:
    """Serve boostable bosses from cache, refreshing around server save.

    ============  =========================  =================================
    window open   disallow_cached_responses  action
    ============  =========================  =================================
    yes           any                        fetch, extract, store, return
    no            False                      return cached snapshot
    no            True                       fetch, extract, store, return
    ============  =========================  =================================

    Before the first successful refresh the cached snapshot is an empty
    ``BoostableBosses``. A failed refresh leaves the cache untouched.
    """

    def __init__(
        self,
        config: CrawlerConfig | None = None,
        *,
        http_client: httpx.Client | None = None,
        rate_limiter: Limiter | None = None,
        clock: Callable[[], datetime] | None = None,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self.config = config or CrawlerConfig()
        self.logger = logger or component_logger("boostable_bosses")
        self._owns_client = http_client is None
        self._client = http_client or build_http_client(self.config)
        self._rate_limiter = (
            rate_limiter if rate_limiter is not None else RateLimiter.from_config(self.config.rate_limit)
        )
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._extractor = BoostableBossesExtractor(self.logger)
        self._cache: SnapshotCache[BoostableBosses] = SnapshotCache(BoostableBosses())

    @property
    def url(self) -> str:
        return self.config.endpoint_url(ENDPOINT)

    def parse(
        self,
        args: None = None,
        options: ParseOptions | None = None,
        *,
        cancel: Event | None = None,
    ) -> BoostableBosses:
        options = options or ParseOptions()
        if self.config.server_save.is_refresh_due(self._clock()):
            return self.refresh(options, cancel=cancel)
        if options.disallow_cached_responses:
            return self.refresh(options, cancel=cancel)
        cached = self._cache.load()
        self.logger.debug("cache_hit", boosted=cached.boosted.name, stored_at=self._cache.stored_at)
        return cached

    def refresh(self, options: ParseOptions | None = None, *, cancel: Event | None = None) -> BoostableBosses:
        """Fetch and extract the page, publish it to the cache and return it."""

        options = options or ParseOptions()
        fetcher = Fetcher(
            options.http_client or self._client,
            maintenance_host=self.config.maintenance_host,
            context=CONTEXT,
            logger=self.logger,
        )
        request = FetchRequest(
            url=self.url,
            retries=self.config.retries if options.retries is None else options.retries,
            rate_limiter=options.rate_limiter or self._rate_limiter,
            cancel=cancel,
        )
        try:
            data = fetcher.fetch(request)
            parsed = self._extractor.extract(data)
        except TibiaCrawlerError as exc:
            self.logger.error("refresh_failed", url=self.url, error=str(exc), error_type=type(exc).__name__)
            raise
        self._cache.store(parsed)
        self.logger.info("cache_refreshed", bosses=len(parsed.bosses), boosted=parsed.boosted.name)
        return parsed

    def load(self) -> BoostableBosses:
        """Return the cached snapshot without touching the network."""

        return self._cache.load()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "BoostableBossesParser":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


__all__ = ["BoostableBossesExtractor", "BoostableBossesParser", "ENDPOINT"]
