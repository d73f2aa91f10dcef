"""Shared fixtures: synthetic tibia.com pages, configs and mocked HTTP clients."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Iterator

import httpx
import pytest

from tibia_crawler.config import CrawlerConfig
from tibia_crawler.tibia import AMOUNT_OF_BOOSTABLE_BOSSES

_NAMED_BOSSES: list[tuple[str, str]] = [
    ("Abyssador", "abyssador.gif"),
    ("Ancient Spawn of Morgathla", "ancientspawnofmorgathla.gif"),
    ("Bakragore", "bakragore.gif"),
    ("Chagorz", "chagorz.gif"),
    ("Deathstrike", "deathstrike.gif"),
    ("Drume", "drume.gif"),
    ("Faceless Bane", "facelessbane.gif"),
    ("Ferumbras Mortal Shell", "ferumbrasmortalshell.gif"),
    ("Gnomevil", "gnomehorticulist.gif"),
    ("Goshnar&#39;s Malice", "goshnarsmalice.gif"),
    ("Grand Master Oberon", "grandmasteroberon.gif"),
    ("Kroazur", "kroazur.gif"),
    ("Lady Tenebris", "ladytenebris.gif"),
    ("Magma Bubble", "magmabubble.gif"),
    ("Mazoran", "mazoran.gif"),
    ("Ratmiral Blackwhiskers", "ratmiralblackwhiskers.gif"),
    ("Scarlett Etzel", "scarlettetzel.gif"),
    ("Sharpclaw", "sharpclaw.gif"),
    ("The Pale Worm", "paleworm.gif"),
    ("The Time Guardian", "thetimeguardian.gif"),
    ("Utua Stone Sting", "utua.gif"),
    ("Vemiath", "vemiath.gif"),
    ("World Devourer", "worlddevourer.gif"),
]

BOSSES: list[tuple[str, str]] = _NAMED_BOSSES + [
    (f"Archfoe {idx:02d}", f"archfoe{idx:02d}.gif")
    for idx in range(AMOUNT_OF_BOOSTABLE_BOSSES - len(_NAMED_BOSSES))
]

BOOSTED = ("Utua Stone Sting", "utua.gif")

LIBRARY_IMG = "https://static.tibia.com/images/library/"
HEADER_IMG = "https://static.tibia.com/images/global/header/monsters/"


def boss_entry(name: str, image: str) -> str:
    return (
        '<div class="CreatureBox">'
        f'<img src="{LIBRARY_IMG}{image}" border=0 /> <div>{name}</div>'
        "</div>"
    )


def build_page(
    bosses: Iterable[tuple[str, str]] = BOSSES,
    boosted: tuple[str, str] | None = BOOSTED,
    *,
    header: str = "",
    main_content: bool = True,
    footer: bool = True,
    listing: bool = True,
) -> str:
    """Render a page shaped like the Boostable Bosses library page."""

    lines = [
        "<!DOCTYPE html>",
        "<html><head><title>Tibia - Free Multiplayer Online Role Playing Game - Library</title></head>",
        "<body>",
        f'<div id="Header">{header}</div>',
    ]
    if main_content:
        lines.append('<div class="main-content Content">')
    lines.append('<div id="ContentRow"><div id="Content" class="Content">')
    if boosted is not None:
        name, image = boosted
        lines.append(
            '<div id="boostedBossBox"><img id="Monster" '
            f'title="Today\'s boosted boss: {name}" src="{HEADER_IMG}{image}" '
            "onClick=\"window.location = 'https://www.tibia.com/library/?subtopic=boostablebosses';\" "
            'alt="Monster" /></div>'
        )
    if listing:
        entries = "".join(boss_entry(name, image) for name, image in bosses)
        lines.append(
            '<div class="TableContainer"><div class="CaptionContainer">'
            '<div class="Text">Boostable Bosses</div></div>'
            f'<div class="TableContentContainer">{entries}</div></div>'
        )
    lines.append("</div></div>")
    if main_content:
        lines.append("</div>")
    if footer:
        lines.append('<div id="Footer" class="main-footer">Copyright by CipSoft GmbH.</div>')
    lines.append("</body></html>")
    return "\n".join(lines)


@pytest.fixture
def boostable_page() -> str:
    return build_page()


@pytest.fixture
def crawler_config() -> Callable[..., CrawlerConfig]:
    def _builder(**overrides: Any) -> CrawlerConfig:
        base: dict[str, Any] = {"base_url": "https://www.tibia.com/", "retries": 1}
        base.update(overrides)
        return CrawlerConfig(**base)

    return _builder


class RecordingHandler:
    """MockTransport handler replaying scripted responses and counting calls."""

    def __init__(self, responses: Iterable[Any]) -> None:
        self._responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        idx = min(len(self.requests), len(self._responses)) - 1
        outcome = self._responses[idx]
        if isinstance(outcome, Exception):
            raise outcome
        if callable(outcome):
            return outcome(request)
        # Hand out a fresh copy so a scripted response can be replayed.
        return httpx.Response(
            outcome.status_code, headers=outcome.headers, content=outcome.content
        )

    @property
    def calls(self) -> int:
        return len(self.requests)


@pytest.fixture
def mock_client() -> Iterator[Callable[..., tuple[httpx.Client, RecordingHandler]]]:
    clients: list[httpx.Client] = []

    def _factory(*responses: Any) -> tuple[httpx.Client, RecordingHandler]:
        handler = RecordingHandler(responses)
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client, handler

    yield _factory
    for client in clients:
        client.close()


def at_utc(hour: int, minute: int = 0) -> Callable[[], datetime]:
    moment = datetime(2024, 5, 20, hour, minute, tzinfo=timezone.utc)
    return lambda: moment


@pytest.fixture
def outside_window() -> Callable[[], datetime]:
    return at_utc(12, 0)


@pytest.fixture
def inside_window() -> Callable[[], datetime]:
    return at_utc(8, 30)


@pytest.fixture
def page_builder() -> Callable[..., str]:
    return build_page


@pytest.fixture
def clock_at() -> Callable[..., Callable[[], datetime]]:
    return at_utc


@pytest.fixture
def boss_listing() -> list[tuple[str, str]]:
    return list(BOSSES)
