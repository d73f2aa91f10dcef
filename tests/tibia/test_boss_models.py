from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from tibia_crawler.tibia import BoostableBoss, BoostableBosses


def _boss(name: str, boosted: bool = False) -> BoostableBoss:
    return BoostableBoss(name=name, image_url=f"https://static.tibia.com/images/library/{name.lower()}.gif", is_boosted=boosted)


def test_empty_snapshot() -> None:
    empty = BoostableBosses()
    assert empty.is_empty
    assert empty.boosted.name == ""
    assert empty.bosses == ()


def test_json_uses_public_field_names() -> None:
    snapshot = BoostableBosses(boosted=_boss("Drume", True), bosses=(_boss("Drume", True), _boss("Kroazur")))

    payload = json.loads(snapshot.to_json())

    assert set(payload) == {"boosted", "boostable_boss_list"}
    assert payload["boosted"] == {
        "name": "Drume",
        "image_url": "https://static.tibia.com/images/library/drume.gif",
        "featured": True,
    }
    assert [boss["featured"] for boss in payload["boostable_boss_list"]] == [True, False]
    assert BoostableBosses.from_json(snapshot.to_json()) == snapshot


def test_snapshot_is_immutable() -> None:
    snapshot = BoostableBosses(boosted=_boss("Drume", True))
    with pytest.raises(ValidationError):
        snapshot.boosted = _boss("Kroazur", True)  # type: ignore[misc]
    with pytest.raises(ValidationError):
        snapshot.boosted.name = "Kroazur"  # type: ignore[misc]


def test_at_most_one_boss_is_boosted() -> None:
    with pytest.raises(ValidationError):
        BoostableBosses(boosted=_boss("Drume", True), bosses=(_boss("Drume", True), _boss("Kroazur", True)))


def test_boosted_flag_must_match_boosted_boss() -> None:
    with pytest.raises(ValidationError):
        BoostableBosses(boosted=_boss("Drume", True), bosses=(_boss("Kroazur", True),))


def test_boosted_boss_may_be_missing_from_listing() -> None:
    snapshot = BoostableBosses(boosted=_boss("Drume", True), bosses=(_boss("Kroazur"),))
    assert not snapshot.is_empty
