"""Structured data produced by the tibia.com parsers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class BoostableBoss(BaseModel):
    """A boss listed on the Boostable Bosses library page."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = ""
    image_url: str = ""
    is_boosted: bool = Field(default=False, alias="featured")


class BoostableBosses(BaseModel):
    """Today's boosted boss together with every boostable boss.

    Instances are immutable so a snapshot handed out by a cache can be shared
    between threads without copying.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    boosted: BoostableBoss = Field(default_factory=BoostableBoss)
    bosses: tuple[BoostableBoss, ...] = Field(default=(), alias="boostable_boss_list")

    @model_validator(mode="after")
    def _validate_boosted(self) -> "BoostableBosses":
        flagged = [boss for boss in self.bosses if boss.is_boosted]
        if len(flagged) > 1:
            raise ValueError("at most one boss can be boosted")
        if flagged and flagged[0].name != self.boosted.name:
            raise ValueError(
                f"boosted flag set on {flagged[0].name!r} but boosted boss is {self.boosted.name!r}"
            )
        return self

    @property
    def is_empty(self) -> bool:
        return not self.boosted.name and not self.bosses

    def to_json(self, **kwargs) -> str:
        """Serialize to the public JSON shape."""

        return self.model_dump_json(by_alias=True, **kwargs)

    @classmethod
    def from_json(cls, payload: str | bytes) -> "BoostableBosses":
        return cls.model_validate_json(payload)


__all__ = ["BoostableBoss", "BoostableBosses"]
