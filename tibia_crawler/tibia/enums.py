"""Closed sets of tibia.com values and their string/int/JSON codecs.

Every set is an ``IntEnum`` whose value is the id tibia.com uses. Members
render as their display name, parse case-insensitively from display names,
common aliases and numeric strings, and know the query parameter tibia.com
expects when filtering by them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer


class UnknownValue(ValueError):
    """Raised when a value does not map onto any known member."""


class UnknownBattleEyeStatus(UnknownValue):
    pass


class UnknownVocation(UnknownValue):
    pass


class UnknownHighscoreCategory(UnknownValue):
    pass


class UnknownPvPType(UnknownValue):
    pass


class UnknownWorldType(UnknownValue):
    pass


@dataclass(frozen=True)
class _Codec:
    query_key: str
    display: dict[int, str]
    aliases: dict[str, int]
    error: type[UnknownValue]
    default: int
    # Members that exist but can not be produced by parsing.
    hidden: frozenset[int] = field(default_factory=frozenset)


_CODECS: dict[type, _Codec] = {}


class TibiaEnum(IntEnum):
    """Shared codec behaviour; subclasses register a ``_Codec``."""

    @classmethod
    def _codec(cls) -> _Codec:
        return _CODECS[cls]

    @property
    def id(self) -> int:
        return int(self.value)

    @property
    def query_key(self) -> str:
        return self._codec().query_key

    @property
    def query_value(self) -> str:
        return str(self.id)

    def __str__(self) -> str:
        return self._codec().display[self.value]

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    @classmethod
    def default(cls) -> "TibiaEnum":
        return cls(cls._codec().default)

    @classmethod
    def from_int(cls, value: int):
        codec = cls._codec()
        if value in codec.hidden or value not in codec.display:
            raise codec.error(f"unknown {cls.__name__}: {value!r}")
        return cls(value)

    @classmethod
    def from_string(cls, value: str):
        codec = cls._codec()
        key = value.strip().lower()
        if key in codec.aliases:
            return cls(codec.aliases[key])
        try:
            number = int(key)
        except ValueError:
            raise codec.error(f"unknown {cls.__name__}: {value!r}") from None
        return cls.from_int(number)

    @classmethod
    def from_json(cls, value: Any):
        """Decode a JSON scalar; an empty string yields the default member."""

        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise cls._codec().error(f"can not decode {type(value).__name__} into {cls.__name__}")
        if isinstance(value, (int, float)):
            return cls.from_int(int(value))
        if isinstance(value, str):
            if value == "":
                return cls.default()
            return cls.from_string(value)
        raise cls._codec().error(f"can not decode {type(value).__name__} into {cls.__name__}")

    def to_json(self) -> str:
        return str(self)


def _aliases(table: dict[int, tuple[str, ...]]) -> dict[str, int]:
    return {alias: key for key, names in table.items() for alias in names}


class Vocation(TibiaEnum):
    ALL = 0
    NONE = 1
    KNIGHT = 2
    PALADIN = 3
    SORCERER = 4
    DRUID = 5
    ELITE_KNIGHT = 6
    ROYAL_PALADIN = 7
    MASTER_SORCERER = 8
    ELDER_DRUID = 9

    @property
    def query_id(self) -> int:
        """Id of the base vocation; tibia.com filters ignore promotions."""

        return _PROMOTIONS.get(self, self).id

    @property
    def query_value(self) -> str:
        return str(self.query_id)


_PROMOTIONS = {
    Vocation.ELITE_KNIGHT: Vocation.KNIGHT,
    Vocation.ROYAL_PALADIN: Vocation.PALADIN,
    Vocation.MASTER_SORCERER: Vocation.SORCERER,
    Vocation.ELDER_DRUID: Vocation.DRUID,
}

_CODECS[Vocation] = _Codec(
    query_key="profession",
    display={
        0: "All",
        1: "None",
        2: "Knight",
        3: "Paladin",
        4: "Sorcerer",
        5: "Druid",
        6: "Elite Knight",
        7: "Royal Paladin",
        8: "Master Sorcerer",
        9: "Elder Druid",
    },
    aliases=_aliases(
        {
            0: ("all",),
            1: ("none",),
            2: ("knight", "knights"),
            3: ("paladin", "paladins"),
            4: ("sorcerer", "sorcerers"),
            5: ("druid", "druids"),
            6: ("elite knight", "elite knights"),
            7: ("royal paladin", "royal paladins"),
            8: ("master sorcerer", "master sorcerers"),
            9: ("elder druid", "elder druids"),
        }
    ),
    error=UnknownVocation,
    default=0,
)


_PVP_DISPLAY = {
    0: "Open PvP",
    1: "Optional PvP",
    2: "Hardcore PvP",
    3: "Retro Open PvP",
    4: "Retro Hardcore PvP",
}
_PVP_ALIASES = _aliases(
    {
        0: ("open", "openpvp", "open pvp"),
        1: ("optional", "optionalpvp", "optional pvp"),
        2: ("hardcore", "hardcorepvp", "hardcore pvp"),
        3: ("retro open", "retroopen", "retro open pvp", "retroopenpvp"),
        4: ("retro hardcore", "retrohardcore", "retro hardcore pvp", "retrohardcorepvp"),
    }
)


class WorldType(TibiaEnum):
    OPEN_PVP = 0
    OPTIONAL_PVP = 1
    HARDCORE_PVP = 2
    RETRO_OPEN_PVP = 3
    RETRO_HARDCORE_PVP = 4


_CODECS[WorldType] = _Codec(
    query_key="worldtypes[]",
    display=_PVP_DISPLAY,
    aliases=_PVP_ALIASES,
    error=UnknownWorldType,
    default=0,
)


class PvPType(TibiaEnum):
    OPEN_PVP = 0
    OPTIONAL_PVP = 1
    HARDCORE_PVP = 2
    RETRO_OPEN_PVP = 3
    RETRO_HARDCORE_PVP = 4


_CODECS[PvPType] = _Codec(
    query_key="PvPTypes[]",
    display=_PVP_DISPLAY,
    aliases=_PVP_ALIASES,
    error=UnknownPvPType,
    default=0,
)


class BattleEyeStatus(TibiaEnum):
    ANY_WORLD = -1
    UNPROTECTED = 0
    PROTECTED = 1
    INITIALLY_PROTECTED = 2


_CODECS[BattleEyeStatus] = _Codec(
    query_key="beprotection",
    display={
        -1: "Any World",
        0: "Unprotected",
        1: "Protected",
        2: "Initially Protected",
    },
    aliases=_aliases(
        {
            -1: ("any world", "any", "anyworld"),
            0: ("unprotected",),
            1: ("protected",),
            2: ("initially protected", "initiallyprotected"),
        }
    ),
    error=UnknownBattleEyeStatus,
    default=-1,
)


class HighscoreCategory(TibiaEnum):
    DEFAULT = 0
    ACHIEVEMENTS = 1
    AXE_FIGHTING = 2
    CHARM_POINTS = 3
    CLUB_FIGHTING = 4
    DISTANCE_FIGHTING = 5
    EXPERIENCE_POINTS = 6
    FISHING = 7
    FIST_FIGHTING = 8
    GOSHNARS_TAINT = 9
    LOYALTY_POINTS = 10
    MAGIC_LEVEL = 11
    SHIELDING = 12
    SWORD_FIGHTING = 13
    DROME_SCORE = 14
    BOSS_POINTS = 15

    @property
    def id(self) -> int:
        # tibia.com ranks by experience when no category is given
        if self is HighscoreCategory.DEFAULT:
            return HighscoreCategory.EXPERIENCE_POINTS.value
        return int(self.value)


_CODECS[HighscoreCategory] = _Codec(
    query_key="category",
    display={
        0: "Experience Points",
        1: "Achievements",
        2: "Axe Fighting",
        3: "Charm Points",
        4: "Club Fighting",
        5: "Distance Fighting",
        6: "Experience Points",
        7: "Fishing",
        8: "Fist Fighting",
        9: "Goshnar's Taint",
        10: "Loyalty Points",
        11: "Magic Level",
        12: "Shielding",
        13: "Sword Fighting",
        14: "Drome Score",
        15: "Boss Points",
    },
    aliases=_aliases(
        {
            1: ("achievement", "achievements"),
            2: ("axe", "axe fighting", "axefighting"),
            3: ("charm points", "charm", "charmpoints"),
            4: ("club fighting", "club", "clubfighting"),
            5: ("distance fighting", "distance", "distancefighting"),
            6: ("experience points", "exp", "xp", "experience", "experiencepoints", "level"),
            7: ("fishing",),
            8: ("fist fighting", "fist", "fistfighting"),
            9: ("goshnars taint", "taint", "goshnar's taint", "goshnars", "goshnarstaint"),
            10: ("loyalty points", "loyalty", "loyaltypoints"),
            11: ("magic level", "magic", "ml", "magiclevel"),
            12: ("shielding",),
            13: ("sword fighting", "sword", "swordfighting"),
            14: ("drome score", "drome", "dromescore"),
            15: ("boss points", "bosspoints"),
        }
    ),
    error=UnknownHighscoreCategory,
    default=0,
    hidden=frozenset({0}),
)


def _json_field(enum_cls: type[TibiaEnum]) -> Any:
    return Annotated[
        enum_cls,
        BeforeValidator(enum_cls.from_json),
        PlainSerializer(lambda member: member.to_json(), return_type=str),
    ]


VocationField = _json_field(Vocation)
PvPTypeField = _json_field(PvPType)
HighscoreCategoryField = _json_field(HighscoreCategory)


__all__ = [
    "BattleEyeStatus",
    "HighscoreCategory",
    "HighscoreCategoryField",
    "PvPType",
    "PvPTypeField",
    "TibiaEnum",
    "UnknownBattleEyeStatus",
    "UnknownHighscoreCategory",
    "UnknownPvPType",
    "UnknownValue",
    "UnknownVocation",
    "UnknownWorldType",
    "Vocation",
    "VocationField",
    "WorldType",
]
