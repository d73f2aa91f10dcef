"""Models, constants and codecs describing the Tibia game."""

from .charname import is_char_name_valid
from .constants import AMOUNT_OF_BOOSTABLE_BOSSES
from .enums import (
    BattleEyeStatus,
    HighscoreCategory,
    PvPType,
    UnknownValue,
    Vocation,
    WorldType,
)
from .models import BoostableBoss, BoostableBosses

__all__ = [
    "AMOUNT_OF_BOOSTABLE_BOSSES",
    "BattleEyeStatus",
    "BoostableBoss",
    "BoostableBosses",
    "HighscoreCategory",
    "PvPType",
    "UnknownValue",
    "Vocation",
    "WorldType",
    "is_char_name_valid",
]
