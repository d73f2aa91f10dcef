"""Game constants used by parsers and validators."""

# Number of bosses listed on the Boostable Bosses library page.
AMOUNT_OF_BOOSTABLE_BOSSES = 91

# Character name limits, counted in Unicode code points. Legacy names allow
# longer words than names created under the current rules.
MAX_RUNES_IN_CHAR_NAME = 29
MIN_RUNES_IN_CHAR_NAME = 2
MAX_RUNES_IN_CHAR_WORD = 16
MAX_RUNES_IN_CHAR_WORD_NEW = 14
MIN_RUNES_IN_CHAR_WORD = 2

__all__ = [
    "AMOUNT_OF_BOOSTABLE_BOSSES",
    "MAX_RUNES_IN_CHAR_NAME",
    "MAX_RUNES_IN_CHAR_WORD",
    "MAX_RUNES_IN_CHAR_WORD_NEW",
    "MIN_RUNES_IN_CHAR_NAME",
    "MIN_RUNES_IN_CHAR_WORD",
]
