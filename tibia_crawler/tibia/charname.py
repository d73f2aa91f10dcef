"""Character name validation following tibia.com naming rules."""

from __future__ import annotations

from .constants import (
    MAX_RUNES_IN_CHAR_NAME,
    MAX_RUNES_IN_CHAR_WORD,
    MAX_RUNES_IN_CHAR_WORD_NEW,
    MIN_RUNES_IN_CHAR_NAME,
    MIN_RUNES_IN_CHAR_WORD,
)

_LEGACY_EXTRA_CHARS = frozenset(" '-")


def is_char_name_valid(name: str, new_rules: bool = True) -> bool:
    """Report whether ``name`` is an acceptable character name.

    With ``new_rules`` the name must satisfy the rules tibia.com enforces when
    creating or renaming a character. Without it the legacy rules apply:
    names such as "Torbjörn" still exist and are valid there, but could not be
    created today.
    """
    if not name or name.strip() != name:
        return False

    if not MIN_RUNES_IN_CHAR_NAME <= len(name) <= MAX_RUNES_IN_CHAR_NAME:
        return False

    max_word = MAX_RUNES_IN_CHAR_WORD_NEW if new_rules else MAX_RUNES_IN_CHAR_WORD
    for word in name.split():
        if not MIN_RUNES_IN_CHAR_WORD <= len(word) <= max_word:
            return False

    if "  " in name:
        return False

    valid_char = _is_valid_char_new if new_rules else _is_valid_char_legacy
    return all(valid_char(ch) for ch in name)


def _is_valid_char_new(ch: str) -> bool:
    return ch == " " or ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def _is_valid_char_legacy(ch: str) -> bool:
    return ch.isalpha() or ch in _LEGACY_EXTRA_CHARS


__all__ = ["is_char_name_valid"]
