"""Cursor-based marker scanning over raw page text.

tibia.com pages are scraped by locating known markers in order rather than
by building a DOM. ``MarkerScanner`` keeps a cursor into the text; each step
finds a marker at or after the cursor, extracts the text between markers and
moves the cursor forward. A marker that cannot be found raises
``StructureError`` naming what was being looked for.
"""

from __future__ import annotations

from ..errors import StructureError


class MarkerScanner:
    """Walk forward through ``text`` one marker at a time."""

    def __init__(self, text: str, *, context: str = "parser") -> None:
        self.text = text
        self.context = context
        self.position = 0

    def __contains__(self, marker: str) -> bool:
        return self.text.find(marker, self.position) != -1

    def find(self, marker: str, what: str) -> int:
        """Return the index of the next ``marker`` without moving the cursor."""

        idx = self.text.find(marker, self.position)
        if idx == -1:
            raise StructureError(f"{self.context}: {what} not found")
        return idx

    def seek(self, marker: str, what: str, *, past: bool = True) -> int:
        """Move the cursor to ``marker``, or just past it when ``past`` is set."""

        idx = self.find(marker, what)
        self.position = idx + len(marker) if past else idx
        return self.position

    def read_until(self, marker: str, what: str) -> str:
        """Return text from the cursor up to ``marker``; the cursor stops on it."""

        idx = self.find(marker, what)
        value = self.text[self.position : idx]
        self.position = idx
        return value

    def between(self, start: str, end: str, what: str, *, keep_start: bool = False) -> str:
        """Extract the text enclosed by ``start`` and ``end``.

        With ``keep_start`` the start marker is part of the value, which suits
        URL prefixes.
        """
        self.seek(start, f"{what} start", past=not keep_start)
        return self.read_until(end, f"{what} end")

    def remaining(self) -> str:
        return self.text[self.position :]


__all__ = ["MarkerScanner"]
