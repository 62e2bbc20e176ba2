"""Parsing helpers for YDK deck files."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable

from utils.constants import YDK_EXTRA_MARKER, YDK_MAIN_MARKER, YDK_SIDE_MARKER

_LEADING_INT = re.compile(r"^[+-]?\d+")

_SECTION_MARKERS = (
    (YDK_MAIN_MARKER, "main"),
    (YDK_EXTRA_MARKER, "extra"),
    (YDK_SIDE_MARKER, "side"),
)


@dataclass
class DeckData:
    main: list[int] = field(default_factory=list)
    extra: list[int] = field(default_factory=list)
    side: list[int] = field(default_factory=list)

    def counts(self) -> dict[str, int]:
        return {"main": len(self.main), "extra": len(self.extra), "side": len(self.side)}


@dataclass(frozen=True)
class YdkEntry:
    section: str
    card_id: int


class DeckParser:
    """Parse YDK deck text into card id lists for downstream services."""

    def parse_ydk(self, content: str) -> DeckData:
        """
        Convert YDK text to main/extra/side passcode lists.

        Args:
            content: Deck file text (``#main``, ``#extra`` and ``!side`` headers
                followed by one passcode per line)

        Returns:
            DeckData with ids in file order. Lines before the first header and
            lines that do not start with a number are skipped.
        """
        deck = DeckData()
        for entry in self._iter_entries(content):
            getattr(deck, entry.section).append(entry.card_id)
        return deck

    def _iter_entries(self, content: str) -> Iterable[YdkEntry]:
        section: str | None = None

        for line in content.split("\n"):
            line = line.strip()
            if not line:
                continue

            marker_section = self._section_for(line)
            if marker_section is not None:
                section = marker_section
                continue

            match = _LEADING_INT.match(line)
            if match is None or section is None:
                continue

            yield YdkEntry(section=section, card_id=int(match.group(0)))

    @staticmethod
    def _section_for(line: str) -> str | None:
        for marker, section in _SECTION_MARKERS:
            if line.startswith(marker):
                return section
        return None


__all__ = ["DeckData", "DeckParser", "YdkEntry"]
