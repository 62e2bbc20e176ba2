"""Project-wide constants."""

from utils.constants.deck_rules import (
    BANLIST_COPY_LIMITS,
    EXTRA_DECK_TYPES,
    MAX_COPIES_PER_CARD,
    SECTION_LIMITS,
)
from utils.constants.probability import (
    DEFAULT_DECK_SIZE,
    DEFAULT_HAND_SIZE,
    DEFAULT_SWISS_PLAYERS,
    DEFAULT_SWISS_ROUNDS,
    DEFAULT_TARGET_RANK,
    DISPLAY_DECIMALS,
    MATCH_RESULTS,
    YDK_EXTRA_MARKER,
    YDK_MAIN_MARKER,
    YDK_SIDE_MARKER,
)

__all__ = [
    "BANLIST_COPY_LIMITS",
    "DEFAULT_DECK_SIZE",
    "DEFAULT_HAND_SIZE",
    "DEFAULT_SWISS_PLAYERS",
    "DEFAULT_SWISS_ROUNDS",
    "DEFAULT_TARGET_RANK",
    "DISPLAY_DECIMALS",
    "EXTRA_DECK_TYPES",
    "MATCH_RESULTS",
    "MAX_COPIES_PER_CARD",
    "SECTION_LIMITS",
    "YDK_EXTRA_MARKER",
    "YDK_MAIN_MARKER",
    "YDK_SIDE_MARKER",
]
