"""Deck construction count limits."""

MAX_COPIES_PER_CARD = 3

# TCG banlist status -> copies allowed across main, extra and side deck
BANLIST_COPY_LIMITS = {
    "Forbidden": 0,
    "Limited": 1,
    "Semi-Limited": 2,
}

SECTION_LIMITS = {
    "main": 60,
    "extra": 15,
    "side": 15,
}

EXTRA_DECK_TYPES = ("Fusion", "Synchro", "XYZ", "Link", "Token")
