"""Probability calculator defaults and display precision."""

DEFAULT_DECK_SIZE = 40
DEFAULT_HAND_SIZE = 5

DEFAULT_SWISS_PLAYERS = 64
DEFAULT_SWISS_ROUNDS = 6
DEFAULT_TARGET_RANK = 8

# Decimal places kept when a percentage is handed to the UI
DISPLAY_DECIMALS = 2

YDK_MAIN_MARKER = "#main"
YDK_EXTRA_MARKER = "#extra"
YDK_SIDE_MARKER = "!side"

MATCH_RESULTS = ("win", "loss")
