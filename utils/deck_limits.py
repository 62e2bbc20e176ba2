"""
Deck count limits.

Copy limits apply to a card name across the main, extra and side deck
combined; the TCG banlist lowers the limit for Limited and Semi-Limited cards
and removes Forbidden cards entirely. Each section also has a size cap, and
extra deck monsters can only live in the extra deck (or the side deck).
"""

from __future__ import annotations

from collections.abc import Sequence

from utils.constants import (
    BANLIST_COPY_LIMITS,
    EXTRA_DECK_TYPES,
    MAX_COPIES_PER_CARD,
    SECTION_LIMITS,
)


def is_extra_deck_type(card_type: str) -> bool:
    """Return True for Fusion, Synchro, XYZ, Link and Token cards."""
    upper = card_type.upper()
    return any(kind.upper() in upper for kind in EXTRA_DECK_TYPES)


def copies_allowed(ban_status: str | None) -> int:
    """Copies of one card name a deck may hold under ``ban_status``."""
    if ban_status is None:
        return MAX_COPIES_PER_CARD
    return BANLIST_COPY_LIMITS.get(ban_status, MAX_COPIES_PER_CARD)


def within_copy_limit(
    name: str,
    ban_status: str | None,
    main: Sequence[str],
    extra: Sequence[str],
    side: Sequence[str],
) -> bool:
    """True when one more copy of ``name`` still fits the copy limit."""
    in_deck = sum(1 for section in (main, extra, side) for card in section if card == name)
    return in_deck < copies_allowed(ban_status)


def placement_for(card_type: str, target: str = "auto") -> str | None:
    """
    Section a card goes to when added with ``target``.

    Args:
        card_type: Card type line (e.g. "Synchro Tuner Effect Monster")
        target: "auto", "main", "extra" or "side"

    Returns:
        The destination section, or None when the card cannot go there
        (an extra deck monster aimed at the main deck, or the reverse)
    """
    extra_type = is_extra_deck_type(card_type)
    if target == "side":
        return "side"
    if target == "auto":
        return "extra" if extra_type else "main"
    if target == "extra":
        return "extra" if extra_type else None
    if target == "main":
        return None if extra_type else "main"
    return None


def can_add_card(
    name: str,
    card_type: str,
    ban_status: str | None,
    main: Sequence[str],
    extra: Sequence[str],
    side: Sequence[str],
    target: str = "auto",
) -> str | None:
    """
    Check every count limit for adding one copy of a card.

    Args:
        name: Card name
        card_type: Card type line, used to route extra deck monsters
        ban_status: TCG banlist status ("Forbidden", "Limited",
            "Semi-Limited") or None when unrestricted
        main: Current main deck, one name per copy
        extra: Current extra deck, one name per copy
        side: Current side deck, one name per copy
        target: "auto", "main", "extra" or "side"

    Returns:
        The section the card would be added to, or None when a limit blocks it
    """
    if not within_copy_limit(name, ban_status, main, extra, side):
        return None

    section = placement_for(card_type, target)
    if section is None:
        return None

    current = {"main": main, "extra": extra, "side": side}[section]
    if len(current) >= SECTION_LIMITS[section]:
        return None
    return section


__all__ = [
    "can_add_card",
    "copies_allowed",
    "is_extra_deck_type",
    "placement_for",
    "within_copy_limit",
]
