"""
Deck Service - Business logic for deck probability questions.

This module wires parsed decks into the probability engine:
- YDK parsing
- Opening-hand draw tables for a selection of cards
- Multi-group constraint queries
- Deck count limits
- Side-deck swaps
"""

from collections.abc import Collection, Sequence
from dataclasses import dataclass

from loguru import logger

from services.deck_parser import DeckData, DeckParser
from utils.deck_limits import can_add_card as check_deck_limits
from utils.hypergeometric import (
    DrawProbabilityRow,
    HyperGroup,
    build_draw_table,
    solve_constraints,
)
from utils.math_utils import CombinationCache


@dataclass(frozen=True)
class SideDeckSwap:
    """Result of swapping cards between main and side deck."""

    main: list[str]
    side: list[str]
    applied: bool


@dataclass(frozen=True)
class DeckLists:
    """Card names per deck section, one entry per copy."""

    main: Sequence[str] = ()
    extra: Sequence[str] = ()
    side: Sequence[str] = ()


class DeckService:
    """Service for deck-related probability logic."""

    def __init__(
        self,
        deck_parser: DeckParser | None = None,
        cache: CombinationCache | None = None,
    ):
        """
        Initialize the deck service.

        Args:
            deck_parser: DeckParser instance
            cache: Combination memo shared by every calculation of this service
        """
        self.deck_parser = deck_parser or DeckParser()
        self.cache = cache if cache is not None else CombinationCache()

    # ============= Deck Parsing =============

    def parse_deck(self, content: str) -> DeckData:
        """
        Parse YDK text into main/extra/side id lists.

        Args:
            content: Deck file contents

        Returns:
            DeckData with card passcodes per section
        """
        return self.deck_parser.parse_ydk(content)

    # ============= Draw Probabilities =============

    @staticmethod
    def count_target_copies(main_cards: Sequence[str], selected_names: Collection[str]) -> int:
        """
        Count how many main deck entries belong to the selected card names.

        Args:
            main_cards: Main deck, one card name per copy
            selected_names: Card names the player wants to draw

        Returns:
            Number of copies in the main deck
        """
        if not selected_names:
            return 0
        return sum(1 for name in main_cards if name in selected_names)

    def draw_table_for_selection(
        self,
        main_cards: Sequence[str],
        selected_names: Collection[str],
        hand_size: int,
    ) -> list[DrawProbabilityRow]:
        """
        Build the opening-hand table for the selected cards.

        Args:
            main_cards: Main deck, one card name per copy
            selected_names: Card names treated as one target group
            hand_size: Cards in the opening hand

        Returns:
            Draw-probability rows, or an empty list when nothing is selected
            or the hand is empty
        """
        if not selected_names or hand_size <= 0:
            return []
        copies = self.count_target_copies(main_cards, selected_names)
        return build_draw_table(len(main_cards), copies, hand_size, cache=self.cache)

    def solve_constraints(
        self, pool_size: int, hand_size: int, groups: Sequence[HyperGroup]
    ) -> float:
        """
        Probability (percentage) that a hand satisfies every group's range at once.

        Args:
            pool_size: Cards in the deck
            hand_size: Cards drawn
            groups: Named groups with min/max copies wanted
        """
        return solve_constraints(pool_size, hand_size, groups, cache=self.cache)

    # ============= Deck Limits =============

    def can_add_card(
        self,
        name: str,
        card_type: str,
        ban_status: str | None,
        deck: DeckLists,
        target: str = "auto",
    ) -> str | None:
        """
        Check whether one more copy of a card may be added to the deck.

        Args:
            name: Card name
            card_type: Card type line, used to route extra deck monsters
            ban_status: TCG banlist status, or None when unrestricted
            deck: Current main/extra/side card names
            target: "auto", "main", "extra" or "side"

        Returns:
            The section the card goes to, or None when a count limit blocks it
        """
        section = check_deck_limits(
            name, card_type, ban_status, deck.main, deck.extra, deck.side, target=target
        )
        if section is None:
            logger.debug(f"Cannot add {name!r} to {target} deck: limit reached")
        return section

    # ============= Side Decking =============

    def swap_side_deck(
        self,
        main_cards: Sequence[str],
        side_cards: Sequence[str],
        swap_out: Collection[int],
        swap_in: Collection[int],
    ) -> SideDeckSwap:
        """
        Exchange main deck cards for side deck cards one-for-one.

        Args:
            main_cards: Current main deck
            side_cards: Current side deck
            swap_out: Main deck indices leaving the main deck
            swap_in: Side deck indices entering the main deck

        Returns:
            SideDeckSwap with the new lists. Repeated and out-of-range indices
            are discarded first; when the remaining counts differ nothing moves
            and ``applied`` is False.
        """
        swap_out = {index for index in set(swap_out) if 0 <= index < len(main_cards)}
        swap_in = {index for index in set(swap_in) if 0 <= index < len(side_cards)}

        if len(swap_out) != len(swap_in):
            logger.info(
                f"Side deck swap rejected: {len(swap_out)} cards out, {len(swap_in)} cards in"
            )
            return SideDeckSwap(main=list(main_cards), side=list(side_cards), applied=False)

        moving_out = [card for index, card in enumerate(main_cards) if index in swap_out]
        moving_in = [card for index, card in enumerate(side_cards) if index in swap_in]

        final_main = [card for index, card in enumerate(main_cards) if index not in swap_out]
        final_side = [card for index, card in enumerate(side_cards) if index not in swap_in]

        return SideDeckSwap(
            main=final_main + moving_in,
            side=final_side + moving_out,
            applied=True,
        )


# Global instance for callers that do not manage their own
_default_service = None


def get_deck_service() -> DeckService:
    """Get the default deck service instance."""
    global _default_service
    if _default_service is None:
        _default_service = DeckService()
    return _default_service


def reset_deck_service() -> None:
    """
    Reset the global deck service instance.

    This is primarily useful for testing to ensure test isolation
    and prevent state leakage between tests.
    """
    global _default_service
    _default_service = None


__all__ = [
    "DeckLists",
    "DeckService",
    "SideDeckSwap",
    "get_deck_service",
    "reset_deck_service",
]
