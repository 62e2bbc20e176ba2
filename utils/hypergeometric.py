"""
Constrained multivariate hypergeometric probabilities.

A deck is split into named groups plus an implicit "other" remainder. Each
group carries its own [min, max] draw-count constraint, and the solver counts
every allocation of the hand across the groups that satisfies all of them at
once. Counts are exact integers; only the final ratio becomes a float.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from loguru import logger

from utils.constants import DISPLAY_DECIMALS
from utils.math_utils import CombinationCache, combinations


@dataclass(frozen=True)
class HyperGroup:
    """A named slice of the deck with an inclusive draw-count range."""

    name: str
    count_in_pool: int
    min_desired: int
    max_desired: int


@dataclass(frozen=True)
class DrawProbabilityRow:
    copies: int
    exact_percent: float
    at_least_percent: float


def count_successful_hands(
    hand_size: int,
    groups: Sequence[HyperGroup],
    other_count: int,
    *,
    cache: CombinationCache | None = None,
) -> int:
    """
    Count the hands that satisfy every group constraint.

    Walks the groups depth-first, choosing how many cards each one contributes;
    whatever is left of the hand comes from the ``other_count`` unconstrained cards.

    Args:
        hand_size: Number of cards drawn
        groups: Constrained groups, visited in order
        other_count: Cards in the deck that belong to no group
        cache: Combination memo

    Returns:
        Exact number of successful hands
    """
    successful = 0
    # (group index, cards still to draw, ways to draw the cards chosen so far)
    stack: list[tuple[int, int, int]] = [(0, hand_size, 1)]

    while stack:
        index, remaining, ways = stack.pop()
        if remaining < 0:
            continue

        if index == len(groups):
            if remaining <= other_count:
                successful += ways * combinations(other_count, remaining, cache)
            continue

        group = groups[index]
        min_take = max(0, group.min_desired)
        max_take = min(remaining, group.count_in_pool, group.max_desired)

        for take in range(min_take, max_take + 1):
            group_ways = combinations(group.count_in_pool, take, cache)
            if group_ways > 0:
                stack.append((index + 1, remaining - take, ways * group_ways))

    return successful


def solve_constraints(
    pool_size: int,
    hand_size: int,
    groups: Sequence[HyperGroup],
    *,
    cache: CombinationCache | None = None,
) -> float:
    """
    Probability that a random hand satisfies every group constraint simultaneously.

    Args:
        pool_size: Total number of cards in the deck
        hand_size: Number of cards drawn
        groups: Groups with their draw-count ranges
        cache: Combination memo

    Returns:
        Probability as a percentage between 0.0 and 100.0 (unrounded).
        Impossible setups (hand larger than the deck, groups larger than the
        deck) return 0.0 instead of raising.

    Example:
        >>> # At least one copy of a 3-of in a 5-card hand from 40 cards
        >>> solve_constraints(40, 5, [HyperGroup("Ash Blossom", 3, 1, 3)])
        33.755...
    """
    if hand_size > pool_size or hand_size < 0:
        logger.debug(f"Hand size {hand_size} does not fit a {pool_size}-card deck")
        return 0.0

    total_in_groups = sum(group.count_in_pool for group in groups)
    if total_in_groups > pool_size:
        logger.debug(f"Groups hold {total_in_groups} cards but the deck only has {pool_size}")
        return 0.0

    total_hands = combinations(pool_size, hand_size, cache)
    if total_hands == 0:
        return 0.0

    successful = count_successful_hands(
        hand_size, groups, pool_size - total_in_groups, cache=cache
    )
    # int / int is correctly rounded, so neither count is narrowed before the ratio
    return successful / total_hands * 100


def build_draw_table(
    pool_size: int,
    target_count: int,
    hand_size: int,
    *,
    cache: CombinationCache | None = None,
) -> list[DrawProbabilityRow]:
    """
    Tabulate the chance of drawing each possible number of copies of one card group.

    Args:
        pool_size: Total number of cards in the deck
        target_count: Copies of the target group in the deck
        hand_size: Number of cards drawn

    Returns:
        One row per copy count from 0 to min(target_count, hand_size), with the
        "exactly" and "at least" percentages rounded for display
    """
    rows: list[DrawProbabilityRow] = []
    max_copies = min(target_count, hand_size)

    for copies in range(max_copies + 1):
        exact = solve_constraints(
            pool_size,
            hand_size,
            [HyperGroup("target", target_count, copies, copies)],
            cache=cache,
        )
        at_least = solve_constraints(
            pool_size,
            hand_size,
            [HyperGroup("target", target_count, copies, hand_size)],
            cache=cache,
        )
        rows.append(
            DrawProbabilityRow(
                copies=copies,
                exact_percent=round(exact, DISPLAY_DECIMALS),
                at_least_percent=round(at_least, DISPLAY_DECIMALS),
            )
        )

    return rows


__all__ = [
    "DrawProbabilityRow",
    "HyperGroup",
    "build_draw_table",
    "count_successful_hands",
    "solve_constraints",
]
