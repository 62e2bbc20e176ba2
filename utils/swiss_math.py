"""
Swiss tournament standings and top-cut odds.

Every round is modelled as an independent coin flip, so final records follow
a binomial distribution. Real Swiss pairing (players meet others on the same
record) skews this, and the numbers here are the idealised model only.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from loguru import logger

from utils.constants import DISPLAY_DECIMALS
from utils.math_utils import CombinationCache, combinations


@dataclass(frozen=True)
class SwissStanding:
    wins: int
    losses: int
    expected_count: float
    lower_bound: int
    upper_bound: int


def swiss_standings(
    num_players: int,
    num_rounds: int,
    *,
    cache: CombinationCache | None = None,
) -> list[SwissStanding]:
    """
    Expected number of players finishing on each record.

    Args:
        num_players: Players in the event
        num_rounds: Swiss rounds played
        cache: Combination memo

    Returns:
        One entry per win count, from ``num_rounds`` wins down to 0

    Example:
        >>> [s.expected_count for s in swiss_standings(8, 3)]
        [1.0, 3.0, 3.0, 1.0]
    """
    standings: list[SwissStanding] = []
    total_outcomes = 2**num_rounds if num_rounds >= 0 else 0

    for wins in range(num_rounds, -1, -1):
        probability = combinations(num_rounds, wins, cache) / total_outcomes
        expected = probability * num_players
        lower = math.floor(expected)
        standings.append(
            SwissStanding(
                wins=wins,
                losses=num_rounds - wins,
                expected_count=expected,
                lower_bound=lower,
                upper_bound=max(lower, math.ceil(expected)),
            )
        )

    return standings


def qualification_chances(
    standings: Sequence[SwissStanding], target_rank: int
) -> dict[int, float]:
    """
    Map each win count to the share of its players that finish inside ``target_rank``.

    Records are filled from the top down. A record whose whole bucket fits under
    the cutoff gets 1.0, a record entirely below it gets 0.0, and the bucket the
    cutoff falls into gets the fraction of its players that still fit.
    """
    chances: dict[int, float] = {}
    cumulative = 0.0

    for standing in standings:
        before = cumulative
        cumulative += standing.expected_count

        if cumulative <= target_rank:
            chances[standing.wins] = 1.0
        elif before >= target_rank:
            chances[standing.wins] = 0.0
        else:
            chances[standing.wins] = (target_rank - before) / standing.expected_count

    return chances


def top_rank_probability(
    total_players: int,
    total_rounds: int,
    target_rank: int,
    current_wins: int,
    current_losses: int,
    *,
    cache: CombinationCache | None = None,
) -> float:
    """
    Chance that a player on ``current_wins``-``current_losses`` finishes inside the top cut.

    Args:
        total_players: Players in the event
        total_rounds: Swiss rounds in the event
        target_rank: Size of the top cut (e.g. 8 for "top 8")
        current_wins: Rounds won so far
        current_losses: Rounds lost so far
        cache: Combination memo

    Returns:
        Probability as a percentage rounded to two decimals. A record with more
        rounds than the event returns 0.0; a cut that includes the whole field
        returns 100.0.

    Example:
        >>> top_rank_probability(64, 6, 8, 4, 1)
        53.33
    """
    remaining_rounds = total_rounds - (current_wins + current_losses)
    if remaining_rounds < 0:
        logger.debug(
            f"Record {current_wins}-{current_losses} exceeds the {total_rounds} rounds of the event"
        )
        return 0.0
    if target_rank >= total_players:
        return 100.0

    standings = swiss_standings(total_players, total_rounds, cache=cache)
    chances = qualification_chances(standings, target_rank)

    total_probability = 0.0
    outcomes = 2**remaining_rounds
    for additional_wins in range(remaining_rounds + 1):
        final_wins = current_wins + additional_wins
        weight = combinations(remaining_rounds, additional_wins, cache) / outcomes
        total_probability += weight * chances.get(final_wins, 0.0)

    return round(total_probability * 100, DISPLAY_DECIMALS)


__all__ = [
    "SwissStanding",
    "qualification_chances",
    "swiss_standings",
    "top_rank_probability",
]
