"""Tournament record helpers and the Swiss calculator."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from loguru import logger

from utils.constants import MATCH_RESULTS
from utils.math_utils import CombinationCache
from utils.swiss_math import SwissStanding, swiss_standings, top_rank_probability


@dataclass(frozen=True)
class TournamentRound:
    round_number: int
    matchup: str
    won_dice_roll: bool
    result: str
    notes: str = ""

    def __post_init__(self) -> None:
        if self.result not in MATCH_RESULTS:
            raise ValueError(f"Round result must be one of {MATCH_RESULTS}, got {self.result!r}")


@dataclass(frozen=True)
class SwissCalculation:
    standings: list[SwissStanding] = field(default_factory=list)
    top_rank_percent: float | None = None


class TournamentService:
    """Summarise logged rounds and estimate top-cut odds."""

    def __init__(self, cache: CombinationCache | None = None) -> None:
        self.cache = cache if cache is not None else CombinationCache()

    @staticmethod
    def sorted_rounds(rounds: Iterable[TournamentRound]) -> list[TournamentRound]:
        return sorted(rounds, key=lambda entry: entry.round_number)

    @staticmethod
    def record(rounds: Iterable[TournamentRound]) -> tuple[int, int]:
        wins = 0
        losses = 0
        for entry in rounds:
            if entry.result == "win":
                wins += 1
            else:
                losses += 1
        return wins, losses

    def format_record(self, rounds: Iterable[TournamentRound]) -> str:
        wins, losses = self.record(rounds)
        return f"{wins} - {losses}"

    def calculate(
        self,
        players: int,
        rounds: int,
        target_rank: int,
        current_wins: int,
        current_losses: int,
    ) -> SwissCalculation:
        """
        Run the Swiss calculator for an event.

        Args:
            players: Players in the event
            rounds: Swiss rounds in the event
            target_rank: Size of the top cut
            current_wins: Rounds won so far
            current_losses: Rounds lost so far

        Returns:
            Expected standings and the top-cut percentage. An event with no
            players or no rounds yields empty standings and no percentage.
        """
        if players <= 0 or rounds <= 0:
            logger.debug(f"Skipping Swiss calculation for {players} players, {rounds} rounds")
            return SwissCalculation()

        standings = swiss_standings(players, rounds, cache=self.cache)
        probability = top_rank_probability(
            players, rounds, target_rank, current_wins, current_losses, cache=self.cache
        )
        return SwissCalculation(standings=standings, top_rank_percent=probability)

    def qualification_from_log(
        self,
        log: Iterable[TournamentRound],
        players: int,
        total_rounds: int,
        target_rank: int,
    ) -> float:
        """Top-cut percentage for the record accumulated in ``log``."""
        wins, losses = self.record(log)
        return top_rank_probability(
            players, total_rounds, target_rank, wins, losses, cache=self.cache
        )


__all__ = ["SwissCalculation", "TournamentRound", "TournamentService"]
