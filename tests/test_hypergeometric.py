"""Unit tests for the constrained hypergeometric solver and draw tables."""

import math

import pytest

from utils.hypergeometric import (
    DrawProbabilityRow,
    HyperGroup,
    build_draw_table,
    count_successful_hands,
    solve_constraints,
)
from utils.math_utils import CombinationCache


def _classic_exact(pool: int, copies_in_pool: int, hand: int, copies: int) -> float:
    """Single-group hypergeometric P(X = copies) as a percentage."""
    others = pool - copies_in_pool
    numerator = math.comb(copies_in_pool, copies) * math.comb(others, hand - copies)
    return numerator / math.comb(pool, hand) * 100


class TestSolveConstraints:
    """Tests for solve_constraints."""

    def test_single_unconstrained_group_is_certain(self) -> None:
        """A group covering the whole deck with no real constraint always succeeds."""
        result = solve_constraints(40, 5, [HyperGroup("deck", 40, 0, 5)])
        assert result == 100.0

    def test_at_least_one_of_three_in_forty(self) -> None:
        """At least one copy of a 3-of in a 5-card hand from a 40-card deck."""
        result = solve_constraints(40, 5, [HyperGroup("Ash Blossom", 3, 1, 3)])
        expected = (1 - math.comb(37, 5) / math.comb(40, 5)) * 100
        assert result == pytest.approx(expected)
        assert round(result, 2) == 33.76

    def test_opening_hand_exactly_one_playset(self) -> None:
        """Exactly 1 copy of a 4-of in a 7-card hand from 60 cards (~33.63%)."""
        result = solve_constraints(60, 7, [HyperGroup("Lightning Bolt", 4, 1, 1)])
        assert 33.5 <= result <= 33.7

    def test_opening_hand_at_least_one_playset(self) -> None:
        """At least 1 copy of a 4-of in a 7-card hand from 60 cards (~39.95%)."""
        result = solve_constraints(60, 7, [HyperGroup("Lightning Bolt", 4, 1, 7)])
        assert 39.8 <= result <= 40.1

    def test_two_groups_match_brute_force_sum(self) -> None:
        """Two simultaneous constraints equal the explicit multivariate sum."""
        starters = HyperGroup("Starters", 9, 1, 5)
        handtraps = HyperGroup("Hand traps", 12, 1, 5)
        other = 40 - 9 - 12

        ways = 0
        for a in range(1, 6):
            for b in range(1, 6 - a):
                ways += math.comb(9, a) * math.comb(12, b) * math.comb(other, 5 - a - b)
        expected = ways / math.comb(40, 5) * 100

        assert solve_constraints(40, 5, [starters, handtraps]) == pytest.approx(expected)

    def test_group_order_does_not_matter(self) -> None:
        groups = [
            HyperGroup("Starters", 9, 1, 2),
            HyperGroup("Extenders", 6, 0, 1),
            HyperGroup("Bricks", 4, 0, 0),
        ]
        forward = solve_constraints(40, 6, groups)
        backward = solve_constraints(40, 6, list(reversed(groups)))
        assert forward == pytest.approx(backward)

    def test_exact_copies_match_classic_formula(self) -> None:
        for copies in range(0, 4):
            result = solve_constraints(40, 5, [HyperGroup("target", 3, copies, copies)])
            assert result == pytest.approx(_classic_exact(40, 3, 5, copies))

    def test_large_deck_keeps_precision(self) -> None:
        """Half the deck in one group, drawing half the deck."""
        result = solve_constraints(60, 30, [HyperGroup("half", 30, 15, 15)])
        expected = math.comb(30, 15) ** 2 / math.comb(60, 30) * 100
        assert result == pytest.approx(expected, rel=1e-12)

    def test_no_groups_is_certain(self) -> None:
        assert solve_constraints(40, 5, []) == 100.0

    def test_idempotent(self) -> None:
        """Repeated calls give bit-identical results."""
        groups = [HyperGroup("Starters", 9, 1, 5), HyperGroup("Bricks", 5, 0, 1)]
        first = solve_constraints(40, 5, groups)
        for _ in range(5):
            assert solve_constraints(40, 5, groups) == first

    def test_uses_supplied_cache(self, combination_cache: CombinationCache) -> None:
        solve_constraints(40, 5, [HyperGroup("target", 3, 1, 3)], cache=combination_cache)
        assert (40, 5) in combination_cache


class TestSolveConstraintsEdgeCases:
    """Out-of-domain inputs map to 0% instead of raising."""

    def test_hand_larger_than_deck(self) -> None:
        assert solve_constraints(5, 6, [HyperGroup("target", 3, 1, 3)]) == 0.0

    def test_negative_hand_size(self) -> None:
        assert solve_constraints(40, -1, []) == 0.0

    def test_groups_exceed_deck(self) -> None:
        groups = [HyperGroup("a", 30, 0, 5), HyperGroup("b", 11, 0, 5)]
        assert solve_constraints(40, 5, groups) == 0.0

    def test_min_above_max(self) -> None:
        assert solve_constraints(40, 5, [HyperGroup("target", 3, 2, 1)]) == 0.0

    def test_min_above_copies_in_deck(self) -> None:
        assert solve_constraints(40, 5, [HyperGroup("target", 3, 4, 5)]) == 0.0

    def test_remaining_cards_cannot_fill_hand(self) -> None:
        """Capping every group leaves too few other cards to complete the hand."""
        groups = [HyperGroup("a", 20, 0, 1), HyperGroup("b", 18, 0, 1)]
        # At most 2 from the groups, so 3 must come from the 2 other cards
        assert solve_constraints(40, 5, groups) == 0.0

    def test_empty_deck_empty_hand(self) -> None:
        assert solve_constraints(0, 0, []) == 100.0


class TestCountSuccessfulHands:
    """Tests for the raw enumeration."""

    def test_counts_every_hand_without_constraints(self) -> None:
        assert count_successful_hands(5, [], 40) == math.comb(40, 5)

    def test_exact_ways_for_one_group(self) -> None:
        ways = count_successful_hands(5, [HyperGroup("target", 3, 1, 1)], 37)
        assert ways == 3 * math.comb(37, 4)

    def test_cache_is_keyword_only(self, combination_cache: CombinationCache) -> None:
        with pytest.raises(TypeError):
            count_successful_hands(5, [], 40, combination_cache)
        assert count_successful_hands(5, [], 40, cache=combination_cache) == math.comb(40, 5)
        assert (40, 5) in combination_cache


class TestBuildDrawTable:
    """Tests for build_draw_table."""

    def test_row_count_and_order(self) -> None:
        table = build_draw_table(40, 3, 5)
        assert [row.copies for row in table] == [0, 1, 2, 3]

    def test_rows_limited_by_hand_size(self) -> None:
        table = build_draw_table(40, 9, 5)
        assert [row.copies for row in table] == [0, 1, 2, 3, 4, 5]

    def test_at_least_zero_is_certain(self) -> None:
        table = build_draw_table(40, 3, 5)
        assert table[0].at_least_percent == 100.0

    def test_at_least_is_non_increasing(self) -> None:
        table = build_draw_table(40, 3, 5)
        values = [row.at_least_percent for row in table]
        assert all(a >= b for a, b in zip(values, values[1:]))

    def test_exact_values_are_rounded_classic_values(self) -> None:
        table = build_draw_table(40, 3, 5)
        for row in table:
            assert row.exact_percent == round(_classic_exact(40, 3, 5, row.copies), 2)

    def test_exact_values_sum_to_about_one_hundred(self) -> None:
        table = build_draw_table(60, 4, 7)
        assert sum(row.exact_percent for row in table) == pytest.approx(100.0, abs=0.05)

    def test_at_least_one_matches_solver(self) -> None:
        table = build_draw_table(40, 3, 5)
        assert table[1].at_least_percent == 33.76

    def test_zero_target_count(self) -> None:
        """No copies in the deck gives a single certain row, not a failure."""
        assert build_draw_table(40, 0, 5) == [
            DrawProbabilityRow(copies=0, exact_percent=100.0, at_least_percent=100.0)
        ]

    def test_negative_target_count_is_empty(self) -> None:
        assert build_draw_table(40, -1, 5) == []

    def test_hand_larger_than_deck_is_all_zero(self) -> None:
        table = build_draw_table(4, 3, 5)
        assert all(row.exact_percent == 0.0 and row.at_least_percent == 0.0 for row in table)

    def test_idempotent(self) -> None:
        """Repeated calls give identical tables."""
        first = build_draw_table(60, 4, 7)
        for _ in range(5):
            assert build_draw_table(60, 4, 7) == first
