"""
Tests for the search of target hands worth chasing.
"""
import pytest
from farkle_odds.core.dice import Die, Hand
from farkle_odds.core.targets import candidate_targets, find_better_rolls


TWO_ONES_AND_RUN = [1, 1, 2, 3, 4, 5]


class TestCandidateTargets:
    """Hypothetical hands built around the current roll."""

    def test_every_face_and_straight(self):
        targets = candidate_targets(Hand.from_values(TWO_ONES_AND_RUN))
        assert len(targets) == 6 * 4 + 1
        assert Hand.from_values([1, 2, 3, 4, 5, 6]) in targets
        assert Hand((Die.ONE,) * 3 + (Die.ANY,) * 3) in targets

    def test_only_more_of_a_face(self):
        targets = candidate_targets(Hand.from_values([3, 3, 3, 3, 2, 6]))
        threes = [t for t in targets if t.dice[0] is Die.THREE]
        assert [t.face_counts[3] for t in threes] == [5, 6]


class TestFindBetterRolls:
    """Ranking of targets that beat the current score."""

    def test_third_one_is_most_likely(self):
        better = find_better_rolls(Hand.from_values(TWO_ONES_AND_RUN))
        best = better[0]
        assert best.score == 1000
        assert best.needed == [Die.ONE]
        assert best.reroll_count == 4
        assert best.chance == pytest.approx(1 - (5 / 6) ** 4)

    def test_scores_beat_current_hand(self):
        hand = Hand.from_values(TWO_ONES_AND_RUN)
        better = find_better_rolls(hand)
        assert better
        assert all(t.score > hand.score() for t in better)

    def test_one_target_per_score(self):
        better = find_better_rolls(Hand.from_values(TWO_ONES_AND_RUN))
        scores = [t.score for t in better]
        assert len(scores) == len(set(scores))

    def test_most_probable_variant_wins(self):
        # Four 1s and the straight are both worth 2000; the straight only needs a 6
        better = find_better_rolls(Hand.from_values(TWO_ONES_AND_RUN))
        worth_2000 = [t for t in better if t.score == 2000]
        assert len(worth_2000) == 1
        assert worth_2000[0].needed == [Die.SIX]
        assert worth_2000[0].chance == pytest.approx(1 / 6)

    def test_sorted_by_chance(self):
        better = find_better_rolls(Hand.from_values([2, 2, 3, 4, 6, 6]))
        chances = [t.chance for t in better]
        assert chances == sorted(chances, reverse=True)

    def test_reroll_hand_has_nothing_to_chase(self):
        assert find_better_rolls(Hand.from_values([1, 2, 3, 4, 5, 6])) == []
        assert find_better_rolls(Hand.from_values([2, 2, 2, 1, 1, 5])) == []

    def test_str(self):
        best = find_better_rolls(Hand.from_values(TWO_ONES_AND_RUN))[0]
        assert str(best) == "[ 1 1 1 x x x ] worth 1000: roll 1 with 4 dice (51.8%)"
