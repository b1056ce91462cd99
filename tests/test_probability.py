"""
Tests for the factorial, combination and binomial arithmetic behind reroll odds.
"""
import pytest
from farkle_odds.core.dice import Die
from farkle_odds.core.probability import binomial, chances, choose, factorial


ONE_IN_SIX = 1 / 6


class TestMathematics:
    """Factorials and combinations."""

    def test_factorials(self):
        assert factorial(0) == 1
        assert factorial(1) == 1
        assert factorial(6) == 720
        assert factorial(12) == 479001600

    def test_large_factorial_is_exact(self):
        assert factorial(21) == 51090942171709440000

    def test_negative_factorial(self):
        with pytest.raises(ValueError):
            factorial(-1)

    def test_choosing(self):
        assert choose(12, 2) == 66
        assert choose(6, 2) == 15
        assert choose(2, 2) == 1
        assert choose(2, 1) == 2

    @pytest.mark.parametrize("n", range(0, 13))
    def test_choose_edges(self, n):
        assert choose(n, 0) == 1
        assert choose(n, n) == 1

    def test_choose_more_than_available(self):
        with pytest.raises(ValueError):
            choose(2, 3)


class TestBinomial:
    """Exact probability of k successes in n trials."""

    def test_two_of_six(self):
        assert binomial(6, 2, ONE_IN_SIX) == pytest.approx(0.20094, abs=1e-4)

    def test_distribution_sums_to_one(self):
        assert sum(binomial(6, k, ONE_IN_SIX) for k in range(7)) == pytest.approx(1.0)

    def test_certain_outcomes(self):
        assert binomial(4, 4, 1.0) == 1.0
        assert binomial(4, 0, 0.0) == 1.0


class TestChances:
    """Chance of rolling at least the desired faces."""

    def test_single_die(self):
        assert chances([Die.ONE], 1) == pytest.approx(ONE_IN_SIX)

    def test_more_desired_than_dice(self):
        assert chances([Die.ONE, Die.TWO, Die.THREE], 2) == 0

    def test_one_face_with_six_dice(self):
        assert chances([Die.ONE], 6) == pytest.approx(0.6651, abs=1e-4)

    def test_two_faces_with_six_dice(self):
        assert chances([Die.ONE, Die.TWO], 6) == pytest.approx(0.2632, abs=1e-4)

    def test_faces_are_interchangeable(self):
        assert chances([Die.ONE, Die.ONE], 4) == chances([Die.THREE, Die.SIX], 4)

    def test_nothing_desired_is_certain(self):
        assert chances([], 3) == pytest.approx(1.0)

    def test_more_dice_help(self):
        odds = [chances([Die.FIVE, Die.FIVE], n) for n in range(2, 7)]
        assert odds == sorted(odds)
        assert all(0 <= p <= 1 for p in odds)

    def test_is_idempotent(self):
        assert chances([Die.TWO], 5) == chances([Die.TWO], 5)
