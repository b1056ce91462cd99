"""Exact reroll probabilities built from binomial arithmetic."""
import logging
from math import prod
from typing import Sequence


logger = logging.getLogger(__name__)

FACE_PROBABILITY = 1 / 6


def factorial(n: int) -> int:
    """Calculate n! for n >= 0.

    Python integers never overflow, so any n is exact. Ported to a fixed-width
    64-bit unsigned accumulator this would only hold up to 20!.
    """
    if n < 0:
        raise ValueError(f"factorial is undefined for negative numbers: {n}")
    return prod(range(2, n + 1))


def choose(n: int, k: int) -> int:
    """Calculate the number of ways to choose k items out of n."""
    if not 0 <= k <= n:
        raise ValueError(f"choose({n}, {k}) requires 0 <= k <= n")
    return factorial(n) // (factorial(k) * factorial(n - k))


def binomial(n: int, k: int, p: float) -> float:
    """Probability of exactly k successes in n trials with success chance p."""
    return choose(n, k) * p ** k * (1 - p) ** (n - k)


def chances(desired: Sequence, dice_count: int) -> float:
    """Probability of rolling the desired faces with `dice_count` dice.

    Each desired face counts as one success and every die succeeds with
    probability 1/6, so this is the chance of at least ``len(desired)``
    successes. Which faces are desired does not matter: several distinct
    faces are modelled as repeated matches of a single face.
    """
    needed = len(desired)
    if needed > dice_count:
        return 0.0

    total = sum(binomial(dice_count, k, FACE_PROBABILITY) for k in range(needed, dice_count + 1))
    logger.debug("chances(%d needed, %d dice) = %.6f", needed, dice_count, total)
    # Rounding can push the sum a hair past 1.0
    return min(total, 1.0)
