from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import List, Sequence, Tuple
import logging
import re

from .scoring import ScoringCombination, ScoringEngine
from .probability import chances


logger = logging.getLogger(__name__)

DICE_COUNT = 6
INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


@total_ordering
class Die(Enum):
    """A single die face, plus the ANY placeholder used in target hands."""
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    ANY = 7

    @classmethod
    def from_int(cls, value: int) -> "Die":
        """Create a rollable face from its value (1-6)."""
        if isinstance(value, bool) or not 1 <= value <= 6:
            raise InvalidFace(FaceError.OUT_OF_RANGE, value)
        return cls(value)

    @classmethod
    def from_str(cls, token: str) -> "Die":
        """Create a rollable face from an integer-valued string."""
        if not INTEGER_TOKEN.fullmatch(token):
            raise InvalidFace(FaceError.NON_DIGIT, token)
        return cls.from_int(int(token))

    @property
    def is_wildcard(self) -> bool:
        return self is Die.ANY

    def __lt__(self, other):
        if not isinstance(other, Die):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return "x" if self.is_wildcard else str(self.value)

    def __repr__(self) -> str:
        return f"Die({self})"


class FaceError(Enum):
    """Why a token could not be turned into a die face."""
    NON_DIGIT = "non_digit"
    OUT_OF_RANGE = "out_of_range"

    @property
    def description(self) -> str:
        descriptions = {
            FaceError.NON_DIGIT: "Die value not a digit.",
            FaceError.OUT_OF_RANGE: "Face value out of range (1 - 6).",
        }
        return descriptions[self]


class HandConstructionError(ValueError):
    """Base class for errors raised while building a hand."""


class InvalidFaceCount(HandConstructionError):
    """A hand was built from the wrong number of dice."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Expected {DICE_COUNT} die faces, got {count}.")


class InvalidFace(HandConstructionError):
    """A token does not describe a die face."""

    def __init__(self, reason: FaceError, token):
        self.reason = reason
        self.token = token
        super().__init__(f"{reason.description} Got {token!r}.")


@dataclass(frozen=True)
class Hand:
    """Six dice, either an actual roll or a hypothetical target."""
    dice: Tuple[Die, ...]

    scoring_engine = ScoringEngine()

    def __post_init__(self):
        if len(self.dice) != DICE_COUNT:
            raise InvalidFaceCount(len(self.dice))
        if not all(isinstance(d, Die) for d in self.dice):
            raise TypeError("A hand holds Die values only")
        # Normalise lists into tuples so the hand stays immutable
        object.__setattr__(self, "dice", tuple(self.dice))

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> "Hand":
        """Build a hand from raw command-line tokens."""
        if len(tokens) != DICE_COUNT:
            raise InvalidFaceCount(len(tokens))
        return cls(tuple(Die.from_str(token) for token in tokens))

    @classmethod
    def from_values(cls, values: Sequence[int]) -> "Hand":
        """Build a hand from face values (1-6)."""
        if len(values) != DICE_COUNT:
            raise InvalidFaceCount(len(values))
        return cls(tuple(Die.from_int(value) for value in values))

    @property
    def values(self) -> List[int]:
        return [d.value for d in self.dice]

    @property
    def face_counts(self) -> List[int]:
        """Occurrences of each face, indexed by face value (slot 0 unused)."""
        counts = [0] * (DICE_COUNT + 1)
        for die in self.dice:
            if not die.is_wildcard:
                counts[die.value] += 1
        return counts

    @property
    def fixed_faces(self) -> List[Die]:
        """Faces other than the ANY placeholder."""
        return [d for d in self.dice if not d.is_wildcard]

    def score(self) -> int:
        """Calculate the score of the hand."""
        return self.scoring_engine.calculate_score(self.face_counts)

    def combinations(self) -> List[ScoringCombination]:
        """Scoring combinations behind `score`."""
        return self.scoring_engine.combinations(self.face_counts)

    def can_reroll(self) -> bool:
        """Determine whether the player can roll all dice again with this hand."""
        return self.scoring_engine.can_reroll(self.face_counts)

    def diff(self, other: "Hand") -> List[Die]:
        """Faces of `other` not matched one-to-one by faces of this hand.

        ANY faces are left out: they stand for a die already in this hand
        and never need to be rolled.

            Hand.from_values([1, 1, 1, 1, 1, 1]).diff(straight)  # [2, 3, 4, 5, 6]
        """
        difference = list(other.dice)
        for die in self.dice:
            if die in difference:
                difference.remove(die)
        return [d for d in difference if not d.is_wildcard]

    def reroll_count(self, target: "Hand") -> int:
        """Number of dice to roll again when chasing `target`.

        Every die not already matching a fixed face of the target is rerolled.
        """
        kept = len(target.fixed_faces) - len(self.diff(target))
        return DICE_COUNT - kept

    def chances_to(self, target: "Hand") -> float:
        """Chance of turning this hand into `target` with a single reroll."""
        needed = self.diff(target)
        rerolled = self.reroll_count(target)
        probability = chances(needed, rerolled)
        logger.debug("Chasing %s from %s: need %s with %d dice, p=%.4f", target, self, needed, rerolled, probability)
        return probability

    def __str__(self) -> str:
        return "[ " + " ".join(str(d) for d in self.dice) + " ]"

    def __len__(self) -> int:
        return len(self.dice)

    def __iter__(self):
        return iter(self.dice)
