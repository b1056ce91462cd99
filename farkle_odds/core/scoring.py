import logging
from typing import List, Sequence
from dataclasses import dataclass


logger = logging.getLogger(__name__)

FACE_VALUES = range(1, 7)
STRAIGHT_SCORE = 2000
THREE_PAIRS_SCORE = 1500

COUNT_WORDS = {
    3: "Three",
    4: "Four",
    5: "Five",
    6: "Six",
}


@dataclass
class ScoringCombination:
    """Represents a scoring combination."""
    dice_used: List[int]
    points: int
    description: str

    def __str__(self) -> str:
        return f"{self.description}: {self.points} points"


def distinct_faces(counts: Sequence[int]) -> int:
    """Number of face values present at least once."""
    return sum(1 for value in FACE_VALUES if counts[value] > 0)


def is_straight(counts: Sequence[int]) -> bool:
    return distinct_faces(counts) == 6


def is_three_pairs(counts: Sequence[int]) -> bool:
    present = [counts[value] for value in FACE_VALUES if counts[value] > 0]
    return len(present) == 3 and all(c == 2 for c in present)


def is_two_triplets(counts: Sequence[int]) -> bool:
    present = [counts[value] for value in FACE_VALUES if counts[value] > 0]
    return len(present) == 2 and all(c == 3 for c in present)


class ScoringEngine:
    """Handles all scoring logic for a six-dice hand.

    Every method takes a face-count vector: a sequence indexed by face value
    where slot 0 is unused and slots 1-6 hold how many dice show that face.
    The vector may describe fewer than six dice, which is how the guaranteed
    value of a partially specified target hand is scored.
    """

    def calculate_score(self, counts: Sequence[int]) -> int:
        """Calculate the total score of a face-count vector."""
        return sum(combo.points for combo in self.combinations(counts))

    def combinations(self, counts: Sequence[int]) -> List[ScoringCombination]:
        """Identify the scoring combinations that make up the score."""
        if is_straight(counts):
            return [ScoringCombination(
                dice_used=list(FACE_VALUES),
                points=STRAIGHT_SCORE,
                description="Straight"
            )]

        if is_three_pairs(counts):
            return [ScoringCombination(
                dice_used=[v for v in FACE_VALUES for _ in range(counts[v])],
                points=THREE_PAIRS_SCORE,
                description="Three pairs"
            )]

        combinations = []
        for value in FACE_VALUES:
            count = counts[value]
            if count == 0:
                continue

            if count >= 3:
                base = 1000 if value == 1 else 100 * value
                combinations.append(ScoringCombination(
                    dice_used=[value] * count,
                    points=base * 2 ** (count - 3),
                    description=f"{COUNT_WORDS[count]} {value}s"
                ))
            elif value in (1, 5):
                single = 100 if value == 1 else 50
                combinations.append(ScoringCombination(
                    dice_used=[value] * count,
                    points=single * count,
                    description=f"Single {value}" if count == 1 else f"Pair of {value}s"
                ))
            # A bare pair of a regular face scores nothing

        return combinations

    def can_reroll(self, counts: Sequence[int]) -> bool:
        """Determine whether the hand entitles the player to roll all dice again."""
        if is_straight(counts) or is_three_pairs(counts) or is_two_triplets(counts):
            return True

        # A triplet or better of a single regular face, filled up with 1s and 5s
        regulars = [v for v in FACE_VALUES if v not in (1, 5) and counts[v] > 0]
        if len(regulars) == 1 and counts[regulars[0]] >= 3:
            logger.debug("Reroll granted by %d x %d plus 1s and 5s", counts[regulars[0]], regulars[0])
            return True
        return False
