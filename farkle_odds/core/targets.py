"""Search for hypothetical hands worth chasing with a reroll."""
import logging
from dataclasses import dataclass
from typing import Dict, List

from .dice import DICE_COUNT, Die, Hand


logger = logging.getLogger(__name__)

ROLLABLE_FACES = [d for d in Die if not d.is_wildcard]


@dataclass
class TargetRoll:
    """A target hand together with the odds of reaching it."""
    target: Hand
    score: int
    needed: List[Die]
    reroll_count: int
    chance: float

    def __str__(self) -> str:
        needed = " ".join(str(d) for d in self.needed)
        return (
            f"{self.target} worth {self.score}: roll {needed} "
            f"with {self.reroll_count} dice ({self.chance:.1%})"
        )


def candidate_targets(hand: Hand) -> List[Hand]:
    """Targets that add at least one die of a face, or complete a straight.

    "N of a kind" targets keep only the matching dice and mark the rest as
    ANY, e.g. (1 1) 2 3 4 5 yields 1 1 1 x x x, 1 1 1 1 x x and so on.
    """
    counts = hand.face_counts
    targets = []
    for face in ROLLABLE_FACES:
        for count in range(max(3, counts[face.value] + 1), DICE_COUNT + 1):
            targets.append(Hand((face,) * count + (Die.ANY,) * (DICE_COUNT - count)))
    targets.append(Hand(tuple(ROLLABLE_FACES)))
    return targets


def find_better_rolls(hand: Hand) -> List[TargetRoll]:
    """Targets that beat the current score, most probable first.

    Only the most probable target is kept among targets with the same score.
    A hand that already earns a reroll has nothing to chase.
    """
    if hand.can_reroll():
        return []

    current_score = hand.score()
    best: Dict[int, TargetRoll] = {}
    for target in candidate_targets(hand):
        score = target.score()
        if score <= current_score:
            continue

        candidate = TargetRoll(
            target=target,
            score=score,
            needed=hand.diff(target),
            reroll_count=hand.reroll_count(target),
            chance=hand.chances_to(target),
        )
        if candidate.chance <= 0:
            continue
        incumbent = best.get(score)
        if incumbent is None or candidate.chance > incumbent.chance:
            best[score] = candidate

    results = sorted(best.values(), key=lambda t: (-t.chance, -t.score))
    logger.debug("%d better rolls found for %s", len(results), hand)
    return results
