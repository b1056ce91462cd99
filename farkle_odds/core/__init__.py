"""Hand model, scoring and probability engine."""
from .dice import (
    DICE_COUNT, Die, FaceError, Hand, HandConstructionError, InvalidFace, InvalidFaceCount
)
from .probability import binomial, chances, choose, factorial
from .scoring import ScoringCombination, ScoringEngine
from .targets import TargetRoll, find_better_rolls

__all__ = [
    "DICE_COUNT",
    "Die",
    "FaceError",
    "Hand",
    "HandConstructionError",
    "InvalidFace",
    "InvalidFaceCount",
    "ScoringCombination",
    "ScoringEngine",
    "TargetRoll",
    "binomial",
    "chances",
    "choose",
    "factorial",
    "find_better_rolls",
]
