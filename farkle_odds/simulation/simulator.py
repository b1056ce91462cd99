import logging
import numpy as np
from typing import List, Optional, Sequence
from dataclasses import dataclass
from concurrent.futures import ProcessPoolExecutor, as_completed
from ..core.dice import Die


logger = logging.getLogger(__name__)

BATCH_SIZE = 100_000


@dataclass
class SimulationResult:
    """Results from a Monte Carlo reroll simulation."""
    num_simulations: int
    dice_count: int
    needed: List[Die]
    success_count: int

    @property
    def success_rate(self) -> float:
        return self.success_count / self.num_simulations

    @property
    def std_error(self) -> float:
        """Standard error of the estimated success rate."""
        p = self.success_rate
        return float(np.sqrt(p * (1 - p) / self.num_simulations))

    def __str__(self) -> str:
        needed = " ".join(str(d) for d in self.needed) or "nothing"
        return (
            f"Simulation Results ({self.num_simulations} runs):\n"
            f"  Needed: {needed} with {self.dice_count} dice\n"
            f"  Success Rate: {self.success_rate:.2%} (± {self.std_error:.2%})"
        )


class RerollSimulator:
    """Estimates reroll odds by rolling dice many times.

    A run succeeds when the rolled dice contain every needed face, counted as
    a multiset. This is the true joint probability, which the closed form
    `chances` only approximates once several distinct faces are needed.
    """

    def __init__(self, num_workers: int = 1, seed: Optional[int] = None):
        if num_workers < 1:
            raise ValueError("num_workers must be at least 1")
        self.num_workers = num_workers
        self.seed_sequence = np.random.SeedSequence(seed)

    def simulate(
        self,
        needed: Sequence[Die],
        dice_count: int,
        num_simulations: int = 100_000
    ) -> SimulationResult:
        """Simulate rolling `dice_count` dice hoping for the `needed` faces."""
        if num_simulations <= 0:
            raise ValueError("num_simulations must be positive")
        if any(d.is_wildcard for d in needed):
            raise ValueError("ANY is not a rollable face")

        needed_counts = np.zeros(6, dtype=np.int64)
        for die in needed:
            needed_counts[die.value - 1] += 1

        # Split simulations across workers
        simulations_per_worker = num_simulations // self.num_workers
        remaining = num_simulations % self.num_workers
        shares = [simulations_per_worker + (1 if i < remaining else 0) for i in range(self.num_workers)]
        shares = [n for n in shares if n > 0]
        seeds = self.seed_sequence.spawn(len(shares))

        if len(shares) == 1:
            successes = self._run_simulations(needed_counts, dice_count, shares[0], seeds[0])
        else:
            successes = 0
            with ProcessPoolExecutor(max_workers=len(shares)) as executor:
                futures = [
                    executor.submit(self._run_simulations, needed_counts, dice_count, n_sims, seed)
                    for n_sims, seed in zip(shares, seeds)
                ]
                for future in as_completed(futures):
                    successes += future.result()

        result = SimulationResult(
            num_simulations=num_simulations,
            dice_count=dice_count,
            needed=list(needed),
            success_count=int(successes),
        )
        logger.debug("Simulated %s", result)
        return result

    @staticmethod
    def _run_simulations(
        needed_counts: np.ndarray,
        dice_count: int,
        num_simulations: int,
        seed: np.random.SeedSequence
    ) -> int:
        """Run simulations in a single process and count the successes."""
        if needed_counts.sum() == 0:
            return num_simulations
        if needed_counts.sum() > dice_count:
            return 0

        rng = np.random.default_rng(seed)
        faces = np.arange(1, 7)
        successes = 0
        done = 0
        while done < num_simulations:
            batch = min(BATCH_SIZE, num_simulations - done)
            rolls = rng.integers(1, 7, size=(batch, dice_count))
            counts = (rolls[:, :, None] == faces).sum(axis=1)
            successes += int(np.all(counts >= needed_counts, axis=1).sum())
            done += batch
        return successes
