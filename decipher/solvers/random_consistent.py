"""
Random Consistent solver.

Strategy:
  - Sample the code space, keep the codes consistent with all feedback so far,
    and choose one of them uniformly at random.
  - If the candidate set is empty, fall back to a random code.

Notes:
  - Deterministic across runs with the same seed.
  - This is a baseline to verify the pipeline; it does not try to maximize
    information gain.
"""

from __future__ import annotations

import logging
import random
from typing import List, Sequence, Tuple

from decipher.engine import (Code, Feedback, GameConfig, GameState, filter_consistent,
                             random_code, sample_universe)
from .base import AgentStats, register

logger = logging.getLogger(__name__)


@register
class RandomConsistentSolver:
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    SAMPLE_CAP = 5000

    def __init__(self, sample_cap: int | None = None, *, rng: random.Random | None = None):
        self.sample_cap = int(sample_cap or self.SAMPLE_CAP)
        self.rng = rng or random.Random()
        self.config = GameConfig()
        self.history: List[Tuple[Code, Feedback]] = []
        self.stats = AgentStats()

    def reset(self, config: GameConfig, *, seed: int | None = None) -> None:
        self.config = config
        self.history = []
        if seed is not None:
            self.rng.seed(seed)

    def on_feedback(self, guess: Sequence[int], feedback: Feedback) -> None:
        self.history.append((tuple(guess), feedback))

    def propose_next_guess(self, state: GameState | None = None) -> Code:
        """
        Pick any consistent candidate uniformly at random (seeded RNG).

        Args:
            state: snapshot whose `history` drives filtering; when omitted the
                   solver's own feedback log is used.

        Returns:
            A code of length num_slots.
        """
        cfg = self.config
        history = list(state.history) if state is not None else self.history
        sample = sample_universe(self.sample_cap, cfg.num_colors, cfg.num_slots, self.rng)
        pool = filter_consistent(sample, history)

        # The sample may not contain the secret at all on large games.
        if not pool:
            logger.warning("No candidate codes left; guessing a random code")
            return random_code(cfg.num_colors, cfg.num_slots, self.rng)

        return pool[self.rng.randrange(len(pool))]
