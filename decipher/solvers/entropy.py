"""
Entropy Solver (expected information gain).

Main idea:
  - Sample up to SAMPLE_CAP codes from the code space and keep those
    consistent with every (guess, feedback) seen so far.
  - For each candidate a, partition the candidates by the feedback a would
    produce against each of them.
  - Expected entropy left after guessing a:  sum(|g|/n * log2|g|)
    Information gain:                         log2(n) - expected_left
  - Guess the candidate with the highest gain; the first one wins ties.

Probes are the candidates themselves, not the whole code space. This is
cheaper and only slightly less informative.

Edge cases:
  - one candidate  : guess it, no entropy computation
  - no candidates  : the sample missed the secret; guess a random code and log
                     a warning rather than failing the game

Acceleration:
  - Scoring one probe against all candidates is done with numpy on a
    (candidates x slots) array. Feedback is computed from per-color counts:
    partial = sum_c min(count_a[c], count_s[c]) - exact, which is the same
    multiset pairing the two-pass evaluator performs.
"""

from __future__ import annotations

import logging
import random
from collections import Counter
from math import log2
from typing import List, Sequence, Tuple

import numpy as np

from decipher.engine import (Code, Feedback, GameConfig, GameState, evaluate,
                             filter_consistent, random_code, sample_universe)
from .base import AgentStats, register

logger = logging.getLogger(__name__)


def information_gain(probe: Sequence[int], candidates: Sequence[Code]) -> float:
    """Gain in bits of guessing `probe` when `candidates` are equally likely."""
    n = len(candidates)
    if n <= 1:
        return 0.0

    groups = Counter(evaluate(probe, s) for s in candidates)
    expected_left = sum((c / n) * log2(c) for c in groups.values() if c > 0)
    return log2(n) - expected_left


def _color_counts(codes: np.ndarray, num_colors: int) -> np.ndarray:
    """(n x slots) codes -> (n x num_colors) per-color counts."""
    counts = np.zeros((codes.shape[0], num_colors), dtype=np.int16)
    for c in range(num_colors):
        counts[:, c] = (codes == c).sum(axis=1)
    return counts


def _gains(candidates: List[Code], num_colors: int = 0) -> np.ndarray:
    """Information gain of every candidate used as a probe against all of them."""
    codes = np.asarray(candidates, dtype=np.int16)
    n, slots = codes.shape
    # count every color present, whatever the configured palette says
    num_colors = max(num_colors, int(codes.max()) + 1)
    counts = _color_counts(codes, num_colors)
    base = log2(n)

    out = np.empty(n, dtype=float)
    for i in range(n):
        exact = (codes == codes[i]).sum(axis=1)
        common = np.minimum(counts, counts[i]).sum(axis=1)
        key = exact * (slots + 1) + (common - exact)
        groups = np.bincount(key)
        groups = np.sort(groups[groups > 0])
        out[i] = base - float((groups * np.log2(groups)).sum()) / n
    return out


@register
class EntropySolver:
    id = "entropy"
    name = "Entropy (Expected Information Gain)"
    version = "1.0.0"

    # Codes sampled from the space per turn before filtering.
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

    def candidates(self, history=None) -> List[Code]:
        """Sample the code space and keep the codes consistent with `history`."""
        cfg = self.config
        sample = sample_universe(self.sample_cap, cfg.num_colors, cfg.num_slots, self.rng)
        return filter_consistent(sample, self.history if history is None else history)

    def propose_next_guess(self, state: GameState | None = None) -> Code:
        """Pick the next guess from the history in `state` (or our own)."""
        history = list(state.history) if state is not None else self.history
        cands = self.candidates(history)
        logger.debug("filtered candidates: %d", len(cands))
        return self.choose_next(cands)

    def choose_next(self, candidates: Sequence[Code]) -> Code:
        """Candidate with maximum expected information gain."""
        if not candidates:
            logger.warning("No candidate codes left; guessing a random code")
            return random_code(self.config.num_colors, self.config.num_slots, self.rng)
        if len(candidates) == 1:
            return tuple(candidates[0])

        cands = [tuple(c) for c in candidates]
        gains = _gains(cands, self.config.num_colors)

        best_i = 0
        for i in range(1, len(cands)):
            if gains[i] > gains[best_i]:
                best_i = i

        logger.debug("chosen guess %s with estimated gain %.3f bits",
                     cands[best_i], gains[best_i])
        return cands[best_i]
