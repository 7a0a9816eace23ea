"""
Mastermind-style scoring (feedback) for a single (reference, probe) pair.

Feedback is a pair of counts:
  - exact   : same color in the same slot
  - partial : color present in both codes but not aligned, paired one-to-one
              after the exact matches are removed

This implementation is:
  - N-aware (any code length)
  - duplicate-safe (a reference slot is consumed at most once)
  - symmetric (evaluate(a, b) == evaluate(b, a))
  - integer only, deterministic

Algorithm (two-pass):
  1) First pass counts exact matches and consumes both positions.
  2) Second pass walks the unconsumed probe positions and consumes the first
     unconsumed reference position holding the same color.
"""

from __future__ import annotations

from typing import NamedTuple, Sequence

from .validation import validate_code
from .errors import InvalidInput


class Feedback(NamedTuple):
    exact: int
    partial: int


def evaluate(reference: Sequence[int], probe: Sequence[int],
             num_colors: int | None = None) -> Feedback:
    """
    Compute feedback for `probe` against `reference`.

    Preconditions:
      - len(reference) == len(probe)
      - when `num_colors` is given, both codes hold indices in 0..num_colors-1

    Examples (red=0, blue=1, green=2, yellow=3, purple=4):
      evaluate((0, 1, 2, 3), (3, 2, 1, 0)) -> Feedback(exact=0, partial=4)
      evaluate((0, 0, 1, 2), (0, 3, 0, 1)) -> Feedback(exact=1, partial=2)
    """
    if len(reference) != len(probe):
        raise InvalidInput(
            f"Codes must be the same length; got {len(reference)} and {len(probe)}")
    if num_colors is not None:
        n = len(reference)
        validate_code(reference, n, num_colors)
        validate_code(probe, n, num_colors)

    ref = list(reference)
    prb = list(probe)
    n = len(ref)
    exact = 0
    partial = 0

    # Pass 1: exact matches; None marks a consumed slot on either side.
    for i in range(n):
        if prb[i] == ref[i]:
            exact += 1
            ref[i] = None
            prb[i] = None

    # Pass 2: each remaining probe color may consume one reference slot.
    for i in range(n):
        color = prb[i]
        if color is None:
            continue
        for j in range(n):
            if ref[j] == color:
                partial += 1
                ref[j] = None
                break

    return Feedback(exact, partial)


def is_solved(feedback: Feedback, N: int) -> bool:
    """True if `feedback` says every one of the N slots matched."""
    return feedback.exact == N
