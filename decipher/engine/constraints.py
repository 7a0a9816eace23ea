"""
Candidate filtering given game history.

Given:
  - a pool of codes (usually a sample of the code space)
  - a history of (guess, feedback) pairs

Return:
  - codes that are consistent with ALL feedback seen so far.

A code c is consistent iff, treating c as a hypothetical secret, every past
guess would have produced exactly the recorded feedback against it. This is
the step that turns feedback into a shrinking candidate set.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from .scoring import Feedback, evaluate
from .validation import Code

# History is a sequence of (guess, feedback) tuples produced by the engine.
History = Iterable[Tuple[Sequence[int], Feedback]]


def filter_consistent(sample: Iterable[Code], history: History) -> List[Code]:
    """
    Keep only codes that reproduce every recorded feedback.

    Args:
      sample  : iterable of candidate codes
      history : iterable of (guess, feedback) seen so far; GuessRecord works too

    Returns:
      List of consistent codes (order preserved as in `sample`).
    """
    records = [(tuple(g), tuple(f)) for g, f in history]
    out: List[Code] = []

    for code in sample:
        # One evaluator call per (record, candidate) pair; stop at first miss.
        if all(tuple(evaluate(g, code)) == f for g, f in records):
            out.append(tuple(code))

    return out
