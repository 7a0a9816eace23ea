"""
Code-space sampling.

The full space has num_colors ** num_slots codes (up to 10**8 at the largest
configuration), so solvers work on a bounded sample instead:
  - If the cap covers the whole space, enumerate it (itertools.product) and
    shuffle; no rejection overhead for small games.
  - Otherwise draw random codes and reject repeats through a seen-set until
    `target_size` distinct codes are collected.

The sample may miss the true secret on large games. That trade-off is what
keeps each solver turn bounded.
"""

from __future__ import annotations

import random
from itertools import product
from typing import List, Set

from .validation import Code


def random_code(num_colors: int, num_slots: int, rng: random.Random) -> Code:
    """Draw one code, each slot independently uniform over the palette."""
    return tuple(rng.randrange(num_colors) for _ in range(num_slots))


def sample_universe(target_size: int, num_colors: int, num_slots: int,
                    rng: random.Random) -> List[Code]:
    """
    Return up to `target_size` distinct codes, uniformly without replacement.

    Args:
      target_size : requested sample size (capped at num_colors ** num_slots)
      num_colors  : palette size
      num_slots   : code length
      rng         : random source; pass a seeded Random for reproducible runs

    Returns:
      List of distinct codes in random order.
    """
    universe = num_colors ** num_slots
    count = max(0, min(int(target_size), universe))

    if count == universe:
        codes = list(product(range(num_colors), repeat=num_slots))
        rng.shuffle(codes)
        return codes

    seen: Set[Code] = set()
    out: List[Code] = []
    while len(out) < count:
        code = random_code(num_colors, num_slots, rng)
        if code in seen:
            continue
        seen.add(code)
        out.append(code)
    return out
