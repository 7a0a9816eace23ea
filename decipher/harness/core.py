"""
Experiment harness core primitives.

- run_case:  play a single game (one secret) with a given agent.
- run_batch: play many games in sequence with per-game seeds.

Both go through a Session, so the harness never scores guesses itself.
These functions are UI-agnostic so they can be reused by a CLI app, a
notebook, or future services without changes.
"""

from __future__ import annotations

import time
from typing import Dict, List, Sequence

from decipher.engine import GameConfig
from .session import Session


def run_case(
        agent,
        config: GameConfig | None = None,
        *,
        secret: Sequence[int] | None = None,
        seed: int | None = None,
) -> Dict:
    """
    Execute one game until the agent wins or the attempt budget is exhausted.

    Args:
        agent:   object implementing the Agent protocol
        config:  game sizes (defaults to GameConfig())
        secret:  fixed secret; drawn from the seeded RNG when omitted
        seed:    RNG seed making the secret and the agent's sampling reproducible

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, (exact, partial))]), secret (tuple)
    """
    config = config or GameConfig()
    session = Session(agent)
    session.start_game(config, secret=secret, seed=seed)

    t0 = time.perf_counter()
    final = session.play_game()
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "success": final.won,
        "guesses": final.attempts,
        "time_ms": dt,
        "history": [(r.guess, tuple(r.feedback)) for r in final.history],
        "secret": session.get_secret_for_reveal(),
    }


def run_batch(
        agent,
        config: GameConfig | None = None,
        *,
        games: int = 100,
        seed: int | None = None,
) -> List[Dict]:
    """
    Play `games` games back-to-back with the same agent.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    out: List[Dict] = []
    for idx in range(1, games + 1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(agent, config, seed=case_seed))
    return out
