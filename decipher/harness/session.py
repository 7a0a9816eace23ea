"""
Session orchestrator.

A Session binds one GameEngine to one agent (human passthrough or solver) and
is the only object a UI or CLI needs to talk to. It validates the incoming
configuration, forwards guesses to the engine, and reports feedback back to
the agent. All scoring and termination rules stay in the engine.

Each Session owns its engine and agent; nothing is shared between sessions.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Sequence

from decipher.engine import (Code, Feedback, GameConfig, GameEngine, GameInProgressError,
                             GameState)


@dataclass(frozen=True)
class Outcome:
    feedback: Feedback
    over: bool
    won: bool
    attempts: int


class Session:
    def __init__(self, agent=None, *, rng: random.Random | None = None):
        self.agent = agent
        self.rng = rng or random.Random()
        self.engine: GameEngine | None = None
        self._recorded = False

    def start_game(self, config: GameConfig | None = None, *,
                   secret: Sequence[int] | None = None,
                   seed: int | None = None) -> GameState:
        """
        Validate `config`, build a fresh engine and reset the agent.

        Raises InvalidConfig before anything is constructed if the config is
        out of range.
        """
        config = (config or GameConfig()).validate()
        if seed is not None:
            self.rng.seed(seed)
        self.engine = GameEngine(config, rng=self.rng, secret=secret)
        self._recorded = False
        if self.agent is not None:
            # agent gets its own stream so its sampling never mirrors the secret draw
            agent_seed = None if seed is None else self.rng.randint(0, 2 ** 31 - 1)
            self.agent.reset(config, seed=agent_seed)
        return self.engine.get_state()

    def _require_engine(self) -> GameEngine:
        if self.engine is None:
            raise RuntimeError("No game started; call start_game() first")
        return self.engine

    def submit_guess(self, code: Sequence[int]) -> Outcome:
        """Forward a guess to the engine and report the feedback to the agent."""
        engine = self._require_engine()
        feedback = engine.submit_guess(code)
        guess = engine.history[-1].guess

        if self.agent is not None:
            self.agent.on_feedback(guess, feedback)

        state = engine.get_state()
        if state.over and self.agent is not None and not self._recorded:
            self.agent.stats.record(state.won, state.attempts)
            self._recorded = True

        return Outcome(feedback=feedback, over=state.over, won=state.won,
                       attempts=state.attempts)

    def play_turn(self) -> Outcome:
        """Ask the bound agent for a guess and submit it."""
        if self.agent is None:
            raise RuntimeError("Session has no agent bound")
        state = self.get_snapshot()
        guess: Code = self.agent.propose_next_guess(state)
        return self.submit_guess(guess)

    def play_game(self) -> GameState:
        """Play turns until the game is over; return the final snapshot."""
        while not self._require_engine().over:
            self.play_turn()
        return self.get_snapshot()

    def get_snapshot(self) -> GameState:
        return self._require_engine().get_state()

    def get_secret_for_reveal(self) -> Code:
        engine = self._require_engine()
        if not engine.over:
            raise GameInProgressError("Secret is only revealed once the game is over")
        return engine.secret
