"""
Game state machine.

GameEngine owns the secret, the guess history, the attempt budget and the
terminal status. It is the only place where game truth changes:

  IN_PROGRESS --submit_guess--> IN_PROGRESS | WON | LOST

WON and LOST are terminal; the only way out is reset(), which draws a fresh
secret and starts a new IN_PROGRESS game.

Everything random (the secret) comes from the injected random.Random, so a
seeded engine replays the same game.
"""

from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .config import GameConfig
from .errors import GameOverError
from .sampling import random_code
from .scoring import Feedback, evaluate, is_solved
from .validation import Code, validate_code

logger = logging.getLogger(__name__)


class Status(str, enum.Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class GuessRecord:
    guess: Code
    feedback: Feedback

    def __iter__(self):
        # allows `for g, f in history` wherever (guess, feedback) pairs are expected
        return iter((self.guess, self.feedback))


@dataclass(frozen=True)
class GameState:
    """Immutable snapshot of one game. `secret` is for reveal/diagnostics only."""
    secret: Code
    history: Tuple[GuessRecord, ...]
    max_attempts: int
    num_colors: int
    num_slots: int
    status: Status

    @property
    def over(self) -> bool:
        return self.status is not Status.IN_PROGRESS

    @property
    def won(self) -> bool:
        return self.status is Status.WON

    @property
    def attempts(self) -> int:
        return len(self.history)

    @property
    def attempts_left(self) -> int:
        return self.max_attempts - len(self.history)


class GameEngine:
    def __init__(self, config: GameConfig | None = None, *,
                 rng: random.Random | None = None,
                 secret: Sequence[int] | None = None):
        self.rng = rng or random.Random()
        self.config = (config or GameConfig()).validate()
        self.secret: Code = ()
        self.history: List[GuessRecord] = []
        self.status = Status.IN_PROGRESS
        self.reset(secret=secret)

    @property
    def num_colors(self) -> int:
        return self.config.num_colors

    @property
    def num_slots(self) -> int:
        return self.config.num_slots

    @property
    def max_attempts(self) -> int:
        return self.config.max_attempts

    def reset(self, num_colors: int | None = None, num_slots: int | None = None,
              max_attempts: int | None = None, *,
              secret: Sequence[int] | None = None) -> None:
        """
        Start a new game. Omitted sizes keep their current value.

        A `secret` may be given explicitly (replays, tests); otherwise each
        slot is drawn uniformly from the palette, with replacement.
        """
        self.config = GameConfig(
            num_colors=self.config.num_colors if num_colors is None else num_colors,
            num_slots=self.config.num_slots if num_slots is None else num_slots,
            max_attempts=self.config.max_attempts if max_attempts is None else max_attempts,
        ).validate()

        if secret is None:
            self.secret = random_code(self.num_colors, self.num_slots, self.rng)
        else:
            self.secret = validate_code(secret, self.num_slots, self.num_colors)

        self.history = []
        self.status = Status.IN_PROGRESS
        logger.debug("new game: colors=%d slots=%d max_attempts=%d",
                     self.num_colors, self.num_slots, self.max_attempts)

    @property
    def over(self) -> bool:
        return self.status is not Status.IN_PROGRESS

    def submit_guess(self, guess: Sequence[int]) -> Feedback:
        """
        Score `guess` against the secret and record it.

        Raises:
          GameOverError if the game already ended.
          InvalidInput  if the guess has the wrong shape or colors.
        """
        if self.over:
            raise GameOverError(f"Game is already over ({self.status.value})")

        code = validate_code(guess, self.num_slots, self.num_colors)
        feedback = evaluate(self.secret, code)
        self.history.append(GuessRecord(code, feedback))

        if is_solved(feedback, self.num_slots):
            self.status = Status.WON
        elif len(self.history) >= self.max_attempts:
            self.status = Status.LOST

        if self.over:
            logger.info("game %s after %d attempt(s)", self.status.value, len(self.history))
        return feedback

    def get_state(self) -> GameState:
        return GameState(
            secret=self.secret,
            history=tuple(self.history),
            max_attempts=self.max_attempts,
            num_colors=self.num_colors,
            num_slots=self.num_slots,
            status=self.status,
        )
