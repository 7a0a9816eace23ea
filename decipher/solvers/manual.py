"""
Manual-entry agent.

Stands in for a human at the keyboard: the caller places colors (or a whole
guess) and the session pulls the pending guess through the same
propose_next_guess/on_feedback calls it uses for automated solvers.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from decipher.engine import (Code, Feedback, GameConfig, GameState, InvalidInput,
                             validate_code)
from .base import AgentStats


class ManualAgent:
    id = "manual"
    name = "Manual entry"
    version = "1.0.0"

    def __init__(self):
        self.config = GameConfig()
        self.pending: List[Optional[int]] = [None] * self.config.num_slots
        self.selected_color: Optional[int] = None
        self.history: List[Tuple[Code, Feedback]] = []
        self.stats = AgentStats()

    def reset(self, config: GameConfig, *, seed: int | None = None) -> None:
        self.config = config
        self.history = []
        self._clear()

    def _clear(self) -> None:
        self.pending = [None] * self.config.num_slots
        self.selected_color = None

    def select_color(self, color: int) -> None:
        if not 0 <= color < self.config.num_colors:
            raise InvalidInput(f"Invalid color: {color}")
        self.selected_color = color

    def place_color(self, slot: int, color: int | None = None) -> None:
        """Put `color` (or the selected color) into `slot`."""
        if not 0 <= slot < self.config.num_slots:
            raise InvalidInput(f"Invalid slot: {slot}")
        color = self.selected_color if color is None else color
        if color is None:
            raise InvalidInput("No color selected")
        if not 0 <= color < self.config.num_colors:
            raise InvalidInput(f"Invalid color: {color}")
        self.pending[slot] = color

    def set_guess(self, code: Sequence[int]) -> None:
        self.pending = list(validate_code(code, self.config.num_slots, self.config.num_colors))

    @property
    def ready(self) -> bool:
        return all(c is not None for c in self.pending)

    def propose_next_guess(self, state: GameState | None = None) -> Code:
        if not self.ready:
            raise InvalidInput("Guess is incomplete; fill every slot first")
        return tuple(self.pending)

    def on_feedback(self, guess: Sequence[int], feedback: Feedback) -> None:
        self.history.append((tuple(guess), feedback))
        self._clear()
