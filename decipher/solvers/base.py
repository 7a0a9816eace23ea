from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Protocol, Sequence, Type, runtime_checkable

from decipher.engine import Code, Feedback, GameConfig, GameState

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["Agent"]] = {}


def register(cls: Type["Agent"]) -> Type["Agent"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


@dataclass
class AgentStats:
    """Lifetime results of one agent instance across games."""
    total_games: int = 0
    games_won: int = 0
    total_attempts: int = 0

    def record(self, won: bool, attempts: int) -> None:
        self.total_games += 1
        self.games_won += int(bool(won))
        self.total_attempts += int(attempts)

    @property
    def win_rate(self) -> float:
        """Percentage of games won, rounded to 2 decimals (0.0 before any game)."""
        if not self.total_games:
            return 0.0
        return round(100.0 * self.games_won / self.total_games, 2)

    @property
    def avg_attempts(self) -> float:
        if not self.total_games:
            return 0.0
        return round(self.total_attempts / self.total_games, 2)


# ---- Capability every guess supplier provides (human or automated) ----
@runtime_checkable
class Agent(Protocol):
    id: str
    stats: AgentStats

    def reset(self, config: GameConfig, *, seed: int | None = None) -> None:
        ...

    def propose_next_guess(self, state: GameState) -> Code:
        ...

    def on_feedback(self, guess: Sequence[int], feedback: Feedback) -> None:
        ...
