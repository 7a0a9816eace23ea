"""
Game configuration and color palette.

A game is fully described by three integers:
  - num_colors   : palette size (4-10), first K entries of PALETTE
  - num_slots    : code length (3-8)
  - max_attempts : guess budget (5-15)

Colors are integers 0..num_colors-1 inside the engine. Names only appear at
the edges (CLI, UI collaborators), via the Palette helpers below.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from .errors import InvalidConfig, InvalidInput
from .scoring import Feedback, evaluate

# Full ordered palette; a game uses PALETTE[:num_colors].
PALETTE: Tuple[str, ...] = (
    "red", "blue", "green", "yellow", "purple",
    "orange", "pink", "cyan", "brown", "lime",
)

COLORS_RANGE = (4, 10)
SLOTS_RANGE = (3, 8)
ATTEMPTS_RANGE = (5, 15)


def _check_range(name: str, value, bounds: Tuple[int, int]) -> None:
    lo, hi = bounds
    # bool is an int subclass
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidConfig(f"{name} must be an int; got {value!r}")
    if not lo <= value <= hi:
        raise InvalidConfig(f"{name} must be in [{lo}, {hi}]; got {value}")


@dataclass(frozen=True)
class GameConfig:
    num_colors: int = 5
    num_slots: int = 5
    max_attempts: int = 8

    def validate(self) -> "GameConfig":
        """Raise InvalidConfig if any field is out of range; return self."""
        _check_range("num_colors", self.num_colors, COLORS_RANGE)
        _check_range("num_slots", self.num_slots, SLOTS_RANGE)
        _check_range("max_attempts", self.max_attempts, ATTEMPTS_RANGE)
        return self

    @property
    def universe_size(self) -> int:
        return self.num_colors ** self.num_slots

    @property
    def palette(self) -> "Palette":
        return Palette(self.num_colors)


class Palette:
    """
    Name <-> index mapping for the first `num_colors` colors.

    Accepts full names ("red") and, for terminal play, unambiguous prefixes
    ("r", "pu"). Matching is case-insensitive.
    """

    def __init__(self, num_colors: int):
        _check_range("num_colors", num_colors, COLORS_RANGE)
        self.names: List[str] = list(PALETTE[:num_colors])
        self._index: Dict[str, int] = {n: i for i, n in enumerate(self.names)}

    def __len__(self) -> int:
        return len(self.names)

    def index_of(self, name: str) -> int:
        key = str(name).strip().lower()
        if key in self._index:
            return self._index[key]
        matches = [i for n, i in self._index.items() if key and n.startswith(key)]
        if len(matches) == 1:
            return matches[0]
        raise InvalidInput(
            f"Invalid color: {name}. Valid colors are: {', '.join(self.names)}")

    def to_indices(self, code: Sequence[str]) -> Tuple[int, ...]:
        return tuple(self.index_of(c) for c in code)

    def to_names(self, code: Sequence[int]) -> Tuple[str, ...]:
        out = []
        for c in code:
            if not isinstance(c, int) or not 0 <= c < len(self.names):
                raise InvalidInput(f"Color index out of palette: {c!r}")
            out.append(self.names[c])
        return tuple(out)

    def evaluate(self, reference: Sequence[str], probe: Sequence[str]) -> Feedback:
        """Score two named codes, e.g. evaluate(["red", ...], ["blue", ...])."""
        return evaluate(self.to_indices(reference), self.to_indices(probe),
                        num_colors=len(self.names))
