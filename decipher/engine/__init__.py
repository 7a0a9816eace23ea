from .errors import (DecipherError, InvalidInput, InvalidConfig, GameOverError,
                     GameInProgressError)
from .scoring import Feedback, evaluate
from .constraints import filter_consistent
from .validation import Code, validate_code
from .sampling import random_code, sample_universe
from .config import GameConfig, Palette, PALETTE
from .game import GameEngine, GameState, GuessRecord, Status

__all__ = [
    "DecipherError", "InvalidInput", "InvalidConfig", "GameOverError", "GameInProgressError",
    "Feedback", "evaluate", "filter_consistent", "Code", "validate_code",
    "random_code", "sample_universe", "GameConfig", "Palette", "PALETTE",
    "GameEngine", "GameState", "GuessRecord", "Status",
]
