"""
Exception types raised by the game engine and the session layer.

All errors derive from DecipherError so callers can catch the whole family.
Input/config errors also subclass ValueError, since they are bad-argument
errors in the ordinary Python sense.
"""


class DecipherError(Exception):
    """Base class for every error raised by this package."""


class InvalidInput(DecipherError, ValueError):
    """A code has the wrong length or contains a color outside the palette."""


class InvalidConfig(DecipherError, ValueError):
    """Game configuration outside the supported ranges."""


class GameOverError(DecipherError):
    """A guess was submitted after the game reached WON or LOST."""


class GameInProgressError(DecipherError):
    """The secret was requested for reveal while the game is still running."""
