"""
Code validation.

This module answers the question: "Is this a well-formed code for this game?"
A code is valid iff:
  - it is a sequence (list/tuple) of ints
  - it has exact length N (num_slots)
  - every entry is a palette index in 0..num_colors-1

Unlike a plain predicate, validate_code raises InvalidInput with a message
naming the problem, since a bad guess is always surfaced to the caller.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from .errors import InvalidInput

Code = Tuple[int, ...]


def validate_code(code: Sequence[int], N: int, num_colors: int | None = None) -> Code:
    """
    Check shape and palette membership; return the code as a tuple.

    Args:
      code       : proposed code (guess or secret)
      N          : required length (num_slots)
      num_colors : palette size; None skips the palette check

    Raises:
      InvalidInput on wrong type, wrong length or out-of-palette color.
    """
    if not isinstance(code, (list, tuple)):
        raise InvalidInput(f"Code must be a sequence of {N} colors; got {code!r}")
    if len(code) != N:
        raise InvalidInput(f"Code must be a sequence of {N} colors; got {len(code)}")

    for c in code:
        if not isinstance(c, int) or isinstance(c, bool):
            raise InvalidInput(f"Invalid color: {c!r}")
        if c < 0:
            raise InvalidInput(f"Invalid color: {c}")
        if num_colors is not None and c >= num_colors:
            raise InvalidInput(f"Invalid color: {c}. Valid colors are 0..{num_colors - 1}")

    return tuple(code)
