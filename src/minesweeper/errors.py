"""
Exceptions raised by the Minesweeper engine.
"""


class InvalidArgumentError(ValueError):
    """Malformed input given to a constructor (coordinate, difficulty, seed)."""


class IllegalStateError(RuntimeError):
    """A transition was attempted outside the state window where it is legal."""
