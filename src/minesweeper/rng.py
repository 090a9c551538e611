"""
Deterministic random number generator.

A small linear-congruential generator so that a seed always reproduces
the same mine layout, independent of Python's global random state.
"""
from .errors import InvalidArgumentError


MULTIPLIER = 9301
INCREMENT = 49297
MODULUS = 233280


def validate_seed(seed: int) -> int:
    """
    Check that seed can start a generator.

    Raises:
        InvalidArgumentError: If seed is 0 or not an integer.
    """
    if not isinstance(seed, int) or isinstance(seed, bool):
        raise InvalidArgumentError(f"seed must be an integer, got {seed!r}")
    if seed == 0:
        raise InvalidArgumentError("seed cannot be 0")
    return seed


class SeededRandom:
    """
    Linear-congruential generator owned by a single caller.

    Each fill creates its own generator from the game's seed; instances
    are never shared between games.
    """

    def __init__(self, seed: int) -> None:
        """
        Initialize the generator.

        Args:
            seed: Non-zero integer seed.

        Raises:
            InvalidArgumentError: If seed is 0 or not an integer.
        """
        self._state = validate_seed(seed)

    @property
    def state(self) -> int:
        """Current internal state."""
        return self._state

    def _advance(self) -> int:
        self._state = (self._state * MULTIPLIER + INCREMENT) % MODULUS
        return self._state

    def next(self) -> float:
        """Advance the generator and return a value in [0, 1)."""
        return self._advance() / MODULUS

    def next_below(self, bound: int) -> int:
        """
        Advance the generator and return an integer in [0, bound).

        Equivalent to ``floor(next() * bound)`` without float rounding.
        """
        return self._advance() * bound // MODULUS
