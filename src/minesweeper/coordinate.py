"""
Coordinate module for Minesweeper game.

A coordinate addresses a single cell: x is the column, y is the row.
"""
from dataclasses import dataclass
from typing import Iterator, Tuple

from .errors import InvalidArgumentError


# ============================================================================
# Constants
# ============================================================================

# (dx, dy) offsets of the 8 neighbours: N, NE, E, SE, S, SW, W, NW
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
)


def _is_non_negative_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


# ============================================================================
# Coordinate Data Class
# ============================================================================

@dataclass(frozen=True)
class Coordinate:
    """
    Position of a cell on the grid.

    Attributes:
        x: Column index, starting at 0.
        y: Row index, starting at 0.
    """

    x: int
    y: int

    def __post_init__(self) -> None:
        """Reject negative or non-integral components."""
        if not (_is_non_negative_int(self.x) and _is_non_negative_int(self.y)):
            raise InvalidArgumentError(
                f"x and y must be non-negative integers, got x={self.x!r}, y={self.y!r}"
            )

    @classmethod
    def create(cls, x: int, y: int) -> "Coordinate":
        """Create a coordinate, raising InvalidArgumentError on bad input."""
        return cls(x, y)

    def is_within_bounds(self, height: int, width: int) -> bool:
        """Check if coordinate lies on a grid of the given size."""
        return self.x < width and self.y < height

    def distance(self, other: "Coordinate") -> int:
        """
        Number of king moves between two coordinates.

        Diagonal steps count as one, so every neighbour is at distance 1.
        """
        return max(abs(self.x - other.x), abs(self.y - other.y))

    def is_adjacent(self, other: "Coordinate") -> bool:
        """Check if other is one of the 8 neighbours."""
        return self.distance(other) == 1

    def neighbors(self, height: int, width: int) -> Iterator["Coordinate"]:
        """
        Yield neighbouring coordinates that fall inside the grid.

        Args:
            height: Number of rows.
            width: Number of columns.
        """
        for delta_x, delta_y in DIRECTIONS:
            new_x = self.x + delta_x
            new_y = self.y + delta_y
            if 0 <= new_x < width and 0 <= new_y < height:
                yield Coordinate(new_x, new_y)


def are_coordinates_equal(first: Coordinate, second: Coordinate) -> bool:
    """Check if two coordinates address the same cell."""
    return first == second
