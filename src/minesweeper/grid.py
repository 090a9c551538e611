"""
Grid module for Minesweeper game.

An immutable rectangular container of cells addressed by Coordinate.
Every update returns a new Grid; rows that were not touched are shared
between the old and the new grid, which is safe because rows are tuples.
"""
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Tuple

import numpy as np

from .cell import Cell, CellStatus
from .coordinate import Coordinate
from .errors import InvalidArgumentError


Row = Tuple[Cell, ...]


@dataclass(frozen=True)
class Grid:
    """
    Rows of cells, indexed ``cells[y][x]``.

    Attributes:
        cells: Tuple of rows, each a tuple of cells of equal length.
    """

    cells: Tuple[Row, ...]

    def __post_init__(self) -> None:
        """Ensure the grid is rectangular and non-empty."""
        if not self.cells or not self.cells[0]:
            raise InvalidArgumentError("grid must have at least one row and column")
        width = len(self.cells[0])
        if any(len(row) != width for row in self.cells):
            raise InvalidArgumentError("grid rows must all have the same width")

    # ========================================================================
    # Construction
    # ========================================================================

    @classmethod
    def create(cls, height: int, width: int) -> "Grid":
        """Create a grid of hidden water cells with a mine count of 0."""
        cell = Cell()
        return cls(tuple(tuple(cell for _ in range(width)) for _ in range(height)))

    @classmethod
    def from_rows(cls, rows) -> "Grid":
        """Build a grid from any nested iterable of cells."""
        return cls(tuple(tuple(row) for row in rows))

    # ========================================================================
    # Accessors
    # ========================================================================

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0])

    @property
    def num_cells(self) -> int:
        return self.height * self.width

    def contains(self, coordinate: Coordinate) -> bool:
        """Check if coordinate lies on this grid."""
        return coordinate.is_within_bounds(self.height, self.width)

    def get_cell(self, coordinate: Coordinate) -> Cell:
        """
        Get the cell at a coordinate.

        Raises:
            InvalidArgumentError: If coordinate is outside the grid.
        """
        if not self.contains(coordinate):
            raise InvalidArgumentError(
                f"{coordinate} is outside a {self.height}x{self.width} grid"
            )
        return self.cells[coordinate.y][coordinate.x]

    def coordinates(self) -> Iterator[Coordinate]:
        """Yield every coordinate row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield Coordinate(x, y)

    def items(self) -> Iterator[Tuple[Coordinate, Cell]]:
        """Yield (coordinate, cell) pairs row by row."""
        for y, row in enumerate(self.cells):
            for x, cell in enumerate(row):
                yield Coordinate(x, y), cell

    def neighbors(self, coordinate: Coordinate) -> Iterator[Coordinate]:
        """Yield the in-bounds neighbours of a coordinate."""
        return coordinate.neighbors(self.height, self.width)

    def count(self, predicate: Callable[[Cell], bool]) -> int:
        """Count cells matching predicate."""
        return sum(1 for row in self.cells for cell in row if predicate(cell))

    def count_flagged(self) -> int:
        return self.count(lambda cell: cell.status == CellStatus.FLAGGED)

    def count_mines(self) -> int:
        return self.count(lambda cell: cell.is_mine)

    # ========================================================================
    # Updates
    # ========================================================================

    def set_cell(self, coordinate: Coordinate, cell: Cell) -> "Grid":
        """Return a new grid with one cell replaced."""
        return self.set_cells({coordinate: cell})

    def set_cells(self, updates: Dict[Coordinate, Cell]) -> "Grid":
        """
        Return a new grid with several cells replaced.

        Args:
            updates: Mapping of coordinate to replacement cell.

        Returns:
            A new grid, or this grid if updates is empty.
        """
        if not updates:
            return self
        by_row: Dict[int, Dict[int, Cell]] = {}
        for coordinate, cell in updates.items():
            self.get_cell(coordinate)
            by_row.setdefault(coordinate.y, {})[coordinate.x] = cell

        rows = list(self.cells)
        for y, replacements in by_row.items():
            row = list(rows[y])
            for x, cell in replacements.items():
                row[x] = cell
            rows[y] = tuple(row)
        return Grid(tuple(rows))

    def map_cells(self, transform: Callable[[Coordinate, Cell], Cell]) -> "Grid":
        """Return a new grid with transform applied to every cell."""
        return Grid(
            tuple(
                tuple(transform(Coordinate(x, y), cell) for x, cell in enumerate(row))
                for y, row in enumerate(self.cells)
            )
        )

    # ========================================================================
    # Observation
    # ========================================================================

    def to_observation(self) -> np.ndarray:
        """
        Get grid state as numpy array for ML agent.

        Returns:
            2D int8 array of shape (height, width); see Cell.to_observation.
        """
        obs = np.zeros((self.height, self.width), dtype=np.int8)
        for y, row in enumerate(self.cells):
            for x, cell in enumerate(row):
                obs[y, x] = cell.to_observation()
        return obs
