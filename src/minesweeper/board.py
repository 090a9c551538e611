"""
Board module for Minesweeper game.

Implements the game board with mine placement, cell revealing,
and win/lose detection. Boards are immutable: every operation
returns a new Board.
"""
import logging
from collections import deque
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Set

from .cell import Cell, CellStatus
from .coordinate import Coordinate
from .errors import IllegalStateError, InvalidArgumentError
from .grid import Grid
from .rng import SeededRandom


logger = logging.getLogger(__name__)

# Mines are kept out of every cell closer than this to the first reveal
SAFE_DISTANCE = 2


# ============================================================================
# Difficulty
# ============================================================================

def _is_positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


@dataclass(frozen=True)
class Difficulty:
    """
    Configuration for a Minesweeper board.

    Attributes:
        height: Number of rows.
        width: Number of columns.
        num_mines: Total mines to place.
    """

    height: int = 9
    width: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if not (
            _is_positive_int(self.height)
            and _is_positive_int(self.width)
            and _is_positive_int(self.num_mines)
        ):
            raise InvalidArgumentError(
                "height, width and num_mines must be positive integers, "
                f"got height={self.height!r}, width={self.width!r}, "
                f"num_mines={self.num_mines!r}"
            )
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise InvalidArgumentError(f"Too many mines (max {max_mines})")

    @property
    def num_cells(self) -> int:
        return self.height * self.width


# Preset difficulty levels
BEGINNER = Difficulty(9, 9, 10)
INTERMEDIATE = Difficulty(16, 16, 40)
EXPERT = Difficulty(16, 30, 99)

DIFFICULTIES: Dict[str, Difficulty] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


# ============================================================================
# Mine Placement (Low-level)
# ============================================================================

def generate_mine_coordinates(
    seed_coordinate: Coordinate,
    difficulty: Difficulty,
    rng: SeededRandom,
) -> List[Coordinate]:
    """
    Pick distinct mine coordinates away from the first revealed cell.

    Candidates are drawn as x then y and rejected when they lie within
    SAFE_DISTANCE of seed_coordinate or were already chosen. On boards too
    small to hold every mine outside that neighbourhood, only the seed
    coordinate itself is kept clear.

    Args:
        seed_coordinate: First revealed cell.
        difficulty: Board dimensions and mine count.
        rng: Generator consumed by the draw.

    Returns:
        List of num_mines coordinates in draw order.
    """
    height, width = difficulty.height, difficulty.width
    safe_distance = SAFE_DISTANCE
    playable = sum(
        1
        for y in range(height)
        for x in range(width)
        if Coordinate(x, y).distance(seed_coordinate) >= safe_distance
    )
    if playable < difficulty.num_mines:
        safe_distance = 1

    chosen: List[Coordinate] = []
    seen: Set[Coordinate] = set()
    while len(chosen) < difficulty.num_mines:
        candidate = Coordinate(rng.next_below(width), rng.next_below(height))
        if candidate.distance(seed_coordinate) < safe_distance:
            continue
        if candidate in seen:
            continue
        seen.add(candidate)
        chosen.append(candidate)
    return chosen


def _count_adjacent_mines(
    coordinate: Coordinate, mines: Set[Coordinate], height: int, width: int
) -> int:
    """Count mines adjacent to a specific cell."""
    return sum(1 for neighbor in coordinate.neighbors(height, width) if neighbor in mines)


def initiate_board(
    grid: Grid,
    difficulty: Difficulty,
    first_coordinate: Coordinate,
    rng: SeededRandom,
) -> Grid:
    """
    Fill the grid with mine and water cells and reveal the first cell.

    Args:
        grid: Empty grid of the difficulty's dimensions.
        difficulty: Board configuration.
        first_coordinate: Cell clicked first; kept mine-free.
        rng: Generator for mine placement.

    Returns:
        New grid with mine counts set and the first cell revealed
        (flood filling if its count is 0).

    Raises:
        IllegalStateError: If the first cell ends up being a mine.
    """
    mines = set(generate_mine_coordinates(first_coordinate, difficulty, rng))

    def create_cell(coordinate: Coordinate, _: Cell) -> Cell:
        if coordinate in mines:
            return Cell.mine()
        return Cell.water(
            _count_adjacent_mines(coordinate, mines, grid.height, grid.width)
        )

    filled = grid.map_cells(create_cell)
    if filled.get_cell(first_coordinate).is_mine:
        raise IllegalStateError(f"first revealed cell {first_coordinate} is a mine")
    logger.debug("Placed %d mines around first reveal %s", len(mines), first_coordinate)
    return reveal_in_grid(filled, first_coordinate)


# ============================================================================
# Reveal Propagation (Mid-level)
# ============================================================================

def reveal_in_grid(grid: Grid, coordinate: Coordinate) -> Grid:
    """
    Reveal a cell; flood fill through connected zero-count cells.

    The fill uses an explicit worklist and visited set. Cells with a
    non-zero count are revealed but do not propagate. Flagged and already
    revealed neighbours are left untouched.

    Args:
        grid: Grid to reveal on.
        coordinate: Cell to reveal.

    Returns:
        New grid with the closure revealed.
    """
    target = grid.get_cell(coordinate)
    updates: Dict[Coordinate, Cell] = {coordinate: target.revealed()}
    if target.mine_count != 0:
        return grid.set_cells(updates)

    visited: Set[Coordinate] = {coordinate}
    queue = deque([coordinate])
    while queue:
        current = queue.popleft()
        for neighbor in grid.neighbors(current):
            if neighbor in visited:
                continue
            visited.add(neighbor)
            cell = grid.get_cell(neighbor)
            if not cell.is_hidden or cell.is_mine:
                continue
            updates[neighbor] = cell.revealed()
            if cell.mine_count == 0:
                queue.append(neighbor)
    return grid.set_cells(updates)


def reveal_all_cells(grid: Grid) -> Grid:
    """Reveal every cell that is not already revealed or detonated."""
    return grid.map_cells(lambda _, cell: cell.revealed())


def is_win_grid(grid: Grid) -> bool:
    """Check if every water cell is revealed."""
    revealed_water = grid.count(lambda cell: cell.is_revealed and not cell.is_mine)
    return revealed_water == grid.num_cells - grid.count_mines()


# ============================================================================
# Board Class
# ============================================================================

@dataclass(frozen=True)
class Board:
    """
    Minesweeper game board.

    Attributes:
        difficulty: Board configuration.
        grid: Current cells.
        num_flagged: Number of FLAGGED cells in grid.
        saved_grid_state: Grid as it was just before the losing reveal.
    """

    difficulty: Difficulty = field(default_factory=Difficulty)
    grid: Optional[Grid] = None
    num_flagged: int = 0
    saved_grid_state: Optional[Grid] = None

    def __post_init__(self) -> None:
        """Create an empty grid when none was given."""
        if self.grid is None:
            object.__setattr__(
                self, "grid", Grid.create(self.difficulty.height, self.difficulty.width)
            )
        elif (self.grid.height, self.grid.width) != (
            self.difficulty.height,
            self.difficulty.width,
        ):
            raise InvalidArgumentError("grid dimensions do not match difficulty")

    @classmethod
    def create(
        cls,
        difficulty: Difficulty,
        grid: Optional[Grid] = None,
        num_flagged: Optional[int] = None,
    ) -> "Board":
        """
        Create a board, optionally resuming a previous grid.

        Args:
            difficulty: Board configuration.
            grid: Grid to resume; a fresh empty grid if omitted.
            num_flagged: Flag count of grid; counted from grid if omitted.
        """
        if grid is None:
            if num_flagged:
                raise InvalidArgumentError("num_flagged given without a grid")
            return cls(difficulty)
        counted = grid.count_flagged()
        if num_flagged is None:
            num_flagged = counted
        elif num_flagged != counted:
            raise InvalidArgumentError(
                f"num_flagged={num_flagged} but grid has {counted} flagged cells"
            )
        return cls(difficulty, grid, num_flagged)

    @property
    def num_cells(self) -> int:
        return self.difficulty.num_cells

    @property
    def remaining_flags(self) -> int:
        """Mines minus flags placed; negative when over-flagged."""
        return self.difficulty.num_mines - self.num_flagged

    def get_cell(self, coordinate: Coordinate) -> Cell:
        return self.grid.get_cell(coordinate)

    def contains(self, coordinate: Coordinate) -> bool:
        return self.grid.contains(coordinate)

    # ========================================================================
    # Board Actions
    # ========================================================================

    def fill(self, seed_coordinate: Coordinate, rng: SeededRandom) -> "Board":
        """Place mines and reveal the first cell."""
        grid = initiate_board(self.grid, self.difficulty, seed_coordinate, rng)
        return replace(self, grid=grid, num_flagged=grid.count_flagged())

    def reveal(self, coordinate: Coordinate) -> "Board":
        """Reveal a water cell with flood fill."""
        return replace(self, grid=reveal_in_grid(self.grid, coordinate))

    def toggle_flag(self, coordinate: Coordinate) -> "Board":
        """
        Toggle the flag on a hidden or flagged cell.

        Returns:
            New board, or this board if the cell cannot be flagged.
        """
        cell = self.grid.get_cell(coordinate)
        toggled = cell.toggled_flag()
        if toggled is cell:
            return self
        delta = 1 if toggled.is_flagged else -1
        return replace(
            self,
            grid=self.grid.set_cell(coordinate, toggled),
            num_flagged=self.num_flagged + delta,
        )

    def with_win_state(self) -> "Board":
        """Reveal every cell."""
        grid = reveal_all_cells(self.grid)
        return replace(self, grid=grid, num_flagged=0)

    def with_lose_state(self, coordinate: Coordinate) -> "Board":
        """
        Detonate the mine at coordinate and reveal every other cell.

        The current grid is kept as saved_grid_state so the move can be
        undone.
        """
        detonated = self.grid.set_cell(
            coordinate, self.grid.get_cell(coordinate).with_status(CellStatus.DETONATED)
        )
        return replace(
            self,
            grid=reveal_all_cells(detonated),
            num_flagged=0,
            saved_grid_state=self.grid,
        )

    def restore_saved_state(self) -> "Board":
        """
        Restore the grid saved before the losing move.

        Raises:
            IllegalStateError: If no grid was saved.
        """
        if self.saved_grid_state is None:
            raise IllegalStateError("tried to load uninitialized previous state")
        grid = self.saved_grid_state
        return replace(
            self,
            grid=grid,
            num_flagged=grid.count_flagged(),
            saved_grid_state=None,
        )

    # ========================================================================
    # State Accessors
    # ========================================================================

    def is_win(self) -> bool:
        """Check if all non-mine cells are revealed."""
        return is_win_grid(self.grid)

    def count_revealed(self) -> int:
        return self.grid.count(lambda cell: cell.is_revealed or cell.is_detonated)
