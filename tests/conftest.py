"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
# Project root, for the main.py entry point
sys.path.insert(0, str(Path(__file__).parent.parent))

from minesweeper import (
    Board,
    Cell,
    CellStatus,
    Coordinate,
    Difficulty,
    Game,
    GameStatus,
    Grid,
    Timer,
    start_game,
)


# ============================================================================
# Helpers
# ============================================================================

def make_grid(layout: str, status: CellStatus = CellStatus.HIDDEN) -> Grid:
    """
    Build a grid from rows of characters, '*' for mines and '.' for water.

    Mine counts are computed from the layout.
    """
    rows = [line.strip() for line in layout.strip().splitlines()]
    height, width = len(rows), len(rows[0])
    mines = {
        Coordinate(x, y)
        for y, row in enumerate(rows)
        for x, char in enumerate(row)
        if char == "*"
    }
    cells = []
    for y in range(height):
        row = []
        for x in range(width):
            coordinate = Coordinate(x, y)
            if coordinate in mines:
                row.append(Cell.mine(status))
            else:
                count = sum(1 for n in coordinate.neighbors(height, width) if n in mines)
                row.append(Cell.water(count, status))
        cells.append(row)
    return Grid.from_rows(cells)


class RecordingTimer(Timer):
    """Timer that records start/stop calls instead of ticking."""

    def __init__(self) -> None:
        self.calls = []
        self._running = False

    def start(self) -> None:
        self.calls.append("start")
        self._running = True

    def stop(self) -> None:
        self.calls.append("stop")
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running


# ============================================================================
# Difficulty Fixtures
# ============================================================================

@pytest.fixture
def small_difficulty() -> Difficulty:
    """3x3 board with 3 mines."""
    return Difficulty(3, 3, 3)


@pytest.fixture
def medium_difficulty() -> Difficulty:
    """5x5 board with 3 mines."""
    return Difficulty(5, 5, 3)


@pytest.fixture
def beginner_difficulty() -> Difficulty:
    """Beginner difficulty configuration."""
    return Difficulty(9, 9, 10)


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def timer() -> RecordingTimer:
    return RecordingTimer()


@pytest.fixture
def new_game(small_difficulty: Difficulty) -> Game:
    """Fresh 3x3 game with seed 6, mines not yet placed."""
    return start_game(6, small_difficulty)


@pytest.fixture
def final_water_cell_game() -> Game:
    """
    Running 3x3 game one reveal away from winning.

    Reveal (0, 2) to win; reveal (2, 2) to lose. Mines at (2, 1) and
    (1, 2) are flagged.
    """
    grid = make_grid(
        """
        ...
        ..*
        .**
        """
    )
    revealed = [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1)]
    flagged = [(2, 1), (1, 2)]
    updates = {}
    for x, y in revealed:
        coordinate = Coordinate(x, y)
        updates[coordinate] = grid.get_cell(coordinate).with_status(CellStatus.REVEALED)
    for x, y in flagged:
        coordinate = Coordinate(x, y)
        updates[coordinate] = grid.get_cell(coordinate).with_status(CellStatus.FLAGGED)
    grid = grid.set_cells(updates)

    difficulty = Difficulty(3, 3, 3)
    return Game(
        board=Board.create(difficulty, grid, 2),
        status=GameStatus.RUNNING,
        remaining_flags=1,
        elapsed_time=40,
        rand_seed=6,
    )
