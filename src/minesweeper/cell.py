"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their status
(hidden/flagged/revealed/detonated) and content (mine/number).
Cells are immutable; status changes produce new cells.
"""
from dataclasses import dataclass, replace
from enum import Enum


# ============================================================================
# Constants
# ============================================================================

MINE = -1

HIDDEN_OBSERVATION = -1
FLAGGED_OBSERVATION = -2
MINE_OBSERVATION = 9
DETONATED_OBSERVATION = 10


class CellStatus(Enum):
    """Possible visual states of a cell."""

    HIDDEN = "hidden"
    FLAGGED = "flagged"
    REVEALED = "revealed"
    DETONATED = "detonated"


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(frozen=True)
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        status: Current visual state.
        mine_count: Count of mines in neighbouring cells (0-8), or
            MINE (-1) if this cell is a mine. Fixed once the board is filled.
    """

    status: CellStatus = CellStatus.HIDDEN
    mine_count: int = 0

    @classmethod
    def water(cls, mine_count: int, status: CellStatus = CellStatus.HIDDEN) -> "Cell":
        """Create a non-mine cell with the given adjacent mine count."""
        return cls(status, mine_count)

    @classmethod
    def mine(cls, status: CellStatus = CellStatus.HIDDEN) -> "Cell":
        """Create a mine cell."""
        return cls(status, MINE)

    def with_status(self, status: CellStatus) -> "Cell":
        """Return a copy of this cell with a different status."""
        if status == self.status:
            return self
        return replace(self, status=status)

    def revealed(self) -> "Cell":
        """Return this cell revealed, leaving detonated cells as they are."""
        if self.status == CellStatus.DETONATED:
            return self
        return self.with_status(CellStatus.REVEALED)

    def toggled_flag(self) -> "Cell":
        """
        Toggle flag on this cell.

        Returns:
            The flagged/unflagged cell, or this cell unchanged if it is
            revealed or detonated.
        """
        if self.status == CellStatus.HIDDEN:
            return self.with_status(CellStatus.FLAGGED)
        if self.status == CellStatus.FLAGGED:
            return self.with_status(CellStatus.HIDDEN)
        return self

    @property
    def is_mine(self) -> bool:
        """Check if cell is a mine."""
        return self.mine_count == MINE

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.status == CellStatus.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.status == CellStatus.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.status == CellStatus.FLAGGED

    @property
    def is_detonated(self) -> bool:
        """Check if cell is the mine that ended the game."""
        return self.status == CellStatus.DETONATED

    def to_observation(self) -> int:
        """
        Convert cell to observation value for ML agent.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
            10: Detonated mine
        """
        if self.status == CellStatus.HIDDEN:
            return HIDDEN_OBSERVATION
        if self.status == CellStatus.FLAGGED:
            return FLAGGED_OBSERVATION
        if self.status == CellStatus.DETONATED:
            return DETONATED_OBSERVATION
        if self.is_mine:
            return MINE_OBSERVATION
        return self.mine_count
