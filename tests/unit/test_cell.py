"""
Unit tests for Cell class.

Tests cell status transitions, immutability, and observation conversion.
"""
import dataclasses

import pytest
from minesweeper import Cell, CellStatus


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        assert Cell().is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        cell = Cell()
        assert cell.status == CellStatus.HIDDEN
        assert cell.is_hidden is True

    def test_default_cell_has_zero_adjacent_mines(self) -> None:
        """New cell should have 0 adjacent mines by default."""
        assert Cell().mine_count == 0

    def test_mine_cell_uses_sentinel_count(self) -> None:
        """Mine cells carry a mine count of -1."""
        cell = Cell.mine()
        assert cell.is_mine is True
        assert cell.mine_count == -1

    def test_water_cell_with_adjacent_mines(self) -> None:
        """Can create a water cell with adjacent mine count."""
        cell = Cell.water(5)
        assert cell.mine_count == 5
        assert cell.is_mine is False

    def test_cell_is_immutable(self) -> None:
        """Cells cannot be changed in place."""
        cell = Cell()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cell.status = CellStatus.REVEALED


# ============================================================================
# Cell Status Tests
# ============================================================================

class TestCellStatus:
    """Test status transitions produce new cells."""

    def test_revealed_returns_new_cell(self) -> None:
        """Revealing should leave the original cell hidden."""
        cell = Cell.water(2)
        revealed = cell.revealed()
        assert revealed.is_revealed is True
        assert revealed.mine_count == 2
        assert cell.is_hidden is True

    def test_revealed_keeps_detonated(self) -> None:
        """A detonated mine stays detonated when everything is revealed."""
        cell = Cell.mine(CellStatus.DETONATED)
        assert cell.revealed() is cell

    def test_with_same_status_returns_same_cell(self) -> None:
        """Setting the current status is a no-op."""
        cell = Cell()
        assert cell.with_status(CellStatus.HIDDEN) is cell

    def test_flag_hidden_cell(self) -> None:
        """Toggling a hidden cell flags it."""
        assert Cell().toggled_flag().is_flagged is True

    def test_unflag_returns_to_hidden(self) -> None:
        """Toggling twice returns to hidden."""
        assert Cell().toggled_flag().toggled_flag().is_hidden is True

    @pytest.mark.parametrize("status", [CellStatus.REVEALED, CellStatus.DETONATED])
    def test_flag_uncovered_cell_is_noop(self, status: CellStatus) -> None:
        """Cannot flag a revealed or detonated cell."""
        cell = Cell.mine(status)
        assert cell.toggled_flag() is cell

    def test_equal_cells_compare_equal(self) -> None:
        """Cells compare by value."""
        assert Cell.water(3, CellStatus.REVEALED) == Cell(CellStatus.REVEALED, 3)


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values for ML agent."""

    def test_hidden_cell_observation_is_negative_one(self) -> None:
        """Hidden cell should return -1 for observation."""
        assert Cell.water(4).to_observation() == -1

    def test_flagged_cell_observation_is_negative_two(self) -> None:
        """Flagged cell should return -2 for observation."""
        assert Cell.mine(CellStatus.FLAGGED).to_observation() == -2

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_cell_observation_matches_adjacent_count(
        self, count: int
    ) -> None:
        """Revealed cell returns its adjacent mine count."""
        assert Cell.water(count, CellStatus.REVEALED).to_observation() == count

    def test_revealed_mine_observation_is_nine(self) -> None:
        """Revealed mine should return 9 for observation."""
        assert Cell.mine(CellStatus.REVEALED).to_observation() == 9

    def test_detonated_mine_observation_is_ten(self) -> None:
        """Detonated mine should return 10 for observation."""
        assert Cell.mine(CellStatus.DETONATED).to_observation() == 10
