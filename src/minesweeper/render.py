"""
Text rendering of a Minesweeper grid for console display.
"""
from .cell import Cell, CellStatus
from .grid import Grid


HIDDEN = "#"
FLAG = "F"
MINE = "*"
DETONATED = "X"
EMPTY = "."


def _cell_to_string(cell: Cell, reveal_all: bool) -> str:
    if reveal_all:
        if cell.is_detonated:
            return DETONATED
        return MINE if cell.is_mine else str(cell.mine_count)
    if cell.status == CellStatus.HIDDEN:
        return HIDDEN
    if cell.status == CellStatus.FLAGGED:
        return FLAG
    if cell.status == CellStatus.DETONATED:
        return DETONATED
    if cell.is_mine:
        return MINE
    return str(cell.mine_count) if cell.mine_count > 0 else EMPTY


def board_to_string(grid: Grid, reveal_all: bool = False) -> str:
    """
    Render the grid as ASCII.

    Args:
        grid: Grid to draw.
        reveal_all: Show every cell's content regardless of status.

    Returns:
        Framed text, one line per row, e.g. ``|#, 1, .|``.
    """
    line = "---" * grid.width
    lines = [line]
    for row in grid.cells:
        lines.append("|" + ", ".join(_cell_to_string(cell, reveal_all) for cell in row) + "|")
    lines.append(line)
    return "\n".join(lines) + "\n"
