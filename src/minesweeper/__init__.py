"""
Minesweeper rules engine.

Immutable game values and pure transitions for board generation,
reveal with flood fill, flagging, win/loss detection and timing.
"""
from .errors import IllegalStateError, InvalidArgumentError
from .coordinate import Coordinate, DIRECTIONS
from .rng import SeededRandom, validate_seed
from .cell import Cell, CellStatus
from .grid import Grid
from .board import (
    Board,
    Difficulty,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    DIFFICULTIES,
    initiate_board,
    reveal_in_grid,
)
from .timer import Timer, IntervalTimer
from .game import (
    Game,
    GameStatus,
    start_game,
    load_game,
    reveal_cell,
    toggle_flag,
    tick_timer,
    undo_losing_move,
    get_loadable_game_state,
    is_running,
    is_lost,
    is_ended,
    count_revealed_cells,
)
from .actions import (
    GameAction,
    StartGame,
    LoadGame,
    RevealCell,
    ToggleFlag,
    TickTimer,
    UndoLosingMove,
    game_reducer,
)
from .render import board_to_string
from .environment import MinesweeperEnv

__all__ = [
    "IllegalStateError",
    "InvalidArgumentError",
    "Coordinate",
    "DIRECTIONS",
    "SeededRandom",
    "validate_seed",
    "Cell",
    "CellStatus",
    "Grid",
    "Board",
    "Difficulty",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "DIFFICULTIES",
    "initiate_board",
    "reveal_in_grid",
    "Timer",
    "IntervalTimer",
    "Game",
    "GameStatus",
    "start_game",
    "load_game",
    "reveal_cell",
    "toggle_flag",
    "tick_timer",
    "undo_losing_move",
    "get_loadable_game_state",
    "is_running",
    "is_lost",
    "is_ended",
    "count_revealed_cells",
    "GameAction",
    "StartGame",
    "LoadGame",
    "RevealCell",
    "ToggleFlag",
    "TickTimer",
    "UndoLosingMove",
    "game_reducer",
    "board_to_string",
    "MinesweeperEnv",
]
