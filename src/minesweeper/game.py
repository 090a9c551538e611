"""
Game state machine for Minesweeper.

A Game is an immutable value. Each transition takes a Game and returns
the next one; transitions that do not apply in the current status return
the very same object so callers can detect "nothing happened" with ``is``.

Status flow::

    READY/WAITING --first reveal--> RUNNING --mine--> LOSS --undo--> RUNNING
                                    RUNNING --all water revealed--> WIN
"""
import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from .board import Board, Difficulty
from .cell import Cell
from .coordinate import Coordinate
from .errors import IllegalStateError, InvalidArgumentError
from .grid import Grid
from .rng import SeededRandom, validate_seed
from .timer import Timer


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    WAITING = "waiting"
    READY = "ready"
    RUNNING = "running"
    LOSS = "loss"
    WIN = "win"


PRE_START_STATUSES = frozenset({GameStatus.WAITING, GameStatus.READY})
TICKABLE_STATUSES = PRE_START_STATUSES | {GameStatus.RUNNING}
ENDED_STATUSES = frozenset({GameStatus.WIN, GameStatus.LOSS})


# ============================================================================
# Game Data Class
# ============================================================================

@dataclass(frozen=True)
class Game:
    """
    Complete state of one Minesweeper game.

    Attributes:
        board: Difficulty, grid, flag count and loss snapshot.
        status: Current game status.
        remaining_flags: num_mines - num_flagged, or 0 once the game ended.
        elapsed_time: Seconds ticked so far.
        rand_seed: Seed for mine placement on the first reveal.
        timer: Optional timer port; not part of the game's value.
    """

    board: Board
    status: GameStatus = GameStatus.READY
    remaining_flags: int = 0
    elapsed_time: int = 0
    rand_seed: int = 1
    timer: Optional[Timer] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate elapsed time."""
        if self.elapsed_time < 0:
            raise InvalidArgumentError("elapsed_time cannot be negative")

    @property
    def difficulty(self) -> Difficulty:
        return self.board.difficulty

    @property
    def grid(self) -> Grid:
        return self.board.grid

    @property
    def num_cells(self) -> int:
        return self.board.num_cells

    @property
    def num_flagged(self) -> int:
        return self.board.num_flagged

    @property
    def saved_grid_state(self) -> Optional[Grid]:
        return self.board.saved_grid_state

    def get_cell(self, coordinate: Coordinate) -> Cell:
        return self.board.get_cell(coordinate)


# ============================================================================
# Timer Helpers
# ============================================================================

def _start_timer(game: Game) -> None:
    if game.timer is not None:
        game.timer.start()


def _stop_timer(game: Game) -> None:
    if game.timer is not None:
        game.timer.stop()


# ============================================================================
# End States
# ============================================================================

def _win(game: Game) -> Game:
    _stop_timer(game)
    logger.debug("Game won after %d seconds", game.elapsed_time)
    return replace(
        game,
        board=game.board.with_win_state(),
        status=GameStatus.WIN,
        remaining_flags=0,
    )


def _lose(game: Game, coordinate: Coordinate) -> Game:
    _stop_timer(game)
    logger.debug("Mine detonated at %s", coordinate)
    return replace(
        game,
        board=game.board.with_lose_state(coordinate),
        status=GameStatus.LOSS,
        remaining_flags=0,
    )


# ============================================================================
# Transitions
# ============================================================================

def start_game(
    seed: int,
    difficulty: Difficulty,
    timer: Optional[Timer] = None,
) -> Game:
    """
    Create a minesweeper game.

    Mines are not placed until the first reveal.

    Args:
        seed: Non-zero seed; equal seeds give equal mine layouts.
        difficulty: Board configuration.
        timer: Timer started once the game is running.

    Raises:
        InvalidArgumentError: If seed is 0 or difficulty is not a Difficulty.
    """
    validate_seed(seed)
    if not isinstance(difficulty, Difficulty):
        raise InvalidArgumentError(f"expected a Difficulty, got {difficulty!r}")
    return Game(
        board=Board.create(difficulty),
        status=GameStatus.READY,
        remaining_flags=difficulty.num_mines,
        elapsed_time=0,
        rand_seed=seed,
        timer=timer,
    )


def load_game(snapshot: Game, timer: Optional[Timer] = None) -> Game:
    """
    Resume a previously saved game.

    The snapshot's own timer is discarded; if the game is running, the
    given timer is started.
    """
    game = replace(snapshot, timer=timer)
    if game.status == GameStatus.RUNNING:
        _start_timer(game)
    return game


def reveal_cell(game: Game, coordinate: Coordinate) -> Game:
    """
    Reveal the cell at the given coordinate.

    The first reveal places the mines and starts the game. Revealing a
    mine loses the game; revealing the last water cell wins it.

    Returns:
        The next game, or game itself when the reveal does not apply
        (game over, cell not hidden, coordinate off the grid).
    """
    if not game.board.contains(coordinate):
        logger.debug("Ignoring reveal outside the grid at %s", coordinate)
        return game

    if game.status in PRE_START_STATUSES:
        board = game.board.fill(coordinate, SeededRandom(game.rand_seed))
        started = replace(
            game,
            board=board,
            status=GameStatus.RUNNING,
            remaining_flags=board.remaining_flags,
        )
        _start_timer(started)
        if board.is_win():
            return _win(started)
        return started

    if game.status != GameStatus.RUNNING:
        return game

    cell = game.get_cell(coordinate)
    if not cell.is_hidden:
        return game

    if cell.is_mine:
        return _lose(game, coordinate)

    board = game.board.reveal(coordinate)
    revealed = replace(game, board=board, remaining_flags=board.remaining_flags)
    if board.is_win():
        return _win(revealed)
    return revealed


def toggle_flag(game: Game, coordinate: Coordinate) -> Game:
    """
    Toggle the flag of the cell at the given coordinate.

    Only hidden or flagged cells of a running game can be toggled.
    Flags are not capped: remaining_flags goes negative when more cells
    are flagged than there are mines.
    """
    if game.status != GameStatus.RUNNING:
        return game
    if not game.board.contains(coordinate):
        return game

    board = game.board.toggle_flag(coordinate)
    if board is game.board:
        return game

    flagged = replace(game, board=board, remaining_flags=board.remaining_flags)
    if board.is_win():
        return _win(flagged)
    return flagged


def tick_timer(game: Game) -> Game:
    """
    Increment elapsed time by one second.

    READY is allowed because a timer callback can fire before the caller
    has stored the RUNNING state.

    Raises:
        IllegalStateError: If the game has ended.
    """
    if game.status not in TICKABLE_STATUSES:
        raise IllegalStateError(
            f"tried to tick timer when game status is {game.status.value}; "
            "must be ready, waiting or running"
        )
    return replace(game, elapsed_time=game.elapsed_time + 1)


def undo_losing_move(game: Game) -> Game:
    """
    Return to the state just before the losing reveal.

    Raises:
        IllegalStateError: If the game is not lost or has no snapshot.
    """
    if game.status != GameStatus.LOSS:
        raise IllegalStateError(
            f"incorrect game status {game.status.value}, must be {GameStatus.LOSS.value}"
        )
    board = game.board.restore_saved_state()
    restored = replace(
        game,
        board=board,
        status=GameStatus.RUNNING,
        remaining_flags=board.remaining_flags,
    )
    _start_timer(restored)
    logger.debug("Losing move undone")
    return restored


# ============================================================================
# Query Helpers
# ============================================================================

def get_loadable_game_state(game: Game) -> Game:
    """Copy of game without the timer, suitable for storing and load_game."""
    return replace(game, timer=None)


def is_running(game: Game) -> bool:
    """Check if the game is running."""
    return game.status == GameStatus.RUNNING


def is_lost(game: Game) -> bool:
    """Check if the game has been lost."""
    return game.status == GameStatus.LOSS


def is_ended(game: Game) -> bool:
    """Check if the game has been either won or lost."""
    return game.status in ENDED_STATUSES


def count_revealed_cells(game: Game) -> int:
    """Count revealed cells, including a detonated mine."""
    return game.board.count_revealed()
