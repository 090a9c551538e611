"""
Actions and reducer for Minesweeper.

Callers describe what the player did with an action value and hand it
to game_reducer together with the current game.
"""
from dataclasses import dataclass
from typing import Optional, Union

from .board import Difficulty
from .coordinate import Coordinate
from .errors import IllegalStateError, InvalidArgumentError
from .game import (
    Game,
    load_game,
    reveal_cell,
    start_game,
    tick_timer,
    toggle_flag,
    undo_losing_move,
)
from .timer import Timer


# ============================================================================
# Action Types
# ============================================================================

@dataclass(frozen=True)
class StartGame:
    """Create a new game, replacing any current one."""

    seed: int
    difficulty: Difficulty
    timer: Optional[Timer] = None


@dataclass(frozen=True)
class LoadGame:
    """Resume a saved game, replacing any current one."""

    game: Game
    timer: Optional[Timer] = None


@dataclass(frozen=True)
class RevealCell:
    coordinate: Coordinate


@dataclass(frozen=True)
class ToggleFlag:
    coordinate: Coordinate


@dataclass(frozen=True)
class TickTimer:
    """Add one second to the elapsed time."""


@dataclass(frozen=True)
class UndoLosingMove:
    """Go back to the state before the losing reveal."""


GameAction = Union[StartGame, LoadGame, RevealCell, ToggleFlag, TickTimer, UndoLosingMove]


# ============================================================================
# Reducer
# ============================================================================

def game_reducer(state: Optional[Game], action: GameAction) -> Game:
    """
    Apply an action to the current game.

    Args:
        state: Current game, or None before any game was started.
        action: Action to apply.

    Returns:
        The next game; state itself when the action changes nothing.

    Raises:
        IllegalStateError: If a game action arrives with no game, or the
            transition is illegal in the current status.
        InvalidArgumentError: If action is not a known action type.
    """
    if isinstance(action, StartGame):
        return start_game(action.seed, action.difficulty, action.timer)
    if isinstance(action, LoadGame):
        return load_game(action.game, action.timer)

    if not isinstance(
        action, (RevealCell, ToggleFlag, TickTimer, UndoLosingMove)
    ):
        raise InvalidArgumentError(f"unknown action {action!r}")
    if state is None:
        raise IllegalStateError(
            f"{type(action).__name__} requires a game; start or load one first"
        )

    if isinstance(action, RevealCell):
        return reveal_cell(state, action.coordinate)
    if isinstance(action, ToggleFlag):
        return toggle_flag(state, action.coordinate)
    if isinstance(action, TickTimer):
        return tick_timer(state)
    return undo_losing_move(state)
