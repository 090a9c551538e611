"""
Unit tests for actions and the game reducer.
"""
import pytest
from conftest import RecordingTimer
from minesweeper import (
    Coordinate,
    Difficulty,
    GameStatus,
    IllegalStateError,
    InvalidArgumentError,
    LoadGame,
    RevealCell,
    StartGame,
    TickTimer,
    ToggleFlag,
    UndoLosingMove,
    game_reducer,
    get_loadable_game_state,
    reveal_cell,
    start_game,
)


@pytest.fixture
def started():
    return game_reducer(None, StartGame(6, Difficulty(3, 3, 3)))


class TestStartAndLoad:
    """Test actions that replace the current game."""

    def test_start_from_nothing(self, started) -> None:
        assert started == start_game(6, Difficulty(3, 3, 3))
        assert started.status == GameStatus.READY

    def test_start_replaces_existing_game(self, started) -> None:
        running = game_reducer(started, RevealCell(Coordinate(0, 0)))
        restarted = game_reducer(running, StartGame(7, Difficulty(2, 2, 1)))
        assert restarted.rand_seed == 7
        assert restarted.status == GameStatus.READY

    def test_start_passes_timer(self) -> None:
        timer = RecordingTimer()
        game = game_reducer(None, StartGame(6, Difficulty(3, 3, 3), timer))
        game_reducer(game, RevealCell(Coordinate(0, 0)))
        assert timer.calls == ["start"]

    def test_load_game(self, final_water_cell_game) -> None:
        timer = RecordingTimer()
        saved = get_loadable_game_state(final_water_cell_game)
        game = game_reducer(None, LoadGame(saved, timer))
        assert game == final_water_cell_game
        assert game.timer is timer
        assert timer.calls == ["start"]


class TestDispatch:
    """Test that game actions reach their transitions."""

    def test_reveal(self, started) -> None:
        game = game_reducer(started, RevealCell(Coordinate(0, 0)))
        assert game == reveal_cell(started, Coordinate(0, 0))

    def test_reveal_visible_cell_returns_same_state(self, started) -> None:
        game = game_reducer(started, RevealCell(Coordinate(0, 0)))
        assert game_reducer(game, RevealCell(Coordinate(0, 0))) is game

    def test_toggle_flag(self, started) -> None:
        game = game_reducer(started, RevealCell(Coordinate(0, 0)))
        game = game_reducer(game, ToggleFlag(Coordinate(2, 2)))
        assert game.num_flagged == 1
        assert game.remaining_flags == 2

    def test_tick_twice(self, started) -> None:
        game = game_reducer(game_reducer(started, TickTimer()), TickTimer())
        assert game.elapsed_time == 2

    def test_lose_and_undo(self, started) -> None:
        game = game_reducer(started, RevealCell(Coordinate(0, 0)))
        lost = game_reducer(game, RevealCell(Coordinate(2, 2)))
        assert lost.status == GameStatus.LOSS
        assert game_reducer(lost, UndoLosingMove()) == game

    def test_undo_while_running_raises(self, started) -> None:
        game = game_reducer(started, RevealCell(Coordinate(0, 0)))
        with pytest.raises(IllegalStateError):
            game_reducer(game, UndoLosingMove())


class TestInvalidActions:
    """Test reducer errors."""

    @pytest.mark.parametrize(
        "action",
        [RevealCell(Coordinate(0, 0)), ToggleFlag(Coordinate(0, 0)), TickTimer(), UndoLosingMove()],
    )
    def test_game_action_without_game_raises(self, action) -> None:
        with pytest.raises(IllegalStateError, match="start or load"):
            game_reducer(None, action)

    def test_unknown_action_raises(self, started) -> None:
        with pytest.raises(InvalidArgumentError, match="unknown action"):
            game_reducer(started, "REVEAL_CELL")
