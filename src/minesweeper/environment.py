"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface over the immutable game engine.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .actions import RevealCell, StartGame, game_reducer
from .board import Difficulty
from .cell import DETONATED_OBSERVATION, FLAGGED_OBSERVATION, HIDDEN_OBSERVATION
from .coordinate import Coordinate
from .game import Game, GameStatus, is_ended
from .render import board_to_string


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D int8 array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine
        - 10 = detonated mine

    Actions:
        Discrete action space of size width * height.
        Action i reveals the cell at column i % width, row i // width.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        difficulty: Optional[Difficulty] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            difficulty: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.difficulty = difficulty or Difficulty()
        self.render_mode = render_mode
        self.game: Optional[Game] = None

        self.observation_space = spaces.Box(
            low=FLAGGED_OBSERVATION,
            high=DETONATED_OBSERVATION,
            shape=(self.difficulty.height, self.difficulty.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.difficulty.num_cells)

        self._steps = 0
        self._total_safe_cells = self.difficulty.num_cells - self.difficulty.num_mines

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game.

        Args:
            seed: Seeds the environment's generator, which in turn picks
                the game's mine-placement seed.
            options: "game_seed" sets the mine-placement seed directly.

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if options and options.get("game_seed") is not None:
            game_seed = options["game_seed"]
        else:
            game_seed = int(self.np_random.integers(1, 2**31 - 1))
        self.game = game_reducer(self.game, StartGame(game_seed, self.difficulty))
        self._steps = 0
        return self.game.grid.to_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal (row * width + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        if self.game is None:
            raise RuntimeError("Call reset() before step()")

        coordinate = self._action_to_coordinate(int(action))
        self._steps += 1

        reward = self._calculate_reward(coordinate)

        observation = self.game.grid.to_observation()
        terminated = is_ended(self.game)
        return observation, reward, terminated, False, self._get_info()

    def _action_to_coordinate(self, action: int) -> Coordinate:
        """Convert flat action index to a coordinate."""
        return Coordinate(action % self.difficulty.width, action // self.difficulty.width)

    def _calculate_reward(self, coordinate: Coordinate) -> float:
        """Apply the reveal and score its outcome."""
        previous = self.game
        self.game = game_reducer(previous, RevealCell(coordinate))

        if self.game is previous:
            return -0.1
        if self.game.status == GameStatus.WIN:
            return 10.0
        if self.game.status == GameStatus.LOSS:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self._count_safe_reveals(),
            "total_safe": self._total_safe_cells,
            "game_state": self.game.status.name,
            "valid_actions": int(self.get_action_mask().sum()),
        }

    def _count_safe_reveals(self) -> int:
        """
        Count water cells the player has uncovered.

        Ending the game reveals the whole board, so a lost game is counted
        on the grid saved before the losing reveal.
        """
        if self.game.status == GameStatus.WIN:
            return self._total_safe_cells
        grid = self.game.grid
        if self.game.status == GameStatus.LOSS and self.game.saved_grid_state is not None:
            grid = self.game.saved_grid_state
        return grid.count(lambda cell: cell.is_revealed and not cell.is_mine)

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.game is None:
            return None
        if self.render_mode == "ansi":
            return board_to_string(self.game.grid)
        if self.render_mode == "human":
            print(board_to_string(self.game.grid))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = hidden cell of an unfinished game.
        """
        if self.game is None or is_ended(self.game):
            return np.zeros(self.action_space.n, dtype=bool)
        return (self.game.grid.to_observation() == HIDDEN_OBSERVATION).flatten()
