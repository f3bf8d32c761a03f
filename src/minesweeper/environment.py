"""
Gymnasium environment wrapper for Minesweeper.

Exposes the board engine through a standard action/observation loop
and renders it as text.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .cell import CellState


# ============================================================================
# Constants
# ============================================================================

REWARD_SAFE_REVEAL = 1.0
REWARD_WIN = 10.0
REWARD_MINE = -10.0
REWARD_MARK = 0.0
REWARD_INVALID = -0.1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = marked cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size 2 * size * size.
        Action i < size * size reveals cell (i // size, i % size).
        Action i >= size * size toggles the mark on cell i - size * size.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for a mark toggle
        - -0.1 for an action that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 10x10, easy).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self._rng = random.Random()
        self.board = Board(self.config, rng=self._rng)

        size = self.config.size
        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(size, size),
            dtype=np.int8,
        )

        # One reveal and one mark action per cell
        self._num_cells = self.config.total_cells
        self.action_space = spaces.Discrete(2 * self._num_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment with a new board.

        Args:
            seed: Random seed for mine placement.
            options: May hold "layout", an iterable of (row, col) mine
                positions to use instead of random placement.

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self._rng.seed(seed)

        layout = (options or {}).get("layout")
        self.board = Board(self.config, rng=self._rng, layout=layout)
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Reveal or mark action index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        self._steps += 1

        if action >= self._num_cells:
            row, col = self._action_to_position(action - self._num_cells)
            reward = self._apply_mark(row, col)
        else:
            row, col = self._action_to_position(action)
            reward = self._apply_reveal(row, col)

        observation = self.board.get_observation()
        terminated = self.board.game_over
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat cell index to (row, col) position."""
        return divmod(int(action), self.config.size)

    def _apply_reveal(self, row: int, col: int) -> float:
        """Reveal a cell and score the outcome."""
        cell = self.board.get_cell(row, col)
        if self.board.game_over or cell is None or not cell.is_hidden:
            return REWARD_INVALID

        self.board.reveal(row, col)

        if self.board.is_won:
            return REWARD_WIN
        if self.board.is_lost:
            return REWARD_MINE
        return REWARD_SAFE_REVEAL

    def _apply_mark(self, row: int, col: int) -> float:
        """Toggle a mark and score the outcome."""
        cell = self.board.get_cell(row, col)
        if self.board.game_over or cell is None:
            return REWARD_INVALID

        before = cell.state
        self.board.toggle_mark(row, col)

        if self.board.is_won:
            return REWARD_WIN
        if cell.state == before:
            return REWARD_INVALID
        return REWARD_MARK

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        revealed = sum(1 for cell in self.board.cells if cell.is_revealed)

        return {
            "steps": self._steps,
            "revealed": revealed,
            "mines_remaining": self.board.mines_remaining,
            "game_state": self.board.game_state.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render board as ASCII string."""
        return render_board(self.board)

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self.board.game_over:
            return mask

        can_mark = self.board.mines_remaining > 0
        for index, cell in enumerate(self.board.cells):
            if cell.is_hidden:
                mask[index] = True
                mask[self._num_cells + index] = can_mark
            elif cell.is_marked:
                mask[self._num_cells + index] = True
        return mask


# ============================================================================
# Text Rendering
# ============================================================================

CELL_SYMBOLS = {
    CellState.HIDDEN: ".",
    CellState.MARKED: "F",
    CellState.MINE: "*",
}


def render_board(board: Board, coordinates: bool = False) -> str:
    """
    Render a board as text, one line per row.

    Args:
        board: Board to render.
        coordinates: Prefix rows and columns with their indices.

    Returns:
        Multi-line string. Hidden cells are ".", marked "F", mines "*",
        empty cells blank and numbered cells their count.
    """
    width = len(str(board.size - 1))
    lines = []
    if coordinates:
        header = " ".join(f"{col:>{width}}" for col in range(board.size))
        lines.append(" " * (width + 1) + header)

    for row in range(board.size):
        symbols = []
        for col in range(board.size):
            cell = board.get_cell(row, col)
            if cell.state in CELL_SYMBOLS:
                symbol = CELL_SYMBOLS[cell.state]
            elif cell.adjacent_mines == 0:
                symbol = " "
            else:
                symbol = str(cell.adjacent_mines)
            symbols.append(f"{symbol:>{width}}")
        row_str = " ".join(symbols)
        if coordinates:
            row_str = f"{row:>{width}} " + row_str
        lines.append(row_str)

    return "\n".join(lines)
