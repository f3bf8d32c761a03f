"""
Random agent for Minesweeper.

Serves as a baseline by revealing random hidden cells.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that reveals hidden cells uniformly at random.

    It never marks, so it can only finish a game by hitting a mine,
    or by winning on a board without mines.
    """

    def __init__(self, board_size: int = 10, seed: Optional[int] = None) -> None:
        """
        Initialize the random agent.

        Args:
            board_size: Number of rows (and columns) in the board.
            seed: Random seed for reproducibility.
        """
        super().__init__(board_size)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid reveal action.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Random reveal action index.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.where(valid_actions[: self.total_cells])[0]

        if len(valid_indices) == 0:
            # No hidden cells left, return any action (will be a no-op)
            return 0

        return int(self.rng.choice(valid_indices))
