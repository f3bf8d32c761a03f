"""
Base agent interface for Minesweeper players.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    Agents pick an action from the environment's action space: indices
    below the number of cells reveal a cell, the rest toggle a mark.
    """

    def __init__(self, board_size: int) -> None:
        """
        Initialize the agent.

        Args:
            board_size: Number of rows (and columns) in the board.
        """
        self.board_size = board_size
        self.total_cells = board_size * board_size

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index.
        """

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return divmod(int(action) % self.total_cells, self.board_size)

    def position_to_action(self, row: int, col: int, mark: bool = False) -> int:
        """Convert (row, col) position to a reveal or mark action index."""
        action = row * self.board_size + col
        if mark:
            action += self.total_cells
        return action

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get valid reveal actions mask from observation.

        Args:
            observation: 2D array of cell states.

        Returns:
            Boolean mask over reveal actions where True = valid action.
        """
        # Hidden cells (value -1) can be revealed
        return observation.flatten() == -1

    def reset(self) -> None:
        """Reset agent state for new episode."""
