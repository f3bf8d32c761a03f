"""
Minesweeper game module.

Provides the core board engine including mine placement, cell state,
win/lose evaluation, and a Gymnasium environment wrapper.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    Difficulty,
    GameState,
    GameStateChange,
)
from .environment import MinesweeperEnv, render_board
from .errors import InvalidConfigurationError

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "Difficulty",
    "GameState",
    "GameStateChange",
    "InvalidConfigurationError",
    "MinesweeperEnv",
    "render_board",
]
