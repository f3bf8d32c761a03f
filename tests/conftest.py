"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src to path for imports, and the repo root for main.py and demo.py
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(ROOT / "src"))

from minesweeper import Board, BoardConfig, Cell, Difficulty


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Create a seeded random source."""
    return random.Random(1234)


@pytest.fixture
def default_board(rng: random.Random) -> Board:
    """Create a default 10x10 easy board with 10 mines."""
    return Board(rng=rng)


@pytest.fixture
def center_mine_board() -> Board:
    """Create a 3x3 board with a single mine in the center."""
    return Board(BoardConfig(3, Difficulty.EASY), layout=[(1, 1)])


@pytest.fixture
def corner_mine_board() -> Board:
    """Create a 5x5 board with a single mine in the bottom right corner."""
    return Board(BoardConfig(5, Difficulty.EASY), layout=[(4, 4)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, Difficulty.EASY), layout=[])


@pytest.fixture
def two_mine_board() -> Board:
    """Create a 4x4 board with mines at (0, 0) and (3, 3)."""
    return Board(BoardConfig(4, Difficulty.EASY), layout=[(0, 0), (3, 3)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell(0, 0)


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(0, 0, is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(10, Difficulty.EASY)
