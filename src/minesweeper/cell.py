"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their position,
content (mine or not) and state (hidden/number/mine/marked).
"""
from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Tuple


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    NUMBER = auto()
    MINE = auto()
    MARKED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        row: Row index of the cell on its board.
        col: Column index of the cell on its board.
        is_mine: Whether this cell contains a mine. Fixed once created.
        adjacent_mines: Count of mines in neighboring cells (0-8), only
            meaningful once the cell is revealed as a number.
        state: Current visual state.
    """

    row: int
    col: int
    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = field(default=CellState.HIDDEN)

    @property
    def position(self) -> Tuple[int, int]:
        """Get (row, col) of this cell."""
        return self.row, self.col

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_marked(self) -> bool:
        """Check if cell is marked."""
        return self.state == CellState.MARKED

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed, as a number or as a mine."""
        return self.state in (CellState.NUMBER, CellState.MINE)

    @property
    def is_actionable(self) -> bool:
        """Check if the cell can still take a mark toggle."""
        return self.state in (CellState.HIDDEN, CellState.MARKED)

    def to_observation(self) -> int:
        """
        Convert cell to observation value.

        Returns:
            -1: Hidden cell
            -2: Marked cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.MARKED:
            return -2
        if self.state == CellState.MINE:
            return 9
        return self.adjacent_mines
