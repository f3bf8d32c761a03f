"""
Board module for Minesweeper game.

Implements the square game board with mine placement, cell revealing,
marking, and game state management.
"""
import logging
import random
from collections import deque
from dataclasses import InitVar, dataclass, field
from enum import Enum, auto
from typing import Deque, FrozenSet, Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState
from .errors import InvalidConfigurationError

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


class Difficulty(Enum):
    """Mine density as a percentage of the board area."""

    EASY = 10
    MEDIUM = 30
    HARD = 50
    EXTREME = 70


@dataclass(frozen=True)
class GameStateChange:
    """Transition of the game state caused by a single action."""

    previous: GameState
    current: GameState


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        size: Number of rows and columns of the square grid.
        difficulty: Mine density used to derive the mine count.
    """

    size: int = 10
    difficulty: Difficulty = Difficulty.EASY

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise InvalidConfigurationError("Board size must be an integer")
        if self.size < 1:
            raise InvalidConfigurationError("Board size must be positive")
        if not isinstance(self.difficulty, Difficulty):
            raise InvalidConfigurationError(
                f"Unknown difficulty: {self.difficulty!r}"
            )

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.size * self.size

    @property
    def mine_count(self) -> int:
        """Mines implied by the board area and density (rounded down)."""
        return self.total_cells * self.difficulty.value // 100


# ============================================================================
# Board Class
# ============================================================================

@dataclass(eq=False)
class Board:
    """
    Minesweeper game board.

    Manages the grid of cells, mine placement, revealing and marking
    logic, and win/lose conditions. Commands never raise on illegal
    input; they return None when nothing about the game state changed
    and a GameStateChange when the game was won or lost.

    Args:
        config: Board size and difficulty.
        rng: Random source used for mine placement. A fresh unseeded
            source is created when omitted.
        layout: Explicit mine positions. Overrides the density-derived
            mine count and random placement.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: Optional[random.Random] = field(default=None, repr=False)
    layout: InitVar[Optional[Iterable[Position]]] = None
    _cells: List[Cell] = field(default_factory=list, init=False, repr=False)
    _mines: FrozenSet[Position] = field(
        default=frozenset(), init=False, repr=False
    )
    _fixed_layout: Optional[FrozenSet[Position]] = field(
        default=None, init=False, repr=False
    )
    _game_state: GameState = field(default=GameState.IN_PROGRESS, init=False)

    def __post_init__(self, layout: Optional[Iterable[Position]]) -> None:
        """Place mines and create the grid after dataclass creation."""
        if self.rng is None:
            self.rng = random.Random()
        if layout is not None:
            self._fixed_layout = self._validate_layout(layout)
        self._init_grid()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create a fresh grid of hidden cells over a new mine layout."""
        if self._fixed_layout is not None:
            self._mines = self._fixed_layout
        else:
            self._mines = self._place_mines(self.config.mine_count)

        size = self.config.size
        self._cells = [
            Cell(row, col, is_mine=(row, col) in self._mines)
            for row in range(size)
            for col in range(size)
        ]
        self._game_state = GameState.IN_PROGRESS
        logger.debug(
            "Created %dx%d board with %d mines",
            size, size, len(self._mines),
        )

    def _place_mines(self, count: int) -> FrozenSet[Position]:
        """
        Choose distinct mine positions uniformly at random.

        Draws random coordinates and rejects the ones already taken
        until enough distinct positions are collected.

        Args:
            count: Number of mines to place.

        Returns:
            Set of (row, col) mine positions.
        """
        size = self.config.size
        positions = set()
        while len(positions) < count:
            position = (self.rng.randrange(size), self.rng.randrange(size))
            if position in positions:
                continue
            positions.add(position)
        return frozenset(positions)

    def _validate_layout(
        self, layout: Iterable[Position]
    ) -> FrozenSet[Position]:
        """Check explicit mine positions are in range and distinct."""
        positions = [self._validate_position(position) for position in layout]
        for row, col in positions:
            if not self._is_valid_position(row, col):
                raise InvalidConfigurationError(
                    f"Mine position {(row, col)} is outside the board"
                )
        unique = frozenset(positions)
        if len(unique) != len(positions):
            raise InvalidConfigurationError("Mine positions must be distinct")
        return unique

    @staticmethod
    def _validate_position(position) -> Position:
        """Check a mine position is a (row, col) pair of integers."""
        try:
            row, col = position
        except (TypeError, ValueError):
            raise InvalidConfigurationError(
                f"Mine position {position!r} is not a (row, col) pair"
            ) from None
        for index in (row, col):
            if isinstance(index, bool) or not isinstance(index, int):
                raise InvalidConfigurationError(
                    f"Mine position {position!r} must hold integers"
                )
        return row, col

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self.get_neighbors(row, col):
            if self._cell_at(neighbor_row, neighbor_col).is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def get_neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for neighbors inside the board.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        size = self.config.size
        return 0 <= row < size and 0 <= col < size

    def _cell_at(self, row: int, col: int) -> Cell:
        """Get cell at a position already known to be valid."""
        return self._cells[row * self.config.size + col]

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> Optional[GameStateChange]:
        """
        Reveal a cell at the given position.

        Revealing a mine loses the game. Revealing a cell with no
        adjacent mines also reveals its whole empty region and the
        numbered cells bordering it. Marked cells must be unmarked
        before they can be revealed.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            The game state transition, or None if the state did not change.
        """
        if not self._can_reveal(row, col):
            return None

        cell = self._cell_at(row, col)
        if cell.is_mine:
            cell.state = CellState.MINE
        else:
            self._flood_reveal(row, col)

        return self._evaluate_game_end()

    def _can_reveal(self, row: int, col: int) -> bool:
        """Check if a cell can be revealed."""
        if self.game_over:
            return False
        if not self._is_valid_position(row, col):
            return False
        return self._cell_at(row, col).is_hidden

    def _flood_reveal(self, row: int, col: int) -> None:
        """
        Reveal a safe cell and cascade through connected empty cells.

        Cells are processed only while hidden, so each one is counted
        at most once.

        Args:
            row: Row index of the starting cell.
            col: Column index of the starting cell.
        """
        frontier: Deque[Position] = deque([(row, col)])
        while frontier:
            current_row, current_col = frontier.popleft()
            cell = self._cell_at(current_row, current_col)
            if not cell.is_hidden:
                continue

            cell.state = CellState.NUMBER
            cell.adjacent_mines = self._count_adjacent_mines(
                current_row, current_col
            )
            if cell.adjacent_mines > 0:
                continue
            for neighbor in self.get_neighbors(current_row, current_col):
                if self._cell_at(*neighbor).is_hidden:
                    frontier.append(neighbor)

    def toggle_mark(self, row: int, col: int) -> Optional[GameStateChange]:
        """
        Toggle the mark on a cell.

        A marked cell is always unmarked. A hidden cell is marked only
        while marks remain, so there are never more marks than mines.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            The game state transition, or None if the state did not change.
        """
        if self.game_over:
            return None
        cell = self.get_cell(row, col)
        if cell is None or not cell.is_actionable:
            return None

        if cell.is_marked:
            cell.state = CellState.HIDDEN
        elif self.mines_remaining > 0:
            cell.state = CellState.MARKED

        return self._evaluate_game_end()

    # ========================================================================
    # End of Game (Mid-level)
    # ========================================================================

    def _evaluate_game_end(self) -> Optional[GameStateChange]:
        """Apply win/lose conditions and report any state transition."""
        previous = self._game_state

        if self._check_win_condition():
            self._game_state = GameState.WON
            logger.info("Game won with %d mines marked", len(self._mines))
        elif self._check_lose_condition():
            self._game_state = GameState.LOST
            self._reveal_all_mines()
            logger.info("Game lost, mine detonated")

        if self._game_state == previous:
            return None
        return GameStateChange(previous, self._game_state)

    def _check_win_condition(self) -> bool:
        """Check if the marked cells are exactly the mine cells."""
        return self.marked_positions == self._mines

    def _check_lose_condition(self) -> bool:
        """Check if any mine has been revealed."""
        return any(cell.state == CellState.MINE for cell in self._cells)

    def _reveal_all_mines(self) -> None:
        """Expose every mine on the board."""
        for cell in self._cells:
            if cell.is_mine:
                cell.state = CellState.MINE

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def size(self) -> int:
        """Get number of rows (and columns)."""
        return self.config.size

    @property
    def mine_count(self) -> int:
        """Get total number of mines on the board."""
        return len(self._mines)

    @property
    def mines_remaining(self) -> int:
        """Get mines left to mark (mine count minus marks placed)."""
        return self.mine_count - len(self.marked_positions)

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def game_over(self) -> bool:
        """Check if the game has been won or lost."""
        return self._game_state in (GameState.WON, GameState.LOST)

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    @property
    def cells(self) -> Tuple[Cell, ...]:
        """Get all cells in row-major order."""
        return tuple(self._cells)

    @property
    def mine_positions(self) -> FrozenSet[Position]:
        """Get positions of every mine."""
        return self._mines

    @property
    def marked_positions(self) -> FrozenSet[Position]:
        """Get positions of every marked cell."""
        return frozenset(
            cell.position for cell in self._cells if cell.is_marked
        )

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._cell_at(row, col)

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = marked
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        values = [cell.to_observation() for cell in self._cells]
        return np.array(values, dtype=np.int8).reshape(self.size, self.size)

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of cells that can be revealed.

        Returns:
            List of (row, col) positions of hidden cells.
        """
        if self.game_over:
            return []
        return [cell.position for cell in self._cells if cell.is_hidden]

    def reset(self) -> None:
        """
        Reset board to initial state for a new game.

        A board built from an explicit layout keeps that layout; otherwise
        mines are placed again from the board's random source.
        """
        self._init_grid()
