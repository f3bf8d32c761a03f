"""
Unit tests for the Gymnasium environment and text rendering.
"""
import pytest
import numpy as np
from minesweeper import Board, BoardConfig, MinesweeperEnv, render_board

CENTER_MINE = {"layout": [(1, 1)]}


@pytest.fixture
def env() -> MinesweeperEnv:
    """Create a 3x3 environment with a single mine in the center."""
    environment = MinesweeperEnv(BoardConfig(3), render_mode="ansi")
    environment.reset(options=CENTER_MINE)
    return environment


def mark(env: MinesweeperEnv, row: int, col: int) -> int:
    """Get the mark action for a position."""
    return env.config.total_cells + row * env.config.size + col


# ============================================================================
# Space Tests
# ============================================================================

class TestSpaces:
    """Test observation and action spaces."""

    def test_action_space_has_reveal_and_mark_per_cell(
        self, env: MinesweeperEnv
    ) -> None:
        """Two actions per cell."""
        assert env.action_space.n == 18

    def test_observation_matches_space(self, env: MinesweeperEnv) -> None:
        """Reset observation lies in the observation space."""
        obs, _ = env.reset(options=CENTER_MINE)
        assert obs.shape == (3, 3)
        assert env.observation_space.contains(obs)

    def test_default_config(self) -> None:
        """Default environment uses a 10x10 board."""
        environment = MinesweeperEnv()
        assert environment.observation_space.shape == (10, 10)
        assert environment.action_space.n == 200


# ============================================================================
# Reset Tests
# ============================================================================

class TestReset:
    """Test environment reset."""

    def test_reset_with_seed_is_reproducible(self) -> None:
        """Same seed gives the same mine layout."""
        environment = MinesweeperEnv()
        environment.reset(seed=3)
        first = environment.board.mine_positions
        environment.reset(seed=3)
        assert environment.board.mine_positions == first

    def test_reset_with_layout(self, env: MinesweeperEnv) -> None:
        """Layout option places mines explicitly."""
        assert env.board.mine_positions == {(1, 1)}

    def test_reset_info(self, env: MinesweeperEnv) -> None:
        """Info reports the fresh game."""
        _, info = env.reset(options=CENTER_MINE)
        assert info == {
            "steps": 0,
            "revealed": 0,
            "mines_remaining": 1,
            "game_state": "IN_PROGRESS",
        }


# ============================================================================
# Step Tests
# ============================================================================

class TestStep:
    """Test rewards and termination."""

    def test_safe_reveal(self, env: MinesweeperEnv) -> None:
        """Revealing a safe cell gives a small reward."""
        obs, reward, terminated, truncated, info = env.step(0)

        assert reward == 1.0
        assert terminated is False
        assert truncated is False
        assert obs[0, 0] == 1
        assert info["revealed"] == 1
        assert info["steps"] == 1

    def test_repeated_reveal_is_penalized(self, env: MinesweeperEnv) -> None:
        """Actions that change nothing are penalized."""
        env.step(0)
        _, reward, _, _, _ = env.step(0)
        assert reward == pytest.approx(-0.1)

    def test_reveal_mine_ends_episode(self, env: MinesweeperEnv) -> None:
        """Hitting the mine loses."""
        obs, reward, terminated, _, info = env.step(4)

        assert reward == -10.0
        assert terminated is True
        assert info["game_state"] == "LOST"
        assert obs[1, 1] == 9

    def test_marking_the_mine_wins(self, env: MinesweeperEnv) -> None:
        """Marking every mine wins."""
        _, reward, terminated, _, info = env.step(mark(env, 1, 1))

        assert reward == 10.0
        assert terminated is True
        assert info["game_state"] == "WON"

    def test_mark_toggle_is_neutral(self, env: MinesweeperEnv) -> None:
        """A mark that changes a cell is not rewarded."""
        obs, reward, terminated, _, info = env.step(mark(env, 0, 0))

        assert reward == 0.0
        assert terminated is False
        assert obs[0, 0] == -2
        assert info["mines_remaining"] == 0

    def test_mark_beyond_cap_is_penalized(self, env: MinesweeperEnv) -> None:
        """Marks past the mine count change nothing."""
        env.step(mark(env, 0, 0))
        obs, reward, _, _, _ = env.step(mark(env, 0, 1))

        assert reward == pytest.approx(-0.1)
        assert obs[0, 1] == -1

    def test_reveal_marked_cell_is_penalized(
        self, env: MinesweeperEnv
    ) -> None:
        """Marked cells cannot be revealed."""
        env.step(mark(env, 0, 0))
        obs, reward, _, _, _ = env.step(0)

        assert reward == pytest.approx(-0.1)
        assert obs[0, 0] == -2

    def test_action_outside_space_is_penalized(
        self, env: MinesweeperEnv
    ) -> None:
        """Out of range actions are no-ops."""
        _, reward, terminated, _, _ = env.step(100)
        assert reward == pytest.approx(-0.1)
        assert terminated is False

    def test_actions_after_game_over_are_penalized(
        self, env: MinesweeperEnv
    ) -> None:
        """The board is frozen once the game ends."""
        env.step(4)
        _, reward, terminated, _, _ = env.step(0)
        assert reward == pytest.approx(-0.1)
        assert terminated is True


# ============================================================================
# Action Mask Tests
# ============================================================================

class TestActionMask:
    """Test valid action masks."""

    def test_new_game_all_actions_valid(self, env: MinesweeperEnv) -> None:
        """Every reveal and mark is valid at the start."""
        assert env.get_action_mask().all()

    def test_mask_after_marking_to_cap(self, env: MinesweeperEnv) -> None:
        """With no marks left only unmarking remains a valid mark."""
        env.step(mark(env, 0, 0))
        mask = env.get_action_mask()

        assert not mask[0]
        assert mask[mark(env, 0, 0)]
        assert not mask[mark(env, 0, 1)]
        assert mask[1:9].all()

    def test_mask_empty_after_game_over(self, env: MinesweeperEnv) -> None:
        """Finished games have no valid actions."""
        env.step(4)
        assert not env.get_action_mask().any()

    def test_mask_dtype(self, env: MinesweeperEnv) -> None:
        """Mask is boolean."""
        assert env.get_action_mask().dtype == np.bool_


# ============================================================================
# Render Tests
# ============================================================================

class TestRender:
    """Test text rendering."""

    def test_render_ansi(self, env: MinesweeperEnv) -> None:
        """ANSI mode returns the board as text."""
        env.step(0)
        assert env.render() == "1 . .\n. . .\n. . ."

    def test_render_marks_and_mines(self, env: MinesweeperEnv) -> None:
        """Marks render as F and exposed mines as *."""
        env.step(mark(env, 0, 0))
        env.step(4)
        assert env.render() == "F . .\n. * .\n. . ."

    def test_render_human_prints(
        self, capsys: pytest.CaptureFixture
    ) -> None:
        """Human mode prints instead of returning."""
        environment = MinesweeperEnv(BoardConfig(2), render_mode="human")
        environment.reset(options={"layout": []})
        environment.step(environment.config.total_cells)

        assert environment.render() is None
        assert capsys.readouterr().out == ". .\n. .\n"

    def test_render_without_mode(self) -> None:
        """No render mode renders nothing."""
        assert MinesweeperEnv().render() is None

    def test_render_board_with_coordinates(self) -> None:
        """Coordinates label rows and columns."""
        board = Board(BoardConfig(3), layout=[(2, 2)])
        board.toggle_mark(2, 1)
        board.reveal(0, 0)

        assert render_board(board, coordinates=True) == (
            "  0 1 2\n"
            "0      \n"
            "1   1 1\n"
            "2   F ."
        )

    def test_render_pads_wide_boards(self) -> None:
        """Cells line up when indices need two digits."""
        board = Board(BoardConfig(11), layout=[])
        lines = render_board(board, coordinates=True).split("\n")

        assert lines[0].startswith("    0  1")
        assert lines[1] == " 0 " + " ".join([" ."] * 11)
