#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage (after `pip install -e .`):
    python main.py play [--size N] [--difficulty {easy,medium,hard,extreme}]
                        [--seed S]

Commands during play:
    r ROW COL   reveal a cell
    m ROW COL   toggle the mark on a cell
    n           start a new board
    q           quit
"""
import argparse
import random
from typing import Optional, Tuple

from minesweeper import Board, BoardConfig, Difficulty, GameState
from minesweeper import InvalidConfigurationError, render_board


DIFFICULTIES = {difficulty.name.lower(): difficulty for difficulty in Difficulty}

COMMAND_ALIASES = {
    "r": "reveal",
    "reveal": "reveal",
    "m": "mark",
    "mark": "mark",
    "n": "new",
    "new": "new",
    "q": "quit",
    "quit": "quit",
}

HELP_TEXT = "Commands: r ROW COL (reveal), m ROW COL (mark), n (new), q (quit)"


def parse_command(text: str) -> Tuple[str, Optional[Tuple[int, int]]]:
    """
    Parse a line typed by the player.

    Args:
        text: Raw input line.

    Returns:
        Tuple of (command name, (row, col) or None).

    Raises:
        ValueError: If the line is not a known command.
    """
    parts = text.split()
    if not parts:
        raise ValueError("Empty command")

    command = COMMAND_ALIASES.get(parts[0].lower())
    if command is None:
        raise ValueError(f"Unknown command: {parts[0]}")

    if command in ("new", "quit"):
        if len(parts) != 1:
            raise ValueError(f"'{parts[0]}' takes no arguments")
        return command, None

    if len(parts) != 3:
        raise ValueError(f"'{parts[0]}' needs a row and a column")
    return command, (int(parts[1]), int(parts[2]))


def print_board(board: Board) -> None:
    """Print the board and the number of unmarked mines."""
    print()
    print(render_board(board, coordinates=True))
    print(f"Mines remaining: {board.mines_remaining}")


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    config = BoardConfig(size=args.size, difficulty=DIFFICULTIES[args.difficulty])
    board = Board(config, rng=random.Random(args.seed))

    print(f"Board: {config.size}x{config.size} with {board.mine_count} mines")
    print(HELP_TEXT)

    while True:
        print_board(board)
        try:
            line = input("> ")
        except EOFError:
            break

        try:
            command, position = parse_command(line)
        except ValueError as error:
            print(error)
            print(HELP_TEXT)
            continue

        if command == "quit":
            break
        if command == "new":
            board.reset()
            continue

        row, col = position
        if board.get_cell(row, col) is None:
            print(f"({row}, {col}) is outside the board")
            continue

        if command == "reveal":
            change = board.reveal(row, col)
        else:
            change = board.toggle_mark(row, col)

        if change is None:
            continue
        if change.current == GameState.WON:
            print_board(board)
            print("You win!")
        elif change.current == GameState.LOST:
            print_board(board)
            print("DETONATION!!!")
        print("Type 'n' for a new board or 'q' to quit.")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play an interactive game")
    play_parser.add_argument(
        "--size", type=int, default=10, help="Board size (NxN)"
    )
    play_parser.add_argument(
        "--difficulty",
        choices=sorted(DIFFICULTIES, key=lambda name: DIFFICULTIES[name].value),
        default="easy",
        help="Mine density",
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for mine placement"
    )

    args = parser.parse_args()

    if args.command == "play":
        try:
            play(args)
        except InvalidConfigurationError as error:
            parser.error(str(error))
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
