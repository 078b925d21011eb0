"""A two-player game of tic-tac-toe played at the terminal."""

from __future__ import annotations

import argparse
import enum
import sys
from collections.abc import Sequence

_LINES = (
    (1, 2, 3),
    (4, 5, 6),
    (7, 8, 9),
    (1, 4, 7),
    (2, 5, 8),
    (3, 6, 9),
    (1, 5, 9),
    (3, 5, 7),
)
_MARKS = ("X", "O")
_CLEAR_SCREEN = "\033[2J\033[H"


class GameStatus(enum.Enum):
    """Where a game stands."""

    WIN = 1
    DRAW = 0
    IN_PROGRESS = -1


class Board:
    """A 3x3 board whose squares are numbered 1 to 9, row by row."""

    def __init__(self) -> None:
        self._squares = [str(position) for position in range(1, 10)]

    @property
    def cells(self) -> tuple[str, ...]:
        """The nine squares: a mark where one was played, else the square's number."""
        return tuple(self._squares)

    def play(self, position: int, mark: str) -> None:
        """Put ``mark`` on a free square; raise ValueError for an illegal move."""
        if mark not in _MARKS:
            raise ValueError(f"mark must be one of {', '.join(_MARKS)}")
        if not 1 <= position <= 9:
            raise ValueError(f"position {position} is not on the board")
        if self._squares[position - 1] != str(position):
            raise ValueError(f"square {position} is already taken")
        self._squares[position - 1] = mark

    def status(self) -> GameStatus:
        """Tell whether a line is complete, the board is full, or play goes on."""
        square = self._squares
        for a, b, c in _LINES:
            if square[a - 1] == square[b - 1] == square[c - 1]:
                return GameStatus.WIN
        if all(cell in _MARKS for cell in square):
            return GameStatus.DRAW
        return GameStatus.IN_PROGRESS

    def render(self) -> str:
        """Draw the board with a title and the players' marks."""
        s = self._squares
        spacer = "     |     |     \n"
        divider = "_____|_____|_____\n"

        def row(start: int) -> str:
            return f"  {s[start]}  |  {s[start + 1]}  |  {s[start + 2]}\n"

        return (
            "\n\n\tTic Tac Toe\n\n"
            "Player 1 (X)  -  Player 2 (O)\n\n\n"
            + spacer
            + row(0)
            + divider
            + spacer
            + row(3)
            + divider
            + spacer
            + row(6)
            + spacer
            + "\n"
        )


def _show(board: Board) -> None:
    if sys.stdout.isatty():
        print(_CLEAR_SCREEN, end="")
    print(board.render(), end="")


def main(argv: Sequence[str] | None = None) -> int:
    """Play one game, reading square numbers from standard input."""
    parser = argparse.ArgumentParser(
        prog="tictactoe", description="Play tic-tac-toe for two players."
    )
    parser.parse_args(argv)

    board = Board()
    player = 1
    while True:
        _show(board)
        try:
            line = input(f"Player {player}, enter a number:  ")
        except EOFError:
            print()
            return 1
        try:
            board.play(int(line.strip()), _MARKS[player - 1])
        except ValueError:
            print("Invalid move ")
            continue
        if board.status() is not GameStatus.IN_PROGRESS:
            break
        player = 2 if player == 1 else 1

    _show(board)
    if board.status() is GameStatus.WIN:
        print(f"==>\aPlayer {player} win ")
    else:
        print("==>\aGame draw")
    return 0


if __name__ == "__main__":
    sys.exit(main())