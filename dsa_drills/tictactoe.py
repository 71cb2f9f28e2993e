"""Five-in-a-row noughts and crosses on a board of any size from 5x5 up."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Optional

EMPTY = "_"
MIN_SIZE = 5
WIN_LENGTH = 5

_DIRECTIONS = (
    ("horizontal", 0, 1),
    ("vertical", 1, 0),
    ("diagonal /", -1, 1),
    ("diagonal \\", -1, -1),
)


class MoveError(ValueError):
    """Raised for a move that cannot be played."""


class Board:
    """A grid where players place marks; five in a line wins."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < MIN_SIZE or cols < MIN_SIZE:
            raise ValueError("This table cannot be used for playing!")
        self.rows = rows
        self.cols = cols
        self._cells = [[EMPTY] * cols for _ in range(rows)]

    def _inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _run(self, row: int, col: int, dr: int, dc: int, mark: str) -> int:
        length = 0
        r, c = row + dr, col + dc
        while self._inside(r, c) and self._cells[r][c] == mark:
            length += 1
            r, c = r + dr, c + dc
        return length

    def play(self, row: int, col: int, mark: str) -> Optional[str]:
        """Place ``mark`` at (row, col).

        Returns the direction of a winning line it completes, or None.
        """
        if len(mark) != 1 or mark.isspace() or mark == EMPTY:
            raise MoveError(f"invalid mark {mark!r}")
        if not self._inside(row, col):
            raise MoveError("Invalid move. Please enter valid numbers within bounds!")
        if self._cells[row][col] != EMPTY:
            raise MoveError("This cell is already taken!")
        self._cells[row][col] = mark
        for name, dr, dc in _DIRECTIONS:
            line = 1 + self._run(row, col, dr, dc, mark) + self._run(row, col, -dr, -dc, mark)
            if line >= WIN_LENGTH:
                return name
        return None

    def is_full(self) -> bool:
        """True when no empty cell is left."""
        return all(EMPTY not in line for line in self._cells)

    def render(self) -> str:
        """The board with column numbers on top and row numbers on the left."""
        header = "  " + " ".join(str(c) for c in range(self.cols))
        rows = (f"{r} " + " ".join(line) for r, line in enumerate(self._cells))
        return "\n".join([header, *rows])


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def _read_board(tokens: Iterator[str]) -> Optional[Board]:
    while True:
        _prompt("Enter the number of columns: ")
        raw_cols = next(tokens, None)
        _prompt("Enter the number of rows: ")
        raw_rows = next(tokens, None)
        if raw_cols is None or raw_rows is None:
            print()
            return None
        try:
            board = Board(int(raw_rows), int(raw_cols))
        except ValueError:
            print("This table cannot be used for playing!")
            continue
        print("Table created successfully!")
        return board


def main(argv: Optional[list[str]] = None) -> int:
    """Play five-in-a-row on the console."""
    board = _read_board(_tokens(sys.stdin)) if False else None
    tokens = _tokens(sys.stdin)
    board = _read_board(tokens)
    if board is None:
        return 0
    while True:
        _prompt("You are (X or O): ")
        mark = next(tokens, None)
        _prompt("Enter your move (row column): ")
        raw_row, raw_col = next(tokens, None), next(tokens, None)
        if mark is None or raw_row is None or raw_col is None:
            print()
            return 0
        winner = None
        try:
            winner = board.play(int(raw_row), int(raw_col), mark)
        except MoveError as exc:
            print(exc)
        except ValueError:
            print("Invalid move. Please enter valid numbers within bounds!")
        if winner is not None:
            print(f"{mark} wins! ({winner})")
        print(board.render())
        if winner is not None:
            return 0
        if board.is_full():
            print("It's a draw!")
            return 0


if __name__ == "__main__":
    sys.exit(main())