"""A console Minesweeper game with flood-fill reveal of empty areas."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterator
from enum import Enum
from typing import Optional, Protocol

HIDDEN = "_"


class _Sampler(Protocol):
    def sample(self, population, k): ...


class Difficulty(Enum):
    """Preset board sizes and mine counts."""

    EASY = (9, 9, 10)
    NORMAL = (16, 16, 40)
    HARD = (24, 24, 99)

    def __init__(self, rows: int, cols: int, mines: int) -> None:
        self.rows = rows
        self.cols = cols
        self.mines = mines


class Minesweeper:
    """A board of hidden cells, some of which hold mines."""

    def __init__(
        self, rows: int, cols: int, mines: int, rng: Optional[_Sampler] = None
    ) -> None:
        if rows < 1 or cols < 1:
            raise ValueError("board needs at least one row and one column")
        if not 0 <= mines <= rows * cols:
            raise ValueError(f"cannot place {mines} mines on a {rows}x{cols} board")
        self.rows = rows
        self.cols = cols
        sampler = rng if rng is not None else random.Random()
        cells = sampler.sample(range(rows * cols), mines)
        self._mines = frozenset(divmod(cell, cols) for cell in cells)
        self._grid = [[HIDDEN] * cols for _ in range(rows)]
        self.lost = False

    @property
    def mines(self) -> frozenset[tuple[int, int]]:
        """Positions of every mine as (row, col) pairs."""
        return self._mines

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"position ({row}, {col}) is off the board")

    def _neighbours(self, row: int, col: int) -> Iterator[tuple[int, int]]:
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == dc == 0:
                    continue
                r, c = row + dr, col + dc
                if 0 <= r < self.rows and 0 <= c < self.cols:
                    yield r, c

    def adjacent_mines(self, row: int, col: int) -> int:
        """Number of mines in the up to eight cells around (row, col)."""
        self._check(row, col)
        return sum(pos in self._mines for pos in self._neighbours(row, col))

    def reveal(self, row: int, col: int) -> bool:
        """Open a cell; returns False when it held a mine, which loses the game.

        Cells with no neighbouring mines open their hidden neighbours too.
        """
        self._check(row, col)
        if (row, col) in self._mines:
            self.lost = True
            return False
        stack = [(row, col)]
        while stack:
            r, c = stack.pop()
            count = self.adjacent_mines(r, c)
            self._grid[r][c] = str(count)
            if count == 0:
                stack.extend(
                    (nr, nc)
                    for nr, nc in self._neighbours(r, c)
                    if self._grid[nr][nc] == HIDDEN
                )
        return True

    def is_won(self) -> bool:
        """True once every cell without a mine has been opened."""
        if self.lost:
            return False
        return all(
            cell != HIDDEN or (r, c) in self._mines
            for r, line in enumerate(self._grid)
            for c, cell in enumerate(line)
        )

    def render(self) -> str:
        """The board as text, one row per line, cells separated by spaces."""
        return "\n".join(" ".join(line) for line in self._grid)


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def _play(game: Minesweeper, tokens: Iterator[str]) -> bool:
    """Run one game; returns False if input ran out."""
    while True:
        _prompt("Enter your move (row, col): ")
        raw_row, raw_col = next(tokens, None), next(tokens, None)
        if raw_row is None or raw_col is None:
            print()
            return False
        try:
            row, col = int(raw_row), int(raw_col)
            safe = game.reveal(row, col)
        except (ValueError, IndexError):
            print("Invalid position! Try again.")
            continue
        if not safe:
            print("Boooom! You lose.")
        print(game.render())
        if game.lost:
            print("Game over!")
            return True
        if game.is_won():
            print("You win!")
            return True


def main(argv: Optional[list[str]] = None) -> int:
    """Play Minesweeper on the console."""
    parser = argparse.ArgumentParser(description="Play Minesweeper.")
    parser.add_argument("--seed", type=int, default=None, help="seed for mine placement")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    tokens = _tokens(sys.stdin)
    choices = {"1": Difficulty.EASY, "2": Difficulty.NORMAL, "3": Difficulty.HARD}

    while True:
        print("Welcome to Minesweeper game!")
        print("Choose your option")
        print("1. Easy")
        print("2. Normal")
        print("3. Hard")
        print("4. Exit")
        while True:
            choice = next(tokens, None)
            if choice is None:
                return 0
            if choice == "4":
                print("Goodbye!")
                return 0
            if choice in choices:
                level = choices[choice]
                break
            print("Invalid choice, please try again.")
        game = Minesweeper(level.rows, level.cols, level.mines, rng)
        if not _play(game, tokens):
            return 0
        _prompt("Do you want to play again? (y/n): ")
        answer = next(tokens, None)
        if answer is None or answer[0] not in "yY":
            return 0


if __name__ == "__main__":
    sys.exit(main())