import io
import random

import pytest

from dsa_drills.minesweeper import Difficulty, Minesweeper, main


class FixedCells:
    """Stand-in random source that places mines at chosen cell indices."""

    def __init__(self, cells):
        self.cells = list(cells)

    def sample(self, population, k):
        return self.cells[:k]


def corner_game():
    return Minesweeper(3, 3, 1, FixedCells([0]))


@pytest.mark.parametrize(
    "level, expected",
    [
        (Difficulty.EASY, (9, 9, 10)),
        (Difficulty.NORMAL, (16, 16, 40)),
        (Difficulty.HARD, (24, 24, 99)),
    ],
)
def test_difficulty_presets_match_menu(level, expected):
    rows, cols, mines = expected
    game = Minesweeper(level.rows, level.cols, level.mines, random.Random(1))
    lines = game.render().splitlines()
    assert len(lines) == rows
    assert all(len(line.split()) == cols for line in lines)
    assert len(game.mines) == mines


@pytest.mark.parametrize("level", list(Difficulty))
def test_mines_are_distinct_and_on_board(level):
    game = Minesweeper(level.rows, level.cols, level.mines, random.Random(7))
    assert len(game.mines) == level.mines
    assert all(0 <= r < level.rows and 0 <= c < level.cols for r, c in game.mines)


def test_too_many_mines_rejected():
    with pytest.raises(ValueError):
        Minesweeper(2, 2, 5)


def test_fresh_board_is_hidden():
    game = corner_game()
    assert game.render() == "\n".join(["_ _ _"] * 3)
    assert not game.is_won()


def test_adjacent_mine_counts():
    game = corner_game()
    assert game.adjacent_mines(1, 1) == 1
    assert game.adjacent_mines(0, 1) == 1
    assert game.adjacent_mines(2, 2) == 0


def test_reveal_zero_floods_and_wins():
    game = corner_game()
    assert game.reveal(2, 2) is True
    assert game.render() == "_ 1 0\n1 1 0\n0 0 0"
    assert game.is_won()
    assert not game.lost


def test_reveal_numbered_cell_opens_only_itself():
    game = corner_game()
    game.reveal(1, 1)
    lines = game.render().splitlines()
    assert sum(line.count("_") for line in lines) == 8
    assert not game.is_won()


def test_reveal_mine_loses():
    game = corner_game()
    assert game.reveal(0, 0) is False
    assert game.lost
    assert not game.is_won()


@pytest.mark.parametrize("pos", [(-1, 0), (0, 3), (3, 0)])
def test_reveal_off_board(pos):
    with pytest.raises(IndexError):
        corner_game().reveal(*pos)


def test_main_invalid_choice_then_exit(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("7\n4\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Invalid choice, please try again." in out
    assert "Goodbye!" in out


def test_main_plays_until_game_ends(monkeypatch, capsys):
    moves = "\n".join(f"{r} {c}" for r in range(9) for c in range(9))
    monkeypatch.setattr("sys.stdin", io.StringIO(f"1\n99 99\n{moves}\nn\n"))
    assert main(["--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "Invalid position! Try again." in out
    assert ("Game over!" in out) or ("You win!" in out)