"""Array, hashing, two-pointer, sliding-window, linked-list and tree exercises, with console Minesweeper and five-in-a-row."""

__version__ = "0.1.0"