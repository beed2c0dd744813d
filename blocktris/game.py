"""Falling-block game state: the board, the pieces, movement, line clearing and score."""

from __future__ import annotations

import random
from collections.abc import Iterator
from dataclasses import dataclass, replace
from typing import Protocol, Sequence

LINES = 20
COLUMNS = 15
SHAPE_COLORS: tuple[int, ...] = (1, 2, 3, 4)
INITIAL_INTERVAL_US = 400_000
INITIAL_DECREMENT_US = 1000
LINE_POINTS = 100

Board = list[list[int]]


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...

    def choice(self, seq: Sequence[int]) -> int: ...


@dataclass(frozen=True)
class Shape:
    """A square piece matrix placed at (row, col) on the board."""

    cells: tuple[tuple[int, ...], ...]
    row: int = 0
    col: int = 0
    color: int = 1

    @property
    def width(self) -> int:
        return len(self.cells)

    def rotated(self) -> Shape:
        """Return the piece turned a quarter turn clockwise in place."""
        n = self.width
        cells = tuple(tuple(self.cells[n - 1 - j][i] for j in range(n)) for i in range(n))
        return replace(self, cells=cells)

    def moved(self, rows: int, cols: int) -> Shape:
        """Return the piece shifted by the given number of rows and columns."""
        return replace(self, row=self.row + rows, col=self.col + cols)

    def _painted(self, color: int) -> Shape:
        cells = tuple(tuple(color if cell == 1 else cell for cell in line) for line in self.cells)
        return replace(self, cells=cells, color=color)

    def _occupied(self) -> Iterator[tuple[int, int, int]]:
        for i, line in enumerate(self.cells):
            for j, value in enumerate(line):
                if value:
                    yield self.row + i, self.col + j, value


def _shape(*rows: tuple[int, ...]) -> Shape:
    return Shape(cells=tuple(rows))


SHAPES: tuple[Shape, ...] = (
    _shape((0, 1, 1), (1, 1, 0), (0, 0, 0)),  # S
    _shape((1, 1, 0), (0, 1, 1), (0, 0, 0)),  # Z
    _shape((0, 1, 0), (1, 1, 1), (0, 0, 0)),  # T
    _shape((0, 0, 1), (1, 1, 1), (0, 0, 0)),  # L
    _shape((1, 0, 0), (1, 1, 1), (0, 0, 0)),  # J
    _shape((1, 1), (1, 1)),  # O
    _shape((0, 0, 0, 0), (1, 1, 1, 1), (0, 0, 0, 0), (0, 0, 0, 0)),  # I
)

_MOVES = {"a": (0, -1), "d": (0, 1), "s": (1, 0)}


class Game:
    """One game on a 20 x 15 board with a falling piece and a score."""

    def __init__(self, rng: RandomSource | None = None) -> None:
        self.rng: RandomSource = rng if rng is not None else random.Random()
        # The drop interval speeds up with every cleared line and is kept across games.
        self.interval_us = INITIAL_INTERVAL_US
        self._decrement_us = INITIAL_DECREMENT_US
        self.board: Board = []
        self.score = 0
        self.over = False
        self.current: Shape = SHAPES[0]
        self.reset()

    def reset(self) -> None:
        """Empty the board, zero the score and bring in a new piece."""
        self.board = [[0] * COLUMNS for _ in range(LINES)]
        self.score = 0
        self.over = False
        self.spawn()

    def spawn(self) -> Shape:
        """Bring in a random piece at the top; the game is over if it does not fit."""
        base = SHAPES[self.rng.randrange(len(SHAPES))]
        col = self.rng.randrange(COLUMNS - base.width + 1)
        color = self.rng.choice(SHAPE_COLORS)
        self.current = replace(base, row=0, col=col)._painted(color)
        if not self.fits(self.current):
            self.over = True
        return self.current

    def fits(self, shape: Shape) -> bool:
        """Tell whether every cell of the piece lies on the board on an empty square."""
        for line, col, _ in shape._occupied():
            if not (0 <= col < COLUMNS and 0 <= line < LINES):
                return False
            if self.board[line][col]:
                return False
        return True

    def move(self, direction: str) -> bool:
        """Apply 'a' (left), 'd' (right), 's' (down) or 'w' (rotate).

        Returns whether the piece moved.  A blocked move down locks the piece,
        clears full lines and brings in the next piece.
        """
        if direction == "w":
            candidate = self.current.rotated()
        elif direction in _MOVES:
            candidate = self.current.moved(*_MOVES[direction])
        else:
            raise ValueError(f"unknown direction: {direction!r}")
        if self.fits(candidate):
            self.current = candidate
            return True
        if direction == "s":
            self.lock()
            self.clear_lines()
            self.spawn()
        return False

    def rotate(self) -> bool:
        """Turn the piece clockwise if the result fits; return whether it turned."""
        return self.move("w")

    def lock(self) -> None:
        """Write the current piece's cells into the board."""
        for line, col, value in self.current._occupied():
            self.board[line][col] = value

    def clear_lines(self) -> int:
        """Remove full lines, add 100 points for each and speed up the drop.

        Returns the number of lines removed.
        """
        count = 0
        for i, line in enumerate(self.board):
            if all(line):
                count += 1
                del self.board[i]
                self.board.insert(0, [0] * COLUMNS)
                self.interval_us -= self._decrement_us
                self._decrement_us -= 1
        self.score += LINE_POINTS * count
        return count

    def frame(self) -> Board:
        """Return a copy of the board with the falling piece drawn on it."""
        view = [list(line) for line in self.board]
        for line, col, value in self.current._occupied():
            if 0 <= line < LINES and 0 <= col < COLUMNS:
                view[line][col] = value
        return view

    def should_drop(self, elapsed_us: int) -> bool:
        """Tell whether enough time has passed for the piece to fall one line."""
        return elapsed_us > self.interval_us