"""Text rendering of block matrices, for viewing words and borders in a terminal."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence

from blocktris.glyphs import glyph
from blocktris.screen import write_border

_GLYPH_SIZE = 5
_GLYPH_STEP = 6
_BORDER_COLOR = 2

_CELL_TEXT = {1: "#", 2: "2"}


def render_matrix(matrix: Iterable[Sequence[int]]) -> str:
    """Render a matrix as text: '#' for 1, '2' for 2, a space otherwise.

    Every row, the last one included, ends with a newline.
    """
    return "".join(
        "".join(_CELL_TEXT.get(cell, " ") for cell in row) + "\n" for row in matrix
    )


def word_matrix(text: str, width: int | None = None) -> list[list[int]]:
    """Lay out the glyphs of `text` side by side, six columns apart, in a 5-row matrix.

    Spaces leave their place blank.  The width defaults to six columns per
    character; a word that does not fit in the given width raises ValueError.
    """
    if width is None:
        width = len(text) * _GLYPH_STEP
    if width < 0:
        raise ValueError(f"width must not be negative: {width}")
    matrix = [[0] * width for _ in range(_GLYPH_SIZE)]
    for position, char in enumerate(text):
        if char == " ":
            continue
        start = position * _GLYPH_STEP
        if start + _GLYPH_SIZE > width:
            raise ValueError(f"text {text!r} does not fit in {width} columns")
        for row, cells in zip(matrix, glyph(char)):
            row[start : start + _GLYPH_SIZE] = cells
    return matrix


def main(argv: Sequence[str] | None = None) -> int:
    """Print a word and a border of the same width below it."""
    parser = argparse.ArgumentParser(
        prog="blocktris-terminal",
        description="Print a word in block letters followed by a border.",
    )
    parser.add_argument("text", nargs="?", default="TETRIS", help="word to print")
    args = parser.parse_args(argv)

    try:
        word = word_matrix(args.text)
    except ValueError as exc:
        parser.error(str(exc))
    width = len(word[0]) if word and word[0] else 0
    border = write_border([[0] * width for _ in range(_GLYPH_SIZE + 1)], _BORDER_COLOR)

    print(render_matrix(word), end="")
    print(render_matrix(border), end="")
    return 0