"""Block-based screen drawing: squares, matrices, words and the score.

The screen is a grid of 60 lines by 80 columns of background blocks, each
holding a (B, G, R) colour with three bits per component.  Matrices of small
integers are drawn onto it through a fixed palette, where 0 is black.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from blocktris.glyphs import Glyph, digit, glyph

WIDTH = 80
HEIGHT = 60
MAX_COMPONENT = 7

Color = tuple[int, int, int]
Matrix = list[list[int]]

BLACK: Color = (0, 0, 0)

# Cell value -> (B, G, R); values outside the palette are not drawn.
PALETTE: dict[int, Color] = {
    0: (0, 0, 0),
    1: (0, 0, 7),
    2: (0, 7, 0),
    3: (7, 0, 0),
    4: (7, 7, 0),
    5: (0, 7, 7),
    6: (7, 0, 7),
    7: (7, 7, 7),
}

_GLYPH_SIZE = 5
_GLYPH_STEP = 6
_SCORE_DIGITS = 6
_SCORE_WIDTH = 36


class Canvas:
    """An in-memory grid of background blocks."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.width = width
        self.height = height
        self._blocks: list[list[Color]] = [[BLACK] * width for _ in range(height)]

    def _check_position(self, line: int, col: int) -> None:
        if not (0 <= line < self.height and 0 <= col < self.width):
            raise IndexError(f"block ({line}, {col}) is outside the screen")

    def set_block(self, line: int, col: int, b: int, g: int, r: int) -> None:
        """Paint one background block with the given colour components."""
        self._check_position(line, col)
        for component in (b, g, r):
            if not 0 <= component <= MAX_COMPONENT:
                raise ValueError(f"colour component out of range: {component}")
        self._blocks[line][col] = (b, g, r)

    def block(self, line: int, col: int) -> Color:
        """Return the (B, G, R) colour of one block."""
        self._check_position(line, col)
        return self._blocks[line][col]

    def clear(self) -> None:
        """Paint every block black."""
        for row in self._blocks:
            row[:] = [BLACK] * self.width


def draw_square(canvas: Canvas, line: int, col: int, color: Color, size: int) -> None:
    """Fill a size x size square of blocks whose top-left corner is (line, col)."""
    b, g, r = color
    for i in range(size):
        for j in range(size):
            canvas.set_block(line + i, col + j, b, g, r)


def draw_matrix(
    canvas: Canvas,
    matrix: Iterable[Sequence[int]],
    spacing: int,
    off_x: int,
    off_y: int,
    size: int,
) -> None:
    """Draw each palette cell of a matrix as a square, spaced `spacing` blocks apart."""
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            color = PALETTE.get(value)
            if color is None:
                continue
            draw_square(canvas, i * spacing + off_y, j * spacing + off_x, color, size)


def recolor(matrix: Iterable[Sequence[int]], color: int) -> Matrix:
    """Return a copy of the matrix with every 1 replaced by `color`."""
    return [[color if cell == 1 else cell for cell in row] for row in matrix]


def write_border(matrix: Iterable[Sequence[int]], color: int) -> Matrix:
    """Return a copy with the last row and the first and last columns set to `color`."""
    rows = [list(row) for row in matrix]
    last_line = len(rows) - 1
    for i, row in enumerate(rows):
        last_col = len(row) - 1
        for j in range(len(row)):
            if i == last_line or j == 0 or j == last_col:
                row[j] = color
    return rows


def _place(target: Matrix, source: Glyph | Matrix, start_col: int) -> None:
    for i, row in enumerate(source):
        target[i][start_col : start_col + len(row)] = row


def _compose(word: str, colors: dict[str, int], width: int) -> Matrix:
    matrix = [[0] * width for _ in range(_GLYPH_SIZE)]
    for k, char in enumerate(word):
        if char == " ":
            continue
        start = k * _GLYPH_STEP
        if start + _GLYPH_SIZE > width:
            raise ValueError(f"word {word!r} does not fit in {width} columns")
        _place(matrix, recolor(glyph(char), colors[char]), start)
    return matrix


def _letter_colors(letters: str, colors: Sequence[int]) -> dict[str, int]:
    if len(colors) != len(letters):
        raise ValueError(f"expected {len(letters)} colours for {letters!r}, got {len(colors)}")
    return dict(zip(letters, colors))


def score_matrix(score: int) -> Matrix:
    """Return the 5x36 matrix showing the last six digits of a score, right-aligned.

    A score of zero is shown as six zeros; otherwise leading positions are blank.
    """
    if isinstance(score, bool) or not isinstance(score, int):
        raise TypeError(f"score must be an int, got {type(score).__name__}")
    if score < 0:
        raise ValueError(f"score must not be negative: {score}")
    digits = str(score)[-_SCORE_DIGITS:] if score else "0" * _SCORE_DIGITS
    matrix = [[0] * _SCORE_WIDTH for _ in range(_GLYPH_SIZE)]
    last_start = (_SCORE_DIGITS - 1) * _GLYPH_STEP
    for position, char in enumerate(reversed(digits)):
        _place(matrix, digit(int(char)), last_start - position * _GLYPH_STEP)
    return matrix


def show_score(canvas: Canvas, score: int) -> Matrix:
    """Draw the score at its fixed place on screen and return the drawn matrix."""
    matrix = score_matrix(score)
    draw_matrix(canvas, matrix, 1, 30, 54, 1)
    return matrix


def clear_screen(canvas: Canvas) -> None:
    """Paint every block of the 60x80 screen black."""
    for line in range(HEIGHT):
        for col in range(WIDTH):
            canvas.set_block(line, col, 0, 0, 0)


def write_tetris(canvas: Canvas, colors: Sequence[int], pos_x: int, pos_y: int, size: int) -> None:
    """Draw "TETRIS"; colours are given for T, E, R, I, S."""
    matrix = _compose("TETRIS", _letter_colors("TERIS", colors), 36)
    draw_matrix(canvas, matrix, 2, pos_x, pos_y, size)


def write_pts(canvas: Canvas, colors: Sequence[int], pos_x: int, pos_y: int, size: int) -> None:
    """Draw "PTS:"; colours are given for T, S, P and the colon."""
    matrix = _compose("PTS:", _letter_colors("TSP:", colors), 26)
    draw_matrix(canvas, matrix, 1, pos_x, pos_y, size)


def write_game_over(canvas: Canvas, colors: Sequence[int], pos_x: int, pos_y: int, size: int) -> None:
    """Draw "GAME OVER"; colours are given for G, A, M, E, O, V, R."""
    matrix = _compose("GAME OVER", _letter_colors("GAMEOVR", colors), 60)
    draw_matrix(canvas, matrix, 1, pos_x, pos_y, size)


def write_pause(canvas: Canvas, colors: Sequence[int], pos_x: int, pos_y: int, size: int) -> None:
    """Draw "PAUSE"; colours are given for P, A, U, S, E."""
    matrix = _compose("PAUSE", _letter_colors("PAUSE", colors), 36)
    draw_matrix(canvas, matrix, 2, pos_x, pos_y, size)


def write_press_to_play(
    canvas: Canvas, colors: Sequence[int], pos_x: int, pos_y: int, size: int
) -> None:
    """Draw "PRESSIONE PB / PARA JOGAR" on two lines.

    Colours are given for P, R, E, S, I, O, N, B, A, J, G.
    """
    by_letter = _letter_colors("PRESIONBAJG", colors)
    draw_matrix(canvas, _compose("PRESSIONE", by_letter, 60), 1, pos_x, pos_y, size)
    draw_matrix(canvas, _compose("PB", by_letter, 16), 1, pos_x + 60, pos_y, size)
    draw_matrix(canvas, _compose("PARA", by_letter, 30), 1, pos_x + 5, pos_y + 6, size)
    draw_matrix(canvas, _compose("JOGAR", by_letter, 31), 1, pos_x + 36, pos_y + 6, size)