# blocktris

The pieces of a falling-block puzzle game built around a small block
display: the rules of play on a 20×15 field, an in-memory 80×60 canvas of
coloured blocks, a 5×5 pixel font for titles, messages and a six-digit
score, and the encoding of instruction words for a block/sprite graphics
processor.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `blocktris.glyphs`: the 5×5 font. `glyph(char)` returns the bitmap of a
  letter, a digit or `":"` (letters are case-insensitive; an unknown
  character raises `ValueError`), and `digit(value)` the bitmap of a digit
  0–9.
- `blocktris.screen`: a `Canvas` of (B, G, R) blocks with three bits per
  component (`set_block`, `block`, `clear`), and drawing routines on top
  of it: `draw_square`, `draw_matrix` (cell values 0–7 are mapped through
  `PALETTE`, other values are skipped), `recolor`, `write_border`,
  `score_matrix`, `show_score`, `clear_screen`, and the prepared words
  `write_tetris`, `write_pts`, `write_game_over`, `write_pause` and
  `write_press_to_play`, each taking one colour per distinct letter.
- `blocktris.game`: the rules. `Shape` is a piece on the field
  (`rotated`, `moved`); `Game` holds the field, the current piece, the
  score and the drop interval, and provides `spawn`, `fits`, `move`
  (`"a"`, `"d"`, `"s"`, `"w"`), `rotate`, `lock`, `clear_lines`, `frame`,
  `should_drop` and `reset`. Each cleared line scores 100 points and
  shortens the drop interval; `game.over` turns true when a new piece
  does not fit.
- `blocktris.gpu_instructions`: the instruction words of the graphics
  processor (`build_data_a`, `sprite_instruction`, `polygon_instruction`,
  `background_color_instruction`, `background_block_instruction`, each
  returning a `(data_a, data_b)` pair), and sprite motion on a 640×480
  screen (`Direction`, `Sprite`, `advance_sprite`, `collision`).
- `blocktris.terminal`: text rendering of block matrices
  (`render_matrix`, `word_matrix`) and the `blocktris-banner` command.

## Example

```python
import random

from blocktris.game import Game
from blocktris.screen import Canvas, draw_matrix, show_score

game = Game(random.Random(7))
game.move("s")
game.move("d")

canvas = Canvas()
draw_matrix(canvas, game.frame(), 2, 1, 0, 2)
show_score(canvas, game.score)
```

## Command

```
blocktris-banner [TEXT]
```

prints `TEXT` (by default `TETRIS`) in the 5×5 font, followed by a border
of the same width, using `#` and `2` for the lit cells.

## What it does not do

There is no playable game loop and no command that starts a game: nothing
reads buttons or a tilt sensor, runs a timer, or shows the canvas on a
real display. The instruction words are only computed and returned, never
sent to any device. A program built on this package supplies the input,
the timing (passing elapsed microseconds to `Game.should_drop`) and the
output of the `Canvas`.