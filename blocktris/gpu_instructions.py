"""Instruction words for the block/sprite graphics processor, and sprite motion.

Every instruction is a pair of 32-bit words: ``data_a`` carries the opcode
in its low four bits together with a register number or memory address,
and ``data_b`` carries the operands.  Sprite helpers move sprites across a
640 x 480 screen and test them for overlap.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum

WORD_MASK = 0xFFFFFFFF

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
BACKGROUND_COLUMNS = 80
RIGHT_LIMIT = 620
SPRITE_SIZE = 15

MASX_TO_SHIFT_X = 0b00011111111110000000000000000000
MASX_TO_SHIFT_Y = 0b00000000000001111111111000000000

OPCODE_REGISTER = 0
OPCODE_BACKGROUND_BLOCK = 2

Instruction = tuple[int, int]


class Direction(IntEnum):
    """Movement angle of a sprite."""

    LEFT = 0
    UPPER_RIGHT = 1
    UP = 2
    UPPER_LEFT = 3
    RIGHT = 4
    BOTTOM_LEFT = 5
    DOWN = 6
    BOTTOM_RIGHT = 7


@dataclass(frozen=True)
class Sprite:
    """A movable sprite: position, direction, animation offset and register."""

    coord_x: int = 0
    coord_y: int = 0
    direction: int = Direction.LEFT
    offset: int = 0
    data_register: int = 0
    step_x: int = 0
    step_y: int = 0
    active: bool = True
    collision: bool = False


def build_data_a(opcode: int, reg: int, memory_address: int) -> int:
    """Build the first instruction word.

    Opcode 0 addresses a register; opcodes 1 to 3 address memory.  Any
    other opcode yields an empty word.
    """
    if opcode == 0:
        data = (reg << 4) | opcode
    elif opcode in (1, 2, 3):
        data = (memory_address << 4) | opcode
    else:
        data = 0
    return data & WORD_MASK


def _pack(*fields: tuple[int, int]) -> int:
    """OR fields in, shifting the word left by each following field's width."""
    data = 0
    for width, value in fields:
        data = (data << width) | value
    return data & WORD_MASK


def sprite_instruction(reg: int, x: int, y: int, offset: int, active: int) -> Instruction:
    """Instruction that places sprite `offset` at (x, y) in register `reg`."""
    data_a = build_data_a(OPCODE_REGISTER, reg, 0)
    data_b = _pack((0, int(active)), (10, x), (10, y), (9, offset))
    return data_a, data_b


def polygon_instruction(
    address: int, opcode: int, color: int, form: int, mult: int, ref_x: int, ref_y: int
) -> Instruction:
    """Instruction that defines a polygon at a memory address."""
    data_a = build_data_a(opcode, 0, address)
    data_b = _pack((0, form), (9, color), (4, mult), (9, ref_y), (9, ref_x))
    return data_a, data_b


def _color_word(r: int, g: int, b: int) -> int:
    return _pack((0, b), (3, g), (3, r))


def background_color_instruction(r: int, g: int, b: int) -> Instruction:
    """Instruction that sets the background colour."""
    return build_data_a(OPCODE_REGISTER, 0, 0), _color_word(r, g, b)


def background_block_instruction(column: int, line: int, r: int, g: int, b: int) -> Instruction:
    """Instruction that paints one background block of the 80-column grid."""
    address = line * BACKGROUND_COLUMNS + column
    return build_data_a(OPCODE_BACKGROUND_BLOCK, 0, address), _color_word(r, g, b)


def advance_sprite(sprite: Sprite, mirror: bool) -> Sprite:
    """Return the sprite moved one step along its direction.

    With `mirror` the sprite wraps to the opposite edge when it leaves the
    screen; without it the sprite is held at the edge.  A sprite with an
    unknown direction is returned unchanged.
    """
    x, y = sprite.coord_x, sprite.coord_y
    sx, sy = sprite.step_x, sprite.step_y
    direction = sprite.direction

    if direction == Direction.LEFT:
        x -= sx
        if x < 1:
            x = SCREEN_WIDTH if mirror else 1
    elif direction == Direction.UPPER_RIGHT:
        x += sx
        y -= sy
        if y < 0:
            y = SCREEN_HEIGHT if mirror else 0
        elif x > SCREEN_WIDTH:
            x = 0 if mirror else SCREEN_WIDTH
    elif direction == Direction.UP:
        y -= sy
        if y < 0:
            y = SCREEN_HEIGHT if mirror else 0
    elif direction == Direction.UPPER_LEFT:
        x -= sx
        y -= sy
        if y < 0:
            y = SCREEN_HEIGHT if mirror else 0
        elif x < 1:
            x = SCREEN_WIDTH if mirror else 1
    elif direction == Direction.RIGHT:
        x += sx
        if mirror:
            if x > SCREEN_WIDTH:
                x = 0
        elif x > RIGHT_LIMIT:
            x = RIGHT_LIMIT
    elif direction == Direction.BOTTOM_LEFT:
        x -= sx
        y += sy
        if y > SCREEN_HEIGHT:
            y = 0 if mirror else SCREEN_HEIGHT
        elif x < 1:
            x = SCREEN_WIDTH if mirror else 1
    elif direction == Direction.DOWN:
        y += sy
        if y > SCREEN_HEIGHT:
            y = 0 if mirror else SCREEN_HEIGHT
    elif direction == Direction.BOTTOM_RIGHT:
        x += sx
        y += sy
        if y > SCREEN_HEIGHT:
            y = 0 if mirror else SCREEN_HEIGHT
        elif x > SCREEN_WIDTH:
            x = 0 if mirror else SCREEN_WIDTH
    else:
        return sprite
    return replace(sprite, coord_x=x, coord_y=y)


def collision(first: Sprite, second: Sprite) -> bool:
    """Tell whether two 15-pixel sprites overlap."""
    h = SPRITE_SIZE
    y_face_1 = first.coord_y + h
    y_face_2 = second.coord_y + h
    x_face_1 = first.coord_x + h
    x_face_2 = second.coord_x + h
    if y_face_1 > second.coord_y and first.coord_y < y_face_2:
        if second.coord_x < x_face_1 < x_face_2:
            return True
        if x_face_1 > x_face_2 and x_face_2 > first.coord_x:
            return True
    return False