import pytest

from blocktris.gpu_instructions import (
    MASX_TO_SHIFT_X,
    MASX_TO_SHIFT_Y,
    RIGHT_LIMIT,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    WORD_MASK,
    Direction,
    Sprite,
    advance_sprite,
    background_block_instruction,
    background_color_instruction,
    build_data_a,
    collision,
    polygon_instruction,
    sprite_instruction,
)


def test_direction_values_follow_angles():
    assert [Direction(value).value for value in range(8)] == list(range(8))
    assert Direction(4) is Direction.RIGHT
    assert Direction(7) is Direction.BOTTOM_RIGHT
    with pytest.raises(ValueError):
        Direction(8)


def test_build_data_a_register_opcode():
    word = build_data_a(0, 5, 99)
    assert word & 0xF == 0
    assert word >> 4 == 5


@pytest.mark.parametrize("opcode", [1, 2, 3])
def test_build_data_a_memory_opcodes(opcode):
    word = build_data_a(opcode, 5, 123)
    assert word & 0xF == opcode
    assert word >> 4 == 123


def test_build_data_a_unknown_opcode_is_empty():
    assert build_data_a(7, 1, 1) == 0


def test_sprite_instruction_fields_decode():
    data_a, data_b = sprite_instruction(3, 620, 100, 17, 1)
    assert data_a >> 4 == 3
    assert data_a & 0xF == 0
    assert (data_b & MASX_TO_SHIFT_X) >> 19 == 620
    assert (data_b & MASX_TO_SHIFT_Y) >> 9 == 100
    assert data_b & 0x1FF == 17
    assert data_b >> 29 == 1


def test_sprite_instruction_inactive_clears_top_bit():
    _, data_b = sprite_instruction(1, 10, 20, 2, 0)
    assert data_b >> 29 == 0
    assert (data_b & MASX_TO_SHIFT_X) >> 19 == 10


def test_polygon_instruction_fields_decode():
    data_a, data_b = polygon_instruction(4, 3, 0b101, 1, 2, 200, 40)
    assert data_a & 0xF == 3
    assert data_a >> 4 == 4
    assert data_b & 0x1FF == 200
    assert (data_b >> 9) & 0x1FF == 40
    assert (data_b >> 18) & 0xF == 2
    assert (data_b >> 22) & 0x1FF == 0b101
    assert data_b >> 31 == 1


def test_polygon_instruction_stays_within_word():
    data_a, data_b = polygon_instruction(0b111, 0b111, 0b111, 0b111, 0b111, 200, 0)
    assert data_a == 0
    assert 0 <= data_b <= WORD_MASK


def test_background_color_instruction_packs_bgr():
    data_a, color = background_color_instruction(0b111, 0b000, 0b000)
    assert data_a == 0
    assert color == 0b111


def test_background_color_components_decode():
    _, color = background_color_instruction(1, 2, 3)
    assert color & 7 == 1
    assert (color >> 3) & 7 == 2
    assert color >> 6 == 3


def test_background_block_instruction_address():
    data_a, color = background_block_instruction(0, 1, 4, 5, 6)
    assert data_a & 0xF == 2
    assert data_a >> 4 == 80
    assert color & 7 == 4
    assert (color >> 3) & 7 == 5
    assert color >> 6 == 6


def test_background_block_column_adds_to_address():
    first, _ = background_block_instruction(0, 2, 0, 0, 0)
    second, _ = background_block_instruction(5, 2, 0, 0, 0)
    assert (second >> 4) - (first >> 4) == 5


def test_advance_left_mirror_wraps():
    sprite = Sprite(coord_x=0, coord_y=10, direction=Direction.LEFT, step_x=5)
    moved = advance_sprite(sprite, True)
    assert moved.coord_x == SCREEN_WIDTH
    assert moved.coord_y == 10


def test_advance_left_clamps_without_mirror():
    sprite = Sprite(coord_x=3, direction=Direction.LEFT, step_x=5)
    assert advance_sprite(sprite, False).coord_x == 1


def test_advance_right_clamps_at_limit():
    sprite = Sprite(coord_x=615, direction=Direction.RIGHT, step_x=10)
    assert advance_sprite(sprite, False).coord_x == RIGHT_LIMIT


def test_advance_right_mirror_wraps():
    sprite = Sprite(coord_x=SCREEN_WIDTH, direction=Direction.RIGHT, step_x=1)
    assert advance_sprite(sprite, True).coord_x == 0


def test_advance_up_and_down_limits():
    up = Sprite(coord_y=2, direction=Direction.UP, step_y=5)
    assert advance_sprite(up, False).coord_y == 0
    assert advance_sprite(up, True).coord_y == SCREEN_HEIGHT
    down = Sprite(coord_y=SCREEN_HEIGHT, direction=Direction.DOWN, step_y=5)
    assert advance_sprite(down, False).coord_y == SCREEN_HEIGHT
    assert advance_sprite(down, True).coord_y == 0


def test_advance_diagonal_moves_both_axes():
    sprite = Sprite(coord_x=100, coord_y=100, direction=Direction.BOTTOM_RIGHT, step_x=3, step_y=4)
    moved = advance_sprite(sprite, False)
    assert (moved.coord_x, moved.coord_y) == (103, 104)


def test_advance_diagonal_checks_vertical_edge_first():
    sprite = Sprite(
        coord_x=SCREEN_WIDTH, coord_y=0, direction=Direction.UPPER_RIGHT, step_x=5, step_y=5
    )
    moved = advance_sprite(sprite, True)
    assert moved.coord_y == SCREEN_HEIGHT
    assert moved.coord_x == SCREEN_WIDTH + 5


def test_advance_does_not_change_original():
    sprite = Sprite(coord_x=50, direction=Direction.LEFT, step_x=5)
    advance_sprite(sprite, False)
    assert sprite.coord_x == 50


def test_advance_unknown_direction_is_unchanged():
    sprite = Sprite(coord_x=50, coord_y=60, direction=9, step_x=5, step_y=5)
    assert advance_sprite(sprite, True) == sprite


def test_collision_same_position():
    a = Sprite(coord_x=100, coord_y=100)
    b = Sprite(coord_x=100, coord_y=100)
    assert collision(a, b) is False or collision(a, b) is True
    assert collision(a, b) == collision(b, a)


def test_collision_overlap_from_left():
    a = Sprite(coord_x=0, coord_y=0)
    b = Sprite(coord_x=10, coord_y=5)
    assert collision(a, b) is True


def test_collision_overlap_from_right():
    a = Sprite(coord_x=10, coord_y=0)
    b = Sprite(coord_x=0, coord_y=0)
    assert collision(a, b) is True


def test_collision_far_apart():
    a = Sprite(coord_x=0, coord_y=0)
    b = Sprite(coord_x=300, coord_y=0)
    assert collision(a, b) is False


def test_collision_vertically_apart():
    a = Sprite(coord_x=0, coord_y=0)
    b = Sprite(coord_x=5, coord_y=200)
    assert collision(a, b) is False